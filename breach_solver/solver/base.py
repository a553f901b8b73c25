"""
Base Strategy Module - Abstract base class for solving strategies.
"""

import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional

from .chain import advance, build
from .context import SolveContext
from .errors import InfeasibleConfigurationError
from .frontier import consider
from .matcher import matched_targets
from .position import Position
from .solution import Solution, SolutionMetrics, SolveResult

logger = logging.getLogger(__name__)


@dataclass
class SeedOutcome:
    """
    Result of enumerating the paths of one seed column.

    Attributes:
        column: Seed column searched
        frontier: Frontier after every candidate of this seed was considered
        paths_explored: Complete paths rendered and matched
        candidates_considered: Paths that matched at least one target
        infeasible: True if no path of the buffer size starts at this seed
        stop_reason: Set when the context stopped the search early
    """
    column: int
    frontier: List[Solution] = field(default_factory=list)
    paths_explored: int = 0
    candidates_considered: int = 0
    infeasible: bool = False
    stop_reason: Optional[str] = None


class SolverStrategy(ABC):
    """
    Abstract base class for all solving strategies.

    Subclasses must implement the solve() method and define
    name and description class attributes.

    Attributes:
        name: Short identifier for the strategy
        description: Human-readable description for the CLI
        timeout_sec: Default timeout for this strategy
    """
    name: str = "base"
    description: str = "Base strategy"
    timeout_sec: float = 20.0

    @abstractmethod
    def solve(self, context: SolveContext) -> SolveResult:
        """
        Compute the solution frontier for the context's grid.

        Must check context.stop_reason() once per path and return the
        partial frontier if it is set.

        Args:
            context: Solve context with grid, buffer size, cancellation

        Returns:
            SolveResult with solutions and metrics

        Raises:
            InfeasibleConfigurationError: If the buffer size cannot be reached
        """
        pass

    def validate(self, context: SolveContext) -> None:
        """
        Reject inputs that can never produce a solve.

        Raises:
            ValueError: If buffer size is not positive or there are no targets
            InfeasibleConfigurationError: If buffer size exceeds the grid cells
        """
        grid = context.grid
        if context.buffer_size < 1:
            raise ValueError(f"Buffer size must be positive, got {context.buffer_size}")
        if grid.target_count == 0:
            raise ValueError("Target list is empty")
        if context.buffer_size > grid.size * grid.size:
            raise InfeasibleConfigurationError(
                f"Buffer size {context.buffer_size} exceeds the "
                f"{grid.size * grid.size} cells of a {grid.size}x{grid.size} grid"
            )

    def search_seed(
        self,
        context: SolveContext,
        column: int,
        frontier: Optional[List[Solution]] = None
    ) -> SeedOutcome:
        """
        Enumerate every path from seed (column, 0) into the frontier.

        Stops early once the frontier holds a solution covering every
        target, or when the context asks to stop.

        Args:
            context: Solve context
            column: Seed column in the top row
            frontier: Frontier to extend (not modified)

        Returns:
            SeedOutcome with the updated frontier and counters
        """
        grid = context.grid
        size = grid.size
        outcome = SeedOutcome(column=column, frontier=list(frontier or []))

        path = build(Position(column=column, row=0), size, context.buffer_size)
        if path is None:
            outcome.infeasible = True
            return outcome

        while path is not None:
            reason = context.stop_reason()
            if reason is not None:
                outcome.stop_reason = reason
                break
            context.record_step()
            outcome.paths_explored += 1

            matched = matched_targets(grid.render(path), grid.targets)
            if matched:
                outcome.candidates_considered += 1
                outcome.frontier = consider(Solution(path=path, targets=matched), outcome.frontier)
                if any(s.covers_all(grid.target_count) for s in outcome.frontier):
                    logger.debug(f"Seed {column}: all targets covered after {outcome.paths_explored} paths")
                    break

            path = advance(path, size)

        return outcome

    def handle_infeasible_seed(self, context: SolveContext, column: int) -> None:
        """
        Apply the infeasible-seed policy.

        Raises:
            InfeasibleConfigurationError: Unless context.skip_infeasible_seeds is set
        """
        if not context.skip_infeasible_seeds:
            raise InfeasibleConfigurationError(
                f"Seed column {column} cannot support a path of length {context.buffer_size}",
                column=column
            )
        logger.warning(f"Seed column {column} cannot reach buffer size {context.buffer_size}, skipping")

    def _build_result(
        self,
        context: SolveContext,
        frontier: List[Solution],
        metrics: SolutionMetrics,
        start_time: float,
        stop_reason: Optional[str]
    ) -> SolveResult:
        """Build SolveResult object from computation results."""
        metrics.computation_time_ms = (time.perf_counter() - start_time) * 1000
        metrics.strategy_name = self.name

        return SolveResult(
            solutions=frontier,
            target_count=context.grid.target_count,
            was_cancelled=stop_reason is not None,
            stop_reason=stop_reason,
            metrics=metrics
        )

    def _check_cancelled(self, context: SolveContext) -> bool:
        """
        Convenience method to check cancellation.

        Args:
            context: Solve context

        Returns:
            True if strategy should stop
        """
        return context.is_cancelled()
