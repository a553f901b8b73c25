"""
Solution Manager Module - State machine from noisy readings to a solved puzzle.

The recogniser reports the grid and the target list once per frame.
The manager feeds every reading through the known-misreading
corrections into a TaskTracker, waits until both the grid and the
targets have settled, then runs the selected strategy exactly once and
keeps the result until reset.

State Flow:
    WAITING_STABLE -> COMPUTING_SOLUTION -> SOLVED
          ^                  |
          |                  +-> FAILED (infeasible or invalid buffer size)
          |___________ reset() ___________|

For the core solving logic, see the breach_solver.solver package.
"""

from enum import Enum, auto
from typing import List, Mapping, Optional, Sequence, Tuple
import logging
import time

from breach_solver.solver import (
    Grid, Solution, SolveResult, SolverStrategy, SolveContext,
    create_strategy, get_default_strategy_name
)
from breach_solver.tracking import TaskTracker, TextCorrector, DEFAULT_CONFIDENCE_THRESHOLD

logger = logging.getLogger(__name__)


__all__ = [
    "SolutionState",
    "SolutionManager",
]


class SolutionState(Enum):
    """
    State machine states for the solve flow.

    States:
        WAITING_STABLE: Collecting readings until grid and targets settle
        COMPUTING_SOLUTION: Running the strategy on the settled puzzle
        SOLVED: Result cached, further readings ignored
        FAILED: Buffer size infeasible for the settled grid
    """
    WAITING_STABLE = auto()
    COMPUTING_SOLUTION = auto()
    SOLVED = auto()
    FAILED = auto()


class SolutionManager:
    """
    Drives one puzzle from readings to a cached solution frontier.

    Example:
        manager = SolutionManager(buffer_size=6, confidence_threshold=3)
        for frame in frames:
            manager.update_grid(frame.size, frame.cells)
            if manager.update_targets(frame.target_lines):
                break
        print(manager.best_solution)
    """

    def __init__(self, buffer_size: int = 8, strategy_name: Optional[str] = None,
                 confidence_threshold: int = DEFAULT_CONFIDENCE_THRESHOLD,
                 timeout_sec: Optional[float] = None, step_budget: int = 0,
                 skip_infeasible_seeds: bool = False,
                 corrector: Optional[TextCorrector] = None):
        """
        Initialize solution manager.

        Args:
            buffer_size: Path length required by the puzzle
            strategy_name: Name of solving strategy (default strategy if None)
            confidence_threshold: Identical readings required before trusting a value
            timeout_sec: Solve timeout (strategy default if None)
            step_budget: Maximum paths examined per solve (0 = unlimited)
            skip_infeasible_seeds: Skip infeasible seed columns instead of failing
            corrector: Known-misreading corrections (default table if None)
        """
        self.buffer_size = buffer_size
        self.timeout_sec = timeout_sec
        self.step_budget = step_budget
        self.skip_infeasible_seeds = skip_infeasible_seeds

        # Strategy
        self._strategy: SolverStrategy = create_strategy(strategy_name or get_default_strategy_name())

        # Reading stabilisation
        self._tracker = TaskTracker(confidence_threshold)
        self._corrector = corrector or TextCorrector()

        # State machine
        self._state = SolutionState.WAITING_STABLE
        self._context: Optional[SolveContext] = None
        self._grid: Optional[Grid] = None
        self._result: Optional[SolveResult] = None
        self._error: Optional[str] = None

    @property
    def strategy(self) -> SolverStrategy:
        """Get current solving strategy."""
        return self._strategy

    @property
    def strategy_name(self) -> str:
        """Get current strategy name."""
        return self._strategy.name

    def set_strategy(self, strategy_name: str) -> None:
        """
        Change the solving strategy.

        Takes effect on the next solve.

        Args:
            strategy_name: Name of strategy to use
        """
        self._strategy = create_strategy(strategy_name)
        logger.info(f"Strategy changed to: {strategy_name}")

    @property
    def state(self) -> SolutionState:
        """Get current state machine state."""
        return self._state

    @property
    def tracker(self) -> TaskTracker:
        """Get the reading tracker."""
        return self._tracker

    @property
    def grid(self) -> Optional[Grid]:
        """Settled puzzle, once both grid and targets are known."""
        return self._grid

    @property
    def result(self) -> Optional[SolveResult]:
        """Cached solve result."""
        return self._result

    @property
    def solutions(self) -> List[Solution]:
        """Solutions of the cached result (empty before solving)."""
        if self._result is None:
            return []
        return self._result.solutions

    @property
    def best_solution(self) -> Optional[Solution]:
        """Solution matching the most targets, if solved."""
        if self._result is None:
            return None
        return self._result.best_solution

    @property
    def error(self) -> Optional[str]:
        """Failure message when in FAILED state."""
        return self._error

    @property
    def is_done(self) -> bool:
        """True once solved or failed."""
        return self._state in (SolutionState.SOLVED, SolutionState.FAILED)

    def update_grid(self, size: int, cells: Mapping[Tuple[int, int], str]) -> bool:
        """
        Feed one frame of grid readings.

        Args:
            size: Grid side length detected in this frame
            cells: (row, col) -> token read in this frame

        Returns:
            True if a solve result is available
        """
        if self.is_done:
            return self._state == SolutionState.SOLVED

        corrected = {key: self._corrector.apply(token.upper()) for key, token in cells.items()}
        self._tracker.log_grid(size, corrected)
        return self._process()

    def update_targets(self, lines: Sequence[str]) -> bool:
        """
        Feed one frame of target readings.

        Args:
            lines: One string per target, tokens separated by whitespace

        Returns:
            True if a solve result is available
        """
        if self.is_done:
            return self._state == SolutionState.SOLVED

        corrected = [self._corrector.correct_all(line.upper()) for line in lines]
        self._tracker.log_targets(corrected)
        return self._process()

    def _process(self) -> bool:
        """Advance the state machine after new readings."""
        if self._state == SolutionState.WAITING_STABLE:
            return self._handle_waiting_stable()
        elif self._state == SolutionState.COMPUTING_SOLUTION:
            return self._handle_computing_solution()
        return self._state == SolutionState.SOLVED

    def _handle_waiting_stable(self) -> bool:
        """Handle WAITING_STABLE state - wait for grid and targets to settle."""
        rows = self._tracker.best_grid()
        targets = self._tracker.best_targets()

        if rows is None or targets is None:
            logger.debug(
                f"State[WAITING_STABLE]: grid={'ready' if rows else 'pending'} "
                f"({self._tracker.pending_cell_count} cells pending), "
                f"targets={'ready' if targets else 'pending'}"
            )
            return False

        self._grid = Grid.from_rows(rows, targets)
        logger.info("State[WAITING_STABLE]: puzzle stable, transitioning to COMPUTING_SOLUTION")
        self._state = SolutionState.COMPUTING_SOLUTION
        return self._handle_computing_solution()

    def _handle_computing_solution(self) -> bool:
        """Handle COMPUTING_SOLUTION state - solve once and cache the result."""
        if self._grid is None:
            logger.warning("State[COMPUTING_SOLUTION]: no stable puzzle, returning to WAITING_STABLE")
            self._state = SolutionState.WAITING_STABLE
            return False

        start_time = time.perf_counter()

        self._context = SolveContext(
            grid=self._grid,
            buffer_size=self.buffer_size,
            timeout_sec=self._strategy.timeout_sec if self.timeout_sec is None else self.timeout_sec,
            step_budget=self.step_budget,
            skip_infeasible_seeds=self.skip_infeasible_seeds
        )

        try:
            result = self._strategy.solve(self._context)
        except ValueError as e:
            # InfeasibleConfigurationError included
            logger.error(f"State[COMPUTING_SOLUTION]: {e}")
            self._error = str(e)
            self._state = SolutionState.FAILED
            return False

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        self._result = result
        self._state = SolutionState.SOLVED

        logger.info(
            f"State[COMPUTING_SOLUTION]: {result.solution_count} solutions, "
            f"{result.metrics.paths_explored} paths ({elapsed_ms:.1f}ms)"
        )
        if result.was_cancelled:
            logger.warning(f"State[COMPUTING_SOLUTION]: search stopped early ({result.stop_reason})")

        return True

    def cancel(self) -> None:
        """Ask a running solve to stop. Safe to call from another thread."""
        if self._context is not None:
            self._context.cancel()

    def reset(self) -> None:
        """Reset solution manager to initial state."""
        self.cancel()
        self._tracker.reset()
        self._state = SolutionState.WAITING_STABLE
        self._context = None
        self._grid = None
        self._result = None
        self._error = None
        logger.info("SolutionManager reset")

    def get_state_string(self) -> str:
        """Get human-readable state string for display."""
        state_strings = {
            SolutionState.WAITING_STABLE: "Stabilizing",
            SolutionState.COMPUTING_SOLUTION: "Computing",
            SolutionState.SOLVED: "Solved",
            SolutionState.FAILED: "Failed",
        }
        base = state_strings.get(self._state, "Unknown")

        if self._state == SolutionState.SOLVED and self._result is not None:
            return f"{base} ({self._result.solution_count} solutions)"

        return base
