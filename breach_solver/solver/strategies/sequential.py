"""
Sequential Strategy - Enumerates seed columns left to right.
"""

import logging
import time
from typing import List

from ..base import SolverStrategy
from ..context import SolveContext, STOP_CANCELLED
from ..solution import Solution, SolutionMetrics, SolveResult
from ..factory import register_strategy

logger = logging.getLogger(__name__)


@register_strategy
class SequentialStrategy(SolverStrategy):
    """
    Reference traversal: every seed in the top row, ascending column
    order, one shared frontier.

    Within a seed, enumeration stops as soon as the frontier holds a
    solution matching every target; the next seed is still searched.
    The traversal order is fixed, so identical inputs always give the
    same frontier.
    """
    name = "sequential"
    description = "Sequential - Seeds left to right, shared frontier"
    timeout_sec = 20.0

    def solve(self, context: SolveContext) -> SolveResult:
        """
        Compute the solution frontier seed by seed.

        Args:
            context: Solve context with grid and buffer size

        Returns:
            SolveResult with the frontier and metrics

        Raises:
            InfeasibleConfigurationError: If a seed cannot reach the buffer
                size and infeasible seeds are not skipped
        """
        start_time = time.perf_counter()
        self.validate(context)

        size = context.grid.size
        frontier: List[Solution] = []
        metrics = SolutionMetrics()
        stop_reason = None

        for column in range(size):
            if self._check_cancelled(context):
                stop_reason = context.stop_reason() or STOP_CANCELLED
                break

            outcome = self.search_seed(context, column, frontier)
            if outcome.infeasible:
                self.handle_infeasible_seed(context, column)
                metrics.seeds_skipped += 1
                continue

            metrics.seeds_searched += 1
            metrics.paths_explored += outcome.paths_explored
            metrics.candidates_considered += outcome.candidates_considered
            frontier = outcome.frontier

            logger.debug(
                f"Seed {column}: {outcome.paths_explored} paths, "
                f"frontier size {len(frontier)}"
            )
            context.report_progress(
                (column + 1) / size,
                f"{column + 1}/{size} seeds, {len(frontier)} solutions"
            )

            if outcome.stop_reason is not None:
                stop_reason = outcome.stop_reason
                logger.warning(
                    f"Search stopped ({stop_reason}) at seed {column} "
                    f"after {metrics.paths_explored} paths"
                )
                break

        return self._build_result(context, frontier, metrics, start_time, stop_reason)
