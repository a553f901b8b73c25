"""
Parallel Strategy - Searches seed columns concurrently and merges frontiers.
"""

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional

from ..base import SeedOutcome, SolverStrategy
from ..context import SolveContext
from ..frontier import merge_frontiers
from ..solution import Solution, SolutionMetrics, SolveResult
from ..factory import register_strategy

logger = logging.getLogger(__name__)


@register_strategy
class ParallelStrategy(SolverStrategy):
    """
    One task per seed column, each with its own enumerator and frontier.

    Seeds are independent, so each task starts from an empty frontier.
    The per-seed frontiers are reduced in ascending column order with
    merge_frontiers(), which keeps the result deterministic regardless
    of task completion order. Early stop on full coverage is per seed.

    Parameters:
        max_workers: Thread pool size (default: one per seed column)
    """
    name = "parallel"
    description = "Parallel - One worker per seed, frontiers merged"
    timeout_sec = 20.0

    def __init__(self, max_workers: Optional[int] = None):
        self.max_workers = max_workers

    def solve(self, context: SolveContext) -> SolveResult:
        """
        Compute the solution frontier with seeds searched concurrently.

        Infeasibility is checked on every outcome before merging, so a
        failing seed never yields a partial frontier.

        Args:
            context: Solve context with grid and buffer size

        Returns:
            SolveResult with the merged frontier and metrics

        Raises:
            InfeasibleConfigurationError: If a seed cannot reach the buffer
                size and infeasible seeds are not skipped
        """
        start_time = time.perf_counter()
        self.validate(context)

        size = context.grid.size
        workers = self.max_workers or size

        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = [
                executor.submit(self.search_seed, context, column)
                for column in range(size)
            ]
            outcomes: List[SeedOutcome] = [future.result() for future in futures]

        metrics = SolutionMetrics()
        for outcome in outcomes:
            if outcome.infeasible:
                self.handle_infeasible_seed(context, outcome.column)
                metrics.seeds_skipped += 1

        frontier: List[Solution] = []
        stop_reason = None
        for outcome in outcomes:
            if outcome.infeasible:
                continue
            metrics.seeds_searched += 1
            metrics.paths_explored += outcome.paths_explored
            metrics.candidates_considered += outcome.candidates_considered
            frontier = merge_frontiers(frontier, outcome.frontier)
            if stop_reason is None and outcome.stop_reason is not None:
                stop_reason = outcome.stop_reason

        if stop_reason is not None:
            logger.warning(f"Search stopped ({stop_reason}) after {metrics.paths_explored} paths")
        logger.debug(f"Merged {len(outcomes)} seed frontiers into {len(frontier)} solutions")
        context.report_progress(1.0, f"{size} seeds, {len(frontier)} solutions")

        return self._build_result(context, frontier, metrics, start_time, stop_reason)
