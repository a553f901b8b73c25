"""
Solve Context Module - Shared context for strategy execution.
"""

import threading
import time
from dataclasses import dataclass, field
from typing import Callable, Optional

from .grid import Grid


STOP_CANCELLED = "cancelled"
STOP_TIMEOUT = "timeout"
STOP_STEP_BUDGET = "step_budget"


@dataclass
class SolveContext:
    """
    Shared context passed to strategies containing the puzzle, the
    buffer capacity, cancellation and progress reporting.

    Cancellation is cooperative: strategies call record_step() once per
    path advancement and stop as soon as stop_reason() is not None.

    Attributes:
        grid: Puzzle grid with its targets
        buffer_size: Required path length
        cancel_flag: Threading event for cancellation
        timeout_sec: Maximum computation time in seconds (0 = unlimited)
        step_budget: Maximum paths examined (0 = unlimited)
        skip_infeasible_seeds: Skip seeds that cannot reach buffer_size
            instead of failing the whole solve
        start_time: When computation started
        progress_callback: Optional callback for progress updates
    """
    grid: Grid
    buffer_size: int
    cancel_flag: threading.Event = field(default_factory=threading.Event)
    timeout_sec: float = 0.0
    step_budget: int = 0
    skip_infeasible_seeds: bool = False
    start_time: float = field(default_factory=time.time)
    progress_callback: Optional[Callable[[float, str], None]] = None
    steps_taken: int = field(default=0, init=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)

    def record_step(self) -> None:
        """Count one examined path against the step budget."""
        with self._lock:
            self.steps_taken += 1

    def stop_reason(self) -> Optional[str]:
        """
        Check whether the strategy should stop, and why.

        Returns:
            STOP_CANCELLED, STOP_TIMEOUT, STOP_STEP_BUDGET, or None to continue
        """
        if self.cancel_flag.is_set():
            return STOP_CANCELLED
        if self.timeout_sec and time.time() - self.start_time > self.timeout_sec:
            return STOP_TIMEOUT
        if self.step_budget and self.steps_taken >= self.step_budget:
            return STOP_STEP_BUDGET
        return None

    def is_cancelled(self) -> bool:
        """
        Check if cancellation requested or a budget exceeded.

        Returns:
            True if strategy should stop execution
        """
        return self.stop_reason() is not None

    def cancel(self) -> None:
        """Request cancellation from another thread."""
        self.cancel_flag.set()

    def report_progress(self, percent: float, message: str = "") -> None:
        """
        Report progress to the caller.

        Args:
            percent: Progress from 0.0 to 1.0
            message: Optional status message
        """
        if self.progress_callback:
            self.progress_callback(percent, message)
