"""
Task Tracker Module - Stabilises per-frame grid and target readings.

Recognition runs on every frame and is noisy: cells flicker between
readings and the detected grid size can jump. The tracker votes on
every cell and on the size separately, and only reports a grid once
every cell of the settled size has a settled value.
"""

import logging
from typing import List, Mapping, Optional, Sequence, Tuple

from .mode import ModeDetector, ModeTracker

logger = logging.getLogger(__name__)


CellKey = Tuple[int, int]  # (row, col)

TARGETS_SEPARATOR = "|"
DEFAULT_CONFIDENCE_THRESHOLD = 5


class TaskTracker:
    """
    Accumulates noisy readings into a finalized grid and target list.

    Example:
        tracker = TaskTracker(confidence_threshold=3)
        for frame in frames:
            tracker.log_grid(frame.size, frame.cells)
            tracker.log_targets(frame.target_lines)

        rows = tracker.best_grid()       # None until stable
        targets = tracker.best_targets() # None until stable
    """

    def __init__(self, confidence_threshold: int = DEFAULT_CONFIDENCE_THRESHOLD):
        """
        Initialize tracker.

        Args:
            confidence_threshold: Identical readings required per cell,
                for the grid size and for the target list
        """
        self.confidence_threshold = confidence_threshold
        self._size_detector: ModeDetector[int] = ModeDetector(confidence_threshold)
        self._cells: ModeTracker[CellKey, str] = ModeTracker(confidence_threshold)
        self._targets_detector: ModeDetector[str] = ModeDetector(confidence_threshold)
        self._grid: Optional[List[List[str]]] = None
        self._targets: Optional[List[Tuple[str, ...]]] = None

    @property
    def grid_size(self) -> Optional[int]:
        """Settled grid side length, or None while pending."""
        return self._size_detector.mode

    @property
    def pending_cell_count(self) -> int:
        """Cells read at least once whose value has not settled."""
        return len(self._cells.pending_keys())

    def log_grid(self, size: int, cells: Mapping[CellKey, str]) -> None:
        """
        Record one frame of grid readings.

        Args:
            size: Grid side length detected in this frame
            cells: (row, col) -> token for every cell read in this frame
        """
        self._size_detector.track(size)
        for key, token in cells.items():
            self._cells.track(key, token)

    def best_grid(self) -> Optional[List[List[str]]]:
        """
        Finalized grid rows.

        Returns:
            Rows of tokens once the size and every cell are settled, else None.
            The first complete grid found is kept for the tracker's lifetime.
        """
        if self._grid is not None:
            return self._grid

        size = self.grid_size
        if size is None:
            return None

        rows: List[List[str]] = []
        for r in range(size):
            row = []
            for c in range(size):
                token = self._cells.mode((r, c))
                if token is None:
                    return None
                row.append(token)
            rows.append(row)

        logger.info(f"Grid settled: {size}x{size}")
        self._grid = rows
        return rows

    def log_targets(self, lines: Sequence[str]) -> None:
        """
        Record one frame of target readings.

        The whole list is voted on as a unit. Blank lines are dropped,
        a reading with no targets left is ignored, and so is everything
        after the list has settled.

        Args:
            lines: One string per target, tokens separated by whitespace
        """
        if self._targets_detector.is_settled:
            return
        lines = [" ".join(line.split()) for line in lines if line.split()]
        if not lines:
            return
        self._targets_detector.track(TARGETS_SEPARATOR.join(lines))

    def best_targets(self) -> Optional[List[Tuple[str, ...]]]:
        """
        Finalized target list.

        Returns:
            One token tuple per target once settled, else None
        """
        if self._targets is not None:
            return self._targets

        joined = self._targets_detector.mode
        if joined is None:
            return None

        self._targets = [tuple(line.split()) for line in joined.split(TARGETS_SEPARATOR)]
        logger.info(f"Targets settled: {len(self._targets)} sequences")
        return self._targets

    @property
    def is_ready(self) -> bool:
        """True once both grid and targets are settled."""
        return self.best_grid() is not None and self.best_targets() is not None

    def reset(self) -> None:
        """Forget all readings."""
        self._size_detector.reset()
        self._cells.reset()
        self._targets_detector.reset()
        self._grid = None
        self._targets = None
        logger.debug("TaskTracker reset")
