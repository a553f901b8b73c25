"""
Tracking Package - Turns noisy recognition readings into a stable puzzle.

Usage:
    from breach_solver.tracking import TaskTracker, TextCorrector

    tracker = TaskTracker(confidence_threshold=5)
    corrector = TextCorrector()

    tracker.log_grid(5, {(r, c): corrector.apply(tok) for (r, c), tok in cells.items()})
    tracker.log_targets([corrector.correct_all(line) for line in lines])

    if tracker.is_ready:
        rows, targets = tracker.best_grid(), tracker.best_targets()
"""

from .mode import ModeDetector, ModeTracker
from .tracker import TaskTracker, DEFAULT_CONFIDENCE_THRESHOLD, TARGETS_SEPARATOR
from .corrections import TextCorrector, KNOWN_MISREADINGS

__all__ = [
    "ModeDetector",
    "ModeTracker",
    "TaskTracker",
    "DEFAULT_CONFIDENCE_THRESHOLD",
    "TARGETS_SEPARATOR",
    "TextCorrector",
    "KNOWN_MISREADINGS",
]
