"""
Mode Tracking Module - Majority vote over noisy repeated readings.

A reading is trusted once the same value has been seen a threshold
number of times. From then on the detector stops counting, so the
settled value never flips and memory stays bounded.
"""

from collections import Counter
from typing import Dict, Generic, Hashable, List, Optional, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V", bound=Hashable)


class ModeDetector(Generic[V]):
    """
    Tracks the most frequent value of a single stream of readings.

    Attributes:
        threshold: Count the leading value must reach to be reported
    """

    def __init__(self, threshold: int = 5):
        if threshold < 1:
            raise ValueError(f"Threshold must be positive, got {threshold}")
        self.threshold = threshold
        self._counts: Counter = Counter()
        self._best: Optional[V] = None
        self._best_count = 0

    def track(self, value: V) -> None:
        """
        Count one reading. Ignored once the mode has settled.

        Args:
            value: Observed value
        """
        if self._best_count >= self.threshold:
            return
        self._counts[value] += 1
        if self._counts[value] > self._best_count:
            self._best_count = self._counts[value]
            self._best = value

    @property
    def mode(self) -> Optional[V]:
        """Settled value, or None while still pending."""
        if self._best_count < self.threshold:
            return None
        return self._best

    @property
    def is_settled(self) -> bool:
        """True once the leading value reached the threshold."""
        return self._best_count >= self.threshold

    @property
    def leader(self) -> Optional[V]:
        """Current leading value, settled or not."""
        return self._best

    @property
    def leader_count(self) -> int:
        """Number of times the leading value was seen."""
        return self._best_count

    def reset(self) -> None:
        """Forget all readings."""
        self._counts.clear()
        self._best = None
        self._best_count = 0


class ModeTracker(Generic[K, V]):
    """
    Independent mode detectors keyed by an identifier (e.g. a cell).

    Example:
        tracker = ModeTracker(threshold=3)
        for reading in ("1C", "IC", "1C", "1C"):
            tracker.track((0, 0), reading)
        tracker.mode((0, 0))  # "1C"
    """

    def __init__(self, threshold: int = 5):
        if threshold < 1:
            raise ValueError(f"Threshold must be positive, got {threshold}")
        self.threshold = threshold
        self._detectors: Dict[K, ModeDetector[V]] = {}

    def track(self, key: K, value: V) -> None:
        """Count one reading for key."""
        detector = self._detectors.get(key)
        if detector is None:
            detector = ModeDetector(self.threshold)
            self._detectors[key] = detector
        detector.track(value)

    def mode(self, key: K) -> Optional[V]:
        """Settled value for key, or None while pending or never seen."""
        detector = self._detectors.get(key)
        if detector is None:
            return None
        return detector.mode

    def is_settled(self, key: K) -> bool:
        """True once key has a settled value."""
        detector = self._detectors.get(key)
        return detector is not None and detector.is_settled

    def pending_keys(self) -> List[K]:
        """Keys seen at least once but not yet settled."""
        return [key for key, detector in self._detectors.items() if not detector.is_settled]

    def __contains__(self, key: K) -> bool:
        return key in self._detectors

    def __len__(self) -> int:
        return len(self._detectors)

    def reset(self) -> None:
        """Forget all keys."""
        self._detectors.clear()
