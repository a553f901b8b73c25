"""
Solution Module - Solved paths and the result of a solve call.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, List, Optional, Tuple

from .position import NavigationStep, Position


@dataclass(frozen=True)
class Solution:
    """
    A path together with the targets it satisfies.

    Attributes:
        path: Positions in visiting order, path[0] in the top row
        targets: Indices of targets found contiguously in the path's tokens
    """
    path: Tuple[Position, ...]
    targets: FrozenSet[int]

    @classmethod
    def create(cls, path, targets) -> 'Solution':
        """Create a Solution, normalising path to a tuple and targets to a frozenset."""
        return cls(path=tuple(path), targets=frozenset(targets))

    @property
    def length(self) -> int:
        """Number of positions in the path."""
        return len(self.path)

    @property
    def start(self) -> Position:
        """Seed position of the path."""
        return self.path[0]

    @property
    def steps(self) -> List[NavigationStep]:
        """One navigation step per move after the start position."""
        return [
            self.path[i].step_from(self.path[i - 1])
            for i in range(1, len(self.path))
        ]

    def covers_all(self, target_count: int) -> bool:
        """True if every target index 0..target_count-1 is matched."""
        return len(self.targets) == target_count

    def describe(self, arrows: bool = False) -> str:
        """
        Human-readable form: matched targets, start, then each move.

        Example:
            0, 2: (1,0) Down2 Left1 Up1

        Args:
            arrows: Use arrow glyphs (↓2) instead of words (Down2)

        Returns:
            Single-line description
        """
        matched = ", ".join(str(i) for i in sorted(self.targets))
        moves = [step.arrow if arrows else str(step) for step in self.steps]
        return " ".join([f"{matched}: {self.start}"] + moves)

    def __str__(self) -> str:
        return self.describe()


@dataclass
class SolutionMetrics:
    """
    Performance metrics for a solve call.

    Attributes:
        computation_time_ms: Time taken in milliseconds
        paths_explored: Number of complete paths rendered and matched
        candidates_considered: Paths that matched at least one target
        seeds_searched: Seed columns enumerated
        seeds_skipped: Infeasible seed columns skipped
        strategy_name: Name of strategy that produced the result
    """
    computation_time_ms: float = 0.0
    paths_explored: int = 0
    candidates_considered: int = 0
    seeds_searched: int = 0
    seeds_skipped: int = 0
    strategy_name: str = ""


@dataclass
class SolveResult:
    """
    Result of a strategy computation.

    Attributes:
        solutions: Non-dominated frontier of solutions
        target_count: Number of targets in the solved puzzle
        was_cancelled: True if stopped before every seed was searched
        stop_reason: "cancelled", "timeout" or "step_budget" when cancelled
        metrics: Performance statistics
    """
    solutions: List[Solution] = field(default_factory=list)
    target_count: int = 0
    was_cancelled: bool = False
    stop_reason: Optional[str] = None
    metrics: SolutionMetrics = field(default_factory=SolutionMetrics)

    @property
    def solution_count(self) -> int:
        """Number of solutions in the frontier."""
        return len(self.solutions)

    @property
    def has_solutions(self) -> bool:
        """Check if any target could be matched."""
        return len(self.solutions) > 0

    @property
    def is_complete(self) -> bool:
        """True if the search ran to the end without being stopped."""
        return not self.was_cancelled

    @property
    def best_solution(self) -> Optional[Solution]:
        """
        Solution matching the most targets.

        Ties go to the solution found first.
        """
        best = None
        for solution in self.solutions:
            if best is None or len(solution.targets) > len(best.targets):
                best = solution
        return best

    @property
    def covers_all_targets(self) -> bool:
        """True if some solution matches every target."""
        return any(s.covers_all(self.target_count) for s in self.solutions)
