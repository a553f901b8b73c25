"""
Frontier Module - Keeps the set of non-dominated solutions.

A solution dominates another when its matched targets are a superset of
the other's. For identical target sets the shorter path wins. The
frontier never holds two solutions where one dominates the other.
"""

from typing import List, Sequence

from .solution import Solution


def is_dominated(candidate: Solution, member: Solution) -> bool:
    """
    Check whether member makes candidate redundant.

    True when member matches strictly more targets (superset), or the
    same targets with a path no longer than candidate's.

    Args:
        candidate: Solution being considered
        member: Solution already kept

    Returns:
        True if candidate adds nothing over member
    """
    if candidate.targets < member.targets:
        return True
    return candidate.targets == member.targets and member.length <= candidate.length


def consider(candidate: Solution, frontier: Sequence[Solution]) -> List[Solution]:
    """
    Integrate candidate into the frontier.

    Rules, checked in order, exactly one applies:
        1. A member dominates candidate: frontier unchanged.
        2. A member has the same targets and a longer path: replaced.
        3. Candidate strictly covers members: all of them removed,
           candidate appended.
        4. Otherwise candidate is appended as an incomparable member.

    The input sequence is not modified.

    Args:
        candidate: Newly found solution
        frontier: Current non-dominated solutions

    Returns:
        New frontier list
    """
    for member in frontier:
        if is_dominated(candidate, member):
            return list(frontier)

    for i, member in enumerate(frontier):
        if member.targets == candidate.targets:
            updated = list(frontier)
            updated[i] = candidate
            return updated

    kept = [member for member in frontier if not member.targets < candidate.targets]
    kept.append(candidate)
    return kept


def merge_frontiers(left: Sequence[Solution], right: Sequence[Solution]) -> List[Solution]:
    """
    Combine two frontiers into one.

    Every member of right is fed through consider() against left, so
    members of left keep their position ahead of right's.

    Args:
        left: Frontier taking precedence on ties
        right: Frontier merged into left

    Returns:
        Merged non-dominated frontier
    """
    merged = list(left)
    for solution in right:
        merged = consider(solution, merged)
    return merged
