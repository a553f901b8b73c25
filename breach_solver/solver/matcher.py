"""
Matcher Module - Tests whether targets occur inside a rendered path.
"""

from typing import FrozenSet, Sequence

from .grid import Token


def matches(target: Sequence[Token], path_tokens: Sequence[Token]) -> bool:
    """
    Check whether target appears as a contiguous run inside path_tokens.

    Exact token equality, order preserved, no wraparound. An empty
    target never matches.

    Args:
        target: Token sequence to look for
        path_tokens: Tokens read along a path

    Returns:
        True if target is a contiguous sub-sequence of path_tokens
    """
    width = len(target)
    if width == 0 or width > len(path_tokens):
        return False

    for start in range(len(path_tokens) - width + 1):
        for offset in range(width):
            if path_tokens[start + offset] != target[offset]:
                break
        else:
            return True
    return False


def matched_targets(path_tokens: Sequence[Token],
                    targets: Sequence[Sequence[Token]]) -> FrozenSet[int]:
    """
    Collect the indices of all targets found in path_tokens.

    Args:
        path_tokens: Tokens read along a path
        targets: Ordered target list

    Returns:
        Frozen set of matched target indices (empty if none)
    """
    return frozenset(
        i for i, target in enumerate(targets) if matches(target, path_tokens)
    )
