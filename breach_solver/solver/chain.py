"""
Chain Module - Enumerates fixed-length paths through the grid.

A path starts at a seed in the top row and alternates moves: odd steps
stay in the column of the previous cell (vertical), even steps stay in
its row (horizontal). No cell may be visited twice.

The enumeration treats the path as a mixed-radix counter. Every node
after the seed has one locked coordinate (inherited from its
predecessor) and one free coordinate that counts from 0 to size-1.
Incrementing the last node past size-1 pops it and carries into the
node before, like an odometer. Nodes that collide with an earlier node
are skipped. This visits every valid path from a seed exactly once,
in a fixed order, holding only the current path in memory.

Usage:
    path = build(Position(0, 0), size=5, length=6)
    while path is not None:
        ...
        path = advance(path, size=5)
"""

from typing import Iterator, List, Optional, Sequence, Tuple

from .errors import PathLengthError
from .position import Position


Path = Tuple[Position, ...]


def _row_is_free(index: int) -> bool:
    """Odd indices move vertically, so their row is the free coordinate."""
    return index % 2 == 1


def _next_node(path: List[Position]) -> Position:
    """First candidate for the node following the current last node."""
    last = path[-1]
    if _row_is_free(len(path)):
        return Position(column=last.column, row=0)
    return Position(column=0, row=last.row)


def _increment_last(path: List[Position], size: int) -> bool:
    """
    Step the free coordinate of the last node.

    Returns:
        False on axis overflow (the node is left untouched), True otherwise
    """
    index = len(path) - 1
    last = path[index]
    if _row_is_free(index):
        if last.row + 1 >= size:
            return False
        path[index] = Position(column=last.column, row=last.row + 1)
    else:
        if last.column + 1 >= size:
            return False
        path[index] = Position(column=last.column + 1, row=last.row)
    return True


def is_last_available(path: Sequence[Position]) -> bool:
    """
    Check that the newest node does not revisit any earlier node.

    Args:
        path: Path, possibly partial

    Returns:
        True if the last position does not appear earlier in the path
    """
    if len(path) <= 1:
        return True
    last = path[-1]
    for position in path[:-1]:
        if position == last:
            return False
    return True


def _grow(path: List[Position], size: int, length: int) -> bool:
    """
    Extend a working path in place to the requested length.

    Each new node starts at free coordinate 0 and is bumped until it no
    longer collides. Overflow pops the node and bumps the one before it.

    Returns:
        False if the path collapsed back to its seed
    """
    while len(path) < length:
        path.append(_next_node(path))
        while not is_last_available(path):
            while not _increment_last(path, size):
                path.pop()
                if len(path) == 1:
                    return False
    return True


def build_from(prefix: Sequence[Position], size: int, length: int) -> Optional[Path]:
    """
    Build the first valid path of the given length that extends prefix.

    Args:
        prefix: Starting nodes, at least the seed
        size: Grid side length
        length: Required path length (buffer capacity)

    Returns:
        Complete path, or None if no path of that length exists from the seed

    Raises:
        PathLengthError: If length exceeds the number of grid cells
        ValueError: If length or prefix is empty
    """
    if length < 1:
        raise ValueError(f"Path length must be positive, got {length}")
    if length > size * size:
        raise PathLengthError(length, size)
    if not prefix:
        raise ValueError("Path prefix must contain the seed")

    work = list(prefix[:length])
    if not _grow(work, size, length):
        return None
    return tuple(work)


def build(seed: Position, size: int, length: int) -> Optional[Path]:
    """
    Build the first path of the given length starting at seed.

    Args:
        seed: Starting position (top row for puzzle paths)
        size: Grid side length
        length: Required path length

    Returns:
        First path in enumeration order, or None if the seed is infeasible

    Raises:
        PathLengthError: If length exceeds the number of grid cells
    """
    return build_from((seed,), size, length)


def advance(path: Sequence[Position], size: int) -> Optional[Path]:
    """
    Produce the path following path in enumeration order.

    The seed never changes, so a path of length 1 has no successor.

    Args:
        path: Complete path from build() or a previous advance()
        size: Grid side length

    Returns:
        Next path of the same length, or None when the seed is exhausted
    """
    length = len(path)
    if length <= 1:
        return None

    work = list(path)
    while True:
        if not _increment_last(work, size):
            work.pop()
            if len(work) == 1:
                return None
            continue
        if is_last_available(work):
            break

    if not _grow(work, size, length):
        return None
    return tuple(work)


def iter_paths(seed: Position, size: int, length: int) -> Iterator[Path]:
    """
    Iterate over every valid path from seed.

    Yields nothing if the seed is infeasible.

    Raises:
        PathLengthError: If length exceeds the number of grid cells
    """
    path = build(seed, size, length)
    while path is not None:
        yield path
        path = advance(path, size)


def is_valid_path(path: Sequence[Position], size: int) -> bool:
    """
    Check every invariant of a puzzle path.

    Starts in the top row, stays on the grid, alternates vertical and
    horizontal moves, and never revisits a cell.

    Args:
        path: Path to check
        size: Grid side length

    Returns:
        True if the path is valid
    """
    if not path or path[0].row != 0:
        return False
    for position in path:
        if not (0 <= position.column < size and 0 <= position.row < size):
            return False
    if len(set(path)) != len(path):
        return False
    for i in range(1, len(path)):
        previous, current = path[i - 1], path[i]
        if _row_is_free(i):
            if current.column != previous.column:
                return False
        elif current.row != previous.row:
            return False
    return True
