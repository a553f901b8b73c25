"""
Solver Errors - Exceptions raised by the path enumerator and solver.
"""

from typing import Optional


class SolverError(Exception):
    """Base class for solver failures."""


class PathLengthError(ValueError):
    """Requested path length can never fit in the grid (length > size * size)."""

    def __init__(self, length: int, size: int):
        super().__init__(
            f"Path length {length} exceeds the {size * size} cells of a {size}x{size} grid"
        )
        self.length = length
        self.size = size


class InfeasibleConfigurationError(SolverError, ValueError):
    """
    Buffer capacity cannot be satisfied.

    Raised when the capacity exceeds the number of grid cells, or when a
    seed column cannot support any path of the requested length. Carries
    the offending seed column when one is known.
    """

    def __init__(self, message: str, column: Optional[int] = None):
        super().__init__(message)
        self.column = column
