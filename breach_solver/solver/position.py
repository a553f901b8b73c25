"""
Position Module - Grid coordinates and navigation steps between them.
"""

from dataclasses import dataclass
from enum import Enum


class Direction(Enum):
    """Direction of a single move along one axis."""
    UP = "Up"
    DOWN = "Down"
    LEFT = "Left"
    RIGHT = "Right"

    @property
    def arrow(self) -> str:
        """Arrow glyph for compact display."""
        return _ARROWS[self]


_ARROWS = {
    Direction.UP: "↑",
    Direction.DOWN: "↓",
    Direction.LEFT: "←",
    Direction.RIGHT: "→",
}


@dataclass(frozen=True)
class NavigationStep:
    """
    One move of a path, expressed as direction and distance.

    Attributes:
        direction: Axis direction of the move
        width: Number of cells travelled (absolute coordinate delta)
    """
    direction: Direction
    width: int

    @property
    def arrow(self) -> str:
        """Compact form, e.g. ↓2."""
        return f"{self.direction.arrow}{self.width}"

    def __str__(self) -> str:
        return f"{self.direction.value}{self.width}"


@dataclass(frozen=True)
class Position:
    """
    Cell coordinate on the grid.

    Column first, matching how paths are walked: odd steps keep the
    column, even steps keep the row.

    Attributes:
        column: Column index (0 = leftmost)
        row: Row index (0 = top)
    """
    column: int
    row: int

    def step_from(self, previous: 'Position') -> NavigationStep:
        """
        Describe the move from previous to this position.

        A move that keeps the column is vertical (Up/Down), anything
        else is horizontal (Left/Right).

        Args:
            previous: Position the move starts from

        Returns:
            NavigationStep for the move
        """
        if self.column == previous.column:
            delta = self.row - previous.row
            direction = Direction.DOWN if delta > 0 else Direction.UP
        else:
            delta = self.column - previous.column
            direction = Direction.RIGHT if delta > 0 else Direction.LEFT
        return NavigationStep(direction=direction, width=abs(delta))

    def __str__(self) -> str:
        return f"({self.column},{self.row})"
