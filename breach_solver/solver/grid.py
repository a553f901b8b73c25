"""
Grid Module - Immutable puzzle representation: token matrix plus targets.
"""

from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

from .position import Position


Token = str
Target = Tuple[Token, ...]

COMMENT_PREFIX = "#"


@dataclass(frozen=True)
class Grid:
    """
    Immutable square matrix of tokens and the ordered target list.

    Uses tuple-of-tuples for hashability and immutability. Cells are
    indexed (row, column); paths address them through Position, which
    is (column, row).

    Attributes:
        cells: Tuple of rows, each a tuple of tokens
        targets: Ordered target sequences; index = target identity
    """
    cells: Tuple[Tuple[Token, ...], ...]
    targets: Tuple[Target, ...] = ()

    def __post_init__(self):
        size = len(self.cells)
        if size == 0:
            raise ValueError("Grid must have at least one row")
        for r, row in enumerate(self.cells):
            if len(row) != size:
                raise ValueError(
                    f"Grid must be square: row {r} has {len(row)} cells, expected {size}"
                )
        for i, target in enumerate(self.targets):
            if len(target) == 0:
                raise ValueError(f"Target {i} is empty")

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Token]],
                  targets: Iterable[Sequence[Token]] = ()) -> 'Grid':
        """
        Create Grid from a 2D list of tokens and a list of targets.

        Args:
            rows: Grid rows top to bottom
            targets: Target token sequences

        Returns:
            Grid instance
        """
        return cls(
            cells=tuple(tuple(row) for row in rows),
            targets=tuple(tuple(target) for target in targets),
        )

    @classmethod
    def from_text(cls, text: str) -> 'Grid':
        """
        Parse a puzzle in text form.

        Grid rows come first, one per line with whitespace-separated
        tokens. A blank line separates them from the targets, one per
        line. Lines starting with '#' are ignored. Tokens are upper-cased.

        Example:
            1C 55 BD
            E9 1C 55
            BD E9 1C

            1C 55
            BD E9

        Args:
            text: Puzzle text

        Returns:
            Grid instance

        Raises:
            ValueError: If the grid block is missing or malformed
        """
        blocks: List[List[List[Token]]] = [[]]
        for raw_line in text.splitlines():
            line = raw_line.strip()
            if line.startswith(COMMENT_PREFIX):
                continue
            if not line:
                if blocks[-1]:
                    blocks.append([])
                continue
            blocks[-1].append(line.upper().split())

        blocks = [block for block in blocks if block]
        if not blocks:
            raise ValueError("Puzzle text has no grid")
        if len(blocks) > 2:
            raise ValueError(f"Puzzle text has {len(blocks)} blocks, expected grid and targets")

        rows = blocks[0]
        targets = blocks[1] if len(blocks) == 2 else []
        return cls.from_rows(rows, targets)

    def with_targets(self, targets: Iterable[Sequence[Token]]) -> 'Grid':
        """Return a copy of this grid with a different target list."""
        return Grid.from_rows(self.cells, targets)

    @property
    def size(self) -> int:
        """Side length N of the grid."""
        return len(self.cells)

    @property
    def target_count(self) -> int:
        """Number of targets."""
        return len(self.targets)

    def token_at(self, position: Position) -> Token:
        """
        Get the token under a position.

        Args:
            position: (column, row) coordinate

        Returns:
            Token string
        """
        return self.cells[position.row][position.column]

    def render(self, path: Sequence[Position]) -> List[Token]:
        """
        Read the tokens along a path.

        Args:
            path: Positions in visiting order

        Returns:
            Tokens in the same order
        """
        return [self.cells[p.row][p.column] for p in path]

    def to_text(self) -> str:
        """Render the puzzle back to the text form accepted by from_text."""
        lines = [" ".join(row) for row in self.cells]
        if self.targets:
            lines.append("")
            lines.extend(" ".join(target) for target in self.targets)
        return "\n".join(lines) + "\n"
