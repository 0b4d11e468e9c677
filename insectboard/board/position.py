"""Coordinate algebra for the board.

Positions are 1-indexed ``(row, col)`` pairs.  Row 1 is the northern
edge and column 1 the western edge, so North decreases the row and East
increases the column.  Stepping never checks bounds: positions off the
board are valid intermediate values and the grid decides what is in
play.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Direction(Enum):
    """The eight compass directions with their display label and offset."""

    N = ("North", -1, 0)
    E = ("East", 0, 1)
    S = ("South", 1, 0)
    W = ("West", 0, -1)
    NE = ("North-East", -1, 1)
    SE = ("South-East", 1, 1)
    SW = ("South-West", 1, -1)
    NW = ("North-West", -1, -1)

    def __init__(self, label: str, d_row: int, d_col: int) -> None:
        self.label = label
        self.d_row = d_row
        self.d_col = d_col

    @property
    def is_diagonal(self) -> bool:
        """Return True for the four diagonal directions."""
        return self.d_row != 0 and self.d_col != 0


ORTHOGONAL: tuple[Direction, ...] = (Direction.N, Direction.E, Direction.S, Direction.W)
DIAGONAL: tuple[Direction, ...] = (Direction.NE, Direction.SE, Direction.SW, Direction.NW)


@dataclass(frozen=True, order=True)
class Position:
    """An immutable grid coordinate.

    Attributes:
        row: Row index, 1 at the northern edge.
        col: Column index, 1 at the western edge.
    """

    row: int
    col: int

    def step(self, direction: Direction, times: int = 1) -> Position:
        """Return the position ``times`` unit offsets away along ``direction``.

        Args:
            direction: Direction whose offset is applied.
            times: How many unit offsets to apply.

        Returns:
            A new Position; no bounds checking is performed.
        """
        return Position(
            self.row + direction.d_row * times,
            self.col + direction.d_col * times,
        )

    def __str__(self) -> str:
        return f"{self.row} {self.col}"
