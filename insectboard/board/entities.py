"""Entities that can occupy a board cell.

Food markers and insects are plain value records.  They hold no
reference to the grid they sit on; every movement operation receives
the grid explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from insectboard.board.position import Position


class Color(Enum):
    """Insect colours.  Only compared for equality and displayed."""

    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    YELLOW = "yellow"

    @property
    def display(self) -> str:
        """Return the capitalised name, e.g. ``"Red"``."""
        return self.name.capitalize()


class Species(Enum):
    """Insect species.  The value is the display name used in input and output."""

    GRASSHOPPER = "Grasshopper"
    BUTTERFLY = "Butterfly"
    ANT = "Ant"
    SPIDER = "Spider"


@dataclass(frozen=True)
class FoodMarker:
    """A food source worth ``value`` points to whichever insect passes over it.

    Attributes:
        position: Cell the marker occupies.
        value: Food value (positive).
    """

    position: Position
    value: int


@dataclass(frozen=True)
class Insect:
    """An insect placed on the board.

    Attributes:
        position: Cell the insect started on.  Never reassigned; the
            insect is removed from the grid after its single move.
        color: Team colour, used for the blocking rule.
        species: Determines the movement policy.
    """

    position: Position
    color: Color
    species: Species

    def __str__(self) -> str:
        return f"{self.color.display} {self.species.value}"


Entity = FoodMarker | Insect
