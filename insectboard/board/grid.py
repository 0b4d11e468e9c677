"""Grid — the square board registry.

The Grid owns entity existence: it is the only place entities are
inserted or removed.  Each cell holds at most one entity, keyed by its
Position.  Cells are stored sparsely in a dict since most of the board
is empty.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from insectboard.board.entities import Entity, FoodMarker, Insect
from insectboard.errors import CollisionError, InvalidSizeError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from insectboard.board.position import Position

logger = logging.getLogger(__name__)


@dataclass
class Grid:
    """A ``size`` x ``size`` board holding food markers and insects.

    Attributes:
        size: Side length of the board.  Valid positions satisfy
            ``1 <= row, col <= size``.
        cells: Occupied cells keyed by position.
    """

    size: int
    cells: dict[Position, Entity] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        """Reject sizes that cannot hold a single cell."""
        if self.size < 1:
            msg = f"Invalid board size: {self.size}"
            raise InvalidSizeError(msg)

    def in_bounds(self, position: Position) -> bool:
        """Return True if ``position`` lies on the board."""
        return 1 <= position.row <= self.size and 1 <= position.col <= self.size

    def get(self, position: Position) -> Entity | None:
        """Return the entity at ``position``, or None if the cell is empty."""
        return self.cells.get(position)

    def insert(self, entity: Entity) -> None:
        """Place an entity on its own position.

        Args:
            entity: The food marker or insect to store.

        Raises:
            CollisionError: If the cell is already occupied.
        """
        if entity.position in self.cells:
            raise CollisionError
        self.cells[entity.position] = entity
        logger.debug("Placed %s at %s", entity, entity.position)

    def remove(self, position: Position) -> None:
        """Clear the cell at ``position``.  Removing an empty cell is a no-op."""
        self.cells.pop(position, None)

    def __len__(self) -> int:
        return len(self.cells)

    def insects(self) -> Iterator[Insect]:
        """Yield the insects still on the board."""
        for entity in self.cells.values():
            if isinstance(entity, Insect):
                yield entity

    def food_markers(self) -> Iterator[FoodMarker]:
        """Yield the food markers still on the board."""
        for entity in self.cells.values():
            if isinstance(entity, FoodMarker):
                yield entity

    def total_food(self) -> int:
        """Return the summed value of every food marker on the board."""
        return sum(marker.value for marker in self.food_markers())

    def food_layer(self) -> NDArray[np.int64]:
        """Return food values as a dense 2D array.

        Index ``[row - 1, col - 1]`` holds the value of the marker at
        ``Position(row, col)``, or 0 for cells without food.
        """
        layer = np.zeros((self.size, self.size), dtype=np.int64)
        for marker in self.food_markers():
            layer[marker.position.row - 1, marker.position.col - 1] = marker.value
        return layer


def new_grid(size: int) -> Grid:
    """Create an empty board of the given side length.

    Raises:
        InvalidSizeError: If ``size`` is below 1.
    """
    return Grid(size=size)


def place(grid: Grid, entity: Entity) -> None:
    """Insert ``entity`` into ``grid``, raising CollisionError on an occupied cell."""
    grid.insert(entity)
