"""Movement policies — how each species scouts and travels along a ray.

A policy is pure data: the directions a species may move in (in the
order they are evaluated) and how many unit offsets make up one step.
Both the visibility pass and the travel pass walk the same ray:

- The first cell inspected is one full step away from the start, so a
  Grasshopper (two offsets per step) never inspects its adjacent cell.
- The walk ends when the next step would leave the board.

The visibility pass only reads the grid.  The travel pass eats every
food marker it crosses, stops right after a cell holding an insect of a
different colour, walks past insects of its own colour, and finally
removes the travelling insect from its starting cell.

Key species table:

============  ==========  ========  ====
Species       Orthogonal  Diagonal  Step
============  ==========  ========  ====
Grasshopper   yes         no        2
Butterfly     yes         no        1
Spider        no          yes       1
Ant           yes         yes       1
============  ==========  ========  ====
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from insectboard.board.entities import FoodMarker, Insect, Species
from insectboard.board.position import DIAGONAL, ORTHOGONAL
from insectboard.errors import MovementError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from insectboard.board.grid import Grid
    from insectboard.board.position import Direction, Position

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MovementPolicy:
    """Movement capabilities of one species.

    Attributes:
        directions: Supported directions in evaluation order.
        step_size: Unit offsets applied per ray-walk iteration.
    """

    directions: tuple[Direction, ...]
    step_size: int = 1

    def ray(self, direction: Direction, start: Position, grid: Grid) -> Iterator[Position]:
        """Yield the in-bounds cells visited walking from ``start``.

        The start cell itself is never yielded.

        Raises:
            MovementError: If this policy does not support ``direction``.
        """
        if direction not in self.directions:
            msg = f"Cannot move {direction.label} with steps of {self.step_size}"
            raise MovementError(msg)
        position = start.step(direction, self.step_size)
        while grid.in_bounds(position):
            yield position
            position = position.step(direction, self.step_size)

    def visible_value(self, direction: Direction, start: Position, grid: Grid) -> int:
        """Sum the food visible along ``direction`` without touching the grid.

        Insects on the ray are ignored; only the board edge ends the scan.
        """
        total = 0
        for position in self.ray(direction, start, grid):
            entity = grid.get(position)
            if isinstance(entity, FoodMarker):
                total += entity.value
        return total

    def travel(self, insect: Insect, direction: Direction, grid: Grid) -> int:
        """Move ``insect`` along ``direction``, eating food on the way.

        Args:
            insect: The travelling insect.
            direction: One of this policy's directions.
            grid: The board; consumed food and the insect are removed.

        Returns:
            Total value of the food eaten.
        """
        collected = 0
        for position in self.ray(direction, insect.position, grid):
            entity = grid.get(position)
            if isinstance(entity, FoodMarker):
                collected += entity.value
                grid.remove(position)
                logger.debug("%s ate %d at %s", insect, entity.value, position)
            elif isinstance(entity, Insect) and entity.color != insect.color:
                logger.debug("%s blocked by %s at %s", insect, entity, position)
                break
        grid.remove(insect.position)
        return collected


GRASSHOPPER = MovementPolicy(directions=ORTHOGONAL, step_size=2)
BUTTERFLY = MovementPolicy(directions=ORTHOGONAL)
SPIDER = MovementPolicy(directions=DIAGONAL)
ANT = MovementPolicy(directions=ORTHOGONAL + DIAGONAL)


def policy_for(species: Species) -> MovementPolicy:
    """Return the movement policy for ``species``."""
    match species:
        case Species.GRASSHOPPER:
            return GRASSHOPPER
        case Species.BUTTERFLY:
            return BUTTERFLY
        case Species.SPIDER:
            return SPIDER
        case Species.ANT:
            return ANT


def visible_value(insect: Insect, direction: Direction, grid: Grid) -> int:
    """Food value ``insect`` can see along ``direction``."""
    return policy_for(insect.species).visible_value(direction, insect.position, grid)


def travel(insect: Insect, direction: Direction, grid: Grid) -> int:
    """Execute ``insect``'s single move along ``direction``; return food eaten."""
    return policy_for(insect.species).travel(insect, direction, grid)
