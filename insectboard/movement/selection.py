"""Direction selection — pick the direction with the most visible food."""

from __future__ import annotations

from typing import TYPE_CHECKING

from insectboard.board.position import Direction
from insectboard.movement.policies import policy_for

if TYPE_CHECKING:
    from insectboard.board.entities import Insect
    from insectboard.board.grid import Grid


def best_direction(insect: Insect, grid: Grid) -> Direction:
    """Return the direction in which ``insect`` sees the most food.

    Directions are scanned in the species' evaluation order and only a
    strictly greater value replaces the current best, so ties go to the
    earliest direction.  The grid is not modified.
    """
    policy = policy_for(insect.species)
    best = Direction.N
    best_value = -1
    for direction in policy.directions:
        value = policy.visible_value(direction, insect.position, grid)
        if value > best_value:
            best, best_value = direction, value
    return best
