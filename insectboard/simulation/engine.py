"""SimulationEngine — resolves every insect's single move.

Insects act strictly in the order they were registered.  Each turn:

1. Pick the best direction from the current board (read-only scan)
2. Travel along it, eating food and possibly being blocked
3. Remove the insect from its starting cell
4. Record a TurnResult

Earlier turns can eat food that later insects would have seen, so the
order matters.  No insect moves twice.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from insectboard.errors import TurnOrderError
from insectboard.movement.policies import travel
from insectboard.movement.selection import best_direction

if TYPE_CHECKING:
    from collections.abc import Iterable

    from insectboard.board.entities import Color, Insect, Species
    from insectboard.board.grid import Grid
    from insectboard.board.position import Direction

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TurnResult:
    """Outcome of one insect's move.

    Attributes:
        color: Colour of the insect that moved.
        species: Its species.
        direction: Direction it travelled.
        collected: Total food value it ate.
    """

    color: Color
    species: Species
    direction: Direction
    collected: int

    @property
    def direction_label(self) -> str:
        """Human-readable direction, e.g. ``"North-East"``."""
        return self.direction.label

    def format(self) -> str:
        """Render as an output line, e.g. ``"Red Ant East 10 "``."""
        return (
            f"{self.color.display} {self.species.value} "
            f"{self.direction_label} {self.collected} "
        )


@dataclass
class SimulationEngine:
    """Drives the simulation forward one insect at a time.

    Attributes:
        grid: The populated board; mutated as insects move.
        insects: Insects in registration order.
        results: Results of the turns resolved so far.
        turn: Index of the next insect to move.
    """

    grid: Grid
    insects: list[Insect]
    results: list[TurnResult] = field(default_factory=list)
    turn: int = 0

    @property
    def finished(self) -> bool:
        """Return True once every insect has moved."""
        return self.turn >= len(self.insects)

    def step(self) -> TurnResult:
        """Resolve the next insect's move.

        Returns:
            The result of the move.

        Raises:
            TurnOrderError: If every insect has already moved.
        """
        if self.finished:
            raise TurnOrderError
        insect = self.insects[self.turn]
        direction = best_direction(insect, self.grid)
        collected = travel(insect, direction, self.grid)
        result = TurnResult(
            color=insect.color,
            species=insect.species,
            direction=direction,
            collected=collected,
        )
        logger.debug(
            "Turn %d: %s went %s and collected %d",
            self.turn + 1,
            insect,
            direction.label,
            collected,
        )
        self.results.append(result)
        self.turn += 1
        return result

    def run(self) -> list[TurnResult]:
        """Resolve all remaining moves and return every result so far."""
        while not self.finished:
            self.step()
        return self.results


def resolve_turns(grid: Grid, insects: Iterable[Insect]) -> list[TurnResult]:
    """Move every insect once, in order, and return their results."""
    return SimulationEngine(grid=grid, insects=list(insects)).run()


def format_results(results: Iterable[TurnResult]) -> str:
    """Render results as output-file text: one line each, then a blank line."""
    return "".join(f"{result.format()}\n" for result in results) + "\n"
