"""Scenario — build the initial board from text input or at random.

Text input layout, one record per line::

    <board size>
    <number of insects M>
    <number of food points K>
    <Color> <Species> <row> <col>     (M lines)
    <value> <row> <col>               (K lines)

Validation stops at the first problem, in this order: board size, food
count, insect count, then each insect line (colour, species, position,
duplicate, collision), then each food line (value, position,
collision).  Nothing invalid ever reaches the engine.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from itertools import product
from pathlib import Path
from typing import TYPE_CHECKING

from insectboard.board.entities import Color, FoodMarker, Insect, Species
from insectboard.board.grid import Grid, new_grid, place
from insectboard.board.position import Position
from insectboard.errors import (
    DuplicateInsectError,
    InvalidBoardSizeError,
    InvalidEntityPositionError,
    InvalidFoodValueError,
    InvalidInsectColorError,
    InvalidInsectTypeError,
    InvalidNumberOfFoodPointsError,
    InvalidNumberOfInsectsError,
    MissingInputError,
    ScenarioError,
)
from insectboard.simulation.config import SimulationConfig
from insectboard.simulation.engine import SimulationEngine

if TYPE_CHECKING:
    from collections.abc import Sequence

    from numpy.random import Generator

logger = logging.getLogger(__name__)

# Header line indices; the food count is validated before the insect count.
_SIZE_LINE = 0
_INSECTS_LINE = 1
_FOOD_LINE = 2
_HEADER_LINES = 3


@dataclass
class Scenario:
    """A populated board plus its insects in move order.

    Attributes:
        grid: Board holding every insect and food marker.
        insects: Insects in registration order.
    """

    grid: Grid
    insects: list[Insect] = field(default_factory=list)

    def engine(self) -> SimulationEngine:
        """Return an engine that will resolve this scenario's turns."""
        return SimulationEngine(grid=self.grid, insects=list(self.insects))


def parse_scenario(
    lines: Sequence[str],
    config: SimulationConfig | None = None,
) -> Scenario:
    """Build a Scenario from the lines of an input file.

    Args:
        lines: Input text split into lines.
        config: Input limits; defaults to ``SimulationConfig()``.

    Returns:
        The validated, populated scenario.

    Raises:
        ScenarioError: On the first invalid or missing value.
        CollisionError: If two entities share a cell.
    """
    config = config or SimulationConfig()

    size = _parse_count(
        _line(lines, _SIZE_LINE),
        config.min_board_size,
        config.max_board_size,
        InvalidBoardSizeError,
    )
    num_food = _parse_count(
        _line(lines, _FOOD_LINE),
        config.min_food_points,
        config.max_food_points,
        InvalidNumberOfFoodPointsError,
    )
    num_insects = _parse_count(
        _line(lines, _INSECTS_LINE),
        config.min_insects,
        config.max_insects,
        InvalidNumberOfInsectsError,
    )

    scenario = Scenario(grid=new_grid(size))
    for i in range(num_insects):
        insect = _parse_insect(_line(lines, _HEADER_LINES + i), scenario.grid)
        for other in scenario.insects:
            if other.color == insect.color and other.species == insect.species:
                raise DuplicateInsectError
        place(scenario.grid, insect)
        scenario.insects.append(insect)

    for i in range(num_food):
        line = _line(lines, _HEADER_LINES + num_insects + i)
        place(scenario.grid, _parse_food(line, scenario.grid))

    logger.info(
        "Loaded %dx%d board with %d insects and %d food points",
        size,
        size,
        num_insects,
        num_food,
    )
    return scenario


def load_scenario(
    path: str | Path,
    config: SimulationConfig | None = None,
) -> Scenario:
    """Read and parse a scenario file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ScenarioError: If its contents are invalid.
    """
    path = Path(path)
    return parse_scenario(path.read_text().splitlines(), config)


def random_scenario(
    rng: Generator,
    size: int,
    num_insects: int,
    num_food: int,
    *,
    max_food_value: int = 10,
) -> Scenario:
    """Generate a valid scenario with insects and food on distinct cells.

    Every insect gets a distinct colour/species pairing, so at most
    ``len(Color) * len(Species)`` insects can be placed.

    Args:
        rng: Seeded random generator.
        size: Board side length.
        num_insects: Number of insects to place.
        num_food: Number of food markers to place.
        max_food_value: Inclusive upper bound of each marker's value.

    Raises:
        ScenarioError: If the requested entities cannot fit.
    """
    kinds = list(product(Color, Species))
    if num_insects > len(kinds):
        raise InvalidNumberOfInsectsError
    if num_insects + num_food > size * size:
        msg = f"{num_insects + num_food} entities do not fit on a {size}x{size} board"
        raise ScenarioError(msg)

    scenario = Scenario(grid=new_grid(size))
    cells = rng.choice(size * size, size=num_insects + num_food, replace=False)
    picks = rng.choice(len(kinds), size=num_insects, replace=False)
    values = rng.integers(1, max_food_value + 1, size=num_food)

    positions = [Position(int(c) // size + 1, int(c) % size + 1) for c in cells]
    for position, pick in zip(positions[:num_insects], picks, strict=True):
        color, species = kinds[int(pick)]
        insect = Insect(position=position, color=color, species=species)
        place(scenario.grid, insect)
        scenario.insects.append(insect)
    for position, value in zip(positions[num_insects:], values, strict=True):
        place(scenario.grid, FoodMarker(position=position, value=int(value)))
    return scenario


# -- Line parsing --


def _line(lines: Sequence[str], index: int) -> str:
    if index >= len(lines):
        msg = f"Missing input line {index + 1}"
        raise MissingInputError(msg)
    return lines[index]


def _parse_count(
    text: str,
    lo: int,
    hi: int,
    error: type[ScenarioError],
) -> int:
    """Parse an integer in ``[lo, hi]``, raising ``error`` otherwise."""
    try:
        value = int(text.strip())
    except ValueError:
        raise error from None
    if not lo <= value <= hi:
        raise error
    return value


def _parse_position(tokens: Sequence[str], grid: Grid) -> Position:
    """Parse a ``row col`` pair that must lie on ``grid``."""
    if len(tokens) < 2:
        raise InvalidEntityPositionError
    try:
        position = Position(int(tokens[0]), int(tokens[1]))
    except ValueError:
        raise InvalidEntityPositionError from None
    if not grid.in_bounds(position):
        raise InvalidEntityPositionError
    return position


def _parse_insect(line: str, grid: Grid) -> Insect:
    tokens = line.split()
    try:
        color = Color[tokens[0].upper()]
    except (IndexError, KeyError):
        raise InvalidInsectColorError from None
    try:
        species = Species(tokens[1])
    except (IndexError, ValueError):
        raise InvalidInsectTypeError from None
    position = _parse_position(tokens[2:], grid)
    return Insect(position=position, color=color, species=species)


def _parse_food(line: str, grid: Grid) -> FoodMarker:
    tokens = line.split()
    try:
        value = int(tokens[0])
    except (IndexError, ValueError):
        raise InvalidFoodValueError from None
    if value < 1:
        raise InvalidFoodValueError
    position = _parse_position(tokens[1:], grid)
    return FoodMarker(position=position, value=value)
