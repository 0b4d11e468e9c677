"""Tests for insectboard.movement — visibility, travel, and direction choice."""

import pytest
from numpy.random import Generator

from insectboard.board.entities import Color, FoodMarker, Insect, Species
from insectboard.board.grid import Grid, place
from insectboard.board.position import Direction, Position
from insectboard.errors import MovementError
from insectboard.movement.policies import (
    ANT,
    BUTTERFLY,
    GRASSHOPPER,
    SPIDER,
    policy_for,
    travel,
    visible_value,
)
from insectboard.movement.selection import best_direction
from insectboard.simulation.scenario import random_scenario


def _food(grid: Grid, row: int, col: int, value: int) -> FoodMarker:
    marker = FoodMarker(Position(row, col), value)
    place(grid, marker)
    return marker


def _insect(grid: Grid, row: int, col: int, color: Color, species: Species) -> Insect:
    insect = Insect(Position(row, col), color, species)
    place(grid, insect)
    return insect


class TestPolicyTable:
    """Tests for the species → policy mapping."""

    def test_every_species_has_a_policy(self) -> None:
        for species in Species:
            assert policy_for(species).directions

    def test_direction_orders(self) -> None:
        n, e, s, w = Direction.N, Direction.E, Direction.S, Direction.W
        ne, se, sw, nw = Direction.NE, Direction.SE, Direction.SW, Direction.NW
        assert GRASSHOPPER.directions == (n, e, s, w)
        assert BUTTERFLY.directions == (n, e, s, w)
        assert SPIDER.directions == (ne, se, sw, nw)
        assert ANT.directions == (n, e, s, w, ne, se, sw, nw)

    def test_step_sizes(self) -> None:
        assert GRASSHOPPER.step_size == 2
        assert BUTTERFLY.step_size == SPIDER.step_size == ANT.step_size == 1

    def test_unsupported_direction(self, small_grid: Grid) -> None:
        with pytest.raises(MovementError):
            SPIDER.visible_value(Direction.N, Position(3, 3), small_grid)
        with pytest.raises(MovementError):
            BUTTERFLY.visible_value(Direction.SE, Position(3, 3), small_grid)


class TestVisibility:
    """Tests for the read-only scouting pass."""

    def test_grasshopper_skips_adjacent_cell(self, small_grid: Grid) -> None:
        _food(small_grid, 3, 3, 5)
        _food(small_grid, 4, 3, 3)
        hopper = _insect(small_grid, 5, 3, Color.RED, Species.GRASSHOPPER)
        assert visible_value(hopper, Direction.N, small_grid) == 5

    def test_butterfly_sees_every_cell(self, small_grid: Grid) -> None:
        _food(small_grid, 3, 3, 5)
        _food(small_grid, 4, 3, 3)
        butterfly = _insect(small_grid, 5, 3, Color.RED, Species.BUTTERFLY)
        assert visible_value(butterfly, Direction.N, small_grid) == 8

    def test_edge_sees_nothing(self, small_grid: Grid) -> None:
        _food(small_grid, 3, 3, 5)
        butterfly = _insect(small_grid, 1, 3, Color.RED, Species.BUTTERFLY)
        assert visible_value(butterfly, Direction.N, small_grid) == 0

    def test_insects_do_not_limit_sight(self, small_grid: Grid) -> None:
        _insect(small_grid, 5, 2, Color.BLUE, Species.ANT)
        _food(small_grid, 5, 4, 4)
        butterfly = _insect(small_grid, 5, 1, Color.RED, Species.BUTTERFLY)
        assert visible_value(butterfly, Direction.E, small_grid) == 4

    def test_spider_diagonal(self, small_grid: Grid) -> None:
        _food(small_grid, 2, 4, 2)
        _food(small_grid, 1, 5, 3)
        spider = _insect(small_grid, 3, 3, Color.GREEN, Species.SPIDER)
        assert visible_value(spider, Direction.NE, small_grid) == 5
        assert visible_value(spider, Direction.SW, small_grid) == 0

    def test_visibility_does_not_mutate(self, small_grid: Grid) -> None:
        _food(small_grid, 2, 3, 5)
        ant = _insect(small_grid, 4, 3, Color.RED, Species.ANT)
        before = dict(small_grid.cells)
        for direction in ANT.directions:
            visible_value(ant, direction, small_grid)
        assert small_grid.cells == before

    def test_bounded_by_total_food(self, rng: Generator) -> None:
        for _ in range(20):
            scenario = random_scenario(rng, 7, 8, 15)
            total = scenario.grid.total_food()
            for insect in scenario.insects:
                for direction in policy_for(insect.species).directions:
                    value = visible_value(insect, direction, scenario.grid)
                    assert 0 <= value <= total


class TestTravel:
    """Tests for the consuming travel pass."""

    def test_eats_food_and_leaves(self, small_grid: Grid) -> None:
        _food(small_grid, 2, 3, 5)
        _food(small_grid, 1, 3, 1)
        butterfly = _insect(small_grid, 4, 3, Color.RED, Species.BUTTERFLY)
        assert travel(butterfly, Direction.N, small_grid) == 6
        assert small_grid.get(Position(2, 3)) is None
        assert small_grid.get(Position(1, 3)) is None
        assert small_grid.get(butterfly.position) is None

    def test_edge_returns_zero_and_still_leaves(self, small_grid: Grid) -> None:
        butterfly = _insect(small_grid, 1, 3, Color.RED, Species.BUTTERFLY)
        assert travel(butterfly, Direction.N, small_grid) == 0
        assert small_grid.get(butterfly.position) is None

    def test_same_colour_does_not_block(self, small_grid: Grid) -> None:
        friend = _insect(small_grid, 5, 2, Color.RED, Species.ANT)
        _food(small_grid, 5, 4, 4)
        butterfly = _insect(small_grid, 5, 1, Color.RED, Species.BUTTERFLY)
        assert travel(butterfly, Direction.E, small_grid) == 4
        assert small_grid.get(Position(5, 4)) is None
        assert small_grid.get(Position(5, 2)) is friend

    def test_rival_colour_blocks(self, small_grid: Grid) -> None:
        _food(small_grid, 5, 2, 2)
        rival = _insect(small_grid, 5, 3, Color.BLUE, Species.ANT)
        far = _food(small_grid, 5, 4, 4)
        butterfly = _insect(small_grid, 5, 1, Color.RED, Species.BUTTERFLY)
        assert travel(butterfly, Direction.E, small_grid) == 2
        assert small_grid.get(Position(5, 3)) is rival
        assert small_grid.get(Position(5, 4)) is far
        assert small_grid.get(butterfly.position) is None

    def test_grasshopper_jumps_over_rival(self, small_grid: Grid) -> None:
        _insect(small_grid, 4, 3, Color.BLUE, Species.ANT)
        adjacent = _food(small_grid, 4, 4, 9)
        _food(small_grid, 3, 3, 5)
        hopper = _insect(small_grid, 5, 3, Color.RED, Species.GRASSHOPPER)
        assert travel(hopper, Direction.N, small_grid) == 5
        assert small_grid.get(Position(4, 3)) is not None
        assert small_grid.get(Position(4, 4)) is adjacent

    def test_grasshopper_leaves_skipped_food(self, small_grid: Grid) -> None:
        skipped = _food(small_grid, 4, 3, 3)
        _food(small_grid, 3, 3, 5)
        hopper = _insect(small_grid, 5, 3, Color.RED, Species.GRASSHOPPER)
        assert travel(hopper, Direction.N, small_grid) == 5
        assert small_grid.get(Position(4, 3)) is skipped

    def test_travel_never_exceeds_visibility(self, rng: Generator) -> None:
        for _ in range(20):
            scenario = random_scenario(rng, 6, 6, 12)
            for insect in scenario.insects:
                direction = best_direction(insect, scenario.grid)
                seen = visible_value(insect, direction, scenario.grid)
                assert travel(insect, direction, scenario.grid) <= seen
                assert scenario.grid.get(insect.position) is None


class TestBestDirection:
    """Tests for strict-maximum direction selection."""

    def test_tie_goes_to_earlier_direction(self, small_grid: Grid) -> None:
        _food(small_grid, 3, 5, 5)
        _food(small_grid, 5, 3, 5)
        butterfly = _insect(small_grid, 3, 3, Color.RED, Species.BUTTERFLY)
        assert best_direction(butterfly, small_grid) == Direction.E

    def test_tie_south_before_west(self, small_grid: Grid) -> None:
        _food(small_grid, 3, 1, 5)
        _food(small_grid, 5, 3, 5)
        butterfly = _insect(small_grid, 3, 3, Color.RED, Species.BUTTERFLY)
        assert best_direction(butterfly, small_grid) == Direction.S

    def test_no_food_defaults_to_first_direction(self, small_grid: Grid) -> None:
        butterfly = _insect(small_grid, 3, 3, Color.RED, Species.BUTTERFLY)
        spider = _insect(small_grid, 2, 2, Color.RED, Species.SPIDER)
        assert best_direction(butterfly, small_grid) == Direction.N
        assert best_direction(spider, small_grid) == Direction.NE

    def test_ant_orthogonal_wins_diagonal_tie(self, small_grid: Grid) -> None:
        _food(small_grid, 5, 3, 4)
        _food(small_grid, 1, 5, 4)
        ant = _insect(small_grid, 3, 3, Color.RED, Species.ANT)
        assert best_direction(ant, small_grid) == Direction.S

    def test_strictly_larger_diagonal_wins(self, small_grid: Grid) -> None:
        _food(small_grid, 5, 3, 4)
        _food(small_grid, 1, 1, 5)
        ant = _insect(small_grid, 3, 3, Color.RED, Species.ANT)
        assert best_direction(ant, small_grid) == Direction.NW

    def test_grasshopper_ignores_adjacent_food(self, small_grid: Grid) -> None:
        _food(small_grid, 3, 4, 9)
        _food(small_grid, 1, 3, 1)
        hopper = _insect(small_grid, 3, 3, Color.RED, Species.GRASSHOPPER)
        assert best_direction(hopper, small_grid) == Direction.N

    def test_selection_does_not_mutate(self, small_grid: Grid) -> None:
        _food(small_grid, 3, 5, 5)
        ant = _insect(small_grid, 3, 3, Color.RED, Species.ANT)
        before = dict(small_grid.cells)
        best_direction(ant, small_grid)
        assert small_grid.cells == before
