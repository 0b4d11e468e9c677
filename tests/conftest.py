"""Shared fixtures for the Insect Board test suite."""

from __future__ import annotations

import numpy as np
import pytest
from numpy.random import Generator

from insectboard.board.grid import Grid
from insectboard.simulation.config import SimulationConfig


@pytest.fixture
def rng() -> Generator:
    """A deterministic random generator for reproducible tests."""
    return np.random.default_rng(seed=12345)


@pytest.fixture
def small_grid() -> Grid:
    """An empty 5x5 board for fast tests."""
    return Grid(size=5)


@pytest.fixture
def default_config() -> SimulationConfig:
    """Default config (no YAML file needed)."""
    return SimulationConfig()
