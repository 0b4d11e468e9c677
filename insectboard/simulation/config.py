"""Config — load run parameters from YAML files.

Input limits, file locations and the random-scenario knobs live in YAML
and are parsed into a typed dataclass here.  Missing keys fall back to
the defaults below.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml


@dataclass
class SimulationConfig:
    """Top-level run configuration.

    Attributes:
        seed: RNG seed for generated scenarios.
        min_board_size: Smallest accepted board side length.
        max_board_size: Largest accepted board side length.
        min_food_points: Fewest food markers an input may declare.
        max_food_points: Most food markers an input may declare.
        min_insects: Fewest insects an input may declare.
        max_insects: Most insects an input may declare.
        input_path: Scenario file read by the CLI.
        output_path: Result file written by the CLI.
        random_board_size: Board side length for generated scenarios.
        random_insects: Insect count for generated scenarios.
        random_food_points: Food marker count for generated scenarios.
        max_food_value: Upper bound of a generated food marker's value.
    """

    seed: int = 42

    # Input limits
    min_board_size: int = 4
    max_board_size: int = 1000
    min_food_points: int = 1
    max_food_points: int = 200
    min_insects: int = 1
    max_insects: int = 16

    input_path: str = "input.txt"
    output_path: str = "output.txt"

    # Generated scenarios
    random_board_size: int = 10
    random_insects: int = 6
    random_food_points: int = 20
    max_food_value: int = 10

    @classmethod
    def from_yaml(cls, path: str | Path) -> SimulationConfig:
        """Load configuration from a YAML file.

        Args:
            path: Path to the YAML config file.

        Returns:
            A populated SimulationConfig instance.

        Raises:
            FileNotFoundError: If the config file does not exist.
        """
        path = Path(path)
        with path.open("r") as f:
            data = yaml.safe_load(f) or {}

        return cls(
            seed=data.get("seed", cls.seed),
            min_board_size=data.get("min_board_size", cls.min_board_size),
            max_board_size=data.get("max_board_size", cls.max_board_size),
            min_food_points=data.get("min_food_points", cls.min_food_points),
            max_food_points=data.get("max_food_points", cls.max_food_points),
            min_insects=data.get("min_insects", cls.min_insects),
            max_insects=data.get("max_insects", cls.max_insects),
            input_path=data.get("input_path", cls.input_path),
            output_path=data.get("output_path", cls.output_path),
            random_board_size=data.get(
                "random_board_size",
                cls.random_board_size,
            ),
            random_insects=data.get("random_insects", cls.random_insects),
            random_food_points=data.get(
                "random_food_points",
                cls.random_food_points,
            ),
            max_food_value=data.get("max_food_value", cls.max_food_value),
        )
