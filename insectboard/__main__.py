"""Entry point for ``python -m insectboard``.

Loads the YAML config, builds a scenario from the input file (or at
random), resolves every insect's move and writes one result line per
insect to the output file.  With ``--view`` the moves are played out in
a Pygame window instead.
"""

from __future__ import annotations

import argparse
import logging
import pathlib

import numpy as np

from insectboard.errors import InsectBoardError
from insectboard.simulation.config import SimulationConfig
from insectboard.simulation.engine import format_results
from insectboard.simulation.scenario import Scenario, load_scenario, random_scenario

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG = (
    pathlib.Path(__file__).resolve().parent.parent / "config" / "default.yaml"
)


def build_scenario(config: SimulationConfig, *, randomise: bool) -> Scenario:
    """Load the configured input file or generate a seeded random board."""
    if randomise:
        rng = np.random.default_rng(config.seed)
        return random_scenario(
            rng,
            config.random_board_size,
            config.random_insects,
            config.random_food_points,
            max_food_value=config.max_food_value,
        )
    return load_scenario(config.input_path, config)


def main(argv: list[str] | None = None) -> None:
    """Parse CLI args, resolve the board, write results or launch the viewer."""
    parser = argparse.ArgumentParser(
        prog="insectboard",
        description="Insect Board - one-move insect foraging simulator",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=pathlib.Path,
        default=_DEFAULT_CONFIG,
        help="Path to YAML config file (default: config/default.yaml)",
    )
    parser.add_argument(
        "-i",
        "--input",
        type=pathlib.Path,
        help="Scenario file to read (overrides input_path)",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=pathlib.Path,
        help="Result file to write (overrides output_path)",
    )
    parser.add_argument(
        "--random",
        action="store_true",
        help="Generate a random scenario from the config seed",
    )
    parser.add_argument(
        "--view",
        action="store_true",
        help="Play the moves in a Pygame window instead of writing output",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    config = (
        SimulationConfig.from_yaml(args.config)
        if args.config.exists()
        else SimulationConfig()
    )
    if args.input is not None:
        config.input_path = str(args.input)
    if args.output is not None:
        config.output_path = str(args.output)

    if args.view:
        from insectboard.ui.pygame_client import PygameRenderer

        scenario = build_scenario(config, randomise=args.random)
        PygameRenderer(engine=scenario.engine()).run()
        return

    output = pathlib.Path(config.output_path)
    try:
        scenario = build_scenario(config, randomise=args.random)
        results = scenario.engine().run()
    except InsectBoardError as e:
        logger.error("Setup failed: %s", e)
        output.write_text(f"{e}\n")
        return
    output.write_text(format_results(results))
    logger.info("Wrote %d results to %s", len(results), output)


if __name__ == "__main__":
    main()
