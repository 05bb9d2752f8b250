"""Console driver for Conway's Game of Life."""

import argparse
import logging
import os
import random
import subprocess
import sys
import time
from typing import Optional

from ..core.patterns import PatternLibrary
from ..core.universe import Universe
from .config import DriverConfig

LOG = logging.getLogger(__name__)


def seed_randomly(universe: Universe, seeds: int, rng: random.Random) -> None:
    """Bring random cells to life.

    Coordinates are drawn independently, so the same cell may be picked
    more than once.

    Args:
        universe: Universe to seed
        seeds: Number of coordinates to draw
        rng: Random number generator
    """
    for _ in range(seeds):
        universe.set_live_cell_at(rng.randrange(universe.height), rng.randrange(universe.width))


def clear_console() -> None:
    """Clear the terminal using the platform's clear command."""
    command = ["cmd", "/c", "cls"] if os.name == "nt" else ["clear"]
    try:
        subprocess.run(command, check=True)
    except (OSError, subprocess.CalledProcessError) as e:
        LOG.warning("Could not clear console: %s", e)


class LifeConsole:
    """Runs a universe in the terminal, one frame per generation."""

    def __init__(self, config: DriverConfig, pattern_library: Optional[PatternLibrary] = None) -> None:
        """Initialize the console and seed its universe.

        Args:
            config: Driver configuration
            pattern_library: Library to resolve ``config.pattern`` from

        Raises:
            ValueError: If the configured pattern is unknown or does not fit
        """
        self.config = config
        self.pattern_library = pattern_library or PatternLibrary()
        self.universe = self._build_universe()

    def _build_universe(self) -> Universe:
        config = self.config
        universe = Universe(config.rows, config.columns, vectorized=config.vectorized)

        if config.pattern:
            pattern = self.pattern_library.get_pattern(config.pattern)
            if pattern is None:
                raise ValueError(f"Pattern '{config.pattern}' not found")
            rows, columns = pattern.size
            row_offset = max(0, (config.rows - rows) // 2)
            column_offset = max(0, (config.columns - columns) // 2)
            LOG.debug("Placing pattern '%s' at (%d, %d)", pattern.name, row_offset, column_offset)
            pattern.apply_to(universe, row_offset, column_offset)
        else:
            LOG.debug("Seeding %d random cells (seed: %s)", config.seeds, config.random_seed)
            seed_randomly(universe, config.seeds, random.Random(config.random_seed))

        return universe

    def render(self) -> None:
        """Print the current generation."""
        print(self.universe.grid)
        print(f"Generation {self.universe.generation}, population {self.universe.population}")

    def run(self) -> int:
        """Run the display loop.

        Runs ``config.generations`` ticks, or until interrupted when that
        is 0.

        Returns:
            Number of generations advanced
        """
        ticks = 0
        while self.config.generations == 0 or ticks < self.config.generations:
            if self.config.clear:
                clear_console()
            self.render()
            self.universe.create_next_generation()
            ticks += 1
            time.sleep(self.config.delay)
        return ticks


def list_patterns(library: PatternLibrary) -> None:
    """Print the available patterns grouped by category."""
    print("Available patterns:")
    for category, names in library.get_patterns_by_category().items():
        print(f"\n{category}:")
        for name in names:
            pattern = library.get_pattern(name)
            rows, columns = pattern.size
            print(f"  {name:<24} {rows}x{columns}  {pattern.description}")


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    defaults = DriverConfig()
    parser = argparse.ArgumentParser(
        description="Run Conway's Game of Life in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Random 50x270 universe seeded with 2000 cells, one frame every 2 seconds
  lifegrid-cli

  # Glider on a 20x20 board, 30 generations, fast
  lifegrid-cli -r 20 -c 20 --pattern Glider -n 30 -d 0.2

  # Reproducible random start
  lifegrid-cli --seed 42 -s 500

  # List available patterns
  lifegrid-cli --list-patterns
        """,
    )

    # Universe configuration
    parser.add_argument(
        "-r", "--rows", type=int, default=defaults.rows, help=f"Number of rows (default: {defaults.rows})"
    )

    parser.add_argument(
        "-c",
        "--columns",
        type=int,
        default=defaults.columns,
        help=f"Number of columns (default: {defaults.columns})",
    )

    parser.add_argument(
        "--vectorized",
        action="store_true",
        help="Compute generations with the vectorized neighbour count",
    )

    # Seeding
    parser.add_argument(
        "-s",
        "--seeds",
        type=int,
        default=defaults.seeds,
        help=f"Number of random cells to bring to life (default: {defaults.seeds})",
    )

    parser.add_argument("--seed", type=int, help="Random seed for reproducible starts")

    parser.add_argument(
        "--pattern",
        type=str,
        help="Start from a centred pattern instead of random cells",
    )

    # Loop configuration
    parser.add_argument(
        "-n",
        "--generations",
        type=int,
        default=defaults.generations,
        help="Number of generations to run, 0 runs until interrupted (default: 0)",
    )

    parser.add_argument(
        "-d",
        "--delay",
        type=float,
        default=defaults.delay,
        help=f"Seconds between generations (default: {defaults.delay})",
    )

    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Do not clear the terminal between frames",
    )

    # Output configuration
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print debug logging",
    )

    parser.add_argument(
        "--list-patterns",
        action="store_true",
        help="List all available patterns and exit",
    )

    return parser


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    errors = []

    if args.rows <= 0:
        errors.append("Rows must be positive")

    if args.columns <= 0:
        errors.append("Columns must be positive")

    if args.seeds < 0:
        errors.append("Seeds must be non-negative")

    if args.generations < 0:
        errors.append("Generations must be non-negative")

    if args.delay < 0:
        errors.append("Delay must be non-negative")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def main() -> int:
    """Main entry point for the console driver.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    library = PatternLibrary()

    if args.list_patterns:
        list_patterns(library)
        return 0

    if not validate_args(args):
        return 1

    if args.pattern and library.get_pattern(args.pattern) is None:
        print(f"Error: Pattern '{args.pattern}' not found")
        print(f"Available patterns: {', '.join(library.list_patterns())}")
        return 1

    try:
        console = LifeConsole(DriverConfig.from_args(args), library)
        console.run()
        return 0

    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
        return 1
    except Exception as e:
        print(f"Error: {e}")
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
