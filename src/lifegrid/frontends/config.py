"""Configuration for the console driver."""

import argparse
from dataclasses import dataclass
from typing import Optional


@dataclass
class DriverConfig:
    """Console driver configuration."""

    # Universe settings
    rows: int = 50
    columns: int = 270
    vectorized: bool = False

    # Seeding
    seeds: int = 2000
    random_seed: Optional[int] = None
    pattern: Optional[str] = None

    # Loop settings
    generations: int = 0  # 0 runs until interrupted
    delay: float = 2.0
    clear: bool = True

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "DriverConfig":
        """Build a configuration from parsed command-line arguments."""
        return cls(
            rows=args.rows,
            columns=args.columns,
            vectorized=args.vectorized,
            seeds=args.seeds,
            random_seed=args.seed,
            pattern=args.pattern,
            generations=args.generations,
            delay=args.delay,
            clear=not args.no_clear,
        )
