"""Command line entry point that runs the model and writes its log."""

from __future__ import annotations

import argparse
import random
import sys

from .conditions import (
    TIME_IMITATION,
    count_workers,
    default_rgb,
    mean_born_tranzakt,
    mean_processing_tranzakt,
    read_rgb,
)
from .simulation import Simulation


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gpsssim", description="Run the queueing model.")
    parser.add_argument("--log", default="logger", help="file that receives the event log")
    parser.add_argument("--time", type=float, default=float(TIME_IMITATION), help="model time")
    parser.add_argument("--seed", type=int, default=None, help="seed of the random generator")
    parser.add_argument(
        "--interactive", action="store_true", help="read the colour matrix from standard input"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    try:
        rgb = read_rgb(input) if args.interactive else default_rgb()
    except ValueError as exc:
        print(f"gpsssim: {exc}", file=sys.stderr)
        return 1

    simulation = Simulation(
        mean_born_tranzakt(rgb),
        mean_processing_tranzakt(rgb),
        count_workers(),
        random.Random(args.seed),
    )
    with open(args.log, "w", encoding="utf-8") as log:
        simulation.run(log, args.time)
    return 0


if __name__ == "__main__":
    sys.exit(main())