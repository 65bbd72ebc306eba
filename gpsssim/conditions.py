"""Initial conditions of the model: colour matrix and derived parameters."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from typing import TextIO

TIME_IMITATION = 500
COUNT_TR_TYPE = 3
COUNT_TYPE_WORKER = 2
COUNT_WORKER1 = 1
COUNT_WORKER2 = 1

_ROWS = 3
_CHANNELS = "RGB"


def default_rgb() -> list[list[int]]:
    """The built-in colour matrix (rows R1G1B1, R2G2B2, R3G3B3)."""
    return [[7, 9, 7], [9, 11, 9], [11, 7, 5]]


def read_rgb(
    input_func: Callable[[], str] | None = None,
    output: TextIO | None = None,
) -> list[list[int]]:
    """Ask for every matrix value; each must be a positive integer."""
    input_func = input_func if input_func is not None else input
    output = output if output is not None else sys.stdout
    rgb = []
    for row in range(1, _ROWS + 1):
        values = []
        for channel in _CHANNELS:
            output.write(f"Write {channel}{row}>>")
            output.flush()
            try:
                value = int(input_func().strip())
            except (ValueError, EOFError) as exc:
                raise ValueError("error input") from exc
            if value <= 0:
                raise ValueError("error input")
            values.append(value)
        rgb.append(values)
    return rgb


def mean_born_tranzakt(rgb: Sequence[Sequence[int]]) -> list[int]:
    """Mean inter-arrival time for each transaction type."""
    return list(rgb[0][:COUNT_TR_TYPE])


def mean_processing_tranzakt(rgb: Sequence[Sequence[int]]) -> list[list[int]]:
    """Mean service time per worker type and transaction type; -1 means not served."""
    third = sum(rgb[2])
    return [
        [sum(rgb[0]), -1, third + rgb[0][1]],
        [-1, sum(rgb[1]), third + rgb[0][2]],
    ]


def count_workers() -> list[int]:
    """Number of workers of each type."""
    return [COUNT_WORKER1, COUNT_WORKER2]


def format_conditions(
    rgb: Sequence[Sequence[int]],
    mean_born: Sequence[int],
    mean_processing: Sequence[Sequence[int]],
    workers: Sequence[int],
) -> str:
    """Printable summary of all model conditions."""

    def row(values: Sequence[int]) -> str:
        return "".join(f"{value:3d}" for value in values) + "\n"

    parts = ["-----MASS_RGB-----\n"]
    parts.extend(row(values) for values in rgb)
    parts.append("\n-----MASS_MEAN_BORN_TRANZAKT-----\n")
    parts.append(row(mean_born))
    parts.append("\n-----MASS_MEAN_PROCESSING_TRANZAKT-----\n")
    parts.extend(row(values) for values in mean_processing)
    parts.append("\n-----COUNT_WORKERS-----\n")
    parts.extend(f"Worker{number}: {count}\n" for number, count in enumerate(workers, start=1))
    return "".join(parts)