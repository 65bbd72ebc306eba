"""Transactions that move through the simulated system."""

from __future__ import annotations


class Tranzakt:
    """A single transaction: identifier, current model time and type."""

    __slots__ = ("id", "_time", "type")

    def __init__(self, id: int, time: float, type: int) -> None:
        if time < 0:
            raise ValueError("time cannot be negative")
        self.id = id
        self._time = float(time)
        self.type = type

    @property
    def time(self) -> float:
        """Model time at which the transaction is located."""
        return self._time

    @time.setter
    def time(self, value: float) -> None:
        if value < 0:
            raise ValueError("time cannot be negative")
        self._time = float(value)

    def __repr__(self) -> str:
        return f"Tranzakt(id={self.id!r}, time={self._time!r}, type={self.type!r})"

    def __str__(self) -> str:
        return f"Tranzakt type {self.type} with id={self.id} located in {self._time:g}sec"