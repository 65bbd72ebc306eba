"""Source of transactions with exponentially distributed arrivals."""

from __future__ import annotations

import random

from .tranzakt import Tranzakt


class Generator:
    """Holds the next transaction of one type until it is released."""

    def __init__(self, mean_born: float, tranzakt_type: int, rng: random.Random | None = None) -> None:
        self.mean_born = mean_born
        self.type = tranzakt_type
        self.id = 0
        self.time = 0.0
        self.last_time_born = 0.0
        self._rng = rng if rng is not None else random.Random()

    def is_free(self) -> bool:
        """True when no transaction is waiting to be born."""
        return self.id == 0 and self.time == 0

    def reset(self) -> None:
        """Forget the pending transaction."""
        self.id = 0
        self.time = 0.0

    def update(self, new_id: int, shift: bool = True) -> None:
        """Schedule a new transaction after the previous birth time."""
        self.id = new_id
        base = self.last_time_born if shift else 0.0
        self.time = base + self._rng.expovariate(1.0 / self.mean_born)
        self.last_time_born = self.time

    def pop_tranzakt(self) -> Tranzakt:
        """Release the pending transaction and become free."""
        tranzakt = Tranzakt(self.id, self.time, self.type)
        self.reset()
        return tranzakt

    def __str__(self) -> str:
        return str(Tranzakt(self.id, self.time, self.type))