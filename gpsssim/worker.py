"""Servers that process transactions, singly and in groups."""

from __future__ import annotations

import random
from collections.abc import Iterator, Sequence

from .sink import Terminator
from .tranzakt import Tranzakt


class Worker:
    """One server; ``means`` gives the mean service time per transaction type."""

    def __init__(
        self,
        num: int,
        type: int,
        means: Sequence[float],
        rng: random.Random | None = None,
    ) -> None:
        self.num = num
        self.type = type
        self.means = means
        self.tranzakt: Tranzakt | None = None
        self.all_time_working = 0.0
        self.last_time_logged = 0.0
        self._rng = rng if rng is not None else random.Random()

    def is_free(self) -> bool:
        return self.tranzakt is None

    def pop_tranzakt(self) -> Tranzakt:
        """Release the processed transaction, accounting for the busy time."""
        if self.tranzakt is None:
            raise LookupError("worker has no transaction")
        tranzakt = self.tranzakt
        self.all_time_working += tranzakt.time - self.last_time_logged
        self.tranzakt = None
        return tranzakt

    def set_tranzakt(self, tranzakt: Tranzakt) -> None:
        if tranzakt is None:
            raise ValueError("the transaction was not transferred")
        self.tranzakt = tranzakt
        self.last_time_logged = tranzakt.time

    def start_working(self) -> None:
        """Advance the held transaction by a random service time."""
        if self.tranzakt is None:
            raise LookupError("worker has no transaction")
        mean = self.means[self.tranzakt.type - 1]
        if mean < 0:
            raise ValueError("this worker cannot process this trazakt")
        self.tranzakt.time = self.tranzakt.time + self._rng.expovariate(1.0 / mean)

    def coefficient_load(self, end_time: float) -> float:
        """Fraction of ``end_time`` spent working."""
        if self.tranzakt is not None:
            self.all_time_working += end_time - self.last_time_logged
        return self.all_time_working / end_time

    def __str__(self) -> str:
        head = f"Worker type: {self.type} Num: {self.num}"
        if self.tranzakt is not None:
            return f"{head} {self.tranzakt}"
        return f"{head} Tranzakt: <void>"


class Workers:
    """A group of identical workers of one type."""

    def __init__(
        self,
        count: int,
        type: int,
        means: Sequence[float],
        rng: random.Random | None = None,
    ) -> None:
        self.type = type
        self.means = means
        rng = rng if rng is not None else random.Random()
        self._workers = [Worker(num, type, means, rng) for num in range(1, count + 1)]

    def __getitem__(self, n: int) -> Worker:
        if not 0 <= n < len(self._workers):
            raise IndexError("index workers out of range")
        return self._workers[n]

    def __len__(self) -> int:
        return len(self._workers)

    def __iter__(self) -> Iterator[Worker]:
        return iter(self._workers)

    def count_busy(self) -> int:
        return sum(not worker.is_free() for worker in self._workers)

    def count_free(self) -> int:
        return sum(worker.is_free() for worker in self._workers)

    def any_free(self) -> bool:
        return any(worker.is_free() for worker in self._workers)

    def any_busy(self) -> bool:
        return any(not worker.is_free() for worker in self._workers)

    def min_time(self) -> float | None:
        """Earliest finishing time among busy workers, or None if all are free."""
        return min(
            (worker.tranzakt.time for worker in self._workers if worker.tranzakt is not None),
            default=None,
        )

    def pop_tranzakt(self, time: float | None = None) -> Tranzakt | None:
        """Release the first transaction finished by ``time`` (any if ``time`` is None)."""
        for worker in self._workers:
            if worker.tranzakt is not None and (time is None or worker.tranzakt.time <= time):
                return worker.pop_tranzakt()
        return None

    def promote_to_terminate(self, terminator: Terminator, time: float) -> None:
        """Move every transaction finished by ``time`` to ``terminator``."""
        for worker in self._workers:
            if worker.tranzakt is not None and worker.tranzakt.time <= time:
                terminator.push(worker.pop_tranzakt())

    def push_tranzakt(self, tranzakt: Tranzakt) -> None:
        """Hand a transaction to the first free worker and start service."""
        worker = next((w for w in self._workers if w.is_free()), None)
        if worker is None:
            raise RuntimeError("can not push, because there are no places")
        worker.set_tranzakt(tranzakt)
        worker.start_working()

    def __str__(self) -> str:
        if not self._workers:
            return "<void>"
        return "".join(f"{worker}\n" for worker in self._workers)