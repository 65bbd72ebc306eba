"""Waiting line of transactions in front of a group of workers."""

from __future__ import annotations

from collections.abc import Iterator

from .tranzakt import Tranzakt
from .worker import Workers


class TranzaktQueue:
    """FIFO of transactions that tracks its length statistics."""

    def __init__(self) -> None:
        self._items: list[Tranzakt] = []
        self.last_time_entry_or_exit = 0.0
        self.length_area = 0.0
        self.max_len = 0

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Tranzakt]:
        return iter(self._items)

    def __getitem__(self, n: int) -> Tranzakt:
        if not 0 <= n < len(self._items):
            raise IndexError("index queue out of range")
        return self._items[n]

    def push(self, tranzakt: Tranzakt) -> None:
        """Append a transaction at the end of the line."""
        self.last_time_entry_or_exit = tranzakt.time
        self._items.append(tranzakt)

    def pop_tranzakt(self, n: int = 0) -> Tranzakt:
        """Remove and return the transaction at position ``n``."""
        if not 0 <= n < len(self._items):
            raise IndexError("index error")
        tranzakt = self._items.pop(n)
        self.last_time_entry_or_exit = tranzakt.time
        return tranzakt

    def promote_to_workers(self, workers: Workers) -> None:
        """Hand waiting transactions to free workers, front of the line first."""
        while workers.any_free() and self._items:
            tranzakt = self._items.pop(0)
            self.last_time_entry_or_exit = tranzakt.time
            workers.push_tranzakt(tranzakt)

    def _note_length(self, time: float) -> None:
        self.max_len = max(self.max_len, len(self._items))
        self.length_area += (time - self.last_time_entry_or_exit) * len(self._items)

    def shift_time(self, time: float) -> None:
        """Move every waiting transaction to model time ``time``."""
        self._note_length(time)
        for tranzakt in self._items:
            tranzakt.time = time

    def average_length(self, end_time: float) -> float:
        """Time-averaged queue length over ``end_time``."""
        self._note_length(end_time)
        return self.length_area / end_time

    def show(self) -> str:
        """Text listing of the queue as written to the simulation log."""
        if not self._items:
            return "<void>\n\n"
        lines = "".join(
            f"Tranzakt with id={tranzakt.id} type={tranzakt.type} in queue position={position}\n"
            for position, tranzakt in enumerate(self._items, start=1)
        )
        return lines + "\n"

    def __str__(self) -> str:
        if not self._items:
            return "<void>"
        return "\n".join(map(str, self._items))