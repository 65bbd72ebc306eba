"""Collector of transactions that have left the system."""

from __future__ import annotations

from collections.abc import Iterator

from .tranzakt import Tranzakt


class Terminator:
    """Keeps finished transactions in the order they arrived."""

    HEADER = "-----TRANZAKTS REACHED THE END-----"

    def __init__(self) -> None:
        self._finished: list[Tranzakt] = []

    def push(self, tranzakt: Tranzakt) -> None:
        """Record a finished transaction."""
        self._finished.append(tranzakt)

    def __len__(self) -> int:
        return len(self._finished)

    def __iter__(self) -> Iterator[Tranzakt]:
        return iter(self._finished)

    def __str__(self) -> str:
        body = "\n".join(map(str, self._finished)) if self._finished else "<void>"
        return f"{self.HEADER}\n{body}"