"""Discrete-event simulation of generators, queues and workers."""

from __future__ import annotations

import random
from collections.abc import Sequence
from typing import TextIO

from .generator import Generator
from .queues import TranzaktQueue
from .sink import Terminator
from .tranzakt import Tranzakt
from .worker import Workers

_CEC = "<<<<<<<<<<<<<<<<<<<<<<<CEC>>>>>>>>>>>>>>>>>>>>>>>"
_FEC = "<<<<<<<<<<<<<<<<<<<<<<<FEC>>>>>>>>>>>>>>>>>>>>>>>"
_RULE = "###################################################"


class Simulation:
    """Transactions born by generators, queued per worker type and served."""

    def __init__(
        self,
        mean_born: Sequence[float],
        mean_processing: Sequence[Sequence[float]],
        count_workers: Sequence[int],
        rng: random.Random | None = None,
    ) -> None:
        rng = rng if rng is not None else random.Random()
        self._last_id = 0
        self.generators = [
            Generator(mean, tranzakt_type, rng)
            for tranzakt_type, mean in enumerate(mean_born, start=1)
        ]
        self.workers = [
            Workers(count, worker_type, mean_processing[worker_type - 1], rng)
            for worker_type, count in enumerate(count_workers, start=1)
        ]
        self.queues = [TranzaktQueue() for _ in self.workers]
        self.terminator = Terminator()

    def run(self, log: TextIO, time_simulation: float) -> None:
        """Simulate until ``time_simulation``, writing the event log to ``log``."""
        while (current_time := self._next_time()) < time_simulation:
            for queue in self.queues:
                queue.shift_time(current_time)

            log.write(self._snapshot(_CEC, current_time))

            self._generate()
            for group in self.workers:
                group.promote_to_terminate(self.terminator, current_time)
            self._generators_to_queues(current_time)
            for group, queue in zip(self.workers, self.queues):
                if group.any_free():
                    queue.promote_to_workers(group)
            self._generate()

            log.write(self._snapshot(_FEC, current_time))
        log.write(self._statistics(time_simulation))

    def _next_time(self) -> float:
        min_time: float | None = None
        for generator in self.generators:
            if not generator.is_free() and (min_time is None or generator.time < min_time):
                min_time = generator.time
        for group in self.workers:
            group_min = group.min_time()
            if group_min is not None and (min_time is None or group_min < min_time):
                min_time = group_min
        return 0.0 if min_time is None else min_time

    def _generate(self) -> None:
        for generator in self.generators:
            if generator.is_free():
                self._last_id += 1
                generator.update(self._last_id)

    def _route(self, tranzakt: Tranzakt) -> int:
        """Worker type that receives ``tranzakt``: its own, else the least loaded."""
        if tranzakt.type <= len(self.workers):
            return tranzakt.type
        best_type = 1
        best_load: float | None = None
        for worker_type, (group, queue) in enumerate(zip(self.workers, self.queues), start=1):
            load = (group.count_busy() + len(queue)) / len(group)
            if best_load is None or load < best_load:
                best_load = load
                best_type = worker_type
        return best_type

    def _generators_to_queues(self, time: float) -> None:
        for generator in self.generators:
            if generator.time <= time and not generator.is_free():
                tranzakt = generator.pop_tranzakt()
                self.queues[self._route(tranzakt) - 1].push(tranzakt)

    def _snapshot(self, title: str, current_time: float) -> str:
        parts = [f"{title}\n", f"Model time: {current_time:g}\n"]

        parts.append("-----GENERATOR-----\n")
        for generator in self.generators:
            if generator.is_free():
                parts.append("<void>")
            else:
                verb = "created" if generator.time == current_time else "will be created"
                parts.append(
                    f"Tranzakt with id={generator.id} type={generator.type} "
                    f"{verb} in time={generator.time:g}"
                )
            parts.append("\n")

        parts.append("\n-----QUEUES IN SIMULATION-----\n")
        for number, queue in enumerate(self.queues, start=1):
            parts.append(f"QUEUE{number}:\n")
            parts.append(queue.show())

        parts.append("\n-----WORKERS IN SIMULATION-----\n")
        for worker_type, group in enumerate(self.workers, start=1):
            for num, worker in enumerate(group, start=1):
                tranzakt = worker.tranzakt
                if tranzakt is None:
                    parts.append(f"Worker type: {worker.type} Num: {worker.num}Tranzakt: <void>\n")
                    continue
                verb = "finished" if tranzakt.time == current_time else "didn't finish"
                parts.append(
                    f"Worker type={worker_type} num={num} {verb} Tranzakt with id={tranzakt.id} "
                    f"type={tranzakt.type} in {tranzakt.time:g}\n"
                )
            parts.append("\n")
        parts.append("\n")

        parts.append(f"{_RULE}\n\n")
        return "".join(parts)

    def _statistics(self, end_time: float) -> str:
        parts = ["------COFFICIENT LOAD WORKERS------\n"]
        for worker_type, group in enumerate(self.workers, start=1):
            for num, worker in enumerate(group, start=1):
                parts.append(
                    f"Coefficient load workers type={worker_type} worker num={num}: "
                    f"{worker.coefficient_load(end_time):g}\n"
                )
        parts.append("\n------AVERAGE QUEUE LENGTH------\n")
        for worker_type, queue in enumerate(self.queues, start=1):
            average = queue.average_length(end_time)
            parts.append(
                f"Average length queue type={worker_type}: {average:g} (MAX_LEN={queue.max_len})\n"
            )
        return "".join(parts)