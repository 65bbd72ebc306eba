# gpsssim

A small discrete-event simulation of a queueing system, in the spirit of GPSS.

Transactions of several types arrive from generators. The time between
arrivals is exponentially distributed. Each transaction goes to a queue in
front of a group of workers. A worker takes a transaction from its queue and
processes it for an exponentially distributed time. The transaction then
passes to a terminator. Model time jumps from event to event until the
simulation time runs out.

## Model

- There are three transaction types. Their mean arrival intervals come from
  the first row of a 3×3 "RGB" parameter table. The built-in table is
  `[[7, 9, 7], [9, 11, 9], [11, 7, 5]]`.
- There are two worker groups, with one worker each.
  - Group 1 serves types 1 and 3.
  - Group 2 serves types 2 and 3.
  - The mean service times are sums over the table. A mean of `-1` means the
    group does not serve that type.
- Routing works as follows:
  - A transaction whose type number has its own worker group goes to that
    group's queue.
  - Any other transaction goes to the group with the lowest load, where load
    is (busy workers + queue length) / workers.
- By default the model runs for 500 time units.

## Command line

```
gpsssim [--log FILE] [--time T] [--seed N] [--interactive]
```

- `--log FILE` – file that receives the event log (default: `logger` in the
  current directory).
- `--time T` – model time to simulate (default: 500).
- `--seed N` – seed for the random generator. The same seed gives the same
  run.
- `--interactive` – ask for the nine table values on standard input
  (prompts such as `Write R1>>`) instead of using the built-in table.
  - Every value must be a positive integer.
  - If a value is not, the command prints `gpsssim: error input` and exits
    with status 1.

The command writes nothing to the terminal apart from the interactive
prompts. For every model time, the log shows the generators, queues and
workers twice:

- once as the current-events chain (CEC)
- once as the future-events chain (FEC)

At the end of the log come the statistics:

- each worker's load coefficient
- each queue's time-averaged length, with its maximum length

## Library use

```python
import io
import random

from gpsssim.conditions import (
    count_workers,
    default_rgb,
    format_conditions,
    mean_born_tranzakt,
    mean_processing_tranzakt,
)
from gpsssim.simulation import Simulation

rgb = default_rgb()
born = mean_born_tranzakt(rgb)
processing = mean_processing_tranzakt(rgb)
workers = count_workers()
print(format_conditions(rgb, born, processing, workers))

sim = Simulation(born, processing, workers, random.Random(1))
log = io.StringIO()
sim.run(log, 500)
print(log.getvalue()[-400:])
print(len(sim.terminator), "transactions finished")
```

The building blocks can also be used on their own:

| Module | Contents |
| --- | --- |
| `gpsssim.tranzakt` | `Tranzakt`: id, time and type; a negative time raises `ValueError`. |
| `gpsssim.generator` | `Generator`: produces one pending transaction of a type. |
| `gpsssim.queues` | `TranzaktQueue`: a FIFO line with length statistics. |
| `gpsssim.worker` | `Worker` and `Workers`: a single server and a group of servers. |
| `gpsssim.sink` | `Terminator`: collects finished transactions. |
| `gpsssim.conditions` | `default_rgb`, `read_rgb`, `mean_born_tranzakt`, `mean_processing_tranzakt`, `count_workers`, `format_conditions`. |

## Tests

```
pip install -e .[test]
pytest
```