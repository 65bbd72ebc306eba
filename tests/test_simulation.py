import io
import random

import pytest

from gpsssim.conditions import count_workers, default_rgb, mean_born_tranzakt, mean_processing_tranzakt
from gpsssim.simulation import Simulation
from gpsssim.tranzakt import Tranzakt


def _make(seed=1):
    rgb = default_rgb()
    return Simulation(
        mean_born_tranzakt(rgb),
        mean_processing_tranzakt(rgb),
        count_workers(),
        random.Random(seed),
    )


def _run(seed=1, until=100.0):
    sim = _make(seed)
    log = io.StringIO()
    sim.run(log, until)
    return sim, log.getvalue()


def _tranzakt(tid, ttype):
    return Tranzakt(tid, 1.0, ttype)


def test_structure_built_from_parameters():
    sim = _make()
    assert len(sim.generators) == 3
    assert len(sim.workers) == 2
    assert len(sim.queues) == 2
    assert [g.type for g in sim.generators] == [1, 2, 3]


def test_log_starts_at_time_zero():
    _, text = _run()
    lines = text.splitlines()
    assert lines[0] == "<<<<<<<<<<<<<<<<<<<<<<<CEC>>>>>>>>>>>>>>>>>>>>>>>"
    assert lines[1] == "Model time: 0"


def test_each_step_has_current_and_future_sections():
    _, text = _run()
    assert text.count("CEC>>") == text.count("FEC>>")
    assert text.count("CEC>>") > 1


def test_statistics_written_at_end():
    _, text = _run()
    assert "------COFFICIENT LOAD WORKERS------" in text
    assert "Coefficient load workers type=1 worker num=1: " in text
    assert "Average length queue type=2: " in text
    assert text.rstrip("\n").splitlines()[-1].startswith("Average length queue type=2: ")


def test_same_seed_same_log():
    _, first = _run(seed=5)
    _, second = _run(seed=5)
    assert first == second
    assert first.count("Model time: ") > 2


def test_terminated_tranzakts_finished_in_time():
    until = 200.0
    sim, _ = _run(seed=2, until=until)
    finished = list(sim.terminator)
    assert finished
    assert all(t.time < until for t in finished)
    ids = [t.id for t in finished]
    assert len(ids) == len(set(ids))


def test_queues_only_hold_servable_types():
    sim, _ = _run(seed=4, until=300.0)
    for worker_type, queue in enumerate(sim.queues, start=1):
        assert all(t.type in (worker_type, 3) for t in queue)
    for worker_type, group in enumerate(sim.workers, start=1):
        assert all(w.tranzakt.type in (worker_type, 3) for w in group if w.tranzakt is not None)


def test_ids_are_unique_across_system():
    sim, _ = _run(seed=6, until=150.0)
    ids = [t.id for t in sim.terminator]
    ids += [t.id for queue in sim.queues for t in queue]
    ids += [w.tranzakt.id for group in sim.workers for w in group if w.tranzakt is not None]
    ids += [g.id for g in sim.generators if not g.is_free()]
    assert len(ids) == len(set(ids))


def test_average_queue_length_non_negative():
    sim, _ = _run(seed=7, until=120.0)
    for queue in sim.queues:
        assert queue.length_area >= 0.0
        assert queue.max_len >= len(queue)


def test_type_three_goes_to_less_loaded_worker_group():
    sim = _make()
    sim.queues[0].push(_tranzakt(1, 1))
    sim.queues[0].push(_tranzakt(2, 1))
    target = sim._route(_tranzakt(3, 3))
    assert target == 2


@pytest.mark.parametrize("ttype", [1, 2])
def test_own_type_routed_directly(ttype):
    sim = _make()
    assert sim._route(_tranzakt(1, ttype)) == ttype