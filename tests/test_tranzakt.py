import pytest

from gpsssim.tranzakt import Tranzakt


def test_str_format():
    assert str(Tranzakt(7, 1.5, 2)) == "Tranzakt type 2 with id=7 located in 1.5sec"


def test_str_whole_time_has_no_fraction():
    assert str(Tranzakt(1, 3.0, 1)).endswith("located in 3sec")


def test_negative_time_rejected():
    with pytest.raises(ValueError):
        Tranzakt(1, -0.5, 1)


def test_set_time():
    t = Tranzakt(1, 1.0, 1)
    t.time = 4.25
    assert t.time == 4.25


def test_set_negative_time_rejected_and_unchanged():
    t = Tranzakt(1, 2.0, 1)
    with pytest.raises(ValueError):
        t.time = -1.0
    assert t.time == 2.0


def test_fields():
    t = Tranzakt(5, 0.0, 3)
    assert (t.id, t.time, t.type) == (5, 0.0, 3)