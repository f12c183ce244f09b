import random

from dspkit.maytrig import may_trigger


def test_probability_one_always_fires():
    assert all(may_trigger(1.0) for _ in range(1000))


def test_negative_probability_never_fires():
    assert not any(may_trigger(-0.1) for _ in range(1000))


def test_half_probability_fires_about_half():
    random.seed(7)
    hits = sum(may_trigger(0.5) for _ in range(10000))
    assert 4500 < hits < 5500