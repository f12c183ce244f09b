import math
import random

from dspkit.drip import Drip


def _run(drip, count):
    return [drip.process() for _ in range(count)]


def test_output_is_finite_and_audible():
    random.seed(3)
    drip = Drip(8000.0, 0.5)
    outs = _run(drip, 2000)
    assert all(math.isfinite(x) for x in outs)
    assert max(abs(x) for x in outs) > 0.0


def test_same_seed_gives_same_output():
    random.seed(11)
    a = _run(Drip(8000.0, 0.5), 500)
    random.seed(11)
    b = _run(Drip(8000.0, 0.5), 500)
    assert a == b


def test_sound_dies_after_dettack():
    random.seed(7)
    drip = Drip(8000.0, 0.5)
    _run(drip, 4000)
    tail = _run(drip, 40000)
    assert max(abs(x) for x in tail[-100:]) < 1e-12


def test_trigger_restarts_from_initial_state():
    used = Drip(8000.0, 0.5)
    random.seed(1)
    _run(used, 700)
    random.seed(5)
    a = [used.process(True)] + _run(used, 50)

    fresh = Drip(8000.0, 0.5)
    random.seed(5)
    b = [fresh.process(True)] + _run(fresh, 50)
    assert a == b