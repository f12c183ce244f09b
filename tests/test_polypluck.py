import math
import random

import pytest

from dspkit.polypluck import PolyPluck

SR = 48000.0


def test_silent_without_trigger():
    poly = PolyPluck(SR, 4)
    assert all(poly.process(0.0, 60.0) == 0.0 for _ in range(500))


def test_trigger_makes_bounded_sound():
    random.seed(3)
    poly = PolyPluck(SR, 4)
    samples = [poly.process(1.0, 60.0)] + [poly.process(0.0, 60.0) for _ in range(2000)]
    assert all(math.isfinite(s) for s in samples)
    peak = max(abs(s) for s in samples)
    assert 0.01 < peak < 1.0


def test_decay_setting_changes_sound():
    def run(damp):
        random.seed(12)
        poly = PolyPluck(SR, 2)
        poly.set_decay(damp)
        return [poly.process(1.0, 57.0)] + [poly.process(0.0, 57.0) for _ in range(3000)]

    assert run(0.1) != run(0.9)


def test_invalid_voice_count_rejected():
    with pytest.raises(ValueError):
        PolyPluck(SR, 0)