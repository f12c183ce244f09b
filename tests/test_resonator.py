import math

import pytest

from dspkit.resonator import FilterMode, Resonator, ResonatorSvf


def _impulse_response(res, scale, count):
    return [res.process(scale)] + [res.process(0.0) for _ in range(count)]


def test_silent_input_gives_silence():
    res = Resonator(0.015, 24, 48000.0)
    assert all(res.process(0.0) == 0.0 for _ in range(100))


def test_incomplete_batch_is_not_rendered():
    res = Resonator(0.015, 3, 48000.0)
    assert all(x == 0.0 for x in _impulse_response(res, 1.0, 100))


def test_impulse_rings_then_decays():
    res = Resonator(0.015, 24, 48000.0)
    res.set_damping(0.0)
    outs = _impulse_response(res, 1.0, 6000)
    assert all(math.isfinite(x) for x in outs)
    early = sum(x * x for x in outs[:1000])
    late = sum(x * x for x in outs[5000:])
    assert early > 0.0
    assert late < early


def test_response_is_linear():
    a = _impulse_response(Resonator(0.015, 24, 48000.0), 1.0, 300)
    b = _impulse_response(Resonator(0.015, 24, 48000.0), 2.0, 300)
    assert b == pytest.approx([2.0 * x for x in a], rel=1e-9, abs=1e-12)


def test_structure_is_clamped():
    a = Resonator(0.015, 24, 48000.0)
    b = Resonator(0.015, 24, 48000.0)
    a.set_structure(5.0)
    b.set_structure(1.0)
    assert _impulse_response(a, 1.0, 200) == _impulse_response(b, 1.0, 200)


def test_svf_low_pass_passes_dc():
    svf = ResonatorSvf(1)
    out = 0.0
    for _ in range(5000):
        out = svf.process([0.01], [0.7], [1.0], 1.0, FilterMode.LOW_PASS)
    assert out == pytest.approx(1.0, abs=1e-6)


def test_svf_band_pass_blocks_dc():
    svf = ResonatorSvf(1)
    out = 1.0
    for _ in range(5000):
        out = svf.process([0.01], [0.7], [1.0], 1.0, FilterMode.BAND_PASS)
    assert abs(out) < 1e-6


def test_svf_reset_restores_initial_state():
    svf = ResonatorSvf(2)
    args = ([0.01, 0.02], [2.0, 3.0], [1.0, 0.5])
    first = [svf.process(*args, 1.0) for _ in range(10)]
    svf.reset()
    again = [svf.process(*args, 1.0) for _ in range(10)]
    assert first == again


def test_svf_rejects_wrong_lengths():
    svf = ResonatorSvf(2)
    with pytest.raises(ValueError):
        svf.process([0.01], [1.0], [1.0], 1.0)


def test_svf_rejects_empty_batch():
    with pytest.raises(ValueError):
        ResonatorSvf(0)