import math

import pytest

from dspkit.variableshapeosc import VariableShapeOscillator

SR = 48000.0


def _render(osc, n):
    return [osc.process() for _ in range(n)]


def test_first_sample_is_offset_of_empty_state():
    osc = VariableShapeOscillator(SR)
    assert osc.process() == -1.0


def test_default_output_is_finite_and_bounded():
    out = _render(VariableShapeOscillator(SR), 5000)
    assert all(math.isfinite(v) for v in out)
    assert max(abs(v) for v in out) < 1.5


def test_two_instances_agree():
    a = _render(VariableShapeOscillator(SR), 500)
    b = _render(VariableShapeOscillator(SR), 500)
    assert a == b


@pytest.mark.parametrize("waveshape", [0.0, 1.0])
def test_symmetric_wave_has_small_mean(waveshape):
    osc = VariableShapeOscillator(SR)
    osc.set_sync_freq(480.0)
    osc.set_waveshape(waveshape)
    osc.set_pw(0.5)
    out = _render(osc, 10000)
    assert abs(sum(out) / len(out)) < 0.05


def test_square_reaches_both_levels():
    osc = VariableShapeOscillator(SR)
    osc.set_sync_freq(480.0)
    osc.set_waveshape(1.0)
    osc.set_pw(0.5)
    out = _render(osc, 1000)
    assert max(out) > 0.9
    assert min(out) < -0.9


def test_sync_frequency_is_clamped_to_quarter_rate():
    a = VariableShapeOscillator(SR)
    b = VariableShapeOscillator(SR)
    a.set_sync_freq(SR)
    b.set_sync_freq(SR / 4.0)
    assert _render(a, 200) == pytest.approx(_render(b, 200))


def test_sync_changes_output():
    plain = VariableShapeOscillator(SR)
    synced = VariableShapeOscillator(SR)
    for osc in (plain, synced):
        osc.set_freq(100.0)
        osc.set_sync_freq(330.0)
    synced.set_sync(True)
    assert _render(plain, 2000) != pytest.approx(_render(synced, 2000))


def test_sync_makes_output_follow_master_period():
    osc = VariableShapeOscillator(SR)
    osc.set_freq(SR / 128.0)
    osc.set_sync_freq(SR / 128.0 * 2.6)
    osc.set_sync(True)
    out = _render(osc, 600)
    assert out[200:328] == pytest.approx(out[328:456], abs=1e-6)


def test_master_frequency_without_sync_has_no_effect():
    a = VariableShapeOscillator(SR)
    b = VariableShapeOscillator(SR)
    b.set_freq(1234.0)
    assert _render(a, 500) == _render(b, 500)