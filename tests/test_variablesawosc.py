import pytest

from dspkit.variablesawosc import VariableSawOscillator

SR = 48000.0


def render(osc, n):
    return [osc.process() for _ in range(n)]


def test_first_sample_is_offset_only():
    osc = VariableSawOscillator(SR)
    assert osc.process() == pytest.approx(-1.0 / 1.2)


def test_slope_output_bounded():
    osc = VariableSawOscillator(SR)
    osc.set_pw(0.5)
    out = render(osc, 5000)
    assert all(abs(v) <= 1.0 for v in out)
    assert max(out) > 0.5
    assert min(out) < -0.5


def test_notch_output_bounded():
    osc = VariableSawOscillator(SR)
    osc.set_waveshape(0.0)
    osc.set_pw(0.3)
    assert all(abs(v) <= 1.25 for v in render(osc, 5000))


def test_pulse_width_clamped_low():
    a = VariableSawOscillator(SR)
    b = VariableSawOscillator(SR)
    a.set_pw(-5.0)
    b.set_pw(0.0)
    assert render(a, 1000) == render(b, 1000)


def test_pulse_width_clamped_high():
    a = VariableSawOscillator(SR)
    b = VariableSawOscillator(SR)
    a.set_pw(5.0)
    b.set_pw(1.0)
    assert render(a, 1000) == render(b, 1000)


def test_pulse_width_fixed_at_high_frequency():
    a = VariableSawOscillator(SR)
    b = VariableSawOscillator(SR)
    for osc in (a, b):
        osc.set_freq(SR)
    a.set_pw(0.1)
    b.set_pw(0.9)
    assert render(a, 200) == render(b, 200)


def test_periodic_output():
    osc = VariableSawOscillator(SR)
    osc.set_freq(SR / 100.0)
    osc.set_pw(0.4)
    out = render(osc, 400)
    assert out[100:200] == pytest.approx(out[300:400], abs=1e-3)


def test_waveshape_changes_output():
    a = VariableSawOscillator(SR)
    b = VariableSawOscillator(SR)
    b.set_waveshape(0.0)
    assert render(a, 500) != render(b, 500)