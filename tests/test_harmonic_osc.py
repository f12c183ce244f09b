import math

import pytest

from dspkit.harmonic_osc import HarmonicOscillator

SR = 48000.0


def render(osc, n):
    return [osc.process() for _ in range(n)]


def test_default_is_a_pure_sine():
    osc = HarmonicOscillator(SR)
    f = 440.0 / SR
    for n, value in enumerate(render(osc, 200), start=1):
        phase = math.fmod(n * f, 1.0)
        assert value == pytest.approx(math.sin(2.0 * math.pi * phase), abs=1e-5)


def test_nyquist_frequency_attenuates_to_silence():
    osc = HarmonicOscillator(SR)
    osc.set_freq(SR)
    assert all(v == pytest.approx(0.0, abs=1e-12) for v in render(osc, 100))


def test_short_amplitude_list_rejected():
    osc = HarmonicOscillator(SR, 8)
    with pytest.raises(ValueError):
        osc.set_amplitudes([0.1] * 7)


def test_invalid_harmonic_count_rejected():
    with pytest.raises(ValueError):
        HarmonicOscillator(SR, 0)


def test_output_bounded_by_amplitude_sum():
    osc = HarmonicOscillator(SR, 4)
    amps = [0.4, 0.3, 0.2, 0.1]
    osc.set_amplitudes(amps)
    osc.set_freq(220.0)
    assert all(abs(v) <= sum(amps) + 1e-6 for v in render(osc, 2000))


def test_single_amp_out_of_range_ignored():
    a = HarmonicOscillator(SR, 4)
    b = HarmonicOscillator(SR, 4)
    b.set_single_amp(0.7, 4)
    b.set_single_amp(0.7, -1)
    assert render(a, 300) == render(b, 300)


def test_single_amp_changes_output():
    a = HarmonicOscillator(SR, 4)
    b = HarmonicOscillator(SR, 4)
    b.set_single_amp(0.5, 2)
    assert render(a, 300) != render(b, 300)


def test_first_index_below_one_means_one():
    a = HarmonicOscillator(SR, 4)
    b = HarmonicOscillator(SR, 4)
    a.set_first_harm_idx(3)
    b.set_first_harm_idx(3)
    a.set_first_harm_idx(-2)
    b.set_first_harm_idx(1)
    assert render(a, 300) == pytest.approx(render(b, 300))


def test_higher_first_index_bounded():
    osc = HarmonicOscillator(SR, 4)
    osc.set_first_harm_idx(3)
    assert all(abs(v) <= 1.0 + 1e-6 for v in render(osc, 2000))