"""Saw oscillator with a variable slope or notch."""

from __future__ import annotations

from dspkit.dsp import (
    fclamp,
    next_blep_sample,
    next_integrated_blep_sample,
    this_blep_sample,
    this_integrated_blep_sample,
)

_NOTCH_DEPTH = 0.2


def _naive_sample(
    phase: float,
    pw: float,
    slope_up: float,
    slope_down: float,
    triangle_amount: float,
    notch_amount: float,
) -> float:
    notch_saw = phase if phase < pw else 1.0 + _NOTCH_DEPTH
    triangle = phase * slope_up if phase < pw else 1.0 - (phase - pw) * slope_down
    return notch_saw * notch_amount + triangle * triangle_amount


class VariableSawOscillator:
    """Band-limited saw morphing between a notched saw and a variable-slope triangle."""

    def __init__(self, sample_rate: float) -> None:
        self.sample_rate = sample_rate
        self._phase = 0.0
        self._next_sample = 0.0
        self._previous_pw = 0.5
        self._high = False
        self._pw = 0.5
        self._frequency = 0.0
        self.set_freq(220.0)
        self.set_pw(0.0)
        self.set_waveshape(1.0)

    def process(self) -> float:
        """Return the next sample."""
        this_sample = self._next_sample
        next_sample = 0.0

        pw = self._pw
        frequency = self._frequency
        triangle_amount = self._waveshape
        notch_amount = 1.0 - self._waveshape
        slope_up = 1.0 / pw
        slope_down = 1.0 / (1.0 - pw)

        self._phase += frequency
        if not self._high and self._phase >= pw:
            triangle_step = (slope_up + slope_down) * frequency * triangle_amount
            notch = (_NOTCH_DEPTH + 1.0 - pw) * notch_amount
            t = (self._phase - pw) / (self._previous_pw - pw + frequency)
            this_sample += notch * this_blep_sample(t)
            next_sample += notch * next_blep_sample(t)
            this_sample -= triangle_step * this_integrated_blep_sample(t)
            next_sample -= triangle_step * next_integrated_blep_sample(t)
            self._high = True
        elif self._phase >= 1.0:
            self._phase -= 1.0
            triangle_step = (slope_up + slope_down) * frequency * triangle_amount
            notch = (_NOTCH_DEPTH + 1.0) * notch_amount
            t = self._phase / frequency
            this_sample -= notch * this_blep_sample(t)
            next_sample -= notch * next_blep_sample(t)
            this_sample += triangle_step * this_integrated_blep_sample(t)
            next_sample += triangle_step * next_integrated_blep_sample(t)
            self._high = False

        next_sample += _naive_sample(
            self._phase, pw, slope_up, slope_down, triangle_amount, notch_amount
        )
        self._previous_pw = pw
        self._next_sample = next_sample
        return (2.0 * this_sample - 1.0) / (1.0 + _NOTCH_DEPTH)

    def set_freq(self, frequency: float) -> None:
        """Frequency in Hz, limited to a quarter of the sample rate."""
        frequency = min(frequency / self.sample_rate, 0.25)
        if frequency >= 0.25:
            self._pw = 0.5
        self._frequency = frequency

    def set_pw(self, pw: float) -> None:
        """Notch position or slope; kept clear of the edges by twice the frequency."""
        if self._frequency >= 0.25:
            self._pw = 0.5
        else:
            self._pw = fclamp(pw, self._frequency * 2.0, 1.0 - 2.0 * self._frequency)

    def set_waveshape(self, waveshape: float) -> None:
        """0 gives the notched saw, 1 the sloped triangle."""
        self._waveshape = waveshape