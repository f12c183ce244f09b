"""Sine formant oscillator with alias-free phase reset."""

from __future__ import annotations

import math

from dspkit.dsp import TWOPI_F, next_blep_sample, this_blep_sample


def _sine(phase: float) -> float:
    return math.sin(phase * TWOPI_F)


def _clamp_quarter(value: float) -> float:
    return max(min(value, 0.25), -0.25)


class FormantOscillator:
    """A formant sine whose phase is reset by a carrier, with BLEP correction.

    Until the frequencies are set, the carrier is stopped and the formant
    increment is 100 cycles per sample.
    """

    def __init__(self, sample_rate: float) -> None:
        self.sample_rate = sample_rate
        self._carrier_phase = 0.0
        self._formant_phase = 0.0
        self._next_sample = 0.0
        self._carrier_frequency = 0.0
        self._formant_frequency = 100.0
        self._phase_shift = 0.0
        self._ps_inc = 0.0

    def process(self) -> float:
        this_sample = self._next_sample
        next_sample = 0.0
        self._carrier_phase += self._carrier_frequency

        if self._carrier_phase >= 1.0:
            self._carrier_phase -= 1.0
            reset_time = self._carrier_phase / self._carrier_frequency
            phase_at_reset = (
                self._formant_phase + (1.0 - reset_time) * self._formant_frequency
            )
            before = _sine(
                phase_at_reset + self._phase_shift + self._ps_inc * (1.0 - reset_time)
            )
            after = _sine(0.0 + self._phase_shift + self._ps_inc)
            discontinuity = after - before
            this_sample += discontinuity * this_blep_sample(reset_time)
            next_sample += discontinuity * next_blep_sample(reset_time)
            self._formant_phase = reset_time * self._formant_frequency
        else:
            self._formant_phase += self._formant_frequency
            if self._formant_phase >= 1.0:
                self._formant_phase -= 1.0

        self._phase_shift += self._ps_inc
        self._ps_inc = 0.0

        next_sample += _sine(self._formant_phase + self._phase_shift)
        self._next_sample = next_sample
        return this_sample

    def set_formant_freq(self, freq: float) -> None:
        """Formant frequency in Hz, limited to a quarter of the sample rate."""
        self._formant_frequency = _clamp_quarter(freq / self.sample_rate)

    def set_carrier_freq(self, freq: float) -> None:
        """Carrier (main) frequency in Hz, limited to a quarter of the sample rate."""
        self._carrier_frequency = _clamp_quarter(freq / self.sample_rate)

    def set_phase_shift(self, ps: float) -> None:
        """Phase shift in cycles, applied over the next sample."""
        self._ps_inc = ps - self._phase_shift