"""Sine formant multiplied by and synced to a shaped carrier."""

from __future__ import annotations

import math

from dspkit.dsp import TWOPI_F, next_blep_sample, this_blep_sample


def _sine(phase: float) -> float:
    return math.sin(phase * TWOPI_F)


def _z(c: float, d: float, f: float, shape: float, mode: float) -> float:
    ramp_down = 0.5 * (1.0 + _sine(0.5 * d + 0.25))

    if mode < 0.333:
        offset = 1.0
        phase_shift = 0.25 + mode * 1.50
    elif mode < 0.666:
        phase_shift = 0.7495 - (mode - 0.33) * 0.75
        offset = -_sine(phase_shift)
    else:
        phase_shift = 0.7495 - (mode - 0.33) * 0.75
        offset = 0.001

    discontinuity = _sine(f + phase_shift)
    if shape < 0.5:
        shape *= 2.0
        if c >= 0.5:
            ramp_down *= shape
        contour = 1.0 + (_sine(c + 0.25) - 1.0) * shape
    else:
        contour = _sine(c + shape * 0.5)
    return (ramp_down * (offset + discontinuity) - offset) * contour


class ZOscillator:
    """A formant sine multiplied by and synced to a carrier, with BLEP correction."""

    def __init__(self, sample_rate: float) -> None:
        self.sample_rate = sample_rate
        self._carrier_phase = 0.0
        self._discontinuity_phase = 0.0
        self._formant_phase = 0.0
        self._next_sample = 0.0
        self._carrier_shape = 0.0
        self._mode = 0.0
        self.set_freq(220.0)
        self.set_formant_freq(550.0)
        self.set_mode(0.0)
        self.set_shape(1.0)

    def process(self) -> float:
        """Return the next sample."""
        this_sample = self._next_sample
        next_sample = 0.0
        cf = self._carrier_frequency
        ff = self._formant_frequency

        self._discontinuity_phase += 2.0 * cf
        self._carrier_phase += cf
        if self._discontinuity_phase >= 1.0:
            self._discontinuity_phase -= 1.0
            reset_time = self._discontinuity_phase / (2.0 * cf)

            wrapped = self._carrier_phase >= 1.0
            carrier_phase_before = 1.0 if wrapped else 0.5
            carrier_phase_after = 0.0 if wrapped else 0.5

            mode_sub = self._mode + (1.0 - reset_time) * (self._mode - self._mode_new)
            shape_sub = self._carrier_shape + (1.0 - reset_time) * (
                self._carrier_shape - self._shape_new
            )
            before = _z(
                carrier_phase_before,
                1.0,
                self._formant_phase + (1.0 - reset_time) * ff,
                shape_sub,
                mode_sub,
            )
            after = _z(carrier_phase_after, 0.0, 0.0, self._shape_new, self._mode_new)

            discontinuity = after - before
            this_sample += discontinuity * this_blep_sample(reset_time)
            next_sample += discontinuity * next_blep_sample(reset_time)
            self._formant_phase = reset_time * ff

            if self._carrier_phase > 1.0:
                self._carrier_phase = self._discontinuity_phase * 0.5
        else:
            self._formant_phase += ff
            if self._formant_phase >= 1.0:
                self._formant_phase -= 1.0

        if self._carrier_phase >= 1.0:
            self._carrier_phase -= 1.0

        self._carrier_shape = self._shape_new
        self._mode = self._mode_new
        next_sample += _z(
            self._carrier_phase,
            self._discontinuity_phase,
            self._formant_phase,
            self._carrier_shape,
            self._mode,
        )
        self._next_sample = next_sample
        return this_sample

    def set_freq(self, freq: float) -> None:
        """Carrier frequency in Hz, limited to a quarter of the sample rate."""
        self._carrier_frequency = min(freq / self.sample_rate, 0.25)

    def set_formant_freq(self, freq: float) -> None:
        """Formant frequency in Hz, limited to a quarter of the sample rate."""
        self._formant_frequency = min(freq / self.sample_rate, 0.25)

    def set_shape(self, shape: float) -> None:
        """Contour of the waveform, best 0-1."""
        self._shape_new = shape

    def set_mode(self, mode: float) -> None:
        """Below 1/3 only phase shift, above 2/3 only offset, both in between."""
        self._mode_new = mode