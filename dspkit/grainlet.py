"""Phase-distorted sine grains synced to a carrier."""

from __future__ import annotations

import math

from dspkit.dsp import TWOPI_F, next_blep_sample, this_blep_sample


def _sine(phase: float) -> float:
    return math.sin(phase * TWOPI_F)


def _carrier(phase: float, shape: float) -> float:
    shape *= 3.0
    integral = int(shape)
    t = 1.0 - (shape - integral)
    if integral == 0:
        phase = min(phase * (1.0 + t * t * t * 15.0), 1.0)
        phase += 0.75
    elif integral == 1:
        breakpoint = 0.001 + 0.499 * t * t * t
        if phase < breakpoint:
            phase *= 0.5 / breakpoint
        else:
            phase = 0.5 + (phase - breakpoint) * 0.5 / (1.0 - breakpoint)
        phase += 0.75
    else:
        t = 1.0 - t
        phase = min(0.25 + phase * (0.5 + t * t * t * 14.5), 0.75)
    return (_sine(phase) + 1.0) * 0.25


def _grainlet(carrier_phase: float, formant_phase: float, shape: float, bleed: float) -> float:
    carrier = _carrier(carrier_phase, shape)
    formant = _sine(formant_phase)
    return carrier * (formant + bleed) / (1.0 + bleed)


class GrainletOscillator:
    """A shaped single-cycle carrier multiplied by a free-running formant sine."""

    def __init__(self, sample_rate: float) -> None:
        self.sample_rate = sample_rate
        self._carrier_phase = 0.0
        self._formant_phase = 0.0
        self._next_sample = 0.0
        self._carrier_shape = 0.0
        self._carrier_bleed = 0.0
        self.set_freq(440.0)
        self.set_formant_freq(220.0)
        self.set_shape(0.5)
        self.set_bleed(0.5)

    def process(self) -> float:
        this_sample = self._next_sample
        next_sample = 0.0

        self._carrier_phase += self._carrier_frequency
        if self._carrier_phase >= 1.0:
            self._carrier_phase -= 1.0
            reset_time = self._carrier_phase / self._carrier_frequency
            shape_inc = self._new_shape - self._carrier_shape
            bleed_inc = self._new_bleed - self._carrier_bleed
            before = _grainlet(
                1.0,
                self._formant_phase + (1.0 - reset_time) * self._formant_frequency,
                self._new_shape + shape_inc * (1.0 - reset_time),
                self._new_bleed + bleed_inc * (1.0 - reset_time),
            )
            after = _grainlet(0.0, 0.0, self._new_shape, self._new_bleed)
            discontinuity = after - before
            this_sample += discontinuity * this_blep_sample(reset_time)
            next_sample += discontinuity * next_blep_sample(reset_time)
            self._formant_phase = reset_time * self._formant_frequency
        else:
            self._formant_phase += self._formant_frequency
            if self._formant_phase >= 1.0:
                self._formant_phase -= 1.0

        self._carrier_bleed = self._new_bleed
        self._carrier_shape = self._new_shape
        next_sample += _grainlet(
            self._carrier_phase, self._formant_phase, self._carrier_shape, self._carrier_bleed
        )
        self._next_sample = next_sample
        return this_sample

    def set_freq(self, freq: float) -> None:
        """Carrier frequency in Hz."""
        self._carrier_frequency = min(freq / self.sample_rate, 0.5)

    def set_formant_freq(self, freq: float) -> None:
        """Formant frequency in Hz."""
        self._formant_frequency = min(freq / self.sample_rate, 0.5)

    def set_shape(self, shape: float) -> None:
        """Carrier shape; behaves differently over 0-1/3, 1/3-2/3 and above."""
        self._new_shape = shape

    def set_bleed(self, bleed: float) -> None:
        """How much of the formant bleeds through, best 0-1."""
        self._new_bleed = bleed