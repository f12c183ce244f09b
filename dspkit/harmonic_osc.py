"""Additive oscillator built on the Chebyshev recurrence."""

from __future__ import annotations

import math
from typing import Sequence

from dspkit.dsp import TWOPI_F

_EPSILON = 0.000001


def _differs(a: float, b: float) -> bool:
    return abs(a - b) > _EPSILON


class HarmonicOscillator:
    """Sum of consecutive harmonics, each with its own amplitude.

    Works well for a small number of harmonics. Amplitude changes take
    effect on the next sample, attenuated towards the Nyquist frequency.
    """

    def __init__(self, sample_rate: float, num_harmonics: int = 16) -> None:
        if num_harmonics < 1:
            raise ValueError("num_harmonics must be positive")
        self.sample_rate = sample_rate
        self.num_harmonics = num_harmonics
        self._phase = 0.0
        self._frequency = 0.0
        self._first_harmonic_index = 0
        self._amplitude = [0.0] * num_harmonics
        self._new_amplitude = [0.0] * num_harmonics
        self._amplitude[0] = 1.0
        self._new_amplitude[0] = 1.0
        self._recalc = False
        self.set_first_harm_idx(1)
        self.set_freq(440.0)
        self._recalc = False

    def process(self) -> float:
        """Return the next sample."""
        if self._recalc:
            self._recalc = False
            self._amplitude = [
                amp
                * (1.0 - 2.0 * min(self._frequency * (self._first_harmonic_index + i), 0.5))
                for i, amp in enumerate(self._new_amplitude)
            ]

        self._phase += self._frequency
        if self._phase >= 1.0:
            self._phase -= 1.0
        two_x = 2.0 * math.sin(self._phase * TWOPI_F)
        if self._first_harmonic_index == 1:
            previous = 1.0
            current = two_x * 0.5
        else:
            k = float(self._first_harmonic_index)
            previous = math.sin((self._phase * (k - 1.0) + 0.25) * TWOPI_F)
            current = math.sin((self._phase * k) * TWOPI_F)

        total = 0.0
        for amp in self._amplitude:
            total += amp * current
            previous, current = current, two_x * current - previous
        return total

    def set_freq(self, freq: float) -> None:
        """Fundamental frequency in Hz, limited to half the sample rate."""
        freq = max(min(freq / self.sample_rate, 0.5), -0.5)
        self._recalc = _differs(freq, self._frequency) or self._recalc
        self._frequency = freq

    def set_first_harm_idx(self, idx: int) -> None:
        """Which harmonic the first amplitude controls; values below 1 mean 1."""
        idx = max(idx, 1)
        self._recalc = _differs(idx, self._first_harmonic_index) or self._recalc
        self._first_harmonic_index = idx

    def set_amplitudes(self, amplitudes: Sequence[float]) -> None:
        """Set every harmonic's amplitude; needs at least ``num_harmonics`` values."""
        if len(amplitudes) < self.num_harmonics:
            raise ValueError(f"need at least {self.num_harmonics} amplitudes")
        for i, amp in enumerate(amplitudes[: self.num_harmonics]):
            self._recalc = _differs(self._new_amplitude[i], amp) or self._recalc
            self._new_amplitude[i] = amp

    def set_single_amp(self, amp: float, idx: int) -> None:
        """Set one harmonic's amplitude; an index out of range is ignored."""
        if idx < 0 or idx >= self.num_harmonics:
            return
        self._recalc = _differs(self._amplitude[idx], amp) or self._recalc
        self._new_amplitude[idx] = amp