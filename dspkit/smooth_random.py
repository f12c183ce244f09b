"""Smoothly interpolated random modulation source."""

from __future__ import annotations

import random

from dspkit.dsp import K_RAND_FRAC, fclamp


class SmoothRandomGenerator:
    """Slews with a smoothstep curve to a new random target in ``[-1, 1]``."""

    def __init__(self, sample_rate: float) -> None:
        self.sample_rate = sample_rate
        self.set_freq(1.0)
        self._phase = 0.0
        self._from = 0.0
        self._interval = 0.0

    def process(self) -> float:
        self._phase += self._frequency
        if self._phase >= 1.0:
            self._phase -= 1.0
            self._from += self._interval
            target = random.getrandbits(31) * K_RAND_FRAC * 2.0 - 1.0
            self._interval = target - self._from
        t = self._phase * self._phase * (3.0 - 2.0 * self._phase)
        return self._from + self._interval * t

    def set_freq(self, freq: float) -> None:
        """How often, in Hz, to move to a new random value."""
        self._frequency = fclamp(freq / self.sample_rate, 0.0, 1.0)