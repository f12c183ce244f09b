"""Sample-and-hold noise clocked at a target frequency."""

from __future__ import annotations

import random

from dspkit.dsp import K_RAND_FRAC, fclamp, next_blep_sample, this_blep_sample


class ClockedNoise:
    """Noise held between clock ticks, with band-limited steps."""

    def __init__(self, sample_rate: float) -> None:
        self.sample_rate = sample_rate
        self._phase = 0.0
        self._sample = 0.0
        self._next_sample = 0.0
        self._frequency = 0.001

    def process(self) -> float:
        this_sample = self._next_sample
        next_sample = 0.0
        sample = self._sample

        raw_sample = random.getrandbits(31) * K_RAND_FRAC * 2.0 - 1.0
        raw_amount = fclamp(4.0 * (self._frequency - 0.25), 0.0, 1.0)

        self._phase += self._frequency
        if self._phase >= 1.0:
            self._phase -= 1.0
            t = self._phase / self._frequency if self._frequency > 0.0 else 0.0
            discontinuity = raw_sample - sample
            this_sample += discontinuity * this_blep_sample(t)
            next_sample += discontinuity * next_blep_sample(t)
            sample = raw_sample

        next_sample += sample
        self._next_sample = next_sample
        self._sample = sample
        return this_sample + raw_amount * (raw_sample - this_sample)

    def set_freq(self, freq: float) -> None:
        """Clock rate in Hz."""
        self._frequency = fclamp(freq / self.sample_rate, 0.0, 1.0)

    def sync(self) -> None:
        """Force a new random value on the next sample."""
        self._phase = 1.0