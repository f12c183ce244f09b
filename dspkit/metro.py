"""Clock pulse generator."""

from __future__ import annotations

from dspkit.dsp import TWOPI_F


class Metro:
    """Emits a tick at a fixed frequency."""

    def __init__(self, freq: float, sample_rate: float) -> None:
        self.sample_rate = sample_rate
        self._phs = 0.0
        self.set_freq(freq)

    @property
    def freq(self) -> float:
        return self._freq

    def process(self) -> bool:
        """Advance one sample; True when a tick occurs."""
        self._phs += self._phs_inc
        if self._phs >= TWOPI_F:
            self._phs -= TWOPI_F
            return True
        return False

    def reset(self) -> None:
        self._phs = 0.0

    def set_freq(self, freq: float) -> None:
        self._freq = freq
        self._phs_inc = (TWOPI_F * freq) / self.sample_rate