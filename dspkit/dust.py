"""Randomly clocked impulses."""

from __future__ import annotations

import random

from dspkit.dsp import K_RAND_FRAC, fclamp


class Dust:
    """Random impulses whose rate follows the density setting."""

    def __init__(self) -> None:
        self.set_density(0.5)

    def set_density(self, density: float) -> None:
        """Impulse density, 0 to 1."""
        self._density = fclamp(density, 0.0, 1.0) * 0.3

    def process(self) -> float:
        u = random.getrandbits(31) * K_RAND_FRAC
        if u < self._density:
            return u / self._density
        return 0.0