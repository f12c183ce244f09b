"""Fast linear-congruential white noise."""

from __future__ import annotations

_COEFF = 4.6566129e-10
_MULTIPLIER = 16807


class WhiteNoise:
    """White noise in ``[-amp, amp]`` from a 32-bit multiplicative generator."""

    def __init__(self) -> None:
        self._amp = 1.0
        self._seed = 1

    def set_amp(self, amp: float) -> None:
        self._amp = amp

    def process(self) -> float:
        seed = (self._seed * _MULTIPLIER) & 0xFFFFFFFF
        if seed >= 0x80000000:
            seed -= 1 << 32
        self._seed = seed
        return seed * _COEFF * self._amp