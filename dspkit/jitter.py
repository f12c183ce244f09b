"""Randomly segmented line generator."""

from __future__ import annotations

import random

_FT_MAXLEN = 0x1000000
_FT_PHMASK = 0x0FFFFFF
_SCALE = 4.656612875245796924105750827168e-10


def _rand_gab() -> float:
    return ((random.getrandbits(31) >> 1) & 0x7FFFFFFF) * _SCALE


def _bi_rand_gab() -> float:
    return (random.getrandbits(31) & 0x7FFFFFFF) * _SCALE


class Jitter:
    """Piecewise-linear random signal with segments at random rates."""

    def __init__(self, sample_rate: float) -> None:
        self.sample_rate = sample_rate
        self._amp = 0.5
        self._cps_min = 0.5
        self._cps_max = 4.0
        self._cps = 0.0
        self._num1 = 0.0
        self._dfd_max = 0.0
        self._reset()

    def _reset(self) -> None:
        self._num2 = _bi_rand_gab()
        self._init_flag = True
        self._phs = 0

    def _next_segment(self) -> None:
        self._cps = _rand_gab() * (self._cps_max - self._cps_min) + self._cps_min
        self._phs &= _FT_PHMASK
        self._num1 = self._num2
        self._num2 = _bi_rand_gab()
        self._dfd_max = (self._num2 - self._num1) / _FT_MAXLEN

    def process(self) -> float:
        if self._init_flag:
            self._init_flag = False
            out = self._num2 * self._amp
            self._next_segment()
            return out
        out = (self._num1 + self._phs * self._dfd_max) * self._amp
        self._phs += int(self._cps * (_FT_MAXLEN / self.sample_rate))
        if self._phs >= _FT_MAXLEN:
            self._next_segment()
        return out

    def set_cps_min(self, cps_min: float) -> None:
        """Minimum number of new segments per second."""
        self._cps_min = cps_min
        self._reset()

    def set_cps_max(self, cps_max: float) -> None:
        """Maximum number of new segments per second."""
        self._cps_max = cps_max
        self._reset()

    def set_amp(self, amp: float) -> None:
        self._amp = amp
        self._reset()