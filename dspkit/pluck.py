"""Karplus-Strong plucked string."""

from __future__ import annotations

import random
from enum import IntEnum

from dspkit.dsp import RAND_MAX

_PLUKMIN = 64
_DAMP_MIN = 0.42


class PluckMode(IntEnum):
    """How the string loses energy: recursive filter or weighted average."""

    RECURSIVE = 0
    WEIGHTED_AVERAGE = 1


class Pluck:
    """Naturally decaying plucked string or drum sound.

    Silent until the first trigger. ``amp``, ``freq``, ``decay`` and ``damp``
    are plain attributes.
    """

    def __init__(self, sample_rate: float, npts: int, mode: PluckMode = PluckMode.RECURSIVE) -> None:
        if npts < 1:
            raise ValueError("npts must be positive")
        self.sample_rate = sample_rate
        self.mode = mode
        self.amp = 0.5
        self.freq = 300.0
        self.decay = 1.0
        self.damp = 0.0
        self._maxpts = npts
        self._npts = npts
        self._buf = [0.0] * (npts + 1)
        self._phs256 = 0
        self._reinit()
        self._sicps = (npts * 256.0 + 128.0) / sample_rate
        self._idle = True

    @property
    def mode(self) -> PluckMode:
        return self._mode

    @mode.setter
    def mode(self, mode: int) -> None:
        self._mode = PluckMode(mode)

    def _reinit(self) -> None:
        npts = int(self.decay * (self._maxpts - _PLUKMIN) + _PLUKMIN)
        if npts < 1:
            raise ValueError("decay leaves no room in the string buffer")
        self._npts = npts
        self._sicps = (npts * 256.0 + 128.0) / self.sample_rate
        if len(self._buf) < npts + 1:
            self._buf.extend([0.0] * (npts + 1 - len(self._buf)))
        self._buf[:npts] = [
            random.getrandbits(31) / RAND_MAX * 2.0 - 1.0 for _ in range(npts)
        ]
        self._phs256 = 0

    def _coefficient(self) -> float:
        if self._mode is PluckMode.RECURSIVE:
            return (0.5 - _DAMP_MIN) * self.damp + _DAMP_MIN
        return 0.05 + self.damp * 0.90

    def _refilter(self, coeff: float) -> None:
        buf = self._buf
        npts = self._npts
        preval = buf[0]
        buf[0] = buf[npts]
        filtered = []
        recursive = self._mode is PluckMode.RECURSIVE
        for value in buf[1 : npts + 1]:
            if recursive:
                preval = (value + preval) * coeff
            else:
                preval = value * coeff + preval * (1.0 - coeff)
            filtered.append(preval)
        buf[1 : npts + 1] = filtered

    def process(self, trig: float = 0.0) -> float:
        """Return the next sample; a non-zero ``trig`` plucks the string anew."""
        if trig != 0:
            self._idle = False
            self._reinit()
        if self._idle:
            return 0.0

        coeff = self._coefficient()
        phsinc = int(self.freq * self._sicps)
        phs = self._phs256
        ltwopi = self._npts << 8
        offset = phs >> 8
        first = self._buf[offset]
        diff = self._buf[offset + 1] - first
        frac = (phs & 255) / 256.0
        out = (first + diff * frac) * self.amp

        phs += phsinc
        while phs >= ltwopi:
            phs -= ltwopi
            self._refilter(coeff)
        self._phs256 = phs
        return out