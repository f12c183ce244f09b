"""Modal resonant body built from banks of state-variable filters."""

from __future__ import annotations

import math
from enum import Enum
from typing import Sequence

from dspkit.dsp import PI_F, TWOPI_F

_PI_POW3 = PI_F * PI_F * PI_F
_PI_POW5 = _PI_POW3 * PI_F * PI_F

_MAX_NUM_MODES = 24
_MODE_BATCH_SIZE = 4
_RATIO_FRAC = 1.0 / 12.0
_STIFF_FRAC_2 = 1.0 / 0.6


class FilterMode(Enum):
    LOW_PASS = 0
    BAND_PASS = 1
    BAND_PASS_NORMALIZED = 2
    HIGH_PASS = 3


def _fasttan(f: float) -> float:
    a = 3.260e-01 * _PI_POW3
    b = 1.823e-01 * _PI_POW5
    f2 = f * f
    return f * (PI_F + f2 * (a + b * f2))


class ResonatorSvf:
    """A batch of parallel SVFs fed by one input; returns the weighted sum.

    Low-pass mode sums the low-pass outputs; every other mode sums band-pass.
    """

    def __init__(self, batch_size: int = 1) -> None:
        if batch_size < 1:
            raise ValueError("batch_size must be positive")
        self.batch_size = batch_size
        self.reset()

    def reset(self) -> None:
        self._state1 = [0.0] * self.batch_size
        self._state2 = [0.0] * self.batch_size

    def process(
        self,
        f: Sequence[float],
        q: Sequence[float],
        gain: Sequence[float],
        sample: float,
        mode: FilterMode = FilterMode.BAND_PASS,
    ) -> float:
        """Filter one sample; ``f`` is in cycles per sample."""
        if not len(f) == len(q) == len(gain) == self.batch_size:
            raise ValueError("f, q and gain must each hold batch_size values")
        low_pass = mode is FilterMode.LOW_PASS
        out = 0.0
        for i, (fi, qi, gi) in enumerate(zip(f, q, gain)):
            g = _fasttan(fi)
            r = 1.0 / qi
            h = 1.0 / (1.0 + r * g + g * g)
            s1 = self._state1[i]
            s2 = self._state2[i]
            hp = (sample - (r + g) * s1 - s2) * h
            bp = g * hp + s1
            self._state1[i] = g * hp + bp
            lp = g * bp + s2
            self._state2[i] = g * bp + lp
            out += gi * (lp if low_pass else bp)
        return out


def _nth_harmonic_compensation(n: int, stiffness: float) -> float:
    stretch_factor = 1.0
    for _ in range(n - 1):
        stretch_factor += stiffness
        stiffness *= 0.93 if stiffness < 0.0 else 0.98
    return 1.0 / stretch_factor


def _calc_stiff(sig: float) -> float:
    if sig < 0.25:
        return -(0.25 - sig) * 0.25
    if sig < 0.3:
        return 0.0
    if sig < 0.9:
        return (sig - 0.3) * _STIFF_FRAC_2
    sig = (sig - 0.9) * 10.0
    sig *= sig
    return 1.5 - math.cos(sig * PI_F) * 0.5


class Resonator:
    """Resonant body of up to 24 modes, rendered four at a time.

    Modes that do not fill a whole batch of four are not rendered.
    """

    def __init__(self, position: float, resolution: int, sample_rate: float) -> None:
        self.sample_rate = sample_rate
        self.set_freq(440.0)
        self.set_structure(0.5)
        self.set_brightness(0.5)
        self.set_damping(0.5)
        self._resolution = max(min(resolution, _MAX_NUM_MODES), 0)
        amplitude = math.cos(position * TWOPI_F) * 0.25
        self._mode_amplitude = [amplitude] * self._resolution
        self._mode_filters = [
            ResonatorSvf(_MODE_BATCH_SIZE)
            for _ in range(_MAX_NUM_MODES // _MODE_BATCH_SIZE)
        ]

    def process(self, sample: float) -> float:
        """Excite the body with ``sample`` and return its output."""
        stiffness = _calc_stiff(self._structure)
        f0 = self._frequency * _nth_harmonic_compensation(3, stiffness)
        harmonic = f0
        stretch_factor = 1.0

        q_sqrt = 2.0 ** (self._damping * 79.7 * _RATIO_FRAC)
        q = 500.0 * q_sqrt * q_sqrt
        brightness = self._brightness
        brightness *= 1.0 - self._structure * 0.3
        brightness *= 1.0 - self._damping * 0.3
        q_loss = brightness * (2.0 - brightness) * 0.85 + 0.15

        out = 0.0
        mode_f: list[float] = []
        mode_q: list[float] = []
        mode_a: list[float] = []
        filters = iter(self._mode_filters)
        for amplitude in self._mode_amplitude:
            mode_frequency = harmonic * stretch_factor
            if mode_frequency >= 0.499:
                mode_frequency = 0.499
            mode_f.append(mode_frequency)
            mode_q.append(1.0 + mode_frequency * q)
            mode_a.append(amplitude * (1.0 - mode_frequency * 2.0))
            if len(mode_f) == _MODE_BATCH_SIZE:
                out += next(filters).process(
                    mode_f, mode_q, mode_a, sample, FilterMode.BAND_PASS
                )
                mode_f, mode_q, mode_a = [], [], []

            stretch_factor += stiffness
            stiffness *= 0.93 if stiffness < 0.0 else 0.98
            harmonic += f0
            q *= q_loss
        return out

    def set_freq(self, freq: float) -> None:
        """Fundamental frequency in Hz."""
        self._frequency = freq / self.sample_rate

    def set_structure(self, structure: float) -> None:
        """Stiffness and character, 0 to 1."""
        self._structure = max(min(structure, 1.0), 0.0)

    def set_brightness(self, brightness: float) -> None:
        self._brightness = max(min(brightness, 1.0), 0.0)

    def set_damping(self, damping: float) -> None:
        """Decay time, 0 to 1."""
        self._damping = max(min(damping, 1.0), 0.0)