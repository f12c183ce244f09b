"""Shared constants and small numeric helpers used by the signal modules."""

from __future__ import annotations

import math
import struct

PI_F = 3.1415927410125732421875
TWOPI_F = 2.0 * PI_F
HALFPI_F = PI_F * 0.5

RAND_MAX = 2**31 - 1
K_RAND_FRAC = 1.0 / RAND_MAX
K_ONE_TWELFTH = 1.0 / 12.0

_FLT_MIN = 1.1754943508222875e-38
_FLT_MAX = 3.4028234663852886e38
_ONE_BITS = 0x3F800000
_U32 = 0xFFFFFFFF


def _float_bits(f: float) -> int:
    return struct.unpack("<i", struct.pack("<f", f))[0]


def _bits_float(bits: int) -> float:
    return struct.unpack("<f", struct.pack("<I", bits & _U32))[0]


def fclamp(value: float, lo: float, hi: float) -> float:
    """Clamp ``value`` into ``[lo, hi]``; NaN clamps to ``lo``."""
    v = value if value > lo else lo
    return v if v < hi else hi


def fastpower(f: float, n: int) -> float:
    """Approximate ``f ** n`` by manipulating the float32 exponent bits."""
    if n < 1:
        raise ValueError("n must be at least 1")
    bits = _float_bits(f) - _ONE_BITS
    bits <<= n - 1
    return _bits_float(bits + _ONE_BITS)


def fastroot(f: float, n: int) -> float:
    """Approximate square root via float32 bit tricks.

    The exponent is always halved, whatever ``n`` is.
    """
    bits = _float_bits(f) - _ONE_BITS
    bits >>= 1
    return _bits_float(bits + _ONE_BITS)


def pow10f(f: float) -> float:
    """Return ``10 ** f``."""
    return math.exp(2.302585092994046 * f)


def fastlog2f(f: float) -> float:
    """Polynomial approximation of ``log2(|f|)``."""
    frac, exp = math.frexp(abs(f))
    y = 1.23149591368684
    y *= frac
    y += -4.11852516267426
    y *= frac
    y += 6.02197014179219
    y *= frac
    y += -3.13396450166353
    return y + exp


def fastlog10f(f: float) -> float:
    """Polynomial approximation of ``log10(|f|)``."""
    return fastlog2f(f) * 0.3010299956639812


def mtof(m: float) -> float:
    """Convert a MIDI note number to a frequency in Hz."""
    return 2.0 ** ((m - 69.0) / 12.0) * 440.0


def onepole(out: float, sample: float, coeff: float) -> float:
    """One step of a one-pole low-pass filter; returns the new state."""
    return out + coeff * (sample - out)


def median(a, b, c):
    """Median of three values."""
    if b < a:
        if b < c:
            return c if c < a else a
        return b
    if a < c:
        return c if c < b else b
    return a


def this_blep_sample(t: float) -> float:
    return 0.5 * t * t


def next_blep_sample(t: float) -> float:
    t = 1.0 - t
    return -0.5 * t * t


def next_integrated_blep_sample(t: float) -> float:
    t1 = 0.5 * t
    t2 = t1 * t1
    t4 = t2 * t2
    return 0.1875 - t1 + 1.5 * t2 - t4


def this_integrated_blep_sample(t: float) -> float:
    return next_integrated_blep_sample(1.0 - t)


def soft_limit(x: float) -> float:
    """Rational soft limiter."""
    return x * (27.0 + x * x) / (27.0 + 9.0 * x * x)


def soft_clip(x: float) -> float:
    """Soft limiter that clips hard outside ``[-3, 3]``."""
    if x < -3.0:
        return -1.0
    if x > 3.0:
        return 1.0
    return soft_limit(x)


def sanitize_float(x: float, y: float = 0.0) -> float:
    """Return ``x`` if it is zero or a normal float32 value, else ``y``."""
    if x == 0:
        return x
    if math.isfinite(x) and _FLT_MIN <= abs(x) <= _FLT_MAX:
        return x
    return y


def soft_saturate(sample: float, thresh: float) -> float:
    """Soft saturation above ``thresh``; exactly ``thresh`` yields zero."""
    flip = sample < 0.0
    val = -sample if flip else sample
    if val < thresh:
        return sample
    if val > 1.0:
        out = (thresh + 1.0) / 2.0
        return -out if flip else out
    if val > thresh:
        temp = (val - thresh) / (1.0 - thresh)
        out = thresh + (val - thresh) / (1.0 + temp * temp)
        return -out if flip else out
    return 0.0


def is_power2(x: int) -> bool:
    """True if ``x`` (as uint32) has at most one bit set."""
    x &= _U32
    return ((x - 1) & _U32 & x) == 0


def get_next_power2(x: int) -> int:
    """Smallest power of two not below ``x``, in uint32 arithmetic."""
    x = (x - 1) & _U32
    for shift in (1, 2, 4, 8, 16):
        x |= x >> shift
    return (x + 1) & _U32