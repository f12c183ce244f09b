"""Circular delay line with fractional and Hermite reads."""

from __future__ import annotations


class DelayLine:
    """Fixed-size delay line; a delay of ``d`` returns the sample written ``d`` writes ago."""

    def __init__(self, max_size: int) -> None:
        if max_size < 1:
            raise ValueError("max_size must be positive")
        self.max_size = max_size
        self._line = [0.0] * max_size
        self._write_ptr = 0
        self._delay = 1
        self._frac = 0.0

    def reset(self) -> None:
        """Clear the buffer, rewind the write position and set the delay to one sample."""
        self._line = [0.0] * self.max_size
        self._write_ptr = 0
        self._delay = 1

    def set_delay(self, delay: float) -> None:
        """Set the default delay in samples; a fractional part interpolates."""
        whole = int(delay)
        self._frac = delay - whole
        self._delay = whole if 0 <= whole < self.max_size else self.max_size - 1

    def write(self, sample: float) -> None:
        self._line[self._write_ptr] = sample
        self._write_ptr = (self._write_ptr - 1 + self.max_size) % self.max_size

    def _at(self, index: int) -> float:
        return self._line[index % self.max_size]

    def read(self, delay: float | None = None) -> float:
        """Read with linear interpolation, at ``delay`` or at the set delay."""
        if delay is None:
            whole, frac = self._delay, self._frac
        else:
            whole = int(delay)
            frac = delay - whole
        a = self._at(self._write_ptr + whole)
        b = self._at(self._write_ptr + whole + 1)
        return a + (b - a) * frac

    def read_hermite(self, delay: float) -> float:
        """Read with four-point Hermite interpolation."""
        whole = int(delay)
        f = delay - whole
        t = self._write_ptr + whole + self.max_size
        xm1 = self._at(t - 1)
        x0 = self._at(t)
        x1 = self._at(t + 1)
        x2 = self._at(t + 2)
        c = (x1 - xm1) * 0.5
        v = x0 - x1
        w = c + v
        a = w + v + (x2 - x0) * 0.5
        b_neg = w + a
        return (((a * f) - b_neg) * f + c) * f + x0

    def allpass(self, sample: float, delay: float, coefficient: float) -> float:
        """Schroeder allpass step using this line as its delay."""
        read = self._at(self._write_ptr + int(delay))
        written = sample + coefficient * read
        self.write(written)
        return -written * coefficient + read