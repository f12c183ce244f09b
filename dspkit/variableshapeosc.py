"""Oscillator with a continuously variable waveform and optional hard sync."""

from __future__ import annotations

from dspkit.dsp import (
    fclamp,
    next_blep_sample,
    next_integrated_blep_sample,
    this_blep_sample,
    this_integrated_blep_sample,
)


def _naive_sample(
    phase: float,
    pw: float,
    slope_up: float,
    slope_down: float,
    triangle_amount: float,
    square_amount: float,
) -> float:
    saw = phase
    square = 0.0 if phase < pw else 1.0
    triangle = phase * slope_up if phase < pw else 1.0 - (phase - pw) * slope_down
    saw += (square - saw) * square_amount
    saw += (triangle - saw) * triangle_amount
    return saw


class VariableShapeOscillator:
    """Band-limited saw/ramp/triangle morphing into a square.

    The sync oscillator (set with :meth:`set_sync_freq`) sets the pitch; when
    sync is enabled it is reset by the master oscillator (:meth:`set_freq`).
    The sync frequency is set before the pulse width at construction, so the
    default pulse width is kept clear of the cycle edges.
    """

    def __init__(self, sample_rate: float) -> None:
        self.sample_rate = sample_rate
        self._master_phase = 0.0
        self._slave_phase = 0.0
        self._next_sample = 0.0
        self._previous_pw = 0.5
        self._high = False
        self._pw = 0.5
        self._master_frequency = 0.0
        self._slave_frequency = 0.0
        self._waveshape = 0.0
        self._enable_sync = False

        self.set_freq(440.0)
        self.set_waveshape(0.0)
        self.set_sync(False)
        self.set_sync_freq(220.0)
        self.set_pw(0.0)

    def process(self) -> float:
        """Return the next sample."""
        this_sample = self._next_sample
        next_sample = 0.0
        reset = False
        transition_during_reset = False
        reset_time = 0.0

        pw = self._pw
        slave_frequency = self._slave_frequency
        square_amount = max(self._waveshape - 0.5, 0.0) * 2.0
        triangle_amount = max(1.0 - self._waveshape * 2.0, 0.0)
        slope_up = 1.0 / pw
        slope_down = 1.0 / (1.0 - pw)

        if self._enable_sync:
            self._master_phase += self._master_frequency
            if self._master_phase >= 1.0:
                self._master_phase -= 1.0
                reset_time = self._master_phase / self._master_frequency
                phase_at_reset = (
                    self._slave_phase + (1.0 - reset_time) * slave_frequency
                )
                reset = True
                if phase_at_reset >= 1.0:
                    phase_at_reset -= 1.0
                    transition_during_reset = True
                if not self._high and phase_at_reset >= pw:
                    transition_during_reset = True
                value = _naive_sample(
                    phase_at_reset,
                    pw,
                    slope_up,
                    slope_down,
                    triangle_amount,
                    square_amount,
                )
                this_sample -= value * this_blep_sample(reset_time)
                next_sample -= value * next_blep_sample(reset_time)

        self._slave_phase += slave_frequency
        triangle_step = (slope_up + slope_down) * slave_frequency * triangle_amount
        while transition_during_reset or not reset:
            if not self._high:
                if self._slave_phase < pw:
                    break
                t = (self._slave_phase - pw) / (self._previous_pw - pw + slave_frequency)
                this_sample += square_amount * this_blep_sample(t)
                next_sample += square_amount * next_blep_sample(t)
                this_sample -= triangle_step * this_integrated_blep_sample(t)
                next_sample -= triangle_step * next_integrated_blep_sample(t)
                self._high = True

            if self._high:
                if self._slave_phase < 1.0:
                    break
                self._slave_phase -= 1.0
                t = self._slave_phase / slave_frequency
                this_sample -= (1.0 - triangle_amount) * this_blep_sample(t)
                next_sample -= (1.0 - triangle_amount) * next_blep_sample(t)
                this_sample += triangle_step * this_integrated_blep_sample(t)
                next_sample += triangle_step * next_integrated_blep_sample(t)
                self._high = False

        if self._enable_sync and reset:
            self._slave_phase = reset_time * slave_frequency
            self._high = False

        next_sample += _naive_sample(
            self._slave_phase, pw, slope_up, slope_down, triangle_amount, square_amount
        )
        self._previous_pw = pw
        self._next_sample = next_sample
        return 2.0 * this_sample - 1.0

    def set_freq(self, frequency: float) -> None:
        """Master (sync source) frequency in Hz, limited to a quarter of the sample rate."""
        self._master_frequency = min(frequency / self.sample_rate, 0.25)

    def set_pw(self, pw: float) -> None:
        """Pulse width for the square, or saw/ramp/triangle balance otherwise."""
        if self._slave_frequency >= 0.25:
            self._pw = 0.5
        else:
            self._pw = fclamp(
                pw, self._slave_frequency * 2.0, 1.0 - 2.0 * self._slave_frequency
            )

    def set_waveshape(self, waveshape: float) -> None:
        """0 is saw/ramp/triangle, 1 is square."""
        self._waveshape = waveshape

    def set_sync(self, enable_sync: bool) -> None:
        """Whether the master oscillator resets the sync oscillator."""
        self._enable_sync = enable_sync

    def set_sync_freq(self, frequency: float) -> None:
        """Frequency of the sounding oscillator in Hz."""
        frequency = frequency / self.sample_rate
        if frequency >= 0.25:
            self._pw = 0.5
            frequency = 0.25
        self._slave_frequency = frequency