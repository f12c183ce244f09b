"""Divide-down organ style mixture of saw and square waves."""

from __future__ import annotations

from typing import Sequence

from dspkit.dsp import next_blep_sample, this_blep_sample

_NUM_VOICES = 7
_EPSILON = 0.0000001


def _differs(a: float, b: float) -> bool:
    return abs(a - b) > _EPSILON


class OscillatorBank:
    """Seven registers: saw 8', square 8', saw 4', square 4', saw 2', square 2', saw 1'.

    Very high notes are played by shifting the registration down by octaves.
    """

    def __init__(self, sample_rate: float) -> None:
        self.sample_rate = sample_rate
        self._phase = 0.0
        self._next_sample = 0.0
        self._segment = 0
        self._frequency = 0.0
        self._gain = 0.0
        self._saw_8_gain = 0.0
        self._saw_4_gain = 0.0
        self._saw_2_gain = 0.0
        self._saw_1_gain = 0.0
        self._recalc = True
        self.set_gain(1.0)
        self._registration = [0.0] * _NUM_VOICES
        self._unshifted_registration = [0.0] * _NUM_VOICES
        self.set_single_amp(1.0, 0)
        self.set_freq(440.0)

    def _update_registration(self) -> None:
        self._frequency *= 8.0
        shift = 0
        while self._frequency > 0.5:
            shift += 2
            self._frequency *= 0.5
        registration = [0.0] * _NUM_VOICES
        for i in range(max(_NUM_VOICES - shift, 0)):
            registration[i + shift] = self._unshifted_registration[i]
        self._registration = registration

    def _update_gains(self) -> None:
        r = self._registration
        g = self._gain
        self._saw_8_gain = (r[0] + 2.0 * r[1]) * g
        self._saw_4_gain = (r[2] - r[1] + 2.0 * r[3]) * g
        self._saw_2_gain = (r[4] - r[3] + 2.0 * r[5]) * g
        self._saw_1_gain = (r[6] - r[5]) * g

    def process(self) -> float:
        """Return the next sample."""
        if self._recalc:
            self._recalc = False
            self._update_registration()
        self._update_gains()

        this_sample = self._next_sample
        next_sample = 0.0

        self._phase += self._frequency
        next_segment = int(self._phase)
        if next_segment != self._segment:
            discontinuity = 0.0
            if next_segment == 8:
                self._phase -= 8.0
                next_segment -= 8
                discontinuity -= self._saw_8_gain
            if next_segment & 3 == 0:
                discontinuity -= self._saw_4_gain
            if next_segment & 1 == 0:
                discontinuity -= self._saw_2_gain
            discontinuity -= self._saw_1_gain
            if discontinuity != 0.0:
                t = (self._phase - next_segment) / self._frequency
                this_sample += this_blep_sample(t) * discontinuity
                next_sample += next_blep_sample(t) * discontinuity
        self._segment = next_segment

        phase = self._phase
        segment = self._segment
        next_sample += (phase - 4.0) * self._saw_8_gain * 0.125
        next_sample += (phase - float(segment & 4) - 2.0) * self._saw_4_gain * 0.25
        next_sample += (phase - float(segment & 6) - 1.0) * self._saw_2_gain * 0.5
        next_sample += (phase - float(segment & 7) - 0.5) * self._saw_1_gain
        self._next_sample = next_sample
        return 2.0 * this_sample

    def set_freq(self, freq: float) -> None:
        """Frequency of the 8' register in Hz."""
        freq = min(freq / self.sample_rate, 0.5)
        self._recalc = _differs(freq, self._frequency) or self._recalc
        self._frequency = freq

    def set_amplitudes(self, amplitudes: Sequence[float]) -> None:
        """Set all seven register amplitudes; they should sum to 1."""
        if len(amplitudes) != _NUM_VOICES:
            raise ValueError(f"need exactly {_NUM_VOICES} amplitudes")
        for i, amp in enumerate(amplitudes):
            self._recalc = _differs(self._unshifted_registration[i], amp) or self._recalc
            self._unshifted_registration[i] = amp

    def set_single_amp(self, amp: float, idx: int) -> None:
        """Set one register's amplitude; an index outside 0-6 is ignored."""
        if idx < 0 or idx >= _NUM_VOICES:
            return
        self._recalc = _differs(self._unshifted_registration[idx], amp) or self._recalc
        self._unshifted_registration[idx] = amp

    def set_gain(self, gain: float) -> None:
        """Overall gain, clamped to 0-1."""
        self._gain = max(min(gain, 1.0), 0.0)