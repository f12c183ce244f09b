"""VOSIM oscillator: two formant sines shaped by and synced to a carrier."""

from __future__ import annotations

import math

from dspkit.dsp import TWOPI_F


def _sine(phase: float) -> float:
    return math.sin(TWOPI_F * phase)


class VosimOscillator:
    """Two sinewaves multiplied by and synced to a carrier."""

    def __init__(self, sample_rate: float) -> None:
        self.sample_rate = sample_rate
        self._carrier_phase = 0.0
        self._formant_1_phase = 0.0
        self._formant_2_phase = 0.0
        self.set_freq(105.0)
        self.set_form1_freq(1390.0)
        self.set_form2_freq(817.0)
        self.set_shape(0.5)

    def process(self) -> float:
        self._carrier_phase += self._carrier_frequency
        if self._carrier_phase >= 1.0:
            self._carrier_phase -= 1.0
            reset_time = self._carrier_phase / self._carrier_frequency
            self._formant_1_phase = reset_time * self._formant_1_frequency
            self._formant_2_phase = reset_time * self._formant_2_frequency
        else:
            self._formant_1_phase += self._formant_1_frequency
            if self._formant_1_phase >= 1.0:
                self._formant_1_phase -= 1.0
            self._formant_2_phase += self._formant_2_frequency
            if self._formant_2_phase >= 1.0:
                self._formant_2_phase -= 1.0

        carrier = _sine(self._carrier_phase * 0.5 + 0.25) + 1.0
        reset_phase = 0.75 - 0.25 * self._carrier_shape
        reset_amplitude = _sine(reset_phase)
        formant_0 = _sine(self._formant_1_phase + reset_phase) - reset_amplitude
        formant_1 = _sine(self._formant_2_phase + reset_phase) - reset_amplitude
        return carrier * (formant_0 + formant_1) * 0.25 + reset_amplitude

    def set_freq(self, freq: float) -> None:
        """Carrier frequency in Hz."""
        self._carrier_frequency = min(freq / self.sample_rate, 0.25)

    def set_form1_freq(self, freq: float) -> None:
        self._formant_1_frequency = min(freq / self.sample_rate, 0.25)

    def set_form2_freq(self, freq: float) -> None:
        self._formant_2_frequency = min(freq / self.sample_rate, 0.25)

    def set_shape(self, shape: float) -> None:
        """Waveshape, best -1 to 1."""
        self._carrier_shape = shape