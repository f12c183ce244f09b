"""Physically modelled dripping water."""

from __future__ import annotations

import math
import random

from dspkit.dsp import PI_F

_SOUND_DECAY = 0.95
_SYSTEM_DECAY = 0.996
_GAIN = 1.0
_NUM_SOURCES = 10.0
_CENTER_FREQ0 = 450.0
_CENTER_FREQ1 = 600.0
_CENTER_FREQ2 = 750.0
_RESON = 0.9985
_FREQ_SWEEP = 1.0001
_MAX_SHAKE = 2000.0


def _my_random(maximum: int) -> int:
    return random.getrandbits(31) % (maximum + 1)


def _noise_tick() -> float:
    return (random.getrandbits(31) - 1073741823.5) * (1.0 / 1073741823.0)


class Drip:
    """Dripping water; sound stops ``dettack`` seconds after each drip starts."""

    def __init__(self, sample_rate: float, dettack: float) -> None:
        self._init(sample_rate, dettack)

    def _resonance_coeff(self, freq: float, tpidsr: float) -> float:
        return -_RESON * 2.0 * math.cos(freq * tpidsr)

    def _init(self, sample_rate: float, dettack: float) -> None:
        self.sample_rate = sample_rate
        self.dettack = dettack
        self._num_tubes = 10.0
        self._damp = 0.2
        self._shake_max = 0.0
        self._freq = 450.0
        self._freq1 = 600.0
        self._freq2 = 720.0
        self._amp = 0.3

        self._snd_level = 0.0
        tpidsr = 2.0 * PI_F / sample_rate

        self._kloop = sample_rate * dettack
        self._outputs00 = 0.0
        self._outputs01 = 0.0
        self._outputs10 = 0.0
        self._outputs11 = 0.0
        self._outputs20 = 0.0
        self._outputs21 = 0.0
        # The upper two bands are fed from inputs that are never updated,
        # so they hold zero and those bands stay silent.
        self._held_inputs1 = 0.0
        self._held_inputs2 = 0.0

        self._center_freqs0 = self._res_freq0 = _CENTER_FREQ0
        self._center_freqs1 = self._res_freq1 = _CENTER_FREQ1
        self._center_freqs2 = self._res_freq2 = _CENTER_FREQ2
        self._sound_decay = _SOUND_DECAY
        self._system_decay = _SYSTEM_DECAY
        gain = math.log(_NUM_SOURCES) * _GAIN / _NUM_SOURCES
        self._gains0 = self._gains1 = self._gains2 = gain
        self._coeffs01 = _RESON * _RESON
        self._coeffs00 = self._resonance_coeff(_CENTER_FREQ0, tpidsr)
        self._coeffs11 = _RESON * _RESON
        self._coeffs10 = self._resonance_coeff(_CENTER_FREQ1, tpidsr)
        self._coeffs21 = _RESON * _RESON
        self._coeffs20 = self._resonance_coeff(_CENTER_FREQ2, tpidsr)

        self._shake_energy = min(self._amp * 1.0 * _MAX_SHAKE * 0.1, _MAX_SHAKE)
        self._shake_damp = 0.0
        self._shake_max_save = 0.0
        self._num_objects = 10.0
        self._final_z0 = self._final_z1 = self._final_z2 = 0.0

    def _update_parameters(self, tpidsr: float) -> None:
        if self._num_tubes != 0.0 and self._num_tubes != self._num_objects:
            self._num_objects = max(self._num_tubes, 1.0)
        if self._freq != 0.0 and self._freq != self._res_freq0:
            self._res_freq0 = self._freq
            self._coeffs00 = self._resonance_coeff(self._res_freq0, tpidsr)
        if self._damp != 0.0 and self._damp != self._shake_damp:
            self._shake_damp = self._damp
            self._system_decay = _SYSTEM_DECAY + self._shake_damp * 0.002
        if self._shake_max != 0.0 and self._shake_max != self._shake_max_save:
            self._shake_max_save = self._shake_max
            self._shake_energy += self._shake_max_save * _MAX_SHAKE * 0.1
            self._shake_energy = min(self._shake_energy, _MAX_SHAKE)
        if self._freq1 != 0.0 and self._freq1 != self._res_freq1:
            self._res_freq1 = self._freq1
            self._coeffs10 = self._resonance_coeff(self._res_freq1, tpidsr)
        if self._freq2 != 0.0 and self._freq2 != self._res_freq2:
            self._res_freq2 = self._freq2
            self._coeffs20 = self._resonance_coeff(self._res_freq2, tpidsr)

    def _maybe_new_drop(self) -> None:
        if _my_random(32767) >= self._num_objects:
            return
        j = _my_random(3)
        if j == 0:
            self._center_freqs0 = self._res_freq1 * (0.75 + 0.25 * _noise_tick())
            self._gains0 = abs(_noise_tick())
        elif j == 1:
            self._center_freqs1 = self._res_freq1 * (1.0 + 0.25 * _noise_tick())
            self._gains1 = abs(_noise_tick())
        else:
            self._center_freqs2 = self._res_freq1 * (1.25 + 0.25 * _noise_tick())
            self._gains2 = abs(_noise_tick())

    def _sweep(self, tpidsr: float) -> None:
        self._gains0 *= _RESON
        if self._gains0 > 0.001:
            self._center_freqs0 *= _FREQ_SWEEP
            self._coeffs00 = self._resonance_coeff(self._center_freqs0, tpidsr)
        self._gains1 *= _RESON
        if self._gains1 > 0.0:
            self._center_freqs1 *= _FREQ_SWEEP
            self._coeffs10 = self._resonance_coeff(self._center_freqs1, tpidsr)
        self._gains2 *= _RESON
        if self._gains2 > 0.001:
            self._center_freqs2 *= _FREQ_SWEEP
            self._coeffs20 = self._resonance_coeff(self._center_freqs2, tpidsr)

    def process(self, trig: bool = False) -> float:
        """Return the next sample; ``trig`` starts a new drip."""
        tpidsr = 2.0 * PI_F / self.sample_rate
        if trig:
            self._init(self.sample_rate, self.dettack)
        self._update_parameters(tpidsr)

        self._kloop -= 1.0
        if self._kloop == 0.0:
            self._shake_energy = 0.0

        shake_energy = self._shake_energy * self._system_decay
        snd_level = shake_energy

        self._maybe_new_drop()
        self._sweep(tpidsr)

        snd_level *= self._sound_decay
        inputs0 = snd_level * _noise_tick()
        inputs0 *= self._gains0
        inputs0 -= self._outputs00 * self._coeffs00
        inputs0 -= self._outputs01 * self._coeffs01
        self._outputs01 = self._outputs00
        self._outputs00 = inputs0
        data = self._gains0 * self._outputs00

        self._outputs11 = self._outputs10
        self._outputs10 = self._held_inputs1
        data += self._gains1 * self._outputs10

        self._outputs21 = self._outputs20
        self._outputs20 = self._held_inputs2
        data += self._gains2 * self._outputs20

        self._final_z2 = self._final_z1
        self._final_z1 = self._final_z0
        self._final_z0 = data * 4.0

        self._shake_energy = shake_energy
        self._snd_level = snd_level
        return (self._final_z2 - self._final_z0) * 0.005