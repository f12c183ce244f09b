"""Round-robin polyphonic plucked strings."""

from __future__ import annotations

from dspkit.dcblock import DcBlock
from dspkit.dsp import mtof
from dspkit.pluck import Pluck, PluckMode

_BUFFER_SIZE = 256


class PolyPluck:
    """Several pluck voices; each trigger moves to the next voice."""

    def __init__(self, sample_rate: float, num_voices: int) -> None:
        if num_voices < 1:
            raise ValueError("num_voices must be positive")
        self._active = 0
        self._damp = 0.95
        self._decay = 0.75
        self._voices = []
        for _ in range(num_voices):
            voice = Pluck(sample_rate, _BUFFER_SIZE, PluckMode.RECURSIVE)
            voice.damp = 0.85
            voice.amp = 0.18
            voice.decay = 0.85
            self._voices.append(voice)
        self._blocker = DcBlock(sample_rate)

    def process(self, trig: float, note: float) -> float:
        """Sum all voices; ``trig > 0`` plucks the next voice at MIDI ``note``."""
        triggered = trig > 0.0
        if triggered:
            self._active = (self._active + 1) % len(self._voices)
            voice = self._voices[self._active]
            voice.damp = self._damp
            voice.decay = self._decay
            voice.amp = 0.25
        self._voices[self._active].freq = mtof(note)

        total = sum(
            voice.process(1.0 if triggered and index == self._active else 0.0)
            for index, voice in enumerate(self._voices)
        )
        return self._blocker.process(total)

    def set_decay(self, p: float) -> None:
        """Damping applied to newly triggered voices, 0 to 1."""
        self._damp = p