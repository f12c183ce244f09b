"""Sample-and-hold and track-and-hold."""

from __future__ import annotations

from enum import Enum


class HoldMode(Enum):
    SAMPLE_HOLD = 0
    TRACK_HOLD = 1


class SampleHold:
    """Runs sample-and-hold and track-and-hold side by side."""

    def __init__(self) -> None:
        self._track = 0.0
        self._sample = 0.0
        self._previous = False

    def process(
        self, trigger: bool, value: float, mode: HoldMode = HoldMode.SAMPLE_HOLD
    ) -> float:
        if trigger:
            if not self._previous:
                self._sample = value
            self._track = value
        self._previous = trigger
        return self._sample if mode is HoldMode.SAMPLE_HOLD else self._track