"""Probabilistic trigger."""

from __future__ import annotations

import random

from dspkit.dsp import RAND_MAX


def may_trigger(prob: float) -> bool:
    """Return True with probability ``prob`` (1 always, below 0 never)."""
    return random.getrandbits(31) / RAND_MAX <= prob