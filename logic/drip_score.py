"""Drip score: a harmony-and-variety blend with a little randomness."""

from __future__ import annotations

import random
from typing import Optional

from models.color_theory import clamp, round_half_up

HARMONY_WEIGHT = 0.7
VARIETY_WEIGHT = 0.3
JITTER_RANGE = 5.0


def generate_drip_score(
    harmony_score: float, variety_bonus: float = 0, rng: Optional[random.Random] = None
) -> int:
    """Return a drip score in [0, 100].

    Each call draws a fresh jitter in [0, 5) from ``rng``, so identical inputs
    can score differently unless the caller passes a seeded source.
    """

    source = rng or random
    jitter = source.random() * JITTER_RANGE
    raw = harmony_score * HARMONY_WEIGHT + variety_bonus * VARIETY_WEIGHT + jitter
    return round_half_up(clamp(raw))


__all__ = ["generate_drip_score", "HARMONY_WEIGHT", "VARIETY_WEIGHT", "JITTER_RANGE"]
