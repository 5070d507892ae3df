"""Hype captions for a chosen outfit."""

from __future__ import annotations

import random
from typing import List, Optional

from models.color_theory import HarmonyResult
from models.taxonomy import DAY_VIBES, DEFAULT_VIBES

DEFAULT_WEARER = "fam"

MOTIVATIONAL_CLOSERS: List[str] = [
    "Walk in like you own the place, king. 👑",
    "Best-dressed in the building and it's not even close. 🔥",
    "Confidence is the best accessory, and you've got it locked. 💯",
    "This fit? Certified heat. No debate. 🏀",
]


def _hype_lines(harmony: HarmonyResult, day_of_week: str, vibe: str, wearer: str) -> List[str]:
    return [
        f"This {harmony.harmony_type} combo is absolutely unmatched. {harmony.explanation} "
        f"and on a {day_of_week}? That's {vibe} energy right there.",
        f"Yo {wearer}, this fit goes crazy. The {harmony.harmony_type} pairing gives off pure {vibe} vibes. "
        f"{harmony.explanation}. You're about to be the best-dressed in the building.",
        f"{harmony.explanation}. This {day_of_week} fit is giving {vibe} and honestly nobody's touching "
        f"this drip. Harmony score: {harmony.score}/100.",
    ]


def generate_style_explanation(
    harmony: HarmonyResult,
    day_of_week: str,
    rng: Optional[random.Random] = None,
    wearer: str = DEFAULT_WEARER,
) -> str:
    """Pick a vibe, a hype line and a closer for the given weekday."""

    source = rng or random
    vibe = source.choice(DAY_VIBES.get(day_of_week, DEFAULT_VIBES))
    line = source.choice(_hype_lines(harmony, day_of_week, vibe, wearer))
    closer = source.choice(MOTIVATIONAL_CLOSERS)
    return f"{line} {closer}"


__all__ = ["generate_style_explanation", "MOTIVATIONAL_CLOSERS", "DEFAULT_WEARER"]
