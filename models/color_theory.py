"""Hue-based color harmony scoring for top/bottom pairings."""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Dict

from models.color_space import contrast_ratio, hex_to_hsl, parse_hex

logger = logging.getLogger(__name__)

HARMONY_TYPES = (
    "complementary",
    "analogous",
    "triadic",
    "split-complementary",
    "monochrome",
    "neutral-accent",
    "neutral-neutral",
    "neutral",
)

HARMONY_EXPLANATIONS: Dict[str, str] = {
    "complementary": "Complementary colors create maximum visual impact",
    "analogous": "Analogous palette for a smooth, cohesive vibe",
    "triadic": "Triadic harmony hits different with balanced energy",
    "split-complementary": "Split-complementary for subtle contrast",
    "monochrome": "Monochrome layers = clean and sophisticated",
    "neutral-accent": "Neutral base lets the accent color pop hard",
    "neutral-neutral": "All-neutral fits are timeless and versatile",
    "neutral": "Solid color pairing with good balance",
}
FALLBACK_EXPLANATION = "Nice color combination"

NEUTRAL_SATURATION = 10
NEUTRAL_FLOOR = 80
MAX_CONTRAST_BONUS = 15


@dataclass(frozen=True)
class HarmonyResult:
    """Represents the outcome of a harmony evaluation."""

    score: int
    harmony_type: str
    explanation: str
    hue_difference: float = 0.0
    base_score: int = 0
    contrast_bonus: float = 0.0
    skin_bonus: float = 0.0


def clamp(value: float, lower: float = 0.0, upper: float = 100.0) -> float:
    return max(lower, min(upper, value))


def round_half_up(value: float) -> int:
    """Round .5 upwards, unlike the banker's rounding of ``round``."""

    return int(math.floor(value + 0.5))


def hue_difference(hue_a: float, hue_b: float) -> float:
    """Circular distance between two hues, in [0, 180]."""

    diff = abs(hue_a - hue_b)
    return 360 - diff if diff > 180 else diff


def skin_tone_score(hex_color: str) -> int:
    """Heuristic fit of a color against a fair, cool-undertone complexion."""

    hue, saturation, _ = hex_to_hsl(hex_color)
    if 40 <= hue <= 65 and saturation > 50:
        return 40
    if 25 <= hue <= 40 and saturation > 60:
        return 50
    if 180 <= hue <= 300:
        return 95
    if saturation < 15:
        return 85
    if hue >= 330 or hue <= 15:
        return 80
    return 70


def _base_classification(diff: float) -> tuple[str, int]:
    if diff <= 30:
        return "analogous", 78
    if 150 <= diff <= 210:
        return "complementary", 88
    if 110 <= diff <= 140:
        return "triadic", 82
    if 60 <= diff <= 90:
        return "split-complementary", 75
    return "neutral", 60


def explain_harmony(harmony_type: str) -> str:
    return HARMONY_EXPLANATIONS.get(harmony_type, FALLBACK_EXPLANATION)


def classify_harmony(top_hex: str, bottom_hex: str) -> HarmonyResult:
    """Classify the hue relationship of a pairing and score it out of 100.

    Overrides are applied in a fixed order and the last one to match wins:
    the monochrome check can replace the hue-band classification, and the
    neutral check (either color nearly unsaturated) replaces both.
    """

    top_hex, bottom_hex = parse_hex(top_hex), parse_hex(bottom_hex)
    top_h, top_s, top_l = hex_to_hsl(top_hex)
    bottom_h, bottom_s, bottom_l = hex_to_hsl(bottom_hex)

    diff = hue_difference(top_h, bottom_h)
    harmony_type, base_score = _base_classification(diff)

    if diff < 10 and abs(top_l - bottom_l) > 20:
        harmony_type, base_score = "monochrome", 85

    if top_s < NEUTRAL_SATURATION or bottom_s < NEUTRAL_SATURATION:
        base_score = max(base_score, NEUTRAL_FLOOR)
        both_neutral = top_s < NEUTRAL_SATURATION and bottom_s < NEUTRAL_SATURATION
        harmony_type = "neutral-neutral" if both_neutral else "neutral-accent"

    contrast_bonus = min(contrast_ratio(top_hex, bottom_hex) * 3, MAX_CONTRAST_BONUS)
    skin_average = (skin_tone_score(top_hex) + skin_tone_score(bottom_hex)) / 2
    skin_bonus = (skin_average - 70) * 0.2

    score = round_half_up(clamp(base_score + contrast_bonus + skin_bonus))
    logger.debug(
        "harmony %s/%s diff=%.1f type=%s base=%s contrast=%.2f skin=%.2f -> %s",
        top_hex,
        bottom_hex,
        diff,
        harmony_type,
        base_score,
        contrast_bonus,
        skin_bonus,
        score,
    )
    return HarmonyResult(
        score=score,
        harmony_type=harmony_type,
        explanation=explain_harmony(harmony_type),
        hue_difference=diff,
        base_score=base_score,
        contrast_bonus=contrast_bonus,
        skin_bonus=skin_bonus,
    )


__all__ = [
    "HARMONY_TYPES",
    "HARMONY_EXPLANATIONS",
    "HarmonyResult",
    "classify_harmony",
    "clamp",
    "explain_harmony",
    "hue_difference",
    "round_half_up",
    "skin_tone_score",
]
