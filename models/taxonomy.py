"""Canonical taxonomy definitions for closet items and planning.

This module centralises the wardrobe slot labels, weekday names and the small
phrase tables used when captioning outfits. Helper functions keep validation
logic consistent across the store, the tools and the data models.
"""

from typing import Dict, Iterable, List


def _normalize_key(value: str) -> str:
    """Normalise a free-form string into a taxonomy key."""

    return value.strip().lower().replace(" ", "-")


SLOTS: List[str] = ["top", "bottom"]

SLOT_ALIASES: Dict[str, str] = {
    "top": "top",
    "hoodie": "top",
    "bottom": "bottom",
    "shorts": "bottom",
}

WEEKDAYS: List[str] = [
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
]

WORKWEEK: List[str] = WEEKDAYS[:5]

DAY_VIBES: Dict[str, List[str]] = {
    "Monday": ["fresh start energy", "school drip"],
    "Tuesday": ["mid-week flex", "low-key fire"],
    "Wednesday": ["hump day heat", "peak performance"],
    "Thursday": ["almost-weekend energy", "effortless cool"],
    "Friday": ["weekend preview", "main character energy"],
    "Saturday": ["full casual flex", "hangout certified"],
    "Sunday": ["recovery day clean", "chill mode activated"],
}

DEFAULT_VIBES: List[str] = ["everyday drip", "locked in"]

COLOR_FAMILIES: List[str] = ["cool", "warm", "neutral", "earth"]


def validate_slot(value: str) -> str:
    """Validate and normalise a slot value.

    Accepts the legacy ``hoodie``/``shorts`` labels and raises a
    :class:`ValueError` for anything outside the canonical slots.
    """

    key = _normalize_key(str(value))
    if key not in SLOT_ALIASES:
        raise ValueError(f"Unsupported slot '{value}'. Allowed: {SLOTS}")
    return SLOT_ALIASES[key]


def normalise_tags(values: Iterable[str]) -> List[str]:
    """Normalise and deduplicate free-text tags, preserving order."""

    normalised = []
    seen = set()
    for value in values:
        key = _normalize_key(str(value))
        if key and key not in seen:
            normalised.append(key)
            seen.add(key)
    return normalised


def weekday_name(day_index: int) -> str:
    """Return the weekday name for a ``date.weekday()`` index."""

    return WEEKDAYS[day_index % 7]


__all__ = [
    "SLOTS",
    "SLOT_ALIASES",
    "WEEKDAYS",
    "WORKWEEK",
    "DAY_VIBES",
    "DEFAULT_VIBES",
    "COLOR_FAMILIES",
    "validate_slot",
    "normalise_tags",
    "weekday_name",
]
