"""Wardrobe usage analytics derived from items and wear history."""

from __future__ import annotations

from dataclasses import asdict
from datetime import date, datetime, timedelta
from typing import Dict, Iterable, List, Optional, Sequence

from models.clothing_item import ClothingItem
from models.color_space import hex_to_rgb
from models.color_theory import round_half_up
from models.outfit import OutfitHistoryEntry
from models.taxonomy import COLOR_FAMILIES

RECENT_WINDOW = 30
RECENT_HISTORY_PREVIEW = 10


def _entry_date(entry: OutfitHistoryEntry) -> date:
    return datetime.fromisoformat(entry.worn_at).date()


def streak_from_history(history: Iterable[OutfitHistoryEntry], today: date) -> int:
    """Count consecutive worn days ending today, or yesterday if today is empty."""

    worn_days = {_entry_date(entry) for entry in history if entry.worn}
    cursor = today if today in worn_days else today - timedelta(days=1)
    streak = 0
    while cursor in worn_days:
        streak += 1
        cursor -= timedelta(days=1)
    return streak


def color_family(hex_color: str) -> str:
    r, g, b = hex_to_rgb(hex_color)
    saturation = (max(r, g, b) - min(r, g, b)) / 255
    if saturation < 0.15:
        return "neutral"
    if b > r and b > g:
        return "cool"
    if r > b:
        return "warm"
    return "earth"


def color_family_distribution(items: Iterable[ClothingItem]) -> Dict[str, int]:
    counts = {family: 0 for family in COLOR_FAMILIES}
    for item in items:
        counts[color_family(item.primary_hex)] += 1
    return counts


def _most_worn(items: Sequence[ClothingItem]) -> Optional[ClothingItem]:
    if not items:
        return None
    return max(items, key=lambda item: item.wear_count)


def _average(values: List[int]) -> int:
    return round_half_up(sum(values) / len(values)) if values else 0


def summarize_wardrobe(
    items: Sequence[ClothingItem], history: Sequence[OutfitHistoryEntry], today: date
) -> Dict[str, object]:
    """Build the analytics summary; ``history`` is expected newest first."""

    tops = [item for item in items if item.slot == "top"]
    bottoms = [item for item in items if item.slot == "bottom"]
    recent = list(history[:RECENT_WINDOW])
    most_worn_top = _most_worn(tops)
    most_worn_bottom = _most_worn(bottoms)

    return {
        "total_items": len(items),
        "tops": len(tops),
        "bottoms": len(bottoms),
        "total_wears": len(recent),
        "avg_harmony": _average([entry.harmony_score for entry in recent]),
        "avg_drip": _average([entry.drip_score for entry in recent]),
        "streak": streak_from_history(history, today),
        "most_worn_top": asdict(most_worn_top) if most_worn_top else None,
        "most_worn_bottom": asdict(most_worn_bottom) if most_worn_bottom else None,
        "color_families": color_family_distribution(items),
        "recent_history": [asdict(entry) for entry in recent[:RECENT_HISTORY_PREVIEW]],
    }


__all__ = [
    "summarize_wardrobe",
    "streak_from_history",
    "color_family",
    "color_family_distribution",
]
