"""Outfit, plan and history schemas."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from models.clothing_item import ClothingItem


@dataclass
class Outfit:
    top: ClothingItem
    bottom: ClothingItem
    harmony_score: int
    drip_score: int
    harmony_type: str
    explanation: str
    date: str
    day_of_week: str


@dataclass
class DailyPlan:
    date: str
    day_of_week: str
    outfit: Optional[Outfit]


@dataclass
class WeeklyPlanDay:
    day: str
    outfit: Optional[Outfit]


@dataclass
class OutfitHistoryEntry:
    """A worn outfit. Entries are append-only apart from the rating."""

    entry_id: str
    user_id: str
    top_id: str
    bottom_id: str
    harmony_score: int
    drip_score: int
    worn_at: str
    rating: Optional[int] = None
    worn: bool = True
    outfit: Optional[Dict[str, Any]] = field(default=None)
