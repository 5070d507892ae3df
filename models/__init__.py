"""Model package exports."""

from models.clothing_item import ClothingItem, from_raw_metadata
from models.errors import ClosetError, InsufficientInventory, InvalidColorFormat, ItemNotFound, NoCandidateFound
from models.outfit import DailyPlan, Outfit, OutfitHistoryEntry, WeeklyPlanDay

__all__ = [
    "ClothingItem",
    "from_raw_metadata",
    "ClosetError",
    "InsufficientInventory",
    "InvalidColorFormat",
    "ItemNotFound",
    "NoCandidateFound",
    "DailyPlan",
    "Outfit",
    "OutfitHistoryEntry",
    "WeeklyPlanDay",
]
