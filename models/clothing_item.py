"""Clothing item data model and helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from models.color_space import parse_hex
from models.taxonomy import normalise_tags, validate_slot


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _ensure_list(value: Any) -> List[Any]:
    """Coerce a scalar or iterable into a list."""

    if value is None:
        return []
    if isinstance(value, (list, tuple, set)):
        return list(value)
    return [value]


@dataclass
class ClothingItem:
    """Represents one top or bottom in the user's wardrobe."""

    item_id: str
    user_id: str
    slot: str
    name: str
    primary_hex: str
    brand: str = ""
    palette: List[str] = field(default_factory=list)
    image_urls: List[str] = field(default_factory=list)
    wear_count: int = 0
    last_worn: Optional[str] = None
    tags: List[str] = field(default_factory=list)
    created_at: str = field(default_factory=utc_now_iso)

    def __post_init__(self) -> None:
        self.slot = validate_slot(self.slot)
        self.primary_hex = parse_hex(self.primary_hex)
        self.palette = [parse_hex(color) for color in _ensure_list(self.palette)]
        self.image_urls = [str(url) for url in _ensure_list(self.image_urls) if str(url).strip()]
        self.tags = normalise_tags(_ensure_list(self.tags))
        self.brand = self.brand or ""
        self.wear_count = int(self.wear_count or 0)
        if self.wear_count < 0:
            raise ValueError(f"wear_count must be >= 0, got {self.wear_count}")
        if not str(self.name).strip():
            raise ValueError("ClothingItem requires a non-empty name")


_FIELD_ALIASES = {
    "id": "item_id",
    "_id": "item_id",
    "userId": "user_id",
    "type": "slot",
    "primaryHex": "primary_hex",
    "imageUrls": "image_urls",
    "wearCount": "wear_count",
    "lastWorn": "last_worn",
    "createdAt": "created_at",
}


def from_raw_metadata(metadata: Dict[str, Any]) -> ClothingItem:
    """Factory to build a :class:`ClothingItem` from loose transport metadata.

    CamelCase keys from the JSON clients are accepted alongside the snake_case
    field names.
    """

    data = {_FIELD_ALIASES.get(key, key): value for key, value in metadata.items()}
    required_fields = ["item_id", "user_id", "slot", "name", "primary_hex"]
    missing = [name for name in required_fields if not data.get(name)]
    if missing:
        raise ValueError(f"Missing required fields for ClothingItem: {missing}")

    return ClothingItem(
        item_id=str(data["item_id"]),
        user_id=str(data["user_id"]),
        slot=str(data["slot"]),
        name=str(data["name"]),
        primary_hex=str(data["primary_hex"]),
        brand=str(data.get("brand") or ""),
        palette=_ensure_list(data.get("palette")),
        image_urls=_ensure_list(data.get("image_urls")),
        wear_count=int(data.get("wear_count") or 0),
        last_worn=data.get("last_worn"),
        tags=_ensure_list(data.get("tags")),
        created_at=str(data.get("created_at") or utc_now_iso()),
    )


__all__ = ["ClothingItem", "from_raw_metadata", "utc_now_iso"]
