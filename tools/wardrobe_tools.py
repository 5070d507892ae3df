"""Per-user wardrobe handle exposing instrumented store operations."""

from __future__ import annotations

import uuid
from dataclasses import asdict
from datetime import date, datetime
from typing import Any, Callable, Dict, List, Optional

from pydantic import ValidationError

from logic.validation import (
    ClothingItemInput,
    ClothingItemUpdate,
    RatingInput,
    WearEventInput,
    validation_failure,
)
from memory.streak import current_streak
from models.clothing_item import ClothingItem, from_raw_metadata
from models.errors import ItemNotFound
from models.outfit import OutfitHistoryEntry
from tools.observability import instrument_tool
from tools.wardrobe_store import SQLiteWardrobeStore, WardrobeStore


def _default_store() -> SQLiteWardrobeStore:
    return SQLiteWardrobeStore()


def local_now() -> datetime:
    return datetime.now().astimezone()


def _invalid_item(exc: ValidationError) -> Dict[str, Any]:
    return validation_failure("Invalid clothing item", exc)


class WardrobeTools:
    """The wardrobe aggregate for one user.

    All mutations (add, update, remove, wear, rate) go through this handle so
    the selector only ever sees snapshots returned by :meth:`snapshot`.
    """

    def __init__(
        self,
        store: Optional[WardrobeStore] = None,
        user_id: str = "default",
        clock: Callable[[], datetime] = local_now,
    ) -> None:
        self.store = store or _default_store()
        self.user_id = user_id
        self.clock = clock

    def today(self) -> date:
        return self.clock().date()

    def snapshot(self, slot: Optional[str] = None) -> List[ClothingItem]:
        """Items as domain objects, for selection."""

        return self.store.list_items(self.user_id, slot=slot)

    def _require_item(self, item_id: str) -> ClothingItem:
        item = self.store.get_item(self.user_id, item_id)
        if item is None:
            raise ItemNotFound("clothing item", item_id)
        return item

    @instrument_tool("add_item", input_model=ClothingItemInput, on_validation_error=_invalid_item)
    def add_item(self, **item_data: Any) -> Dict[str, Any]:
        item = from_raw_metadata(
            {
                **item_data,
                "item_id": uuid.uuid4().hex,
                "user_id": self.user_id,
                "wear_count": 0,
                "last_worn": None,
                "created_at": self.clock().isoformat(),
            }
        )
        stored = self.store.create_item(item)
        return asdict(stored)

    @instrument_tool("get_item")
    def get_item(self, item_id: str) -> Optional[Dict[str, Any]]:
        item = self.store.get_item(self.user_id, item_id)
        return asdict(item) if item else None

    @instrument_tool("list_items")
    def list_items(
        self, slot: Optional[str] = None, tag: Optional[str] = None, sort: str = "created"
    ) -> List[Dict[str, Any]]:
        return [asdict(item) for item in self.store.list_items(self.user_id, slot=slot, tag=tag, sort=sort)]

    @instrument_tool("update_item")
    def update_item(self, item_id: str, updates: Dict[str, Any]) -> Dict[str, Any]:
        changes = ClothingItemUpdate.model_validate(updates).model_dump(exclude_unset=True, exclude_none=True)
        updated = self.store.update_item(self.user_id, item_id, changes)
        if updated is None:
            raise ItemNotFound("clothing item", item_id)
        return asdict(updated)

    @instrument_tool("remove_item")
    def remove_item(self, item_id: str) -> Dict[str, Any]:
        if not self.store.delete_item(self.user_id, item_id):
            raise ItemNotFound("clothing item", item_id)
        return {"success": True, "item_id": item_id}

    @instrument_tool("wear_item")
    def wear_item(self, item_id: str) -> Dict[str, Any]:
        """Log a single item as worn without recording an outfit."""

        item = self.store.increment_wear(self.user_id, item_id, self.clock().isoformat())
        if item is None:
            raise ItemNotFound("clothing item", item_id)
        return asdict(item)

    @instrument_tool("wear_outfit", input_model=WearEventInput)
    def wear_outfit(
        self,
        *,
        top_id: str,
        bottom_id: str,
        harmony_score: int,
        drip_score: int,
        outfit: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """Record a worn outfit, bump both wear counters and advance the streak."""

        self._require_item(top_id)
        self._require_item(bottom_id)
        now = self.clock()
        entry = OutfitHistoryEntry(
            entry_id=uuid.uuid4().hex,
            user_id=self.user_id,
            top_id=top_id,
            bottom_id=bottom_id,
            harmony_score=harmony_score,
            drip_score=drip_score,
            worn_at=now.isoformat(),
            outfit=outfit,
        )
        state = self.store.record_wear_event(entry)
        return {"entry": asdict(entry), "streak": state.streak, "last_streak_date": state.last_streak_date}

    @instrument_tool("rate_outfit", input_model=RatingInput)
    def rate_outfit(self, *, entry_id: str, rating: int) -> Dict[str, Any]:
        entry = self.store.rate_history_entry(self.user_id, entry_id, rating)
        if entry is None:
            raise ItemNotFound("history entry", entry_id)
        return asdict(entry)

    @instrument_tool("list_history")
    def list_history(self, limit: Optional[int] = None) -> List[Dict[str, Any]]:
        return [asdict(entry) for entry in self.store.list_history(self.user_id, limit=limit)]

    def history(self, limit: Optional[int] = None) -> List[OutfitHistoryEntry]:
        return self.store.list_history(self.user_id, limit=limit)

    @instrument_tool("get_streak")
    def get_streak(self) -> Dict[str, Any]:
        state = self.store.get_streak(self.user_id)
        return {
            "streak": current_streak(state, self.today()),
            "last_streak_date": state.last_streak_date,
        }


__all__ = ["WardrobeTools", "local_now"]
