"""Wardrobe storage, item model and wardrobe tool tests."""

from __future__ import annotations

import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Dict

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from memory.streak import StreakState, advance_streak, current_streak
from models import taxonomy
from models.clothing_item import ClothingItem, from_raw_metadata
from models.errors import InvalidColorFormat, ItemNotFound
from models.outfit import OutfitHistoryEntry
from tools.wardrobe_store import SQLiteWardrobeStore
from tools.wardrobe_tools import WardrobeTools


class _Clock:
    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **delta: float) -> None:
        self.now = self.now + timedelta(**delta)


@pytest.fixture()
def clock() -> _Clock:
    return _Clock(datetime(2026, 10, 19, 8, 30, tzinfo=timezone.utc))


@pytest.fixture()
def store(tmp_path: Path) -> SQLiteWardrobeStore:
    return SQLiteWardrobeStore(tmp_path / "wardrobe.db")


@pytest.fixture()
def wardrobe(store: SQLiteWardrobeStore, clock: _Clock) -> WardrobeTools:
    return WardrobeTools(store, user_id="user-123", clock=clock)


@pytest.fixture()
def sample_metadata() -> Dict[str, object]:
    return {
        "id": "item-1",
        "userId": "user-123",
        "type": "hoodie",
        "name": "Nike Tech Fleece Navy",
        "brand": "Nike",
        "primaryHex": "#1B2A4A",
        "palette": ["#1b2a4a", "#2D4373"],
        "tags": ["School Safe", "favorite", "favorite"],
        "wearCount": 2,
    }


def test_validate_slot_accepts_legacy_labels() -> None:
    assert taxonomy.validate_slot("Hoodie") == "top"
    assert taxonomy.validate_slot("shorts") == "bottom"
    assert taxonomy.validate_slot("bottom") == "bottom"
    with pytest.raises(ValueError):
        taxonomy.validate_slot("shoes")


def test_from_raw_metadata_normalises_fields(sample_metadata: Dict[str, object]) -> None:
    """CamelCase transport keys map onto the item and values are normalised."""

    item = from_raw_metadata(sample_metadata)
    assert item.item_id == "item-1"
    assert item.slot == "top"
    assert item.primary_hex == "#1b2a4a"
    assert item.palette == ["#1b2a4a", "#2d4373"]
    assert item.tags == ["school-safe", "favorite"]
    assert item.wear_count == 2
    assert item.last_worn is None


def test_item_invariants_are_enforced(sample_metadata: Dict[str, object]) -> None:
    with pytest.raises(InvalidColorFormat):
        from_raw_metadata({**sample_metadata, "primaryHex": "navy"})
    with pytest.raises(ValueError):
        from_raw_metadata({**sample_metadata, "wearCount": -1})
    with pytest.raises(ValueError):
        from_raw_metadata({**sample_metadata, "name": ""})


def test_store_round_trip(store: SQLiteWardrobeStore, sample_metadata: Dict[str, object]) -> None:
    item = store.create_item(from_raw_metadata(sample_metadata))
    loaded = store.get_item("user-123", "item-1")
    assert loaded == item
    assert store.get_item("someone-else", "item-1") is None


def test_add_and_list_items_by_slot_and_tag(wardrobe: WardrobeTools) -> None:
    top = wardrobe.add_item(slot="hoodie", name="Gray Hoodie", primary_hex="#808080", tags=["school-safe"])
    wardrobe.add_item(slot="shorts", name="Red Shorts", primary_hex="#cc0000", tags=["gym-only"])

    assert top["slot"] == "top"
    assert top["wear_count"] == 0
    assert top["created_at"].startswith("2026-10-19")
    assert [item["name"] for item in wardrobe.list_items(slot="top")] == ["Gray Hoodie"]
    assert [item["name"] for item in wardrobe.list_items(tag="gym-only")] == ["Red Shorts"]
    assert len(wardrobe.list_items()) == 2


def test_add_item_with_bad_color_needs_review(wardrobe: WardrobeTools) -> None:
    result = wardrobe.add_item(slot="top", name="Mystery", primary_hex="blue")
    assert result["status"] == "needs_review"
    assert wardrobe.list_items() == []


def test_update_and_remove_item(wardrobe: WardrobeTools) -> None:
    item = wardrobe.add_item(slot="top", name="Teal Hoodie", primary_hex="#008080")
    updated = wardrobe.update_item(item["item_id"], {"name": "Teal Heritage", "primary_hex": "#20B2AA"})
    assert updated["name"] == "Teal Heritage"
    assert updated["primary_hex"] == "#20b2aa"
    assert updated["created_at"] == item["created_at"]

    assert wardrobe.remove_item(item["item_id"])["success"] is True
    with pytest.raises(ItemNotFound):
        wardrobe.remove_item(item["item_id"])
    with pytest.raises(ItemNotFound):
        wardrobe.update_item("missing", {"name": "x"})


def test_wear_item_and_sort_by_last_worn(wardrobe: WardrobeTools, clock: _Clock) -> None:
    first = wardrobe.add_item(slot="top", name="First", primary_hex="#111111")
    second = wardrobe.add_item(slot="top", name="Second", primary_hex="#222222")
    wardrobe.wear_item(first["item_id"])
    clock.advance(hours=1)
    worn = wardrobe.wear_item(second["item_id"])

    assert worn["wear_count"] == 1
    assert worn["last_worn"] == clock.now.isoformat()
    assert [item["name"] for item in wardrobe.list_items(sort="last_worn")] == ["Second", "First"]
    with pytest.raises(ItemNotFound):
        wardrobe.wear_item("missing")


def test_wear_outfit_updates_counts_history_and_streak(wardrobe: WardrobeTools, clock: _Clock) -> None:
    top = wardrobe.add_item(slot="top", name="Navy", primary_hex="#1b2a4a")
    bottom = wardrobe.add_item(slot="bottom", name="White", primary_hex="#e8e8e8")

    result = wardrobe.wear_outfit(
        top_id=top["item_id"], bottom_id=bottom["item_id"], harmony_score=91, drip_score=88
    )
    assert result["streak"] == 1
    assert wardrobe.get_item(top["item_id"])["wear_count"] == 1
    assert wardrobe.get_item(bottom["item_id"])["last_worn"] == clock.now.isoformat()

    history = wardrobe.list_history()
    assert len(history) == 1
    assert history[0]["harmony_score"] == 91
    assert history[0]["worn"] is True
    assert history[0]["rating"] is None

    rated = wardrobe.rate_outfit(entry_id=history[0]["entry_id"], rating=5)
    assert rated["rating"] == 5
    with pytest.raises(ItemNotFound):
        wardrobe.rate_outfit(entry_id="missing", rating=3)


def test_wear_outfit_rejects_unknown_items(wardrobe: WardrobeTools) -> None:
    top = wardrobe.add_item(slot="top", name="Navy", primary_hex="#1b2a4a")
    with pytest.raises(ItemNotFound):
        wardrobe.wear_outfit(top_id=top["item_id"], bottom_id="ghost", harmony_score=80, drip_score=80)
    assert wardrobe.list_history() == []


def test_record_wear_event_is_atomic(store: SQLiteWardrobeStore) -> None:
    """A failing bump rolls back the history row and the other counter."""

    store.create_item(ClothingItem(item_id="t", user_id="u", slot="top", name="Top", primary_hex="#111111"))
    entry = OutfitHistoryEntry(
        entry_id="e1",
        user_id="u",
        top_id="t",
        bottom_id="ghost",
        harmony_score=80,
        drip_score=80,
        worn_at="2026-10-19T09:00:00+00:00",
    )
    with pytest.raises(ItemNotFound):
        store.record_wear_event(entry)
    assert store.list_history("u") == []
    assert store.get_item("u", "t").wear_count == 0
    assert store.get_streak("u").streak == 0


def test_advance_streak_rules() -> None:
    monday = datetime(2026, 10, 19).date()
    state = advance_streak(StreakState(user_id="u"), monday)
    assert (state.streak, state.last_streak_date) == (1, "2026-10-19")
    assert advance_streak(state, monday).streak == 1
    tuesday = advance_streak(state, monday + timedelta(days=1))
    assert tuesday.streak == 2
    assert advance_streak(tuesday, monday + timedelta(days=5)).streak == 1


def test_current_streak_expires_after_a_missed_day() -> None:
    state = StreakState(user_id="u", streak=4, last_streak_date="2026-10-19")
    assert current_streak(state, datetime(2026, 10, 19).date()) == 4
    assert current_streak(state, datetime(2026, 10, 20).date()) == 4
    assert current_streak(state, datetime(2026, 10, 21).date()) == 0
    assert current_streak(StreakState(user_id="u"), datetime(2026, 10, 21).date()) == 0
