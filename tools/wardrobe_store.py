"""Wardrobe storage abstractions and SQLite implementation."""
from __future__ import annotations

import json
import sqlite3
from dataclasses import asdict
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional

from memory.streak import StreakState, advance_streak
from models.clothing_item import ClothingItem
from models.errors import ItemNotFound
from models.outfit import OutfitHistoryEntry
from models.taxonomy import normalise_tags, validate_slot

SORT_ORDERS = {
    "created": "created_at DESC, rowid DESC",
    "last_worn": "last_worn IS NULL, last_worn DESC, rowid DESC",
}


class WardrobeStore:
    """Persistence interface for clothing items, wear history and streaks."""

    def create_item(self, item: ClothingItem) -> ClothingItem:
        raise NotImplementedError

    def get_item(self, user_id: str, item_id: str) -> Optional[ClothingItem]:
        raise NotImplementedError

    def list_items(
        self, user_id: str, slot: Optional[str] = None, tag: Optional[str] = None, sort: str = "created"
    ) -> List[ClothingItem]:
        raise NotImplementedError

    def update_item(self, user_id: str, item_id: str, updated_fields: Dict[str, object]) -> Optional[ClothingItem]:
        raise NotImplementedError

    def delete_item(self, user_id: str, item_id: str) -> bool:
        raise NotImplementedError

    def increment_wear(self, user_id: str, item_id: str, worn_at: str) -> Optional[ClothingItem]:
        raise NotImplementedError

    def record_wear_event(self, entry: OutfitHistoryEntry) -> StreakState:
        raise NotImplementedError

    def list_history(self, user_id: str, limit: Optional[int] = None) -> List[OutfitHistoryEntry]:
        raise NotImplementedError

    def get_history_entry(self, user_id: str, entry_id: str) -> Optional[OutfitHistoryEntry]:
        raise NotImplementedError

    def rate_history_entry(self, user_id: str, entry_id: str, rating: int) -> Optional[OutfitHistoryEntry]:
        raise NotImplementedError

    def get_streak(self, user_id: str) -> StreakState:
        raise NotImplementedError


class SQLiteWardrobeStore(WardrobeStore):
    """Local SQLite-backed store for the wardrobe aggregate."""

    def __init__(self, database_path: str | Path = "data/wardrobe.db") -> None:
        self.database_path = Path(database_path)
        if self.database_path.parent and not self.database_path.parent.exists():
            self.database_path.parent.mkdir(parents=True, exist_ok=True)
        self._ensure_tables()

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.database_path)
        conn.row_factory = sqlite3.Row
        return conn

    def _ensure_tables(self) -> None:
        with self._connect() as conn:
            conn.executescript(
                """
                CREATE TABLE IF NOT EXISTS clothing_items (
                    user_id TEXT NOT NULL,
                    item_id TEXT NOT NULL,
                    slot TEXT NOT NULL,
                    name TEXT NOT NULL,
                    brand TEXT,
                    primary_hex TEXT NOT NULL,
                    palette TEXT,
                    image_urls TEXT,
                    wear_count INTEGER NOT NULL DEFAULT 0,
                    last_worn TEXT,
                    tags TEXT,
                    created_at TEXT NOT NULL,
                    PRIMARY KEY (user_id, item_id)
                );
                CREATE INDEX IF NOT EXISTS idx_clothing_slot ON clothing_items (user_id, slot);
                CREATE TABLE IF NOT EXISTS outfit_history (
                    entry_id TEXT PRIMARY KEY,
                    user_id TEXT NOT NULL,
                    top_id TEXT NOT NULL,
                    bottom_id TEXT NOT NULL,
                    harmony_score INTEGER NOT NULL,
                    drip_score INTEGER NOT NULL,
                    worn_at TEXT NOT NULL,
                    rating INTEGER,
                    worn INTEGER NOT NULL DEFAULT 1,
                    outfit TEXT
                );
                CREATE INDEX IF NOT EXISTS idx_history_user ON outfit_history (user_id, worn_at);
                CREATE TABLE IF NOT EXISTS streaks (
                    user_id TEXT PRIMARY KEY,
                    streak INTEGER NOT NULL DEFAULT 0,
                    last_streak_date TEXT
                );
                """
            )

    @staticmethod
    def _serialise_list(values: Optional[List[object]]) -> str:
        return json.dumps(values or [])

    @staticmethod
    def _deserialise_list(raw: str) -> List[object]:
        return json.loads(raw) if raw else []

    def create_item(self, item: ClothingItem) -> ClothingItem:
        with self._connect() as conn:
            conn.execute(
                """
                INSERT OR REPLACE INTO clothing_items (
                    user_id, item_id, slot, name, brand, primary_hex, palette,
                    image_urls, wear_count, last_worn, tags, created_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    item.user_id,
                    item.item_id,
                    item.slot,
                    item.name,
                    item.brand,
                    item.primary_hex,
                    self._serialise_list(item.palette),
                    self._serialise_list(item.image_urls),
                    item.wear_count,
                    item.last_worn,
                    self._serialise_list(item.tags),
                    item.created_at,
                ),
            )
        return item

    def _row_to_item(self, row: sqlite3.Row) -> ClothingItem:
        return ClothingItem(
            item_id=row["item_id"],
            user_id=row["user_id"],
            slot=row["slot"],
            name=row["name"],
            brand=row["brand"] or "",
            primary_hex=row["primary_hex"],
            palette=self._deserialise_list(row["palette"]),
            image_urls=self._deserialise_list(row["image_urls"]),
            wear_count=row["wear_count"],
            last_worn=row["last_worn"],
            tags=self._deserialise_list(row["tags"]),
            created_at=row["created_at"],
        )

    def get_item(self, user_id: str, item_id: str) -> Optional[ClothingItem]:
        with self._connect() as conn:
            cursor = conn.execute(
                "SELECT * FROM clothing_items WHERE user_id = ? AND item_id = ?",
                (user_id, item_id),
            )
            row = cursor.fetchone()
            return self._row_to_item(row) if row else None

    def list_items(
        self, user_id: str, slot: Optional[str] = None, tag: Optional[str] = None, sort: str = "created"
    ) -> List[ClothingItem]:
        if sort not in SORT_ORDERS:
            raise ValueError(f"Unsupported sort '{sort}'. Allowed: {sorted(SORT_ORDERS)}")
        query = "SELECT * FROM clothing_items WHERE user_id = ?"
        params: List[object] = [user_id]
        if slot:
            query += " AND slot = ?"
            params.append(validate_slot(slot))
        query += f" ORDER BY {SORT_ORDERS[sort]}"
        with self._connect() as conn:
            items = [self._row_to_item(row) for row in conn.execute(query, params).fetchall()]
        if tag:
            wanted = normalise_tags([tag])
            items = [item for item in items if set(wanted).intersection(item.tags)]
        return items

    def update_item(self, user_id: str, item_id: str, updated_fields: Dict[str, object]) -> Optional[ClothingItem]:
        current = self.get_item(user_id, item_id)
        if not current:
            return None

        for key, value in updated_fields.items():
            if key in {"user_id", "item_id", "created_at"}:
                continue
            if hasattr(current, key):
                setattr(current, key, value)

        validated = ClothingItem(**asdict(current))
        return self.create_item(validated)

    def delete_item(self, user_id: str, item_id: str) -> bool:
        with self._connect() as conn:
            cursor = conn.execute(
                "DELETE FROM clothing_items WHERE user_id = ? AND item_id = ?",
                (user_id, item_id),
            )
            return cursor.rowcount > 0

    @staticmethod
    def _bump_wear(conn: sqlite3.Connection, user_id: str, item_id: str, worn_at: str) -> None:
        cursor = conn.execute(
            """
            UPDATE clothing_items SET wear_count = wear_count + 1, last_worn = ?
            WHERE user_id = ? AND item_id = ?
            """,
            (worn_at, user_id, item_id),
        )
        if cursor.rowcount == 0:
            raise ItemNotFound("clothing item", item_id)

    def increment_wear(self, user_id: str, item_id: str, worn_at: str) -> Optional[ClothingItem]:
        try:
            with self._connect() as conn:
                self._bump_wear(conn, user_id, item_id, worn_at)
        except ItemNotFound:
            return None
        return self.get_item(user_id, item_id)

    def _read_streak(self, conn: sqlite3.Connection, user_id: str) -> StreakState:
        row = conn.execute(
            "SELECT streak, last_streak_date FROM streaks WHERE user_id = ?", (user_id,)
        ).fetchone()
        if not row:
            return StreakState(user_id=user_id)
        return StreakState(user_id=user_id, streak=row["streak"], last_streak_date=row["last_streak_date"])

    def record_wear_event(self, entry: OutfitHistoryEntry) -> StreakState:
        """Append history, bump both items and advance the streak in one transaction.

        Raises :class:`ItemNotFound` and leaves the store untouched when either
        item does not exist.
        """

        worn_on = datetime.fromisoformat(entry.worn_at).date()
        with self._connect() as conn:
            conn.execute(
                """
                INSERT INTO outfit_history (
                    entry_id, user_id, top_id, bottom_id, harmony_score, drip_score,
                    worn_at, rating, worn, outfit
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    entry.entry_id,
                    entry.user_id,
                    entry.top_id,
                    entry.bottom_id,
                    entry.harmony_score,
                    entry.drip_score,
                    entry.worn_at,
                    entry.rating,
                    int(entry.worn),
                    json.dumps(entry.outfit) if entry.outfit is not None else None,
                ),
            )
            self._bump_wear(conn, entry.user_id, entry.top_id, entry.worn_at)
            self._bump_wear(conn, entry.user_id, entry.bottom_id, entry.worn_at)
            state = advance_streak(self._read_streak(conn, entry.user_id), worn_on)
            conn.execute(
                """
                INSERT INTO streaks (user_id, streak, last_streak_date) VALUES (?, ?, ?)
                ON CONFLICT(user_id) DO UPDATE SET
                    streak = excluded.streak, last_streak_date = excluded.last_streak_date
                """,
                (entry.user_id, state.streak, state.last_streak_date),
            )
        return state

    def _row_to_entry(self, row: sqlite3.Row) -> OutfitHistoryEntry:
        return OutfitHistoryEntry(
            entry_id=row["entry_id"],
            user_id=row["user_id"],
            top_id=row["top_id"],
            bottom_id=row["bottom_id"],
            harmony_score=row["harmony_score"],
            drip_score=row["drip_score"],
            worn_at=row["worn_at"],
            rating=row["rating"],
            worn=bool(row["worn"]),
            outfit=json.loads(row["outfit"]) if row["outfit"] else None,
        )

    def list_history(self, user_id: str, limit: Optional[int] = None) -> List[OutfitHistoryEntry]:
        query = "SELECT * FROM outfit_history WHERE user_id = ? ORDER BY worn_at DESC, rowid DESC"
        params: List[object] = [user_id]
        if limit is not None:
            query += " LIMIT ?"
            params.append(int(limit))
        with self._connect() as conn:
            return [self._row_to_entry(row) for row in conn.execute(query, params).fetchall()]

    def get_history_entry(self, user_id: str, entry_id: str) -> Optional[OutfitHistoryEntry]:
        with self._connect() as conn:
            row = conn.execute(
                "SELECT * FROM outfit_history WHERE user_id = ? AND entry_id = ?",
                (user_id, entry_id),
            ).fetchone()
            return self._row_to_entry(row) if row else None

    def rate_history_entry(self, user_id: str, entry_id: str, rating: int) -> Optional[OutfitHistoryEntry]:
        with self._connect() as conn:
            cursor = conn.execute(
                "UPDATE outfit_history SET rating = ? WHERE user_id = ? AND entry_id = ?",
                (rating, user_id, entry_id),
            )
            if cursor.rowcount == 0:
                return None
        return self.get_history_entry(user_id, entry_id)

    def get_streak(self, user_id: str) -> StreakState:
        with self._connect() as conn:
            return self._read_streak(conn, user_id)


__all__ = ["WardrobeStore", "SQLiteWardrobeStore", "SORT_ORDERS"]
