"""Seed a wardrobe with the starter set of tops and bottoms."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Dict, List

from tools.wardrobe_store import SQLiteWardrobeStore
from tools.wardrobe_tools import WardrobeTools

STARTER_ITEMS: List[Dict[str, object]] = [
    {"slot": "top", "name": "Nike Tech Fleece Black", "brand": "Nike", "primary_hex": "#1a1a1a", "palette": ["#1a1a1a", "#333333", "#4d4d4d"], "tags": ["school-safe", "gym-only", "favorite"]},
    {"slot": "top", "name": "Jordan Essentials Gray", "brand": "Jordan", "primary_hex": "#808080", "palette": ["#808080", "#999999", "#666666"], "tags": ["school-safe"]},
    {"slot": "top", "name": "Nike Tech Fleece Navy", "brand": "Nike", "primary_hex": "#1b2a4a", "palette": ["#1b2a4a", "#2d4373", "#0f1d33"], "tags": ["school-safe", "favorite"]},
    {"slot": "top", "name": "Champion Reverse Weave Forest", "brand": "Champion", "primary_hex": "#2d5a27", "palette": ["#2d5a27", "#3d7a37", "#1d3a17"], "tags": ["school-safe"]},
    {"slot": "top", "name": "Under Armour Storm Crimson", "brand": "Under Armour", "primary_hex": "#8b0000", "palette": ["#8b0000", "#a52a2a", "#660000"], "tags": ["gym-only"]},
    {"slot": "top", "name": "Nike Club Fleece White", "brand": "Nike", "primary_hex": "#f0f0f0", "palette": ["#f0f0f0", "#e0e0e0", "#ffffff"], "tags": ["school-safe", "new-drop"]},
    {"slot": "top", "name": "Jordan Flight Heritage Teal", "brand": "Jordan", "primary_hex": "#008080", "palette": ["#008080", "#20b2aa", "#005f5f"], "tags": ["school-safe", "favorite"]},
    {"slot": "top", "name": "Nike Sportswear Charcoal", "brand": "Nike", "primary_hex": "#36454f", "palette": ["#36454f", "#4a5c6a", "#2a3640"], "tags": ["school-safe"]},
    {"slot": "bottom", "name": "Nike Dri-FIT Black Shorts", "brand": "Nike", "primary_hex": "#111111", "palette": ["#111111", "#222222", "#333333"], "tags": ["gym-only", "school-safe", "favorite"]},
    {"slot": "bottom", "name": "Jordan Mesh Basketball Red", "brand": "Jordan", "primary_hex": "#cc0000", "palette": ["#cc0000", "#ff0000", "#990000"], "tags": ["gym-only"]},
    {"slot": "bottom", "name": "Nike Tech Fleece Gray Shorts", "brand": "Nike", "primary_hex": "#6b6b6b", "palette": ["#6b6b6b", "#858585", "#525252"], "tags": ["school-safe"]},
    {"slot": "bottom", "name": "Under Armour Cargo Olive", "brand": "Under Armour", "primary_hex": "#556b2f", "palette": ["#556b2f", "#6b8e23", "#3d4f22"], "tags": ["school-safe"]},
    {"slot": "bottom", "name": "Champion Classic Navy Shorts", "brand": "Champion", "primary_hex": "#1c2951", "palette": ["#1c2951", "#2a3d6e", "#131c38"], "tags": ["school-safe"]},
    {"slot": "bottom", "name": "Nike Sportswear White Shorts", "brand": "Nike", "primary_hex": "#e8e8e8", "palette": ["#e8e8e8", "#d4d4d4", "#f5f5f5"], "tags": ["school-safe", "new-drop"]},
    {"slot": "bottom", "name": "Jordan Dri-FIT Teal Shorts", "brand": "Jordan", "primary_hex": "#20b2aa", "palette": ["#20b2aa", "#3cb3ad", "#178f89"], "tags": ["gym-only", "new-drop"]},
]


def seed_wardrobe(wardrobe: WardrobeTools, replace: bool = False) -> int:
    """Add the starter items; with ``replace`` the user's items are cleared first."""

    if replace:
        for item in wardrobe.snapshot():
            wardrobe.remove_item(item.item_id)
    for item in STARTER_ITEMS:
        wardrobe.add_item(**item)
    return len(STARTER_ITEMS)


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed the starter wardrobe")
    parser.add_argument(
        "--database",
        default="data/wardrobe.db",
        help="Path to the SQLite wardrobe database.",
    )
    parser.add_argument("--user", default="default", help="Wardrobe owner id.")
    parser.add_argument("--replace", action="store_true", help="Remove existing items first.")
    args = parser.parse_args()

    db_path = Path(args.database)
    wardrobe = WardrobeTools(SQLiteWardrobeStore(db_path), user_id=args.user)
    count = seed_wardrobe(wardrobe, replace=args.replace)
    print(f"Seeded {count} items for user '{args.user}' at {db_path}")


if __name__ == "__main__":
    main()
