"""Outfit planning operations over a wardrobe snapshot."""

from __future__ import annotations

import logging
import random
from dataclasses import asdict
from typing import Any, Dict, Optional

from closet_app.logging_config import get_logger, log_event
from logic.analytics import summarize_wardrobe
from logic.explanation import DEFAULT_WEARER
from logic.outfit_selector import WeeklyPolicy, generate_daily_outfit, generate_weekly_outfits
from models.errors import InsufficientInventory
from models.taxonomy import WORKWEEK, weekday_name
from tools.observability import instrument_tool
from tools.wardrobe_tools import WardrobeTools

logger = get_logger(__name__)


def _needs_items(exc: InsufficientInventory) -> Dict[str, Any]:
    return {
        "status": "needs_items",
        "message": "Add at least one top and one bottom to generate outfits",
        "tops": exc.tops,
        "bottoms": exc.bottoms,
    }


class PlannerTools:
    """Daily and weekly outfit planning for one wardrobe."""

    def __init__(
        self,
        wardrobe: WardrobeTools,
        rng: Optional[random.Random] = None,
        policy: Optional[WeeklyPolicy] = None,
        wearer: str = DEFAULT_WEARER,
    ) -> None:
        self.wardrobe = wardrobe
        self.rng = rng or random.Random()
        self.policy = policy or WeeklyPolicy()
        self.wearer = wearer

    @instrument_tool("generate_daily_outfit")
    def generate_daily_outfit(self) -> Dict[str, Any]:
        today = self.wardrobe.today()
        tops = self.wardrobe.snapshot("top")
        bottoms = self.wardrobe.snapshot("bottom")
        try:
            plan = generate_daily_outfit(tops, bottoms, today, rng=self.rng, wearer=self.wearer)
        except InsufficientInventory as exc:
            log_event(logger, logging.INFO, "daily_outfit_skipped", tops=exc.tops, bottoms=exc.bottoms)
            return {
                **_needs_items(exc),
                "date": today.isoformat(),
                "day_of_week": weekday_name(today.weekday()),
                "outfit": None,
            }
        log_event(
            logger,
            logging.INFO,
            "outfit_selected",
            mode="daily",
            top_id=plan.outfit.top.item_id,
            bottom_id=plan.outfit.bottom.item_id,
            harmony_score=plan.outfit.harmony_score,
        )
        return {"status": "ok", **asdict(plan)}

    @instrument_tool("generate_weekly_outfits")
    def generate_weekly_outfits(self) -> Dict[str, Any]:
        tops = self.wardrobe.snapshot("top")
        bottoms = self.wardrobe.snapshot("bottom")
        try:
            week = generate_weekly_outfits(
                tops,
                bottoms,
                self.wardrobe.today(),
                rng=self.rng,
                policy=self.policy,
                wearer=self.wearer,
            )
        except InsufficientInventory as exc:
            log_event(logger, logging.INFO, "weekly_outfits_skipped", tops=exc.tops, bottoms=exc.bottoms)
            return {**_needs_items(exc), "week": [{"day": day, "outfit": None} for day in WORKWEEK]}
        log_event(
            logger,
            logging.INFO,
            "outfit_selected",
            mode="weekly",
            top_ids=[entry.outfit.top.item_id for entry in week if entry.outfit],
        )
        return {"status": "ok", "week": [asdict(entry) for entry in week]}

    @instrument_tool("wardrobe_analytics")
    def wardrobe_analytics(self) -> Dict[str, Any]:
        return summarize_wardrobe(self.wardrobe.snapshot(), self.wardrobe.history(), self.wardrobe.today())


__all__ = ["PlannerTools"]
