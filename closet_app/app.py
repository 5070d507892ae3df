"""Closet planner app bootstrap."""

import logging
import random
from datetime import datetime
from typing import Callable, Optional

from closet_app.config import ClosetConfig
from closet_app.logging_config import configure_logging, get_logger, log_event
from logic.explanation import DEFAULT_WEARER
from logic.outfit_selector import WeeklyPolicy
from tools.planner_tools import PlannerTools
from tools.seed_wardrobe import seed_wardrobe
from tools.wardrobe_store import SQLiteWardrobeStore, WardrobeStore
from tools.wardrobe_tools import WardrobeTools, local_now

LOGGER = get_logger(__name__)


class ClosetPlannerApp:
    """Wires together the store, the wardrobe aggregate and the planner."""

    def __init__(
        self,
        config: ClosetConfig | None = None,
        store: Optional[WardrobeStore] = None,
        clock: Callable[[], datetime] = local_now,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.config = config or ClosetConfig.from_env()
        configure_logging(self.config.log_level)

        self.store = store or SQLiteWardrobeStore(self.config.wardrobe_db_path)
        self.wardrobe = WardrobeTools(self.store, user_id=self.config.user_id, clock=clock)
        self.rng = rng or random.Random(self.config.random_seed)
        self.planner = PlannerTools(
            self.wardrobe,
            rng=self.rng,
            policy=WeeklyPolicy(max_bottom_uses=self.config.max_bottom_uses),
            wearer=self.config.wearer_name or DEFAULT_WEARER,
        )

        if self.config.seed_on_start and not self.wardrobe.snapshot():
            count = seed_wardrobe(self.wardrobe)
            log_event(LOGGER, logging.INFO, "wardrobe_seeded", items=count)

    def health(self) -> dict:
        return {
            "status": "ok",
            "service": "closet-planner",
            "environment": self.config.environment or "local",
            "timestamp": self.wardrobe.clock().isoformat(),
        }


__all__ = ["ClosetPlannerApp"]
