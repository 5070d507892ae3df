"""Top/bottom outfit selection for a single day or a Monday-Friday week."""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Dict, List, Optional, Sequence

from logic.drip_score import generate_drip_score
from logic.explanation import DEFAULT_WEARER, generate_style_explanation
from models.clothing_item import ClothingItem
from models.color_theory import classify_harmony
from models.errors import InsufficientInventory, NoCandidateFound
from models.outfit import DailyPlan, Outfit, WeeklyPlanDay
from models.taxonomy import WORKWEEK, weekday_name

logger = logging.getLogger(__name__)

HARMONY_WEIGHT = 0.6
VARIETY_WEIGHT = 0.3
TOTAL_JITTER_RANGE = 10.0
WEAR_PENALTY = 5


@dataclass(frozen=True)
class WeeklyPolicy:
    """Anti-repetition rules for a weekly plan.

    Tops are never repeated while unused tops remain. A bottom is dropped from
    the pool once it has been picked ``max_bottom_uses`` times; ``None`` keeps
    every bottom available all week.
    """

    max_bottom_uses: Optional[int] = 2


@dataclass(frozen=True)
class SelectionResult:
    outfit: Outfit
    diagnostics: Dict[str, object] = field(default_factory=dict)


def variety_bonus(top: ClothingItem, bottom: ClothingItem) -> int:
    """Favor pairs that have been worn less, from 100 down to 0."""

    return max(0, 100 - (top.wear_count + bottom.wear_count) * WEAR_PENALTY)


def _require_inventory(tops: Sequence[ClothingItem], bottoms: Sequence[ClothingItem]) -> None:
    if not tops or not bottoms:
        logger.info("Insufficient inventory tops=%s bottoms=%s", len(tops), len(bottoms))
        raise InsufficientInventory(tops=len(tops), bottoms=len(bottoms))


def _available(items: Sequence[ClothingItem], excluded: Sequence[str]) -> tuple[List[ClothingItem], bool]:
    """Drop excluded ids, falling back to every item if nothing would remain."""

    excluded_ids = set(excluded)
    remaining = [item for item in items if item.item_id not in excluded_ids]
    if remaining:
        return remaining, False
    return list(items), bool(excluded_ids)


def select_best_outfit(
    tops: Sequence[ClothingItem],
    bottoms: Sequence[ClothingItem],
    day_of_week: str,
    on_date: date,
    rng: Optional[random.Random] = None,
    exclude_tops: Sequence[str] = (),
    exclude_bottoms: Sequence[str] = (),
    wearer: str = DEFAULT_WEARER,
) -> SelectionResult:
    """Score every top x bottom pair and return the best one.

    The composite total is ``harmony * 0.6 + variety * 0.3 + U`` with ``U`` in
    [0, 10). Only a strictly greater total replaces the current best, so ties
    go to the pair met first in iteration order. Drip score and caption are
    drawn for the winner only.
    """

    _require_inventory(tops, bottoms)
    source = rng or random
    candidate_tops, tops_fallback = _available(tops, exclude_tops)
    candidate_bottoms, bottoms_fallback = _available(bottoms, exclude_bottoms)

    best = None
    best_total = -1.0
    scored = 0
    for top in candidate_tops:
        for bottom in candidate_bottoms:
            harmony = classify_harmony(top.primary_hex, bottom.primary_hex)
            variety = variety_bonus(top, bottom)
            total = (
                harmony.score * HARMONY_WEIGHT
                + variety * VARIETY_WEIGHT
                + source.random() * TOTAL_JITTER_RANGE
            )
            scored += 1
            if total > best_total:
                best_total = total
                best = (top, bottom, harmony, variety)

    if best is None:
        logger.error(
            "No outfit candidate found despite inventory tops=%s bottoms=%s",
            len(candidate_tops),
            len(candidate_bottoms),
        )
        raise NoCandidateFound(
            f"no candidate among {len(candidate_tops)} tops and {len(candidate_bottoms)} bottoms"
        )

    top, bottom, harmony, variety = best
    outfit = Outfit(
        top=top,
        bottom=bottom,
        harmony_score=harmony.score,
        drip_score=generate_drip_score(harmony.score, variety, rng=source),
        harmony_type=harmony.harmony_type,
        explanation=generate_style_explanation(harmony, day_of_week, rng=source, wearer=wearer),
        date=on_date.isoformat(),
        day_of_week=day_of_week,
    )
    diagnostics: Dict[str, object] = {
        "combinations_scored": scored,
        "best_total": round(best_total, 2),
        "variety_bonus": variety,
        "tops_fallback": tops_fallback,
        "bottoms_fallback": bottoms_fallback,
    }
    logger.info(
        "Selected %s + %s for %s (%s, harmony=%s)",
        top.item_id,
        bottom.item_id,
        day_of_week,
        harmony.harmony_type,
        harmony.score,
    )
    return SelectionResult(outfit=outfit, diagnostics=diagnostics)


def generate_daily_outfit(
    tops: Sequence[ClothingItem],
    bottoms: Sequence[ClothingItem],
    today: date,
    rng: Optional[random.Random] = None,
    wearer: str = DEFAULT_WEARER,
) -> DailyPlan:
    """Pick today's best pairing."""

    day_of_week = weekday_name(today.weekday())
    result = select_best_outfit(tops, bottoms, day_of_week, today, rng=rng, wearer=wearer)
    return DailyPlan(date=today.isoformat(), day_of_week=day_of_week, outfit=result.outfit)


def week_dates(reference: date) -> List[date]:
    """Monday-Friday of the reference week; weekends plan the coming week."""

    if reference.weekday() >= 5:
        monday = reference + timedelta(days=7 - reference.weekday())
    else:
        monday = reference - timedelta(days=reference.weekday())
    return [monday + timedelta(days=offset) for offset in range(len(WORKWEEK))]


def _overused_bottoms(used_bottoms: List[str], max_uses: Optional[int]) -> List[str]:
    if max_uses is None:
        return []
    overused: List[str] = []
    for item_id in used_bottoms:
        if used_bottoms.count(item_id) >= max_uses and item_id not in overused:
            overused.append(item_id)
    return overused


def generate_weekly_outfits(
    tops: Sequence[ClothingItem],
    bottoms: Sequence[ClothingItem],
    reference_date: date,
    rng: Optional[random.Random] = None,
    policy: WeeklyPolicy = WeeklyPolicy(),
    wearer: str = DEFAULT_WEARER,
) -> List[WeeklyPlanDay]:
    """Plan Monday to Friday, avoiding repeated tops and overused bottoms."""

    _require_inventory(tops, bottoms)
    used_tops: List[str] = []
    used_bottoms: List[str] = []
    week: List[WeeklyPlanDay] = []

    for day, on_date in zip(WORKWEEK, week_dates(reference_date)):
        result = select_best_outfit(
            tops,
            bottoms,
            day,
            on_date,
            rng=rng,
            exclude_tops=used_tops,
            exclude_bottoms=_overused_bottoms(used_bottoms, policy.max_bottom_uses),
            wearer=wearer,
        )
        used_tops.append(result.outfit.top.item_id)
        used_bottoms.append(result.outfit.bottom.item_id)
        week.append(WeeklyPlanDay(day=day, outfit=result.outfit))

    logger.info("Planned week of %s with tops=%s", week[0].outfit.date if week else None, used_tops)
    return week


__all__ = [
    "WeeklyPolicy",
    "SelectionResult",
    "variety_bonus",
    "select_best_outfit",
    "generate_daily_outfit",
    "generate_weekly_outfits",
    "week_dates",
]
