"""Consecutive-day wear streak tracking."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional


@dataclass
class StreakState:
    user_id: str
    streak: int = 0
    last_streak_date: Optional[str] = None

    @property
    def last_date(self) -> Optional[date]:
        return date.fromisoformat(self.last_streak_date) if self.last_streak_date else None


def advance_streak(state: StreakState, worn_on: date) -> StreakState:
    """Return the state after a wear event on ``worn_on``.

    A second wear on the same day leaves the streak unchanged; a wear the day
    after the last one extends it; anything else restarts it at 1.
    """

    last = state.last_date
    if last == worn_on:
        return state
    streak = state.streak + 1 if last == worn_on - timedelta(days=1) else 1
    return StreakState(user_id=state.user_id, streak=streak, last_streak_date=worn_on.isoformat())


def current_streak(state: StreakState, today: date) -> int:
    """Streak as seen on ``today``: alive through the day after the last wear."""

    last = state.last_date
    if last is None or last < today - timedelta(days=1):
        return 0
    return state.streak


__all__ = ["StreakState", "advance_streak", "current_streak"]
