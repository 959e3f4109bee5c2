"""Habit streak calculations."""

from __future__ import annotations

from datetime import date, timedelta
from typing import AbstractSet, Iterable

from ..models.habit import Habit, coerce_date_key, parse_date_key, to_date_key

DEFAULT_GOAL_DAYS = 30


def _as_date(day: date | str) -> date:
    return parse_date_key(day) if isinstance(day, str) else day


def _walk_back(completed: AbstractSet[str], today: date | str) -> int:
    # Each counted day is a distinct member, so the walk is bounded by len(completed).
    cursor = _as_date(today)
    count = 0
    while count < len(completed) and to_date_key(cursor) in completed:
        count += 1
        cursor -= timedelta(days=1)
    return count


def _longest_run(completed: AbstractSet[str]) -> int:
    longest = 0
    run = 0
    last_day: date | None = None
    # Keys are zero-padded so lexical order is calendar order.
    for key in sorted(completed):
        day = parse_date_key(key)
        if last_day is not None and day == last_day + timedelta(days=1):
            run += 1
        else:
            run = 1
        longest = max(longest, run)
        last_day = day
    return longest


def current_streak(habit: Habit, today: date | str) -> int:
    """Count consecutive completed days walking backwards from ``today``.

    Returns 0 when ``today`` itself is not completed. The walk can never take
    more steps than there are completion dates.
    """

    return _walk_back(habit.completed_dates, today)


streak = current_streak


def longest_streak(habit: Habit) -> int:
    """Return the longest run of consecutive completed days in the history."""

    return _longest_run(habit.completed_dates)


def compute_streaks(dates: Iterable[date | str], *, today: date | str) -> tuple[int, int]:
    """Return (current_streak, longest_streak) from a collection of completion dates."""

    by_day = {coerce_date_key(d) for d in dates}
    return _walk_back(by_day, today), _longest_run(by_day)


def progress_percent(streak_days: int, goal_days: int = DEFAULT_GOAL_DAYS) -> float:
    """Share of the streak goal reached, as a percentage capped at 100."""

    if goal_days <= 0:
        raise ValueError("goal_days must be positive")
    return min(streak_days / goal_days, 1.0) * 100


__all__ = [
    "DEFAULT_GOAL_DAYS",
    "compute_streaks",
    "current_streak",
    "longest_streak",
    "progress_percent",
    "streak",
]
