"""Pytest configuration and shared fixtures for HabitKeeper tests.

Fixtures build habits, stores and trackers around a fixed "today" so streak
and reminder behaviour is deterministic.
"""

from __future__ import annotations

from datetime import date, timedelta
from itertools import count

import pytest

from habitkeeper.config import TestConfig
from habitkeeper.models.habit import Frequency, Habit, to_date_key
from habitkeeper.services.notifier import RecordingNotifier
from habitkeeper.services.reminders import ReminderDispatcher
from habitkeeper.services.store import HabitStore
from habitkeeper.services.tracker import HabitTracker


# =============================================================================
# Clock Fixtures
# =============================================================================


@pytest.fixture
def fixed_today() -> date:
    """The date every test treats as today."""
    return date(2024, 1, 3)


@pytest.fixture
def days_before(fixed_today):
    """Return date keys for ``fixed_today`` and the ``n - 1`` days before it."""

    def _days(n: int, *, end: date | None = None) -> set[str]:
        last = end or fixed_today
        return {to_date_key(last - timedelta(days=i)) for i in range(n)}

    return _days


# =============================================================================
# Test Data Factories
# =============================================================================


@pytest.fixture
def habit_factory():
    """Factory for creating habits with sequential ids.

    Returns:
        Callable: Function that creates Habit instances
    """
    ids = count(1)

    def _create_habit(
        name: str = "Read",
        frequency: Frequency | str = Frequency.DAILY,
        completed_dates=(),
        habit_id: str | None = None,
    ) -> Habit:
        return Habit(
            id=habit_id or f"h{next(ids)}",
            name=name,
            frequency=frequency,
            completed_dates=set(completed_dates),
        )

    return _create_habit


@pytest.fixture
def store(habit_factory) -> HabitStore:
    """Store seeded with three habits in a known order."""
    return HabitStore(
        [
            habit_factory(name="Read", habit_id="read"),
            habit_factory(name="Exercise", frequency="weekly", habit_id="exercise"),
            habit_factory(name="Meditate", habit_id="meditate"),
        ]
    )


@pytest.fixture
def recording_notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def dispatcher(recording_notifier) -> ReminderDispatcher:
    return ReminderDispatcher(recording_notifier)


@pytest.fixture
def test_config(tmp_path, monkeypatch) -> TestConfig:
    """Config isolated from the developer's environment and .env file."""
    for var in (
        "HABITKEEPER_DEV_MODE",
        "HABITKEEPER_STREAK_GOAL_DAYS",
        "HABITKEEPER_REMINDERS_ENABLED",
        "HABITKEEPER_LOG_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("HABITKEEPER_DATA_DIR", str(tmp_path))
    return TestConfig()


@pytest.fixture
def tracker(store, dispatcher, fixed_today, test_config) -> HabitTracker:
    return HabitTracker(store, dispatcher, clock=lambda: fixed_today, config=test_config)
