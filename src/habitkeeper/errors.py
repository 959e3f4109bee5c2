"""Exception types raised by the habit engine."""

from __future__ import annotations


class HabitKeeperError(Exception):
    """Base class for habit engine errors."""


class DuplicateHabitError(HabitKeeperError, ValueError):
    """Raised when a habit id is inserted twice into one collection."""

    def __init__(self, habit_id: str):
        super().__init__(f"Habit id already present: {habit_id}")
        self.habit_id = habit_id


class NotificationUnavailable(HabitKeeperError):
    """Raised by a notifier that cannot deliver (permission denied, no backend).

    The reminder dispatcher drops these silently.
    """
