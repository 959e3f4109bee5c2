"""In-memory owner of the habit collection."""

from __future__ import annotations

from datetime import date
from typing import Iterable, Optional

from ..errors import DuplicateHabitError
from ..logging_config import get_logger
from ..models.habit import Habit, coerce_date_key

logger = get_logger(__name__)


class HabitStore:
    """Single owner of the authoritative habit collection.

    Habits are held in insertion order. Everything handed out is a deep copy,
    so callers can read freely without reaching back into store state.
    """

    def __init__(self, habits: Iterable[Habit] = ()):
        self._habits: dict[str, Habit] = {}
        for habit in habits:
            self.add(habit)

    def __len__(self) -> int:
        return len(self._habits)

    def __contains__(self, habit_id: object) -> bool:
        return habit_id in self._habits

    def get(self, habit_id: str) -> Optional[Habit]:
        """Return a copy of the habit with ``habit_id``, if present."""
        habit = self._habits.get(habit_id)
        return habit.model_copy(deep=True) if habit is not None else None

    def snapshot(self) -> tuple[Habit, ...]:
        """Return detached copies of every habit in collection order."""
        return tuple(habit.model_copy(deep=True) for habit in self._habits.values())

    def add(self, habit: Habit) -> Habit:
        """Insert an externally created habit."""
        if habit.id in self._habits:
            raise DuplicateHabitError(habit.id)
        self._habits[habit.id] = habit.model_copy(deep=True)
        logger.debug("Habit added", extra={"habit_id": habit.id})
        return habit

    def toggle(self, habit_id: str, day: date | str) -> Optional[bool]:
        """Flip completion of ``day`` for a habit.

        Returns the completion state after the flip, or None when no habit
        has ``habit_id``. A malformed date key raises ValueError and leaves
        the habit untouched.
        """
        habit = self._habits.get(habit_id)
        if habit is None:
            logger.debug("Toggle ignored for unknown habit", extra={"habit_id": habit_id})
            return None

        key = coerce_date_key(day)
        if key in habit.completed_dates:
            habit.completed_dates.discard(key)
        else:
            habit.completed_dates.add(key)

        completed = key in habit.completed_dates
        logger.info(
            "Habit toggled",
            extra={"habit_id": habit_id, "date": key, "completed": completed},
        )
        return completed

    def remove(self, habit_id: str) -> Optional[Habit]:
        """Delete a habit; return it if it existed."""
        habit = self._habits.pop(habit_id, None)
        if habit is None:
            logger.debug("Remove ignored for unknown habit", extra={"habit_id": habit_id})
            return None
        logger.info("Habit removed", extra={"habit_id": habit_id})
        return habit


__all__ = ["HabitStore"]
