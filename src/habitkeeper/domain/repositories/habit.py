"""Habit collection protocol."""

from __future__ import annotations

from datetime import date
from typing import Optional, Protocol

from ...models.habit import Habit


class HabitCollection(Protocol):
    """Owner of the authoritative habit collection.

    Readers receive snapshots; only ``toggle`` and ``remove`` change
    existing habits.
    """

    def get(self, habit_id: str) -> Optional[Habit]:
        """Return a copy of the habit with ``habit_id``, if present."""
        ...

    def snapshot(self) -> tuple[Habit, ...]:
        """Return detached copies of every habit in collection order."""
        ...

    def add(self, habit: Habit) -> Habit:
        """Insert an externally created habit."""
        ...

    def toggle(self, habit_id: str, day: date | str) -> Optional[bool]:
        """Flip completion of ``day``; return the resulting state."""
        ...

    def remove(self, habit_id: str) -> Optional[Habit]:
        """Delete a habit; return it if it existed."""
        ...
