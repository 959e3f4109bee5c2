"""Habit tracking session: mutations, projection pass and display rows."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from typing import Callable, Optional

from ..config import BaseConfig
from ..domain.repositories import HabitCollection
from ..devtools import dev_log
from ..logging_config import get_logger
from ..models.habit import Frequency, Habit, local_today, to_date_key
from .habits import DEFAULT_GOAL_DAYS, current_streak, longest_streak, progress_percent
from .notifier import LoggingNotifier, Notifier
from .projection import FrequencyFilter, SortKey, ViewParams, project
from .reminders import ReminderDispatcher
from .store import HabitStore

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class HabitRow:
    """One displayed habit with its derived values."""

    habit: Habit
    streak: int
    completed_today: bool
    progress: float

    @property
    def frequency_label(self) -> str:
        return self.habit.frequency.label

    @property
    def action_label(self) -> str:
        return "Completed" if self.completed_today else "Mark Complete"


@dataclass(frozen=True, slots=True)
class HabitDetails:
    """Everything the details dialog shows for a single habit."""

    id: str
    name: str
    frequency: Frequency
    completed_dates: list[str]
    current_streak: int
    longest_streak: int


class HabitTracker:
    """Run the filter, sort, streak and reminder pass for each user action.

    Every call to ``refresh`` (and every setter or mutation, which end in
    one) recomputes from a fresh store snapshot. Nothing is cached.
    """

    def __init__(
        self,
        store: HabitCollection,
        dispatcher: ReminderDispatcher,
        *,
        params: ViewParams = ViewParams(),
        clock: Callable[[], date] = local_today,
        goal_days: int = DEFAULT_GOAL_DAYS,
        config: Optional[BaseConfig] = None,
    ):
        self.store = store
        self.dispatcher = dispatcher
        self.params = params
        self.clock = clock
        self.goal_days = goal_days
        self.config = config
        self.rows: list[HabitRow] = []

    def _today(self, today: date | str | None) -> str:
        if today is None:
            today = self.clock()
        return today if isinstance(today, str) else to_date_key(today)

    def _row(self, habit: Habit, today: str) -> HabitRow:
        streak = current_streak(habit, today)
        return HabitRow(
            habit=habit,
            streak=streak,
            completed_today=habit.is_completed_on(today),
            progress=progress_percent(streak, self.goal_days),
        )

    def refresh(self, today: date | str | None = None) -> list[HabitRow]:
        """Project the collection, derive rows and scan for reminders."""

        key = self._today(today)
        visible = project(self.store.snapshot(), self.params)
        self.rows = [self._row(habit, key) for habit in visible]
        self.dispatcher.dispatch_reminders(visible, key)
        return self.rows

    def set_search(self, search_term: str, today: date | str | None = None) -> list[HabitRow]:
        self.params = replace(self.params, search_term=search_term)
        return self.refresh(today)

    def set_sort(self, sort_by: SortKey | str, today: date | str | None = None) -> list[HabitRow]:
        self.params = replace(self.params, sort_by=SortKey(sort_by))
        return self.refresh(today)

    def set_filter(
        self, filter_frequency: FrequencyFilter | str, today: date | str | None = None
    ) -> list[HabitRow]:
        self.params = replace(self.params, filter_frequency=FrequencyFilter(filter_frequency))
        return self.refresh(today)

    def toggle(self, habit_id: str, today: date | str | None = None) -> list[HabitRow]:
        """Flip today's completion, announce the resulting state, then refresh."""

        key = self._today(today)
        if self.store.toggle(habit_id, key) is not None:
            habit = self.store.get(habit_id)
            if habit is not None:
                completed = self.dispatcher.announce_toggle(habit, key)
                dev_log(
                    self.config,
                    "Habit completed" if completed else "Habit unchecked",
                    context={"habit_id": habit_id},
                )
        return self.refresh(key)

    def remove(self, habit_id: str, today: date | str | None = None) -> list[HabitRow]:
        """Delete a habit, announce it by its pre-removal name, then refresh."""

        removed = self.store.remove(habit_id)
        if removed is not None:
            self.dispatcher.announce_removal(removed)
            dev_log(self.config, "Habit removed", context={"habit_id": habit_id})
        return self.refresh(today)

    def details(self, habit_id: str, today: date | str | None = None) -> Optional[HabitDetails]:
        habit = self.store.get(habit_id)
        if habit is None:
            return None
        return HabitDetails(
            id=habit.id,
            name=habit.name,
            frequency=habit.frequency,
            completed_dates=habit.sorted_dates(),
            current_streak=current_streak(habit, self._today(today)),
            longest_streak=longest_streak(habit),
        )


def create_tracker(
    habits: tuple[Habit, ...] | list[Habit] = (),
    *,
    notifier: Optional[Notifier] = None,
    config: Optional[BaseConfig] = None,
    clock: Callable[[], date] = local_today,
) -> HabitTracker:
    """Wire a store, dispatcher and tracker from configuration."""

    if config is None:
        config = BaseConfig()

    dispatcher = ReminderDispatcher(
        notifier if notifier is not None else LoggingNotifier(),
        reminders_enabled=config.REMINDERS_ENABLED,
    )
    tracker = HabitTracker(
        HabitStore(habits),
        dispatcher,
        clock=clock,
        goal_days=config.STREAK_GOAL_DAYS,
        config=config,
    )
    logger.debug("Tracker created", extra={"habits": len(habits)})
    return tracker


__all__ = ["HabitDetails", "HabitRow", "HabitTracker", "create_tracker"]
