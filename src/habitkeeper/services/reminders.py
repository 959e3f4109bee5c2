"""Reminder and announcement dispatch for the displayed habits."""

from __future__ import annotations

from datetime import date
from typing import Iterable

from ..errors import NotificationUnavailable
from ..logging_config import get_logger
from ..models.habit import Habit
from .notifier import Notifier

logger = get_logger(__name__)

REMINDER_TITLE = "Habit Reminder"
COMPLETED_TITLE = "Habit Completed"
INCOMPLETE_TITLE = "Habit Incomplete"
REMOVED_TITLE = "Habit Removed"


def reminder_message(habit: Habit) -> tuple[str, str]:
    return REMINDER_TITLE, f"Don't forget to complete your habit: {habit.name}"


def toggle_message(habit: Habit, completed: bool) -> tuple[str, str]:
    if completed:
        return COMPLETED_TITLE, f'Habit "{habit.name}" has been completed.'
    return INCOMPLETE_TITLE, f'Habit "{habit.name}" has been marked as incomplete.'


def removal_message(habit: Habit) -> tuple[str, str]:
    return REMOVED_TITLE, f'Habit "{habit.name}" has been removed.'


class ReminderDispatcher:
    """Send reminders and action announcements through a notifier.

    ``dispatch_reminders`` re-notifies on every call: each projection pass
    reminds about every still-incomplete habit in view again.
    """

    def __init__(self, notifier: Notifier, *, reminders_enabled: bool = True):
        self.notifier = notifier
        self.reminders_enabled = reminders_enabled

    def _send(self, title: str, body: str) -> bool:
        try:
            self.notifier.notify(title, body=body)
        except NotificationUnavailable as exc:
            logger.debug("Notification dropped", extra={"title": title, "reason": str(exc)})
            return False
        except Exception:
            logger.warning("Notifier failed; notification dropped", extra={"title": title}, exc_info=True)
            return False
        return True

    def dispatch_reminders(self, habits: Iterable[Habit], today: date | str) -> list[Habit]:
        """Remind once per habit not completed on ``today``; return those habits."""

        if not self.reminders_enabled:
            return []

        pending = [habit for habit in habits if not habit.is_completed_on(today)]
        for habit in pending:
            self._send(*reminder_message(habit))
        if pending:
            logger.debug("Reminders dispatched", extra={"count": len(pending)})
        return pending

    def announce_toggle(self, habit: Habit, today: date | str) -> bool:
        """Announce the state of ``habit`` after a toggle; return that state."""

        completed = habit.is_completed_on(today)
        self._send(*toggle_message(habit, completed))
        return completed

    def announce_removal(self, habit: Habit) -> None:
        self._send(*removal_message(habit))


__all__ = [
    "COMPLETED_TITLE",
    "INCOMPLETE_TITLE",
    "REMINDER_TITLE",
    "REMOVED_TITLE",
    "ReminderDispatcher",
    "reminder_message",
    "removal_message",
    "toggle_message",
]
