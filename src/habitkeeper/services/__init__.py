"""Service module exports."""

from . import habits, notifier, projection, reminders, store, tracker

__all__ = ["habits", "notifier", "projection", "reminders", "store", "tracker"]
