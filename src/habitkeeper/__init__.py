"""HabitKeeper habit state engine."""

from __future__ import annotations

from .config import BaseConfig, DevConfig, TestConfig
from .models.habit import Frequency, Habit
from .services.projection import FrequencyFilter, SortKey, ViewParams, project
from .services.store import HabitStore
from .services.tracker import HabitTracker, create_tracker

__all__ = [
    "BaseConfig",
    "DevConfig",
    "Frequency",
    "FrequencyFilter",
    "Habit",
    "HabitStore",
    "HabitTracker",
    "SortKey",
    "TestConfig",
    "ViewParams",
    "create_tracker",
    "project",
]
