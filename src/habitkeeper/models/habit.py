"""Habit data structures and calendar-date helpers."""

from __future__ import annotations

import re
from datetime import date
from enum import Enum
from typing import Any
from uuid import uuid4

from pydantic import field_validator
from sqlmodel import Field, SQLModel

_DATE_KEY_RE = re.compile(r"\d{4}-\d{2}-\d{2}")


class Frequency(str, Enum):
    """Declared cadence of a habit."""

    DAILY = "daily"
    WEEKLY = "weekly"

    @property
    def label(self) -> str:
        return self.value.capitalize()


def local_today() -> date:
    """Return today's date on the local wall clock (no UTC conversion)."""

    return date.today()


def to_date_key(day: date) -> str:
    """Render a calendar date as its ``YYYY-MM-DD`` key."""

    return f"{day.year:04d}-{day.month:02d}-{day.day:02d}"


def parse_date_key(key: str) -> date:
    """Parse a ``YYYY-MM-DD`` key, rejecting every other ISO spelling."""

    if not _DATE_KEY_RE.fullmatch(key):
        raise ValueError(f"Expected a YYYY-MM-DD date, got {key!r}")
    return date.fromisoformat(key)


def coerce_date_key(value: date | str) -> str:
    """Return the ``YYYY-MM-DD`` key for a date or an already formatted key."""

    if isinstance(value, date):
        return to_date_key(value)
    if isinstance(value, str):
        parse_date_key(value)
        return value
    raise ValueError(f"Unsupported completion date: {value!r}")


class Habit(SQLModel):
    """A tracked recurring activity and the days it was completed."""

    id: str = Field(default_factory=lambda: uuid4().hex, min_length=1)
    name: str = Field(max_length=80)
    frequency: Frequency = Field(default=Frequency.DAILY)
    completed_dates: set[str] = Field(default_factory=set)

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Habit name must not be empty")
        return value

    @field_validator("completed_dates", mode="before")
    @classmethod
    def _normalise_dates(cls, value: Any) -> set[str]:
        if value is None:
            return set()
        if isinstance(value, (str, date)):
            value = [value]
        return {coerce_date_key(item) for item in value}

    def is_completed_on(self, day: date | str) -> bool:
        """Return True when ``day`` is in the completion record."""

        key = day if isinstance(day, str) else to_date_key(day)
        return key in self.completed_dates

    def sorted_dates(self) -> list[str]:
        """Completion history, oldest first."""

        # Keys are zero-padded so lexical order is calendar order.
        return sorted(self.completed_dates)
