"""Model exports."""

from .habit import (
    Frequency,
    Habit,
    coerce_date_key,
    local_today,
    parse_date_key,
    to_date_key,
)

__all__ = [
    "Frequency",
    "Habit",
    "coerce_date_key",
    "local_today",
    "parse_date_key",
    "to_date_key",
]
