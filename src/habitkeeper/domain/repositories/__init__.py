"""Repository protocol definitions for domain layer."""

from .habit import HabitCollection

__all__ = ["HabitCollection"]
