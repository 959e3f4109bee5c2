"""Search, filter and sort the habit collection into a display list."""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable

from ..models.habit import Habit


class SortKey(str, Enum):
    NAME = "name"
    FREQUENCY = "frequency"


class FrequencyFilter(str, Enum):
    ALL = "all"
    DAILY = "daily"
    WEEKLY = "weekly"


@dataclass(frozen=True, slots=True)
class ViewParams:
    """User-chosen projection parameters."""

    search_term: str = ""
    sort_by: SortKey = SortKey.NAME
    filter_frequency: FrequencyFilter = FrequencyFilter.ALL

    def __post_init__(self) -> None:
        # Accept raw selector strings as well as enum members.
        object.__setattr__(self, "sort_by", SortKey(self.sort_by))
        object.__setattr__(self, "filter_frequency", FrequencyFilter(self.filter_frequency))

    @classmethod
    def from_raw(
        cls,
        search_term: str = "",
        sort_by: str = "name",
        filter_frequency: str = "all",
    ) -> "ViewParams":
        """Build params from selector values; unknown keys raise ValueError."""

        return cls(
            search_term=search_term,
            sort_by=SortKey(sort_by.strip().lower()),
            filter_frequency=FrequencyFilter(filter_frequency.strip().lower()),
        )


def collation_key(text: str) -> tuple:
    """Deterministic stand-in for a locale-aware string comparison.

    Compares accent-stripped case-folded text first, then accents, then case
    with lowercase ahead of uppercase. ``"apple"`` sorts before ``"Zebra"``
    and ``"apple"`` before ``"Apple"``.
    """

    folded = text.casefold()
    base = "".join(
        ch for ch in unicodedata.normalize("NFD", folded) if not unicodedata.combining(ch)
    )
    return (base, folded, tuple(ch.isupper() for ch in text))


_SORT_KEYS: dict[SortKey, Callable[[Habit], tuple]] = {
    SortKey.NAME: lambda habit: collation_key(habit.name),
    SortKey.FREQUENCY: lambda habit: collation_key(habit.frequency.value),
}


def matches_search(habit: Habit, search_term: str) -> bool:
    """Case-insensitive substring match on the habit name; no trimming."""

    return search_term.lower() in habit.name.lower()


def project(habits: Iterable[Habit], params: ViewParams = ViewParams()) -> list[Habit]:
    """Return the habits to display for ``params``.

    Search filter first, then frequency filter, then a stable sort so that
    ties keep their collection order. The input is never mutated.
    """

    selected = [habit for habit in habits if matches_search(habit, params.search_term)]

    if params.filter_frequency is not FrequencyFilter.ALL:
        wanted = params.filter_frequency.value
        selected = [habit for habit in selected if habit.frequency.value == wanted]

    # sorted() is guaranteed stable.
    return sorted(selected, key=_SORT_KEYS[params.sort_by])


__all__ = [
    "FrequencyFilter",
    "SortKey",
    "ViewParams",
    "collation_key",
    "matches_search",
    "project",
]
