from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import FrozenSet, Tuple

WEEKDAYS: FrozenSet[int] = frozenset({0, 1, 2, 3, 4})
WEEKEND: FrozenSet[int] = frozenset({5, 6})
SUGGESTION_LIMIT = 3


@dataclass(frozen=True)
class GoodWindow:
    """Hours ``[start_hour, end_hour)`` on the given weekdays (Monday is 0)."""

    weekdays: FrozenSet[int]
    start_hour: int
    end_hour: int

    def __post_init__(self) -> None:
        if not self.weekdays or not self.weekdays <= frozenset(range(7)):
            raise ValueError(f"GoodWindow weekdays must be a non-empty subset of 0-6, got {sorted(self.weekdays)}.")
        if not 0 <= self.start_hour < self.end_hour <= 24:
            raise ValueError(f"GoodWindow hours must satisfy 0 <= start < end <= 24, got {self.start_hour}-{self.end_hour}.")

    def contains(self, moment: datetime) -> bool:
        return moment.weekday() in self.weekdays and self.start_hour <= moment.hour < self.end_hour


DEFAULT_GOOD_WINDOWS: Tuple[GoodWindow, ...] = (
    GoodWindow(weekdays=WEEKEND, start_hour=18, end_hour=22),
    GoodWindow(weekdays=WEEKDAYS, start_hour=14, end_hour=17),
)


@dataclass(frozen=True)
class AvailabilityRules:
    """Tunable heuristics for scoring slots and picking suggestions."""

    good_windows: Tuple[GoodWindow, ...] = DEFAULT_GOOD_WINDOWS
    overlap_confidence: float = 0.95
    busy_confidence: float = 0.8
    free_confidence: float = 0.8
    potential_date_confidence: float = 0.7
    suggestion_threshold: float = 0.6
    max_suggestions: int = 3
    refresh_interval: timedelta = timedelta(minutes=5)

    def __post_init__(self) -> None:
        for name in (
            "overlap_confidence",
            "busy_confidence",
            "free_confidence",
            "potential_date_confidence",
            "suggestion_threshold",
        ):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be within [0, 1], got {value!r}.")
        if not 0 <= self.max_suggestions <= SUGGESTION_LIMIT:
            raise ValueError(f"max_suggestions must be within [0, {SUGGESTION_LIMIT}], got {self.max_suggestions!r}.")
        if self.refresh_interval < timedelta(0):
            raise ValueError("refresh_interval must not be negative.")

    def in_good_window(self, moment: datetime) -> bool:
        return any(window.contains(moment) for window in self.good_windows)
