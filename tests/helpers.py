from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Tuple

from shared_time.domain import CalendarEvent

# 2026-10-17 is a Saturday, 2026-10-19 a Monday.
SATURDAY = datetime(2026, 10, 17)
MONDAY = datetime(2026, 10, 19)
TUESDAY = datetime(2026, 10, 20)


def at(day: datetime, hour: int, minute: int = 0) -> datetime:
    return day.replace(hour=hour, minute=minute, second=0, microsecond=0)


def event(start: datetime, end: datetime, **extra) -> CalendarEvent:
    return CalendarEvent(start=start, end=end, **extra)


class FakeEventSource:
    """In-memory stand-in for the Supabase event repository."""

    def __init__(self, events: Dict[str, List[CalendarEvent]] | None = None, failing: set[str] | None = None):
        self.events = events or {}
        self.failing = failing or set()
        self.calls: List[Tuple[str, datetime, datetime]] = []

    def fetch_window(self, party_id: str, start: datetime, end: datetime) -> List[CalendarEvent]:
        self.calls.append((party_id, start, end))
        if party_id in self.failing:
            raise ConnectionError(f"store unreachable for {party_id}")
        return [item for item in self.events.get(party_id, []) if item.overlaps(start, end)]
