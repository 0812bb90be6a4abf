from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, List, Mapping, Optional, Tuple

from .enums import SlotClassification


def _parse_datetime(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, str):
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    raise ValueError(f"Unsupported datetime value: {value!r}")


def _first_present(record: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if record.get(key) is not None:
            return record[key]
    raise KeyError(f"Record is missing any of: {', '.join(keys)}")


def is_aware(moment: datetime) -> bool:
    return moment.tzinfo is not None and moment.utcoffset() is not None


def as_instant(moment: datetime) -> datetime:
    """Map aware datetimes to UTC so comparisons ignore wall-clock folds; naive ones pass through."""

    return moment.astimezone(timezone.utc) if is_aware(moment) else moment


@dataclass(slots=True, frozen=True)
class CalendarEvent:
    """Half-open busy interval ``[start, end)`` supplied by an event source."""

    start: datetime
    end: datetime
    id: Optional[str] = None
    user_id: Optional[str] = None
    title: str = ""

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "CalendarEvent":
        return cls(
            start=_parse_datetime(_first_present(record, "start_time", "start")),
            end=_parse_datetime(_first_present(record, "end_time", "end")),
            id=str(record["id"]) if record.get("id") is not None else None,
            user_id=str(record["user_id"]) if record.get("user_id") is not None else None,
            title=record.get("title") or "",
        )

    @property
    def has_mixed_awareness(self) -> bool:
        return is_aware(self.start) != is_aware(self.end)

    @property
    def is_well_formed(self) -> bool:
        return not self.has_mixed_awareness and as_instant(self.start) < as_instant(self.end)

    def overlaps(self, start: datetime, end: datetime) -> bool:
        return as_instant(self.start) < as_instant(end) and as_instant(self.end) > as_instant(start)


@dataclass(slots=True, frozen=True)
class TimeSlot:
    start: datetime
    end: datetime


@dataclass(slots=True, frozen=True)
class ScoredSlot:
    slot: TimeSlot
    classification: SlotClassification
    confidence: float

    @property
    def start(self) -> datetime:
        return self.slot.start

    @property
    def end(self) -> datetime:
        return self.slot.end


@dataclass(slots=True, frozen=True)
class AvailabilityResult:
    """Output of one availability computation. Never persisted by the engine.

    ``overlap_free_hours`` counts slots classified ``free``; the name is kept
    for compatibility with existing consumers.
    """

    overlap_free_hours: int
    suggested_times: Tuple[datetime, ...]
    slots: Tuple[ScoredSlot, ...]
    computed_at: datetime
    next_refresh_at: datetime

    def slots_by(self, classification: SlotClassification) -> List[ScoredSlot]:
        return [scored for scored in self.slots if scored.classification is classification]
