"""Shared availability engine for comparing two calendars."""

from __future__ import annotations

from .domain import AvailabilityResult, CalendarEvent, ScoredSlot, SlotClassification, TimeSlot
from .engine import (
    AvailabilityRules,
    GoodWindow,
    InvalidHorizonError,
    MalformedEventError,
    UpstreamUnavailableError,
    compute_availability,
)

__all__ = [
    "AvailabilityResult",
    "AvailabilityRules",
    "CalendarEvent",
    "GoodWindow",
    "InvalidHorizonError",
    "MalformedEventError",
    "ScoredSlot",
    "SlotClassification",
    "TimeSlot",
    "UpstreamUnavailableError",
    "compute_availability",
]
