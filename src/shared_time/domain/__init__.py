"""Domain models for shared availability."""

from __future__ import annotations

from .enums import SlotClassification
from .models import AvailabilityResult, CalendarEvent, ScoredSlot, TimeSlot

__all__ = ["AvailabilityResult", "CalendarEvent", "ScoredSlot", "SlotClassification", "TimeSlot"]
