"""Shared availability engine: slot grid, classification, scoring, ranking."""

from __future__ import annotations

from .availability import compute_availability
from .classifier import classify_slot, ensure_well_formed, is_party_busy, sanitize_events
from .errors import InvalidHorizonError, MalformedEventError, UpstreamUnavailableError
from .ranking import rank_suggestions
from .rules import DEFAULT_GOOD_WINDOWS, WEEKDAYS, WEEKEND, AvailabilityRules, GoodWindow
from .scoring import score_slot
from .slots import DEFAULT_HORIZON_DAYS, SLOT_WIDTH, floor_to_hour, generate_slots, validate_horizon
from .summary import build_summary

__all__ = [
    "AvailabilityRules",
    "DEFAULT_GOOD_WINDOWS",
    "DEFAULT_HORIZON_DAYS",
    "GoodWindow",
    "InvalidHorizonError",
    "MalformedEventError",
    "SLOT_WIDTH",
    "UpstreamUnavailableError",
    "WEEKDAYS",
    "WEEKEND",
    "build_summary",
    "classify_slot",
    "compute_availability",
    "ensure_well_formed",
    "floor_to_hour",
    "generate_slots",
    "is_party_busy",
    "rank_suggestions",
    "sanitize_events",
    "score_slot",
    "validate_horizon",
]
