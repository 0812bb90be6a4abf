from __future__ import annotations

import logging
from datetime import datetime
from typing import Iterable, Optional

from ..domain import AvailabilityResult, CalendarEvent
from .classifier import classify_slot, sanitize_events
from .rules import AvailabilityRules
from .scoring import score_slot
from .slots import DEFAULT_HORIZON_DAYS, generate_slots
from .summary import build_summary

logger = logging.getLogger(__name__)


def compute_availability(
    now: datetime,
    party_a_events: Iterable[CalendarEvent],
    party_b_events: Iterable[CalendarEvent],
    *,
    horizon_days: int = DEFAULT_HORIZON_DAYS,
    rules: Optional[AvailabilityRules] = None,
) -> AvailabilityResult:
    """Classify the shared hourly grid for two parties and pick suggested times.

    Pure function of its arguments: ``now`` is never read from a clock and no
    state is kept between calls. Malformed events (``start >= end`` or timezone
    awareness that does not match ``now``) are dropped with a warning;
    an invalid ``horizon_days`` raises :class:`InvalidHorizonError`.
    """

    active_rules = rules or AvailabilityRules()
    slots = generate_slots(now, horizon_days)
    a_events = sanitize_events(party_a_events, party="a", reference=now)
    b_events = sanitize_events(party_b_events, party="b", reference=now)

    scored = [score_slot(slot, classify_slot(slot, a_events, b_events), active_rules) for slot in slots]
    result = build_summary(now, scored, active_rules)
    logger.debug(
        "Computed %d slots (%d free, %d suggestions) from %d/%d events",
        len(result.slots),
        result.overlap_free_hours,
        len(result.suggested_times),
        len(a_events),
        len(b_events),
    )
    return result
