from __future__ import annotations

import logging
from datetime import datetime
from typing import Iterable, List, Optional, Sequence

from ..domain import CalendarEvent, SlotClassification, TimeSlot
from ..domain.models import is_aware
from .errors import MalformedEventError

logger = logging.getLogger(__name__)


def ensure_well_formed(
    event: CalendarEvent,
    party: Optional[str] = None,
    *,
    reference: Optional[datetime] = None,
) -> CalendarEvent:
    """Return ``event`` if it can be compared with the grid anchored at ``reference``."""

    if event.has_mixed_awareness:
        raise MalformedEventError(event, party, "start and end disagree on timezone awareness")
    if reference is not None and is_aware(event.start) != is_aware(reference):
        raise MalformedEventError(event, party, "timezone awareness differs from the reference time")
    if not event.is_well_formed:
        raise MalformedEventError(event, party)
    return event


def sanitize_events(
    events: Iterable[CalendarEvent],
    *,
    party: Optional[str] = None,
    reference: Optional[datetime] = None,
) -> List[CalendarEvent]:
    """Drop malformed events, logging one warning per dropped event."""

    kept: list[CalendarEvent] = []
    for event in events:
        try:
            kept.append(ensure_well_formed(event, party, reference=reference))
        except MalformedEventError as exc:
            logger.warning("Dropping malformed event: %s", exc)
    return kept


def is_party_busy(slot: TimeSlot, events: Sequence[CalendarEvent]) -> bool:
    return any(event.overlaps(slot.start, slot.end) for event in events)


def classify_slot(
    slot: TimeSlot,
    party_a_events: Sequence[CalendarEvent],
    party_b_events: Sequence[CalendarEvent],
) -> SlotClassification:
    """Return ``overlap`` or ``busy`` from busy state; mutually free slots come back as ``free``.

    Choosing between ``free`` and ``potential_date`` is left to the scorer.
    """

    a_busy = is_party_busy(slot, party_a_events)
    b_busy = is_party_busy(slot, party_b_events)
    if a_busy and b_busy:
        return SlotClassification.OVERLAP
    if a_busy or b_busy:
        return SlotClassification.BUSY
    return SlotClassification.FREE
