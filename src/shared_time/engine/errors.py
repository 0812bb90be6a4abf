from __future__ import annotations

from typing import Any, Optional

from ..domain import CalendarEvent


class InvalidHorizonError(ValueError):
    """Raised when ``horizon_days`` is not a non-negative integer or exceeds a configured maximum."""

    def __init__(self, value: Any, *, maximum: Optional[int] = None) -> None:
        if maximum is None:
            message = f"horizon_days must be a non-negative integer, got {value!r}."
        else:
            message = f"horizon_days must be at most {maximum}, got {value!r}."
        super().__init__(message)
        self.value = value
        self.maximum = maximum


class MalformedEventError(ValueError):
    """Raised for an event that cannot be placed on the slot grid."""

    def __init__(self, event: CalendarEvent, party: Optional[str] = None, reason: Optional[str] = None) -> None:
        owner = f" for party {party}" if party else ""
        detail = reason or f"start {event.start.isoformat()} >= end {event.end.isoformat()}"
        super().__init__(f"Event{owner} is malformed: {detail}.")
        self.event = event
        self.party = party


class UpstreamUnavailableError(RuntimeError):
    """Raised when a party's events could not be fetched from the event source."""

    def __init__(self, party: str, reason: str) -> None:
        super().__init__(f"Events for party {party} are unavailable: {reason}")
        self.party = party
        self.reason = reason
