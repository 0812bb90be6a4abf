from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import List, Optional

from ..domain import AvailabilityResult, CalendarEvent
from ..engine import UpstreamUnavailableError, compute_availability, floor_to_hour, validate_horizon
from .context import ServiceContext

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PartyPair:
    """Ordered pair of opaque party identifiers."""

    first: str
    second: str

    def __post_init__(self) -> None:
        if not self.first or not self.second:
            raise ValueError("Both party identifiers are required.")


@dataclass(slots=True)
class SharedAvailabilityService:
    context: ServiceContext

    def fetch_window(self, parties: PartyPair, start: datetime, end: datetime) -> tuple[List[CalendarEvent], List[CalendarEvent]]:
        """Fetch both parties' events in parallel.

        Raises :class:`UpstreamUnavailableError` if either fetch fails; a failed
        fetch is never replaced by an empty list.
        """

        with ThreadPoolExecutor(max_workers=2, thread_name_prefix="shared-time-fetch") as pool:
            first = pool.submit(self.context.events.fetch_window, parties.first, start, end)
            second = pool.submit(self.context.events.fetch_window, parties.second, start, end)
            return self._join(parties.first, first), self._join(parties.second, second)

    @staticmethod
    def _join(party: str, future: Future) -> List[CalendarEvent]:
        try:
            return future.result()
        except Exception as exc:  # noqa: BLE001
            logger.exception("Fetching events for party %s failed", party)
            raise UpstreamUnavailableError(party, str(exc) or type(exc).__name__) from exc

    def compute_for(
        self,
        parties: PartyPair,
        now: datetime,
        horizon_days: Optional[int] = None,
    ) -> AvailabilityResult:
        availability = self.context.settings.availability
        days = validate_horizon(
            availability.horizon_days if horizon_days is None else horizon_days,
            maximum=availability.max_horizon_days,
        )
        window_start = floor_to_hour(now)
        window_end = window_start + timedelta(days=days)
        first_events, second_events = self.fetch_window(parties, window_start, window_end)
        return compute_availability(
            now,
            first_events,
            second_events,
            horizon_days=days,
            rules=availability.rules,
        )
