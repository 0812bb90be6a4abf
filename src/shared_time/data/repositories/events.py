from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import List, Protocol

from ...domain import CalendarEvent
from ..supabase import SupabaseGateway


class EventSource(Protocol):
    def fetch_window(self, party_id: str, start: datetime, end: datetime) -> List[CalendarEvent]:
        ...


@dataclass(slots=True)
class EventRepository:
    """Reads a party's calendar rows overlapping a time window."""

    gateway: SupabaseGateway
    table_name: str

    def fetch_window(self, party_id: str, start: datetime, end: datetime) -> List[CalendarEvent]:
        query = (
            self.gateway.table(self.table_name)
            .select("id, user_id, title, start_time, end_time")
            .eq("user_id", party_id)
            .lt("start_time", end.isoformat())
            .gt("end_time", start.isoformat())
            .order("start_time", desc=False)
        )
        response = query.execute()
        records = response.data or []
        return [CalendarEvent.from_record(record) for record in records]
