from __future__ import annotations

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, StrictInt

from ..domain import AvailabilityResult, CalendarEvent, ScoredSlot
from ..engine import DEFAULT_HORIZON_DAYS


class EventInput(BaseModel):
    """Raw event as supplied by a caller; ``start >= end`` is left for the engine to drop."""

    model_config = ConfigDict(populate_by_name=True)

    start: datetime = Field(validation_alias=AliasChoices("start", "start_time"))
    end: datetime = Field(validation_alias=AliasChoices("end", "end_time"))
    id: Optional[str] = Field(default=None)
    title: str = Field(default="")

    def to_domain(self) -> CalendarEvent:
        return CalendarEvent(start=self.start, end=self.end, id=self.id, title=self.title)


class AvailabilityRequest(BaseModel):
    now: datetime
    horizon_days: StrictInt = Field(default=DEFAULT_HORIZON_DAYS)
    party_a_events: List[EventInput] = Field(default_factory=list)
    party_b_events: List[EventInput] = Field(default_factory=list)


class SlotPayload(BaseModel):
    start: str
    end: str
    classification: str
    confidence: float

    @classmethod
    def from_domain(cls, scored: ScoredSlot) -> "SlotPayload":
        return cls(
            start=scored.start.isoformat(),
            end=scored.end.isoformat(),
            classification=scored.classification.value,
            confidence=scored.confidence,
        )


class AvailabilityPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    overlap_free_hours: int = Field(serialization_alias="overlapFreeHours")
    suggested_times: List[str] = Field(serialization_alias="suggestedTimes")
    slots: List[SlotPayload]
    computed_at: str = Field(serialization_alias="computedAt")
    next_refresh_at: str = Field(serialization_alias="nextRefreshAt")

    @classmethod
    def from_domain(cls, result: AvailabilityResult) -> "AvailabilityPayload":
        return cls(
            overlap_free_hours=result.overlap_free_hours,
            suggested_times=[moment.isoformat() for moment in result.suggested_times],
            slots=[SlotPayload.from_domain(scored) for scored in result.slots],
            computed_at=result.computed_at.isoformat(),
            next_refresh_at=result.next_refresh_at.isoformat(),
        )


class AvailabilityOutcome(BaseModel):
    """Distinguishes a computed result (possibly with zero suggestions) from a run that could not happen."""

    status: Literal["ok", "unavailable"]
    result: Optional[AvailabilityPayload] = Field(default=None)
    party: Optional[str] = Field(default=None)
    reason: Optional[str] = Field(default=None)

    @classmethod
    def ok(cls, result: AvailabilityResult) -> "AvailabilityOutcome":
        return cls(status="ok", result=AvailabilityPayload.from_domain(result))

    @classmethod
    def unavailable(cls, party: str, reason: str) -> "AvailabilityOutcome":
        return cls(status="unavailable", party=party, reason=reason)
