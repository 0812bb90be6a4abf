from __future__ import annotations

from datetime import datetime
from typing import Sequence

from ..domain import AvailabilityResult, ScoredSlot, SlotClassification
from .ranking import rank_suggestions
from .rules import AvailabilityRules


def build_summary(now: datetime, scored_slots: Sequence[ScoredSlot], rules: AvailabilityRules) -> AvailabilityResult:
    free_count = sum(1 for scored in scored_slots if scored.classification is SlotClassification.FREE)
    return AvailabilityResult(
        overlap_free_hours=free_count,
        suggested_times=tuple(rank_suggestions(scored_slots, rules)),
        slots=tuple(scored_slots),
        computed_at=now,
        next_refresh_at=now + rules.refresh_interval,
    )
