from __future__ import annotations

from datetime import datetime
from typing import Iterable, List

from ..domain import ScoredSlot, SlotClassification
from .rules import AvailabilityRules


def rank_suggestions(scored_slots: Iterable[ScoredSlot], rules: AvailabilityRules) -> List[datetime]:
    """Best ``potential_date`` starts: confidence descending, then earliest first."""

    candidates = [
        scored
        for scored in scored_slots
        if scored.classification is SlotClassification.POTENTIAL_DATE
        and scored.confidence > rules.suggestion_threshold
    ]
    candidates.sort(key=lambda scored: (-scored.confidence, scored.start))
    return [scored.start for scored in candidates[: rules.max_suggestions]]
