from __future__ import annotations

from ..domain import ScoredSlot, SlotClassification, TimeSlot
from .rules import AvailabilityRules


def score_slot(slot: TimeSlot, classification: SlotClassification, rules: AvailabilityRules) -> ScoredSlot:
    if classification is SlotClassification.OVERLAP:
        return ScoredSlot(slot, classification, rules.overlap_confidence)
    if classification is SlotClassification.BUSY:
        return ScoredSlot(slot, classification, rules.busy_confidence)
    if rules.in_good_window(slot.start):
        return ScoredSlot(slot, SlotClassification.POTENTIAL_DATE, rules.potential_date_confidence)
    return ScoredSlot(slot, SlotClassification.FREE, rules.free_confidence)
