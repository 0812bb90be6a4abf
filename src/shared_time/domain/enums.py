from __future__ import annotations

from enum import Enum


class SlotClassification(str, Enum):
    FREE = "free"
    BUSY = "busy"
    OVERLAP = "overlap"
    POTENTIAL_DATE = "potential_date"
