from __future__ import annotations

from typing import Any, Dict

from ..domain import AvailabilityResult
from ..engine import AvailabilityRules
from .models import AvailabilityOutcome


def serialize_result(result: AvailabilityResult) -> Dict[str, Any]:
    return AvailabilityOutcome.ok(result).model_dump(by_alias=True, exclude_none=True)


def serialize_unavailable(party: str, reason: str) -> Dict[str, Any]:
    return AvailabilityOutcome.unavailable(party, reason).model_dump(by_alias=True, exclude_none=True)


def serialize_rules(rules: AvailabilityRules) -> Dict[str, Any]:
    return {
        "good_windows": [
            {"weekdays": sorted(window.weekdays), "start_hour": window.start_hour, "end_hour": window.end_hour}
            for window in rules.good_windows
        ],
        "overlap_confidence": rules.overlap_confidence,
        "busy_confidence": rules.busy_confidence,
        "free_confidence": rules.free_confidence,
        "potential_date_confidence": rules.potential_date_confidence,
        "suggestion_threshold": rules.suggestion_threshold,
        "max_suggestions": rules.max_suggestions,
        "refresh_interval_seconds": int(rules.refresh_interval.total_seconds()),
    }
