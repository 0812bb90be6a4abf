from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from ..engine import UpstreamUnavailableError, compute_availability, validate_horizon
from ..services import PartyPair
from .models import AvailabilityRequest
from .registry import register_api
from .serializers import serialize_result, serialize_rules, serialize_unavailable
from .state import api_state


def _require_store() -> None:
    if not api_state.context.gateway.is_ready():
        missing = ", ".join(api_state.context.settings.supabase.missing_env_vars)
        raise RuntimeError(f"Event store is not configured; set {missing}.")


def _parse_datetime(timestamp: str) -> datetime:
    try:
        return datetime.fromisoformat(timestamp.replace("Z", "+00:00"))
    except ValueError as exc:  # noqa: TRY003
        raise ValueError(f"Invalid ISO timestamp: {timestamp}") from exc


@register_api(
    "compute_shared_availability",
    description=(
        "Classify hourly slots as free, busy, overlap or potential_date for two supplied event lists "
        "and return up to three suggested start times."
    ),
    category="availability",
    tags=("availability", "pure"),
)
def compute_shared_availability(
    now: str,
    party_a_events: List[Dict[str, Any]],
    party_b_events: List[Dict[str, Any]],
    horizon_days: int = 7,
) -> Dict[str, Any]:
    settings = api_state.context.settings.availability
    request = AvailabilityRequest.model_validate(
        {
            "now": now,
            "horizon_days": horizon_days,
            "party_a_events": party_a_events,
            "party_b_events": party_b_events,
        }
    )
    result = compute_availability(
        request.now,
        [event.to_domain() for event in request.party_a_events],
        [event.to_domain() for event in request.party_b_events],
        horizon_days=validate_horizon(request.horizon_days, maximum=settings.max_horizon_days),
        rules=settings.rules,
    )
    return serialize_result(result)


@register_api(
    "shared_availability_for_parties",
    description="Fetch both parties' events from the store in parallel and compute their shared availability.",
    category="availability",
    tags=("availability", "supabase"),
)
def shared_availability_for_parties(
    first_party: str,
    second_party: str,
    now: str,
    horizon_days: Optional[int] = None,
) -> Dict[str, Any]:
    _require_store()
    parties = PartyPair(first_party, second_party)
    try:
        result = api_state.availability.compute_for(parties, _parse_datetime(now), horizon_days)
    except UpstreamUnavailableError as exc:
        return serialize_unavailable(exc.party, exc.reason)
    return serialize_result(result)


@register_api(
    "availability_rules",
    description="Return the good windows, confidences and limits used when scoring slots.",
    category="availability",
    tags=("availability", "config"),
)
def availability_rules() -> Dict[str, Any]:
    settings = api_state.context.settings.availability
    return {
        "horizon_days": settings.horizon_days,
        "max_horizon_days": settings.max_horizon_days,
        **serialize_rules(settings.rules),
    }
