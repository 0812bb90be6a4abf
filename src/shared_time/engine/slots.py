from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, List, Optional

from ..domain import TimeSlot
from ..domain.models import is_aware
from .errors import InvalidHorizonError

SLOT_WIDTH = timedelta(hours=1)
DEFAULT_HORIZON_DAYS = 7


def floor_to_hour(moment: datetime) -> datetime:
    return moment.replace(minute=0, second=0, microsecond=0)


def validate_horizon(horizon_days: Any, *, maximum: Optional[int] = None) -> int:
    # bool is an int subclass but never a meaningful day count.
    if isinstance(horizon_days, bool) or not isinstance(horizon_days, int) or horizon_days < 0:
        raise InvalidHorizonError(horizon_days)
    if maximum is not None and horizon_days > maximum:
        raise InvalidHorizonError(horizon_days, maximum=maximum)
    return horizon_days


def _boundaries(origin: datetime, count: int) -> List[datetime]:
    if not is_aware(origin):
        return [origin + index * SLOT_WIDTH for index in range(count + 1)]
    # Step in UTC so every slot is one elapsed hour across DST changes.
    origin_utc = origin.astimezone(timezone.utc)
    return [(origin_utc + index * SLOT_WIDTH).astimezone(origin.tzinfo) for index in range(count + 1)]


def generate_slots(now: datetime, horizon_days: int = DEFAULT_HORIZON_DAYS) -> List[TimeSlot]:
    """Build the contiguous hourly grid over ``[floor_to_hour(now), +horizon_days)``."""

    days = validate_horizon(horizon_days)
    if days == 0:
        return []
    bounds = _boundaries(floor_to_hour(now), days * 24)
    return [TimeSlot(start=start, end=end) for start, end in zip(bounds, bounds[1:])]
