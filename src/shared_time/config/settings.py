from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import timedelta
from functools import lru_cache
from typing import Optional, Tuple

from dotenv import load_dotenv

from ..engine.rules import DEFAULT_GOOD_WINDOWS, AvailabilityRules, GoodWindow

load_dotenv()

GOOD_WINDOWS_ENV = "SHARED_TIME_GOOD_WINDOWS"


@dataclass(frozen=True)
class SupabaseSettings:
    url: Optional[str]
    anon_key: Optional[str]
    service_role_key: Optional[str]

    @property
    def api_key(self) -> Optional[str]:
        # Reading the other party's rows needs the service role under row level security.
        return self.service_role_key or self.anon_key

    @property
    def is_configured(self) -> bool:
        return bool(self.url and self.api_key)

    @property
    def missing_env_vars(self) -> list[str]:
        missing = []
        if not self.url:
            missing.append("SUPABASE_URL")
        if not self.api_key:
            missing.append("SUPABASE_SERVICE_ROLE_KEY")
        return missing


@dataclass(frozen=True)
class StorageSettings:
    events_table: str


@dataclass(frozen=True)
class AvailabilitySettings:
    horizon_days: int
    max_horizon_days: int
    suggestion_threshold: float
    max_suggestions: int
    refresh_interval: timedelta
    good_windows: Tuple[GoodWindow, ...]

    @property
    def rules(self) -> AvailabilityRules:
        return AvailabilityRules(
            good_windows=self.good_windows,
            suggestion_threshold=self.suggestion_threshold,
            max_suggestions=self.max_suggestions,
            refresh_interval=self.refresh_interval,
        )


@dataclass(frozen=True)
class AppSettings:
    supabase: SupabaseSettings
    storage: StorageSettings
    availability: AvailabilitySettings


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _float_from_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def parse_good_windows(raw: str) -> Tuple[GoodWindow, ...]:
    """Parse ``"5,6@18-22;0,1,2,3,4@14-17"`` into good windows (Monday is 0)."""

    windows: list[GoodWindow] = []
    for chunk in raw.split(";"):
        chunk = chunk.strip()
        if not chunk:
            continue
        try:
            days_part, hours_part = chunk.split("@")
            start_raw, end_raw = hours_part.split("-")
            weekdays = frozenset(int(day) for day in days_part.split(",") if day.strip())
            windows.append(GoodWindow(weekdays=weekdays, start_hour=int(start_raw), end_hour=int(end_raw)))
        except ValueError as exc:
            raise ValueError(f"Invalid {GOOD_WINDOWS_ENV} entry {chunk!r}: {exc}") from exc
    return tuple(windows)


def _good_windows_from_env() -> Tuple[GoodWindow, ...]:
    raw = os.getenv(GOOD_WINDOWS_ENV)
    if not raw:
        return DEFAULT_GOOD_WINDOWS
    return parse_good_windows(raw)


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    supabase = SupabaseSettings(
        url=os.getenv("SUPABASE_URL"),
        anon_key=os.getenv("SUPABASE_ANON_KEY"),
        service_role_key=os.getenv("SUPABASE_SERVICE_ROLE_KEY"),
    )

    storage = StorageSettings(
        events_table=os.getenv("SHARED_TIME_EVENTS_TABLE", "user_calendar_events"),
    )

    availability = AvailabilitySettings(
        horizon_days=_int_from_env("SHARED_TIME_HORIZON_DAYS", 7),
        max_horizon_days=_int_from_env("SHARED_TIME_MAX_HORIZON_DAYS", 31),
        suggestion_threshold=_float_from_env("SHARED_TIME_SUGGESTION_THRESHOLD", 0.6),
        max_suggestions=_int_from_env("SHARED_TIME_MAX_SUGGESTIONS", 3),
        refresh_interval=timedelta(seconds=_int_from_env("SHARED_TIME_REFRESH_SECONDS", 300)),
        good_windows=_good_windows_from_env(),
    )

    return AppSettings(supabase=supabase, storage=storage, availability=availability)
