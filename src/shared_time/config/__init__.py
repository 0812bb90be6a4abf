"""Configuration models and helpers."""

from __future__ import annotations

from .settings import (
    AppSettings,
    AvailabilitySettings,
    StorageSettings,
    SupabaseSettings,
    get_settings,
    parse_good_windows,
)

__all__ = [
    "AppSettings",
    "AvailabilitySettings",
    "StorageSettings",
    "SupabaseSettings",
    "get_settings",
    "parse_good_windows",
]
