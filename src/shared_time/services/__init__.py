"""Application services orchestrating data access and the availability engine."""

from __future__ import annotations

from .availability import PartyPair, SharedAvailabilityService
from .context import ServiceContext

__all__ = ["PartyPair", "ServiceContext", "SharedAvailabilityService"]
