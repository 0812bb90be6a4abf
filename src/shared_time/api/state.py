from __future__ import annotations

from dataclasses import dataclass, field

from ..services import ServiceContext, SharedAvailabilityService


@dataclass(slots=True)
class ApiState:
    context: ServiceContext = field(default_factory=ServiceContext)
    availability: SharedAvailabilityService = field(init=False)

    def __post_init__(self) -> None:
        self.availability = SharedAvailabilityService(self.context)


api_state = ApiState()
