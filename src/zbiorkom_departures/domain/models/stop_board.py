"""Decoded stop board domain model."""

from dataclasses import dataclass, field

from zbiorkom_departures.domain.models.departure import Departure
from zbiorkom_departures.domain.models.stop_info import StopInfo


@dataclass(frozen=True)
class StopBoard:
    """Stop info and departures decoded from one upstream response."""

    stop_info: StopInfo
    departures: tuple[Departure, ...] = field(default_factory=tuple)
