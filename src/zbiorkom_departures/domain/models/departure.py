"""Departure domain model."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from zbiorkom_departures.domain.models.line import Line

DELAY_THRESHOLD_SECONDS = 120


@dataclass(frozen=True)
class Departure:
    """Represents a single departure from the configured stop."""

    trip_id: Any
    destination: Any
    line: Line
    scheduled_time: datetime | None
    actual_time: datetime | None  # May be earlier than scheduled_time when running early
    delay_seconds: int | float | None
    is_realtime: bool
    is_delayed: bool
    vehicle_id: str | None = None
