"""Stop info domain model."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class StopInfo:
    """Describes the queried stop as reported upstream."""

    stop_id: Any
    city: Any
    name: Any
    full_name: Any
    coordinates: Any  # Passed through as sent upstream, usually a [lat, lon] pair
