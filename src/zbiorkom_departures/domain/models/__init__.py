"""Domain models for zbiorkom departures."""

from zbiorkom_departures.domain.models.departure import DELAY_THRESHOLD_SECONDS, Departure
from zbiorkom_departures.domain.models.feed_state import FeedState
from zbiorkom_departures.domain.models.line import Line
from zbiorkom_departures.domain.models.stop_board import StopBoard
from zbiorkom_departures.domain.models.stop_configuration import (
    DEFAULT_API_URL,
    StopConfiguration,
)
from zbiorkom_departures.domain.models.stop_info import StopInfo

__all__ = [
    "DEFAULT_API_URL",
    "DELAY_THRESHOLD_SECONDS",
    "Departure",
    "FeedState",
    "Line",
    "StopBoard",
    "StopConfiguration",
    "StopInfo",
]
