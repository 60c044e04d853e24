"""Feed state snapshot."""

from dataclasses import dataclass, field
from datetime import datetime

from zbiorkom_departures.domain.models.departure import Departure
from zbiorkom_departures.domain.models.stop_info import StopInfo


@dataclass(frozen=True)
class FeedState:
    """Read-only snapshot of a departure feed.

    A new snapshot is produced on every transition; departures are always
    replaced as a whole and keep the order sent upstream.
    """

    loading: bool = True
    error: str | None = None
    stop_info: StopInfo | None = None
    departures: tuple[Departure, ...] = field(default_factory=tuple)
    last_update: datetime | None = None

    @property
    def has_data(self) -> bool:
        """Whether at least one departure is available for display."""
        return len(self.departures) > 0
