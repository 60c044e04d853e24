"""Builds the board view model from feed state."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

from zbiorkom_departures.adapters.presentation.display_options import DisplayOptions
from zbiorkom_departures.adapters.zbiorkom_api.constants import DEFAULT_LINE_COLOR
from zbiorkom_departures.domain.models.departure import Departure
from zbiorkom_departures.domain.models.feed_state import FeedState
from zbiorkom_departures.domain.time_math import (
    format_clock_time,
    format_minutes,
    minutes_until,
)

# Departures this many minutes away or fewer are highlighted as "soon"
SOON_THRESHOLD_MINUTES = 3


class BoardStatus(StrEnum):
    """What the board body shows."""

    LOADING = "loading"
    ERROR = "error"
    EMPTY = "empty"
    DEPARTURES = "departures"


class RealtimeStatus(StrEnum):
    """Realtime indicator of a departure row."""

    SCHEDULED = "scheduled"
    DELAYED = "delayed"
    LIVE = "live"

    @property
    def label(self) -> str:
        """Human-readable label."""
        return _REALTIME_LABELS[self]


_REALTIME_LABELS = {
    RealtimeStatus.SCHEDULED: "Scheduled",
    RealtimeStatus.DELAYED: "Delayed",
    RealtimeStatus.LIVE: "Live",
}


@dataclass(frozen=True)
class BoardRow:
    """One rendered departure."""

    line_number: str
    line_color: str | None
    destination: str
    scheduled_clock: str
    minutes: int
    minutes_text: str
    urgency: str  # "now", "soon" or ""
    realtime_status: RealtimeStatus | None  # None when the indicator is hidden


@dataclass(frozen=True)
class BoardView:
    """Everything needed to draw the board."""

    title: str
    stop_name: str | None
    status: BoardStatus
    error: str | None
    rows: tuple[BoardRow, ...]


class BoardBuilder:
    """Turns a FeedState snapshot into a BoardView."""

    def __init__(self, options: DisplayOptions) -> None:
        """Initialize the builder.

        Args:
            options: Display options.
        """
        self.options = options

    def build(self, state: FeedState, now: datetime) -> BoardView:
        """Build the board for a state snapshot at the given instant."""
        departures = state.departures[: self.options.max_departures]
        rows = tuple(self.build_row(dep, now) for dep in departures)

        return BoardView(
            title=self.options.title,
            stop_name=self._stop_name(state),
            status=self._status(state, rows),
            error=state.error,
            rows=rows,
        )

    def build_row(self, departure: Departure, now: datetime) -> BoardRow:
        """Build one board row."""
        target = departure.actual_time or departure.scheduled_time
        minutes = minutes_until(target, now) if target else 0

        if minutes == 0:
            urgency = "now"
        elif minutes <= SOON_THRESHOLD_MINUTES:
            urgency = "soon"
        else:
            urgency = ""

        return BoardRow(
            line_number=_text(departure.line.number),
            line_color=self._line_color(departure),
            destination=_text(departure.destination),
            scheduled_clock=(
                format_clock_time(departure.scheduled_time, self.options.timezone)
                if departure.scheduled_time
                else "--:--"
            ),
            minutes=minutes,
            minutes_text=format_minutes(minutes),
            urgency=urgency,
            realtime_status=(
                self.realtime_status(departure) if self.options.show_realtime_indicator else None
            ),
        )

    @staticmethod
    def realtime_status(departure: Departure) -> RealtimeStatus:
        """Classify a departure for the realtime indicator."""
        if not departure.is_realtime:
            return RealtimeStatus.SCHEDULED
        if departure.is_delayed:
            return RealtimeStatus.DELAYED
        return RealtimeStatus.LIVE

    def _line_color(self, departure: Departure) -> str | None:
        if not self.options.show_line_colors:
            return None
        return departure.line.color or DEFAULT_LINE_COLOR

    def _stop_name(self, state: FeedState) -> str | None:
        if not self.options.show_stop_name or state.stop_info is None:
            return None
        name = state.stop_info.full_name or state.stop_info.name
        return str(name) if name else None

    @staticmethod
    def _status(state: FeedState, rows: tuple[BoardRow, ...]) -> BoardStatus:
        if state.loading and not state.departures:
            return BoardStatus.LOADING
        if state.error and not state.departures:
            return BoardStatus.ERROR
        if not rows:
            return BoardStatus.EMPTY
        return BoardStatus.DEPARTURES


def _text(value: object) -> str:
    return "" if value is None else str(value)
