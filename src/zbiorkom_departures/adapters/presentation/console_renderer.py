"""Plain-text renderer for the departure board."""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from datetime import UTC, datetime
from typing import TYPE_CHECKING, TextIO

from zbiorkom_departures.adapters.presentation.board_builder import (
    BoardBuilder,
    BoardRow,
    BoardStatus,
    BoardView,
)
from zbiorkom_departures.domain.contracts.state_listener import StateListenerProtocol

if TYPE_CHECKING:
    from zbiorkom_departures.domain.models.feed_state import FeedState

logger = logging.getLogger(__name__)

SEPARATOR = "=" * 60


def _utc_now() -> datetime:
    return datetime.now(UTC)


class ConsoleBoardRenderer(StateListenerProtocol):
    """Writes the board to a text stream on every state change."""

    def __init__(
        self,
        builder: BoardBuilder,
        stream: TextIO | None = None,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        """Initialize the renderer.

        Args:
            builder: Board view builder.
            stream: Output stream, stdout when None.
            clock: Returns the current instant.
        """
        self.builder = builder
        self.stream = stream or sys.stdout
        self.clock = clock
        self._last_output: str | None = None

    def state_changed(self, state: FeedState) -> None:
        """Render the board for a new state snapshot."""
        output = self.render(self.builder.build(state, self.clock()))
        if output == self._last_output:
            logger.debug("Board unchanged, skipping render")
            return
        self._last_output = output
        print(output, file=self.stream, flush=True)

    def render(self, view: BoardView) -> str:
        """Render a board view as text."""
        lines = [SEPARATOR, view.title]
        if view.stop_name:
            lines.append(view.stop_name)
        lines.append("-" * len(SEPARATOR))

        if view.status == BoardStatus.LOADING:
            lines.append("Loading...")
        elif view.status == BoardStatus.ERROR:
            lines.append(f"Error: {view.error}")
        elif view.status == BoardStatus.EMPTY:
            lines.append("No upcoming departures")
        else:
            lines.extend(self.render_row(row) for row in view.rows)
            if view.error:
                # Stale rows are still shown; flag that the last refresh failed
                lines.append(f"(last update failed: {view.error})")

        lines.append(SEPARATOR)
        return "\n".join(lines)

    @staticmethod
    def render_row(row: BoardRow) -> str:
        """Render one departure row."""
        marker = {"now": "!", "soon": "*"}.get(row.urgency, " ")
        text = (
            f"{row.line_number:>4}  {row.destination[:28]:<28} "
            f"{row.scheduled_clock:>5} {row.minutes_text:>10}{marker}"
        )
        if row.realtime_status is not None:
            text += f" {row.realtime_status.label}"
        return text
