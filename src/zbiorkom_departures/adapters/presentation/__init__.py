"""Plain-text presentation of the departure board."""

from zbiorkom_departures.adapters.presentation.board_builder import (
    BoardBuilder,
    BoardRow,
    BoardStatus,
    BoardView,
    RealtimeStatus,
)
from zbiorkom_departures.adapters.presentation.console_renderer import ConsoleBoardRenderer
from zbiorkom_departures.adapters.presentation.display_options import DisplayOptions

__all__ = [
    "BoardBuilder",
    "BoardRow",
    "BoardStatus",
    "BoardView",
    "ConsoleBoardRenderer",
    "DisplayOptions",
    "RealtimeStatus",
]
