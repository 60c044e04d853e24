"""Protocol for receiving feed state updates."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from zbiorkom_departures.domain.models.feed_state import FeedState


class StateListenerProtocol(Protocol):
    """Protocol for the presentation layer consuming feed state."""

    def state_changed(self, state: "FeedState") -> None:
        """Handle a new feed state snapshot.

        Args:
            state: The current read-only snapshot.
        """
        ...
