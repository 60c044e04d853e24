"""Protocol for periodic polling."""

from collections.abc import Awaitable, Callable
from typing import Protocol

TickCallback = Callable[[], Awaitable[None]]


class PollerProtocol(Protocol):
    """Protocol for scheduling periodic ticks."""

    @property
    def running(self) -> bool:
        """Whether a schedule is active."""
        ...

    def start(self, interval_seconds: float, on_tick: TickCallback) -> None:
        """Run on_tick now and then every interval_seconds, replacing any active schedule."""
        ...

    def stop(self) -> None:
        """Cancel the active schedule. No-op when not running."""
        ...
