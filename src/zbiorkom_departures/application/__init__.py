"""Application services for zbiorkom departures."""

from zbiorkom_departures.application.departure_feed import DepartureFeed

__all__ = ["DepartureFeed"]
