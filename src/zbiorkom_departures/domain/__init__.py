"""Domain layer for zbiorkom departures."""
