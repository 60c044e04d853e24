"""Adapters for zbiorkom departures."""
