"""Departure board for zbiorkom.live stops."""

__version__ = "0.1.0"
