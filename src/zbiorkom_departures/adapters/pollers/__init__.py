"""Pollers for periodic departure refresh."""

from zbiorkom_departures.adapters.pollers.poller import Poller

__all__ = ["Poller"]
