"""Protocols the departure feed depends on."""

from zbiorkom_departures.domain.contracts.departure_endpoint import DepartureEndpointProtocol
from zbiorkom_departures.domain.contracts.http_fetcher import (
    HttpFetcherProtocol,
    HttpResponseProtocol,
)
from zbiorkom_departures.domain.contracts.poller import PollerProtocol, TickCallback
from zbiorkom_departures.domain.contracts.state_listener import StateListenerProtocol

__all__ = [
    "DepartureEndpointProtocol",
    "HttpFetcherProtocol",
    "HttpResponseProtocol",
    "PollerProtocol",
    "StateListenerProtocol",
    "TickCallback",
]
