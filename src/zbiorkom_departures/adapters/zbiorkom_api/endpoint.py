"""zbiorkom.live departures endpoint format."""

from typing import Any

from zbiorkom_departures.adapters.zbiorkom_api.request_builder import build_departures_url
from zbiorkom_departures.adapters.zbiorkom_api.response_decoder import ResponseDecoder
from zbiorkom_departures.domain.contracts.departure_endpoint import DepartureEndpointProtocol
from zbiorkom_departures.domain.models.stop_board import StopBoard
from zbiorkom_departures.domain.models.stop_configuration import StopConfiguration


class ZbiorkomEndpoint(DepartureEndpointProtocol):
    """Request shaping and response decoding for the zbiorkom.live API."""

    def departures_url(self, config: StopConfiguration) -> str:
        """Build the getDepartures URL."""
        return build_departures_url(config)

    def decode_response(self, payload: Any) -> StopBoard:
        """Decode a getDepartures payload."""
        return ResponseDecoder.decode(payload)
