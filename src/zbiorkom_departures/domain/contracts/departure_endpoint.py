"""Protocol for the upstream departures endpoint format."""

from typing import Any, Protocol

from zbiorkom_departures.domain.models.stop_board import StopBoard
from zbiorkom_departures.domain.models.stop_configuration import StopConfiguration


class DepartureEndpointProtocol(Protocol):
    """Protocol for shaping departure requests and decoding their responses."""

    def departures_url(self, config: StopConfiguration) -> str:
        """Build the request URL for a stop configuration.

        Args:
            config: Validated stop configuration.

        Returns:
            Fully built request URL.
        """
        ...

    def decode_response(self, payload: Any) -> StopBoard:
        """Decode a JSON payload into a stop board.

        Args:
            payload: The decoded JSON body.

        Returns:
            Stop info and departures.

        Raises:
            DecodeError: If the payload carries no usable stop descriptor.
        """
        ...
