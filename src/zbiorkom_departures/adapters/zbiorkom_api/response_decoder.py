"""Decoder for zbiorkom.live getDepartures responses.

The response carries no field names; every value is addressed by position:

    [
      [stop_id, city, name, coordinates, ...],
      [
        [trip_id, destination, [_, _, line_number, _, _, line_color], _, _, vehicle_id, _,
         [scheduled, actual, delay_seconds]],
        ...
      ]
    ]
"""

import logging
from datetime import UTC, datetime
from typing import Any

from zbiorkom_departures.domain.errors import DecodeError
from zbiorkom_departures.domain.models.departure import DELAY_THRESHOLD_SECONDS, Departure
from zbiorkom_departures.domain.models.line import Line
from zbiorkom_departures.domain.models.stop_board import StopBoard
from zbiorkom_departures.domain.models.stop_info import StopInfo

logger = logging.getLogger(__name__)


def _item(values: Any, index: int, default: Any = None) -> Any:
    """Return values[index] if values is a list that long and the item is not null."""
    if not isinstance(values, list) or index >= len(values):
        return default
    value = values[index]
    return default if value is None else value


def _list_item(values: Any, index: int) -> list[Any]:
    """Return values[index] if it is a list, otherwise an empty list."""
    value = _item(values, index)
    return value if isinstance(value, list) else []


def _is_number(value: Any) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


class ResponseDecoder:
    """Decodes positional getDepartures payloads into a StopBoard."""

    @staticmethod
    def decode(data: Any) -> StopBoard:
        """Decode a getDepartures payload.

        Args:
            data: The JSON-decoded response body.

        Returns:
            StopBoard with stop info and departures in upstream order.

        Raises:
            DecodeError: If the stop descriptor is missing or not an array.
        """
        if not isinstance(data, list):
            raise DecodeError(f"Expected a JSON array, got {type(data).__name__}")

        stop_data = _item(data, 0)
        if not isinstance(stop_data, list):
            raise DecodeError("Response has no stop descriptor")

        stop_info = ResponseDecoder.decode_stop_info(stop_data)
        departures = tuple(
            ResponseDecoder.decode_departure(dep) for dep in _list_item(data, 1)
        )
        logger.debug(f"Decoded {len(departures)} departures for stop {stop_info.stop_id}")
        return StopBoard(stop_info=stop_info, departures=departures)

    @staticmethod
    def decode_stop_info(stop_data: list[Any]) -> StopInfo:
        """Decode the stop descriptor array."""
        # Upstream has no separate long name field at a known position, so both come from [2]
        name = _item(stop_data, 2)
        return StopInfo(
            stop_id=_item(stop_data, 0),
            city=_item(stop_data, 1),
            name=name,
            full_name=name,
            coordinates=_item(stop_data, 3),
        )

    @staticmethod
    def decode_departure(dep: Any) -> Departure:
        """Decode a single departure descriptor array.

        Missing or malformed fields decode to None / empty defaults.
        """
        line_info = _list_item(dep, 2)
        time_info = _list_item(dep, 7)

        delay_raw = _item(time_info, 2)
        is_realtime = _is_number(delay_raw)
        delay_seconds = delay_raw if is_realtime else None

        return Departure(
            trip_id=_item(dep, 0),
            destination=_item(dep, 1),
            line=Line(
                number=_item(line_info, 2),
                color=_item(line_info, 5) or None,
            ),
            scheduled_time=ResponseDecoder.parse_instant(_item(time_info, 0)),
            actual_time=ResponseDecoder.parse_instant(_item(time_info, 1)),
            delay_seconds=delay_seconds,
            is_realtime=is_realtime,
            is_delayed=is_realtime and delay_seconds > DELAY_THRESHOLD_SECONDS,
            vehicle_id=_item(dep, 5) or None,
        )

    @staticmethod
    def parse_instant(value: Any) -> datetime | None:
        """Parse an upstream instant.

        Numbers are epoch milliseconds, strings are ISO 8601. Naive values are
        taken as UTC. Anything unparseable yields None.
        """
        if _is_number(value):
            try:
                return datetime.fromtimestamp(value / 1000, tz=UTC)
            except (OverflowError, OSError, ValueError):
                return None

        if isinstance(value, str) and value:
            try:
                parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
            except ValueError:
                return None
            if parsed.tzinfo is None:
                return parsed.replace(tzinfo=UTC)
            return parsed

        return None
