"""Builds zbiorkom.live request URLs."""

from urllib.parse import quote

from zbiorkom_departures.adapters.zbiorkom_api.constants import DEPARTURES_PATH
from zbiorkom_departures.domain.models.stop_configuration import StopConfiguration

# Characters JavaScript's encodeURIComponent leaves unescaped besides -_.~
_URI_COMPONENT_SAFE = "!*'()"


def encode_uri_component(value: str) -> str:
    """Percent-encode a query value the way encodeURIComponent does."""
    return quote(value, safe=_URI_COMPONENT_SAFE)


def build_departures_url(config: StopConfiguration) -> str:
    """Build the getDepartures URL for a stop configuration."""
    base_url = config.api_base_url.rstrip("/")
    stop_id = encode_uri_component(config.stop_id)
    return f"{base_url}/{config.city}/{DEPARTURES_PATH}?id={stop_id}&limit={config.request_limit}"
