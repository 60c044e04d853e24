"""zbiorkom.live API adapter."""

from zbiorkom_departures.adapters.zbiorkom_api.endpoint import ZbiorkomEndpoint
from zbiorkom_departures.adapters.zbiorkom_api.http_fetcher import AiohttpFetcher, HttpResponse
from zbiorkom_departures.adapters.zbiorkom_api.request_builder import (
    build_departures_url,
    encode_uri_component,
)
from zbiorkom_departures.adapters.zbiorkom_api.response_decoder import ResponseDecoder

__all__ = [
    "AiohttpFetcher",
    "HttpResponse",
    "ResponseDecoder",
    "ZbiorkomEndpoint",
    "build_departures_url",
    "encode_uri_component",
]
