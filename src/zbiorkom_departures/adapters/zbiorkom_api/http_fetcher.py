"""aiohttp implementation of the HTTP fetch capability."""

import json
import logging
from dataclasses import dataclass
from typing import Any

import aiohttp

from zbiorkom_departures.adapters.api_request_logger import log_api_request
from zbiorkom_departures.adapters.zbiorkom_api.constants import DEFAULT_TIMEOUT_SECONDS
from zbiorkom_departures.domain.contracts.http_fetcher import HttpFetcherProtocol
from zbiorkom_departures.domain.errors import DecodeError, NetworkError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HttpResponse:
    """Fully read HTTP response."""

    status: int
    body: str

    @property
    def ok(self) -> bool:
        """Whether the status is in the 2xx range."""
        return 200 <= self.status < 300

    def json(self) -> Any:
        """Return the decoded JSON body.

        Raises:
            DecodeError: If the body is not valid JSON.
        """
        try:
            return json.loads(self.body)
        except ValueError as e:
            raise DecodeError(f"Invalid JSON in response: {e}") from e


class AiohttpFetcher(HttpFetcherProtocol):
    """Fetches URLs with a shared aiohttp session."""

    def __init__(
        self,
        session: aiohttp.ClientSession,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        """Initialize the fetcher.

        Args:
            session: aiohttp session owned by the caller.
            timeout_seconds: Total timeout for one request.
        """
        self._session = session
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    async def fetch(self, url: str) -> HttpResponse:
        """Fetch a URL and read its body.

        Raises:
            NetworkError: On connection failure or timeout.
            DecodeError: If the body cannot be decoded as text.
        """
        log_api_request("GET", url, headers={"accept": "application/json"})

        try:
            async with self._session.get(
                url, headers={"accept": "application/json"}, timeout=self._timeout
            ) as response:
                try:
                    body = await response.text()
                except UnicodeDecodeError as e:
                    raise DecodeError(f"Response body is not valid text: {e}") from e
                if response.status >= 400:
                    logger.warning(
                        f"zbiorkom API returned status {response.status} for {url}: {body[:200]}"
                    )
                return HttpResponse(status=response.status, body=body)
        except TimeoutError as e:
            raise NetworkError(f"Request timed out after {self._timeout.total}s") from e
        except aiohttp.ClientError as e:
            raise NetworkError(str(e) or type(e).__name__) from e
