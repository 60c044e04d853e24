"""Protocol for the HTTP fetch capability."""

from typing import Any, Protocol


class HttpResponseProtocol(Protocol):
    """Minimal view of an HTTP response."""

    @property
    def ok(self) -> bool:
        """Whether the status is in the 2xx range."""
        ...

    @property
    def status(self) -> int:
        """HTTP status code."""
        ...

    def json(self) -> Any:
        """Return the decoded JSON body."""
        ...


class HttpFetcherProtocol(Protocol):
    """Protocol for fetching a URL."""

    async def fetch(self, url: str) -> HttpResponseProtocol:
        """Fetch the given URL with a GET request.

        Args:
            url: Fully built request URL.

        Returns:
            The response, regardless of its status code.
        """
        ...
