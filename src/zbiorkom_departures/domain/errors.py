"""Errors raised while configuring or refreshing a departure feed."""


class DepartureFeedError(Exception):
    """Base class for departure feed errors."""


class ConfigurationError(DepartureFeedError):
    """Stop configuration is missing or invalid."""


class NetworkError(DepartureFeedError):
    """Request could not be completed (connection failure, timeout)."""


class HttpStatusError(DepartureFeedError):
    """Upstream answered with a non-success HTTP status."""

    def __init__(self, status: int) -> None:
        super().__init__(f"HTTP {status}")
        self.status = status


class DecodeError(DepartureFeedError):
    """Upstream payload does not have the expected shape."""
