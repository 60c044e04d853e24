"""Stop configuration domain model."""

from dataclasses import dataclass

from zbiorkom_departures.domain.errors import ConfigurationError

DEFAULT_API_URL = "https://api.zbiorkom.live/4.8"
DEFAULT_CITY = "kielce"
DEFAULT_MAX_DEPARTURES = 5
DEFAULT_POLL_INTERVAL_SECONDS = 60

# Extra departures requested upstream on top of the displayed count
REQUEST_LIMIT_MARGIN = 5


@dataclass(frozen=True)
class StopConfiguration:
    """Configuration for the stop to monitor."""

    stop_id: str
    api_base_url: str = DEFAULT_API_URL
    city: str = DEFAULT_CITY
    max_departures: int = DEFAULT_MAX_DEPARTURES  # Rows shown on the board, not rows fetched
    poll_interval_seconds: int = DEFAULT_POLL_INTERVAL_SECONDS

    @property
    def request_limit(self) -> int:
        """Number of departures requested upstream (small over-fetch margin)."""
        return self.max_departures + REQUEST_LIMIT_MARGIN

    def validate(self) -> None:
        """Validate the configuration.

        Raises:
            ConfigurationError: If any field is missing or out of range.
        """
        if not isinstance(self.stop_id, str) or not self.stop_id.strip():
            raise ConfigurationError("stop_id is required")
        if not self.api_base_url:
            raise ConfigurationError("api_base_url is required")
        if not self.city:
            raise ConfigurationError("city is required")
        if isinstance(self.max_departures, bool) or not isinstance(self.max_departures, int):
            raise ConfigurationError("max_departures must be an integer")
        if self.max_departures < 1:
            raise ConfigurationError("max_departures must be at least 1")
        if isinstance(self.poll_interval_seconds, bool) or not isinstance(
            self.poll_interval_seconds, int | float
        ):
            raise ConfigurationError("poll_interval_seconds must be a number")
        if self.poll_interval_seconds < 1:
            raise ConfigurationError("poll_interval_seconds must be at least 1")
