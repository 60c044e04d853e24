"""12-factor configuration adapter using environment variables and TOML config."""

import tomllib
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from zbiorkom_departures.adapters.zbiorkom_api.constants import DEFAULT_TIMEOUT_SECONDS
from zbiorkom_departures.domain.models.stop_configuration import (
    DEFAULT_API_URL,
    DEFAULT_CITY,
    DEFAULT_MAX_DEPARTURES,
    DEFAULT_POLL_INTERVAL_SECONDS,
)

# TOML keys accepted per section
_STOP_KEYS = ("api_url", "stop_id", "city", "max_departures", "update_interval")
_DISPLAY_KEYS = (
    "title",
    "timezone",
    "show_stop_name",
    "show_line_colors",
    "show_realtime_indicator",
)
_API_KEYS = ("api_timeout_seconds",)


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_assignment=True,
    )

    # Stop configuration
    api_url: str = Field(default=DEFAULT_API_URL, description="Base URL of the zbiorkom.live API")
    stop_id: str = Field(default="", description="Stop id as shown on zbiorkom.live")
    city: str = Field(default=DEFAULT_CITY, description="City segment of the API path")
    max_departures: int = Field(
        default=DEFAULT_MAX_DEPARTURES, description="Number of departures to display"
    )
    update_interval: int = Field(
        default=DEFAULT_POLL_INTERVAL_SECONDS,
        description="Interval between departure updates in seconds",
    )

    # API configuration
    api_timeout_seconds: float = Field(
        default=DEFAULT_TIMEOUT_SECONDS, description="Timeout for API requests in seconds"
    )

    # Display configuration
    title: str = Field(default="Departures", description="Board title")
    timezone: str = Field(
        default="Europe/Warsaw",
        description="Timezone for displaying clock times (IANA timezone name)",
    )
    show_stop_name: bool = Field(default=True, description="Show the stop name under the title")
    show_line_colors: bool = Field(default=True, description="Use upstream line colors")
    show_realtime_indicator: bool = Field(
        default=True, description="Show live/delayed/scheduled status per departure"
    )

    # Optional TOML file overriding the values above
    config_file: str | None = Field(
        default=None,
        description="Path to TOML configuration file with [stop], [display] and [api] tables",
    )

    @field_validator("max_departures")
    @classmethod
    def validate_max_departures(cls, v: int) -> int:
        """Validate at least one departure is displayed."""
        if v < 1:
            raise ValueError("max_departures must be at least 1")
        return v

    @field_validator("update_interval")
    @classmethod
    def validate_update_interval(cls, v: int) -> int:
        """Validate the update interval is at least one second."""
        if v < 1:
            raise ValueError("update_interval must be at least 1 second")
        return v

    @field_validator("api_timeout_seconds")
    @classmethod
    def validate_api_timeout(cls, v: float) -> float:
        """Validate the request timeout is positive."""
        if v <= 0:
            raise ValueError("api_timeout_seconds must be positive")
        return v

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Validate timezone is a known IANA name."""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone: {v}") from e
        return v

    def load_toml(self) -> dict[str, Any]:
        """Load the TOML file and apply its [stop], [display] and [api] tables.

        Returns:
            The parsed TOML data.

        Raises:
            ValueError: If config_file is not set or a value is invalid.
            FileNotFoundError: If config_file does not exist.
        """
        if not self.config_file:
            raise ValueError("config_file must be set to load TOML configuration")

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

        for section, keys in (("stop", _STOP_KEYS), ("display", _DISPLAY_KEYS), ("api", _API_KEYS)):
            table = toml_data.get(section, {})
            if not isinstance(table, dict):
                raise ValueError(f"TOML config '{section}' must be a table")
            for key in keys:
                if key in table:
                    setattr(self, key, table[key])

        return toml_data
