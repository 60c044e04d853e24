"""Display options for the departure board."""

from dataclasses import dataclass
from datetime import tzinfo
from zoneinfo import ZoneInfo

from zbiorkom_departures.adapters.config.app_config import AppConfig


@dataclass(frozen=True)
class DisplayOptions:
    """Options controlling how feed state is rendered."""

    title: str = "Departures"
    max_departures: int = 5
    show_stop_name: bool = True
    show_line_colors: bool = True
    show_realtime_indicator: bool = True
    timezone: tzinfo | None = None  # None renders clock times in system local time

    @classmethod
    def from_config(cls, config: AppConfig) -> "DisplayOptions":
        """Build display options from app config."""
        return cls(
            title=config.title,
            max_departures=config.max_departures,
            show_stop_name=config.show_stop_name,
            show_line_colors=config.show_line_colors,
            show_realtime_indicator=config.show_realtime_indicator,
            timezone=ZoneInfo(config.timezone),
        )
