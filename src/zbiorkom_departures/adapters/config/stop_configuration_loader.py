"""Stop configuration loader."""

from zbiorkom_departures.adapters.config.app_config import AppConfig
from zbiorkom_departures.domain.models.stop_configuration import StopConfiguration


class StopConfigurationLoader:
    """Loads the stop configuration from app config."""

    @staticmethod
    def load(config: AppConfig) -> StopConfiguration:
        """Load the stop configuration from app config.

        Reads the TOML file first when config_file is set. The result is not
        validated here; DepartureFeed.configure() rejects invalid stops.
        """
        if config.config_file:
            config.load_toml()

        return StopConfiguration(
            stop_id=config.stop_id.strip(),
            api_base_url=config.api_url,
            city=config.city,
            max_departures=config.max_departures,
            poll_interval_seconds=config.update_interval,
        )
