"""Main entry point for the zbiorkom departures board."""

import asyncio
import logging
import sys

import aiohttp
from pydantic import ValidationError

from zbiorkom_departures.adapters.config import AppConfig, StopConfigurationLoader
from zbiorkom_departures.adapters.pollers import Poller
from zbiorkom_departures.adapters.presentation import (
    BoardBuilder,
    ConsoleBoardRenderer,
    DisplayOptions,
)
from zbiorkom_departures.adapters.zbiorkom_api import AiohttpFetcher, ZbiorkomEndpoint
from zbiorkom_departures.application import DepartureFeed
from zbiorkom_departures.domain.errors import ConfigurationError

logger = logging.getLogger(__name__)


def configure_logging(level: int = logging.INFO) -> None:
    """Configure root logging to stderr."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


async def run(config: AppConfig, stop_event: asyncio.Event | None = None) -> None:
    """Run the departure board until stop_event is set or the task is cancelled.

    Raises:
        ConfigurationError: If the stop configuration is invalid.
    """
    stop_config = StopConfigurationLoader.load(config)
    options = DisplayOptions.from_config(config)
    stop_event = stop_event or asyncio.Event()

    async with aiohttp.ClientSession() as session:
        feed = DepartureFeed(
            fetcher=AiohttpFetcher(session, timeout_seconds=config.api_timeout_seconds),
            endpoint=ZbiorkomEndpoint(),
            poller=Poller(),
            listeners=[ConsoleBoardRenderer(BoardBuilder(options))],
        )
        feed.configure(stop_config)
        try:
            await stop_event.wait()
        finally:
            feed.teardown()


async def main() -> None:
    """Main application entry point."""
    configure_logging()

    try:
        config = AppConfig()
        await run(config)
    except (ValidationError, ValueError, FileNotFoundError) as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)
    except ConfigurationError as e:
        logger.error(f"Invalid stop configuration: {e}")
        logger.error("Set STOP_ID (and optionally CITY) or provide a TOML config file.")
        sys.exit(1)


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Shutting down...")
