"""Command line interface for the zbiorkom departures board."""

import argparse
import asyncio
import logging
import sys
from typing import Any

from pydantic import ValidationError

from zbiorkom_departures.adapters.config import AppConfig
from zbiorkom_departures.domain.errors import ConfigurationError
from zbiorkom_departures.main import configure_logging, run

logger = logging.getLogger(__name__)

# argparse dest -> AppConfig field
_OVERRIDES = {
    "stop_id": "stop_id",
    "city": "city",
    "api_url": "api_url",
    "max_departures": "max_departures",
    "interval": "update_interval",
    "timeout": "api_timeout_seconds",
    "title": "title",
    "timezone": "timezone",
    "config": "config_file",
}


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        description="Live departure board for a zbiorkom.live stop",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Show departures for a stop in Kielce
  zbiorkom-departures --stop-id dworzec-kolejowy102

  # Another city, refreshed every 30 seconds
  zbiorkom-departures --city warszawa --stop-id 7013-01 --interval 30

  # Read settings from a TOML file
  zbiorkom-departures --config board.toml
        """,
    )
    parser.add_argument("--stop-id", help="Stop id as shown on zbiorkom.live")
    parser.add_argument("--city", help="City segment of the API path (default: kielce)")
    parser.add_argument("--api-url", help="Base URL of the zbiorkom.live API")
    parser.add_argument("--max-departures", type=int, help="Number of departures to display")
    parser.add_argument("--interval", type=int, help="Seconds between refreshes")
    parser.add_argument("--timeout", type=float, help="Request timeout in seconds")
    parser.add_argument("--title", help="Board title")
    parser.add_argument("--timezone", help="IANA timezone for clock times")
    parser.add_argument("--config", help="Path to TOML configuration file")
    parser.add_argument("--hide-stop-name", action="store_true", help="Do not show the stop name")
    parser.add_argument("--no-colors", action="store_true", help="Do not show line colors")
    parser.add_argument(
        "--no-realtime", action="store_true", help="Do not show the realtime indicator"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def config_from_args(args: argparse.Namespace) -> AppConfig:
    """Build AppConfig from environment and command line overrides.

    Raises:
        ValidationError: If an override is invalid.
    """
    overrides: dict[str, Any] = {
        field: getattr(args, dest)
        for dest, field in _OVERRIDES.items()
        if getattr(args, dest) is not None
    }
    if args.hide_stop_name:
        overrides["show_stop_name"] = False
    if args.no_colors:
        overrides["show_line_colors"] = False
    if args.no_realtime:
        overrides["show_realtime_indicator"] = False

    config = AppConfig(**overrides)
    if config.config_file:
        # TOML is loaded by StopConfigurationLoader, which would override the
        # command line; apply it here first and reapply the overrides on top
        config.load_toml()
        for field, value in overrides.items():
            setattr(config, field, value)
        config.config_file = None
    return config


async def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        config = config_from_args(args)
    except (ValidationError, ValueError, FileNotFoundError) as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    try:
        await run(config)
    except ConfigurationError as e:
        print(f"Invalid stop configuration: {e}", file=sys.stderr)
        print("Pass --stop-id or set STOP_ID.", file=sys.stderr)
        return 1
    return 0


def cli_main() -> None:
    """CLI entry point for setuptools."""
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        logger.info("Shutting down...")


if __name__ == "__main__":
    cli_main()
