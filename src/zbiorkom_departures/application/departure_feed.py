"""Departure feed: polls one stop and keeps the latest departure state."""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from zbiorkom_departures.domain.errors import DepartureFeedError, HttpStatusError
from zbiorkom_departures.domain.models.feed_state import FeedState

if TYPE_CHECKING:
    from zbiorkom_departures.domain.contracts.departure_endpoint import (
        DepartureEndpointProtocol,
    )
    from zbiorkom_departures.domain.contracts.http_fetcher import HttpFetcherProtocol
    from zbiorkom_departures.domain.contracts.poller import PollerProtocol
    from zbiorkom_departures.domain.contracts.state_listener import StateListenerProtocol
    from zbiorkom_departures.domain.models.stop_board import StopBoard
    from zbiorkom_departures.domain.models.stop_configuration import StopConfiguration

logger = logging.getLogger(__name__)


class DepartureFeed:
    """Fetches, decodes and publishes departures for a configured stop.

    State transitions per tick are ``loading=True`` followed by exactly one
    terminal update. A failed tick keeps the previous departures and only sets
    ``error``.

    Every ``configure``/``teardown`` call starts a new generation. A tick that
    completes under an older generation is discarded without touching state.
    Within one generation, a tick that completes after a newer tick has
    already committed departures changes nothing but the loading flag.
    """

    def __init__(
        self,
        fetcher: HttpFetcherProtocol,
        endpoint: DepartureEndpointProtocol,
        poller: PollerProtocol,
        listeners: list[StateListenerProtocol] | None = None,
    ) -> None:
        """Initialize the feed.

        Args:
            fetcher: HTTP fetch capability.
            endpoint: Upstream request shaping and response decoding.
            poller: Scheduler owned by this feed.
            listeners: Presentation listeners notified on every state change.
        """
        self._fetcher = fetcher
        self._endpoint = endpoint
        self._poller = poller
        self._listeners: list[StateListenerProtocol] = list(listeners or [])
        self._config: StopConfiguration | None = None
        self._state = FeedState(loading=False)
        self._generation = 0
        self._tick_sequence = 0
        self._committed_sequence = 0

    @property
    def state(self) -> FeedState:
        """Current read-only state snapshot."""
        return self._state

    @property
    def config(self) -> StopConfiguration | None:
        """Active stop configuration, or None when not configured."""
        return self._config

    @property
    def generation(self) -> int:
        """Current session generation."""
        return self._generation

    def add_listener(self, listener: StateListenerProtocol) -> None:
        """Register a presentation listener."""
        self._listeners.append(listener)

    def remove_listener(self, listener: StateListenerProtocol) -> None:
        """Unregister a presentation listener. No-op if not registered."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def configure(self, config: StopConfiguration) -> None:
        """Validate the configuration and (re)start polling.

        Args:
            config: The stop to poll.

        Raises:
            ConfigurationError: If the configuration is invalid. Polling is not
                started and the previous session, if any, keeps running.
            RuntimeError: If the poller cannot start, for example outside a
                running event loop. The feed state is left unchanged.
        """
        config.validate()

        # Ticks only run once the loop regains control, after state is committed
        self._poller.start(config.poll_interval_seconds, self.refresh)

        self._generation += 1
        self._tick_sequence = 0
        self._committed_sequence = 0
        self._config = config
        self._state = FeedState(loading=True)
        logger.info(
            f"Configured departure feed for stop '{config.stop_id}' in {config.city} "
            f"(interval: {config.poll_interval_seconds}s, generation: {self._generation})"
        )

    def teardown(self) -> None:
        """Stop polling. Ticks still in flight will not change state."""
        self._poller.stop()
        self._generation += 1
        if self._config is not None:
            logger.info(f"Tore down departure feed for stop '{self._config.stop_id}'")
        self._config = None

    async def refresh(self) -> None:
        """Run one fetch-decode-update cycle."""
        config = self._config
        if config is None:
            logger.warning("Refresh requested on an unconfigured departure feed")
            return

        generation = self._generation
        self._tick_sequence += 1
        sequence = self._tick_sequence

        self._set_state(replace(self._state, loading=True))

        board: StopBoard | None = None
        error: str | None = None
        try:
            board = await self._fetch_board(config)
        except DepartureFeedError as e:
            error = str(e)
            logger.error(f"Failed to refresh departures for stop '{config.stop_id}': {error}")
        except Exception as e:
            error = str(e) or type(e).__name__
            logger.error(
                f"Unexpected error refreshing departures for stop '{config.stop_id}': {error}",
                exc_info=True,
            )

        if generation != self._generation:
            logger.debug(
                f"Discarding tick {sequence} of generation {generation} "
                f"(current generation: {self._generation})"
            )
            return

        self._set_state(self._complete_tick(sequence, board, error))

    async def _fetch_board(self, config: StopConfiguration) -> StopBoard:
        url = self._endpoint.departures_url(config)
        response = await self._fetcher.fetch(url)
        if not response.ok:
            raise HttpStatusError(response.status)
        return self._endpoint.decode_response(response.json())

    def _complete_tick(
        self, sequence: int, board: StopBoard | None, error: str | None
    ) -> FeedState:
        """Build the terminal state of a tick."""
        if sequence < self._committed_sequence:
            logger.warning(
                f"Tick {sequence} finished after tick {self._committed_sequence}, "
                "keeping newer departures"
            )
            return replace(self._state, loading=False)

        if board is None:
            return replace(self._state, loading=False, error=error)

        self._committed_sequence = sequence
        logger.debug(f"Refreshed {len(board.departures)} departures (tick {sequence})")
        return FeedState(
            loading=False,
            error=None,
            stop_info=board.stop_info,
            departures=board.departures,
            last_update=datetime.now(UTC),
        )

    def _set_state(self, state: FeedState) -> None:
        self._state = state
        for listener in list(self._listeners):
            try:
                listener.state_changed(state)
            except Exception as e:
                logger.error(f"State listener failed: {e}", exc_info=True)
