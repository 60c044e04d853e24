"""Periodic tick scheduler."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from zbiorkom_departures.domain.contracts.poller import PollerProtocol

if TYPE_CHECKING:
    from zbiorkom_departures.domain.contracts.poller import TickCallback

logger = logging.getLogger(__name__)


class Poller(PollerProtocol):
    """Runs a tick callback immediately and then on a fixed interval.

    Every tick runs as its own task, so a slow tick never delays the next one
    and ticks may overlap. Stopping cancels the schedule only; ticks already
    in flight run to completion.
    """

    def __init__(self) -> None:
        """Initialize an idle poller."""
        self._task: asyncio.Task[None] | None = None
        self._interval_seconds: float | None = None
        self._ticks: set[asyncio.Task[None]] = set()

    @property
    def running(self) -> bool:
        """Whether a schedule is active."""
        return self._task is not None and not self._task.done()

    @property
    def interval_seconds(self) -> float | None:
        """Interval of the active schedule, or None when stopped."""
        return self._interval_seconds if self.running else None

    @property
    def in_flight(self) -> int:
        """Number of ticks currently running."""
        return len(self._ticks)

    def start(self, interval_seconds: float, on_tick: TickCallback) -> None:
        """Start (or restart) the schedule.

        Must be called from within a running event loop. On failure the active
        schedule, if any, is left running.

        Args:
            interval_seconds: Seconds between tick starts.
            on_tick: Coroutine function run on every tick.
        """
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be positive")

        loop = asyncio.get_running_loop()

        if self.running:
            logger.info("Poller already running, restarting with new schedule")
            self.stop()

        self._interval_seconds = interval_seconds
        self._task = loop.create_task(
            self._poll_loop(interval_seconds, on_tick)
        )
        logger.info(f"Started poller (interval: {interval_seconds}s)")

    def stop(self) -> None:
        """Cancel the schedule. Safe to call when not running."""
        if self._task is None:
            return
        if not self._task.done():
            self._task.cancel()
            logger.info("Stopped poller")
        self._task = None
        self._interval_seconds = None

    async def wait_for_ticks(self) -> None:
        """Wait until the ticks currently in flight have finished."""
        if self._ticks:
            await asyncio.gather(*list(self._ticks), return_exceptions=True)

    async def _poll_loop(self, interval_seconds: float, on_tick: TickCallback) -> None:
        """Spawn a tick now and then every interval_seconds."""
        try:
            while True:
                self._spawn_tick(on_tick)
                await asyncio.sleep(interval_seconds)
        except asyncio.CancelledError:
            logger.debug("Poller loop cancelled")
            raise

    def _spawn_tick(self, on_tick: TickCallback) -> None:
        task = asyncio.get_running_loop().create_task(self._run_tick(on_tick))
        self._ticks.add(task)
        task.add_done_callback(self._ticks.discard)

    @staticmethod
    async def _run_tick(on_tick: TickCallback) -> None:
        try:
            await on_tick()
        except asyncio.CancelledError:
            raise
        except Exception as e:
            # A failing tick must not affect the schedule
            logger.error(f"Poller tick failed: {e}", exc_info=True)
