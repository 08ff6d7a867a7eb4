"""
Polling loop that keeps a DashboardState fresh.

Each cycle fetches health and stats concurrently. A failed health fetch shows
the connection error banner; a failed stats fetch is only logged. Previously
received data is never cleared, so stale values stay visible under the banner
until the next successful poll.
"""

import asyncio
import logging
from typing import Awaitable, Callable, Optional, Union

from app.dashboard.client import ReportingClient, ReportingClientError
from app.dashboard.state import HEALTH_FETCH_ERROR, DashboardState

logger = logging.getLogger(__name__)

DEFAULT_POLL_INTERVAL = 30.0  # seconds

UpdateCallback = Callable[[DashboardState], Union[None, Awaitable[None]]]


class DashboardPoller:
    def __init__(
        self,
        client: ReportingClient,
        interval: float = DEFAULT_POLL_INTERVAL,
        on_update: Optional[UpdateCallback] = None,
        state: Optional[DashboardState] = None,
    ):
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.client = client
        self.interval = interval
        self.on_update = on_update
        self.state = state or DashboardState()
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def __aenter__(self):
        self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.stop()

    def start(self):
        """Polls immediately, then every `interval` seconds until stopped."""
        if self.running:
            return
        self._task = asyncio.create_task(self._run(), name="dashboard-poller")

    async def stop(self):
        task, self._task = self._task, None
        if task is None:
            return
        if task.done():
            if not task.cancelled() and task.exception() is not None:
                logger.error(f"Poller stopped with an error: {task.exception()!r}")
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass

    async def _run(self):
        while True:
            try:
                await self.poll_once()
            except asyncio.CancelledError:
                raise
            except Exception:
                # keep polling after a failed cycle
                logger.exception("Poll cycle failed")
            await asyncio.sleep(self.interval)

    async def poll_once(self) -> DashboardState:
        # the two fetches are independent, neither waits on the other
        await asyncio.gather(self.refresh_health(), self.refresh_stats())
        await self._notify()
        return self.state

    async def refresh_health(self):
        try:
            self.state.health = await self.client.fetch_health()
            self.state.error = None
        except ReportingClientError as e:
            self.state.error = HEALTH_FETCH_ERROR
            logger.error(f"Health check failed: {e}")
        finally:
            self.state.loading = False

    async def refresh_stats(self):
        # stats failures never raise the banner, only health failures do
        try:
            self.state.stats = await self.client.fetch_stats()
        except ReportingClientError as e:
            logger.error(f"Stats fetch failed: {e}")

    async def load_features(self):
        """One-off fetch of the feature catalogue, kept empty on failure."""
        try:
            self.state.features = await self.client.fetch_features()
        except ReportingClientError as e:
            logger.warning(f"Features fetch failed: {e}")

    async def _notify(self):
        if self.on_update is None:
            return
        result = self.on_update(self.state)
        if asyncio.iscoroutine(result):
            await result
