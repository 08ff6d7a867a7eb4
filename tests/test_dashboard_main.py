"""Tests for the terminal dashboard entry point."""

import asyncio
from unittest.mock import AsyncMock, patch

import pytest

from app.api.health_utils.features import build_feature_list
from app.core.config import DashboardSettings
from app.dashboard import __main__ as dashboard_main
from app.dashboard.client import ReportingClientError
from app.dashboard.poller import DashboardPoller
from tests.factories import make_health, make_stats


class FakeReportingClient:
    """Stands in for ReportingClient and records how it was used."""

    def __init__(self, base_url, timeout):
        self.base_url = base_url
        self.timeout = timeout
        self.closed = False
        self.calls = []
        self.fetch_health = AsyncMock(side_effect=self._record("health", make_health()))
        self.fetch_stats = AsyncMock(side_effect=self._record("stats", make_stats()))
        self.fetch_features = AsyncMock(
            side_effect=self._record("features", build_feature_list())
        )

    def _record(self, name, result):
        async def fetch():
            self.calls.append(name)
            return result

        return fetch

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        self.closed = True


@pytest.fixture
def dashboard_settings():
    return DashboardSettings(api_url="http://api:8000", poll_interval=0.01, timeout=1.5)


@pytest.fixture
def patched_dashboard(dashboard_settings):
    clients = []
    pollers = []

    def make_client(base_url, timeout):
        clients.append(FakeReportingClient(base_url, timeout))
        return clients[-1]

    def make_poller(*args, **kwargs):
        pollers.append(DashboardPoller(*args, **kwargs))
        return pollers[-1]

    with (
        patch.object(dashboard_main, "load_dashboard_settings", return_value=dashboard_settings),
        patch.object(dashboard_main, "ReportingClient", side_effect=make_client),
        patch.object(dashboard_main, "DashboardPoller", side_effect=make_poller),
    ):
        yield clients, pollers


async def run_for(seconds: float) -> asyncio.Task:
    task = asyncio.create_task(dashboard_main.run_dashboard())
    await asyncio.sleep(seconds)
    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task
    return task


class TestRunDashboard:
    async def test_uses_configured_url_interval_and_timeout(self, patched_dashboard):
        clients, pollers = patched_dashboard
        await run_for(0.03)

        assert clients[0].base_url == "http://api:8000"
        assert clients[0].timeout == 1.5
        assert pollers[0].interval == 0.01

    async def test_features_loaded_before_first_render(self, patched_dashboard, capsys):
        clients, _ = patched_dashboard
        await run_for(0.03)

        assert clients[0].calls[0] == "features"
        assert clients[0].calls.count("features") == 1

        first_render = capsys.readouterr().out.split("AWS CI/CD Pipeline Demo")[1]
        assert "Blue-Green Deployment" in first_render

    async def test_prints_rendering_after_every_poll(self, patched_dashboard, capsys):
        clients, _ = patched_dashboard
        await run_for(0.06)

        out = capsys.readouterr().out
        polls = clients[0].calls.count("health")
        assert polls >= 2
        assert out.count("System Health") >= 2
        assert "1,234" in out

    async def test_feature_failure_is_best_effort(self, patched_dashboard, capsys):
        _, pollers = patched_dashboard

        original = FakeReportingClient.__init__

        def init_with_failing_features(self, base_url, timeout):
            original(self, base_url, timeout)
            self.fetch_features = AsyncMock(
                side_effect=ReportingClientError("/api/v1/features", "HTTP 500")
            )

        with patch.object(FakeReportingClient, "__init__", init_with_failing_features):
            await run_for(0.03)

        assert pollers[0].state.features == []
        assert "System Health" in capsys.readouterr().out

    async def test_cancel_stops_poller_and_closes_client(self, patched_dashboard):
        clients, pollers = patched_dashboard
        await run_for(0.03)

        assert not pollers[0].running
        assert clients[0].closed

        polls = clients[0].fetch_health.await_count
        await asyncio.sleep(0.05)
        assert clients[0].fetch_health.await_count == polls


class TestMain:
    def test_ctrl_c_exits_cleanly(self):
        def interrupted(coro):
            coro.close()
            raise KeyboardInterrupt

        with patch.object(dashboard_main.asyncio, "run", side_effect=interrupted) as mock_run:
            dashboard_main.main()

        mock_run.assert_called_once()
