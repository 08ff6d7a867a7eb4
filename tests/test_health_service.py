"""Tests for HealthService report computation."""

import os
from datetime import datetime, timezone
from unittest.mock import patch

import pytest

from app.api.health_utils import metrics
from app.api.health_utils.features import DEVOPS_FEATURES
from app.api.health_utils.health_service import HealthService
from app.api.health_utils.metrics import parse_uptime
from app.api.health_utils.request_counter import RequestCounter
from app.models.health import FeatureStatus, HealthStatus


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def service(settings, clock):
    return HealthService(settings, RequestCounter(), clock=clock)


class TestGetHealth:
    def test_reports_configured_identity(self, service):
        report = service.get_health()
        assert report.status == HealthStatus.HEALTHY
        assert report.version == "2.3.4"
        assert report.environment == "test"

    def test_uptime_is_whole_seconds_since_start(self, service, clock):
        clock.now += 61.9
        assert service.get_health().uptime == 61

    def test_uptime_never_negative(self, service, clock):
        clock.now -= 5
        assert service.get_health().uptime == 0

    def test_memory_within_total(self, service):
        report = service.get_health()
        assert 0 <= report.memory.used <= report.memory.total

    def test_timestamp_is_fresh_utc(self, service):
        before = datetime.now(timezone.utc)
        report = service.get_health()
        assert report.timestamp.tzinfo is not None
        assert report.timestamp >= before

    def test_cpu_times_reported(self, service):
        with patch.object(metrics, "get_cpu_times", return_value=(1.5, 0.25)):
            report = service.get_health()
        assert report.cpu.user == 1.5
        assert report.cpu.system == 0.25


class TestGetStats:
    def test_reflects_counter(self, service):
        assert service.get_stats().total_requests == 0
        service.increment_request_count()
        service.increment_request_count()
        assert service.get_stats().total_requests == 2

    def test_uptime_string_round_trips(self, service, clock):
        clock.now += 3 * 3600 + 25 * 60 + 7
        stats = service.get_stats()
        assert stats.uptime == "3h 25m 7s"
        assert parse_uptime(stats.uptime) == service.uptime_seconds()

    def test_runtime_details(self, service):
        with patch.object(metrics, "get_process_memory_bytes", return_value=3 * 1024 * 1024):
            stats = service.get_stats()
        assert stats.memory_usage == "3 MB"
        assert stats.pid == os.getpid()
        assert stats.environment == "test"
        assert stats.python_version
        assert stats.platform

    def test_stats_do_not_count_themselves(self, service):
        service.get_stats()
        service.get_stats()
        assert service.counter.value == 0


class TestGetFeatures:
    def test_fixed_catalogue(self, service):
        features = service.get_features()
        assert [f.name for f in features] == [name for name, _ in DEVOPS_FEATURES]
        assert all(f.status == FeatureStatus.ACTIVE for f in features)

    def test_timestamps_refreshed_per_call(self, service):
        first = service.get_features()[0].last_updated
        second = service.get_features()[0].last_updated
        assert second >= first
