import math
import os
import platform
import sys
import time
from datetime import datetime, timezone
from typing import Callable

from app.core.config import Settings
from app.api.health_utils import metrics
from app.api.health_utils.features import build_feature_list
from app.api.health_utils.request_counter import RequestCounter
from app.models.health import (
    CpuUsage,
    FeatureDescriptor,
    HealthReport,
    HealthStatus,
    MemoryUsage,
    StatsReport,
)


class HealthService:
    """
    Answers the health, stats and feature queries.

    Apart from the injected request counter nothing here is mutable: every
    report is computed from runtime introspection at call time.
    """

    def __init__(
        self,
        settings: Settings,
        counter: RequestCounter,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.settings = settings
        self.counter = counter
        self._clock = clock
        self.start_time = clock()

    def uptime_seconds(self) -> int:
        return max(0, math.floor(self._clock() - self.start_time))

    def increment_request_count(self) -> int:
        return self.counter.increment()

    def get_health(self) -> HealthReport:
        used_mb, total_mb = metrics.get_memory_usage_mb()
        cpu_user, cpu_system = metrics.get_cpu_times()

        # no dependency probing yet, so the service is healthy whenever it answers
        return HealthReport(
            status=HealthStatus.HEALTHY,
            timestamp=datetime.now(timezone.utc),
            version=self.settings.version,
            environment=self.settings.environment,
            uptime=self.uptime_seconds(),
            memory=MemoryUsage(used=used_mb, total=total_mb),
            cpu=CpuUsage(user=cpu_user, system=cpu_system),
        )

    def get_stats(self) -> StatsReport:
        used_mb = metrics.bytes_to_mb(metrics.get_process_memory_bytes())

        return StatsReport(
            total_requests=self.counter.value,
            uptime=metrics.format_uptime(self.uptime_seconds()),
            memory_usage=f"{metrics.format_mb(used_mb)} MB",
            environment=self.settings.environment,
            python_version=platform.python_version(),
            platform=sys.platform,
            pid=os.getpid(),
        )

    def get_features(self) -> list[FeatureDescriptor]:
        return build_feature_list()
