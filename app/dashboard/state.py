import enum
from dataclasses import dataclass, field
from typing import Optional

from app.models.health import FeatureDescriptor, HealthReport, StatsReport

HEALTH_FETCH_ERROR = "Failed to fetch health status - API may be down"


class DashboardPhase(enum.Enum):
    LOADING = "LOADING"
    READY = "READY"
    READY_WITH_ERROR = "READY_WITH_ERROR"


@dataclass
class DashboardState:
    """Last known view of the reporting service. Written only by the poller."""

    health: Optional[HealthReport] = None
    stats: Optional[StatsReport] = None
    features: list[FeatureDescriptor] = field(default_factory=list)
    loading: bool = True
    error: Optional[str] = None

    @property
    def phase(self) -> DashboardPhase:
        if self.loading:
            return DashboardPhase.LOADING
        if self.error:
            return DashboardPhase.READY_WITH_ERROR
        return DashboardPhase.READY
