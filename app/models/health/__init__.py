from app.models.health.HealthStatus import HealthStatus, FeatureStatus
from app.models.health.HealthReport import HealthReport, MemoryUsage, CpuUsage
from app.models.health.StatsReport import StatsReport
from app.models.health.FeatureDescriptor import FeatureDescriptor
from app.models.health.ApiInfo import ApiInfo

__all__ = [
    "HealthStatus",
    "FeatureStatus",
    "HealthReport",
    "MemoryUsage",
    "CpuUsage",
    "StatsReport",
    "FeatureDescriptor",
    "ApiInfo",
]
