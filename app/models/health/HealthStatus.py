import enum


class HealthStatus(str, enum.Enum):
    HEALTHY = "healthy"
    # declared for clients, never produced by the service today
    WARNING = "warning"
    ERROR = "error"


class FeatureStatus(str, enum.Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
