from app.api.health_utils.health_service import HealthService
from app.api.health_utils.request_counter import RequestCounter
from app.api.health_utils.metrics import format_uptime, parse_uptime

__all__ = [
    "HealthService",
    "RequestCounter",
    "format_uptime",
    "parse_uptime",
]
