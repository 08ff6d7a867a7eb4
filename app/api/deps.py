from fastapi import Request

from app.api.health_utils.health_service import HealthService
from app.core.config import Settings


def get_health_service(request: Request) -> HealthService:
    # created once in main.create_app and shared by every request
    return request.app.state.health_service


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings
