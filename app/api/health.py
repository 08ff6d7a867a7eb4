from fastapi import APIRouter, Depends, status

from app.api.deps import get_health_service
from app.api.health_utils.health_service import HealthService
from app.models.health import FeatureDescriptor, HealthReport, StatsReport

router = APIRouter()


@router.get(
    "/health",
    status_code=status.HTTP_200_OK,
    response_model=HealthReport,
    summary="Get application health status",
)
async def get_health(service: HealthService = Depends(get_health_service)):
    """
    Returns uptime, memory and CPU figures for the running process.
    """
    return service.get_health()


@router.get(
    "/stats",
    status_code=status.HTTP_200_OK,
    response_model=StatsReport,
    summary="Get application statistics",
)
async def get_stats(service: HealthService = Depends(get_health_service)):
    """
    Returns the request count and human readable runtime statistics.
    """
    return service.get_stats()


@router.get(
    "/features",
    status_code=status.HTTP_200_OK,
    response_model=list[FeatureDescriptor],
    summary="Get application features",
)
async def get_features(service: HealthService = Depends(get_health_service)):
    return service.get_features()
