from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse

from app.api.deps import get_app_settings
from app.core.config import Settings
from app.models.health import ApiInfo

router = APIRouter()

DOCS_PATH = "/api/docs"

ENDPOINTS = [
    "GET /api/v1 - API information",
    "GET /api/v1/health - Health check",
    "GET /api/v1/stats - API statistics",
    "GET /api/v1/features - Application features",
    "GET /health - Simple health check",
]


@router.get(
    "/api/v1",
    status_code=status.HTTP_200_OK,
    response_model=ApiInfo,
    tags=["App"],
    summary="Get API information",
)
async def api_info(settings: Settings = Depends(get_app_settings)):
    return ApiInfo(
        message="AWS CI/CD Pipeline API",
        version=settings.version,
        framework="FastAPI",
        endpoints=ENDPOINTS,
        documentation=DOCS_PATH,
    )


@router.get(
    "/health",
    response_class=PlainTextResponse,
    tags=["Health"],
    summary="Simple health check for load balancer",
)
async def simple_health():
    # plain "OK" so load balancers don't need to parse JSON
    return "OK"
