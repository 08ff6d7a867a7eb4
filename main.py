from dotenv import load_dotenv

load_dotenv()

import logging
import sys

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api import health
from app.api import system
from app.api.health_utils.health_service import HealthService
from app.api.health_utils.request_counter import RequestCounter
from app.api.health_utils.request_tracking import track_requests
from app.core.config import Settings, get_settings

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    docs_url = None if settings.is_production else system.DOCS_PATH
    app = FastAPI(
        title="AWS CI/CD Pipeline API",
        description="""
        Full-Stack Application with Enterprise DevOps Practices.
        Reports process health, runtime statistics and the deployed feature set.
        """,
        version=settings.version,
        docs_url=docs_url,
        redoc_url=None,
        openapi_url=None if settings.is_production else "/api/docs/openapi.json",
        openapi_tags=[
            {"name": "Health", "description": "Health check endpoints"},
            {"name": "App", "description": "Application endpoints"},
        ],
    )

    app.state.settings = settings
    app.state.health_service = HealthService(settings, RequestCounter())

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if settings.count_requests:

        @app.middleware("http")
        async def middleware(request, call_next):
            return await track_requests(request, call_next)

    @app.on_event("startup")
    async def on_startup():
        base = f"http://localhost:{settings.port}"
        logger.info(f"Server running on port {settings.port}")
        logger.info(f"Environment: {settings.environment}")
        logger.info(f"Health check: {base}/api/v1/health")
        logger.info(f"Stats: {base}/api/v1/stats")
        if docs_url:
            logger.info(f"API Documentation: {base}{docs_url}")

    @app.on_event("shutdown")
    async def on_shutdown():
        logger.info("Shutdown signal received, shutting down gracefully...")

    app.include_router(system.router)
    app.include_router(health.router, prefix="/api/v1", tags=["Health"])

    return app


app = create_app()


def run():
    settings = get_settings()
    logging.getLogger().setLevel(settings.log_level)
    # uvicorn drains in-flight requests on SIGTERM/SIGINT before returning
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
    sys.exit(0)


if __name__ == "__main__":
    run()
