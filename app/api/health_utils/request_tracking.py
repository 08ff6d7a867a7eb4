import logging

from fastapi import Request

logger = logging.getLogger(__name__)


async def track_requests(request: Request, call_next):
    """
    Counts every inbound request once its response has been produced, so a
    stats call reports the requests completed before it.
    """
    response = await call_next(request)

    service = request.app.state.health_service
    total = service.increment_request_count()
    logger.debug(f"{request.method} {request.url.path} -> {response.status_code} (#{total})")

    return response
