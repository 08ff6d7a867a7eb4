import asyncio
import logging
from typing import Optional

import aiohttp
from pydantic import TypeAdapter, ValidationError

from app.models.health import ApiInfo, FeatureDescriptor, HealthReport, StatsReport

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 5  # seconds, so a hung request cannot stall the next poll

_features_adapter = TypeAdapter(list[FeatureDescriptor])


class ReportingClientError(Exception):
    """Raised when the reporting service cannot be reached or answers badly."""

    def __init__(self, path: str, message: str):
        super().__init__(f"{path}: {message}")
        self.path = path


class ReportingClient:
    """
    Thin aiohttp wrapper around the reporting service endpoints.

    Use as an async context manager so the underlying session is closed:

        async with ReportingClient("http://localhost:8000") as client:
            report = await client.fetch_health()
    """

    def __init__(self, base_url: str, timeout: float = DEFAULT_TIMEOUT):
        self.base_url = base_url.rstrip("/")
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self):
        await self.open()
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()

    async def open(self):
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)

    async def close(self):
        if self._session is not None and not self._session.closed:
            await self._session.close()
        self._session = None

    async def _get_json(self, path: str):
        if self._session is None:
            raise ReportingClientError(path, "client session is not open")

        url = f"{self.base_url}{path}"
        logger.debug(f"GET {url}")
        try:
            async with self._session.get(url) as response:
                if response.status != 200:
                    raise ReportingClientError(path, f"HTTP {response.status}")
                return await response.json()
        except aiohttp.ClientConnectorError:
            raise ReportingClientError(path, "service not reachable")
        except asyncio.TimeoutError:
            raise ReportingClientError(path, f"timed out after {self.timeout.total}s")
        except aiohttp.ClientError as e:
            raise ReportingClientError(path, f"{type(e).__name__}: {e}")
        except ValueError:
            raise ReportingClientError(path, "response is not valid JSON")

    async def fetch_api_info(self) -> ApiInfo:
        data = await self._get_json("/api/v1")
        return _validate(ApiInfo.model_validate, data, "/api/v1")

    async def fetch_health(self) -> HealthReport:
        data = await self._get_json("/api/v1/health")
        return _validate(HealthReport.model_validate, data, "/api/v1/health")

    async def fetch_stats(self) -> StatsReport:
        data = await self._get_json("/api/v1/stats")
        return _validate(StatsReport.model_validate, data, "/api/v1/stats")

    async def fetch_features(self) -> list[FeatureDescriptor]:
        data = await self._get_json("/api/v1/features")
        return _validate(_features_adapter.validate_python, data, "/api/v1/features")


def _validate(parse, data, path: str):
    try:
        return parse(data)
    except ValidationError as e:
        raise ReportingClientError(path, f"unexpected response body ({e.error_count()} errors)")
