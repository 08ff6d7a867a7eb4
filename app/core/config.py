import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()

TRUTHY = {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}")


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in TRUTHY


@dataclass(frozen=True)
class Settings:
    port: int = 8000
    host: str = "0.0.0.0"
    environment: str = "development"
    frontend_url: str = "http://localhost:3000"
    version: str = "1.0.0"
    count_requests: bool = True
    log_level: str = "INFO"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


@dataclass(frozen=True)
class DashboardSettings:
    api_url: str = "http://localhost:8000"
    poll_interval: float = 30.0
    timeout: float = 5.0


def load_settings() -> Settings:
    """Reads the reporting service settings from the environment."""
    return Settings(
        port=_env_int("PORT", 8000),
        host=os.getenv("HOST", "0.0.0.0"),
        environment=os.getenv("ENVIRONMENT", "development"),
        frontend_url=os.getenv("FRONTEND_URL", "http://localhost:3000"),
        version=os.getenv("APP_VERSION", "1.0.0"),
        count_requests=_env_bool("COUNT_REQUESTS", True),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )


def load_dashboard_settings() -> DashboardSettings:
    return DashboardSettings(
        api_url=os.getenv("DASHBOARD_API_URL", "http://localhost:8000").rstrip("/"),
        poll_interval=_env_float("DASHBOARD_POLL_INTERVAL", 30.0),
        timeout=_env_float("DASHBOARD_TIMEOUT", 5.0),
    )


@lru_cache
def get_settings() -> Settings:
    return load_settings()
