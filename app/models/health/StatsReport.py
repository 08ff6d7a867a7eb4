from pydantic import Field

from app.models.BaseModel import CamelModel


class StatsReport(CamelModel):
    total_requests: int = Field(ge=0, description="Requests served since process start")
    uptime: str = Field(description="Uptime formatted as '1h 2m 3s'")
    memory_usage: str = Field(description="Resident memory, e.g. '42.5 MB'")
    environment: str
    python_version: str
    platform: str
    pid: int
