from datetime import datetime

from pydantic import Field, model_validator

from app.models.BaseModel import CamelModel
from app.models.health.HealthStatus import HealthStatus


class MemoryUsage(CamelModel):
    """Process memory in megabytes."""
    used: float = Field(ge=0, description="Resident memory of the process (MB)")
    total: float = Field(ge=0, description="Memory available to the process (MB)")

    @model_validator(mode="after")
    def used_within_total(self):
        if self.used > self.total:
            raise ValueError("memory.used cannot exceed memory.total")
        return self


class CpuUsage(CamelModel):
    """Cumulative CPU seconds spent by the process."""
    user: float = Field(ge=0)
    system: float = Field(ge=0)


class HealthReport(CamelModel):
    status: HealthStatus
    timestamp: datetime
    version: str
    environment: str
    uptime: int = Field(ge=0, description="Seconds since the service started")
    memory: MemoryUsage
    cpu: CpuUsage
