from datetime import datetime

from app.models.BaseModel import CamelModel
from app.models.health.HealthStatus import FeatureStatus


class FeatureDescriptor(CamelModel):
    name: str
    description: str
    status: FeatureStatus
    last_updated: datetime
