from app.models.BaseModel import CamelModel


class ApiInfo(CamelModel):
    message: str
    version: str
    framework: str
    endpoints: list[str]
    documentation: str
