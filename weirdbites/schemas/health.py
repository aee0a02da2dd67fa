from pydantic import BaseModel
from typing import Literal


class HealthCheckResponse(BaseModel):
    status: Literal["ok", "error"]
    message: str
    timestamp: str
    database: Literal["connected", "disconnected"]
    environment: str
