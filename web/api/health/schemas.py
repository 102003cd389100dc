"""Health API response schemas."""

from datetime import datetime

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Service health."""

    status: str
    timestamp: datetime
    database: str
    environment: str
