"""Health and TIF schemas."""

from datetime import datetime

from pydantic import BaseModel

from tea_api.models.enums import HealthStatus
from tea_api.schemas.common import CamelModel


class HealthCheck(CamelModel):
    """A single readiness check result."""

    name: str
    status: HealthStatus
    latency_ms: int | None = None
    message: str | None = None


class HealthResponse(CamelModel):
    """Health check response."""

    status: HealthStatus
    timestamp: datetime
    version: str | None = None
    checks: list[HealthCheck] | None = None


class LivenessResponse(BaseModel):
    """Liveness probe response."""

    status: HealthStatus = HealthStatus.OK


class ImATeapotResponse(BaseModel):
    """The fixed 418 payload."""

    error: str
    message: str
    spec: str
