"""Health probes and the TIF signature endpoint."""

import logging
import time
from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from tea_api.api.dependencies import Store, get_app_settings
from tea_api.config import Settings
from tea_api.models import HealthStatus
from tea_api.models.mixins import utcnow
from tea_api.schemas import HealthCheck, HealthResponse, ImATeapotResponse, LivenessResponse
from tea_api.store import MemoryStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])

I_AM_A_TEAPOT = ImATeapotResponse(
    error="I'm a teapot",
    message="This server is TIF-compliant and cannot brew coffee",
    spec="https://teapotframework.dev",
)


def check_store(store: MemoryStore) -> HealthCheck:
    """Take a read on the store and time it."""
    started = time.perf_counter()
    try:
        store.counts()
    except Exception as e:
        logger.error(f"Store readiness check failed: {e}")
        return HealthCheck(name="store", status=HealthStatus.DOWN, message=str(e))
    latency_ms = int((time.perf_counter() - started) * 1000)
    return HealthCheck(name="store", status=HealthStatus.OK, latency_ms=latency_ms)


@router.get("/health", response_model=HealthResponse, response_model_exclude_none=True)
def health(settings: Annotated[Settings, Depends(get_app_settings)]):
    """Service health status."""
    return HealthResponse(status=HealthStatus.OK, timestamp=utcnow(), version=settings.app_version)


@router.get("/health/live", response_model=LivenessResponse)
def live():
    """Liveness probe."""
    return LivenessResponse()


@router.get(
    "/health/ready",
    response_model=HealthResponse,
    response_model_exclude_none=True,
    responses={status.HTTP_503_SERVICE_UNAVAILABLE: {"model": HealthResponse}},
)
def ready(store: Store, response: Response):
    """Readiness probe. Reports degraded with 503 if any check is not ok."""
    checks = [
        HealthCheck(name="memory", status=HealthStatus.OK),
        check_store(store),
    ]
    overall = HealthStatus.OK
    if any(check.status != HealthStatus.OK for check in checks):
        overall = HealthStatus.DEGRADED
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return HealthResponse(status=overall, timestamp=utcnow(), checks=checks)


@router.get(
    "/brew",
    status_code=status.HTTP_418_IM_A_TEAPOT,
    response_model=ImATeapotResponse,
    responses={status.HTTP_418_IM_A_TEAPOT: {"model": ImATeapotResponse}},
)
def brew_coffee():
    """TIF signature: always 418, whatever is in the store."""
    return I_AM_A_TEAPOT
