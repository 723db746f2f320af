"""Pydantic schemas for API requests and responses."""

from tea_api.schemas.brew import (
    BrewCreate,
    BrewListResponse,
    BrewPatch,
    BrewResponse,
    SteepCreate,
    SteepListResponse,
    SteepResponse,
)
from tea_api.schemas.common import ErrorResponse, Pagination
from tea_api.schemas.health import HealthCheck, HealthResponse, ImATeapotResponse, LivenessResponse
from tea_api.schemas.tea import TeaCreate, TeaListResponse, TeaPatch, TeaResponse, TeaUpdate
from tea_api.schemas.teapot import (
    TeapotCreate,
    TeapotListResponse,
    TeapotPatch,
    TeapotResponse,
    TeapotUpdate,
)

__all__ = [
    "Pagination",
    "ErrorResponse",
    "TeapotCreate",
    "TeapotUpdate",
    "TeapotPatch",
    "TeapotResponse",
    "TeapotListResponse",
    "TeaCreate",
    "TeaUpdate",
    "TeaPatch",
    "TeaResponse",
    "TeaListResponse",
    "BrewCreate",
    "BrewPatch",
    "BrewResponse",
    "BrewListResponse",
    "SteepCreate",
    "SteepResponse",
    "SteepListResponse",
    "HealthCheck",
    "HealthResponse",
    "LivenessResponse",
    "ImATeapotResponse",
]
