"""Brew and steep schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from tea_api.models.enums import BrewStatus
from tea_api.schemas.common import CamelModel, Pagination, PatchModel, RecordModel


class BrewCreate(CamelModel):
    """Start a new brew.

    waterTempCelsius falls back to the tea's steepTempCelsius when omitted.
    """

    teapot_id: UUID
    tea_id: UUID
    water_temp_celsius: int | None = Field(None, ge=60, le=100)
    notes: str | None = Field(None, max_length=500)


class BrewPatch(PatchModel):
    """Partially update a brew."""

    non_nullable = frozenset({"status"})

    status: BrewStatus | None = None
    notes: str | None = Field(None, max_length=500)
    completed_at: datetime | None = None


class BrewResponse(RecordModel):
    """Brew response."""

    id: str
    teapot_id: str
    tea_id: str
    status: BrewStatus
    water_temp_celsius: int
    notes: str | None
    started_at: datetime
    completed_at: datetime | None
    created_at: datetime
    updated_at: datetime


class BrewListResponse(CamelModel):
    """Paginated brew list."""

    data: list[BrewResponse]
    pagination: Pagination


class SteepCreate(CamelModel):
    """Record a steeping cycle."""

    duration_seconds: int = Field(..., ge=1)
    rating: int | None = Field(None, ge=1, le=5)
    notes: str | None = Field(None, max_length=200)


class SteepResponse(RecordModel):
    """Steep response."""

    id: str
    brew_id: str
    steep_number: int
    duration_seconds: int
    rating: int | None
    notes: str | None
    created_at: datetime


class SteepListResponse(CamelModel):
    """Paginated steep list."""

    data: list[SteepResponse]
    pagination: Pagination
