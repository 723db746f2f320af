"""Teapot schemas."""

from datetime import datetime

from pydantic import Field, field_validator

from tea_api.models.enums import TeapotMaterial, TeapotStyle
from tea_api.schemas.common import CamelModel, Pagination, PatchModel, RecordModel


class TeapotCreate(CamelModel):
    """Create a new teapot."""

    name: str = Field(..., min_length=1, max_length=100)
    material: TeapotMaterial
    capacity_ml: int = Field(..., ge=1, le=5000)
    style: TeapotStyle = TeapotStyle.ENGLISH
    description: str | None = Field(None, max_length=500)

    @field_validator("style", mode="before")
    @classmethod
    def default_style(cls, value):
        if value is None or value == "":
            return TeapotStyle.ENGLISH
        return value


class TeapotUpdate(CamelModel):
    """Replace a teapot."""

    name: str = Field(..., min_length=1, max_length=100)
    material: TeapotMaterial
    capacity_ml: int = Field(..., ge=1, le=5000)
    style: TeapotStyle
    description: str | None = Field(None, max_length=500)


class TeapotPatch(PatchModel):
    """Partially update a teapot."""

    non_nullable = frozenset({"name", "material", "capacity_ml", "style"})

    name: str | None = Field(None, min_length=1, max_length=100)
    material: TeapotMaterial | None = None
    capacity_ml: int | None = Field(None, ge=1, le=5000)
    style: TeapotStyle | None = None
    description: str | None = Field(None, max_length=500)


class TeapotResponse(RecordModel):
    """Teapot response."""

    id: str
    name: str
    material: TeapotMaterial
    capacity_ml: int
    style: TeapotStyle
    description: str | None
    created_at: datetime
    updated_at: datetime


class TeapotListResponse(CamelModel):
    """Paginated teapot list."""

    data: list[TeapotResponse]
    pagination: Pagination
