"""Tea schemas."""

from datetime import datetime

from pydantic import Field, field_validator

from tea_api.models.enums import CaffeineLevel, TeaType
from tea_api.schemas.common import CamelModel, Pagination, PatchModel, RecordModel


class TeaCreate(CamelModel):
    """Create a new tea."""

    name: str = Field(..., min_length=1, max_length=100)
    type: TeaType
    origin: str | None = Field(None, max_length=100)
    caffeine_level: CaffeineLevel = CaffeineLevel.MEDIUM
    steep_temp_celsius: int = Field(..., ge=60, le=100)
    steep_time_seconds: int = Field(..., ge=1, le=600)
    description: str | None = Field(None, max_length=1000)

    @field_validator("caffeine_level", mode="before")
    @classmethod
    def default_caffeine_level(cls, value):
        if value is None or value == "":
            return CaffeineLevel.MEDIUM
        return value


class TeaUpdate(CamelModel):
    """Replace a tea."""

    name: str = Field(..., min_length=1, max_length=100)
    type: TeaType
    origin: str | None = Field(None, max_length=100)
    caffeine_level: CaffeineLevel
    steep_temp_celsius: int = Field(..., ge=60, le=100)
    steep_time_seconds: int = Field(..., ge=1, le=600)
    description: str | None = Field(None, max_length=1000)


class TeaPatch(PatchModel):
    """Partially update a tea."""

    non_nullable = frozenset(
        {"name", "type", "caffeine_level", "steep_temp_celsius", "steep_time_seconds"}
    )

    name: str | None = Field(None, min_length=1, max_length=100)
    type: TeaType | None = None
    origin: str | None = Field(None, max_length=100)
    caffeine_level: CaffeineLevel | None = None
    steep_temp_celsius: int | None = Field(None, ge=60, le=100)
    steep_time_seconds: int | None = Field(None, ge=1, le=600)
    description: str | None = Field(None, max_length=1000)


class TeaResponse(RecordModel):
    """Tea response."""

    id: str
    name: str
    type: TeaType
    origin: str | None
    caffeine_level: CaffeineLevel
    steep_temp_celsius: int
    steep_time_seconds: int
    description: str | None
    created_at: datetime
    updated_at: datetime


class TeaListResponse(CamelModel):
    """Paginated tea list."""

    data: list[TeaResponse]
    pagination: Pagination
