"""Shared schema building blocks."""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError


class CamelModel(BaseModel):
    """Base schema exchanging camelCase JSON keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RecordModel(CamelModel):
    """Response schema read from an entity record."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class PatchModel(CamelModel):
    """Partial update payload.

    A field left out of the payload is not in ``model_fields_set`` and is
    left unchanged. A field sent as null clears an optional attribute, but
    is rejected for the attributes listed in ``non_nullable``.
    """

    non_nullable: ClassVar[frozenset[str]] = frozenset()

    @field_validator("*")
    @classmethod
    def reject_null_required_fields(cls, value, info: ValidationInfo):
        if value is None and info.field_name in cls.non_nullable:
            raise PydanticCustomError("null_value", "cannot be null")
        return value

    def changes(self) -> dict:
        """Fields present in the payload, keyed by attribute name."""
        return self.model_dump(exclude_unset=True)


class Pagination(CamelModel):
    """Pagination metadata."""

    page: int
    limit: int
    total: int
    total_pages: int

    @classmethod
    def build(cls, page: int, limit: int, total: int) -> "Pagination":
        """Compute totalPages as ceil(total / limit), never below zero."""
        total_pages = (total + limit - 1) // limit if limit > 0 else 0
        return cls(page=page, limit=limit, total=total, total_pages=max(total_pages, 0))


class ErrorResponse(BaseModel):
    """API error response."""

    code: str
    message: str
    details: dict[str, str] | None = None
