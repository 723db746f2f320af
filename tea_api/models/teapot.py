"""Teapot record."""

from dataclasses import dataclass
from datetime import datetime

from tea_api.models.enums import TeapotMaterial, TeapotStyle
from tea_api.models.mixins import TimestampMixin


@dataclass
class Teapot(TimestampMixin):
    """A teapot that brews can be made in."""

    id: str
    name: str
    material: TeapotMaterial
    capacity_ml: int
    style: TeapotStyle
    created_at: datetime
    updated_at: datetime
    description: str | None = None
