"""Brew record."""

from dataclasses import dataclass
from datetime import datetime

from tea_api.models.enums import BrewStatus
from tea_api.models.mixins import TimestampMixin


@dataclass
class Brew(TimestampMixin):
    """A brewing session of one tea in one teapot.

    teapot_id and tea_id are checked once at creation and never again, so
    they may dangle after the teapot or tea is deleted.
    """

    id: str
    teapot_id: str
    tea_id: str
    status: BrewStatus
    water_temp_celsius: int
    started_at: datetime
    created_at: datetime
    updated_at: datetime
    notes: str | None = None
    completed_at: datetime | None = None
