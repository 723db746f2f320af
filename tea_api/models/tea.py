"""Tea record."""

from dataclasses import dataclass
from datetime import datetime

from tea_api.models.enums import CaffeineLevel, TeaType
from tea_api.models.mixins import TimestampMixin


@dataclass
class Tea(TimestampMixin):
    """A tea with its recommended steeping parameters."""

    id: str
    name: str
    type: TeaType
    caffeine_level: CaffeineLevel
    steep_temp_celsius: int
    steep_time_seconds: int
    created_at: datetime
    updated_at: datetime
    origin: str | None = None
    description: str | None = None
