"""Steep record."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Steep:
    """A single steeping cycle within a brew."""

    id: str
    brew_id: str
    steep_number: int  # 1-based, per brew
    duration_seconds: int
    created_at: datetime
    rating: int | None = None
    notes: str | None = None
