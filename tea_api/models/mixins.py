"""Mixins and helpers shared by the entity records."""

import uuid
from datetime import UTC, datetime


def utcnow() -> datetime:
    """Current time in UTC."""
    return datetime.now(UTC)


def new_id() -> str:
    """Generate a fresh entity identifier."""
    return str(uuid.uuid4())


class TimestampMixin:
    """Mixin for records carrying created_at and updated_at timestamps."""

    created_at: datetime
    updated_at: datetime

    def touch(self, now: datetime | None = None) -> None:
        """Refresh updated_at after a mutation. created_at never changes."""
        self.updated_at = now or utcnow()
