"""FastAPI dependencies for the store, settings and list paging."""

import uuid
from typing import Annotated

from fastapi import Depends, Query, Request

from tea_api.config import Settings
from tea_api.exceptions import InvalidRequestError
from tea_api.models import PageQuery
from tea_api.store import MemoryStore


def get_store(request: Request) -> MemoryStore:
    """The store the application was built with."""
    return request.app.state.store


def get_app_settings(request: Request) -> Settings:
    """The settings the application was built with."""
    return request.app.state.settings


def get_page_query(
    settings: Annotated[Settings, Depends(get_app_settings)],
    page: Annotated[int, Query(ge=0, description="Page number")] = 0,
    limit: Annotated[int, Query(ge=0, description="Items per page")] = 0,
) -> PageQuery:
    """Page and limit with defaults applied when absent or zero."""
    page = page or 1
    limit = limit or settings.default_page_size
    if limit > settings.max_page_size:
        raise InvalidRequestError(
            "Invalid request",
            details={"limit": f"Input should be less than or equal to {settings.max_page_size}"},
        )
    return PageQuery(page=page, limit=limit)


def parse_id(value: str, entity: str) -> str:
    """Validate an identifier from the path and return its canonical form."""
    try:
        return str(uuid.UUID(value))
    except ValueError:
        raise InvalidRequestError(f"Invalid {entity} ID format") from None


Store = Annotated[MemoryStore, Depends(get_store)]
Page = Annotated[PageQuery, Depends(get_page_query)]
