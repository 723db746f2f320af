"""Tea API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from tea_api.api.dependencies import Page, Store, parse_id
from tea_api.exceptions import NotFoundError
from tea_api.models import CaffeineLevel, Tea, TeaQuery, TeaType
from tea_api.models.mixins import new_id, utcnow
from tea_api.schemas import (
    ErrorResponse,
    Pagination,
    TeaCreate,
    TeaListResponse,
    TeaPatch,
    TeaResponse,
    TeaUpdate,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/teas",
    tags=["teas"],
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
    },
)


def get_tea_or_404(tea_id: str, store: Store) -> Tea:
    """Look up the tea named in the path, ahead of body validation."""
    tea = store.get_tea(parse_id(tea_id, "tea"))
    if tea is None:
        raise NotFoundError("Tea not found")
    return tea


ExistingTea = Annotated[Tea, Depends(get_tea_or_404)]


@router.get("", response_model=TeaListResponse)
def list_teas(
    store: Store,
    page: Page,
    tea_type: Annotated[TeaType | None, Query(alias="type", description="Filter by tea type")] = None,
    caffeine_level: Annotated[
        CaffeineLevel | None, Query(alias="caffeineLevel", description="Filter by caffeine level")
    ] = None,
):
    """List teas, newest first."""
    query = TeaQuery(page=page.page, limit=page.limit, type=tea_type, caffeine_level=caffeine_level)
    teas, total = store.list_teas(query)
    return TeaListResponse(
        data=[TeaResponse.model_validate(t) for t in teas],
        pagination=Pagination.build(query.page, query.limit, total),
    )


@router.post("", response_model=TeaResponse, status_code=status.HTTP_201_CREATED)
def create_tea(tea_data: TeaCreate, store: Store):
    """Create a new tea."""
    now = utcnow()
    tea = Tea(id=new_id(), created_at=now, updated_at=now, **tea_data.model_dump())
    store.create_tea(tea)
    logger.info(f"Created tea {tea.id}")
    return tea


@router.get("/{tea_id}", response_model=TeaResponse)
def get_tea(tea: ExistingTea):
    """Get a tea by id."""
    return tea


@router.put("/{tea_id}", response_model=TeaResponse)
def update_tea(existing: ExistingTea, tea_data: TeaUpdate, store: Store):
    """Replace every field of a tea.

    Brews already made with this tea keep their water temperature.
    """
    tea = Tea(
        id=existing.id,
        created_at=existing.created_at,
        updated_at=utcnow(),
        **tea_data.model_dump(),
    )
    store.update_tea(tea)
    logger.info(f"Replaced tea {tea.id}")
    return tea


@router.patch("/{tea_id}", response_model=TeaResponse)
def patch_tea(tea: ExistingTea, tea_data: TeaPatch, store: Store):
    """Update only the fields present in the payload."""
    for field, value in tea_data.changes().items():
        setattr(tea, field, value)
    tea.touch()
    store.update_tea(tea)
    logger.info(f"Patched tea {tea.id}")
    return tea


@router.delete("/{tea_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_tea(tea_id: str, store: Store):
    """Delete a tea. Brews that reference it are kept."""
    if not store.delete_tea(parse_id(tea_id, "tea")):
        raise NotFoundError("Tea not found")
    logger.info(f"Deleted tea {tea_id}")
