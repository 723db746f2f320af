"""Brew and steep API endpoints."""

import logging
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from tea_api.api.dependencies import Page, Store, parse_id
from tea_api.exceptions import InvalidRequestError, NotFoundError
from tea_api.models import Brew, BrewQuery, BrewStatus, Steep
from tea_api.models.mixins import new_id, utcnow
from tea_api.schemas import (
    BrewCreate,
    BrewListResponse,
    BrewPatch,
    BrewResponse,
    ErrorResponse,
    Pagination,
    SteepCreate,
    SteepListResponse,
    SteepResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/brews",
    tags=["brews"],
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
    },
)


def get_brew_or_404(brew_id: str, store: Store) -> Brew:
    """Look up the brew named in the path, ahead of body validation."""
    brew = store.get_brew(parse_id(brew_id, "brew"))
    if brew is None:
        raise NotFoundError("Brew not found")
    return brew


ExistingBrew = Annotated[Brew, Depends(get_brew_or_404)]


@router.get("", response_model=BrewListResponse)
def list_brews(
    store: Store,
    page: Page,
    brew_status: Annotated[
        BrewStatus | None, Query(alias="status", description="Filter by status")
    ] = None,
    teapot_id: Annotated[UUID | None, Query(alias="teapotId", description="Filter by teapot ID")] = None,
    tea_id: Annotated[UUID | None, Query(alias="teaId", description="Filter by tea ID")] = None,
):
    """List brews, newest first."""
    query = BrewQuery(
        page=page.page,
        limit=page.limit,
        status=brew_status,
        teapot_id=str(teapot_id) if teapot_id else None,
        tea_id=str(tea_id) if tea_id else None,
    )
    brews, total = store.list_brews(query)
    return BrewListResponse(
        data=[BrewResponse.model_validate(b) for b in brews],
        pagination=Pagination.build(query.page, query.limit, total),
    )


@router.post("", response_model=BrewResponse, status_code=status.HTTP_201_CREATED)
def create_brew(brew_data: BrewCreate, store: Store):
    """Start a brew of an existing tea in an existing teapot.

    Without an explicit waterTempCelsius the tea's steepTempCelsius is
    copied onto the brew. The copy is not revisited if the tea changes.
    """
    teapot_id = str(brew_data.teapot_id)
    tea_id = str(brew_data.tea_id)

    if store.get_teapot(teapot_id) is None:
        logger.info(f"Rejected brew for unknown teapot {teapot_id}")
        raise InvalidRequestError("Teapot not found", details={"teapotId": "Teapot not found"})

    tea = store.get_tea(tea_id)
    if tea is None:
        logger.info(f"Rejected brew for unknown tea {tea_id}")
        raise InvalidRequestError("Tea not found", details={"teaId": "Tea not found"})

    water_temp = brew_data.water_temp_celsius
    if water_temp is None:
        water_temp = tea.steep_temp_celsius

    now = utcnow()
    brew = Brew(
        id=new_id(),
        teapot_id=teapot_id,
        tea_id=tea_id,
        status=BrewStatus.PREPARING,
        water_temp_celsius=water_temp,
        notes=brew_data.notes,
        started_at=now,
        created_at=now,
        updated_at=now,
    )
    store.create_brew(brew)
    logger.info(f"Created brew {brew.id} (teapot {teapot_id}, tea {tea_id})")
    return brew


@router.get("/{brew_id}", response_model=BrewResponse)
def get_brew(brew: ExistingBrew):
    """Get a brew by id."""
    return brew


@router.patch("/{brew_id}", response_model=BrewResponse)
def patch_brew(brew: ExistingBrew, brew_data: BrewPatch, store: Store):
    """Update status, notes or completedAt."""
    for field, value in brew_data.changes().items():
        setattr(brew, field, value)
    brew.touch()
    store.update_brew(brew)
    logger.info(f"Patched brew {brew.id} (status {brew.status})")
    return brew


@router.delete("/{brew_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_brew(brew_id: str, store: Store):
    """Delete a brew."""
    if not store.delete_brew(parse_id(brew_id, "brew")):
        raise NotFoundError("Brew not found")
    logger.info(f"Deleted brew {brew_id}")


@router.get("/{brew_id}/steeps", response_model=SteepListResponse)
def list_steeps(brew: ExistingBrew, store: Store, page: Page):
    """List a brew's steeps in steep order."""
    steeps, total = store.list_steeps_by_brew(brew.id, page.page, page.limit)
    return SteepListResponse(
        data=[SteepResponse.model_validate(s) for s in steeps],
        pagination=Pagination.build(page.page, page.limit, total),
    )


@router.post("/{brew_id}/steeps", response_model=SteepResponse, status_code=status.HTTP_201_CREATED)
def create_steep(brew: ExistingBrew, steep_data: SteepCreate, store: Store):
    """Record the next steep of a brew."""
    steep = Steep(
        id=new_id(),
        brew_id=brew.id,
        steep_number=store.count_steeps_by_brew(brew.id) + 1,
        created_at=utcnow(),
        **steep_data.model_dump(),
    )
    store.create_steep(steep)
    logger.info(f"Created steep {steep.steep_number} for brew {brew.id}")
    return steep
