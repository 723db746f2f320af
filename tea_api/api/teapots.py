"""Teapot API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from tea_api.api.dependencies import Page, Store, parse_id
from tea_api.exceptions import NotFoundError
from tea_api.models import Teapot, TeapotMaterial, TeapotQuery, TeapotStyle
from tea_api.models.mixins import new_id, utcnow
from tea_api.schemas import (
    BrewListResponse,
    BrewResponse,
    ErrorResponse,
    Pagination,
    TeapotCreate,
    TeapotListResponse,
    TeapotPatch,
    TeapotResponse,
    TeapotUpdate,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/teapots",
    tags=["teapots"],
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
    },
)


def get_teapot_or_404(teapot_id: str, store: Store) -> Teapot:
    """Look up the teapot named in the path.

    Resolved as a dependency, so a malformed or unknown id is reported
    before the request body is validated.
    """
    teapot = store.get_teapot(parse_id(teapot_id, "teapot"))
    if teapot is None:
        raise NotFoundError("Teapot not found")
    return teapot


ExistingTeapot = Annotated[Teapot, Depends(get_teapot_or_404)]


@router.get("", response_model=TeapotListResponse)
def list_teapots(
    store: Store,
    page: Page,
    material: Annotated[TeapotMaterial | None, Query(description="Filter by material")] = None,
    style: Annotated[TeapotStyle | None, Query(description="Filter by style")] = None,
):
    """List teapots, newest first."""
    query = TeapotQuery(page=page.page, limit=page.limit, material=material, style=style)
    teapots, total = store.list_teapots(query)
    return TeapotListResponse(
        data=[TeapotResponse.model_validate(t) for t in teapots],
        pagination=Pagination.build(query.page, query.limit, total),
    )


@router.post("", response_model=TeapotResponse, status_code=status.HTTP_201_CREATED)
def create_teapot(teapot_data: TeapotCreate, store: Store):
    """Create a new teapot."""
    now = utcnow()
    teapot = Teapot(id=new_id(), created_at=now, updated_at=now, **teapot_data.model_dump())
    store.create_teapot(teapot)
    logger.info(f"Created teapot {teapot.id}")
    return teapot


@router.get("/{teapot_id}", response_model=TeapotResponse)
def get_teapot(teapot: ExistingTeapot):
    """Get a teapot by id."""
    return teapot


@router.put("/{teapot_id}", response_model=TeapotResponse)
def update_teapot(existing: ExistingTeapot, teapot_data: TeapotUpdate, store: Store):
    """Replace every field of a teapot."""
    teapot = Teapot(
        id=existing.id,
        created_at=existing.created_at,
        updated_at=utcnow(),
        **teapot_data.model_dump(),
    )
    store.update_teapot(teapot)
    logger.info(f"Replaced teapot {teapot.id}")
    return teapot


@router.patch("/{teapot_id}", response_model=TeapotResponse)
def patch_teapot(teapot: ExistingTeapot, teapot_data: TeapotPatch, store: Store):
    """Update only the fields present in the payload."""
    for field, value in teapot_data.changes().items():
        setattr(teapot, field, value)
    teapot.touch()
    store.update_teapot(teapot)
    logger.info(f"Patched teapot {teapot.id}")
    return teapot


@router.delete("/{teapot_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_teapot(teapot_id: str, store: Store):
    """Delete a teapot. Brews that reference it are kept."""
    if not store.delete_teapot(parse_id(teapot_id, "teapot")):
        raise NotFoundError("Teapot not found")
    logger.info(f"Deleted teapot {teapot_id}")


@router.get("/{teapot_id}/brews", response_model=BrewListResponse)
def list_teapot_brews(teapot: ExistingTeapot, store: Store, page: Page):
    """List the brews made in a teapot, newest first."""
    brews, total = store.list_brews_by_teapot(teapot.id, page.page, page.limit)
    return BrewListResponse(
        data=[BrewResponse.model_validate(b) for b in brews],
        pagination=Pagination.build(page.page, page.limit, total),
    )
