"""
API endpoints for the mantra catalog.

Public reads (listing, trending, detail with related mantras, the view
counter) and admin-only writes. Translations of a mantra live in
:mod:`.translations`.
"""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from dhivyuga.core.database import get_session
from dhivyuga.core.database.entities import Mantra, Profile
from dhivyuga.core.database.repositories import MantraRepository
from dhivyuga.core.logging_config import get_logger
from dhivyuga.core.models.io import (
    MantraCreate,
    MantraDetailResponse,
    MantraListResponse,
    MantraRead,
    MantraUpdate,
    ViewResponse,
)
from dhivyuga.server.services.deps import get_current_admin

logger = get_logger(__name__)

router = APIRouter(tags=["mantras"])

TRENDING_LIMIT = 6
RELATED_LIMIT = 4


async def _get_mantra_or_404(repo: MantraRepository, mantra_id: uuid.UUID) -> Mantra:
    mantra = await repo.get_by_id(mantra_id)
    if mantra is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Mantra {mantra_id} not found",
        )
    return mantra


@router.get(
    "",
    response_model=MantraListResponse,
    summary="List Mantras",
    description="List mantras newest first, with offset pagination.",
    response_description="A page of mantras.",
)
async def list_mantras(
    limit: int = Query(default=50, ge=1, le=200),
    offset: int = Query(default=0, ge=0),
    session: AsyncSession = Depends(get_session),
) -> MantraListResponse:
    mantras = await MantraRepository(session).list(limit=limit, offset=offset)
    logger.debug(f"Listed {len(mantras)} mantras (limit={limit}, offset={offset})")
    return MantraListResponse(mantras=[MantraRead.model_validate(m) for m in mantras])


@router.get(
    "/trending",
    response_model=MantraListResponse,
    summary="Trending Mantras",
    description="The six most viewed mantras.",
)
async def trending_mantras(session: AsyncSession = Depends(get_session)) -> MantraListResponse:
    mantras = await MantraRepository(session).trending(limit=TRENDING_LIMIT)
    return MantraListResponse(mantras=[MantraRead.model_validate(m) for m in mantras])


@router.get(
    "/{mantra_id}",
    response_model=MantraDetailResponse,
    summary="Get Mantra",
    description="Retrieve a mantra with its catalog links and up to four related mantras.",
    response_description="The mantra and its related mantras.",
    responses={
        200: {"description": "Mantra found"},
        404: {"description": "Mantra not found"},
    },
)
async def get_mantra(
    mantra_id: uuid.UUID,
    session: AsyncSession = Depends(get_session),
) -> MantraDetailResponse:
    """
    Get a mantra by ID.

    Related mantras share the deity or the category of the requested mantra,
    never include the mantra itself, and are ordered by popularity.

    - **mantra_id**: The unique identifier of the mantra.
    """
    repo = MantraRepository(session)
    mantra = await _get_mantra_or_404(repo, mantra_id)
    related = await repo.related(mantra, limit=RELATED_LIMIT)
    return MantraDetailResponse(
        mantra=MantraRead.model_validate(mantra),
        related_mantras=[MantraRead.model_validate(m) for m in related],
    )


@router.post(
    "",
    response_model=MantraRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Mantra",
    description="Add a mantra to the catalog. Admin only.",
    responses={
        201: {"description": "Mantra created successfully"},
        401: {"description": "Missing or invalid access token"},
        403: {"description": "Not an admin"},
        409: {"description": "A linked catalog row does not exist"},
    },
)
async def create_mantra(
    payload: MantraCreate,
    session: AsyncSession = Depends(get_session),
    admin: Profile = Depends(get_current_admin),
) -> MantraRead:
    """
    Create a new mantra.

    - **title**, **text**: Required.
    - **category_id**, **deity_id**, **count_id**, **time_id**, **kalam_id**,
      **range_id**: Optional links to the catalog tables.
    """
    mantra = await MantraRepository(session).create(Mantra.model_validate(payload))
    logger.info(f"Mantra {mantra.id} created by {admin.email}")
    return MantraRead.model_validate(mantra)


@router.patch(
    "/{mantra_id}",
    response_model=MantraRead,
    summary="Update Mantra",
    description="Partially update a mantra; only provided fields change. Admin only.",
    responses={
        200: {"description": "Mantra updated successfully"},
        404: {"description": "Mantra not found"},
        409: {"description": "A linked catalog row does not exist"},
    },
)
async def update_mantra(
    mantra_id: uuid.UUID,
    payload: MantraUpdate,
    session: AsyncSession = Depends(get_session),
    _: Profile = Depends(get_current_admin),
) -> MantraRead:
    repo = MantraRepository(session)
    mantra = await _get_mantra_or_404(repo, mantra_id)
    mantra = await repo.update(mantra, payload.model_dump(exclude_unset=True))
    return MantraRead.model_validate(mantra)


@router.delete(
    "/{mantra_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Mantra",
    description="Delete a mantra together with its translations. Admin only.",
    responses={
        204: {"description": "Mantra deleted successfully"},
        404: {"description": "Mantra not found"},
    },
)
async def delete_mantra(
    mantra_id: uuid.UUID,
    session: AsyncSession = Depends(get_session),
    admin: Profile = Depends(get_current_admin),
) -> None:
    if not await MantraRepository(session).delete(mantra_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Mantra {mantra_id} not found",
        )
    logger.info(f"Mantra {mantra_id} deleted by {admin.email}")


@router.post(
    "/{mantra_id}/view",
    response_model=ViewResponse,
    summary="Record Mantra View",
    description="Increment the view counter of a mantra by one.",
    responses={
        200: {"description": "View recorded"},
        404: {"description": "Mantra not found"},
    },
)
async def record_view(
    mantra_id: uuid.UUID,
    session: AsyncSession = Depends(get_session),
) -> ViewResponse:
    """
    Record a detail-page view.

    The counter is incremented in the database itself, so concurrent views
    are never lost.
    """
    view_count = await MantraRepository(session).increment_view_count(mantra_id)
    if view_count is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Mantra {mantra_id} not found",
        )
    return ViewResponse(success=True, view_count=view_count)
