"""
API endpoints for deities.

Public listings carry the number of mantras addressed to each deity. The
nine grahas are regular deities recognised by name and can be seeded in one
admin call.
"""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from dhivyuga.core.database import get_session
from dhivyuga.core.database.entities import Deity, Profile
from dhivyuga.core.database.repositories import DeityRepository
from dhivyuga.core.logging_config import get_logger
from dhivyuga.core.models.io import (
    DeityCreate,
    DeityListResponse,
    DeityRead,
    DeityUpdate,
    DeityWithCount,
    GrahaListResponse,
    SeedGrahasResponse,
)
from dhivyuga.server.services.deps import get_current_admin

logger = get_logger(__name__)

router = APIRouter(tags=["deities"])


def _with_count(deity: Deity, mantra_count: int) -> DeityWithCount:
    return DeityWithCount(**DeityRead.model_validate(deity).model_dump(), mantra_count=mantra_count)


async def _get_deity_or_404(repo: DeityRepository, deity_id: uuid.UUID) -> Deity:
    deity = await repo.get_by_id(deity_id)
    if deity is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Deity {deity_id} not found",
        )
    return deity


@router.get(
    "",
    response_model=DeityListResponse,
    summary="List Deities",
    description="List deities ordered by name, each with its mantra count. Inactive deities are hidden unless requested.",
)
async def list_deities(
    include_inactive: bool = Query(default=False, description="Also list deities hidden from the public listing"),
    session: AsyncSession = Depends(get_session),
) -> DeityListResponse:
    rows = await DeityRepository(session).list_with_mantra_counts(include_inactive=include_inactive)
    return DeityListResponse(deities=[_with_count(deity, count) for deity, count in rows])


@router.get(
    "/grahas",
    response_model=GrahaListResponse,
    summary="List Grahas",
    description="List the deities that are one of the nine grahas, each with its mantra count.",
)
async def list_grahas(session: AsyncSession = Depends(get_session)) -> GrahaListResponse:
    rows = await DeityRepository(session).list_grahas()
    return GrahaListResponse(grahas=[_with_count(deity, count) for deity, count in rows])


@router.post(
    "/seed-grahas",
    response_model=SeedGrahasResponse,
    summary="Seed Grahas",
    description="Insert the nine graha deities with their astrological attributes unless grahas already exist. Admin only.",
    responses={
        200: {"description": "Grahas seeded, or already present"},
        401: {"description": "Missing or invalid access token"},
        403: {"description": "Not an admin"},
    },
)
async def seed_grahas(
    session: AsyncSession = Depends(get_session),
    _: Profile = Depends(get_current_admin),
) -> SeedGrahasResponse:
    """
    Seed the nine grahas.

    Running this twice is harmless: when any graha deity already exists,
    nothing is inserted and the existing grahas are returned.
    """
    created, grahas = await DeityRepository(session).seed_grahas()
    message = "Grahas seeded successfully" if created else "Grahas already exist in database"
    return SeedGrahasResponse(
        message=message,
        count=len(grahas),
        grahas=[DeityRead.model_validate(g) for g in grahas],
    )


@router.get(
    "/{deity_id}",
    response_model=DeityRead,
    summary="Get Deity",
    responses={404: {"description": "Deity not found"}},
)
async def get_deity(deity_id: uuid.UUID, session: AsyncSession = Depends(get_session)) -> DeityRead:
    deity = await _get_deity_or_404(DeityRepository(session), deity_id)
    return DeityRead.model_validate(deity)


@router.post(
    "",
    response_model=DeityRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Deity",
    description="Add a deity. Admin only.",
    responses={
        201: {"description": "Deity created successfully"},
        409: {"description": "A deity with this name already exists"},
    },
)
async def create_deity(
    payload: DeityCreate,
    session: AsyncSession = Depends(get_session),
    _: Profile = Depends(get_current_admin),
) -> DeityRead:
    deity = await DeityRepository(session).create(Deity.model_validate(payload))
    return DeityRead.model_validate(deity)


@router.patch(
    "/{deity_id}",
    response_model=DeityRead,
    summary="Update Deity",
    description="Partially update a deity. Admin only.",
    responses={
        404: {"description": "Deity not found"},
        409: {"description": "A deity with this name already exists"},
    },
)
async def update_deity(
    deity_id: uuid.UUID,
    payload: DeityUpdate,
    session: AsyncSession = Depends(get_session),
    _: Profile = Depends(get_current_admin),
) -> DeityRead:
    repo = DeityRepository(session)
    deity = await _get_deity_or_404(repo, deity_id)
    deity = await repo.update(deity, payload.model_dump(exclude_unset=True))
    return DeityRead.model_validate(deity)


@router.delete(
    "/{deity_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Deity",
    description="Delete a deity. Its mantras stay in the catalog without a deity. Admin only.",
    responses={404: {"description": "Deity not found"}},
)
async def delete_deity(
    deity_id: uuid.UUID,
    session: AsyncSession = Depends(get_session),
    _: Profile = Depends(get_current_admin),
) -> None:
    if not await DeityRepository(session).delete(deity_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Deity {deity_id} not found",
        )
