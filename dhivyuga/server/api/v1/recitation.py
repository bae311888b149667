"""
API endpoints for the recitation metadata tables.

Recitation counts, recitation times, kalams and time ranges share the same
shape: public reads and admin-only writes over a small lookup table. One
router factory builds the endpoints for each of them.
"""

import uuid
from typing import Dict, List, Type

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from dhivyuga.core.database import get_session
from dhivyuga.core.database.entities import Kalam, Profile, RecitationCount, RecitationTime, TimeRange
from dhivyuga.core.database.repositories import (
    KalamRepository,
    RecitationCountRepository,
    RecitationTimeRepository,
    SqlModelRepository,
    TimeRangeRepository,
)
from dhivyuga.core.logging_config import get_logger
from dhivyuga.core.models.io import (
    KalamCreate,
    KalamRead,
    KalamUpdate,
    RecitationCountCreate,
    RecitationCountRead,
    RecitationCountUpdate,
    RecitationTimeCreate,
    RecitationTimeRead,
    RecitationTimeUpdate,
    TimeRangeCreate,
    TimeRangeRead,
    TimeRangeUpdate,
)
from dhivyuga.server.services.deps import get_current_admin

logger = get_logger(__name__)


def build_crud_router(
    *,
    label: str,
    list_key: str,
    entity: Type,
    repository: Type[SqlModelRepository],
    read_model: Type[BaseModel],
    create_model: Type[BaseModel],
    update_model: Type[BaseModel],
) -> APIRouter:
    """
    Build the CRUD router of one lookup table.

    Args:
        label: Human-readable name of a row, used in summaries and 404 messages
        list_key: Key of the list in the ``GET ""`` response body
        entity: SQLModel table class
        repository: Repository class bound to ``entity``
        read_model: Response schema of one row
        create_model: Request schema for ``POST``
        update_model: Request schema for ``PATCH``

    Returns:
        Router with list, get, create, update and delete endpoints
    """
    router = APIRouter(tags=[list_key.replace("_", "-")])

    async def get_or_404(repo: SqlModelRepository, item_id: uuid.UUID):
        item = await repo.get_by_id(item_id)
        if item is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"{label} {item_id} not found",
            )
        return item

    @router.get("", response_model=Dict[str, List[read_model]], summary=f"List {label}s")
    async def list_items(session: AsyncSession = Depends(get_session)):
        items = await repository(session).list()
        return {list_key: [read_model.model_validate(item) for item in items]}

    @router.get(
        "/{item_id}",
        response_model=read_model,
        summary=f"Get {label}",
        responses={404: {"description": f"{label} not found"}},
    )
    async def get_item(item_id: uuid.UUID, session: AsyncSession = Depends(get_session)):
        return read_model.model_validate(await get_or_404(repository(session), item_id))

    @router.post(
        "",
        response_model=read_model,
        status_code=status.HTTP_201_CREATED,
        summary=f"Create {label}",
        description=f"Add a {label.lower()}. Admin only.",
    )
    async def create_item(
        payload: create_model,
        session: AsyncSession = Depends(get_session),
        _: Profile = Depends(get_current_admin),
    ):
        item = await repository(session).create(entity.model_validate(payload))
        logger.debug(f"{label} {item.id} created")
        return read_model.model_validate(item)

    @router.patch(
        "/{item_id}",
        response_model=read_model,
        summary=f"Update {label}",
        description=f"Partially update a {label.lower()}. Admin only.",
        responses={404: {"description": f"{label} not found"}},
    )
    async def update_item(
        item_id: uuid.UUID,
        payload: update_model,
        session: AsyncSession = Depends(get_session),
        _: Profile = Depends(get_current_admin),
    ):
        repo = repository(session)
        item = await get_or_404(repo, item_id)
        item = await repo.update(item, payload.model_dump(exclude_unset=True))
        return read_model.model_validate(item)

    @router.delete(
        "/{item_id}",
        status_code=status.HTTP_204_NO_CONTENT,
        summary=f"Delete {label}",
        description=f"Delete a {label.lower()}; mantras linked to it keep their other data. Admin only.",
        responses={404: {"description": f"{label} not found"}},
    )
    async def delete_item(
        item_id: uuid.UUID,
        session: AsyncSession = Depends(get_session),
        _: Profile = Depends(get_current_admin),
    ) -> None:
        if not await repository(session).delete(item_id):
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"{label} {item_id} not found",
            )

    return router


recitation_counts_router = build_crud_router(
    label="Recitation count",
    list_key="recitation_counts",
    entity=RecitationCount,
    repository=RecitationCountRepository,
    read_model=RecitationCountRead,
    create_model=RecitationCountCreate,
    update_model=RecitationCountUpdate,
)

recitation_times_router = build_crud_router(
    label="Recitation time",
    list_key="recitation_times",
    entity=RecitationTime,
    repository=RecitationTimeRepository,
    read_model=RecitationTimeRead,
    create_model=RecitationTimeCreate,
    update_model=RecitationTimeUpdate,
)

kalams_router = build_crud_router(
    label="Kalam",
    list_key="kalams",
    entity=Kalam,
    repository=KalamRepository,
    read_model=KalamRead,
    create_model=KalamCreate,
    update_model=KalamUpdate,
)

time_ranges_router = build_crud_router(
    label="Time range",
    list_key="time_ranges",
    entity=TimeRange,
    repository=TimeRangeRepository,
    read_model=TimeRangeRead,
    create_model=TimeRangeCreate,
    update_model=TimeRangeUpdate,
)
