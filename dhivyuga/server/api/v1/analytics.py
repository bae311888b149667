"""
API endpoints for the admin dashboard statistics.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from dhivyuga.core.database import get_session
from dhivyuga.core.database.entities import Profile
from dhivyuga.core.database.repositories import CategoryRepository, DeityRepository, MantraRepository
from dhivyuga.core.models.io import PopularMantra, StatsResponse
from dhivyuga.server.services.deps import get_current_admin

router = APIRouter(tags=["analytics"])

POPULAR_LIMIT = 5


@router.get(
    "/stats",
    response_model=StatsResponse,
    summary="Catalog Statistics",
    description="Totals over the catalog and the five most viewed mantras. Admin only.",
    responses={
        401: {"description": "Missing or invalid access token"},
        403: {"description": "Not an admin"},
    },
)
async def catalog_stats(
    session: AsyncSession = Depends(get_session),
    _: Profile = Depends(get_current_admin),
) -> StatsResponse:
    mantras = MantraRepository(session)
    popular = await mantras.most_viewed(limit=POPULAR_LIMIT)
    return StatsResponse(
        total_mantras=await mantras.count(),
        total_views=await mantras.total_views(),
        total_categories=await CategoryRepository(session).count(),
        total_deities=await DeityRepository(session).count(),
        popular_mantras=[PopularMantra.model_validate(m) for m in popular],
    )
