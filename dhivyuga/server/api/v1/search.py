"""
API endpoints for finding mantras.

Provides the public search, the search-box autocomplete, and the option
lists that populate the search filters.
"""

from __future__ import annotations

import uuid
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from dhivyuga.core.database import get_session
from dhivyuga.core.database.entities import Category, Deity, Mantra
from dhivyuga.core.database.repositories import (
    CategoryRepository,
    DeityRepository,
    KalamRepository,
    MantraRepository,
    RecitationTimeRepository,
)
from dhivyuga.core.logging_config import get_logger
from dhivyuga.core.models.io import (
    AutocompleteResponse,
    CategoryRead,
    DeityRead,
    FiltersResponse,
    KalamRead,
    MantraRead,
    RecitationTimeRead,
    SearchResponse,
    Suggestion,
)

logger = get_logger(__name__)

router = APIRouter(tags=["search"])

MIN_AUTOCOMPLETE_LENGTH = 2


@router.get(
    "/search",
    response_model=SearchResponse,
    summary="Search Mantras",
    description="Full-text search over mantra titles and texts, optionally narrowed by category, deity, recitation time and kalam.",
    response_description="Matching mantras with their linked catalog rows.",
    responses={
        200: {"description": "Search completed"},
        422: {"description": "Invalid filter id or limit"},
    },
)
async def search_mantras(
    q: Optional[str] = Query(default=None, description="Free-text query"),
    category: Optional[uuid.UUID] = Query(default=None, description="Category id"),
    deity: Optional[uuid.UUID] = Query(default=None, description="Deity id"),
    time: Optional[uuid.UUID] = Query(default=None, description="Recitation time id"),
    kalam: Optional[uuid.UUID] = Query(default=None, description="Kalam id"),
    limit: int = Query(default=20, ge=1, le=100),
    session: AsyncSession = Depends(get_session),
) -> SearchResponse:
    """
    Search mantras.

    With a query the results are full-text matches ordered by popularity.
    Without one, the filtered catalog is returned most viewed first, newest
    first among equally viewed mantras.

    - **q**: Free-text query (title or text).
    - **category**, **deity**, **time**, **kalam**: Exact-match filters by id.
    - **limit**: Maximum number of mantras (1-100).
    """
    mantras = await MantraRepository(session).search(
        query=q,
        category_id=category,
        deity_id=deity,
        time_id=time,
        kalam_id=kalam,
        limit=limit,
    )
    return SearchResponse(mantras=[MantraRead.model_validate(m) for m in mantras], total=len(mantras))


@router.get(
    "/autocomplete",
    response_model=AutocompleteResponse,
    summary="Autocomplete Search Terms",
    description="Suggest mantra titles, deity names and category names starting with the typed prefix.",
    response_description="Suggestions ordered mantras first, then deities, then categories.",
)
async def autocomplete(
    q: Optional[str] = Query(default=None, description="Typed prefix"),
    limit: int = Query(default=10, ge=1, le=50),
    session: AsyncSession = Depends(get_session),
) -> AutocompleteResponse:
    """
    Autocomplete the search box.

    Prefixes shorter than two characters yield no suggestions.
    """
    prefix = (q or "").strip()
    if len(prefix) < MIN_AUTOCOMPLETE_LENGTH:
        return AutocompleteResponse(suggestions=[])

    titles = await MantraRepository(session).values_starting_with(Mantra.title, prefix, limit)
    deities = await DeityRepository(session).values_starting_with(Deity.name, prefix, limit)
    categories = await CategoryRepository(session).values_starting_with(Category.name, prefix, limit)

    suggestions: List[Suggestion] = (
        [Suggestion(text=text, type="mantra") for text in titles]
        + [Suggestion(text=text, type="deity") for text in deities]
        + [Suggestion(text=text, type="category") for text in categories]
    )
    return AutocompleteResponse(suggestions=suggestions[:limit])


@router.get(
    "/filters",
    response_model=FiltersResponse,
    summary="Get Search Filter Options",
    description="List the categories, deities, recitation times and kalams offered as search filters.",
)
async def filter_options(session: AsyncSession = Depends(get_session)) -> FiltersResponse:
    categories = await CategoryRepository(session).list()
    deities = await DeityRepository(session).list()
    times = await RecitationTimeRepository(session).list()
    kalams = await KalamRepository(session).list()
    return FiltersResponse(
        categories=[CategoryRead.model_validate(c) for c in categories],
        deities=[DeityRead.model_validate(d) for d in deities],
        recitation_times=[RecitationTimeRead.model_validate(t) for t in times],
        kalams=[KalamRead.model_validate(k) for k in kalams],
    )
