"""
API endpoints for translation languages.

The public listing only returns active languages, in the order the
translation tabs are shown.
"""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from dhivyuga.core.database import get_session
from dhivyuga.core.database.entities import Language, Profile
from dhivyuga.core.database.repositories import LanguageRepository
from dhivyuga.core.logging_config import get_logger
from dhivyuga.core.models.io import LanguageCreate, LanguageListResponse, LanguageRead, LanguageUpdate
from dhivyuga.server.services.deps import get_current_admin

logger = get_logger(__name__)

router = APIRouter(tags=["languages"])


async def _get_language_or_404(repo: LanguageRepository, language_id: uuid.UUID) -> Language:
    language = await repo.get_by_id(language_id)
    if language is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Language {language_id} not found",
        )
    return language


@router.get(
    "",
    response_model=LanguageListResponse,
    summary="List Languages",
    description="List active languages ordered by their sort order.",
)
async def list_languages(session: AsyncSession = Depends(get_session)) -> LanguageListResponse:
    languages = await LanguageRepository(session).list_active()
    return LanguageListResponse(languages=[LanguageRead.model_validate(lang) for lang in languages])


@router.post(
    "",
    response_model=LanguageRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Language",
    description="Add a translation language. Admin only.",
    responses={
        201: {"description": "Language created successfully"},
        409: {"description": "A language with this code already exists"},
        422: {"description": "Missing code or name"},
    },
)
async def create_language(
    payload: LanguageCreate,
    session: AsyncSession = Depends(get_session),
    _: Profile = Depends(get_current_admin),
) -> LanguageRead:
    """
    Create a new language.

    - **code**: Unique language code (e.g. 'ta').
    - **name**: English name of the language.
    - **native_name**: Name written in the language itself.
    - **direction**: 'ltr' (default) or 'rtl'.
    - **sort_order**: Position among the translation tabs (default 0).
    """
    language = await LanguageRepository(session).create(Language.model_validate(payload))
    logger.info(f"Language '{language.code}' created")
    return LanguageRead.model_validate(language)


@router.patch(
    "/{language_id}",
    response_model=LanguageRead,
    summary="Update Language",
    description="Partially update a language. Admin only.",
    responses={
        404: {"description": "Language not found"},
        409: {"description": "A language with this code already exists"},
    },
)
async def update_language(
    language_id: uuid.UUID,
    payload: LanguageUpdate,
    session: AsyncSession = Depends(get_session),
    _: Profile = Depends(get_current_admin),
) -> LanguageRead:
    repo = LanguageRepository(session)
    language = await _get_language_or_404(repo, language_id)
    language = await repo.update(language, payload.model_dump(exclude_unset=True))
    return LanguageRead.model_validate(language)


@router.delete(
    "/{language_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Language",
    description="Delete a language together with every translation written in it. Admin only.",
    responses={404: {"description": "Language not found"}},
)
async def delete_language(
    language_id: uuid.UUID,
    session: AsyncSession = Depends(get_session),
    _: Profile = Depends(get_current_admin),
) -> None:
    if not await LanguageRepository(session).delete(language_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Language {language_id} not found",
        )
