"""
API endpoints for mantra translations.

Translations are nested under their mantra. Besides the id-addressed
create/update/delete, ``PUT /{language_id}`` is the per-language save used
by the admin editor: one call per language tab, where blank text removes
that language's translation.
"""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from dhivyuga.core.database import get_session
from dhivyuga.core.database.entities import MantraTranslation, Profile
from dhivyuga.core.database.repositories import LanguageRepository, MantraRepository, TranslationRepository
from dhivyuga.core.logging_config import get_logger
from dhivyuga.core.models.io import (
    SuccessResponse,
    TranslationCreate,
    TranslationDraft,
    TranslationListResponse,
    TranslationRead,
    TranslationResponse,
    TranslationSaveResponse,
    TranslationUpdate,
)
from dhivyuga.server.services.deps import get_current_admin

logger = get_logger(__name__)

router = APIRouter(tags=["translations"])


async def _ensure_mantra(session: AsyncSession, mantra_id: uuid.UUID) -> None:
    if await MantraRepository(session).get_by_id(mantra_id) is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Mantra {mantra_id} not found",
        )


async def _ensure_language(session: AsyncSession, language_id: uuid.UUID) -> None:
    if await LanguageRepository(session).get_by_id(language_id) is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Language {language_id} not found",
        )


@router.get(
    "/{mantra_id}/translations",
    response_model=TranslationListResponse,
    summary="List Mantra Translations",
    description="List the translations of a mantra ordered by language, each with its language embedded.",
    responses={
        200: {"description": "Translations retrieved"},
        404: {"description": "Mantra not found"},
    },
)
async def list_translations(
    mantra_id: uuid.UUID,
    session: AsyncSession = Depends(get_session),
) -> TranslationListResponse:
    await _ensure_mantra(session, mantra_id)
    translations = await TranslationRepository(session).list_for_mantra(mantra_id)
    return TranslationListResponse(translations=[TranslationRead.model_validate(t) for t in translations])


@router.post(
    "/{mantra_id}/translations",
    response_model=TranslationResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create Mantra Translation",
    description="Add a translation of a mantra in one language. Admin only.",
    responses={
        201: {"description": "Translation created"},
        404: {"description": "Mantra or language not found"},
        409: {"description": "The mantra already has a translation in this language"},
    },
)
async def create_translation(
    mantra_id: uuid.UUID,
    payload: TranslationCreate,
    session: AsyncSession = Depends(get_session),
    _: Profile = Depends(get_current_admin),
) -> TranslationResponse:
    """
    Create a translation.

    A mantra holds at most one translation per language; a second one for the
    same language is rejected with 409.

    - **language_id**: Language of the translation.
    - **text**: Translated text, must not be blank.
    - **transliteration**, **pronunciation_guide**, **meaning**, **benefits**,
      **usage_notes**: Optional.
    """
    await _ensure_mantra(session, mantra_id)
    await _ensure_language(session, payload.language_id)
    translation = await TranslationRepository(session).create(
        MantraTranslation(mantra_id=mantra_id, **payload.model_dump())
    )
    logger.info(f"Translation {translation.id} created for mantra {mantra_id}")
    return TranslationResponse(translation=TranslationRead.model_validate(translation))


@router.put(
    "/{mantra_id}/translations",
    response_model=TranslationResponse,
    summary="Update Mantra Translation",
    description="Replace the fields of an existing translation, addressed by translation_id in the body. Admin only.",
    responses={
        200: {"description": "Translation updated"},
        404: {"description": "Translation not found for this mantra"},
        409: {"description": "The mantra already has a translation in the target language"},
    },
)
async def update_translation(
    mantra_id: uuid.UUID,
    payload: TranslationUpdate,
    session: AsyncSession = Depends(get_session),
    _: Profile = Depends(get_current_admin),
) -> TranslationResponse:
    repo = TranslationRepository(session)
    translation = await repo.get_for_mantra(mantra_id, payload.translation_id)
    if translation is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Translation {payload.translation_id} not found",
        )
    if payload.language_id != translation.language_id:
        await _ensure_language(session, payload.language_id)

    translation = await repo.update(translation, payload.model_dump(exclude={"translation_id"}))
    return TranslationResponse(translation=TranslationRead.model_validate(translation))


@router.delete(
    "/{mantra_id}/translations",
    response_model=SuccessResponse,
    summary="Delete Mantra Translation",
    description="Delete one translation of a mantra. Admin only.",
    responses={
        200: {"description": "Translation deleted"},
        404: {"description": "Translation not found for this mantra"},
        422: {"description": "translation_id missing or malformed"},
    },
)
async def delete_translation(
    mantra_id: uuid.UUID,
    translation_id: uuid.UUID = Query(description="Translation to delete"),
    session: AsyncSession = Depends(get_session),
    _: Profile = Depends(get_current_admin),
) -> SuccessResponse:
    repo = TranslationRepository(session)
    translation = await repo.get_for_mantra(mantra_id, translation_id)
    if translation is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Translation {translation_id} not found",
        )
    await repo.delete_entity(translation)
    return SuccessResponse(success=True)


@router.put(
    "/{mantra_id}/translations/{language_id}",
    response_model=TranslationSaveResponse,
    summary="Save Translation for Language",
    description="Create, update or (with blank text) remove the translation of a mantra in one language. Admin only.",
    responses={
        200: {"description": "Translation saved or removed"},
        404: {"description": "Mantra or language not found"},
    },
)
async def save_translation_for_language(
    mantra_id: uuid.UUID,
    language_id: uuid.UUID,
    payload: TranslationDraft,
    session: AsyncSession = Depends(get_session),
    _: Profile = Depends(get_current_admin),
) -> TranslationSaveResponse:
    """
    Save one language tab of the translation editor.

    - Non-blank **text**: the translation for this language is created or
      overwritten with the submitted fields.
    - Blank **text**: the translation for this language is deleted if it
      exists; ``deleted`` tells whether anything was removed.
    """
    await _ensure_mantra(session, mantra_id)
    await _ensure_language(session, language_id)
    repo = TranslationRepository(session)

    if not payload.text.strip():
        existing = await repo.get_by_language(mantra_id, language_id)
        if existing is None:
            return TranslationSaveResponse(translation=None, deleted=False)
        await repo.delete_entity(existing)
        logger.info(f"Translation of mantra {mantra_id} in language {language_id} removed")
        return TranslationSaveResponse(translation=None, deleted=True)

    translation = await repo.save_for_language(mantra_id, language_id, payload.model_dump())
    return TranslationSaveResponse(translation=TranslationRead.model_validate(translation), deleted=False)
