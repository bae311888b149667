"""
Mantra translation I/O models for API requests and responses.

Two write contracts exist: the id-addressed ``TranslationCreate`` /
``TranslationUpdate`` pair, and ``TranslationDraft``, the per-language save
of the admin editor where blank text means "remove this language".
"""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class TranslationLanguage(BaseModel):
    """Language embedded in a translation."""

    id: uuid.UUID
    code: str
    name: str
    native_name: Optional[str] = None
    direction: str = "ltr"

    class Config:
        from_attributes = True


class TranslationRead(BaseModel):
    """Schema for reading a translation from API."""

    id: uuid.UUID
    mantra_id: uuid.UUID
    language_id: uuid.UUID
    text: str
    transliteration: Optional[str] = None
    pronunciation_guide: Optional[str] = None
    meaning: Optional[str] = None
    benefits: List[str] = Field(default_factory=list)
    usage_notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    language: Optional[TranslationLanguage] = None

    class Config:
        from_attributes = True


class _TranslationFields(BaseModel):
    transliteration: Optional[str] = None
    pronunciation_guide: Optional[str] = None
    meaning: Optional[str] = None
    benefits: List[str] = Field(default_factory=list, description="Benefits of reciting, one per entry")
    usage_notes: Optional[str] = None

    @field_validator("benefits")
    @classmethod
    def _drop_blank_benefits(cls, value: List[str]) -> List[str]:
        return [item.strip() for item in value if item and item.strip()]


class TranslationCreate(_TranslationFields):
    """Schema for creating a translation via API."""

    language_id: uuid.UUID
    text: str = Field(description="Translated mantra text")

    @field_validator("text")
    @classmethod
    def _text_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("text must not be blank")
        return value


class TranslationUpdate(TranslationCreate):
    """Schema for updating a translation addressed by its id."""

    translation_id: uuid.UUID


class TranslationDraft(_TranslationFields):
    """Per-language save from the admin editor; blank text deletes the translation."""

    text: str = ""


class TranslationListResponse(BaseModel):
    translations: List[TranslationRead]


class TranslationResponse(BaseModel):
    translation: TranslationRead


class TranslationSaveResponse(BaseModel):
    translation: Optional[TranslationRead] = None
    deleted: bool = False


class SuccessResponse(BaseModel):
    success: bool = True
