"""
Language I/O models for API requests and responses.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from .catalog import PartialUpdate

TextDirection = Literal["ltr", "rtl"]


class LanguageRead(BaseModel):
    """Schema for reading a language from API."""

    id: uuid.UUID
    code: str
    name: str
    native_name: Optional[str] = None
    direction: str = "ltr"
    is_active: bool = True
    sort_order: int = 0
    created_at: datetime

    class Config:
        from_attributes = True


class LanguageCreate(BaseModel):
    """Schema for creating a language via API."""

    code: str = Field(min_length=1, max_length=16, description="Unique language code (e.g. 'ta')")
    name: str = Field(min_length=1, max_length=128, description="English name of the language")
    native_name: Optional[str] = Field(default=None, max_length=128)
    direction: TextDirection = "ltr"
    is_active: bool = True
    sort_order: int = 0


class LanguageUpdate(PartialUpdate):
    """Schema for updating a language via API."""

    nullable_fields = frozenset({"native_name"})

    code: Optional[str] = Field(default=None, min_length=1, max_length=16)
    name: Optional[str] = Field(default=None, min_length=1, max_length=128)
    native_name: Optional[str] = Field(default=None, max_length=128)
    direction: Optional[TextDirection] = None
    is_active: Optional[bool] = None
    sort_order: Optional[int] = None


class LanguageListResponse(BaseModel):
    languages: List[LanguageRead]
