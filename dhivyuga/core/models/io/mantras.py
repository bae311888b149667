"""
Mantra I/O models for API requests and responses.

``MantraRead`` embeds every classification row the mantra links to (or null),
so clients can render a mantra card without further requests.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from .catalog import (
    CategoryRead,
    DeityRead,
    KalamRead,
    PartialUpdate,
    RecitationCountRead,
    RecitationTimeRead,
    TimeRangeRead,
)


class MantraRead(BaseModel):
    """Schema for reading a mantra from API."""

    id: uuid.UUID
    title: str
    text: str
    category_id: Optional[uuid.UUID] = None
    deity_id: Optional[uuid.UUID] = None
    count_id: Optional[uuid.UUID] = None
    time_id: Optional[uuid.UUID] = None
    kalam_id: Optional[uuid.UUID] = None
    range_id: Optional[uuid.UUID] = None
    view_count: int = 0
    created_at: datetime
    updated_at: datetime

    category: Optional[CategoryRead] = None
    deity: Optional[DeityRead] = None
    recitation_count: Optional[RecitationCountRead] = None
    recitation_time: Optional[RecitationTimeRead] = None
    kalam: Optional[KalamRead] = None
    time_range: Optional[TimeRangeRead] = None

    class Config:
        from_attributes = True


class MantraCreate(BaseModel):
    """Schema for creating a mantra via API."""

    title: str = Field(min_length=1, max_length=500, description="Mantra title")
    text: str = Field(min_length=1, description="Mantra text")
    category_id: Optional[uuid.UUID] = None
    deity_id: Optional[uuid.UUID] = None
    count_id: Optional[uuid.UUID] = None
    time_id: Optional[uuid.UUID] = None
    kalam_id: Optional[uuid.UUID] = None
    range_id: Optional[uuid.UUID] = None


class MantraUpdate(PartialUpdate):
    """Schema for updating a mantra via API.

    Link fields may be set to null explicitly to clear them.
    """

    nullable_fields = frozenset({"category_id", "deity_id", "count_id", "time_id", "kalam_id", "range_id"})

    title: Optional[str] = Field(default=None, min_length=1, max_length=500)
    text: Optional[str] = Field(default=None, min_length=1)
    category_id: Optional[uuid.UUID] = None
    deity_id: Optional[uuid.UUID] = None
    count_id: Optional[uuid.UUID] = None
    time_id: Optional[uuid.UUID] = None
    kalam_id: Optional[uuid.UUID] = None
    range_id: Optional[uuid.UUID] = None


class MantraListResponse(BaseModel):
    mantras: List[MantraRead]


class SearchResponse(BaseModel):
    mantras: List[MantraRead]
    total: int = Field(description="Number of mantras returned")


class MantraDetailResponse(BaseModel):
    mantra: MantraRead
    related_mantras: List[MantraRead]


class ViewResponse(BaseModel):
    success: bool = True
    view_count: int


class Suggestion(BaseModel):
    text: str
    type: Literal["mantra", "deity", "category"]


class AutocompleteResponse(BaseModel):
    suggestions: List[Suggestion]
