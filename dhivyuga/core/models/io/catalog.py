"""
Catalog I/O models for API requests and responses.

Covers the classification tables a mantra links to: categories, deities
(including the graha attributes) and the recitation metadata tables
(counts, times, kalams and time ranges).
"""

from __future__ import annotations

import uuid
from datetime import datetime, time
from typing import Any, ClassVar, FrozenSet, List, Optional

from pydantic import BaseModel, Field, ValidationInfo, field_validator


class PartialUpdate(BaseModel):
    """Base of the PATCH schemas.

    Omitted fields are left unchanged. An explicit null is only accepted for
    the fields listed in ``nullable_fields``.
    """

    nullable_fields: ClassVar[FrozenSet[str]] = frozenset()

    @field_validator("*")
    @classmethod
    def _reject_null(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None and info.field_name not in cls.nullable_fields:
            raise ValueError(f"{info.field_name} may not be null")
        return value


# =====================================================================
# Categories
# =====================================================================


class CategoryRead(BaseModel):
    """Schema for reading a category from API."""

    id: uuid.UUID
    name: str
    description: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True


class CategoryWithCount(CategoryRead):
    mantra_count: int = Field(default=0, description="Number of mantras in this category")


class CategoryCreate(BaseModel):
    """Schema for creating a category via API."""

    name: str = Field(min_length=1, max_length=255, description="Unique category name")
    description: Optional[str] = None


class CategoryUpdate(PartialUpdate):
    """Schema for updating a category via API."""

    nullable_fields = frozenset({"description"})

    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = None


class CategoryListResponse(BaseModel):
    categories: List[CategoryWithCount]


# =====================================================================
# Deities
# =====================================================================


class DeityRead(BaseModel):
    """Schema for reading a deity from API."""

    id: uuid.UUID
    name: str
    description: Optional[str] = None
    sanskrit_name: Optional[str] = None
    day_of_week: Optional[str] = None
    color: Optional[str] = None
    gemstone: Optional[str] = None
    metal: Optional[str] = None
    element: Optional[str] = None
    direction: Optional[str] = None
    is_active: bool = True
    created_at: datetime

    class Config:
        from_attributes = True


class DeityWithCount(DeityRead):
    mantra_count: int = Field(default=0, description="Number of mantras addressed to this deity")


class DeityCreate(BaseModel):
    """Schema for creating a deity via API."""

    name: str = Field(min_length=1, max_length=255, description="Unique deity name")
    description: Optional[str] = None
    sanskrit_name: Optional[str] = None
    day_of_week: Optional[str] = None
    color: Optional[str] = None
    gemstone: Optional[str] = None
    metal: Optional[str] = None
    element: Optional[str] = None
    direction: Optional[str] = None
    is_active: bool = Field(default=True, description="Whether the deity is listed publicly")


class DeityUpdate(PartialUpdate):
    """Schema for updating a deity via API."""

    nullable_fields = frozenset(
        {"description", "sanskrit_name", "day_of_week", "color", "gemstone", "metal", "element", "direction"}
    )

    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = None
    sanskrit_name: Optional[str] = None
    day_of_week: Optional[str] = None
    color: Optional[str] = None
    gemstone: Optional[str] = None
    metal: Optional[str] = None
    element: Optional[str] = None
    direction: Optional[str] = None
    is_active: Optional[bool] = None


class DeityListResponse(BaseModel):
    deities: List[DeityWithCount]


class GrahaListResponse(BaseModel):
    grahas: List[DeityWithCount]


class SeedGrahasResponse(BaseModel):
    message: str
    count: int
    grahas: List[DeityRead]


# =====================================================================
# Recitation metadata
# =====================================================================


class RecitationCountRead(BaseModel):
    id: uuid.UUID
    count_value: int
    description: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True


class RecitationCountCreate(BaseModel):
    count_value: int = Field(ge=1, description="Number of repetitions")
    description: Optional[str] = None


class RecitationCountUpdate(PartialUpdate):
    nullable_fields = frozenset({"description"})

    count_value: Optional[int] = Field(default=None, ge=1)
    description: Optional[str] = None


class RecitationTimeRead(BaseModel):
    id: uuid.UUID
    name: str
    description: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True


class RecitationTimeCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    description: Optional[str] = None


class RecitationTimeUpdate(PartialUpdate):
    nullable_fields = frozenset({"description"})

    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = None


class KalamRead(BaseModel):
    id: uuid.UUID
    name: str
    planet: Optional[str] = None
    description: Optional[str] = None
    is_auspicious: bool = False
    created_at: datetime

    class Config:
        from_attributes = True


class KalamCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    planet: Optional[str] = None
    description: Optional[str] = None
    is_auspicious: bool = False


class KalamUpdate(PartialUpdate):
    nullable_fields = frozenset({"planet", "description"})

    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    planet: Optional[str] = None
    description: Optional[str] = None
    is_auspicious: Optional[bool] = None


class TimeRangeRead(BaseModel):
    id: uuid.UUID
    start_time: time
    end_time: time
    description: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True


class TimeRangeCreate(BaseModel):
    start_time: time = Field(description="Start of the window (HH:MM[:SS])")
    end_time: time = Field(description="End of the window (HH:MM[:SS])")
    description: Optional[str] = None


class TimeRangeUpdate(PartialUpdate):
    nullable_fields = frozenset({"description"})

    start_time: Optional[time] = None
    end_time: Optional[time] = None
    description: Optional[str] = None


class FiltersResponse(BaseModel):
    """Options for the search filter dropdowns."""

    categories: List[CategoryRead]
    deities: List[DeityRead]
    recitation_times: List[RecitationTimeRead]
    kalams: List[KalamRead]
