"""
I/O models for API requests and responses.

This package contains Pydantic-based I/O schemas that define the contract
between API endpoints and clients. These models are separate from database
entities to allow independent evolution of API contracts.

Modules:
- catalog: Categories, deities and recitation metadata
- mantras: Mantras, search and autocomplete
- languages: Translation languages
- translations: Per-language mantra translations
- auth: Login, tokens and profiles
- analytics: Admin dashboard statistics
"""

from .analytics import PopularMantra, StatsResponse
from .auth import AdminCreate, LoginRequest, ProfileRead, TokenResponse
from .catalog import (
    CategoryCreate,
    CategoryListResponse,
    CategoryRead,
    CategoryUpdate,
    CategoryWithCount,
    DeityCreate,
    DeityListResponse,
    DeityRead,
    DeityUpdate,
    DeityWithCount,
    FiltersResponse,
    GrahaListResponse,
    KalamCreate,
    KalamRead,
    KalamUpdate,
    RecitationCountCreate,
    RecitationCountRead,
    RecitationCountUpdate,
    RecitationTimeCreate,
    RecitationTimeRead,
    RecitationTimeUpdate,
    SeedGrahasResponse,
    TimeRangeCreate,
    TimeRangeRead,
    TimeRangeUpdate,
)
from .languages import LanguageCreate, LanguageListResponse, LanguageRead, LanguageUpdate
from .mantras import (
    AutocompleteResponse,
    MantraCreate,
    MantraDetailResponse,
    MantraListResponse,
    MantraRead,
    MantraUpdate,
    SearchResponse,
    Suggestion,
    ViewResponse,
)
from .translations import (
    SuccessResponse,
    TranslationCreate,
    TranslationDraft,
    TranslationListResponse,
    TranslationRead,
    TranslationResponse,
    TranslationSaveResponse,
    TranslationUpdate,
)

__all__ = [
    "AdminCreate",
    "AutocompleteResponse",
    "CategoryCreate",
    "CategoryListResponse",
    "CategoryRead",
    "CategoryUpdate",
    "CategoryWithCount",
    "DeityCreate",
    "DeityListResponse",
    "DeityRead",
    "DeityUpdate",
    "DeityWithCount",
    "FiltersResponse",
    "GrahaListResponse",
    "KalamCreate",
    "KalamRead",
    "KalamUpdate",
    "LanguageCreate",
    "LanguageListResponse",
    "LanguageRead",
    "LanguageUpdate",
    "LoginRequest",
    "MantraCreate",
    "MantraDetailResponse",
    "MantraListResponse",
    "MantraRead",
    "MantraUpdate",
    "PopularMantra",
    "ProfileRead",
    "RecitationCountCreate",
    "RecitationCountRead",
    "RecitationCountUpdate",
    "RecitationTimeCreate",
    "RecitationTimeRead",
    "RecitationTimeUpdate",
    "SearchResponse",
    "SeedGrahasResponse",
    "StatsResponse",
    "SuccessResponse",
    "Suggestion",
    "TimeRangeCreate",
    "TimeRangeRead",
    "TimeRangeUpdate",
    "TokenResponse",
    "TranslationCreate",
    "TranslationDraft",
    "TranslationListResponse",
    "TranslationRead",
    "TranslationResponse",
    "TranslationSaveResponse",
    "TranslationUpdate",
    "ViewResponse",
]
