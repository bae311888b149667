"""
Repositories for the database layer.

Each repository wraps an ``AsyncSession`` and exposes the queries of one
table (or one family of tables).
"""

from .base import AsyncBaseRepository, QueryBuilder, SqlModelRepository
from .categories import CategoryRepository
from .deities import GRAHAS, DeityRepository
from .languages import LanguageRepository
from .mantras import MantraRepository
from .profiles import ProfileRepository
from .recitation import (
    KalamRepository,
    RecitationCountRepository,
    RecitationTimeRepository,
    TimeRangeRepository,
)
from .translations import TranslationRepository

__all__ = [
    "AsyncBaseRepository",
    "CategoryRepository",
    "DeityRepository",
    "GRAHAS",
    "KalamRepository",
    "LanguageRepository",
    "MantraRepository",
    "ProfileRepository",
    "QueryBuilder",
    "RecitationCountRepository",
    "RecitationTimeRepository",
    "SqlModelRepository",
    "TimeRangeRepository",
    "TranslationRepository",
]
