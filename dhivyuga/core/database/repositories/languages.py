"""
Language repository.
"""

from __future__ import annotations

from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from ..entities.languages import Language
from .base import SqlModelRepository


class LanguageRepository(SqlModelRepository[Language]):
    """Repository for the languages table."""

    default_order = (Language.sort_order, Language.name)

    def __init__(self, session: AsyncSession):
        super().__init__(session, Language)

    async def list_active(self) -> List[Language]:
        return await self.list(filters={"is_active": True})
