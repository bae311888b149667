"""
Mantra translation repository.

Translations are always addressed through their mantra: every lookup takes
the mantra id so a translation id belonging to another mantra is treated as
missing.
"""

from __future__ import annotations

import uuid
from typing import Any, Dict, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.languages import Language
from ..entities.translations import MantraTranslation
from .base import SqlModelRepository


class TranslationRepository(SqlModelRepository[MantraTranslation]):
    """Repository for the mantra_translations table."""

    def __init__(self, session: AsyncSession):
        super().__init__(session, MantraTranslation)

    async def _reload(self, translation_id: uuid.UUID) -> Optional[MantraTranslation]:
        stmt = (
            select(MantraTranslation)
            .where(MantraTranslation.id == translation_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def create(self, entity: MantraTranslation) -> MantraTranslation:
        self.session.add(entity)
        await self._commit()
        return await self._reload(entity.id)

    async def update(self, entity: MantraTranslation, changes: Dict[str, Any]) -> MantraTranslation:
        for key, value in changes.items():
            setattr(entity, key, value)
        self.session.add(entity)
        await self._commit()
        return await self._reload(entity.id)

    async def list_for_mantra(self, mantra_id: uuid.UUID) -> List[MantraTranslation]:
        """Translations of a mantra ordered by their language's sort order."""
        stmt = (
            select(MantraTranslation)
            .join(Language, Language.id == MantraTranslation.language_id)
            .where(MantraTranslation.mantra_id == mantra_id)
            .order_by(Language.sort_order, Language.name)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_for_mantra(self, mantra_id: uuid.UUID, translation_id: uuid.UUID) -> Optional[MantraTranslation]:
        stmt = select(MantraTranslation).where(
            MantraTranslation.id == translation_id, MantraTranslation.mantra_id == mantra_id
        )
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def get_by_language(self, mantra_id: uuid.UUID, language_id: uuid.UUID) -> Optional[MantraTranslation]:
        stmt = select(MantraTranslation).where(
            MantraTranslation.mantra_id == mantra_id, MantraTranslation.language_id == language_id
        )
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def delete_entity(self, entity: MantraTranslation) -> None:
        await self.session.delete(entity)
        await self._commit()

    async def save_for_language(
        self, mantra_id: uuid.UUID, language_id: uuid.UUID, fields: Dict[str, Any]
    ) -> Optional[MantraTranslation]:
        """Insert or update the translation of a mantra for one language.

        Args:
            mantra_id: Mantra the translation belongs to
            language_id: Language of the translation
            fields: Translation fields; ``text`` must be non-blank

        Returns:
            The stored translation
        """
        existing = await self.get_by_language(mantra_id, language_id)
        if existing is not None:
            return await self.update(existing, fields)
        return await self.create(MantraTranslation(mantra_id=mantra_id, language_id=language_id, **fields))
