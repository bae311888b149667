"""
Mantra repository.

Holds every read path of the catalog: filtered search, trending, related
mantras, autocomplete titles and the admin analytics aggregates, plus the
atomic view counter.

Full-text search uses PostgreSQL's ``to_tsvector``/``websearch_to_tsquery``
pair (matching the GIN expression index created by the initial migration).
Other dialects fall back to a case-insensitive substring match on the title
or the text.
"""

from __future__ import annotations

import uuid
from typing import Any, Dict, List, Optional

from sqlalchemy import func, literal_column, or_, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from dhivyuga.core.logging_config import get_logger

from ..entities.mantras import Mantra
from ..utils import is_postgres
from .base import QueryBuilder, SqlModelRepository

logger = get_logger(__name__)

SEARCH_CONFIG = "english"


def search_document():
    """The ``to_tsvector`` expression of the ``ix_mantras_fulltext`` index.

    Constants are rendered inline so the planner can match the index expression.
    """
    empty = literal_column("''")
    return func.to_tsvector(
        literal_column(f"'{SEARCH_CONFIG}'"),
        func.coalesce(Mantra.title, empty) + literal_column("' '") + func.coalesce(Mantra.text, empty),
    )


class MantraRepository(SqlModelRepository[Mantra]):
    """Repository for the mantras table."""

    default_order = (Mantra.created_at.desc(),)

    def __init__(self, session: AsyncSession):
        super().__init__(session, Mantra)

    async def get_by_id(self, entity_id: uuid.UUID) -> Optional[Mantra]:
        # populate_existing reloads the eager relationships after a write changed a link
        stmt = select(Mantra).where(Mantra.id == entity_id).execution_options(populate_existing=True)
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def create(self, entity: Mantra) -> Mantra:
        self.session.add(entity)
        await self._commit()
        return await self.get_by_id(entity.id)

    async def update(self, entity: Mantra, changes: Dict[str, Any]) -> Mantra:
        for key, value in changes.items():
            setattr(entity, key, value)
        self.session.add(entity)
        await self._commit()
        return await self.get_by_id(entity.id)

    def _text_condition(self, query: str):
        if is_postgres(self.session):
            config = literal_column(f"'{SEARCH_CONFIG}'")
            return search_document().op("@@")(func.websearch_to_tsquery(config, query))
        return or_(Mantra.title.icontains(query, autoescape=True), Mantra.text.icontains(query, autoescape=True))

    async def search(
        self,
        query: Optional[str] = None,
        category_id: Optional[uuid.UUID] = None,
        deity_id: Optional[uuid.UUID] = None,
        time_id: Optional[uuid.UUID] = None,
        kalam_id: Optional[uuid.UUID] = None,
        limit: int = 20,
    ) -> List[Mantra]:
        """Search the catalog.

        Args:
            query: Free-text query; blank means "no text condition"
            category_id: Only mantras of this category
            deity_id: Only mantras addressed to this deity
            time_id: Only mantras with this recitation time
            kalam_id: Only mantras with this kalam
            limit: Maximum number of mantras returned

        Returns:
            Matching mantras, most viewed first. Without a query, ties are
            broken by newest first.
        """
        stmt = select(Mantra)
        stmt = QueryBuilder.apply_filters(
            stmt,
            Mantra,
            {"category_id": category_id, "deity_id": deity_id, "time_id": time_id, "kalam_id": kalam_id},
        )

        query = (query or "").strip()
        if query:
            stmt = stmt.where(self._text_condition(query)).order_by(Mantra.view_count.desc())
        else:
            stmt = stmt.order_by(Mantra.view_count.desc(), Mantra.created_at.desc())

        result = await self.session.execute(stmt.limit(limit))
        mantras = list(result.scalars().all())
        logger.debug(f"Search q={query!r} returned {len(mantras)} mantras")
        return mantras

    async def trending(self, limit: int = 6) -> List[Mantra]:
        stmt = select(Mantra).order_by(Mantra.view_count.desc(), Mantra.created_at.desc()).limit(limit)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def related(self, mantra: Mantra, limit: int = 4) -> List[Mantra]:
        """Mantras sharing the deity or the category of ``mantra``, excluding itself."""
        conditions = []
        if mantra.deity_id is not None:
            conditions.append(Mantra.deity_id == mantra.deity_id)
        if mantra.category_id is not None:
            conditions.append(Mantra.category_id == mantra.category_id)
        if not conditions:
            return []

        stmt = (
            select(Mantra)
            .where(or_(*conditions), Mantra.id != mantra.id)
            .order_by(Mantra.view_count.desc())
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def increment_view_count(self, mantra_id: uuid.UUID) -> Optional[int]:
        """Add one view to a mantra in a single UPDATE statement.

        Returns:
            The new view count, or None when the mantra does not exist
        """
        stmt = (
            update(Mantra)
            .where(Mantra.id == mantra_id)
            .values(view_count=Mantra.view_count + 1, updated_at=Mantra.updated_at)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        if result.rowcount == 0:
            await self.session.rollback()
            return None
        await self._commit()

        count = await self.session.execute(select(Mantra.view_count).where(Mantra.id == mantra_id))
        return int(count.scalar_one())

    async def total_views(self) -> int:
        result = await self.session.execute(select(func.coalesce(func.sum(Mantra.view_count), 0)))
        return int(result.scalar_one())

    async def most_viewed(self, limit: int = 5) -> List[Mantra]:
        stmt = select(Mantra).order_by(Mantra.view_count.desc()).limit(limit)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
