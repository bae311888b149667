"""
Category repository.
"""

from __future__ import annotations

from typing import List, Tuple

from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.categories import Category
from ..entities.mantras import Mantra
from .base import SqlModelRepository


class CategoryRepository(SqlModelRepository[Category]):
    """Repository for the categories table."""

    default_order = (Category.name,)

    def __init__(self, session: AsyncSession):
        super().__init__(session, Category)

    async def list_with_mantra_counts(self) -> List[Tuple[Category, int]]:
        """List categories ordered by name, each paired with the number of mantras in it."""
        counts = (
            select(Mantra.category_id, func.count(Mantra.id).label("mantra_count"))
            .group_by(Mantra.category_id)
            .subquery()
        )
        stmt = (
            select(Category, func.coalesce(counts.c.mantra_count, 0))
            .outerjoin(counts, counts.c.category_id == Category.id)
            .order_by(Category.name)
        )
        result = await self.session.execute(stmt)
        return [(category, int(count)) for category, count in result.all()]
