"""
Profile repository.

Emails are stored lower-cased; lookups lower-case their argument the same way.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.profiles import ROLE_ADMIN, Profile
from .base import SqlModelRepository


class ProfileRepository(SqlModelRepository[Profile]):
    """Repository for the profiles table."""

    default_order = (Profile.email,)

    def __init__(self, session: AsyncSession):
        super().__init__(session, Profile)

    async def create(self, entity: Profile) -> Profile:
        entity.email = entity.email.strip().lower()
        return await super().create(entity)

    async def get_by_email(self, email: str) -> Optional[Profile]:
        result = await self.session.execute(select(Profile).where(Profile.email == email.strip().lower()))
        return result.scalars().first()

    async def admin_exists(self) -> bool:
        stmt = select(func.count()).select_from(Profile).where(Profile.role == ROLE_ADMIN)
        result = await self.session.execute(stmt)
        return result.scalar_one() > 0
