"""
Recitation metadata repositories.

Counts, times, kalams and time ranges are plain lookup tables; each repository
only fixes the model and the listing order.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from ..entities.recitation import Kalam, RecitationCount, RecitationTime, TimeRange
from .base import SqlModelRepository


class RecitationCountRepository(SqlModelRepository[RecitationCount]):
    default_order = (RecitationCount.count_value,)

    def __init__(self, session: AsyncSession):
        super().__init__(session, RecitationCount)


class RecitationTimeRepository(SqlModelRepository[RecitationTime]):
    default_order = (RecitationTime.name,)

    def __init__(self, session: AsyncSession):
        super().__init__(session, RecitationTime)


class KalamRepository(SqlModelRepository[Kalam]):
    default_order = (Kalam.name,)

    def __init__(self, session: AsyncSession):
        super().__init__(session, Kalam)


class TimeRangeRepository(SqlModelRepository[TimeRange]):
    default_order = (TimeRange.start_time,)

    def __init__(self, session: AsyncSession):
        super().__init__(session, TimeRange)
