"""
Mantra entity model.

A mantra links to at most one row of each classification table. Every link
is nullable and uses ``ON DELETE SET NULL``, so removing a deity or a
category never removes the mantras that referenced it.

Relationships are loaded with ``selectin`` so API responses can embed the
related rows without lazy loading inside the async session.
"""

import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Text
from sqlmodel import Field, Relationship

from ..base import TableBase, utc_now
from .categories import Category
from .deities import Deity
from .recitation import Kalam, RecitationCount, RecitationTime, TimeRange

_EAGER = {"lazy": "selectin"}


class Mantra(TableBase, table=True):
    """Sacred verse record.

    Table: mantras
    """

    __tablename__ = "mantras"
    __table_args__ = ({"extend_existing": True},)

    title: str = Field(max_length=500, index=True)
    text: str = Field(sa_type=Text)

    category_id: Optional[uuid.UUID] = Field(default=None, foreign_key="categories.id", ondelete="SET NULL", index=True)
    deity_id: Optional[uuid.UUID] = Field(default=None, foreign_key="deities.id", ondelete="SET NULL", index=True)
    count_id: Optional[uuid.UUID] = Field(default=None, foreign_key="recitation_counts.id", ondelete="SET NULL")
    time_id: Optional[uuid.UUID] = Field(default=None, foreign_key="recitation_times.id", ondelete="SET NULL", index=True)
    kalam_id: Optional[uuid.UUID] = Field(default=None, foreign_key="kalams.id", ondelete="SET NULL", index=True)
    range_id: Optional[uuid.UUID] = Field(default=None, foreign_key="time_ranges.id", ondelete="SET NULL")

    view_count: int = Field(default=0, ge=0, index=True)
    updated_at: datetime = Field(
        default_factory=utc_now,
        sa_type=DateTime(timezone=True),  # type: ignore
        sa_column_kwargs={"onupdate": utc_now},
    )

    category: Optional[Category] = Relationship(sa_relationship_kwargs=_EAGER)
    deity: Optional[Deity] = Relationship(sa_relationship_kwargs=_EAGER)
    recitation_count: Optional[RecitationCount] = Relationship(sa_relationship_kwargs=_EAGER)
    recitation_time: Optional[RecitationTime] = Relationship(sa_relationship_kwargs=_EAGER)
    kalam: Optional[Kalam] = Relationship(sa_relationship_kwargs=_EAGER)
    time_range: Optional[TimeRange] = Relationship(sa_relationship_kwargs=_EAGER)

    def __repr__(self) -> str:
        return f"Mantra(id={self.id}, title={self.title}, views={self.view_count})"
