"""
Category entity model.

Categories are one of the two classification dimensions of a mantra
(e.g. Prosperity, Protection, Wisdom).
"""

from typing import Optional

from sqlalchemy import Text
from sqlmodel import Field

from ..base import TableBase


class Category(TableBase, table=True):
    """Mantra category.

    Table: categories
    """

    __tablename__ = "categories"
    __table_args__ = ({"extend_existing": True},)

    name: str = Field(max_length=255, unique=True, description="Category name")
    description: Optional[str] = Field(default=None, sa_type=Text, description="Category description")

    def __repr__(self) -> str:
        return f"Category(id={self.id}, name={self.name})"
