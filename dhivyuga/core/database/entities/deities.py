"""
Deity entity model.

Deities classify mantras. The nine grahas (planetary deities) are ordinary
deity rows that additionally carry their astrological attributes.
"""

from typing import Optional

from sqlalchemy import Text
from sqlmodel import Field

from ..base import TableBase


class Deity(TableBase, table=True):
    """Deity a mantra is addressed to.

    Table: deities
    """

    __tablename__ = "deities"
    __table_args__ = ({"extend_existing": True},)

    name: str = Field(max_length=255, unique=True, description="Deity name")
    description: Optional[str] = Field(default=None, sa_type=Text, description="Deity description")
    is_active: bool = Field(default=True, index=True, description="Whether the deity is listed publicly")

    # Graha attributes
    sanskrit_name: Optional[str] = Field(default=None, max_length=255)
    day_of_week: Optional[str] = Field(default=None, max_length=32)
    color: Optional[str] = Field(default=None, max_length=64)
    gemstone: Optional[str] = Field(default=None, max_length=64)
    metal: Optional[str] = Field(default=None, max_length=64)
    element: Optional[str] = Field(default=None, max_length=64)
    direction: Optional[str] = Field(default=None, max_length=64)

    def __repr__(self) -> str:
        return f"Deity(id={self.id}, name={self.name})"
