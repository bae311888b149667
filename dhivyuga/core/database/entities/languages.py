"""
Language entity model.

Languages a mantra can be translated into. ``sort_order`` drives the order of
translation tabs and of translation listings.
"""

from typing import Optional

from sqlmodel import Field

from ..base import TableBase


class Language(TableBase, table=True):
    """Translation language.

    Table: languages
    """

    __tablename__ = "languages"
    __table_args__ = ({"extend_existing": True},)

    code: str = Field(max_length=16, unique=True, description="Language code (e.g. 'en', 'ta')")
    name: str = Field(max_length=128, description="English name of the language")
    native_name: Optional[str] = Field(default=None, max_length=128, description="Name in the language itself")
    direction: str = Field(default="ltr", max_length=3, description="Text direction: ltr or rtl")
    is_active: bool = Field(default=True, index=True)
    sort_order: int = Field(default=0, index=True)

    def __repr__(self) -> str:
        return f"Language(id={self.id}, code={self.code})"
