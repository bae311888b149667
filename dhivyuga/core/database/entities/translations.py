"""
Mantra translation entity model.

A translation is keyed by (mantra, language): each mantra has at most one
translation per language. Rows are removed together with their mantra or
their language.
"""

import uuid
from datetime import datetime
from typing import List, Optional

from sqlalchemy import JSON, DateTime, Text, UniqueConstraint
from sqlmodel import Field, Relationship

from ..base import TableBase, utc_now
from .languages import Language


class MantraTranslation(TableBase, table=True):
    """Per-language rendition of a mantra.

    Table: mantra_translations
    """

    __tablename__ = "mantra_translations"
    __table_args__ = (
        UniqueConstraint("mantra_id", "language_id", name="uq_mantra_translations_mantra_language"),
        {"extend_existing": True},
    )

    mantra_id: uuid.UUID = Field(foreign_key="mantras.id", ondelete="CASCADE", index=True)
    language_id: uuid.UUID = Field(foreign_key="languages.id", ondelete="CASCADE", index=True)

    text: str = Field(sa_type=Text)
    transliteration: Optional[str] = Field(default=None, sa_type=Text)
    pronunciation_guide: Optional[str] = Field(default=None, sa_type=Text)
    meaning: Optional[str] = Field(default=None, sa_type=Text)
    benefits: List[str] = Field(default_factory=list, sa_type=JSON)
    usage_notes: Optional[str] = Field(default=None, sa_type=Text)

    updated_at: datetime = Field(
        default_factory=utc_now,
        sa_type=DateTime(timezone=True),  # type: ignore
        sa_column_kwargs={"onupdate": utc_now},
    )

    language: Optional[Language] = Relationship(sa_relationship_kwargs={"lazy": "selectin"})

    def __repr__(self) -> str:
        return f"MantraTranslation(id={self.id}, mantra_id={self.mantra_id}, language_id={self.language_id})"
