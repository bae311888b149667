"""
Recitation metadata entity models.

These small lookup tables describe how and when a mantra is recited:
- recitation_counts: how many repetitions (e.g. 108)
- recitation_times: the time of day (e.g. Brahma Muhurta)
- kalams: auspicious or inauspicious periods (e.g. Rahu Kalam)
- time_ranges: a clock window for recitation
"""

from datetime import time
from typing import Optional

from sqlalchemy import Text
from sqlmodel import Field

from ..base import TableBase


class RecitationCount(TableBase, table=True):
    """Number of repetitions recommended for a mantra.

    Table: recitation_counts
    """

    __tablename__ = "recitation_counts"
    __table_args__ = ({"extend_existing": True},)

    count_value: int = Field(ge=1, description="Number of repetitions")
    description: Optional[str] = Field(default=None, sa_type=Text)

    def __repr__(self) -> str:
        return f"RecitationCount(id={self.id}, count_value={self.count_value})"


class RecitationTime(TableBase, table=True):
    """Time of day recommended for recitation.

    Table: recitation_times
    """

    __tablename__ = "recitation_times"
    __table_args__ = ({"extend_existing": True},)

    name: str = Field(max_length=255)
    description: Optional[str] = Field(default=None, sa_type=Text)

    def __repr__(self) -> str:
        return f"RecitationTime(id={self.id}, name={self.name})"


class Kalam(TableBase, table=True):
    """Auspicious or inauspicious period of the day.

    Table: kalams
    """

    __tablename__ = "kalams"
    __table_args__ = ({"extend_existing": True},)

    name: str = Field(max_length=255)
    planet: Optional[str] = Field(default=None, max_length=64)
    description: Optional[str] = Field(default=None, sa_type=Text)
    is_auspicious: bool = Field(default=False)

    def __repr__(self) -> str:
        return f"Kalam(id={self.id}, name={self.name}, auspicious={self.is_auspicious})"


class TimeRange(TableBase, table=True):
    """Clock window for recitation.

    Table: time_ranges
    """

    __tablename__ = "time_ranges"
    __table_args__ = ({"extend_existing": True},)

    start_time: time
    end_time: time
    description: Optional[str] = Field(default=None, sa_type=Text)

    def __repr__(self) -> str:
        return f"TimeRange(id={self.id}, {self.start_time}-{self.end_time})"
