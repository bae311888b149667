"""
Analytics I/O models for the admin dashboard.
"""

from __future__ import annotations

import uuid
from typing import List

from pydantic import BaseModel


class PopularMantra(BaseModel):
    id: uuid.UUID
    title: str
    view_count: int

    class Config:
        from_attributes = True


class StatsResponse(BaseModel):
    total_mantras: int
    total_views: int
    total_categories: int
    total_deities: int
    popular_mantras: List[PopularMantra]
