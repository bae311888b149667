"""
Authentication I/O models for API requests and responses.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class ProfileRead(BaseModel):
    """Schema for reading a profile from API. Never carries the password hash."""

    id: uuid.UUID
    email: str
    full_name: Optional[str] = None
    role: str
    is_active: bool
    created_at: datetime

    class Config:
        from_attributes = True


class LoginRequest(BaseModel):
    email: str = Field(min_length=3, max_length=320)
    password: str = Field(min_length=1)


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    profile: ProfileRead


class AdminCreate(BaseModel):
    """Schema for creating an admin profile via API."""

    email: str = Field(min_length=3, max_length=320, pattern=r"^[^@\s]+@[^@\s]+$")
    password: str = Field(min_length=8, description="At least 8 characters")
    full_name: Optional[str] = Field(default=None, max_length=255)
