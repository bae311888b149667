"""
Request Dependencies.

Provides the database session and the authenticated profile to API
endpoints. Admin-only endpoints depend on :func:`get_current_admin`.
"""

import uuid
from typing import Annotated, Optional

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from dhivyuga.core.database import get_session
from dhivyuga.core.database.entities import Profile
from dhivyuga.core.database.repositories import ProfileRepository
from dhivyuga.core.logging_config import get_logger

from .security import AuthSecurityError, decode_access_token

logger = get_logger(__name__)

SessionDep = Annotated[AsyncSession, Depends(get_session)]


def _extract_bearer_token(authorization: Optional[str]) -> str:
    raw = (authorization or "").strip()
    if not raw:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing Authorization header.",
        )

    parts = raw.split(" ", 1)
    if len(parts) != 2:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid Authorization header format.",
        )

    scheme, token = parts[0].strip().lower(), parts[1].strip()
    if scheme != "bearer" or not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authorization must be: Bearer <token>.",
        )
    return token


async def _profile_from_token(token: str, session: AsyncSession) -> Profile:
    try:
        payload = decode_access_token(token)
        profile_id = uuid.UUID(str(payload.get("sub")))
    except (AuthSecurityError, ValueError) as exc:
        logger.info(f"Rejected access token: {exc}")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid access token.") from exc

    profile = await ProfileRepository(session).get_by_id(profile_id)
    if profile is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid access token owner.")
    if not profile.is_active:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Profile is inactive.")
    return profile


async def get_current_profile(
    session: SessionDep,
    authorization: Optional[str] = Header(default=None),
) -> Profile:
    return await _profile_from_token(_extract_bearer_token(authorization), session)


async def get_optional_profile(
    session: SessionDep,
    authorization: Optional[str] = Header(default=None),
) -> Optional[Profile]:
    """Like :func:`get_current_profile`, but anonymous requests yield None."""
    if not (authorization or "").strip():
        return None
    return await _profile_from_token(_extract_bearer_token(authorization), session)


async def get_current_admin(profile: Profile = Depends(get_current_profile)) -> Profile:
    if not profile.is_admin:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin privileges required.")
    return profile
