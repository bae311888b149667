"""
API endpoints for admin authentication.

Profiles sign in with email and password and receive a bearer access token.
The very first admin can be created without a token; once an admin exists,
only admins may create further admins.
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from dhivyuga.core.database import get_session
from dhivyuga.core.database.entities import ROLE_ADMIN, Profile
from dhivyuga.core.database.repositories import ProfileRepository
from dhivyuga.core.logging_config import get_logger
from dhivyuga.core.models.io import AdminCreate, LoginRequest, ProfileRead, TokenResponse
from dhivyuga.server.services.deps import get_current_profile, get_optional_profile
from dhivyuga.server.services.security import build_access_token, hash_password, verify_password

logger = get_logger(__name__)

router = APIRouter(tags=["auth"])


@router.post(
    "/login",
    response_model=TokenResponse,
    summary="Sign In",
    description="Exchange email and password for a bearer access token.",
    responses={
        200: {"description": "Signed in"},
        401: {"description": "Invalid email or password"},
        403: {"description": "Profile is inactive"},
    },
)
async def login(payload: LoginRequest, session: AsyncSession = Depends(get_session)) -> TokenResponse:
    profile = await ProfileRepository(session).get_by_email(payload.email)
    if profile is None or not verify_password(payload.password, profile.password_hash):
        logger.info("Failed sign-in attempt")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password.",
        )
    if not profile.is_active:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Profile is inactive.",
        )

    token = build_access_token(profile_id=str(profile.id), email=profile.email, role=profile.role)
    return TokenResponse(access_token=token, token_type="bearer", profile=ProfileRead.model_validate(profile))


@router.get(
    "/me",
    response_model=ProfileRead,
    summary="Current Profile",
    description="Return the profile the bearer token belongs to.",
    responses={401: {"description": "Missing or invalid access token"}},
)
async def me(profile: Profile = Depends(get_current_profile)) -> ProfileRead:
    return ProfileRead.model_validate(profile)


@router.post(
    "/admins",
    response_model=ProfileRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Admin",
    description="Create an admin profile. Open while no admin exists; afterwards an admin token is required.",
    responses={
        201: {"description": "Admin created"},
        401: {"description": "An admin already exists and no valid token was given"},
        403: {"description": "The caller is not an admin"},
        409: {"description": "A profile with this email already exists"},
    },
)
async def create_admin(
    payload: AdminCreate,
    session: AsyncSession = Depends(get_session),
    caller: Optional[Profile] = Depends(get_optional_profile),
) -> ProfileRead:
    """
    Create an admin profile.

    The first call on an empty installation bootstraps the initial admin.
    Every later call must carry the bearer token of an existing admin.

    - **email**: Sign-in email, stored lower-cased.
    - **password**: At least 8 characters.
    - **full_name**: Optional display name.
    """
    repo = ProfileRepository(session)
    if await repo.admin_exists():
        if caller is None:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Missing Authorization header.",
            )
        if not caller.is_admin:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Admin privileges required.",
            )
    else:
        logger.info("No admin profile exists yet; creating the initial admin")

    profile = await repo.create(
        Profile(
            email=payload.email,
            full_name=payload.full_name,
            role=ROLE_ADMIN,
            password_hash=hash_password(payload.password),
        )
    )
    logger.info(f"Admin profile {profile.id} created")
    return ProfileRead.model_validate(profile)
