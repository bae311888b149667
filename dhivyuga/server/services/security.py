"""
Auth security helpers.

Passwords are hashed with bcrypt; access tokens are JWTs signed with the
secret and algorithm from ``settings.auth``.
"""

from __future__ import annotations

import time
from typing import Any

import bcrypt
import jwt

from dhivyuga.server.core.config import settings


class AuthSecurityError(RuntimeError):
    pass


def now_epoch_s() -> int:
    return int(time.time())


def hash_password(plain_password: str) -> str:
    password = (plain_password or "").encode("utf-8")
    if not password:
        raise AuthSecurityError("Password is empty.")
    return bcrypt.hashpw(password, bcrypt.gensalt()).decode("utf-8")


def verify_password(plain_password: str, password_hash: str) -> bool:
    password = (plain_password or "").encode("utf-8")
    hashed = (password_hash or "").encode("utf-8")
    if not password or not hashed:
        return False
    try:
        return bcrypt.checkpw(password, hashed)
    except ValueError:
        return False


def build_access_token(*, profile_id: str, email: str, role: str) -> str:
    auth = settings.auth
    issued_at = now_epoch_s()
    payload = {
        "sub": profile_id,
        "email": email,
        "role": role,
        "type": "access",
        "iat": issued_at,
        "exp": issued_at + auth.access_token_expire_minutes * 60,
    }
    return jwt.encode(payload, auth.jwt_secret, algorithm=auth.jwt_algorithm)


def decode_access_token(token: str) -> dict[str, Any]:
    raw = (token or "").strip()
    if not raw:
        raise AuthSecurityError("Access token is empty.")

    auth = settings.auth
    try:
        payload = jwt.decode(raw, auth.jwt_secret, algorithms=[auth.jwt_algorithm])
    except jwt.InvalidTokenError as exc:
        raise AuthSecurityError("Invalid access token.") from exc

    if str(payload.get("type") or "").strip().lower() != "access":
        raise AuthSecurityError("Token is not an access token.")
    return payload
