"""
Unit tests for sign-in, the current-profile endpoint and admin creation.
"""

import pytest
from httpx import AsyncClient

from dhivyuga.core.database.entities import ROLE_ADMIN, Profile
from dhivyuga.server.services.security import hash_password

ADMIN_PASSWORD = "admin-password-123"
USER_PASSWORD = "user-password-123"

pytestmark = pytest.mark.asyncio


class TestLogin:
    async def test_login_returns_token(self, client: AsyncClient, admin_profile):
        response = await client.post(
            "/api/v1/auth/login", json={"email": "Admin@Dhivyuga.test", "password": ADMIN_PASSWORD}
        )
        assert response.status_code == 200
        data = response.json()
        assert data["token_type"] == "bearer"
        assert data["profile"]["email"] == "admin@dhivyuga.test"
        assert data["profile"]["role"] == ROLE_ADMIN

        me = await client.get("/api/v1/auth/me", headers={"Authorization": f"Bearer {data['access_token']}"})
        assert me.status_code == 200
        assert me.json()["id"] == str(admin_profile.id)

    async def test_wrong_password(self, client: AsyncClient, admin_profile):
        response = await client.post(
            "/api/v1/auth/login", json={"email": "admin@dhivyuga.test", "password": USER_PASSWORD}
        )
        assert response.status_code == 401

    async def test_unknown_email(self, client: AsyncClient):
        response = await client.post(
            "/api/v1/auth/login", json={"email": "nobody@dhivyuga.test", "password": "whatever"}
        )
        assert response.status_code == 401

    async def test_inactive_profile(self, client: AsyncClient, seed):
        await seed.add(
            Profile(
                email="gone@dhivyuga.test",
                role=ROLE_ADMIN,
                is_active=False,
                password_hash=hash_password("gone-password-1"),
            )
        )
        response = await client.post(
            "/api/v1/auth/login", json={"email": "gone@dhivyuga.test", "password": "gone-password-1"}
        )
        assert response.status_code == 403


class TestMe:
    async def test_requires_token(self, client: AsyncClient):
        response = await client.get("/api/v1/auth/me")
        assert response.status_code == 401
        assert response.json()["detail"] == "Missing Authorization header."

    async def test_rejects_garbage_token(self, client: AsyncClient):
        response = await client.get("/api/v1/auth/me", headers={"Authorization": "Bearer not-a-jwt"})
        assert response.status_code == 401

    async def test_rejects_wrong_scheme(self, client: AsyncClient, admin_headers):
        token = admin_headers["Authorization"].split(" ", 1)[1]
        response = await client.get("/api/v1/auth/me", headers={"Authorization": f"Basic {token}"})
        assert response.status_code == 401

    async def test_regular_user(self, client: AsyncClient, user_headers):
        response = await client.get("/api/v1/auth/me", headers=user_headers)
        assert response.status_code == 200
        assert response.json()["role"] == "user"


class TestCreateAdmin:
    async def test_first_admin_needs_no_token(self, client: AsyncClient):
        response = await client.post(
            "/api/v1/auth/admins",
            json={"email": "First@Dhivyuga.test", "password": "first-admin-pw", "full_name": "First"},
        )
        assert response.status_code == 201
        assert response.json()["email"] == "first@dhivyuga.test"
        assert response.json()["role"] == ROLE_ADMIN

        login = await client.post(
            "/api/v1/auth/login", json={"email": "first@dhivyuga.test", "password": "first-admin-pw"}
        )
        assert login.status_code == 200

    async def test_later_admins_need_token(self, client: AsyncClient, admin_profile):
        response = await client.post(
            "/api/v1/auth/admins", json={"email": "second@dhivyuga.test", "password": "second-admin-pw"}
        )
        assert response.status_code == 401

    async def test_non_admin_cannot_create(self, client: AsyncClient, admin_profile, user_headers):
        response = await client.post(
            "/api/v1/auth/admins",
            json={"email": "second@dhivyuga.test", "password": "second-admin-pw"},
            headers=user_headers,
        )
        assert response.status_code == 403

    async def test_admin_creates_admin(self, client: AsyncClient, admin_headers):
        response = await client.post(
            "/api/v1/auth/admins",
            json={"email": "second@dhivyuga.test", "password": "second-admin-pw"},
            headers=admin_headers,
        )
        assert response.status_code == 201

    async def test_duplicate_email(self, client: AsyncClient, admin_headers):
        response = await client.post(
            "/api/v1/auth/admins",
            json={"email": "admin@dhivyuga.test", "password": "another-password"},
            headers=admin_headers,
        )
        assert response.status_code == 409

    async def test_short_password(self, client: AsyncClient):
        response = await client.post("/api/v1/auth/admins", json={"email": "x@dhivyuga.test", "password": "short"})
        assert response.status_code == 422
