"""
Unit tests for language API endpoints.
"""

import uuid

import pytest
from httpx import AsyncClient

from dhivyuga.core.database.entities import Language, Mantra, MantraTranslation

pytestmark = pytest.mark.asyncio


class TestListLanguages:
    async def test_active_languages_in_sort_order(self, client: AsyncClient, seed):
        await seed.add(
            Language(code="ta", name="Tamil", native_name="தமிழ்", sort_order=1),
            Language(code="en", name="English", sort_order=0),
            Language(code="sa", name="Sanskrit", sort_order=3, is_active=False),
            Language(code="hi", name="Hindi", sort_order=1),
        )

        response = await client.get("/api/v1/languages")
        assert response.status_code == 200
        assert [lang["code"] for lang in response.json()["languages"]] == ["en", "hi", "ta"]


class TestCreateLanguage:
    async def test_defaults(self, client: AsyncClient, admin_headers):
        response = await client.post(
            "/api/v1/languages", json={"code": "te", "name": "Telugu"}, headers=admin_headers
        )
        assert response.status_code == 201
        data = response.json()
        assert data["direction"] == "ltr"
        assert data["sort_order"] == 0
        assert data["is_active"] is True

    async def test_rtl_direction(self, client: AsyncClient, admin_headers):
        response = await client.post(
            "/api/v1/languages",
            json={"code": "ur", "name": "Urdu", "direction": "rtl"},
            headers=admin_headers,
        )
        assert response.status_code == 201
        assert response.json()["direction"] == "rtl"

    async def test_invalid_direction(self, client: AsyncClient, admin_headers):
        response = await client.post(
            "/api/v1/languages",
            json={"code": "xx", "name": "Sideways", "direction": "ttb"},
            headers=admin_headers,
        )
        assert response.status_code == 422

    async def test_duplicate_code(self, client: AsyncClient, seed, admin_headers):
        await seed.add(Language(code="kn", name="Kannada"))
        response = await client.post(
            "/api/v1/languages", json={"code": "kn", "name": "Kannada again"}, headers=admin_headers
        )
        assert response.status_code == 409
        assert response.json()["error_type"] == "IntegrityError"

    async def test_requires_admin(self, client: AsyncClient, user_headers):
        response = await client.post("/api/v1/languages", json={"code": "ml", "name": "Malayalam"}, headers=user_headers)
        assert response.status_code == 403


class TestUpdateDeleteLanguage:
    async def test_deactivate_hides_from_listing(self, client: AsyncClient, seed, admin_headers):
        language = await seed.add(Language(code="ml", name="Malayalam"))
        response = await client.patch(
            f"/api/v1/languages/{language.id}", json={"is_active": False}, headers=admin_headers
        )
        assert response.status_code == 200

        listed = await client.get("/api/v1/languages")
        assert listed.json()["languages"] == []

    @pytest.mark.parametrize("field", ["code", "name", "is_active"])
    async def test_null_for_required_field_rejected(self, client: AsyncClient, seed, admin_headers, field):
        language = await seed.add(Language(code="kn", name="Kannada"))
        response = await client.patch(
            f"/api/v1/languages/{language.id}", json={field: None}, headers=admin_headers
        )
        assert response.status_code == 422

        stored = await seed.get(Language, language.id)
        assert (stored.code, stored.name, stored.is_active) == ("kn", "Kannada", True)

    async def test_delete_removes_translations(self, client: AsyncClient, seed, admin_headers):
        language = await seed.add(Language(code="ta", name="Tamil"))
        mantra = await seed.add(Mantra(title="Om", text="Om"))
        translation = await seed.add(MantraTranslation(mantra_id=mantra.id, language_id=language.id, text="ஓம்"))

        response = await client.delete(f"/api/v1/languages/{language.id}", headers=admin_headers)
        assert response.status_code == 204
        assert await seed.get(MantraTranslation, translation.id) is None
        assert await seed.get(Mantra, mantra.id) is not None

    async def test_missing_language(self, client: AsyncClient, admin_headers):
        response = await client.delete(f"/api/v1/languages/{uuid.uuid4()}", headers=admin_headers)
        assert response.status_code == 404
