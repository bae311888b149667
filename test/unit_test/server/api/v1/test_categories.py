"""
Unit tests for category API endpoints.
"""

import uuid

import pytest
from httpx import AsyncClient

from dhivyuga.core.database.entities import Category, Mantra

pytestmark = pytest.mark.asyncio


class TestCategories:
    async def test_created_category_is_listed(self, client: AsyncClient, admin_headers):
        response = await client.post(
            "/api/v1/categories", json={"name": "Prosperity", "description": "Wealth"}, headers=admin_headers
        )
        assert response.status_code == 201
        assert response.json()["name"] == "Prosperity"

        listed = await client.get("/api/v1/categories")
        assert listed.status_code == 200
        assert listed.json()["categories"][0]["name"] == "Prosperity"
        assert listed.json()["categories"][0]["mantra_count"] == 0

    async def test_list_ordered_by_name_with_counts(self, client: AsyncClient, seed):
        wisdom, health = await seed.add(Category(name="Wisdom"), Category(name="Health"))
        await seed.add(Mantra(title="a", text="x", category_id=wisdom.id))

        response = await client.get("/api/v1/categories")
        assert [(c["name"], c["mantra_count"]) for c in response.json()["categories"]] == [
            ("Health", 0),
            ("Wisdom", 1),
        ]

    async def test_duplicate_name_conflicts(self, client: AsyncClient, seed, admin_headers):
        await seed.add(Category(name="Protection"))
        response = await client.post("/api/v1/categories", json={"name": "Protection"}, headers=admin_headers)
        assert response.status_code == 409

    async def test_rename_to_existing_name_conflicts(self, client: AsyncClient, seed, admin_headers):
        _, peace = await seed.add(Category(name="Health"), Category(name="Peace"))
        response = await client.patch(
            f"/api/v1/categories/{peace.id}", json={"name": "Health"}, headers=admin_headers
        )
        assert response.status_code == 409

    async def test_update_and_get(self, client: AsyncClient, seed, admin_headers):
        category = await seed.add(Category(name="Devotion"))
        updated = await client.patch(
            f"/api/v1/categories/{category.id}", json={"description": "Bhakti"}, headers=admin_headers
        )
        assert updated.json()["description"] == "Bhakti"

        fetched = await client.get(f"/api/v1/categories/{category.id}")
        assert fetched.json()["name"] == "Devotion"

    async def test_null_name_rejected(self, client: AsyncClient, seed, admin_headers):
        category = await seed.add(Category(name="Wisdom"))
        response = await client.patch(
            f"/api/v1/categories/{category.id}", json={"name": None}, headers=admin_headers
        )
        assert response.status_code == 422

    async def test_delete_keeps_mantras(self, client: AsyncClient, seed, admin_headers):
        category = await seed.add(Category(name="Temporary"))
        mantra = await seed.add(Mantra(title="Stays", text="x", category_id=category.id))

        response = await client.delete(f"/api/v1/categories/{category.id}", headers=admin_headers)
        assert response.status_code == 204
        assert (await seed.get(Mantra, mantra.id)).category_id is None

    async def test_writes_require_admin(self, client: AsyncClient, user_headers):
        response = await client.post("/api/v1/categories", json={"name": "Nope"}, headers=user_headers)
        assert response.status_code == 403

    async def test_missing_category(self, client: AsyncClient):
        response = await client.get(f"/api/v1/categories/{uuid.uuid4()}")
        assert response.status_code == 404
