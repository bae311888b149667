"""
Unit tests for deity API endpoints, including the graha listing and seeding.
"""

import uuid

import pytest
from httpx import AsyncClient

from dhivyuga.core.database.entities import Deity, Mantra
from dhivyuga.core.database.repositories import GRAHAS

pytestmark = pytest.mark.asyncio


class TestListDeities:
    async def test_active_deities_with_mantra_counts(self, client: AsyncClient, seed):
        shiva, lakshmi, _hidden = await seed.add(
            Deity(name="Shiva"), Deity(name="Lakshmi"), Deity(name="Hidden", is_active=False)
        )
        await seed.add(
            Mantra(title="a", text="x", deity_id=shiva.id),
            Mantra(title="b", text="x", deity_id=shiva.id),
            Mantra(title="c", text="x"),
        )

        response = await client.get("/api/v1/deities")
        assert response.status_code == 200
        deities = response.json()["deities"]
        assert [(d["name"], d["mantra_count"]) for d in deities] == [("Lakshmi", 0), ("Shiva", 2)]

    async def test_include_inactive(self, client: AsyncClient, seed):
        await seed.add(Deity(name="Visible"), Deity(name="Hidden", is_active=False))
        response = await client.get("/api/v1/deities", params={"include_inactive": True})
        assert [d["name"] for d in response.json()["deities"]] == ["Hidden", "Visible"]


class TestGrahas:
    async def test_lists_only_grahas(self, client: AsyncClient, seed):
        await seed.add(Deity(name="Surya (Sun)"), Deity(name="Shani (Saturn)"), Deity(name="Ganesha"))
        response = await client.get("/api/v1/deities/grahas")
        assert response.status_code == 200
        assert [g["name"] for g in response.json()["grahas"]] == ["Shani (Saturn)", "Surya (Sun)"]

    async def test_seed_grahas_once(self, client: AsyncClient, admin_headers):
        first = await client.post("/api/v1/deities/seed-grahas", headers=admin_headers)
        assert first.status_code == 200
        data = first.json()
        assert data["message"] == "Grahas seeded successfully"
        assert data["count"] == 9
        assert {g["name"] for g in data["grahas"]} == {g["name"] for g in GRAHAS}
        surya = next(g for g in data["grahas"] if g["name"] == "Surya (Sun)")
        assert surya["day_of_week"] == "Sunday"
        assert surya["gemstone"] == "Ruby"

        second = await client.post("/api/v1/deities/seed-grahas", headers=admin_headers)
        assert second.json()["message"] == "Grahas already exist in database"
        assert second.json()["count"] == 9

        listed = await client.get("/api/v1/deities/grahas")
        assert len(listed.json()["grahas"]) == 9

    async def test_seed_grahas_requires_admin(self, client: AsyncClient):
        response = await client.post("/api/v1/deities/seed-grahas")
        assert response.status_code == 401


class TestDeityCrud:
    async def test_create_get_update(self, client: AsyncClient, admin_headers):
        created = await client.post(
            "/api/v1/deities", json={"name": "Durga", "description": "Mother goddess"}, headers=admin_headers
        )
        assert created.status_code == 201
        deity_id = created.json()["id"]

        fetched = await client.get(f"/api/v1/deities/{deity_id}")
        assert fetched.json()["description"] == "Mother goddess"

        updated = await client.patch(
            f"/api/v1/deities/{deity_id}", json={"is_active": False}, headers=admin_headers
        )
        assert updated.status_code == 200
        assert updated.json()["is_active"] is False
        assert updated.json()["name"] == "Durga"

    async def test_null_name_rejected(self, client: AsyncClient, seed, admin_headers):
        deity = await seed.add(Deity(name="Lakshmi"))
        response = await client.patch(f"/api/v1/deities/{deity.id}", json={"name": None}, headers=admin_headers)
        assert response.status_code == 422
        assert (await seed.get(Deity, deity.id)).name == "Lakshmi"

    async def test_null_clears_optional_field(self, client: AsyncClient, seed, admin_headers):
        deity = await seed.add(Deity(name="Surya", description="Sun god", color="Red"))
        response = await client.patch(
            f"/api/v1/deities/{deity.id}", json={"description": None}, headers=admin_headers
        )
        assert response.status_code == 200
        assert response.json()["description"] is None
        assert response.json()["color"] == "Red"

    async def test_duplicate_name_conflicts(self, client: AsyncClient, seed, admin_headers):
        await seed.add(Deity(name="Krishna"))
        response = await client.post("/api/v1/deities", json={"name": "Krishna"}, headers=admin_headers)
        assert response.status_code == 409

    async def test_delete_keeps_mantras_without_deity(self, client: AsyncClient, seed, admin_headers):
        deity = await seed.add(Deity(name="Rama"))
        mantra = await seed.add(Mantra(title="Rama Raksha", text="x", deity_id=deity.id))

        response = await client.delete(f"/api/v1/deities/{deity.id}", headers=admin_headers)
        assert response.status_code == 204

        remaining = await seed.get(Mantra, mantra.id)
        assert remaining is not None
        assert remaining.deity_id is None

    async def test_missing_deity(self, client: AsyncClient, admin_headers):
        assert (await client.get(f"/api/v1/deities/{uuid.uuid4()}")).status_code == 404
        assert (await client.delete(f"/api/v1/deities/{uuid.uuid4()}", headers=admin_headers)).status_code == 404
