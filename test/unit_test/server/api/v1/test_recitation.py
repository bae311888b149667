"""
Unit tests for the recitation metadata endpoints built by the CRUD router factory.
"""

import uuid
from datetime import time

import pytest
from httpx import AsyncClient

from dhivyuga.core.database.entities import Kalam, Mantra, RecitationCount, TimeRange

pytestmark = pytest.mark.asyncio


class TestRecitationCounts:
    async def test_listed_by_count_value(self, client: AsyncClient, seed):
        await seed.add(RecitationCount(count_value=108), RecitationCount(count_value=11), RecitationCount(count_value=21))

        response = await client.get("/api/v1/recitation-counts")
        assert response.status_code == 200
        assert [c["count_value"] for c in response.json()["recitation_counts"]] == [11, 21, 108]

    async def test_count_must_be_positive(self, client: AsyncClient, admin_headers):
        response = await client.post("/api/v1/recitation-counts", json={"count_value": 0}, headers=admin_headers)
        assert response.status_code == 422

    async def test_crud_cycle(self, client: AsyncClient, admin_headers):
        created = await client.post(
            "/api/v1/recitation-counts", json={"count_value": 108, "description": "One mala"}, headers=admin_headers
        )
        assert created.status_code == 201
        item_id = created.json()["id"]

        updated = await client.patch(
            f"/api/v1/recitation-counts/{item_id}", json={"count_value": 1008}, headers=admin_headers
        )
        assert updated.json()["count_value"] == 1008
        assert updated.json()["description"] == "One mala"

        rejected = await client.patch(
            f"/api/v1/recitation-counts/{item_id}", json={"count_value": None}, headers=admin_headers
        )
        assert rejected.status_code == 422

        cleared = await client.patch(
            f"/api/v1/recitation-counts/{item_id}", json={"description": None}, headers=admin_headers
        )
        assert cleared.json()["count_value"] == 1008
        assert cleared.json()["description"] is None

        deleted = await client.delete(f"/api/v1/recitation-counts/{item_id}", headers=admin_headers)
        assert deleted.status_code == 204
        assert (await client.get(f"/api/v1/recitation-counts/{item_id}")).status_code == 404


class TestRecitationTimes:
    async def test_create_and_list_by_name(self, client: AsyncClient, admin_headers):
        for name in ("Morning", "Evening"):
            response = await client.post("/api/v1/recitation-times", json={"name": name}, headers=admin_headers)
            assert response.status_code == 201

        response = await client.get("/api/v1/recitation-times")
        assert [t["name"] for t in response.json()["recitation_times"]] == ["Evening", "Morning"]

    async def test_requires_admin(self, client: AsyncClient, user_headers):
        response = await client.post("/api/v1/recitation-times", json={"name": "Noon"}, headers=user_headers)
        assert response.status_code == 403


class TestKalams:
    async def test_create_and_get(self, client: AsyncClient, admin_headers):
        created = await client.post(
            "/api/v1/kalams",
            json={"name": "Abhijit Muhurta", "planet": "Sun", "is_auspicious": True},
            headers=admin_headers,
        )
        assert created.status_code == 201

        fetched = await client.get(f"/api/v1/kalams/{created.json()['id']}")
        assert fetched.json()["is_auspicious"] is True
        assert fetched.json()["planet"] == "Sun"

    async def test_delete_clears_mantra_link(self, client: AsyncClient, seed, admin_headers):
        kalam = await seed.add(Kalam(name="Rahu Kalam"))
        mantra = await seed.add(Mantra(title="Durga stuti", text="x", kalam_id=kalam.id))

        response = await client.delete(f"/api/v1/kalams/{kalam.id}", headers=admin_headers)
        assert response.status_code == 204
        assert (await seed.get(Mantra, mantra.id)).kalam_id is None


class TestTimeRanges:
    async def test_listed_by_start_time(self, client: AsyncClient, admin_headers):
        for start, end in (("18:00", "19:30"), ("04:00", "05:30")):
            response = await client.post(
                "/api/v1/time-ranges", json={"start_time": start, "end_time": end}, headers=admin_headers
            )
            assert response.status_code == 201

        response = await client.get("/api/v1/time-ranges")
        ranges = response.json()["time_ranges"]
        assert [r["start_time"] for r in ranges] == ["04:00:00", "18:00:00"]

    async def test_update_missing(self, client: AsyncClient, admin_headers):
        response = await client.patch(
            f"/api/v1/time-ranges/{uuid.uuid4()}", json={"description": "x"}, headers=admin_headers
        )
        assert response.status_code == 404

    async def test_embedded_in_mantra(self, client: AsyncClient, seed):
        window = await seed.add(TimeRange(start_time=time(4, 30), end_time=time(6, 0)))
        mantra = await seed.add(Mantra(title="Dawn japa", text="x", range_id=window.id))

        response = await client.get(f"/api/v1/mantras/{mantra.id}")
        assert response.json()["mantra"]["time_range"]["start_time"] == "04:30:00"
