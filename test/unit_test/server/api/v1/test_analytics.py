"""
Unit tests for the dashboard statistics endpoint.
"""

import pytest
from httpx import AsyncClient

from dhivyuga.core.database.entities import Category, Deity, Mantra

pytestmark = pytest.mark.asyncio


class TestStats:
    async def test_empty_catalog(self, client: AsyncClient, admin_headers):
        response = await client.get("/api/v1/analytics/stats", headers=admin_headers)
        assert response.status_code == 200
        assert response.json() == {
            "total_mantras": 0,
            "total_views": 0,
            "total_categories": 0,
            "total_deities": 0,
            "popular_mantras": [],
        }

    async def test_totals_and_popular(self, client: AsyncClient, seed, admin_headers):
        await seed.add(Category(name="Peace"), Category(name="Health"), Deity(name="Shiva"))
        await seed.add(*[Mantra(title=f"m{i}", text="x", view_count=i * 10) for i in range(7)])

        response = await client.get("/api/v1/analytics/stats", headers=admin_headers)
        data = response.json()
        assert data["total_mantras"] == 7
        assert data["total_views"] == sum(i * 10 for i in range(7))
        assert data["total_categories"] == 2
        assert data["total_deities"] == 1
        assert [m["title"] for m in data["popular_mantras"]] == ["m6", "m5", "m4", "m3", "m2"]
        assert data["popular_mantras"][0]["view_count"] == 60

    async def test_admin_only(self, client: AsyncClient, user_headers):
        assert (await client.get("/api/v1/analytics/stats")).status_code == 401
        assert (await client.get("/api/v1/analytics/stats", headers=user_headers)).status_code == 403
