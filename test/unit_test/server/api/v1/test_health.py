"""
Unit tests for health check API endpoints.
"""

import pytest
from httpx import AsyncClient

from dhivyuga.server.core import constant

pytestmark = pytest.mark.asyncio


class TestHealthEndpoints:
    """Test health and version endpoints."""

    async def test_health_check(self, client: AsyncClient):
        response = await client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    async def test_version(self, client: AsyncClient):
        response = await client.get("/version")
        assert response.status_code == 200
        assert response.json() == {"version": constant.API_VERSION, "schema_version": constant.SCHEMA_VERSION}

    async def test_process_time_header_is_set(self, client: AsyncClient):
        response = await client.get("/health")
        assert "x-process-time" in response.headers
