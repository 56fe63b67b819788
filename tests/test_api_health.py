from __future__ import annotations

from unittest.mock import AsyncMock

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_health_with_default_delegate(client: AsyncClient) -> None:
    response = await client.get("/v2/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "degraded"
    assert data["version"] == "0.1.0"
    assert data["delegate"] == "petstore.delegates.default.DefaultStoreApiDelegate"


@pytest.mark.asyncio
async def test_health_with_custom_delegate(client: AsyncClient, mock_delegate: AsyncMock) -> None:
    response = await client.get("/v2/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["delegate"].endswith("AsyncMock")
