from __future__ import annotations

import os

os.environ["APP_ENV"] = "test"
os.environ["API_BASE_PATH"] = "/v2"

from collections.abc import AsyncGenerator, Generator
from unittest.mock import AsyncMock

import pytest
from httpx import ASGITransport, AsyncClient

from petstore.api.deps import get_store_delegate
from petstore.main import app


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def mock_delegate() -> Generator[AsyncMock, None, None]:
    delegate = AsyncMock()
    app.dependency_overrides[get_store_delegate] = lambda: delegate
    yield delegate
    app.dependency_overrides.pop(get_store_delegate, None)
