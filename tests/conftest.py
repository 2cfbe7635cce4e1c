"""
Pytest fixtures - async and sync clients over the ASGI app.
Challenge: Isolated tests; no running server, dependency overrides reset per test.
"""

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

from transform_api.main import app


@pytest_asyncio.fixture
async def client():
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def sync_client():
    """Blocking client for pytest-bdd steps."""
    with TestClient(app) as tc:
        yield tc
    app.dependency_overrides.clear()
