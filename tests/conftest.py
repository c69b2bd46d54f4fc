"""Pytest configuration and fixtures."""

import os
from collections.abc import AsyncGenerator, Iterator

import pytest
from httpx import ASGITransport, AsyncClient

# Set test environment before any app code runs; API-keyed signals stay disabled
os.environ["ENV"] = "test"
os.environ["PAGESPEED_API_KEY"] = ""
os.environ["GOOGLE_KNOWLEDGE_GRAPH_KEY"] = ""


@pytest.fixture(autouse=True)
def fresh_settings() -> Iterator[None]:
    """Re-read settings for each test so monkeypatched env vars apply."""
    from api.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Create async test client."""
    from api.main import app

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
