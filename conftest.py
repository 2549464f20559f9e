"""Shared pytest fixtures for SalesDashboard tests.

Feature conftests override ``fake_gateway`` with seeded data; ``client``
picks up whichever fake is in scope.
"""

import pytest
from httpx import ASGITransport, AsyncClient

from app.core.database import get_database
from app.features.catalog.deps import get_catalog_gateway
from app.main import app
from tests.fakes import FakeCatalogGateway, FakeDatabase


@pytest.fixture
def fake_gateway() -> FakeCatalogGateway:
    return FakeCatalogGateway()


@pytest.fixture
def fake_database() -> FakeDatabase:
    return FakeDatabase()


@pytest.fixture
async def client(fake_gateway, fake_database):
    """Create async HTTP client with the store replaced by in-memory fakes."""
    app.dependency_overrides[get_catalog_gateway] = lambda: fake_gateway
    app.dependency_overrides[get_database] = lambda: fake_database
    try:
        async with AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test",
        ) as ac:
            yield ac
    finally:
        app.dependency_overrides.clear()
