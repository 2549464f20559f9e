"""Feature-specific test fixtures for the dashboard module."""

from datetime import UTC, datetime
from decimal import Decimal

import pytest

from app.core.config import Settings
from app.features.catalog.models import Product, Purchase
from tests.fakes import FakeCatalogGateway, make_purchase


@pytest.fixture
def sample_products() -> list[Product]:
    return [
        Product(id=1, title="Curso de Python", price=Decimal("100.00"), tag="dev"),
        Product(id=2, title="Curso de SQL", price=Decimal("50.00"), tag="dados"),
        Product(id=3, title="Curso de Excel", price=Decimal("200.00"), tag="office"),
    ]


@pytest.fixture
def sample_purchases() -> list[Purchase]:
    return [
        make_purchase(1, 1, datetime(2024, 1, 15, 10, tzinfo=UTC), "100.00"),
        make_purchase(2, 2, datetime(2024, 1, 20, 14, tzinfo=UTC), "50.00"),
        make_purchase(3, 3, datetime(2024, 2, 1, 9, tzinfo=UTC), "200.00"),
        make_purchase(4, 1, datetime(2024, 2, 3, 18, tzinfo=UTC), "100.00"),
    ]


@pytest.fixture
def fake_gateway(sample_products, sample_purchases) -> FakeCatalogGateway:
    return FakeCatalogGateway(products=sample_products, purchases=sample_purchases)


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)
