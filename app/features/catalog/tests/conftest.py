"""Feature-specific test fixtures for the catalog module."""

from decimal import Decimal

import pytest

from app.features.catalog.models import Product
from tests.fakes import FakeCatalogGateway


@pytest.fixture
def sample_product() -> Product:
    return Product(
        id=1,
        title="Curso de Python",
        price=Decimal("100.00"),
        description="Do zero ao deploy",
        tag="dev",
        image="https://cdn.example.com/python.png",
    )


@pytest.fixture
def fake_gateway(sample_product) -> FakeCatalogGateway:
    return FakeCatalogGateway(products=[sample_product])


@pytest.fixture
def product_payload() -> dict:
    return {
        "titulo": "Curso de SQL",
        "preco": "49.90",
        "descricao": "Consultas e modelagem",
        "tag": "dados",
        "image": "sql.png",
    }
