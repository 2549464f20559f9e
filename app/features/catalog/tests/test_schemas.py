"""Tests for catalog request/response schemas."""

from datetime import UTC, datetime, timedelta
from decimal import Decimal

import pytest
from pydantic import ValidationError

from app.features.catalog.models import Purchase
from app.features.catalog.schemas import (
    ProductCreate,
    ProductLookupRequest,
    ProductResponse,
    PurchaseCreate,
    PurchaseResponse,
)


class TestProductCreate:
    def test_parses_wire_names(self):
        data = ProductCreate.model_validate({"titulo": "Curso", "preco": "10.5"})

        assert data.title == "Curso"
        assert data.price == Decimal("10.5")
        assert data.description is None

    def test_negative_price_left_to_the_store(self):
        data = ProductCreate.model_validate({"titulo": "Curso", "preco": -1})

        assert data.price == Decimal("-1")

    def test_title_required(self):
        with pytest.raises(ValidationError):
            ProductCreate.model_validate({"preco": 10})


class TestProductResponse:
    def test_from_orm_row(self, sample_product):
        response = ProductResponse.model_validate(sample_product)

        assert response.model_dump(by_alias=True, mode="json") == {
            "id": 1,
            "titulo": "Curso de Python",
            "preco": "100.00",
            "descricao": "Do zero ao deploy",
            "tag": "dev",
            "image": "https://cdn.example.com/python.png",
        }


class TestPurchaseCreate:
    def test_parses_wire_names(self):
        data = PurchaseCreate.model_validate(
            {"produto_id": 3, "dateBody": "2024-01-15T10:00:00-03:00"}
        )

        assert data.product_id == 3
        assert data.date == datetime(2024, 1, 15, 13, tzinfo=UTC)

    def test_naive_date_assumed_utc(self):
        data = PurchaseCreate.model_validate({"produto_id": 3, "dateBody": "2024-01-15T10:00:00"})

        assert data.date.tzinfo == UTC

    def test_offset_preserved(self):
        data = PurchaseCreate.model_validate(
            {"produto_id": 3, "dateBody": "2024-01-15T10:00:00-03:00"}
        )

        assert data.date.utcoffset() == timedelta(hours=-3)


class TestPurchaseResponse:
    def test_from_orm_row(self):
        purchase = Purchase(
            id=7,
            date=datetime(2024, 2, 1, tzinfo=UTC),
            product_id=None,
            sale_price=Decimal("20.00"),
        )

        dumped = PurchaseResponse.model_validate(purchase).model_dump(by_alias=True)

        assert dumped == {
            "id": 7,
            "date": datetime(2024, 2, 1, tzinfo=UTC),
            "produtoId": None,
            "precoVenda": Decimal("20.00"),
        }


class TestProductLookupRequest:
    def test_parses_wire_name(self):
        assert ProductLookupRequest.model_validate({"produtoId": 5}).product_id == 5

    def test_id_is_optional(self):
        assert ProductLookupRequest.model_validate({}).product_id is None
