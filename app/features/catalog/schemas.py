"""Pydantic schemas for catalog endpoints.

Wire names follow the public API (``titulo``, ``preco``, ``produtoId`` ...);
Python attribute names are English. ``populate_by_name`` lets the same models
be built from ORM rows.
"""

from datetime import UTC, datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

# =============================================================================
# Products
# =============================================================================


class ProductCreate(BaseModel):
    """Body of POST /produtoCriar.

    Only types are checked here; business constraints (such as a non-negative
    price) are enforced by the database.
    """

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(..., alias="titulo", description="Product title.")
    price: Decimal = Field(..., alias="preco", description="Current price.")
    description: str | None = Field(None, alias="descricao")
    tag: str | None = Field(None, description="Category label.")
    image: str | None = Field(None, description="Image URL or path.")


class ProductResponse(BaseModel):
    """A product as returned by the API."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    title: str = Field(..., alias="titulo")
    price: Decimal = Field(..., alias="preco")
    description: str | None = Field(None, alias="descricao")
    tag: str | None = None
    image: str | None = None


class ProductLookupRequest(BaseModel):
    """Body of GET /listarProduto (kept for compatibility with existing clients)."""

    model_config = ConfigDict(populate_by_name=True)

    product_id: int | None = Field(None, alias="produtoId")


# =============================================================================
# Purchases
# =============================================================================


class PurchaseCreate(BaseModel):
    """Body of POST /produtoComprado."""

    model_config = ConfigDict(populate_by_name=True)

    product_id: int = Field(..., alias="produto_id", description="Product being sold.")
    date: datetime = Field(..., alias="dateBody", description="When the sale happened.")

    @field_validator("date")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        """Treat naive timestamps as UTC."""
        if v.tzinfo is None:
            return v.replace(tzinfo=UTC)
        return v


class PurchaseResponse(BaseModel):
    """A recorded purchase as returned by the API."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    date: datetime
    product_id: int | None = Field(None, alias="produtoId")
    sale_price: Decimal | None = Field(None, alias="precoVenda")
