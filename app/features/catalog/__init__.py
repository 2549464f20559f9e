"""Catalog module: products and recorded purchases.

Exposes the product/purchase CRUD endpoints and the store gateway the
dashboard reads from.
"""

from app.features.catalog.gateway import CatalogGateway
from app.features.catalog.routes import router
from app.features.catalog.schemas import (
    ProductCreate,
    ProductResponse,
    PurchaseCreate,
    PurchaseResponse,
)
from app.features.catalog.service import CatalogService

__all__ = [
    "CatalogGateway",
    "CatalogService",
    "ProductCreate",
    "ProductResponse",
    "PurchaseCreate",
    "PurchaseResponse",
    "router",
]
