"""API routes for products and purchases.

Paths keep the names existing clients already call (``/produtoCriar``,
``/listarProdutos`` ...). Client errors raised by the service pass through;
any other failure is logged and answered with a 500 problem response.
"""

from fastapi import APIRouter, Body, Depends, Query, status

from app.core.exceptions import BadRequestError, DatabaseError, SalesDashboardError
from app.core.logging import get_logger
from app.features.catalog.deps import get_catalog_gateway
from app.features.catalog.gateway import CatalogGateway
from app.features.catalog.schemas import (
    ProductCreate,
    ProductLookupRequest,
    ProductResponse,
    PurchaseCreate,
    PurchaseResponse,
)
from app.features.catalog.service import CatalogService

logger = get_logger(__name__)

router = APIRouter(tags=["catalog"])


def store_failure(event: str, e: Exception) -> DatabaseError:
    """Log an unexpected store failure and build the error to raise."""
    logger.error(
        event,
        error=str(e),
        error_type=type(e).__name__,
        exc_info=True,
    )
    return DatabaseError(details={"error": str(e)})


# =============================================================================
# Products
# =============================================================================


@router.post(
    "/produtoCriar",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a product",
    description="""
Create a catalog product.

Constraint violations raised by the database (e.g. a negative `preco`) are
answered with 400 and a generic message; the failing constraint is only logged.
""",
)
async def create_product(
    request: ProductCreate,
    gateway: CatalogGateway = Depends(get_catalog_gateway),
) -> ProductResponse:
    try:
        return await CatalogService(gateway).create_product(request)
    except SalesDashboardError:
        raise
    except Exception as e:
        raise store_failure("catalog.create_product_failed", e) from e


@router.get(
    "/listarProdutos",
    response_model=list[ProductResponse],
    summary="List all products",
)
async def list_products(
    gateway: CatalogGateway = Depends(get_catalog_gateway),
) -> list[ProductResponse]:
    try:
        return await CatalogService(gateway).list_products()
    except Exception as e:
        raise store_failure("catalog.list_products_failed", e) from e


@router.get(
    "/listarProduto",
    response_model=ProductResponse | None,
    summary="Get one product",
    description="""
Return a product by id, or `null` when it does not exist.

The id may be sent as a JSON body `{"produtoId": 1}` (legacy clients send a
body on this GET) or as the query parameter `?produtoId=1`. The query
parameter wins when both are present.
""",
)
async def get_product(
    product_id: int | None = Query(None, alias="produtoId"),
    body: ProductLookupRequest | None = Body(None),
    gateway: CatalogGateway = Depends(get_catalog_gateway),
) -> ProductResponse | None:
    """Look up a single product.

    Args:
        product_id: Product id from the query string (optional).
        body: Legacy request body carrying the product id (optional).
        gateway: Store gateway.

    Returns:
        Product details or None.

    Raises:
        BadRequestError: If no product id was supplied.
        DatabaseError: If the store lookup fails.
    """
    if product_id is None and body is not None:
        product_id = body.product_id
    if product_id is None:
        raise BadRequestError(message="Informe o produtoId.")

    try:
        return await CatalogService(gateway).get_product(product_id)
    except Exception as e:
        raise store_failure("catalog.get_product_failed", e) from e


# =============================================================================
# Purchases
# =============================================================================


@router.post(
    "/produtoComprado",
    response_model=PurchaseResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Record a purchase",
    description="""
Record a sale of `produto_id` at `dateBody`.

The product's current price is copied into `precoVenda` and never recomputed,
so later price changes do not alter historical revenue.
""",
)
async def record_purchase(
    request: PurchaseCreate,
    gateway: CatalogGateway = Depends(get_catalog_gateway),
) -> PurchaseResponse:
    try:
        return await CatalogService(gateway).record_purchase(request.product_id, request.date)
    except SalesDashboardError:
        raise
    except Exception as e:
        raise store_failure("catalog.record_purchase_failed", e) from e


@router.get(
    "/listarProdutosComprados",
    response_model=list[PurchaseResponse],
    summary="List all purchases",
)
async def list_purchases(
    gateway: CatalogGateway = Depends(get_catalog_gateway),
) -> list[PurchaseResponse]:
    try:
        return await CatalogService(gateway).list_purchases()
    except Exception as e:
        raise store_failure("catalog.list_purchases_failed", e) from e
