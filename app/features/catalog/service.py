"""Service layer for products and purchases."""

from datetime import datetime

from sqlalchemy.exc import DataError, IntegrityError

from app.core.exceptions import NotFoundError, StoreRejectedError
from app.core.logging import get_logger
from app.features.catalog.gateway import CatalogGateway
from app.features.catalog.schemas import ProductCreate, ProductResponse, PurchaseResponse

logger = get_logger(__name__)


class CatalogService:
    """Creates and reads catalog products and the purchases made of them."""

    def __init__(self, gateway: CatalogGateway) -> None:
        self.gateway = gateway

    async def create_product(self, data: ProductCreate) -> ProductResponse:
        """Persist a new product.

        Args:
            data: Validated request body.

        Returns:
            The stored product.

        Raises:
            StoreRejectedError: If the database refuses the row.
        """
        try:
            product = await self.gateway.create_product(data)
        except (IntegrityError, DataError) as e:
            raise StoreRejectedError(
                message="Não foi possível criar o produto.",
                details={"error": str(e.orig) if e.orig is not None else str(e)},
            ) from e

        logger.info("catalog.product_created", product_id=product.id, price=str(product.price))
        return ProductResponse.model_validate(product)

    async def list_products(self) -> list[ProductResponse]:
        products = await self.gateway.list_products()
        return [ProductResponse.model_validate(p) for p in products]

    async def get_product(self, product_id: int) -> ProductResponse | None:
        product = await self.gateway.get_product(product_id)
        if product is None:
            return None
        return ProductResponse.model_validate(product)

    async def record_purchase(self, product_id: int, date: datetime) -> PurchaseResponse:
        """Record a sale, freezing the product's current price on the purchase.

        Args:
            product_id: Product being sold.
            date: When the sale happened.

        Returns:
            The stored purchase.

        Raises:
            NotFoundError: If the product does not exist.
        """
        price = await self.gateway.get_product_price(product_id)
        if price is None:
            raise NotFoundError(
                message="Produto não encontrado.",
                details={"product_id": product_id},
            )

        purchase = await self.gateway.create_purchase(
            product_id=product_id,
            date=date,
            sale_price=price,
        )

        logger.info(
            "catalog.purchase_recorded",
            purchase_id=purchase.id,
            product_id=product_id,
            sale_price=str(price),
        )
        return PurchaseResponse.model_validate(purchase)

    async def list_purchases(self) -> list[PurchaseResponse]:
        purchases = await self.gateway.list_purchases()
        return [PurchaseResponse.model_validate(p) for p in purchases]
