"""Store gateway for products and purchases.

Every method opens its own session from the injected ``Database``, so callers
may run several gateway calls concurrently (one session per task).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Literal

from sqlalchemy import func, select

from app.core.database import Database
from app.core.logging import get_logger
from app.features.catalog.models import Product, Purchase
from app.features.catalog.schemas import ProductCreate

logger = get_logger(__name__)

RevenueSource = Literal["product_price", "sale_price"]


@dataclass(frozen=True)
class SalesTotals:
    """Store-side sum and count over all purchases."""

    revenue: Decimal
    count: int


@dataclass(frozen=True)
class SaleRecord:
    """Date and frozen price of a single purchase."""

    date: datetime
    sale_price: Decimal | None


@dataclass(frozen=True)
class ProductRevenue:
    """Purchases grouped by product.

    Attributes:
        product_id: Product id, None for purchases whose product was deleted.
        revenue: Sum of sale prices (None when every sale price is NULL).
        quantity: Number of purchases in the group.
    """

    product_id: int | None
    revenue: Decimal | None
    quantity: int


class CatalogGateway:
    """Persistence operations over ``Product`` and ``Purchase``."""

    def __init__(self, database: Database) -> None:
        self.database = database

    # -------------------------------------------------------------------------
    # Products
    # -------------------------------------------------------------------------

    async def create_product(self, data: ProductCreate) -> Product:
        product = Product(
            title=data.title,
            price=data.price,
            description=data.description,
            tag=data.tag,
            image=data.image,
        )
        async with self.database.session() as session:
            session.add(product)
            await session.flush()
            await session.refresh(product)
        return product

    async def list_products(self) -> list[Product]:
        async with self.database.session() as session:
            result = await session.execute(select(Product).order_by(Product.id))
            return list(result.scalars().all())

    async def get_product(self, product_id: int) -> Product | None:
        async with self.database.session() as session:
            return await session.get(Product, product_id)

    async def get_product_price(self, product_id: int) -> Decimal | None:
        """Current price of a product, or None if it does not exist."""
        async with self.database.session() as session:
            result = await session.execute(
                select(Product.price).where(Product.id == product_id)
            )
            return result.scalar_one_or_none()

    async def get_product_title(self, product_id: int | None) -> str | None:
        """Title of a product, or None if it does not exist."""
        if product_id is None:
            return None
        async with self.database.session() as session:
            result = await session.execute(
                select(Product.title).where(Product.id == product_id)
            )
            return result.scalar_one_or_none()

    # -------------------------------------------------------------------------
    # Purchases
    # -------------------------------------------------------------------------

    async def create_purchase(
        self,
        product_id: int,
        date: datetime,
        sale_price: Decimal,
    ) -> Purchase:
        purchase = Purchase(date=date, product_id=product_id, sale_price=sale_price)
        async with self.database.session() as session:
            session.add(purchase)
            await session.flush()
            await session.refresh(purchase)
        return purchase

    async def list_purchases(self) -> list[Purchase]:
        async with self.database.session() as session:
            result = await session.execute(select(Purchase).order_by(Purchase.id))
            return list(result.scalars().all())

    async def sales_totals(self, source: RevenueSource = "product_price") -> SalesTotals:
        """Sum revenue and count purchases in one statement.

        Args:
            source: ``product_price`` sums the current price of each purchased
                product (outer join, so a deleted product adds nothing);
                ``sale_price`` sums the price frozen on each purchase.

        Returns:
            Revenue total and purchase count.
        """
        if source == "sale_price":
            stmt = select(
                func.coalesce(func.sum(Purchase.sale_price), 0).label("revenue"),
                func.count(Purchase.id).label("count"),
            )
        else:
            stmt = select(
                func.coalesce(func.sum(Product.price), 0).label("revenue"),
                func.count(Purchase.id).label("count"),
            ).select_from(Purchase).outerjoin(Product, Purchase.product_id == Product.id)

        async with self.database.session() as session:
            row = (await session.execute(stmt)).one()

        return SalesTotals(revenue=Decimal(str(row.revenue)), count=int(row.count))

    async def list_sales_by_date(self) -> list[SaleRecord]:
        """All purchases as (date, sale price), oldest first."""
        stmt = select(Purchase.date, Purchase.sale_price).order_by(Purchase.date.asc())
        async with self.database.session() as session:
            result = await session.execute(stmt)
            return [SaleRecord(date=row.date, sale_price=row.sale_price) for row in result]

    async def top_products_by_revenue(self, limit: int) -> list[ProductRevenue]:
        """Group purchases by product, highest summed sale price first.

        Ties keep whatever order the database returns.
        """
        revenue = func.sum(Purchase.sale_price)
        stmt = (
            select(
                Purchase.product_id,
                revenue.label("revenue"),
                func.count(Purchase.id).label("quantity"),
            )
            .group_by(Purchase.product_id)
            .order_by(revenue.desc().nulls_last())
            .limit(limit)
        )
        async with self.database.session() as session:
            result = await session.execute(stmt)
            rows = [
                ProductRevenue(
                    product_id=row.product_id,
                    revenue=row.revenue,
                    quantity=int(row.quantity),
                )
                for row in result
            ]

        logger.debug("catalog.top_products_queried", limit=limit, groups=len(rows))
        return rows
