"""In-memory fakes of the catalog store gateway and the database handle.

``FakeCatalogGateway`` implements the async methods of ``CatalogGateway``
but keeps products and purchases in dicts and lists. The store-side rules
the API relies on are mirrored: negative prices are rejected with
``IntegrityError``, group-by ordering is by summed sale price descending.
"""

from __future__ import annotations

from collections import defaultdict
from datetime import datetime
from decimal import Decimal

from sqlalchemy.exc import IntegrityError

from app.features.catalog.gateway import ProductRevenue, RevenueSource, SaleRecord, SalesTotals
from app.features.catalog.models import Product, Purchase
from app.features.catalog.schemas import ProductCreate


class FakeCatalogGateway:
    def __init__(
        self,
        products: list[Product] | None = None,
        purchases: list[Purchase] | None = None,
    ) -> None:
        self.products: dict[int, Product] = {p.id: p for p in products or []}
        self.purchases: list[Purchase] = list(purchases or [])
        self.fail_with: Exception | None = None
        self.failing_title_ids: set[int] = set()
        self.title_lookups: list[int | None] = []

    def _check_failure(self) -> None:
        if self.fail_with is not None:
            raise self.fail_with

    # Products

    async def create_product(self, data: ProductCreate) -> Product:
        self._check_failure()
        if data.price < 0:
            raise IntegrityError(
                "INSERT INTO produto",
                {},
                Exception('violates check constraint "ck_produto_preco_positive"'),
            )
        product = Product(
            id=max(self.products, default=0) + 1,
            title=data.title,
            price=data.price,
            description=data.description,
            tag=data.tag,
            image=data.image,
        )
        self.products[product.id] = product
        return product

    async def list_products(self) -> list[Product]:
        self._check_failure()
        return [self.products[k] for k in sorted(self.products)]

    async def get_product(self, product_id: int) -> Product | None:
        self._check_failure()
        return self.products.get(product_id)

    async def get_product_price(self, product_id: int) -> Decimal | None:
        self._check_failure()
        product = self.products.get(product_id)
        return product.price if product is not None else None

    async def get_product_title(self, product_id: int | None) -> str | None:
        self._check_failure()
        self.title_lookups.append(product_id)
        if product_id in self.failing_title_ids:
            raise ConnectionError(f"lookup of product {product_id} failed")
        product = self.products.get(product_id) if product_id is not None else None
        return product.title if product is not None else None

    # Purchases

    async def create_purchase(
        self,
        product_id: int,
        date: datetime,
        sale_price: Decimal,
    ) -> Purchase:
        self._check_failure()
        purchase = Purchase(
            id=len(self.purchases) + 1,
            date=date,
            product_id=product_id,
            sale_price=sale_price,
        )
        self.purchases.append(purchase)
        return purchase

    async def list_purchases(self) -> list[Purchase]:
        self._check_failure()
        return list(self.purchases)

    async def sales_totals(self, source: RevenueSource = "product_price") -> SalesTotals:
        self._check_failure()
        revenue = Decimal("0")
        for purchase in self.purchases:
            if source == "sale_price":
                price = purchase.sale_price
            else:
                product = self.products.get(purchase.product_id) if purchase.product_id else None
                price = product.price if product is not None else None
            revenue += price or 0
        return SalesTotals(revenue=revenue, count=len(self.purchases))

    async def list_sales_by_date(self) -> list[SaleRecord]:
        self._check_failure()
        ordered = sorted(self.purchases, key=lambda p: p.date)
        return [SaleRecord(date=p.date, sale_price=p.sale_price) for p in ordered]

    async def top_products_by_revenue(self, limit: int) -> list[ProductRevenue]:
        self._check_failure()
        revenue: dict[int | None, Decimal | None] = {}
        quantity: dict[int | None, int] = defaultdict(int)
        for purchase in self.purchases:
            key = purchase.product_id
            quantity[key] += 1
            if purchase.sale_price is not None:
                revenue[key] = (revenue.get(key) or Decimal("0")) + purchase.sale_price
            else:
                revenue.setdefault(key, None)

        groups = [
            ProductRevenue(product_id=key, revenue=revenue[key], quantity=quantity[key])
            for key in quantity
        ]
        groups.sort(key=lambda g: (g.revenue is None, -(g.revenue or 0)))
        return groups[:limit]


def make_purchase(
    purchase_id: int,
    product_id: int | None,
    when: datetime,
    sale_price: str | None,
) -> Purchase:
    return Purchase(
        id=purchase_id,
        product_id=product_id,
        date=when,
        sale_price=Decimal(sale_price) if sale_price is not None else None,
    )


class FakeDatabase:
    """Stands in for ``Database`` in readiness checks."""

    def __init__(self, healthy: bool = True) -> None:
        self.healthy = healthy

    async def ping(self) -> None:
        if not self.healthy:
            raise ConnectionRefusedError("connection refused")
