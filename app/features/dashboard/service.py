"""Service layer for dashboard metrics.

Three independent read paths over the purchase history:
- headline metrics (revenue, average ticket, conversion rate)
- top products by summed sale price
- monthly revenue chart
"""

import asyncio
from decimal import Decimal

from app.core.config import Settings, get_settings
from app.core.logging import get_logger
from app.features.catalog.gateway import CatalogGateway
from app.features.dashboard.aggregator import group_sales_by_month
from app.features.dashboard.formatting import format_currency, format_percent, round_money
from app.features.dashboard.schemas import (
    DashboardMetrics,
    FormattedMetrics,
    MonthlyRevenuePoint,
    TopProduct,
)

logger = get_logger(__name__)

REMOVED_PRODUCT_TITLE = "Produto Removido"


class DashboardService:
    """Computes dashboard metrics from the catalog store.

    Nothing is cached; each call reads the store again.
    """

    def __init__(self, gateway: CatalogGateway, settings: Settings | None = None) -> None:
        self.gateway = gateway
        self.settings = settings or get_settings()

    async def compute_metrics(self) -> DashboardMetrics:
        """Compute revenue, average ticket and conversion rate.

        Revenue follows ``dashboard_revenue_source``: by default the *current*
        price of each purchased product, otherwise the sale price frozen on
        each purchase.

        Returns:
            Rounded metrics plus their formatted renditions.
        """
        source = self.settings.dashboard_revenue_source
        total_leads = self.settings.dashboard_total_leads

        totals = await self.gateway.sales_totals(source)

        total_revenue = totals.revenue
        average_ticket = total_revenue / totals.count if totals.count > 0 else Decimal("0")
        conversion_rate = (
            Decimal(totals.count) / Decimal(total_leads) * 100 if total_leads > 0 else Decimal("0")
        )

        metrics = DashboardMetrics(
            average_ticket=round_money(average_ticket),
            total_revenue=round_money(total_revenue),
            total_sales=totals.count,
            conversion_rate=round_money(conversion_rate),
            formatted=FormattedMetrics(
                total_revenue=format_currency(total_revenue),
                average_ticket=format_currency(average_ticket),
                conversion_rate=format_percent(conversion_rate),
            ),
        )

        logger.info(
            "dashboard.metrics_computed",
            revenue_source=source,
            total_sales=totals.count,
            total_revenue=float(metrics.total_revenue),
            total_leads=total_leads,
        )
        return metrics

    async def top_products_by_revenue(self) -> list[TopProduct]:
        """Rank products by summed sale price.

        Titles are looked up concurrently, one task per group. If any lookup
        fails the whole call fails with that error.

        Returns:
            At most ``dashboard_top_products_limit`` entries, highest revenue first.
        """
        limit = self.settings.dashboard_top_products_limit
        groups = await self.gateway.top_products_by_revenue(limit)

        titles = await asyncio.gather(
            *(self.gateway.get_product_title(group.product_id) for group in groups)
        )

        ranking = [
            TopProduct(
                id=group.product_id,
                title=title if title is not None else REMOVED_PRODUCT_TITLE,
                quantity=group.quantity,
                value=format_currency(group.revenue or 0),
            )
            for group, title in zip(groups, titles, strict=True)
        ]

        logger.info("dashboard.top_products_computed", limit=limit, items_count=len(ranking))
        return ranking

    async def monthly_revenue_chart(self) -> list[MonthlyRevenuePoint]:
        """Revenue and sales count per calendar month, oldest first."""
        sales = await self.gateway.list_sales_by_date()
        points = group_sales_by_month(sales)

        logger.info("dashboard.monthly_chart_computed", sales=len(sales), months=len(points))
        return points
