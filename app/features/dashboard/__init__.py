"""Dashboard module: headline sales metrics, top products and monthly chart."""

from app.features.dashboard.aggregator import group_sales_by_month
from app.features.dashboard.routes import router
from app.features.dashboard.schemas import (
    DashboardMetrics,
    MonthlyRevenuePoint,
    TopProduct,
)
from app.features.dashboard.service import DashboardService

__all__ = [
    "DashboardMetrics",
    "DashboardService",
    "MonthlyRevenuePoint",
    "TopProduct",
    "group_sales_by_month",
    "router",
]
