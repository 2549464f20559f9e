"""Monthly sales aggregation for the revenue line chart.

Groups purchases by the calendar (year, month) of their date and sums the
frozen sale price per group. The date's own fields are used as-is; no
timezone conversion happens here.
"""

from __future__ import annotations

import datetime
from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal
from typing import Protocol

from app.features.dashboard.formatting import round_money
from app.features.dashboard.schemas import MonthlyRevenuePoint

MONTH_LABELS = (
    "Jan",
    "Fev",
    "Mar",
    "Abr",
    "Mai",
    "Jun",
    "Jul",
    "Ago",
    "Set",
    "Out",
    "Nov",
    "Dez",
)


class Sale(Protocol):
    """Anything with a sale date and an optional sale price."""

    @property
    def date(self) -> datetime.date | None: ...

    @property
    def sale_price(self) -> Decimal | int | float | None: ...


@dataclass
class _MonthBucket:
    label: str
    revenue: Decimal = Decimal("0")
    sales: int = 0


def month_key(value: datetime.date) -> str:
    """Sortable ``YYYY-MM`` key for a date or datetime."""
    return f"{value.year:04d}-{value.month:02d}"


def group_sales_by_month(sales: Iterable[Sale]) -> list[MonthlyRevenuePoint]:
    """Aggregate purchases into one revenue/count point per calendar month.

    A missing sale price adds nothing to revenue but still counts as a sale.
    Points are ordered chronologically whatever the input order. Labels carry
    no year, so January 2024 and January 2025 both appear as ``"Jan"``.

    Args:
        sales: Purchases to aggregate. Every record must have a date.

    Returns:
        Monthly points, oldest first; empty for empty input.

    Raises:
        ValueError: If a record has no date.
    """
    buckets: dict[str, _MonthBucket] = {}

    for sale in sales:
        if sale.date is None:
            raise ValueError("Cannot group a sale without a date")

        key = month_key(sale.date)
        bucket = buckets.get(key)
        if bucket is None:
            bucket = buckets[key] = _MonthBucket(label=MONTH_LABELS[sale.date.month - 1])

        if sale.sale_price is not None:
            bucket.revenue += Decimal(str(sale.sale_price))
        bucket.sales += 1

    return [
        MonthlyRevenuePoint(
            month=buckets[key].label,
            revenue=float(round_money(buckets[key].revenue)),
            sales=buckets[key].sales,
        )
        for key in sorted(buckets)
    ]
