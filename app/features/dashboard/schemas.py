"""Pydantic schemas for dashboard endpoints.

Monetary values in ``DashboardMetrics`` are Decimals rounded to two places and
serialize as strings (``"150.00"``); chart revenue is a plain JSON number.
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class FormattedMetrics(BaseModel):
    """Display-ready renditions of the headline metrics."""

    model_config = ConfigDict(populate_by_name=True)

    total_revenue: str = Field(..., alias="faturamentoTotal", examples=["R$ 1500,00"])
    average_ticket: str = Field(..., alias="ticketMedio", examples=["R$ 150,00"])
    conversion_rate: str = Field(..., alias="taxaDeConversao", examples=["0.20%"])


class DashboardMetrics(BaseModel):
    """Headline sales metrics."""

    model_config = ConfigDict(populate_by_name=True)

    average_ticket: Decimal = Field(
        ...,
        alias="ticketMedio",
        description="Revenue divided by number of sales; 0 when there are no sales.",
    )
    total_revenue: Decimal = Field(..., alias="faturamentoTotal")
    total_sales: int = Field(..., ge=0, alias="totalProdutosVendidos")
    conversion_rate: Decimal = Field(
        ...,
        alias="taxaDeConversao",
        description="Sales divided by the configured lead count, as a percentage; "
        "0 when the lead count is 0.",
    )
    formatted: FormattedMetrics = Field(..., alias="formatados")


class TopProduct(BaseModel):
    """One entry of the top products by revenue ranking."""

    model_config = ConfigDict(populate_by_name=True)

    id: int | None = Field(None, description="Product id; null if the product was deleted.")
    title: str = Field(..., alias="titulo")
    quantity: int = Field(..., ge=0, alias="quantidade")
    value: str = Field(..., alias="valor", description="Summed sale price, formatted as currency.")


class MonthlyRevenuePoint(BaseModel):
    """Revenue and sales count for one calendar month."""

    model_config = ConfigDict(populate_by_name=True)

    month: str = Field(..., alias="mes", description="Three-letter month label, without year.")
    revenue: float = Field(..., alias="receita")
    sales: int = Field(..., ge=0, alias="vendas")
