"""Rounding and pt-BR display formatting for dashboard values."""

from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")
CURRENCY_PREFIX = "R$"


def round_money(value: Decimal | int | float) -> Decimal:
    """Round to two decimal places, half away from zero."""
    return Decimal(str(value)).quantize(CENT, rounding=ROUND_HALF_UP)


def format_currency(value: Decimal | int | float) -> str:
    """Render an amount as ``R$ 1234,56`` (comma decimal separator, no grouping)."""
    return f"{CURRENCY_PREFIX} {round_money(value):.2f}".replace(".", ",")


def format_percent(value: Decimal | int | float) -> str:
    """Render a percentage as ``12.34%``."""
    return f"{round_money(value):.2f}%"
