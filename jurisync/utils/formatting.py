"""pt-BR display formatting for dates and money."""

from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal

CENTS = Decimal("0.01")


def format_date(moment: datetime) -> str:
    return moment.astimezone(timezone.utc).strftime("%d/%m/%Y")


def format_datetime(moment: datetime) -> str:
    return moment.astimezone(timezone.utc).strftime("%d/%m/%Y %H:%M:%S")


def format_currency(value: Decimal | int | float) -> str:
    """Format as Brazilian reais, e.g. ``R$ 120.000,00``."""
    amount = Decimal(str(value)).quantize(CENTS, rounding=ROUND_HALF_UP)
    integer, _, cents = f"{amount:,.2f}".partition(".")
    return f"R$ {integer.replace(',', '.')},{cents}"


def format_decimal(value: Decimal) -> str:
    """Bare machine-readable decimal, no grouping or currency symbol."""
    return format(value.normalize(), "f")
