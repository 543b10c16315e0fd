"""Display formatting helpers."""

from datetime import date
from decimal import Decimal, ROUND_HALF_UP


def format_currency(value: Decimal) -> str:
    """Format an amount in Brazilian reais, e.g. ``R$ 1.234,56``."""
    amount = Decimal(value).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    sign = "-" if amount < 0 else ""
    grouped = f"{abs(amount):,.2f}"
    # Swap US separators for Brazilian ones
    grouped = grouped.replace(",", "_").replace(".", ",").replace("_", ".")
    return f"{sign}R$ {grouped}"


def format_date_display(value: date | None) -> str:
    """Format a date as DD/MM/YY."""
    if value is None:
        return "-"
    return value.strftime("%d/%m/%y")


def format_hours(value: Decimal) -> str:
    """Format fractional hours as ``1h30``."""
    hours = int(value)
    minutes = int(((Decimal(value) - hours) * 60).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    if minutes == 60:
        hours, minutes = hours + 1, 0
    if minutes == 0:
        return f"{hours}h"
    return f"{hours}h{minutes:02d}"
