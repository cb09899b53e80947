"""Display formatting helpers."""

from datetime import datetime
from decimal import Decimal

from profitshare.domain.periods import format_period


def format_currency(amount: Decimal | float) -> str:
    """Format an amount as dollars, e.g. ``-$1,234.50``."""
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"


def format_timestamp(value: datetime) -> str:
    """Format a timestamp, dropping the time part when it is midnight."""
    if value.hour == value.minute == value.second == value.microsecond == 0:
        return value.strftime("%Y-%m-%d")
    return value.strftime("%Y-%m-%d %H:%M")


def format_month(month: str | None) -> str:
    """Format a payment month, or 'Global' for global payments."""
    if month is None:
        return "Global"
    return format_period(month)
