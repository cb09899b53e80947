"""Input validation shared by the record services."""

from datetime import date, datetime, time
from decimal import Decimal, InvalidOperation
from typing import Any

from profitshare.domain.entities import TransactionType
from profitshare.domain.errors import ValidationError

# Amounts are stored with two decimal places.
CENT = Decimal("0.01")


def require_amount(amount: Any, field: str = "amount") -> Decimal:
    """Return a positive Decimal amount.

    Amounts with more than two decimal places are rejected rather than
    rounded, so what is stored is exactly what was recorded.

    Raises:
        ValidationError: If the amount is missing, non-numeric, not positive
            or finer than a cent
    """
    if amount is None or (isinstance(amount, str) and not amount.strip()):
        raise ValidationError(f"Missing required field: {field}")
    if isinstance(amount, bool):
        raise ValidationError(f"Invalid {field}: {amount!r}")
    try:
        value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    except (InvalidOperation, ValueError):
        raise ValidationError(f"Invalid {field}: {amount!r}")
    if not value.is_finite() or value <= 0:
        raise ValidationError(f"Invalid {field}: must be a positive number")
    try:
        whole_cents = value == value.quantize(CENT)
    except InvalidOperation:
        whole_cents = False
    if not whole_cents:
        raise ValidationError(f"Invalid {field}: at most 2 decimal places allowed")
    return value


def require_datetime(value: Any, field: str = "date") -> datetime:
    """Return a datetime; a plain date becomes midnight of that day."""
    if value is None:
        raise ValidationError(f"Missing required field: {field}")
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    raise ValidationError(f"Invalid {field}: {value!r}")


def require_transaction_type(value: Any) -> TransactionType:
    """Return a TransactionType from an enum member or its string value."""
    if value is None or value == "":
        raise ValidationError("Missing required field: type")
    try:
        return TransactionType(value)
    except ValueError:
        raise ValidationError(
            f"Invalid type '{value}': expected 'profit' or 'cost'"
        )


def require_text(value: Any, field: str) -> str:
    """Return a non-blank string."""
    if value is None or not str(value).strip():
        raise ValidationError(f"Missing required field: {field}")
    return str(value)


def require_id(value: Any, field: str = "id") -> int:
    """Return an integer ID, accepting numeric strings."""
    if isinstance(value, bool):
        raise ValidationError(f"Invalid {field} format: {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid {field} format: {value!r}")
