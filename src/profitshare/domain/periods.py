"""Period keys for grouping transactions and matching payments.

A period key is ``"{year}-{month}"`` with an unpadded 1-based month, e.g.
``"2024-3"``. Payments store the same string in ``Payment.month`` and are
matched to periods by string equality, so the format must not change.
"""

import re
from datetime import date, datetime
from typing import Iterable

from profitshare.domain.errors import ValidationError

PERIOD_KEY_PATTERN = re.compile(r"^(\d{4})-(1[0-2]|[1-9])$")

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def period_key_of(value: date | datetime) -> str:
    """Return the period key for a date, using its local calendar fields."""
    return f"{value.year}-{value.month}"


def is_valid_period_key(key: str) -> bool:
    """Check whether a string is a well-formed period key."""
    return bool(key) and PERIOD_KEY_PATTERN.match(key) is not None


def parse_period_key(key: str) -> tuple[int, int]:
    """Split a period key into ``(year, month)``.

    Raises:
        ValidationError: If the key is not in ``YEAR-MONTH`` form
    """
    match = PERIOD_KEY_PATTERN.match(key or "")
    if match is None:
        raise ValidationError(
            f"Invalid month '{key}': expected YEAR-MONTH with month 1-12 (e.g. 2024-3)"
        )
    return int(match.group(1)), int(match.group(2))


def sort_period_keys(keys: Iterable[str]) -> list[str]:
    """Sort period keys chronologically.

    Plain string sorting would put ``"2024-10"`` before ``"2024-2"``.
    """
    return sorted(keys, key=parse_period_key)


def format_period(key: str) -> str:
    """Format a period key for display, e.g. ``"2024-3"`` -> ``"March 2024"``."""
    year, month = parse_period_key(key)
    return f"{MONTH_NAMES[month - 1]} {year}"
