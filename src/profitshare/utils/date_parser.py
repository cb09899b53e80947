"""Date parsing utilities."""

from datetime import date, datetime, time, timedelta
from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

from profitshare.domain.periods import period_key_of

RELATIVE_PERIODS = ("month", "year", "week")


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Supports various formats including relative dates:
    - Absolute dates: "2024-01-15", "January 15, 2024", etc.
    - Relative dates: "today", "yesterday", "last month", "this year", etc.

    Args:
        date_str: Date string in various formats

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
    }

    if date_str in relative_dates:
        return relative_dates[date_str]

    for prefix, offset in (("last ", -1), ("this ", 0), ("next ", 1)):
        if date_str.startswith(prefix) and date_str[len(prefix):] in RELATIVE_PERIODS:
            return _period_start(date_str[len(prefix):], today, offset)

    try:
        return date_parser.parse(date_str).date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def _period_start(period: str, today: date, offset: int) -> date:
    """First day of the month/year/week ``offset`` periods away from today."""
    if period == "month":
        return (today + relativedelta(months=offset)).replace(day=1)
    if period == "year":
        return today.replace(month=1, day=1) + relativedelta(years=offset)
    # Weeks start on Monday
    return today - timedelta(days=today.weekday()) + timedelta(weeks=offset)


def parse_datetime(value: str) -> datetime:
    """Parse a timestamp for a transaction or payment.

    Relative and date-only inputs resolve to midnight of that day; explicit
    times such as "2024-03-31 23:59:59.999" are kept.

    Raises:
        ValueError: If the string cannot be parsed
    """
    text = value.strip()
    if ":" not in text:
        return datetime.combine(parse_date(text), time.min)
    try:
        return date_parser.parse(text)
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{value}': {e}")


def parse_month(value: str) -> str:
    """Parse a month into an unpadded period key.

    Accepts "2024-3", "2024-03", "March 2024" and relative forms such as
    "this month" or "last month".

    Raises:
        ValueError: If the month cannot be parsed
    """
    text = value.strip().lower()
    if text in ("this month", "last month", "next month"):
        return period_key_of(parse_date(text))

    parts = text.split("-")
    if len(parts) == 2 and parts[0].isdigit() and parts[1].isdigit():
        year, month = int(parts[0]), int(parts[1])
        if len(parts[0]) == 4 and 1 <= month <= 12:
            return f"{year}-{month}"
        raise ValueError(f"Could not parse month '{value}'")

    try:
        parsed = date_parser.parse(text, default=datetime(date.today().year, 1, 1))
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse month '{value}': {e}")
    return period_key_of(parsed)


def get_date_range(period: str) -> tuple[date, date]:
    """Get start and end dates for a specified period.

    Args:
        period: Period string (this-month, this-year, this-week, last-month, last-year, last-week)

    Returns:
        Tuple of (start_date, end_date) for the specified period

    Raises:
        ValueError: If period string is not recognized
    """
    period = period.strip().lower()
    today = date.today()

    if period == "this-month":
        return (today.replace(day=1), today)

    elif period == "this-year":
        return (today.replace(month=1, day=1), today)

    elif period == "this-week":
        return (today - timedelta(days=today.weekday()), today)

    elif period == "last-month":
        start_date = (today - relativedelta(months=1)).replace(day=1)
        end_date = today.replace(day=1) - timedelta(days=1)
        return (start_date, end_date)

    elif period == "last-year":
        start_date = today.replace(month=1, day=1) - relativedelta(years=1)
        end_date = today.replace(month=1, day=1) - timedelta(days=1)
        return (start_date, end_date)

    elif period == "last-week":
        start_date = today - timedelta(days=today.weekday() + 7)
        end_date = start_date + timedelta(days=6)
        return (start_date, end_date)

    else:
        raise ValueError(f"Unknown period: '{period}'. Supported periods: this-month, this-year, this-week, last-month, last-year, last-week")
