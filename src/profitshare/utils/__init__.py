"""Utility functions for profitshare."""

from profitshare.utils.date_parser import parse_date, parse_datetime, parse_month
from profitshare.utils.amount_parser import parse_amount
from profitshare.utils.formatting import format_currency

__all__ = ["parse_date", "parse_datetime", "parse_month", "parse_amount", "format_currency"]
