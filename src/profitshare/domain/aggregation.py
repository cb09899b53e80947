"""Transaction aggregation by period."""

from collections import defaultdict
from dataclasses import dataclass
from datetime import date, datetime, time
from decimal import Decimal
from typing import Iterable, Optional, Sequence

from profitshare.domain.entities import (
    DateRange,
    PeriodTotals,
    Transaction,
    TransactionType,
)
from profitshare.domain.periods import period_key_of

# Last instant of a calendar day at millisecond precision.
END_OF_DAY = time(23, 59, 59, 999000)

ZERO = Decimal("0")


@dataclass(frozen=True)
class AggregationResult:
    """Per-period totals plus totals over all periods."""

    periods: dict[str, PeriodTotals]
    total_profit: Decimal
    total_cost: Decimal

    @property
    def total_balance(self) -> Decimal:
        return self.total_profit - self.total_cost


def start_of_day(value: date) -> datetime:
    """Return the first instant of a calendar day."""
    return datetime.combine(value, time.min)


def end_of_day(value: date) -> datetime:
    """Return the last instant of a calendar day (23:59:59.999)."""
    return datetime.combine(value, END_OF_DAY)


def date_range_bounds(
    date_range: Optional[DateRange],
) -> tuple[Optional[datetime], Optional[datetime]]:
    """Convert a date range into inclusive datetime bounds."""
    if date_range is None:
        return None, None
    start = start_of_day(date_range.start_date) if date_range.start_date else None
    end = end_of_day(date_range.end_date) if date_range.end_date else None
    return start, end


def filter_by_date_range(
    transactions: Iterable[Transaction], date_range: Optional[DateRange]
) -> list[Transaction]:
    """Keep transactions that fall inside the range, both ends inclusive."""
    start, end = date_range_bounds(date_range)
    filtered = []
    for txn in transactions:
        if start is not None and txn.date < start:
            continue
        if end is not None and txn.date > end:
            continue
        filtered.append(txn)
    return filtered


def group_transactions_by_period(
    transactions: Iterable[Transaction],
) -> dict[str, list[Transaction]]:
    """Group transactions by period key, keeping input order within groups."""
    grouped: dict[str, list[Transaction]] = defaultdict(list)
    for txn in transactions:
        grouped[period_key_of(txn.date)].append(txn)
    return dict(grouped)


def aggregate_transactions(transactions: Sequence[Transaction]) -> AggregationResult:
    """Sum profit and cost per period and across all periods.

    Only periods containing at least one transaction are reported.
    """
    periods: dict[str, PeriodTotals] = {}
    total_profit = ZERO
    total_cost = ZERO

    for period_key, period_transactions in group_transactions_by_period(
        transactions
    ).items():
        profit = ZERO
        cost = ZERO
        for txn in period_transactions:
            if txn.type == TransactionType.PROFIT:
                profit += txn.amount
            elif txn.type == TransactionType.COST:
                cost += txn.amount
        periods[period_key] = PeriodTotals(
            profit=profit, cost=cost, balance=profit - cost
        )
        total_profit += profit
        total_cost += cost

    return AggregationResult(
        periods=periods, total_profit=total_profit, total_cost=total_cost
    )
