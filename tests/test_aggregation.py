"""Tests for transaction aggregation."""

from datetime import date, datetime
from decimal import Decimal

from builders import make_transaction
from profitshare.domain.aggregation import (
    aggregate_transactions,
    date_range_bounds,
    filter_by_date_range,
    group_transactions_by_period,
)
from profitshare.domain.entities import DateRange, PeriodTotals


def test_aggregate_groups_by_calendar_month():
    transactions = [
        make_transaction(1, "profit", "5000", "2024-03-01T09:00:00"),
        make_transaction(2, "cost", "1200", "2024-03-31T18:00:00"),
        make_transaction(3, "profit", "100", "2024-04-02T10:00:00"),
    ]

    result = aggregate_transactions(transactions)

    assert result.periods == {
        "2024-3": PeriodTotals(profit=Decimal("5000"), cost=Decimal("1200"), balance=Decimal("3800")),
        "2024-4": PeriodTotals(profit=Decimal("100"), cost=Decimal("0"), balance=Decimal("100")),
    }
    assert result.total_profit == Decimal("5100")
    assert result.total_cost == Decimal("1200")
    assert result.total_balance == Decimal("3900")


def test_aggregate_negative_balance():
    result = aggregate_transactions([make_transaction(1, "cost", "300", "2024-05-10T00:00:00")])

    assert result.periods["2024-5"].balance == Decimal("-300")
    assert result.total_balance == Decimal("-300")


def test_aggregate_empty():
    result = aggregate_transactions([])

    assert result.periods == {}
    assert result.total_profit == Decimal("0")
    assert result.total_balance == Decimal("0")


def test_group_keeps_input_order():
    first = make_transaction(1, "profit", "1", "2024-03-20T00:00:00")
    second = make_transaction(2, "profit", "2", "2024-03-02T00:00:00")

    grouped = group_transactions_by_period([first, second])

    assert grouped == {"2024-3": [first, second]}


def test_date_range_bounds_cover_whole_end_day():
    start, end = date_range_bounds(DateRange(start_date=date(2024, 3, 1), end_date=date(2024, 3, 31)))

    assert start == datetime(2024, 3, 1, 0, 0, 0)
    assert end == datetime(2024, 3, 31, 23, 59, 59, 999000)


def test_date_range_bounds_optional_sides():
    assert date_range_bounds(None) == (None, None)
    assert date_range_bounds(DateRange(start_date=date(2024, 3, 1))) == (datetime(2024, 3, 1), None)


def test_filter_end_of_day_boundary():
    inside = make_transaction(1, "profit", "10", datetime(2024, 3, 31, 23, 59, 59, 999000))
    outside = make_transaction(2, "profit", "10", datetime(2024, 4, 1, 0, 0, 0, 0))
    before = make_transaction(3, "profit", "10", datetime(2024, 2, 29, 23, 59, 59))

    filtered = filter_by_date_range(
        [inside, outside, before], DateRange(start_date=date(2024, 3, 1), end_date=date(2024, 3, 31))
    )

    assert filtered == [inside]


def test_filter_without_range_keeps_everything():
    transactions = [make_transaction(1, "cost", "1", "2020-01-01T00:00:00")]

    assert filter_by_date_range(transactions, None) == transactions
