"""Tests for summary computation."""

from datetime import date, datetime, timedelta
from decimal import Decimal

import pytest

from builders import make_payment, make_stakeholder, make_transaction
from profitshare.domain.entities import DateRange
from profitshare.domain.errors import ComputationError
from profitshare.domain.summary import compute_summary

ALICE, BOB = make_stakeholder(1, "Alice"), make_stakeholder(2, "Bob")


def _march_transactions():
    return [
        make_transaction(1, "profit", "5000", "2024-03-05T10:00:00"),
        make_transaction(2, "cost", "1200", "2024-03-20T10:00:00"),
    ]


class TestComputeSummary:
    def test_end_to_end_scenario(self):
        payments = [
            make_payment(1, ALICE.id, "900", month="2024-3"),
            make_payment(2, ALICE.id, "500"),
        ]

        summary = compute_summary(_march_transactions(), [ALICE, BOB], payments)

        assert summary.total_profit == Decimal("5000")
        assert summary.total_cost == Decimal("1200")
        assert summary.total_balance == Decimal("3800")

        march = summary.get_month("2024-3")
        assert march.balance == Decimal("3800")
        assert march.stakeholder_shares == {1: Decimal("1900"), 2: Decimal("1900")}
        assert march.stakeholder_payments[1].total_paid == Decimal("900")
        assert march.stakeholder_payments[1].remaining == Decimal("1000")
        assert march.stakeholder_payments[2].remaining == Decimal("1900")

        assert summary.stakeholder_totals == {1: Decimal("1900"), 2: Decimal("1900")}
        assert summary.stakeholder_balances[1].total_paid == Decimal("500")
        assert summary.stakeholder_balances[1].remaining == Decimal("1400")
        assert summary.stakeholder_balances[2].remaining == Decimal("1900")

    def test_ledgers_are_independent(self):
        base = compute_summary(_march_transactions(), [ALICE, BOB], [])
        with_global = compute_summary(
            _march_transactions(), [ALICE, BOB], [make_payment(1, ALICE.id, "500", is_global_payment=True)]
        )
        with_monthly = compute_summary(
            _march_transactions(), [ALICE, BOB], [make_payment(1, ALICE.id, "500", month="2024-3")]
        )

        # Global payments leave period remainders alone
        assert with_global.monthly_calculations == base.monthly_calculations
        # Monthly payments leave cumulative balances alone
        assert with_monthly.stakeholder_balances == base.stakeholder_balances

    def test_global_flag_with_month_is_global(self):
        payment = make_payment(1, ALICE.id, "300", month="2024-3", is_global_payment=True)

        summary = compute_summary(_march_transactions(), [ALICE, BOB], [payment])

        assert summary.get_month("2024-3").stakeholder_payments[1].total_paid == Decimal("0")
        assert summary.stakeholder_balances[1].total_paid == Decimal("300")

    def test_deterministic(self):
        args = (_march_transactions(), [ALICE, BOB], [make_payment(1, 1, "100", month="2024-3")])

        assert compute_summary(*args) == compute_summary(*args)

    def test_periods_in_chronological_order(self):
        transactions = [
            make_transaction(1, "profit", "10", "2024-10-01T00:00:00"),
            make_transaction(2, "profit", "10", "2024-02-01T00:00:00"),
            make_transaction(3, "profit", "10", "2023-12-01T00:00:00"),
        ]

        summary = compute_summary(transactions, [ALICE], [])

        assert [m.month for m in summary.monthly_calculations] == ["2023-12", "2024-2", "2024-10"]

    def test_loss_month_allocates_zero_but_counts_in_totals(self):
        transactions = _march_transactions() + [make_transaction(3, "cost", "1000", "2024-04-10T00:00:00")]

        summary = compute_summary(transactions, [ALICE, BOB], [])

        assert summary.get_month("2024-4").stakeholder_shares == {1: Decimal("0"), 2: Decimal("0")}
        assert summary.total_balance == Decimal("2800")
        assert summary.stakeholder_totals[1] == Decimal("1900")

    def test_inactive_stakeholders_are_excluded(self):
        carol = make_stakeholder(3, "Carol", active=False)

        summary = compute_summary(_march_transactions(), [ALICE, BOB, carol], [])

        assert [s.id for s in summary.stakeholders] == [1, 2]
        assert 3 not in summary.stakeholder_balances

    def test_no_active_stakeholders_with_transactions(self):
        with pytest.raises(ComputationError):
            compute_summary(_march_transactions(), [make_stakeholder(1, active=False)], [])

    def test_no_transactions_gives_empty_summary(self):
        summary = compute_summary([], [], [])

        assert summary.monthly_calculations == ()
        assert summary.total_balance == Decimal("0")

    def test_date_range_end_of_day_boundary(self):
        last_instant = datetime(2024, 3, 31, 23, 59, 59, 999000)
        transactions = [
            make_transaction(1, "profit", "100", last_instant),
            make_transaction(2, "profit", "999", last_instant + timedelta(milliseconds=1)),
        ]
        date_range = DateRange(start_date=date(2024, 3, 1), end_date=date(2024, 3, 31))

        summary = compute_summary(transactions, [ALICE], [], date_range)

        assert summary.total_profit == Decimal("100")
        assert [m.month for m in summary.monthly_calculations] == ["2024-3"]
        assert summary.date_range == date_range

    def test_payments_for_months_outside_range_are_ignored(self):
        summary = compute_summary(
            _march_transactions(), [ALICE], [make_payment(1, ALICE.id, "50", month="2024-1")]
        )

        assert summary.get_month("2024-1") is None
        assert summary.get_month("2024-3").stakeholder_payments[1].total_paid == Decimal("0")
