"""Financial summary domain service."""

import logging
from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from profitshare.database.base import Database
from profitshare.domain.aggregation import (
    aggregate_transactions,
    date_range_bounds,
    filter_by_date_range,
)
from profitshare.domain.allocation import allocate_period_shares
from profitshare.domain.entities import (
    DateRange,
    FinancialSummary,
    MonthlyCalculation,
    Payment,
    Stakeholder,
    StakeholderPaymentInfo,
    Transaction,
)
from profitshare.domain.periods import sort_period_keys
from profitshare.domain.reconciliation import (
    partition_payments,
    reconcile_global,
    reconcile_period,
)

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


def compute_summary(
    transactions: Sequence[Transaction],
    stakeholders: Sequence[Stakeholder],
    payments: Sequence[Payment],
    date_range: Optional[DateRange] = None,
) -> FinancialSummary:
    """Reconcile transactions, shares and payments into a summary.

    Pure and deterministic: periods are visited in chronological order,
    stakeholders and payments in the order given. Inactive stakeholders are
    ignored.

    Args:
        transactions: Transactions to summarize
        stakeholders: Stakeholders; only active ones share the balance
        payments: All recorded payments
        date_range: Optional inclusive range applied to transaction dates

    Returns:
        Complete FinancialSummary

    Raises:
        ComputationError: If a period must be split with no active stakeholders
    """
    active_stakeholders = tuple(s for s in stakeholders if s.active)
    partition = partition_payments(payments)
    aggregation = aggregate_transactions(
        filter_by_date_range(transactions, date_range)
    )

    stakeholder_totals: dict[int, Decimal] = {s.id: ZERO for s in active_stakeholders}
    monthly_calculations = []

    for period_key in sort_period_keys(aggregation.periods.keys()):
        totals = aggregation.periods[period_key]
        shares = allocate_period_shares(totals.balance, active_stakeholders)

        stakeholder_payments: dict[int, StakeholderPaymentInfo] = {}
        for stakeholder in active_stakeholders:
            share = shares[stakeholder.id]
            stakeholder_totals[stakeholder.id] += share
            stakeholder_payments[stakeholder.id] = reconcile_period(
                stakeholder.id, period_key, share, partition.period_payments
            )

        monthly_calculations.append(
            MonthlyCalculation(
                month=period_key,
                profit=totals.profit,
                cost=totals.cost,
                balance=totals.balance,
                stakeholder_shares=shares,
                stakeholder_payments=stakeholder_payments,
            )
        )

    stakeholder_balances = {
        stakeholder.id: reconcile_global(
            stakeholder.id,
            stakeholder_totals[stakeholder.id],
            partition.global_payments,
        )
        for stakeholder in active_stakeholders
    }

    logger.debug(
        "Computed summary over %d periods for %d stakeholders",
        len(monthly_calculations),
        len(active_stakeholders),
    )

    return FinancialSummary(
        total_profit=aggregation.total_profit,
        total_cost=aggregation.total_cost,
        total_balance=aggregation.total_balance,
        stakeholders=active_stakeholders,
        stakeholder_totals=stakeholder_totals,
        stakeholder_balances=stakeholder_balances,
        monthly_calculations=tuple(monthly_calculations),
        date_range=date_range,
    )


class SummaryService:
    """Service for building financial summaries from the store."""

    def __init__(self, db: Database):
        """Initialize summary service.

        Args:
            db: Database instance
        """
        self.db = db

    def build_summary(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> FinancialSummary:
        """Load current records and compute the financial summary.

        Stakeholders, payments and transactions are read as separate store
        operations; a write landing between them is not isolated.

        Args:
            start_date: Optional first day of the range (inclusive)
            end_date: Optional last day of the range (inclusive, whole day)

        Returns:
            FinancialSummary for the range
        """
        date_range = None
        if start_date is not None or end_date is not None:
            date_range = DateRange(start_date=start_date, end_date=end_date)

        stakeholders = self.db.list_stakeholders(active_only=True)
        payments = self.db.list_payments()
        start, end = date_range_bounds(date_range)
        transactions = self.db.list_transactions(start=start, end=end)

        return compute_summary(transactions, stakeholders, payments, date_range)
