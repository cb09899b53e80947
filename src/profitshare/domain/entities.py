"""Domain model entities for profitshare.

These are pure data classes representing business concepts, independent of
database schema. The summary structures at the bottom are derived values and
are never persisted.
"""

from dataclasses import dataclass, field
from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Any, Optional


class TransactionType(str, Enum):
    """Kind of company transaction."""

    PROFIT = "profit"
    COST = "cost"


class PaymentKind(str, Enum):
    """Payment history filter."""

    ALL = "all"
    GLOBAL = "global"
    MONTHLY = "monthly"


@dataclass(frozen=True)
class Transaction:
    """Transaction domain entity."""

    id: int
    type: TransactionType
    amount: Decimal
    date: datetime
    description: str
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class Stakeholder:
    """Stakeholder domain entity."""

    id: int
    name: str
    active: bool = True
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class Payment:
    """Payment domain entity.

    A payment without a month, or one flagged as global, settles against the
    stakeholder's cumulative balance instead of a single period.
    """

    id: int
    stakeholder_id: int
    amount: Decimal
    date: datetime
    notes: str = ""
    month: Optional[str] = None
    is_global_payment: bool = False
    created_at: Optional[datetime] = None

    @property
    def is_global(self) -> bool:
        """True when the payment is not attributed to a single period."""
        return self.is_global_payment or self.month is None


@dataclass(frozen=True)
class DateRange:
    """Inclusive calendar date range used to filter transactions."""

    start_date: Optional[date] = None
    end_date: Optional[date] = None


@dataclass(frozen=True)
class PeriodTotals:
    """Profit, cost and net balance for one period."""

    profit: Decimal
    cost: Decimal
    balance: Decimal


@dataclass(frozen=True)
class StakeholderPaymentInfo:
    """Period-scoped payments of one stakeholder for one period."""

    total_paid: Decimal
    remaining: Decimal
    payments: tuple[Payment, ...] = ()


@dataclass(frozen=True)
class StakeholderBalance:
    """Cumulative share of one stakeholder netted against global payments."""

    total_share: Decimal
    total_paid: Decimal
    remaining: Decimal
    payments: tuple[Payment, ...] = ()


@dataclass(frozen=True)
class MonthlyCalculation:
    """Per-period totals, shares and period-scoped reconciliation."""

    month: str
    profit: Decimal
    cost: Decimal
    balance: Decimal
    stakeholder_shares: dict[int, Decimal] = field(default_factory=dict)
    stakeholder_payments: dict[int, StakeholderPaymentInfo] = field(
        default_factory=dict
    )


@dataclass(frozen=True)
class FinancialSummary:
    """Result of reconciling transactions, shares and payments."""

    total_profit: Decimal
    total_cost: Decimal
    total_balance: Decimal
    stakeholders: tuple[Stakeholder, ...]
    stakeholder_totals: dict[int, Decimal]
    stakeholder_balances: dict[int, StakeholderBalance]
    monthly_calculations: tuple[MonthlyCalculation, ...]
    date_range: Optional[DateRange] = None

    def get_month(self, month: str) -> Optional[MonthlyCalculation]:
        """Return the calculation for a period key, if that period exists."""
        for calculation in self.monthly_calculations:
            if calculation.month == month:
                return calculation
        return None

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-ready mapping.

        Keys follow the wire names used by API consumers; amounts are
        rendered as strings to keep Decimal precision.
        """
        return {
            "totalProfit": str(self.total_profit),
            "totalCost": str(self.total_cost),
            "totalBalance": str(self.total_balance),
            "stakeholders": [_stakeholder_to_dict(s) for s in self.stakeholders],
            "stakeholderTotals": {
                str(sid): str(total) for sid, total in self.stakeholder_totals.items()
            },
            "stakeholderBalances": {
                str(sid): {
                    "totalShare": str(balance.total_share),
                    "totalPaid": str(balance.total_paid),
                    "remaining": str(balance.remaining),
                    "payments": [_payment_to_dict(p) for p in balance.payments],
                }
                for sid, balance in self.stakeholder_balances.items()
            },
            "monthlyCalculations": [
                {
                    "month": calc.month,
                    "profit": str(calc.profit),
                    "cost": str(calc.cost),
                    "balance": str(calc.balance),
                    "stakeholderShares": {
                        str(sid): str(share)
                        for sid, share in calc.stakeholder_shares.items()
                    },
                    "stakeholderPayments": {
                        str(sid): {
                            "totalPaid": str(info.total_paid),
                            "remaining": str(info.remaining),
                            "payments": [_payment_to_dict(p) for p in info.payments],
                        }
                        for sid, info in calc.stakeholder_payments.items()
                    },
                }
                for calc in self.monthly_calculations
            ],
        }


def _stakeholder_to_dict(stakeholder: Stakeholder) -> dict[str, Any]:
    return {"id": stakeholder.id, "name": stakeholder.name, "active": stakeholder.active}


def _payment_to_dict(payment: Payment) -> dict[str, Any]:
    return {
        "id": payment.id,
        "stakeholderId": payment.stakeholder_id,
        "amount": str(payment.amount),
        "date": payment.date.isoformat(),
        "notes": payment.notes,
        "month": payment.month,
        "isGlobalPayment": payment.is_global_payment,
    }
