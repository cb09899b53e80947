"""Payment reconciliation against allocated shares.

Two ledgers are kept apart. Period-scoped payments settle one stakeholder's
share for one period; global payments settle the stakeholder's cumulative
share. A payment never counts against both.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Sequence

from profitshare.domain.entities import (
    Payment,
    StakeholderBalance,
    StakeholderPaymentInfo,
)

ZERO = Decimal("0")


@dataclass(frozen=True)
class PaymentPartition:
    """Payments split into global and period-scoped groups."""

    global_payments: tuple[Payment, ...]
    period_payments: tuple[Payment, ...]


def is_global_payment(payment: Payment) -> bool:
    """A payment is global when flagged so or when it carries no month."""
    return payment.is_global


def partition_payments(payments: Iterable[Payment]) -> PaymentPartition:
    """Split payments in one pass, keeping their order."""
    global_payments = []
    period_payments = []
    for payment in payments:
        if is_global_payment(payment):
            global_payments.append(payment)
        else:
            period_payments.append(payment)
    return PaymentPartition(
        global_payments=tuple(global_payments),
        period_payments=tuple(period_payments),
    )


def sum_amounts(payments: Iterable[Payment]) -> Decimal:
    """Total amount of a group of payments."""
    return sum((payment.amount for payment in payments), ZERO)


def reconcile_period(
    stakeholder_id: int,
    period_key: str,
    share: Decimal,
    period_payments: Sequence[Payment],
) -> StakeholderPaymentInfo:
    """Net a stakeholder's share for one period against that period's payments.

    ``remaining`` goes negative when the period was overpaid.
    """
    matching = tuple(
        payment
        for payment in period_payments
        if payment.stakeholder_id == stakeholder_id
        and payment.month == period_key
        and not payment.is_global_payment
    )
    total_paid = sum_amounts(matching)
    return StakeholderPaymentInfo(
        total_paid=total_paid,
        remaining=share - total_paid,
        payments=matching,
    )


def reconcile_global(
    stakeholder_id: int,
    total_share: Decimal,
    global_payments: Sequence[Payment],
) -> StakeholderBalance:
    """Net a stakeholder's cumulative share against their global payments."""
    matching = tuple(
        payment
        for payment in global_payments
        if payment.stakeholder_id == stakeholder_id
    )
    total_paid = sum_amounts(matching)
    return StakeholderBalance(
        total_share=total_share,
        total_paid=total_paid,
        remaining=total_share - total_paid,
        payments=matching,
    )
