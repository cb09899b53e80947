"""Payment domain service."""

import logging
from datetime import date, datetime
from typing import Any, Optional
from profitshare.database.base import Database
from profitshare.domain.entities import Payment as PaymentEntity
from profitshare.domain.entities import PaymentKind
from profitshare.domain.errors import (
    NotFoundError,
    ValidationError,
    payment_not_found,
    stakeholder_not_found,
)
from profitshare.domain.periods import format_period, parse_period_key
from profitshare.domain.validation import require_amount, require_datetime, require_id

logger = logging.getLogger(__name__)


class PaymentService:
    """Service for recording and querying stakeholder payments."""

    def __init__(self, db: Database):
        """Initialize payment service.

        Args:
            db: Database instance
        """
        self.db = db

    def record_payment(
        self,
        stakeholder_id: int,
        amount: Any,
        date: Optional[date | datetime] = None,
        notes: Optional[str] = None,
        month: Optional[str] = None,
        is_global_payment: bool = False,
    ) -> int:
        """Record a payment to a stakeholder.

        Recording is append-only; callers recompute the summary afterwards.
        A payment without a month, or with ``is_global_payment`` set, settles
        the stakeholder's cumulative balance. Otherwise it settles the share
        for ``month``.

        Args:
            stakeholder_id: Existing stakeholder ID
            amount: Positive amount
            date: When the payment was made (defaults to now)
            notes: Optional notes (defaults to "Payment for <Month Year>" for
                period-scoped payments)
            month: Optional period key, e.g. "2024-3"
            is_global_payment: Settle against the cumulative balance

        Returns:
            Payment ID

        Raises:
            ValidationError: If amount, date or month is malformed
            NotFoundError: If the stakeholder doesn't exist
        """
        stakeholder_id = require_id(stakeholder_id, "stakeholder_id")
        payment_amount = require_amount(amount)
        payment_date = require_datetime(date) if date is not None else datetime.now()

        if month is not None and month != "":
            parse_period_key(month)
        else:
            month = None

        if self.db.get_stakeholder(stakeholder_id) is None:
            raise NotFoundError(stakeholder_not_found(stakeholder_id))

        settles_globally = bool(is_global_payment) or month is None
        if notes is None:
            notes = "" if settles_globally else f"Payment for {format_period(month)}"

        payment_id = self.db.create_payment(
            stakeholder_id=stakeholder_id,
            amount=payment_amount,
            date=payment_date,
            notes=notes,
            month=month,
            is_global_payment=bool(is_global_payment),
        )
        logger.info(
            "Recorded %s payment %d of %s for stakeholder %d",
            "global" if settles_globally else month,
            payment_id,
            payment_amount,
            stakeholder_id,
        )
        return payment_id

    def get_payment(self, payment_id: int) -> Optional[PaymentEntity]:
        """Get payment by ID, or None if not found."""
        return self.db.get_payment(require_id(payment_id))

    def require_payment(self, payment_id: int) -> PaymentEntity:
        """Get payment by ID or raise NotFoundError."""
        payment_id = require_id(payment_id)
        payment = self.db.get_payment(payment_id)
        if payment is None:
            raise NotFoundError(payment_not_found(payment_id))
        return payment

    def list_payments(
        self,
        stakeholder_id: Optional[int] = None,
        kind: PaymentKind | str = PaymentKind.ALL,
    ) -> list[PaymentEntity]:
        """List payment history, newest first.

        Args:
            stakeholder_id: Optional stakeholder filter
            kind: 'all', 'global' or 'monthly'

        Returns:
            List of payment entities
        """
        try:
            kind = PaymentKind(kind)
        except ValueError:
            raise ValidationError(
                f"Invalid payment filter '{kind}': expected all, global or monthly"
            )

        payments = self.db.list_payments(stakeholder_id=stakeholder_id)
        if kind == PaymentKind.GLOBAL:
            payments = [p for p in payments if p.is_global]
        elif kind == PaymentKind.MONTHLY:
            payments = [p for p in payments if not p.is_global]

        return sorted(payments, key=lambda p: (p.date, p.id), reverse=True)

    def delete_payment(self, payment_id: int) -> None:
        """Delete a payment.

        Raises:
            NotFoundError: If the payment doesn't exist
        """
        payment = self.require_payment(payment_id)
        self.db.delete_payment(payment.id)
        logger.info("Deleted payment %d", payment.id)
