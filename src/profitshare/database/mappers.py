"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, so the reconciliation code never
sees ORM objects.
"""

from decimal import Decimal

from profitshare.domain import entities as domain
from profitshare.database.models import (
    Payment as ORMPayment,
    Stakeholder as ORMStakeholder,
    Transaction as ORMTransaction,
)


def transaction_to_domain(orm_transaction: ORMTransaction) -> domain.Transaction:
    """Convert SQLAlchemy Transaction model to domain Transaction entity."""
    return domain.Transaction(
        id=orm_transaction.id,
        type=domain.TransactionType(orm_transaction.type),
        amount=Decimal(orm_transaction.amount),
        date=orm_transaction.date,
        description=orm_transaction.description,
        created_at=orm_transaction.created_at,
    )


def stakeholder_to_domain(orm_stakeholder: ORMStakeholder) -> domain.Stakeholder:
    """Convert SQLAlchemy Stakeholder model to domain Stakeholder entity."""
    return domain.Stakeholder(
        id=orm_stakeholder.id,
        name=orm_stakeholder.name,
        active=bool(orm_stakeholder.active),
        created_at=orm_stakeholder.created_at,
    )


def payment_to_domain(orm_payment: ORMPayment) -> domain.Payment:
    """Convert SQLAlchemy Payment model to domain Payment entity."""
    return domain.Payment(
        id=orm_payment.id,
        stakeholder_id=orm_payment.stakeholder_id,
        amount=Decimal(orm_payment.amount),
        date=orm_payment.date,
        notes=orm_payment.notes or "",
        month=orm_payment.month,
        is_global_payment=bool(orm_payment.is_global_payment),
        created_at=orm_payment.created_at,
    )
