"""Tests for ORM to domain mappers."""

from datetime import datetime
from decimal import Decimal

from profitshare.database import models
from profitshare.database.mappers import payment_to_domain, stakeholder_to_domain, transaction_to_domain
from profitshare.domain.entities import TransactionType


def test_transaction_to_domain():
    orm = models.Transaction(
        id=1,
        type="cost",
        amount=Decimal("12.50"),
        date=datetime(2024, 3, 1),
        description="Hosting",
        created_at=datetime(2024, 3, 2),
    )

    txn = transaction_to_domain(orm)

    assert txn.type == TransactionType.COST
    assert txn.amount == Decimal("12.50")
    assert txn.description == "Hosting"
    assert txn.created_at == datetime(2024, 3, 2)


def test_stakeholder_to_domain():
    stakeholder = stakeholder_to_domain(models.Stakeholder(id=2, name="Bob", active=False))

    assert stakeholder.id == 2
    assert stakeholder.active is False


def test_payment_to_domain_defaults():
    orm = models.Payment(
        id=3,
        stakeholder_id=2,
        amount=Decimal("5"),
        date=datetime(2024, 4, 1),
        notes=None,
        month=None,
        is_global_payment=None,
    )

    payment = payment_to_domain(orm)

    assert payment.notes == ""
    assert payment.is_global_payment is False
    assert payment.is_global is True
