"""Tests for transaction service."""

from datetime import date, datetime
from decimal import Decimal

import pytest

from profitshare.domain.entities import TransactionType
from profitshare.domain.errors import NotFoundError, ValidationError


class TestCreateTransaction:
    def test_create_and_get(self, transaction_service):
        txn_id = transaction_service.create_transaction(
            "profit", "5000", date(2024, 3, 5), "Client work"
        )

        txn = transaction_service.get_transaction(txn_id)
        assert txn.type == TransactionType.PROFIT
        assert txn.amount == Decimal("5000")
        assert txn.date == datetime(2024, 3, 5)
        assert txn.description == "Client work"

    def test_keeps_time_of_day(self, transaction_service):
        when = datetime(2024, 3, 31, 23, 59, 59, 999000)
        txn_id = transaction_service.create_transaction(TransactionType.COST, Decimal("1.5"), when, "Late")

        assert transaction_service.get_transaction(txn_id).date == when

    def test_cents_stored_exactly(self, transaction_service):
        txn_id = transaction_service.create_transaction("profit", "100.01", date(2024, 3, 5), "Odd cents")

        assert transaction_service.get_transaction(txn_id).amount == Decimal("100.01")

    @pytest.mark.parametrize(
        "kwargs,message",
        [
            ({"type": "refund"}, "Invalid type"),
            ({"type": None}, "Missing required field: type"),
            ({"amount": "-1"}, "must be a positive number"),
            ({"amount": "ten"}, "Invalid amount"),
            ({"amount": "100.005"}, "at most 2 decimal places"),
            ({"amount": "0.001"}, "at most 2 decimal places"),
            ({"amount": None}, "Missing required field: amount"),
            ({"date": "2024-03-05"}, "Invalid date"),
            ({"description": ""}, "Missing required field: description"),
        ],
    )
    def test_validation(self, transaction_service, kwargs, message):
        fields = {"type": "profit", "amount": "10", "date": date(2024, 3, 5), "description": "x"}
        fields.update(kwargs)

        with pytest.raises(ValidationError, match=message):
            transaction_service.create_transaction(**fields)

        assert transaction_service.list_transactions() == []


class TestListTransactions:
    def test_newest_first_with_filters(self, transaction_service):
        first = transaction_service.create_transaction("profit", "1", date(2024, 1, 1), "a")
        second = transaction_service.create_transaction("cost", "2", date(2024, 2, 1), "b")
        third = transaction_service.create_transaction("profit", "3", date(2024, 3, 1), "c")

        assert [t.id for t in transaction_service.list_transactions()] == [third, second, first]
        assert [t.id for t in transaction_service.list_transactions(type="profit")] == [third, first]
        assert [
            t.id
            for t in transaction_service.list_transactions(start_date=date(2024, 1, 15), end_date=date(2024, 2, 1))
        ] == [second]


class TestUpdateAndDelete:
    def test_update_only_given_fields(self, transaction_service):
        txn_id = transaction_service.create_transaction("profit", "100", date(2024, 3, 5), "Sale")

        transaction_service.update_transaction(txn_id, amount="150", type="cost")

        txn = transaction_service.get_transaction(txn_id)
        assert txn.amount == Decimal("150")
        assert txn.type == TransactionType.COST
        assert txn.description == "Sale"
        assert txn.date == datetime(2024, 3, 5)

    def test_update_rejects_bad_amount(self, transaction_service):
        txn_id = transaction_service.create_transaction("profit", "100", date(2024, 3, 5), "Sale")

        with pytest.raises(ValidationError):
            transaction_service.update_transaction(txn_id, amount="0")

        assert transaction_service.get_transaction(txn_id).amount == Decimal("100")

    def test_update_missing(self, transaction_service):
        with pytest.raises(NotFoundError, match="Transaction 7 not found"):
            transaction_service.update_transaction(7, description="x")

    def test_delete(self, transaction_service):
        txn_id = transaction_service.create_transaction("profit", "100", date(2024, 3, 5), "Sale")

        transaction_service.delete_transaction(txn_id)

        assert transaction_service.get_transaction(txn_id) is None
        with pytest.raises(NotFoundError):
            transaction_service.delete_transaction(txn_id)
