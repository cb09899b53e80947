"""Transaction domain service."""

import logging
from typing import Any, Optional
from datetime import date, datetime
from profitshare.database.base import Database
from profitshare.domain.aggregation import date_range_bounds
from profitshare.domain.entities import DateRange, TransactionType
from profitshare.domain.entities import Transaction as TransactionEntity
from profitshare.domain.errors import NotFoundError, transaction_not_found
from profitshare.domain.validation import (
    require_amount,
    require_datetime,
    require_id,
    require_text,
    require_transaction_type,
)

logger = logging.getLogger(__name__)


class TransactionService:
    """Service for managing transactions."""

    def __init__(self, db: Database):
        """Initialize transaction service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_transaction(
        self,
        type: TransactionType | str,
        amount: Any,
        date: date | datetime,
        description: str,
    ) -> int:
        """Create a transaction.

        Args:
            type: 'profit' or 'cost'
            amount: Positive amount
            date: Transaction date or timestamp
            description: Free-text description

        Returns:
            Transaction ID

        Raises:
            ValidationError: If any field is missing or malformed
        """
        txn_type = require_transaction_type(type)
        txn_amount = require_amount(amount)
        txn_date = require_datetime(date)
        txn_description = require_text(description, "description")

        transaction_id = self.db.create_transaction(
            type=txn_type,
            amount=txn_amount,
            date=txn_date,
            description=txn_description,
        )
        logger.info(
            "Created %s transaction %d for %s", txn_type.value, transaction_id, txn_amount
        )
        return transaction_id

    def get_transaction(self, transaction_id: int) -> Optional[TransactionEntity]:
        """Get transaction by ID.

        Args:
            transaction_id: Transaction ID

        Returns:
            Transaction entity or None if not found
        """
        return self.db.get_transaction(require_id(transaction_id))

    def require_transaction(self, transaction_id: int) -> TransactionEntity:
        """Get transaction by ID or raise NotFoundError."""
        transaction_id = require_id(transaction_id)
        txn = self.db.get_transaction(transaction_id)
        if txn is None:
            raise NotFoundError(transaction_not_found(transaction_id))
        return txn

    def list_transactions(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        type: Optional[TransactionType | str] = None,
    ) -> list[TransactionEntity]:
        """List transactions, newest first.

        Args:
            start_date: Optional first day (inclusive)
            end_date: Optional last day (inclusive, through 23:59:59.999)
            type: Optional 'profit' or 'cost' filter

        Returns:
            List of transaction entities
        """
        start, end = date_range_bounds(DateRange(start_date=start_date, end_date=end_date))
        txn_type = require_transaction_type(type) if type is not None else None
        return self.db.list_transactions(start=start, end=end, type=txn_type)

    def update_transaction(
        self,
        transaction_id: int,
        type: Optional[TransactionType | str] = None,
        amount: Any = None,
        date: Optional[date | datetime] = None,
        description: Optional[str] = None,
    ) -> None:
        """Update transaction fields.

        Only the fields that are provided are changed.

        Raises:
            NotFoundError: If the transaction doesn't exist
            ValidationError: If a provided field is malformed
        """
        txn = self.require_transaction(transaction_id)

        self.db.update_transaction(
            transaction_id=txn.id,
            type=require_transaction_type(type) if type is not None else None,
            amount=require_amount(amount) if amount is not None else None,
            date=require_datetime(date) if date is not None else None,
            description=require_text(description, "description")
            if description is not None
            else None,
        )
        logger.info("Updated transaction %d", txn.id)

    def delete_transaction(self, transaction_id: int) -> None:
        """Delete a transaction.

        Raises:
            NotFoundError: If the transaction doesn't exist
        """
        txn = self.require_transaction(transaction_id)
        self.db.delete_transaction(txn.id)
        logger.info("Deleted transaction %d", txn.id)
