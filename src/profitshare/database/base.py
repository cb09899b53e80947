"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional
from datetime import datetime
from decimal import Decimal

# Import entities directly to avoid circular import through domain/__init__.py
from profitshare.domain.entities import (
    Payment,
    Stakeholder,
    Transaction,
    TransactionType,
)


class Database(ABC):
    """Abstract database interface for profitshare.

    A Database is an explicit store handle: its owner opens it with
    ``connect()`` and closes it with ``disconnect()``, or uses it as a
    context manager.
    """

    def __enter__(self) -> "Database":
        self.connect()
        self.initialize_schema()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.disconnect()

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Transaction operations
    @abstractmethod
    def create_transaction(
        self,
        type: TransactionType,
        amount: Decimal,
        date: datetime,
        description: str,
    ) -> int:
        """Create a transaction. Returns transaction ID."""
        pass

    @abstractmethod
    def get_transaction(self, transaction_id: int) -> Optional[Transaction]:
        """Get transaction by ID."""
        pass

    @abstractmethod
    def list_transactions(
        self,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        type: Optional[TransactionType] = None,
    ) -> list[Transaction]:
        """List transactions, newest first.

        Args:
            start: Optional lower bound on transaction date (inclusive)
            end: Optional upper bound on transaction date (inclusive)
            type: Optional transaction type filter
        """
        pass

    @abstractmethod
    def update_transaction(
        self,
        transaction_id: int,
        type: Optional[TransactionType] = None,
        amount: Optional[Decimal] = None,
        date: Optional[datetime] = None,
        description: Optional[str] = None,
    ) -> None:
        """Update the provided transaction fields."""
        pass

    @abstractmethod
    def delete_transaction(self, transaction_id: int) -> None:
        """Delete a transaction."""
        pass

    @abstractmethod
    def count_transactions(self) -> int:
        """Count all transactions."""
        pass

    # Stakeholder operations
    @abstractmethod
    def create_stakeholder(self, name: str, active: bool = True) -> int:
        """Create a stakeholder. Returns stakeholder ID."""
        pass

    @abstractmethod
    def get_stakeholder(self, stakeholder_id: int) -> Optional[Stakeholder]:
        """Get stakeholder by ID."""
        pass

    @abstractmethod
    def get_stakeholder_by_name(self, name: str) -> Optional[Stakeholder]:
        """Get stakeholder by exact name."""
        pass

    @abstractmethod
    def list_stakeholders(self, active_only: bool = False) -> list[Stakeholder]:
        """List stakeholders in creation order."""
        pass

    @abstractmethod
    def update_stakeholder(
        self,
        stakeholder_id: int,
        name: Optional[str] = None,
        active: Optional[bool] = None,
    ) -> None:
        """Update stakeholder name and/or active flag."""
        pass

    @abstractmethod
    def delete_stakeholder(self, stakeholder_id: int) -> None:
        """Delete a stakeholder."""
        pass

    @abstractmethod
    def get_stakeholder_payment_count(self, stakeholder_id: int) -> int:
        """Get count of payments recorded for a stakeholder."""
        pass

    # Payment operations
    @abstractmethod
    def create_payment(
        self,
        stakeholder_id: int,
        amount: Decimal,
        date: datetime,
        notes: str = "",
        month: Optional[str] = None,
        is_global_payment: bool = False,
    ) -> int:
        """Create a payment. Returns payment ID."""
        pass

    @abstractmethod
    def get_payment(self, payment_id: int) -> Optional[Payment]:
        """Get payment by ID."""
        pass

    @abstractmethod
    def list_payments(self, stakeholder_id: Optional[int] = None) -> list[Payment]:
        """List payments in recording order, optionally for one stakeholder."""
        pass

    @abstractmethod
    def delete_payment(self, payment_id: int) -> None:
        """Delete a payment."""
        pass
