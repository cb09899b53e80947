"""Stakeholder domain service."""

import logging
from typing import Optional
from profitshare.database.base import Database
from profitshare.domain.entities import Stakeholder as StakeholderEntity
from profitshare.domain.errors import (
    ConflictError,
    NotFoundError,
    PreconditionError,
    duplicate_stakeholder_name,
    stakeholder_delete_blocked,
    stakeholder_not_found,
)
from profitshare.domain.validation import require_id, require_text

logger = logging.getLogger(__name__)

DEFAULT_STAKEHOLDERS = ("Stakeholder 1", "Stakeholder 2")


class StakeholderService:
    """Service for managing stakeholders."""

    def __init__(self, db: Database):
        """Initialize stakeholder service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_stakeholder(self, name: str, active: bool = True) -> int:
        """Create a new stakeholder.

        Args:
            name: Unique stakeholder name (case-sensitive)
            active: Whether the stakeholder takes part in share allocation

        Returns:
            Stakeholder ID

        Raises:
            ValidationError: If name is blank
            ConflictError: If a stakeholder with the same name exists
        """
        name = require_text(name, "name")
        if self.db.get_stakeholder_by_name(name) is not None:
            raise ConflictError(duplicate_stakeholder_name(name))

        stakeholder_id = self.db.create_stakeholder(name=name, active=active)
        logger.info("Created stakeholder %d (%s)", stakeholder_id, name)
        return stakeholder_id

    def get_stakeholder(self, stakeholder_id: int) -> Optional[StakeholderEntity]:
        """Get stakeholder by ID, or None if not found."""
        return self.db.get_stakeholder(require_id(stakeholder_id))

    def require_stakeholder(self, stakeholder_id: int) -> StakeholderEntity:
        """Get stakeholder by ID or raise NotFoundError."""
        stakeholder_id = require_id(stakeholder_id)
        stakeholder = self.db.get_stakeholder(stakeholder_id)
        if stakeholder is None:
            raise NotFoundError(stakeholder_not_found(stakeholder_id))
        return stakeholder

    def get_stakeholder_by_name(self, name: str) -> Optional[StakeholderEntity]:
        """Get stakeholder by exact name."""
        return self.db.get_stakeholder_by_name(name)

    def list_stakeholders(self, active_only: bool = False) -> list[StakeholderEntity]:
        """List stakeholders in creation order."""
        return self.db.list_stakeholders(active_only=active_only)

    def update_stakeholder(
        self,
        stakeholder_id: int,
        name: Optional[str] = None,
        active: Optional[bool] = None,
    ) -> None:
        """Rename and/or (de)activate a stakeholder.

        Raises:
            NotFoundError: If the stakeholder doesn't exist
            ConflictError: If the new name belongs to another stakeholder
        """
        stakeholder = self.require_stakeholder(stakeholder_id)

        if name is not None:
            name = require_text(name, "name")
            existing = self.db.get_stakeholder_by_name(name)
            if existing is not None and existing.id != stakeholder.id:
                raise ConflictError(duplicate_stakeholder_name(name))

        self.db.update_stakeholder(stakeholder.id, name=name, active=active)
        logger.info("Updated stakeholder %d", stakeholder.id)

    def rename_stakeholder(self, stakeholder_id: int, name: str) -> None:
        """Rename a stakeholder."""
        self.update_stakeholder(stakeholder_id, name=name)

    def set_active(self, stakeholder_id: int, active: bool) -> None:
        """Activate or deactivate a stakeholder."""
        self.update_stakeholder(stakeholder_id, active=active)

    def delete_stakeholder(self, stakeholder_id: int) -> None:
        """Delete a stakeholder that has no payments.

        Raises:
            NotFoundError: If the stakeholder doesn't exist
            PreconditionError: If any payment references the stakeholder
        """
        stakeholder = self.require_stakeholder(stakeholder_id)

        payment_count = self.db.get_stakeholder_payment_count(stakeholder.id)
        if payment_count > 0:
            raise PreconditionError(
                stakeholder_delete_blocked(stakeholder.id, payment_count)
            )

        self.db.delete_stakeholder(stakeholder.id)
        logger.info("Deleted stakeholder %d (%s)", stakeholder.id, stakeholder.name)

    def seed_default_stakeholders(self) -> list[int]:
        """Create the default stakeholders when none exist.

        Returns:
            IDs of created stakeholders (empty if stakeholders already exist)
        """
        if self.db.list_stakeholders():
            return []
        return [self.create_stakeholder(name) for name in DEFAULT_STAKEHOLDERS]
