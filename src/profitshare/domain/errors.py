"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class PreconditionError(DomainError):
    """Operation blocked due to dependent domain data."""


class ComputationError(DomainError):
    """A calculation cannot produce a finite result for its inputs."""


class TransientStoreError(DomainError):
    """The record store stayed busy after the bounded retry was exhausted."""


def transaction_not_found(transaction_id: int) -> str:
    """Return message for missing transaction."""
    return f"Transaction {transaction_id} not found"


def stakeholder_not_found(stakeholder_id: int) -> str:
    """Return message for missing stakeholder by ID."""
    return f"Stakeholder {stakeholder_id} not found"


def payment_not_found(payment_id: int) -> str:
    """Return message for missing payment."""
    return f"Payment {payment_id} not found"


def duplicate_stakeholder_name(name: str) -> str:
    """Return message for duplicate stakeholder name."""
    return f"Stakeholder with name '{name}' already exists"


def stakeholder_delete_blocked(stakeholder_id: int, payment_count: int) -> str:
    """Return message when a stakeholder still has recorded payments."""
    return (
        f"Cannot delete stakeholder {stakeholder_id}: it has "
        f"{payment_count} payment{'s' if payment_count != 1 else ''}. "
        "Deactivate it instead."
    )


def no_active_stakeholders() -> str:
    """Return message when shares are allocated without active stakeholders."""
    return "Cannot split balance: there are no active stakeholders"
