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


class ImportRejectedError(DomainError):
    """Backup file could not be parsed or holds no transactions collection."""


def transaction_not_found(transaction_id: str) -> str:
    """Return message for missing transaction."""
    return f"Transaction {transaction_id} not found"


def entity_not_found(kind: str, reference: str) -> str:
    """Return message for a missing team, staff member, competition, season or week."""
    return f"{kind} '{reference}' not found"


def duplicate_entity_id(kind: str, entity_id: str) -> str:
    """Return message for a reference entity whose id is already taken."""
    return f"{kind} with id '{entity_id}' already exists"


def negative_amount(field: str, value) -> str:
    """Return message for an amount below zero."""
    return f"{field} cannot be negative (got {value})"
