"""Transaction domain service."""

import uuid
from datetime import date, datetime, UTC
from decimal import Decimal
from typing import Optional

from leaguebook.domain.categories import (
    default_category,
    kind_for_category,
    rental_amount,
    rental_hours as hours_for_amount,
)
from leaguebook.domain.entities import (
    CategoryKind,
    ContextType,
    EntityType,
    GENERIC_ENTITY_ID,
    Transaction,
    TransactionType,
)
from leaguebook.domain.errors import ValidationError, negative_amount
from leaguebook.domain.filters import LedgerFilter
from leaguebook.domain.session import LeagueSession
from leaguebook.domain.state import LeagueState
from leaguebook.logging_config import get_logger

logger = get_logger()


def _check_amount(field: str, value: Optional[Decimal]) -> None:
    if value is not None and value < 0:
        raise ValidationError(negative_amount(field, value))


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def build_transaction(
    state: LeagueState,
    *,
    transaction_id: str,
    created_at: datetime,
    date: date,
    type: TransactionType,
    entity_type: EntityType,
    amount_due: Decimal,
    amount_paid: Decimal,
    entity_id: Optional[str] = None,
    entity_name: Optional[str] = None,
    category: Optional[str] = None,
    rental_hours: Optional[Decimal] = None,
    competition_id: Optional[str] = None,
    week_id: Optional[str] = None,
    round: Optional[str] = None,
    context_type: Optional[ContextType] = None,
    description: Optional[str] = None,
    notes: Optional[str] = None,
    matches_worked: Optional[int] = None,
) -> Transaction:
    """Assemble a transaction, applying the rules that depend on its inputs.

    - The category's kind is decided here. Venue rentals are always expenses;
      when rented hours are given the amount due is hours times the court rate.
    - Team and staff counterparties get their display name from the registry,
      other counterparties use a placeholder id and a free-text name.
    - The season is taken from the competition, never entered directly.
    - Without an explicit context, a transaction with a competition belongs
      to it and one without is a standalone event.

    Raises:
        ValidationError: If an amount is negative or a registered counterparty
            has no id
    """
    _check_amount("Amount due", amount_due)
    _check_amount("Amount paid", amount_paid)
    _check_amount("Rental hours", rental_hours)

    category = _blank_to_none(category) or default_category(entity_type)
    kind = kind_for_category(category)
    if kind is CategoryKind.VENUE_RENTAL:
        type = TransactionType.EXPENSE
        if rental_hours is not None:
            amount_due = rental_amount(rental_hours)
        else:
            rental_hours = hours_for_amount(amount_due)
    else:
        rental_hours = None

    if entity_type.is_registered:
        if not entity_id:
            raise ValidationError(f"A {entity_type.value.lower()} transaction needs an entity id")
        entity_name = state.resolve_entity_name(entity_type, entity_id)
    else:
        entity_id = GENERIC_ENTITY_ID
        entity_name = _blank_to_none(entity_name) or category

    competition_id = _blank_to_none(competition_id)
    if context_type is None:
        context_type = ContextType.COMPETITION if competition_id else ContextType.EVENT
    return Transaction(
        id=transaction_id,
        date=date,
        type=type,
        category=category,
        entity_id=entity_id,
        entity_name=entity_name,
        entity_type=entity_type,
        amount_due=amount_due,
        amount_paid=amount_paid,
        created_at=created_at,
        kind=kind,
        rental_hours=rental_hours,
        season_id=state.season_for_competition(competition_id),
        week_id=_blank_to_none(week_id),
        competition_id=competition_id,
        round=_blank_to_none(round),
        context_type=context_type,
        description=_blank_to_none(description),
        notes=_blank_to_none(notes),
        matches_worked=matches_worked,
    )


class TransactionService:
    """Service for managing transactions."""

    def __init__(self, session: LeagueSession):
        """Initialize transaction service.

        Args:
            session: LeagueSession holding the current state
        """
        self.session = session

    def create_transaction(
        self,
        date: date,
        type: TransactionType,
        entity_type: EntityType,
        amount_due: Decimal,
        amount_paid: Decimal,
        entity_id: Optional[str] = None,
        entity_name: Optional[str] = None,
        category: Optional[str] = None,
        rental_hours: Optional[Decimal] = None,
        competition_id: Optional[str] = None,
        week_id: Optional[str] = None,
        round: Optional[str] = None,
        context_type: Optional[ContextType] = None,
        description: Optional[str] = None,
        notes: Optional[str] = None,
        matches_worked: Optional[int] = None,
    ) -> Transaction:
        """Create a transaction.

        Args:
            date: Transaction date
            type: INCOME or EXPENSE (forced to EXPENSE for venue rentals)
            entity_type: Kind of counterparty
            amount_due: Money obligated
            amount_paid: Money transferred
            entity_id: Team or staff id, ignored for other counterparties
            entity_name: Free-text counterparty name for costs and expenses
            category: Category label (defaults to the first of the entity type's vocabulary)
            rental_hours: Rented court hours for venue rentals
            competition_id: Optional competition id (the season follows from it)
            week_id: Optional week id
            round: Optional round label
            context_type: Competition or standalone event; by default a
                competition when one is given and an event otherwise
            description: Optional description
            notes: Optional notes
            matches_worked: Optional number of matches a staff member worked

        Returns:
            The created transaction with a fresh id and creation timestamp

        Raises:
            ValidationError: If an amount is negative or a team/staff id is missing
        """
        state = self.session.state
        txn = build_transaction(
            state,
            transaction_id=uuid.uuid4().hex,
            created_at=datetime.now(UTC),
            date=date,
            type=type,
            entity_type=entity_type,
            amount_due=amount_due,
            amount_paid=amount_paid,
            entity_id=entity_id,
            entity_name=entity_name,
            category=category,
            rental_hours=rental_hours,
            competition_id=competition_id,
            week_id=week_id,
            round=round,
            context_type=context_type,
            description=description,
            notes=notes,
            matches_worked=matches_worked,
        )
        self.session.apply(state.add_transaction(txn))
        logger.info(f"Created transaction {txn.id} ({txn.type.value} {txn.category}, {txn.entity_name})")
        return txn

    def get_transaction(self, transaction_id: str) -> Optional[Transaction]:
        """Get transaction by ID.

        Args:
            transaction_id: Transaction ID

        Returns:
            Transaction entity or None if not found
        """
        return self.session.state.find_transaction(transaction_id)

    def update_transaction(
        self,
        transaction_id: str,
        date: Optional[date] = None,
        type: Optional[TransactionType] = None,
        entity_type: Optional[EntityType] = None,
        amount_due: Optional[Decimal] = None,
        amount_paid: Optional[Decimal] = None,
        entity_id: Optional[str] = None,
        entity_name: Optional[str] = None,
        category: Optional[str] = None,
        rental_hours: Optional[Decimal] = None,
        competition_id: Optional[str] = None,
        week_id: Optional[str] = None,
        round: Optional[str] = None,
        context_type: Optional[ContextType] = None,
        description: Optional[str] = None,
        notes: Optional[str] = None,
        matches_worked: Optional[int] = None,
    ) -> Optional[Transaction]:
        """Update transaction fields.

        Only the fields that are provided change; pass an empty string to clear
        an optional text field. Id and creation time never change, and derived
        values (name, season, venue rental amount) are computed again.

        Returns:
            The updated transaction, or None if no transaction has this id

        Raises:
            ValidationError: If an amount is negative
        """
        state = self.session.state
        current = state.find_transaction(transaction_id)
        if current is None:
            logger.debug(f"Update ignored, transaction {transaction_id} not found")
            return None

        def pick(new, old):
            return old if new is None else new

        # Stored rental hours are not carried over: without new hours they are
        # recomputed from the amount due.
        txn = build_transaction(
            state,
            transaction_id=current.id,
            created_at=current.created_at,
            date=pick(date, current.date),
            type=pick(type, current.type),
            entity_type=pick(entity_type, current.entity_type),
            amount_due=pick(amount_due, current.amount_due),
            amount_paid=pick(amount_paid, current.amount_paid),
            entity_id=pick(entity_id, current.entity_id),
            entity_name=pick(entity_name, current.entity_name),
            category=pick(category, current.category),
            rental_hours=rental_hours,
            competition_id=pick(competition_id, current.competition_id),
            week_id=pick(week_id, current.week_id),
            round=pick(round, current.round),
            context_type=pick(context_type, current.context_type),
            description=pick(description, current.description),
            notes=pick(notes, current.notes),
            matches_worked=pick(matches_worked, current.matches_worked),
        )
        self.session.apply(state.replace_transaction(txn))
        logger.info(f"Updated transaction {txn.id}")
        return txn

    def delete_transaction(self, transaction_id: str) -> bool:
        """Delete a transaction.

        Args:
            transaction_id: Transaction ID to delete

        Returns:
            True if a transaction was removed, False if the id was unknown
        """
        state = self.session.state
        if state.find_transaction(transaction_id) is None:
            logger.debug(f"Delete ignored, transaction {transaction_id} not found")
            return False
        self.session.apply(state.remove_transaction(transaction_id))
        logger.info(f"Deleted transaction {transaction_id}")
        return True

    def list_transactions(self, ledger_filter: Optional[LedgerFilter] = None) -> list[Transaction]:
        """List transactions matching a filter, most recent first.

        Args:
            ledger_filter: Optional filter; all transactions when omitted

        Returns:
            List of transaction entities
        """
        return (ledger_filter or LedgerFilter()).apply(self.session.state.transactions)
