"""Summary aggregation domain service.

Two accounting views are kept apart here. The cash balance counts money that
actually moved, overpayments included in full. Receivables and payables count
money still owed and are floored at zero per transaction, so an overpaid
transaction contributes nothing to them rather than a negative amount. Neither
view is derived from the transaction status.
"""

from decimal import Decimal
from typing import Callable, Iterable, Optional, Sequence

from leaguebook.domain.categories import (
    COURT_HOURLY_RATE,
    MATCH_FEE_CATEGORY,
    REGISTRATION_FEE_CATEGORY,
)
from leaguebook.domain.entities import (
    CategoryGroup,
    DashboardReport,
    EntityType,
    GroupSummary,
    LedgerTotals,
    LocationSummary,
    StaffSummary,
    TeamBreakdown,
    TeamSummary,
    Transaction,
    TransactionType,
)
from leaguebook.domain.state import LeagueState

ZERO = Decimal("0")


def _total(values: Iterable[Decimal]) -> Decimal:
    return sum(values, ZERO)


def _income(transactions: Iterable[Transaction]) -> list[Transaction]:
    return [txn for txn in transactions if txn.type is TransactionType.INCOME]


def _expense(transactions: Iterable[Transaction]) -> list[Transaction]:
    return [txn for txn in transactions if txn.type is TransactionType.EXPENSE]


def most_recent_first(transactions: Iterable[Transaction]) -> list[Transaction]:
    """Sort by date, newest first; creation time breaks ties."""
    return sorted(transactions, key=lambda txn: (txn.date, txn.created_at), reverse=True)


def cash_balance(transactions: Iterable[Transaction]) -> Decimal:
    """Income paid minus expense paid, unfloored."""
    balance = ZERO
    for txn in transactions:
        if txn.type is TransactionType.INCOME:
            balance += txn.amount_paid
        else:
            balance -= txn.amount_paid
    return balance


def receivables(transactions: Iterable[Transaction]) -> Decimal:
    """Unpaid portion of income transactions, floored per transaction."""
    return _total(txn.outstanding for txn in _income(transactions))


def payables(transactions: Iterable[Transaction]) -> Decimal:
    """Unpaid portion of expense transactions, floored per transaction."""
    return _total(txn.outstanding for txn in _expense(transactions))


def ledger_totals(transactions: Iterable[Transaction]) -> LedgerTotals:
    """Compute balance, receivables and payables for a set of transactions."""
    items = list(transactions)
    return LedgerTotals(
        balance=cash_balance(items),
        receivables=receivables(items),
        payables=payables(items),
        count=len(items),
    )


def _team_income(transactions: Iterable[Transaction], team_id: Optional[str]) -> list[Transaction]:
    return [
        txn
        for txn in _income(transactions)
        if txn.entity_type is EntityType.TEAM and (team_id is None or txn.entity_id == team_id)
    ]


def team_summary(transactions: Iterable[Transaction], team_id: str) -> TeamSummary:
    """Income paid by a team and income still receivable from it."""
    items = _team_income(transactions, team_id)
    return TeamSummary(
        team_id=team_id,
        paid=_total(txn.amount_paid for txn in items),
        receivable=_total(txn.outstanding for txn in items),
        count=len(items),
    )


def teams_overview(transactions: Iterable[Transaction]) -> TeamSummary:
    """Team summary across every team."""
    items = _team_income(transactions, None)
    return TeamSummary(
        team_id=None,
        paid=_total(txn.amount_paid for txn in items),
        receivable=_total(txn.outstanding for txn in items),
        count=len(items),
    )


def team_breakdown(transactions: Iterable[Transaction], team_id: str) -> TeamBreakdown:
    """Split a team's transactions into match fees, registration fees and the rest."""
    items = most_recent_first(
        txn
        for txn in transactions
        if txn.entity_type is EntityType.TEAM and txn.entity_id == team_id
    )
    return TeamBreakdown(
        team_id=team_id,
        match_fees=tuple(txn for txn in items if txn.category == MATCH_FEE_CATEGORY),
        registration_fees=tuple(
            txn for txn in items if txn.category == REGISTRATION_FEE_CATEGORY
        ),
        other=tuple(
            txn
            for txn in items
            if txn.category not in (MATCH_FEE_CATEGORY, REGISTRATION_FEE_CATEGORY)
        ),
    )


def _staff_summary(items: Sequence[Transaction], staff_id: Optional[str]) -> StaffSummary:
    # Staff entries are normally expenses, but both directions are counted.
    return StaffSummary(
        staff_id=staff_id,
        paid=_total(txn.amount_paid for txn in items),
        due=_total(txn.outstanding for txn in items),
        count=len(items),
    )


def staff_summary(transactions: Iterable[Transaction], staff_id: str) -> StaffSummary:
    """Total paid to a staff member and total still due, floored."""
    items = [
        txn
        for txn in transactions
        if txn.entity_type is EntityType.STAFF and txn.entity_id == staff_id
    ]
    return _staff_summary(items, staff_id)


def staff_overview(
    transactions: Iterable[Transaction],
    month: Optional[str] = None,
    role: Optional[str] = None,
) -> StaffSummary:
    """Staff summary across every staff member.

    Args:
        transactions: Transactions to aggregate
        month: Optional "YYYY-MM" month to restrict to
        role: Optional category label (e.g. "Arbitro") to restrict to

    Returns:
        StaffSummary with ``staff_id`` set to None
    """
    items = [txn for txn in transactions if txn.entity_type is EntityType.STAFF]
    if month:
        items = [txn for txn in items if txn.date.isoformat().startswith(month)]
    if role:
        items = [txn for txn in items if txn.category == role]
    return _staff_summary(items, None)


def in_group(txn: Transaction, group: CategoryGroup) -> bool:
    """Whether a transaction belongs to a category group.

    General costs exclude staff and venue rental spend, which have groups of
    their own.
    """
    if group is CategoryGroup.TEAMS:
        return txn.entity_type is EntityType.TEAM
    if group is CategoryGroup.STAFF:
        return txn.entity_type is EntityType.STAFF
    if group is CategoryGroup.LOCATION:
        return txn.is_venue_rental
    if group is CategoryGroup.GENERAL_COSTS:
        return (
            txn.type is TransactionType.EXPENSE
            and txn.entity_type is not EntityType.STAFF
            and not txn.is_venue_rental
        )
    raise ValueError(f"Unknown category group: {group}")


def group_summary(transactions: Iterable[Transaction], group: CategoryGroup) -> GroupSummary:
    """Paid and outstanding totals of one category group."""
    items = [txn for txn in transactions if in_group(txn, group)]
    return GroupSummary(
        group=group,
        paid=_total(txn.amount_paid for txn in items),
        outstanding=_total(txn.outstanding for txn in items),
        count=len(items),
    )


def location_summary(
    transactions: Iterable[Transaction],
    month: Optional[str] = None,
    hourly_rate: Decimal = COURT_HOURLY_RATE,
) -> LocationSummary:
    """Venue rental totals, optionally restricted to a "YYYY-MM" month."""
    items = [txn for txn in transactions if txn.is_venue_rental]
    if month:
        items = [txn for txn in items if txn.date.isoformat().startswith(month)]

    total_due = _total(txn.amount_due for txn in items)
    total_paid = _total(txn.amount_paid for txn in items)
    return LocationSummary(
        total_due=total_due,
        total_paid=total_paid,
        surplus=total_paid - total_due,
        total_hours=total_due / hourly_rate,
        count=len(items),
    )


def dashboard(state: LeagueState, recent: int = 5) -> DashboardReport:
    """Build the dashboard report for a state snapshot."""
    transactions = state.transactions
    return DashboardReport(
        totals=ledger_totals(transactions),
        groups=tuple(group_summary(transactions, group) for group in CategoryGroup),
        teams=teams_overview(transactions),
        recent=tuple(most_recent_first(transactions)[:recent]),
    )


class SummaryService:
    """Service exposing aggregations over the session's current state."""

    def __init__(self, session):
        """Initialize summary service.

        Args:
            session: LeagueSession holding the current state
        """
        self.session = session

    def _select(
        self, predicate: Optional[Callable[[Transaction], bool]] = None
    ) -> list[Transaction]:
        transactions = self.session.state.transactions
        if predicate is None:
            return list(transactions)
        return [txn for txn in transactions if predicate(txn)]

    def get_totals(self, predicate: Optional[Callable[[Transaction], bool]] = None) -> LedgerTotals:
        return ledger_totals(self._select(predicate))

    def get_dashboard(self, recent: int = 5) -> DashboardReport:
        return dashboard(self.session.state, recent=recent)

    def get_team_summary(self, team_id: str) -> TeamSummary:
        return team_summary(self.session.state.transactions, team_id)

    def get_team_breakdown(self, team_id: str) -> TeamBreakdown:
        return team_breakdown(self.session.state.transactions, team_id)

    def get_teams_overview(self) -> TeamSummary:
        return teams_overview(self.session.state.transactions)

    def get_staff_summary(self, staff_id: str) -> StaffSummary:
        return staff_summary(self.session.state.transactions, staff_id)

    def get_staff_overview(self, month: Optional[str] = None, role: Optional[str] = None) -> StaffSummary:
        return staff_overview(self.session.state.transactions, month=month, role=role)

    def get_group_summary(self, group: CategoryGroup) -> GroupSummary:
        return group_summary(self.session.state.transactions, group)

    def get_location_summary(self, month: Optional[str] = None) -> LocationSummary:
        return location_summary(self.session.state.transactions, month=month)

    def list_staff_transactions(self, staff_id: str) -> list[Transaction]:
        return most_recent_first(
            self._select(
                lambda txn: txn.entity_type is EntityType.STAFF and txn.entity_id == staff_id
            )
        )

    def list_location_transactions(self, month: Optional[str] = None) -> list[Transaction]:
        items = self._select(lambda txn: txn.is_venue_rental)
        if month:
            items = [txn for txn in items if txn.date.isoformat().startswith(month)]
        return most_recent_first(items)
