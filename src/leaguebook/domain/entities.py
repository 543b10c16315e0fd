"""Domain model entities for leaguebook.

These are pure data classes representing the league's business concepts,
independent of how the state is persisted. Reference entities (teams, staff,
competitions, seasons, weeks) are looked up by id; transactions hold non-owning
references to them.
"""

from dataclasses import dataclass, field
from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Optional

from leaguebook.domain.status import (
    Settlement,
    TransactionStatus,
    classify,
    outstanding,
    settle,
)

GENERIC_ENTITY_ID = "GENERIC"


class TransactionType(str, Enum):
    """Direction of money movement."""

    INCOME = "INCOME"
    EXPENSE = "EXPENSE"


class EntityType(str, Enum):
    """Kind of counterparty a transaction is recorded against."""

    TEAM = "TEAM"
    STAFF = "STAFF"
    COST = "COST"
    EXPENSE = "EXPENSE"
    OTHER = "OTHER"

    @property
    def is_registered(self) -> bool:
        """True when the counterparty lives in the entity registry."""
        return self in (EntityType.TEAM, EntityType.STAFF)


class CategoryKind(str, Enum):
    """Behavioral kind of a category, decided when a transaction is built."""

    STANDARD = "STANDARD"
    VENUE_RENTAL = "VENUE_RENTAL"


class CategoryGroup(str, Enum):
    """Reporting groups used for scoped aggregation and ledger filtering."""

    TEAMS = "TEAMS"
    STAFF = "STAFF"
    LOCATION = "LOCATION"
    GENERAL_COSTS = "GENERAL_COSTS"


class ContextType(str, Enum):
    """Whether a transaction belongs to a competition or a standalone event."""

    COMPETITION = "COMPETITION"
    EVENT = "EVENT"


class StaffRole(str, Enum):
    """Default role of a staff member."""

    ARBITRO = "Arbitro"
    MESARIO = "Mesario"
    MIDIA = "Midia"
    OUTRO = "Outro"


@dataclass(frozen=True)
class Team:
    """Team domain entity."""

    id: str
    name: str
    image: Optional[str] = None


@dataclass(frozen=True)
class StaffMember:
    """Staff member (referee, table official, media) domain entity."""

    id: str
    name: str
    default_role: StaffRole = StaffRole.ARBITRO
    image: Optional[str] = None


@dataclass(frozen=True)
class Season:
    """Season domain entity."""

    id: str
    name: str


@dataclass(frozen=True)
class Week:
    """Week domain entity."""

    id: str
    name: str


@dataclass(frozen=True)
class Competition:
    """Competition domain entity with its season and ordered round labels."""

    id: str
    name: str
    season_id: Optional[str]
    rounds: tuple[str, ...] = ()
    image: Optional[str] = None


@dataclass(frozen=True)
class Transaction:
    """Transaction domain entity.

    Status is derived from the amounts on every read.
    """

    id: str
    date: date
    type: TransactionType
    category: str
    entity_id: str
    entity_name: str
    entity_type: EntityType
    amount_due: Decimal
    amount_paid: Decimal
    created_at: datetime
    kind: CategoryKind = CategoryKind.STANDARD
    rental_hours: Optional[Decimal] = None
    season_id: Optional[str] = None
    week_id: Optional[str] = None
    competition_id: Optional[str] = None
    round: Optional[str] = None
    context_type: ContextType = ContextType.COMPETITION
    description: Optional[str] = None
    notes: Optional[str] = None
    matches_worked: Optional[int] = None

    @property
    def status(self) -> TransactionStatus:
        return classify(self.amount_due, self.amount_paid)

    @property
    def settlement(self) -> Settlement:
        return settle(self.amount_due, self.amount_paid)

    @property
    def outstanding(self) -> Decimal:
        """Unpaid portion of this transaction, floored at zero."""
        return outstanding(self.amount_due, self.amount_paid)

    @property
    def is_venue_rental(self) -> bool:
        return self.kind is CategoryKind.VENUE_RENTAL


@dataclass(frozen=True)
class LedgerTotals:
    """League-wide (or slice-wide) cash balance, receivables and payables."""

    balance: Decimal
    receivables: Decimal
    payables: Decimal
    count: int


@dataclass(frozen=True)
class TeamSummary:
    """Income paid and still receivable from one team (or from all teams)."""

    team_id: Optional[str]
    paid: Decimal
    receivable: Decimal
    count: int


@dataclass(frozen=True)
class TeamBreakdown:
    """A team's transactions split by fee kind, most recent first."""

    team_id: str
    match_fees: tuple[Transaction, ...]
    registration_fees: tuple[Transaction, ...]
    other: tuple[Transaction, ...]


@dataclass(frozen=True)
class StaffSummary:
    """Amount paid and still due to one staff member (or to all staff)."""

    staff_id: Optional[str]
    paid: Decimal
    due: Decimal
    count: int


@dataclass(frozen=True)
class GroupSummary:
    """Paid and outstanding totals of one category group."""

    group: CategoryGroup
    paid: Decimal
    outstanding: Decimal
    count: int


@dataclass(frozen=True)
class LocationSummary:
    """Venue rental totals.

    ``surplus`` is paid minus due without flooring; a venue holding a credit
    shows a positive surplus, an unpaid one a negative surplus.
    """

    total_due: Decimal
    total_paid: Decimal
    surplus: Decimal
    total_hours: Decimal
    count: int


@dataclass(frozen=True)
class DashboardReport:
    """Everything the dashboard view shows."""

    totals: LedgerTotals
    groups: tuple[GroupSummary, ...]
    teams: TeamSummary
    recent: tuple[Transaction, ...] = field(default_factory=tuple)
