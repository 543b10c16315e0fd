"""Immutable league state and its named transitions.

Every transition returns a new ``LeagueState``; collections are replaced as a
whole, so a snapshot handed to a reader never changes underneath it.
"""

from dataclasses import dataclass, replace
from typing import Iterable, Optional, TypeVar

from leaguebook.domain.defaults import (
    INITIAL_COMPETITIONS,
    INITIAL_SEASONS,
    INITIAL_STAFF,
    INITIAL_TEAMS,
    INITIAL_WEEKS,
)
from leaguebook.domain.entities import (
    Competition,
    EntityType,
    Season,
    StaffMember,
    Team,
    Transaction,
    Week,
)

UNKNOWN_TEAM = "Unknown Team"
UNKNOWN_STAFF = "Unknown Staff"

T = TypeVar("T", Team, StaffMember, Competition, Season, Week, Transaction)


def _find(items: Iterable[T], item_id: str) -> Optional[T]:
    for item in items:
        if item.id == item_id:
            return item
    return None


def _replace_by_id(items: tuple[T, ...], updated: T) -> tuple[T, ...]:
    return tuple(updated if item.id == updated.id else item for item in items)


def _remove_by_id(items: tuple[T, ...], item_id: str) -> tuple[T, ...]:
    return tuple(item for item in items if item.id != item_id)


@dataclass(frozen=True)
class LeagueState:
    """Snapshot of the whole application state."""

    transactions: tuple[Transaction, ...] = ()
    teams: tuple[Team, ...] = ()
    staff: tuple[StaffMember, ...] = ()
    competitions: tuple[Competition, ...] = ()
    seasons: tuple[Season, ...] = ()
    weeks: tuple[Week, ...] = ()

    @classmethod
    def default(cls) -> "LeagueState":
        """Empty ledger with the default reference data."""
        return cls(
            transactions=(),
            teams=INITIAL_TEAMS,
            staff=INITIAL_STAFF,
            competitions=INITIAL_COMPETITIONS,
            seasons=INITIAL_SEASONS,
            weeks=INITIAL_WEEKS,
        )

    # Lookups
    def find_transaction(self, transaction_id: str) -> Optional[Transaction]:
        return _find(self.transactions, transaction_id)

    def find_team(self, team_id: str) -> Optional[Team]:
        return _find(self.teams, team_id)

    def find_staff(self, staff_id: str) -> Optional[StaffMember]:
        return _find(self.staff, staff_id)

    def find_competition(self, competition_id: str) -> Optional[Competition]:
        return _find(self.competitions, competition_id)

    def find_season(self, season_id: str) -> Optional[Season]:
        return _find(self.seasons, season_id)

    def find_week(self, week_id: str) -> Optional[Week]:
        return _find(self.weeks, week_id)

    def resolve_entity_name(self, entity_type: EntityType, entity_id: str) -> Optional[str]:
        """Resolve the display name of a registered counterparty.

        Orphaned ids resolve to a fallback label rather than failing. Returns
        None for counterparty kinds that are not kept in the registry.
        """
        if entity_type is EntityType.TEAM:
            team = self.find_team(entity_id)
            return team.name if team else UNKNOWN_TEAM
        if entity_type is EntityType.STAFF:
            member = self.find_staff(entity_id)
            return member.name if member else UNKNOWN_STAFF
        return None

    def season_for_competition(self, competition_id: Optional[str]) -> Optional[str]:
        """Season a competition belongs to, None if unknown or unset."""
        if not competition_id:
            return None
        competition = self.find_competition(competition_id)
        if competition is None or not competition.season_id:
            return None
        return competition.season_id

    # Transactions
    def add_transaction(self, transaction: Transaction) -> "LeagueState":
        return replace(self, transactions=self.transactions + (transaction,))

    def replace_transaction(self, transaction: Transaction) -> "LeagueState":
        """Swap in an edited transaction; unknown ids leave the state as is."""
        if self.find_transaction(transaction.id) is None:
            return self
        return replace(self, transactions=_replace_by_id(self.transactions, transaction))

    def remove_transaction(self, transaction_id: str) -> "LeagueState":
        return replace(self, transactions=_remove_by_id(self.transactions, transaction_id))

    def _rename_counterparty(
        self, entity_type: EntityType, entity_id: str, name: str
    ) -> tuple[Transaction, ...]:
        return tuple(
            replace(txn, entity_name=name)
            if txn.entity_type is entity_type and txn.entity_id == entity_id
            else txn
            for txn in self.transactions
        )

    # Teams
    def add_team(self, team: Team) -> "LeagueState":
        return replace(self, teams=self.teams + (team,))

    def update_team(self, team: Team) -> "LeagueState":
        """Replace a team and keep cached names on its transactions in sync."""
        return replace(
            self,
            teams=_replace_by_id(self.teams, team),
            transactions=self._rename_counterparty(EntityType.TEAM, team.id, team.name),
        )

    def remove_team(self, team_id: str) -> "LeagueState":
        return replace(self, teams=_remove_by_id(self.teams, team_id))

    # Staff
    def add_staff(self, member: StaffMember) -> "LeagueState":
        return replace(self, staff=self.staff + (member,))

    def update_staff(self, member: StaffMember) -> "LeagueState":
        """Replace a staff member and keep cached names on their transactions in sync."""
        return replace(
            self,
            staff=_replace_by_id(self.staff, member),
            transactions=self._rename_counterparty(EntityType.STAFF, member.id, member.name),
        )

    def remove_staff(self, staff_id: str) -> "LeagueState":
        return replace(self, staff=_remove_by_id(self.staff, staff_id))

    # Competitions, seasons and weeks
    def add_competition(self, competition: Competition) -> "LeagueState":
        return replace(self, competitions=self.competitions + (competition,))

    def update_competition(self, competition: Competition) -> "LeagueState":
        return replace(self, competitions=_replace_by_id(self.competitions, competition))

    def remove_competition(self, competition_id: str) -> "LeagueState":
        return replace(self, competitions=_remove_by_id(self.competitions, competition_id))

    def add_season(self, season: Season) -> "LeagueState":
        return replace(self, seasons=self.seasons + (season,))

    def update_season(self, season: Season) -> "LeagueState":
        return replace(self, seasons=_replace_by_id(self.seasons, season))

    def remove_season(self, season_id: str) -> "LeagueState":
        return replace(self, seasons=_remove_by_id(self.seasons, season_id))

    def add_week(self, week: Week) -> "LeagueState":
        return replace(self, weeks=self.weeks + (week,))

    def update_week(self, week: Week) -> "LeagueState":
        return replace(self, weeks=_replace_by_id(self.weeks, week))

    def remove_week(self, week_id: str) -> "LeagueState":
        return replace(self, weeks=_remove_by_id(self.weeks, week_id))
