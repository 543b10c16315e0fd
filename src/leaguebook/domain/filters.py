"""Ledger filtering.

Each active criterion becomes an independent predicate and a transaction is
kept only when all of them hold, so the order in which they are evaluated never
changes the result.
"""

from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, Optional

from leaguebook.domain.entities import CategoryGroup, EntityType, Transaction, TransactionType
from leaguebook.domain.summary import in_group, most_recent_first

Predicate = Callable[[Transaction], bool]


@dataclass(frozen=True)
class LedgerFilter:
    """Optional ledger criteria, combined with logical AND."""

    month: Optional[str] = None
    competition_id: Optional[str] = None
    team_id: Optional[str] = None
    type: Optional[TransactionType] = None
    group: Optional[CategoryGroup] = None
    round: Optional[str] = None
    season_id: Optional[str] = None
    week_id: Optional[str] = None
    search: Optional[str] = None

    def predicates(self) -> Iterator[Predicate]:
        """Yield one predicate per active criterion."""
        if self.month:
            month = self.month
            yield lambda txn: txn.date.isoformat().startswith(month)
        if self.group is not None:
            group = self.group
            yield lambda txn: in_group(txn, group)
        if self.competition_id:
            competition_id = self.competition_id
            yield lambda txn: txn.competition_id == competition_id
        if self.team_id:
            team_id = self.team_id
            yield lambda txn: txn.entity_type is EntityType.TEAM and txn.entity_id == team_id
        if self.type is not None:
            txn_type = self.type
            yield lambda txn: txn.type is txn_type
        if self.round:
            round_label = self.round
            yield lambda txn: txn.round == round_label
        if self.season_id:
            season_id = self.season_id
            yield lambda txn: txn.season_id == season_id
        if self.week_id:
            week_id = self.week_id
            yield lambda txn: txn.week_id == week_id
        if self.search:
            term = self.search.lower()
            yield lambda txn: matches_search(txn, term)

    def matches(self, txn: Transaction) -> bool:
        return all(predicate(txn) for predicate in self.predicates())

    def apply(self, transactions: Iterable[Transaction]) -> list[Transaction]:
        """Return matching transactions, most recent date first."""
        return most_recent_first(txn for txn in transactions if self.matches(txn))


def matches_search(txn: Transaction, term: str) -> bool:
    """Case-insensitive substring match over entity name, category and round."""
    term = term.lower()
    fields = (txn.entity_name, txn.category, txn.round or "")
    return any(term in value.lower() for value in fields)


def available_rounds(transactions: Iterable[Transaction]) -> list[str]:
    """Distinct round labels used by transactions, sorted."""
    return sorted({txn.round for txn in transactions if txn.round})
