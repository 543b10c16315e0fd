"""Mapper functions to convert between domain entities and the stored document.

The document uses the same camelCase layout as the league's browser backups,
so older saves and exported files load unchanged.
"""

from datetime import date, datetime, time, UTC
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Optional

from leaguebook.domain import entities as domain
from leaguebook.domain.categories import kind_for_category
from leaguebook.domain.defaults import (
    INITIAL_COMPETITIONS,
    INITIAL_SEASONS,
    INITIAL_STAFF,
    INITIAL_TEAMS,
    INITIAL_WEEKS,
)
from leaguebook.domain.state import LeagueState


def _optional_str(value: Any) -> Optional[str]:
    if value is None or value == "":
        return None
    return str(value)


def _to_decimal(value: Any, field: str) -> Decimal:
    if value is None or value == "":
        return Decimal("0")
    try:
        amount = Decimal(str(value))
    except InvalidOperation as e:
        raise ValueError(f"Invalid {field} '{value}'") from e
    if not amount.is_finite() or amount < 0:
        raise ValueError(f"Invalid {field} '{value}'")
    return amount


def _from_decimal(value: Decimal) -> int | float:
    if value == value.to_integral_value():
        return int(value)
    return float(value)


def _to_created_at(value: Any, fallback: date) -> datetime:
    if value is None:
        return datetime.combine(fallback, time.min, tzinfo=UTC)
    return datetime.fromtimestamp(int(value) / 1000, tz=UTC)


def _from_created_at(value: datetime) -> int:
    return int(value.timestamp() * 1000)


def migrate_transaction_document(data: dict[str, Any]) -> dict[str, Any]:
    """Bring a stored transaction record up to the current layout.

    Records written before rounds existed kept the round label in
    ``contextValue``; it is copied into ``round`` when ``round`` is missing.
    """
    migrated = dict(data)
    if not migrated.get("round") and migrated.get("contextValue"):
        migrated["round"] = migrated["contextValue"]
    return migrated


def transaction_to_domain(data: dict[str, Any]) -> domain.Transaction:
    """Convert a stored transaction record to a domain Transaction.

    A stored ``status`` is ignored; status is derived from the amounts.
    """
    data = migrate_transaction_document(data)
    txn_date = date.fromisoformat(str(data["date"]))
    category = str(data.get("category") or "")
    kind = data.get("kind")
    rental_hours = data.get("rentalHours")
    matches_worked = data.get("matchesWorked")

    return domain.Transaction(
        id=str(data["id"]),
        date=txn_date,
        type=domain.TransactionType(data["type"]),
        category=category,
        entity_id=str(data.get("entityId") or domain.GENERIC_ENTITY_ID),
        entity_name=str(data.get("entityName") or ""),
        entity_type=domain.EntityType(data.get("entityType") or domain.EntityType.OTHER.value),
        amount_due=_to_decimal(data.get("amountDue"), "amountDue"),
        amount_paid=_to_decimal(data.get("amountPaid"), "amountPaid"),
        created_at=_to_created_at(data.get("createdAt"), txn_date),
        kind=domain.CategoryKind(kind) if kind else kind_for_category(category),
        rental_hours=_to_decimal(rental_hours, "rentalHours") if rental_hours is not None else None,
        season_id=_optional_str(data.get("seasonId")),
        week_id=_optional_str(data.get("weekId")),
        competition_id=_optional_str(data.get("competitionId")),
        round=_optional_str(data.get("round")),
        context_type=domain.ContextType(data.get("contextType") or domain.ContextType.COMPETITION.value),
        description=_optional_str(data.get("description")),
        notes=_optional_str(data.get("notes")),
        matches_worked=int(matches_worked) if matches_worked is not None else None,
    )


def transaction_to_document(txn: domain.Transaction) -> dict[str, Any]:
    """Convert a domain Transaction to a stored transaction record."""
    document: dict[str, Any] = {
        "id": txn.id,
        "date": txn.date.isoformat(),
        "type": txn.type.value,
        "category": txn.category,
        "entityId": txn.entity_id,
        "entityName": txn.entity_name,
        "entityType": txn.entity_type.value,
        "kind": txn.kind.value,
        "seasonId": txn.season_id or "",
        "weekId": txn.week_id or "",
        "competitionId": txn.competition_id or "",
        "round": txn.round or "",
        "contextType": txn.context_type.value,
        "amountDue": _from_decimal(txn.amount_due),
        "amountPaid": _from_decimal(txn.amount_paid),
        # Written for readers that still expect a status field.
        "status": txn.status.value,
        "createdAt": _from_created_at(txn.created_at),
    }
    if txn.rental_hours is not None:
        document["rentalHours"] = _from_decimal(txn.rental_hours)
    if txn.description:
        document["description"] = txn.description
    if txn.notes:
        document["notes"] = txn.notes
    if txn.matches_worked is not None:
        document["matchesWorked"] = txn.matches_worked
    return document


def team_to_domain(data: dict[str, Any]) -> domain.Team:
    """Convert a stored team record to a domain Team."""
    return domain.Team(id=str(data["id"]), name=str(data["name"]), image=data.get("logo") or None)


def team_to_document(team: domain.Team) -> dict[str, Any]:
    document: dict[str, Any] = {"id": team.id, "name": team.name}
    if team.image:
        document["logo"] = team.image
    return document


def staff_to_domain(data: dict[str, Any]) -> domain.StaffMember:
    """Convert a stored staff record to a domain StaffMember."""
    role = data.get("defaultRole") or domain.StaffRole.ARBITRO.value
    return domain.StaffMember(
        id=str(data["id"]),
        name=str(data["name"]),
        default_role=domain.StaffRole(role),
        image=data.get("photo") or None,
    )


def staff_to_document(member: domain.StaffMember) -> dict[str, Any]:
    document: dict[str, Any] = {
        "id": member.id,
        "name": member.name,
        "defaultRole": member.default_role.value,
    }
    if member.image:
        document["photo"] = member.image
    return document


def competition_to_domain(data: dict[str, Any]) -> domain.Competition:
    """Convert a stored competition record to a domain Competition."""
    return domain.Competition(
        id=str(data["id"]),
        name=str(data["name"]),
        season_id=_optional_str(data.get("seasonId")),
        rounds=tuple(str(label) for label in data.get("rounds") or ()),
        image=data.get("logo") or None,
    )


def competition_to_document(competition: domain.Competition) -> dict[str, Any]:
    document: dict[str, Any] = {
        "id": competition.id,
        "name": competition.name,
        "seasonId": competition.season_id or "",
        "rounds": list(competition.rounds),
    }
    if competition.image:
        document["logo"] = competition.image
    return document


def season_to_domain(data: dict[str, Any]) -> domain.Season:
    return domain.Season(id=str(data["id"]), name=str(data["name"]))


def week_to_domain(data: dict[str, Any]) -> domain.Week:
    return domain.Week(id=str(data["id"]), name=str(data["name"]))


def named_to_document(entity: domain.Season | domain.Week) -> dict[str, Any]:
    return {"id": entity.id, "name": entity.name}


def _collection(
    document: dict[str, Any],
    key: str,
    convert: Callable[[dict[str, Any]], Any],
    default: tuple,
) -> tuple:
    records = document.get(key)
    if records is None:
        return default
    if not isinstance(records, list):
        raise ValueError(f"'{key}' must be a list")
    return tuple(convert(record) for record in records)


def state_to_domain(document: dict[str, Any]) -> LeagueState:
    """Convert a stored document to a LeagueState.

    The document must hold a ``transactions`` list. Reference collections that
    are absent fall back to the default seed data.

    Raises:
        ValueError: If the document is malformed
    """
    if not isinstance(document, dict) or not isinstance(document.get("transactions"), list):
        raise ValueError("Document has no transactions collection")

    try:
        return LeagueState(
            transactions=_collection(document, "transactions", transaction_to_domain, ()),
            teams=_collection(document, "teams", team_to_domain, INITIAL_TEAMS),
            staff=_collection(document, "staff", staff_to_domain, INITIAL_STAFF),
            competitions=_collection(
                document, "competitions", competition_to_domain, INITIAL_COMPETITIONS
            ),
            seasons=_collection(document, "seasons", season_to_domain, INITIAL_SEASONS),
            weeks=_collection(document, "weeks", week_to_domain, INITIAL_WEEKS),
        )
    except (KeyError, TypeError, AttributeError, OverflowError) as e:
        raise ValueError(f"Malformed record: {e!r}") from e


def state_to_document(state: LeagueState) -> dict[str, Any]:
    """Convert a LeagueState to its stored document."""
    return {
        "transactions": [transaction_to_document(txn) for txn in state.transactions],
        "teams": [team_to_document(team) for team in state.teams],
        "staff": [staff_to_document(member) for member in state.staff],
        "competitions": [competition_to_document(comp) for comp in state.competitions],
        "seasons": [named_to_document(season) for season in state.seasons],
        "weeks": [named_to_document(week) for week in state.weeks],
    }
