"""Utility for resolving reference entity names to IDs."""

from typing import Iterable, Protocol

from leaguebook.domain.errors import NotFoundError, entity_not_found


class _Named(Protocol):
    id: str
    name: str


def resolve_entity(entities: Iterable[_Named], reference: str, kind: str) -> str:
    """Resolve an entity name or ID to its ID.

    IDs win over names; names are compared case-insensitively.

    Args:
        entities: Candidate entities (teams, staff, competitions, ...)
        reference: Entity ID or name
        kind: Entity kind used in the error message (e.g. "Team")

    Returns:
        Entity ID

    Raises:
        NotFoundError: If no entity matches
    """
    candidates = list(entities)
    reference = reference.strip()

    for entity in candidates:
        if entity.id == reference:
            return entity.id

    lowered = reference.lower()
    for entity in candidates:
        if entity.name.lower() == lowered:
            return entity.id

    raise NotFoundError(entity_not_found(kind, reference))
