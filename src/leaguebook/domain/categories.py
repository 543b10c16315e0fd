"""Category vocabulary and venue rental rules."""

from decimal import Decimal
from typing import Optional

from leaguebook.domain.entities import CategoryKind, EntityType

VENUE_RENTAL_CATEGORY = "Aluguel Quadra"
COURT_HOURLY_RATE = Decimal("90")

MATCH_FEE_CATEGORY = "Taxa Jogo"
REGISTRATION_FEE_CATEGORY = "Inscrição"
OTHER_CATEGORY = "Outros"

# Controlled vocabulary offered for each counterparty kind. The first entry is
# the default category for new transactions of that kind.
CATEGORY_GROUPS: dict[EntityType, tuple[str, ...]] = {
    EntityType.TEAM: (MATCH_FEE_CATEGORY, REGISTRATION_FEE_CATEGORY, "Multa", OTHER_CATEGORY),
    EntityType.STAFF: ("Arbitro", "Mesario", "Midia", OTHER_CATEGORY),
    EntityType.COST: (VENUE_RENTAL_CATEGORY, "Alimentação", OTHER_CATEGORY),
    EntityType.EXPENSE: ("Premiação", "Equipamentos", "Logística", "Marketing", OTHER_CATEGORY),
    EntityType.OTHER: (OTHER_CATEGORY,),
}


def default_category(entity_type: EntityType) -> str:
    """Return the category preselected for a counterparty kind."""
    return CATEGORY_GROUPS[entity_type][0]


def categories_for(entity_type: EntityType) -> tuple[str, ...]:
    """Return the categories offered for a counterparty kind."""
    return CATEGORY_GROUPS[entity_type]


def kind_for_category(category: str) -> CategoryKind:
    """Decide the behavioral kind of a category label."""
    if category.strip() == VENUE_RENTAL_CATEGORY:
        return CategoryKind.VENUE_RENTAL
    return CategoryKind.STANDARD


def rental_amount(hours: Decimal, hourly_rate: Decimal = COURT_HOURLY_RATE) -> Decimal:
    """Amount due for renting the court for a number of hours."""
    return hours * hourly_rate


def rental_hours(amount_due: Decimal, hourly_rate: Decimal = COURT_HOURLY_RATE) -> Optional[Decimal]:
    """Recover the rented hours from an amount due, None when nothing is due."""
    if amount_due <= 0:
        return None
    return amount_due / hourly_rate
