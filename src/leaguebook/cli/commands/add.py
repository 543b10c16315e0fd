"""Add transaction command."""

import click
from leaguebook.domain.entities import ContextType, EntityType, TransactionType
from leaguebook.domain.errors import DomainError
from leaguebook.domain.registry import RegistryService
from leaguebook.domain.transaction import TransactionService
from leaguebook.cli.entity_resolution import resolve_entity_or_exit, resolve_optional_or_exit
from leaguebook.cli.error_handling import handle_domain_error
from leaguebook.cli.option_parsing import (
    parse_amount_or_exit,
    parse_date_or_exit,
    parse_hours_or_exit,
)
from leaguebook.cli.tables import echo_transaction_detail

ENTITY_TYPE_CHOICES = [entity_type.value.lower() for entity_type in EntityType]
TYPE_CHOICES = [txn_type.value.lower() for txn_type in TransactionType]


def resolve_counterparty(ctx, registry: RegistryService, entity_type: EntityType, entity: str | None):
    """Map --entity to (entity_id, entity_name) for the given entity type."""
    if entity_type is EntityType.TEAM:
        if not entity:
            click.echo("Error: --entity is required for team transactions", err=True)
            ctx.exit(1)
        return resolve_entity_or_exit(ctx, registry.list_teams(), entity, "Team"), None
    if entity_type is EntityType.STAFF:
        if not entity:
            click.echo("Error: --entity is required for staff transactions", err=True)
            ctx.exit(1)
        return resolve_entity_or_exit(ctx, registry.list_staff(), entity, "Staff member"), None
    return None, entity


@click.command("add")
@click.option(
    "--entity-type",
    type=click.Choice(ENTITY_TYPE_CHOICES, case_sensitive=False),
    default="team",
    show_default=True,
    help="Kind of counterparty",
)
@click.option("--entity", help="Team or staff name/ID, or a free-text name for costs and expenses")
@click.option(
    "--type",
    "txn_type",
    type=click.Choice(TYPE_CHOICES, case_sensitive=False),
    help="Income or expense (default: income for teams, expense otherwise)",
)
@click.option("--category", help="Category (defaults to the first category of the entity type)")
@click.option("--date", default="today", show_default=True, help="Transaction date (DD/MM/YY, YYYY-MM-DD or 'today')")
@click.option("--due", default="0", show_default=True, help="Amount due (e.g., 150 or 1.234,56)")
@click.option("--paid", default="0", show_default=True, help="Amount paid so far")
@click.option("--hours", help="Rented court hours (venue rental only, e.g., 2 or 1h30)")
@click.option("--competition", help="Competition name or ID")
@click.option("--round", "round_label", help="Round label (e.g., 'Rodada 1')")
@click.option("--week", help="Week name or ID")
@click.option("--event", is_flag=True, help="Record against a standalone event instead of a competition")
@click.option("--description", help="Description")
@click.option("--notes", help="Notes")
@click.option("--matches", type=click.IntRange(min=0), help="Matches worked (staff)")
@click.pass_context
def add_transaction(
    ctx,
    entity_type: str,
    entity: str | None,
    txn_type: str | None,
    category: str | None,
    date: str,
    due: str,
    paid: str,
    hours: str | None,
    competition: str | None,
    round_label: str | None,
    week: str | None,
    event: bool,
    description: str | None,
    notes: str | None,
    matches: int | None,
):
    """Add a transaction.

    Examples:
        leaguebook add --entity "Orange Ballers" --category "Taxa Jogo" --due 150 --paid 100
        leaguebook add --entity-type staff --entity "Carlos Juiz" --category Arbitro --due 80 --matches 2
        leaguebook add --entity-type cost --category "Aluguel Quadra" --hours 2 --paid 180
    """
    session = ctx.obj["session"]
    transaction_service = TransactionService(session)
    registry = RegistryService(session)

    kind = EntityType(entity_type.upper())
    if txn_type is None:
        resolved_type = TransactionType.INCOME if kind is EntityType.TEAM else TransactionType.EXPENSE
    else:
        resolved_type = TransactionType(txn_type.upper())

    entity_id, entity_name = resolve_counterparty(ctx, registry, kind, entity)
    competition_id = resolve_optional_or_exit(ctx, registry.list_competitions(), competition, "Competition")
    week_id = resolve_optional_or_exit(ctx, registry.list_weeks(), week, "Week")

    txn_date = parse_date_or_exit(ctx, date)
    amount_due = parse_amount_or_exit(ctx, due, "amount due")
    amount_paid = parse_amount_or_exit(ctx, paid, "amount paid")
    rental_hours = parse_hours_or_exit(ctx, hours)

    try:
        txn = transaction_service.create_transaction(
            date=txn_date,
            type=resolved_type,
            entity_type=kind,
            amount_due=amount_due,
            amount_paid=amount_paid,
            entity_id=entity_id,
            entity_name=entity_name,
            category=category,
            rental_hours=rental_hours,
            competition_id=competition_id,
            week_id=week_id,
            round=round_label,
            context_type=ContextType.EVENT if event else None,
            description=description,
            notes=notes,
            matches_worked=matches,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created transaction {txn.id}")
    echo_transaction_detail(txn, session.state)


def register_commands(cli):
    """Register add command with main CLI."""
    cli.add_command(add_transaction)
