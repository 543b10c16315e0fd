"""Transaction management commands."""

import click
from leaguebook.domain.entities import ContextType, EntityType, TransactionType
from leaguebook.domain.errors import DomainError
from leaguebook.domain.registry import RegistryService
from leaguebook.domain.transaction import TransactionService
from leaguebook.cli.commands.add import ENTITY_TYPE_CHOICES, TYPE_CHOICES, resolve_counterparty
from leaguebook.cli.entity_resolution import resolve_optional_or_exit, resolve_transaction_id
from leaguebook.cli.error_handling import handle_domain_error
from leaguebook.cli.option_parsing import (
    parse_amount_or_exit,
    parse_date_or_exit,
    parse_hours_or_exit,
)
from leaguebook.cli.tables import echo_transaction_detail


@click.group()
def transaction_group():
    """Manage transactions."""
    pass


@transaction_group.command("show")
@click.argument("transaction_id")
@click.pass_context
def show_transaction(ctx, transaction_id: str) -> None:
    """Show every field of a transaction.

    TRANSACTION_ID can be the full ID or the short prefix shown in listings.
    """
    session = ctx.obj["session"]
    service = TransactionService(session)

    transaction_id = resolve_transaction_id(ctx, session.state.transactions, transaction_id)
    txn = service.get_transaction(transaction_id)
    if txn is None:
        click.echo(f"Error: Transaction {transaction_id} not found", err=True)
        ctx.exit(1)
    echo_transaction_detail(txn, session.state)


@transaction_group.command("update")
@click.argument("transaction_id")
@click.option("--entity-type", type=click.Choice(ENTITY_TYPE_CHOICES, case_sensitive=False), help="Kind of counterparty")
@click.option("--entity", help="Team or staff name/ID, or a free-text name for costs and expenses")
@click.option("--type", "txn_type", type=click.Choice(TYPE_CHOICES, case_sensitive=False), help="Income or expense")
@click.option("--category", help="Category")
@click.option("--date", help="Transaction date (DD/MM/YY, YYYY-MM-DD or 'today')")
@click.option("--due", help="Amount due")
@click.option("--paid", help="Amount paid so far")
@click.option("--hours", help="Rented court hours (venue rental only)")
@click.option("--competition", help="Competition name or ID, or empty string to clear")
@click.option("--round", "round_label", help="Round label, or empty string to clear")
@click.option("--week", help="Week name or ID, or empty string to clear")
@click.option("--context", type=click.Choice(["competition", "event"], case_sensitive=False), help="Competition or standalone event")
@click.option("--description", help="Description, or empty string to clear")
@click.option("--notes", help="Notes, or empty string to clear")
@click.option("--matches", type=click.IntRange(min=0), help="Matches worked (staff)")
@click.pass_context
def update_transaction(
    ctx,
    transaction_id: str,
    entity_type: str | None,
    entity: str | None,
    txn_type: str | None,
    category: str | None,
    date: str | None,
    due: str | None,
    paid: str | None,
    hours: str | None,
    competition: str | None,
    round_label: str | None,
    week: str | None,
    context: str | None,
    description: str | None,
    notes: str | None,
    matches: int | None,
) -> None:
    """Update a transaction.

    Updates only the fields that are provided. Status, season and counterparty
    name are derived again from the result.

    Examples:
        leaguebook transaction update 1a2b3c4d --paid 150
        leaguebook transaction update 1a2b3c4d --round "Rodada 2" --notes ""
    """
    session = ctx.obj["session"]
    service = TransactionService(session)
    registry = RegistryService(session)

    transaction_id = resolve_transaction_id(ctx, session.state.transactions, transaction_id)
    current = service.get_transaction(transaction_id)
    if current is None:
        click.echo(f"Transaction {transaction_id} not found; nothing updated.")
        return

    kind = EntityType(entity_type.upper()) if entity_type else None
    entity_id, entity_name = None, None
    if entity is not None or (kind is not None and kind is not current.entity_type):
        entity_id, entity_name = resolve_counterparty(ctx, registry, kind or current.entity_type, entity)

    try:
        txn = service.update_transaction(
            transaction_id,
            date=parse_date_or_exit(ctx, date),
            type=TransactionType(txn_type.upper()) if txn_type else None,
            entity_type=kind,
            amount_due=parse_amount_or_exit(ctx, due, "amount due"),
            amount_paid=parse_amount_or_exit(ctx, paid, "amount paid"),
            entity_id=entity_id,
            entity_name=entity_name,
            category=category,
            rental_hours=parse_hours_or_exit(ctx, hours),
            competition_id=resolve_optional_or_exit(ctx, registry.list_competitions(), competition, "Competition"),
            week_id=resolve_optional_or_exit(ctx, registry.list_weeks(), week, "Week"),
            round=round_label,
            context_type=ContextType(context.upper()) if context else None,
            description=description,
            notes=notes,
            matches_worked=matches,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Updated transaction {txn.id}")
    echo_transaction_detail(txn, session.state)


@transaction_group.command("delete")
@click.argument("transaction_id")
@click.option("--yes", "-y", is_flag=True, help="Skip the confirmation prompt")
@click.pass_context
def delete_transaction(ctx, transaction_id: str, yes: bool) -> None:
    """Delete a transaction.

    Examples:
        leaguebook transaction delete 1a2b3c4d
        leaguebook transaction delete 1a2b3c4d --yes
    """
    session = ctx.obj["session"]
    service = TransactionService(session)

    transaction_id = resolve_transaction_id(ctx, session.state.transactions, transaction_id)
    txn = service.get_transaction(transaction_id)
    if txn is None:
        click.echo(f"Transaction {transaction_id} not found; nothing deleted.")
        return

    # Confirm deletion
    if not yes and not click.confirm(f"Are you sure you want to delete transaction {txn.id} ({txn.entity_name}, {txn.category})?"):
        click.echo("Deletion cancelled.")
        return

    service.delete_transaction(txn.id)
    click.echo(f"Deleted transaction {txn.id}")


def register_commands(cli: click.Group) -> None:
    """Register transaction commands with main CLI."""
    cli.add_command(transaction_group, name="transaction")
