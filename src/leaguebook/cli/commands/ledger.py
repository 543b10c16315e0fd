"""Ledger commands."""

import click
from leaguebook.domain.categories import categories_for
from leaguebook.domain.entities import CategoryGroup, EntityType, TransactionType
from leaguebook.domain.filters import LedgerFilter, available_rounds
from leaguebook.domain.registry import RegistryService
from leaguebook.domain.summary import SummaryService
from leaguebook.domain.transaction import TransactionService
from leaguebook.cli.entity_resolution import resolve_optional_or_exit
from leaguebook.cli.option_parsing import parse_month_or_exit
from leaguebook.cli.tables import echo_transaction_detail, echo_transaction_table
from leaguebook.utils.formatting import format_currency

GROUP_CHOICES = [group.value.lower().replace("_", "-") for group in CategoryGroup]


@click.group()
def ledger_group():
    """Browse the ledger."""
    pass


@ledger_group.command("list")
@click.option("--month", help="Month (YYYY-MM, MM/YYYY, 'this month' or 'last month')")
@click.option("--competition", help="Competition name or ID")
@click.option("--team", help="Team name or ID")
@click.option("--type", "txn_type", type=click.Choice(["income", "expense"], case_sensitive=False), help="Income or expense")
@click.option("--group", type=click.Choice(GROUP_CHOICES, case_sensitive=False), help="Category group")
@click.option("--round", "round_label", help="Round label")
@click.option("--season", help="Season name or ID")
@click.option("--week", help="Week name or ID")
@click.option("--search", help="Text to look for in entity name, category or round")
@click.option("--verbose", "-v", is_flag=True, help="Show every field of each transaction")
@click.pass_context
def list_ledger(
    ctx,
    month: str | None,
    competition: str | None,
    team: str | None,
    txn_type: str | None,
    group: str | None,
    round_label: str | None,
    season: str | None,
    week: str | None,
    search: str | None,
    verbose: bool,
):
    """View transactions with optional filters, most recent first.

    All filters combine; names and IDs are accepted for teams, competitions,
    seasons and weeks.

    Examples:
        leaguebook ledger list --month 2025-03
        leaguebook ledger list --team "Orange Ballers" --type income
        leaguebook ledger list --group location --search quadra
    """
    session = ctx.obj["session"]
    service = TransactionService(session)
    registry = RegistryService(session)

    ledger_filter = LedgerFilter(
        month=parse_month_or_exit(ctx, month),
        competition_id=resolve_optional_or_exit(ctx, registry.list_competitions(), competition, "Competition"),
        team_id=resolve_optional_or_exit(ctx, registry.list_teams(), team, "Team"),
        type=TransactionType(txn_type.upper()) if txn_type else None,
        group=CategoryGroup(group.upper().replace("-", "_")) if group else None,
        round=round_label,
        season_id=resolve_optional_or_exit(ctx, registry.list_seasons(), season, "Season"),
        week_id=resolve_optional_or_exit(ctx, registry.list_weeks(), week, "Week"),
        search=search,
    )
    transactions = service.list_transactions(ledger_filter)

    if not transactions:
        click.echo("No transactions found.")
        return

    click.echo(f"\nFound {len(transactions)} transaction(s):")
    if verbose:
        click.echo("=" * 118)
        for txn in transactions:
            echo_transaction_detail(txn, session.state)
            click.echo("-" * 118)
    else:
        echo_transaction_table(transactions)

    totals = SummaryService(session).get_totals(ledger_filter.matches)
    click.echo("-" * 118)
    click.echo(
        f"Net: {format_currency(totals.balance)} | "
        f"To receive: {format_currency(totals.receivables)} | "
        f"To pay: {format_currency(totals.payables)} | Count: {totals.count}"
    )


@ledger_group.command("rounds")
@click.pass_context
def list_rounds(ctx):
    """List the round labels used by transactions."""
    session = ctx.obj["session"]
    rounds = available_rounds(session.state.transactions)
    if not rounds:
        click.echo("No rounds recorded.")
        return
    for label in rounds:
        click.echo(label)


@ledger_group.command("categories")
def list_categories():
    """List the categories offered for each kind of counterparty."""
    for entity_type in EntityType:
        click.echo(f"{entity_type.value}: {', '.join(categories_for(entity_type))}")


def register_commands(cli: click.Group) -> None:
    """Register ledger commands with main CLI."""
    cli.add_command(ledger_group, name="ledger")
