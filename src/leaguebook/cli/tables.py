"""Transaction listing output shared by the CLI commands."""

from typing import Sequence

import click

from leaguebook.domain.entities import Transaction, TransactionType
from leaguebook.domain.status import STATUS_LABELS
from leaguebook.utils.formatting import format_currency, format_date_display, format_hours

SHORT_ID = 8


def signed_due(txn: Transaction) -> str:
    due = format_currency(txn.amount_due)
    return f"- {due}" if txn.type is TransactionType.EXPENSE else due


def echo_transaction_table(transactions: Sequence[Transaction], title: str | None = None) -> None:
    """Print transactions as a compact table."""
    if title:
        click.echo(f"\n{title}:")
    if not transactions:
        click.echo("No transactions found.")
        return

    click.echo("-" * 118)
    click.echo(
        f"{'ID':<9} {'Date':<9} {'Entity':<22} {'Category':<16} {'Round':<12} "
        f"{'Due':>16} {'Paid':>14} {'Status':<8}"
    )
    click.echo("-" * 118)
    for txn in transactions:
        click.echo(
            f"{txn.id[:SHORT_ID]:<9} {format_date_display(txn.date):<9} {txn.entity_name[:22]:<22} "
            f"{txn.category[:16]:<16} {(txn.round or '-')[:12]:<12} "
            f"{signed_due(txn):>16} {format_currency(txn.amount_paid):>14} "
            f"{STATUS_LABELS[txn.settlement]:<8}"
        )


def echo_transaction_detail(txn: Transaction, state=None) -> None:
    """Print every field of a transaction."""
    click.echo(f"Transaction ID: {txn.id}")
    click.echo(f"  Date: {format_date_display(txn.date)}")
    click.echo(f"  Type: {txn.type.value}")
    click.echo(f"  Entity: {txn.entity_name} ({txn.entity_type.value})")
    click.echo(f"  Category: {txn.category}")
    if txn.rental_hours is not None:
        click.echo(f"  Hours: {format_hours(txn.rental_hours)}")
    click.echo(f"  Amount due: {format_currency(txn.amount_due)}")
    click.echo(f"  Amount paid: {format_currency(txn.amount_paid)}")
    click.echo(f"  Status: {STATUS_LABELS[txn.settlement]}")
    if txn.outstanding > 0:
        click.echo(f"  Outstanding: {format_currency(txn.outstanding)}")

    if txn.competition_id:
        competition = state.find_competition(txn.competition_id) if state else None
        click.echo(f"  Competition: {competition.name if competition else txn.competition_id}")
    if txn.season_id:
        season = state.find_season(txn.season_id) if state else None
        click.echo(f"  Season: {season.name if season else txn.season_id}")
    if txn.week_id:
        week = state.find_week(txn.week_id) if state else None
        click.echo(f"  Week: {week.name if week else txn.week_id}")
    if txn.round:
        click.echo(f"  Round: {txn.round}")
    click.echo(f"  Context: {txn.context_type.value}")
    if txn.matches_worked is not None:
        click.echo(f"  Matches worked: {txn.matches_worked}")
    if txn.description:
        click.echo(f"  Description: {txn.description}")
    if txn.notes:
        click.echo(f"  Notes: {txn.notes}")
    click.echo(f"  Created: {txn.created_at:%Y-%m-%d %H:%M:%S}")
