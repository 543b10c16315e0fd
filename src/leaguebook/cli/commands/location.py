"""Venue rental (location) command."""

import click
from leaguebook.domain.categories import COURT_HOURLY_RATE
from leaguebook.domain.summary import SummaryService
from leaguebook.cli.option_parsing import parse_month_or_exit
from leaguebook.cli.tables import echo_transaction_table
from leaguebook.utils.formatting import format_currency, format_hours


@click.command("location")
@click.option("--month", help="Month (YYYY-MM, MM/YYYY, 'this month' or 'last month')")
@click.pass_context
def show_location(ctx, month: str | None):
    """Show court rentals with hours, amounts due and paid.

    A positive surplus means the venue was paid ahead.

    Examples:
        leaguebook location
        leaguebook location --month 2025-03
    """
    summaries = SummaryService(ctx.obj["session"])
    month = parse_month_or_exit(ctx, month)
    summary = summaries.get_location_summary(month=month)

    click.echo(f"\nCourt rentals{f' for {month}' if month else ''} (rate {format_currency(COURT_HOURLY_RATE)}/h)")
    click.echo("=" * 60)
    click.echo(f"{'Hours':<30} {format_hours(summary.total_hours):>20}")
    click.echo(f"{'Due':<30} {format_currency(summary.total_due):>20}")
    click.echo(f"{'Paid':<30} {format_currency(summary.total_paid):>20}")
    click.echo(f"{'Surplus':<30} {format_currency(summary.surplus):>20}")

    echo_transaction_table(summaries.list_location_transactions(month=month), title="Rentals")


def register_commands(cli):
    """Register location command with main CLI."""
    cli.add_command(show_location)
