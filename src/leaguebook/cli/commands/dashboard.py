"""Dashboard command."""

import click
from leaguebook.domain.entities import CategoryGroup
from leaguebook.domain.summary import SummaryService
from leaguebook.cli.tables import echo_transaction_table
from leaguebook.utils.formatting import format_currency

GROUP_LABELS = {
    CategoryGroup.TEAMS: "Teams",
    CategoryGroup.STAFF: "Staff",
    CategoryGroup.LOCATION: "Location",
    CategoryGroup.GENERAL_COSTS: "General costs",
}


@click.command("dashboard")
@click.option("--recent", default=5, show_default=True, type=click.IntRange(min=0), help="Number of recent transactions to show")
@click.pass_context
def show_dashboard(ctx, recent: int):
    """Show cash balance, receivables, payables and group totals.

    Examples:
        leaguebook dashboard
        leaguebook dashboard --recent 10
    """
    service = SummaryService(ctx.obj["session"])
    report = service.get_dashboard(recent=recent)

    click.echo("\nLeague overview")
    click.echo("=" * 60)
    click.echo(f"{'Cash balance':<30} {format_currency(report.totals.balance):>20}")
    click.echo(f"{'To receive':<30} {format_currency(report.totals.receivables):>20}")
    click.echo(f"{'To pay':<30} {format_currency(report.totals.payables):>20}")
    click.echo(f"{'Transactions':<30} {report.totals.count:>20}")

    click.echo("\nBy group")
    click.echo("-" * 60)
    click.echo(f"{'Group':<20} {'Paid':>16} {'Outstanding':>16} {'Count':>6}")
    for group in report.groups:
        click.echo(
            f"{GROUP_LABELS[group.group]:<20} {format_currency(group.paid):>16} "
            f"{format_currency(group.outstanding):>16} {group.count:>6}"
        )

    click.echo("\nTeams")
    click.echo("-" * 60)
    click.echo(f"{'Received':<30} {format_currency(report.teams.paid):>20}")
    click.echo(f"{'Still to receive':<30} {format_currency(report.teams.receivable):>20}")

    if recent:
        echo_transaction_table(report.recent, title="Recent transactions")


def register_commands(cli):
    """Register dashboard command with main CLI."""
    cli.add_command(show_dashboard)
