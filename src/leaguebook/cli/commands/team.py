"""Team management commands."""

import click
from leaguebook.domain.errors import DomainError
from leaguebook.domain.registry import RegistryService
from leaguebook.domain.summary import SummaryService
from leaguebook.cli.entity_resolution import resolve_entity_or_exit
from leaguebook.cli.error_handling import handle_domain_error
from leaguebook.cli.tables import echo_transaction_table
from leaguebook.utils.formatting import format_currency


@click.group()
def team_group():
    """Manage teams."""
    pass


@team_group.command("list")
@click.pass_context
def list_teams(ctx):
    """List all teams with what they paid and still owe."""
    session = ctx.obj["session"]
    registry = RegistryService(session)
    summaries = SummaryService(session)

    teams = registry.list_teams()
    if not teams:
        click.echo("No teams found.")
        return

    click.echo("\nTeams:")
    click.echo("-" * 80)
    click.echo(f"{'ID':<34} {'Name':<20} {'Paid':>12} {'To receive':>12}")
    for team in teams:
        summary = summaries.get_team_summary(team.id)
        click.echo(
            f"{team.id:<34} {team.name:<20} {format_currency(summary.paid):>12} "
            f"{format_currency(summary.receivable):>12}"
        )

    overview = summaries.get_teams_overview()
    click.echo("-" * 80)
    click.echo(
        f"{'TOTAL':<34} {'':<20} {format_currency(overview.paid):>12} "
        f"{format_currency(overview.receivable):>12}"
    )


@team_group.command("add")
@click.argument("name", metavar="TEAM_NAME")
@click.option("--image", help="Logo URL or path")
@click.option("--id", "team_id", help="Explicit team ID (generated when omitted)")
@click.pass_context
def add_team(ctx, name: str, image: str | None, team_id: str | None):
    """Add a team.

    Examples:
        leaguebook team add "Red Wolves"
        leaguebook team add "Red Wolves" --image https://example.org/wolves.png
    """
    registry = RegistryService(ctx.obj["session"])
    try:
        team = registry.create_team(name=name, image=image, team_id=team_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created team '{team.name}' (ID: {team.id})")


@team_group.command("update")
@click.argument("team", metavar="TEAM")
@click.option("--name", help="New team name (also updates the team's transactions)")
@click.option("--image", help="New logo URL or path")
@click.pass_context
def update_team(ctx, team: str, name: str | None, image: str | None) -> None:
    """Rename a team or change its logo.

    TEAM can be a team name or ID.

    Examples:
        leaguebook team update "Orange Ballers" --name "Orange Ballers FC"
    """
    registry = RegistryService(ctx.obj["session"])
    team_id = resolve_entity_or_exit(ctx, registry.list_teams(), team, "Team")
    try:
        updated = registry.update_team(team_id, name=name, image=image)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Updated team '{updated.name}' (ID: {updated.id})")


@team_group.command("delete")
@click.argument("team", metavar="TEAM")
@click.option("--yes", "-y", is_flag=True, help="Skip the confirmation prompt")
@click.pass_context
def delete_team(ctx, team: str, yes: bool) -> None:
    """Delete a team.

    The team's transactions are kept and show as "Unknown Team".
    """
    registry = RegistryService(ctx.obj["session"])
    team_id = resolve_entity_or_exit(ctx, registry.list_teams(), team, "Team")
    name = registry.require_team(team_id).name

    if not yes and not click.confirm(f"Are you sure you want to delete team '{name}'?"):
        click.echo("Deletion cancelled.")
        return

    registry.delete_team(team_id)
    click.echo(f"Deleted team '{name}'")


@team_group.command("show")
@click.argument("team", metavar="TEAM")
@click.pass_context
def show_team(ctx, team: str) -> None:
    """Show a team's balance and its fees by kind.

    Examples:
        leaguebook team show "Black Mambas"
    """
    session = ctx.obj["session"]
    registry = RegistryService(session)
    summaries = SummaryService(session)

    team_id = resolve_entity_or_exit(ctx, registry.list_teams(), team, "Team")
    team_obj = registry.require_team(team_id)
    summary = summaries.get_team_summary(team_id)
    breakdown = summaries.get_team_breakdown(team_id)

    click.echo(f"\n{team_obj.name} (ID: {team_obj.id})")
    click.echo("=" * 60)
    click.echo(f"{'Paid':<30} {format_currency(summary.paid):>20}")
    click.echo(f"{'To receive':<30} {format_currency(summary.receivable):>20}")

    echo_transaction_table(breakdown.match_fees, title="Match fees")
    echo_transaction_table(breakdown.registration_fees, title="Registration fees")
    if breakdown.other:
        echo_transaction_table(breakdown.other, title="Other")


def register_commands(cli: click.Group) -> None:
    """Register team commands with main CLI."""
    cli.add_command(team_group, name="team")
