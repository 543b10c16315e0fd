"""Competition, season and week management commands."""

import click
from leaguebook.domain.errors import DomainError
from leaguebook.domain.registry import RegistryService
from leaguebook.cli.entity_resolution import resolve_entity_or_exit, resolve_optional_or_exit
from leaguebook.cli.error_handling import handle_domain_error


@click.group()
def competition_group():
    """Manage competitions and their rounds."""
    pass


@competition_group.command("list")
@click.pass_context
def list_competitions(ctx):
    """List all competitions."""
    registry = RegistryService(ctx.obj["session"])

    competitions = registry.list_competitions()
    if not competitions:
        click.echo("No competitions found.")
        return

    seasons = {season.id: season.name for season in registry.list_seasons()}
    click.echo("\nCompetitions:")
    click.echo("-" * 80)
    for competition in competitions:
        season = seasons.get(competition.season_id, "-") if competition.season_id else "-"
        click.echo(f"ID: {competition.id} | {competition.name} | Season: {season}")
        if competition.rounds:
            click.echo(f"    Rounds: {', '.join(competition.rounds)}")


@competition_group.command("add")
@click.argument("name", metavar="COMPETITION_NAME")
@click.option("--season", help="Season name or ID")
@click.option("--round", "rounds", multiple=True, help="Round label, in order (repeatable)")
@click.option("--image", help="Logo URL or path")
@click.option("--id", "competition_id", help="Explicit competition ID (generated when omitted)")
@click.pass_context
def add_competition(
    ctx, name: str, season: str | None, rounds: tuple[str, ...], image: str | None, competition_id: str | None
):
    """Add a competition.

    Examples:
        leaguebook competition add "Copa Verão" --season "2025 II" --round "Rodada 1" --round Final
    """
    registry = RegistryService(ctx.obj["session"])
    season_id = resolve_optional_or_exit(ctx, registry.list_seasons(), season, "Season")
    try:
        competition = registry.create_competition(
            name=name, season_id=season_id, rounds=rounds, image=image, competition_id=competition_id
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created competition '{competition.name}' (ID: {competition.id})")


@competition_group.command("update")
@click.argument("competition", metavar="COMPETITION")
@click.option("--name", help="New name")
@click.option("--season", help="Season name or ID, or empty string to clear")
@click.option("--round", "rounds", multiple=True, help="Replace the rounds (repeatable)")
@click.option("--clear-rounds", is_flag=True, help="Remove all rounds")
@click.option("--image", help="New logo URL or path")
@click.pass_context
def update_competition(
    ctx,
    competition: str,
    name: str | None,
    season: str | None,
    rounds: tuple[str, ...],
    clear_rounds: bool,
    image: str | None,
) -> None:
    """Update a competition.

    Transactions already recorded keep the season they were entered with.
    """
    registry = RegistryService(ctx.obj["session"])
    competition_id = resolve_entity_or_exit(ctx, registry.list_competitions(), competition, "Competition")
    season_id = resolve_optional_or_exit(ctx, registry.list_seasons(), season, "Season")

    new_rounds = None
    if clear_rounds:
        new_rounds = ()
    elif rounds:
        new_rounds = rounds

    try:
        updated = registry.update_competition(
            competition_id, name=name, season_id=season_id, rounds=new_rounds, image=image
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Updated competition '{updated.name}' (ID: {updated.id})")


@competition_group.command("delete")
@click.argument("competition", metavar="COMPETITION")
@click.pass_context
def delete_competition(ctx, competition: str) -> None:
    """Delete a competition. Its transactions are kept."""
    registry = RegistryService(ctx.obj["session"])
    competition_id = resolve_entity_or_exit(ctx, registry.list_competitions(), competition, "Competition")
    registry.delete_competition(competition_id)
    click.echo(f"Deleted competition {competition_id}")


@click.group()
def season_group():
    """Manage seasons."""
    pass


@season_group.command("list")
@click.pass_context
def list_seasons(ctx):
    """List all seasons."""
    registry = RegistryService(ctx.obj["session"])
    seasons = registry.list_seasons()
    if not seasons:
        click.echo("No seasons found.")
        return
    for season in seasons:
        click.echo(f"ID: {season.id} | {season.name}")


@season_group.command("add")
@click.argument("name", metavar="SEASON_NAME")
@click.option("--id", "season_id", help="Explicit season ID (generated when omitted)")
@click.pass_context
def add_season(ctx, name: str, season_id: str | None):
    """Add a season."""
    registry = RegistryService(ctx.obj["session"])
    try:
        season = registry.create_season(name, season_id=season_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created season '{season.name}' (ID: {season.id})")


@season_group.command("rename")
@click.argument("season", metavar="SEASON")
@click.argument("new_name", metavar="NEW_NAME")
@click.pass_context
def rename_season(ctx, season: str, new_name: str):
    """Rename a season."""
    registry = RegistryService(ctx.obj["session"])
    season_id = resolve_entity_or_exit(ctx, registry.list_seasons(), season, "Season")
    try:
        updated = registry.update_season(season_id, new_name)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Renamed season {updated.id} to '{updated.name}'")


@season_group.command("delete")
@click.argument("season", metavar="SEASON")
@click.pass_context
def delete_season(ctx, season: str):
    """Delete a season."""
    registry = RegistryService(ctx.obj["session"])
    season_id = resolve_entity_or_exit(ctx, registry.list_seasons(), season, "Season")
    registry.delete_season(season_id)
    click.echo(f"Deleted season {season_id}")


@click.group()
def week_group():
    """Manage weeks."""
    pass


@week_group.command("list")
@click.pass_context
def list_weeks(ctx):
    """List all weeks."""
    registry = RegistryService(ctx.obj["session"])
    weeks = registry.list_weeks()
    if not weeks:
        click.echo("No weeks found.")
        return
    for week in weeks:
        click.echo(f"ID: {week.id} | {week.name}")


@week_group.command("add")
@click.argument("name", metavar="WEEK_NAME")
@click.option("--id", "week_id", help="Explicit week ID (generated when omitted)")
@click.pass_context
def add_week(ctx, name: str, week_id: str | None):
    """Add a week."""
    registry = RegistryService(ctx.obj["session"])
    try:
        week = registry.create_week(name, week_id=week_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created week '{week.name}' (ID: {week.id})")


@week_group.command("rename")
@click.argument("week", metavar="WEEK")
@click.argument("new_name", metavar="NEW_NAME")
@click.pass_context
def rename_week(ctx, week: str, new_name: str):
    """Rename a week."""
    registry = RegistryService(ctx.obj["session"])
    week_id = resolve_entity_or_exit(ctx, registry.list_weeks(), week, "Week")
    try:
        updated = registry.update_week(week_id, new_name)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Renamed week {updated.id} to '{updated.name}'")


@week_group.command("delete")
@click.argument("week", metavar="WEEK")
@click.pass_context
def delete_week(ctx, week: str):
    """Delete a week."""
    registry = RegistryService(ctx.obj["session"])
    week_id = resolve_entity_or_exit(ctx, registry.list_weeks(), week, "Week")
    registry.delete_week(week_id)
    click.echo(f"Deleted week {week_id}")


def register_commands(cli: click.Group) -> None:
    """Register competition, season and week commands with main CLI."""
    cli.add_command(competition_group, name="competition")
    cli.add_command(season_group, name="season")
    cli.add_command(week_group, name="week")
