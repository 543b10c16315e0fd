"""Backup export and import commands."""

import click
from leaguebook.domain.backup import BackupService
from leaguebook.domain.errors import ImportRejectedError
from leaguebook.cli.error_handling import handle_domain_error


@click.group()
def backup_group():
    """Export or restore the whole league."""
    pass


@backup_group.command("export")
@click.argument("destination", type=click.Path(), default=".")
@click.pass_context
def export_backup(ctx, destination: str):
    """Write a JSON backup.

    DESTINATION is a directory (a dated file name is used) or a file path.

    Examples:
        leaguebook backup export
        leaguebook backup export ~/backups
    """
    service = BackupService(ctx.obj["session"])
    try:
        path = service.export_backup(destination)
    except OSError as e:
        click.echo(f"Error: Could not write backup: {e}", err=True)
        ctx.exit(1)
    click.echo(f"Exported backup to {path}")


@backup_group.command("import")
@click.argument("source", type=click.Path(exists=True, dir_okay=False))
@click.option("--yes", "-y", is_flag=True, help="Skip the confirmation prompt")
@click.pass_context
def import_backup(ctx, source: str, yes: bool):
    """Replace all league data with a JSON backup.

    Nothing is merged; the current data is discarded.

    Examples:
        leaguebook backup import leaguebook_backup_2025-03-01.json
    """
    service = BackupService(ctx.obj["session"])

    if not yes and not click.confirm("This replaces all current data. Continue?"):
        click.echo("Import cancelled.")
        return

    try:
        state = service.import_backup(source)
    except ImportRejectedError as e:
        handle_domain_error(ctx, e)
    except OSError as e:
        click.echo(f"Error: Could not read backup: {e}", err=True)
        ctx.exit(1)

    click.echo(
        f"Imported {len(state.transactions)} transaction(s), {len(state.teams)} team(s), "
        f"{len(state.staff)} staff member(s)"
    )


def register_commands(cli: click.Group) -> None:
    """Register backup commands with main CLI."""
    cli.add_command(backup_group, name="backup")
