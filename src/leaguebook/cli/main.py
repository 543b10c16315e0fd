"""Main CLI entry point."""

import click
from leaguebook.database.factories import create_sqlite_storage
from leaguebook.domain.session import LeagueSession
from leaguebook.logging_config import setup_logging

# Import and register all commands at module level
from leaguebook.cli.commands import (
    add,
    transaction,
    ledger,
    dashboard,
    team,
    staff,
    competition,
    location,
    backup,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides LEAGUEBOOK_DB_PATH environment variable)",
    envvar="LEAGUEBOOK_DB_PATH",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
    envvar="LEAGUEBOOK_LOG_LEVEL",
    help="Logging verbosity",
)
@click.option(
    "--log-dir",
    type=click.Path(file_okay=False),
    envvar="LEAGUEBOOK_LOG_DIR",
    help="Directory for daily log files (console only when omitted)",
)
@click.pass_context
def cli(ctx, db_path: str | None, log_level: str, log_dir: str | None):
    """Leaguebook - Finance ledger for an amateur sports league.

    Record what teams owe and pay, what staff and the venue are owed, and see
    balances, receivables and payables at a glance.
    """
    ctx.ensure_object(dict)
    setup_logging(level=log_level, log_dir=log_dir)

    # Open storage only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        storage = create_sqlite_storage(database_path=db_path)
        storage.connect()
        storage.initialize_schema()
        ctx.call_on_close(storage.disconnect)
        ctx.obj["storage"] = storage
        ctx.obj["session"] = LeagueSession(storage)


# Register all commands
add.register_commands(cli)
transaction.register_commands(cli)
ledger.register_commands(cli)
dashboard.register_commands(cli)
team.register_commands(cli)
staff.register_commands(cli)
competition.register_commands(cli)
location.register_commands(cli)
backup.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
