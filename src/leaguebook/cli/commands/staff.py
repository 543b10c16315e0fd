"""Staff management commands."""

import click
from leaguebook.domain.entities import StaffRole
from leaguebook.domain.errors import DomainError
from leaguebook.domain.registry import RegistryService
from leaguebook.domain.summary import SummaryService
from leaguebook.cli.entity_resolution import resolve_entity_or_exit
from leaguebook.cli.error_handling import handle_domain_error
from leaguebook.cli.option_parsing import parse_month_or_exit
from leaguebook.cli.tables import echo_transaction_table
from leaguebook.utils.formatting import format_currency

ROLE_CHOICES = [role.value for role in StaffRole]


@click.group()
def staff_group():
    """Manage staff (referees, table officials, media)."""
    pass


@staff_group.command("list")
@click.pass_context
def list_staff(ctx):
    """List all staff members with what they were paid and are still owed."""
    session = ctx.obj["session"]
    registry = RegistryService(session)
    summaries = SummaryService(session)

    members = registry.list_staff()
    if not members:
        click.echo("No staff found.")
        return

    click.echo("\nStaff:")
    click.echo("-" * 90)
    click.echo(f"{'ID':<34} {'Name':<20} {'Role':<8} {'Paid':>12} {'Due':>12}")
    for member in members:
        summary = summaries.get_staff_summary(member.id)
        click.echo(
            f"{member.id:<34} {member.name:<20} {member.default_role.value:<8} "
            f"{format_currency(summary.paid):>12} {format_currency(summary.due):>12}"
        )


@staff_group.command("add")
@click.argument("name", metavar="STAFF_NAME")
@click.option("--role", type=click.Choice(ROLE_CHOICES, case_sensitive=False), default=StaffRole.ARBITRO.value, show_default=True, help="Default role")
@click.option("--image", help="Photo URL or path")
@click.option("--id", "staff_id", help="Explicit staff ID (generated when omitted)")
@click.pass_context
def add_staff(ctx, name: str, role: str, image: str | None, staff_id: str | None):
    """Add a staff member.

    Examples:
        leaguebook staff add "Ana Souza" --role Mesario
    """
    registry = RegistryService(ctx.obj["session"])
    try:
        member = registry.create_staff(
            name=name, default_role=_role(role), image=image, staff_id=staff_id
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created staff member '{member.name}' (ID: {member.id})")


def _role(value: str | None) -> StaffRole | None:
    if value is None:
        return None
    return next(role for role in StaffRole if role.value.lower() == value.lower())


@staff_group.command("update")
@click.argument("member", metavar="STAFF")
@click.option("--name", help="New name (also updates the member's transactions)")
@click.option("--role", type=click.Choice(ROLE_CHOICES, case_sensitive=False), help="New default role")
@click.option("--image", help="New photo URL or path")
@click.pass_context
def update_staff(ctx, member: str, name: str | None, role: str | None, image: str | None) -> None:
    """Update a staff member.

    STAFF can be a staff member name or ID.
    """
    registry = RegistryService(ctx.obj["session"])
    staff_id = resolve_entity_or_exit(ctx, registry.list_staff(), member, "Staff member")
    try:
        updated = registry.update_staff(staff_id, name=name, default_role=_role(role), image=image)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Updated staff member '{updated.name}' (ID: {updated.id})")


@staff_group.command("delete")
@click.argument("member", metavar="STAFF")
@click.option("--yes", "-y", is_flag=True, help="Skip the confirmation prompt")
@click.pass_context
def delete_staff(ctx, member: str, yes: bool) -> None:
    """Delete a staff member.

    Their transactions are kept and show as "Unknown Staff".
    """
    registry = RegistryService(ctx.obj["session"])
    staff_id = resolve_entity_or_exit(ctx, registry.list_staff(), member, "Staff member")
    name = registry.require_staff(staff_id).name

    if not yes and not click.confirm(f"Are you sure you want to delete staff member '{name}'?"):
        click.echo("Deletion cancelled.")
        return

    registry.delete_staff(staff_id)
    click.echo(f"Deleted staff member '{name}'")


@staff_group.command("show")
@click.argument("member", metavar="STAFF")
@click.pass_context
def show_staff(ctx, member: str) -> None:
    """Show a staff member's payments and what is still due to them."""
    session = ctx.obj["session"]
    registry = RegistryService(session)
    summaries = SummaryService(session)

    staff_id = resolve_entity_or_exit(ctx, registry.list_staff(), member, "Staff member")
    member_obj = registry.require_staff(staff_id)
    summary = summaries.get_staff_summary(staff_id)

    click.echo(f"\n{member_obj.name} ({member_obj.default_role.value}, ID: {member_obj.id})")
    click.echo("=" * 60)
    click.echo(f"{'Paid':<30} {format_currency(summary.paid):>20}")
    click.echo(f"{'Still due':<30} {format_currency(summary.due):>20}")
    echo_transaction_table(summaries.list_staff_transactions(staff_id), title="Transactions")


@staff_group.command("summary")
@click.option("--month", help="Month (YYYY-MM, MM/YYYY, 'this month' or 'last month')")
@click.option("--role", help="Role category (e.g., Arbitro)")
@click.pass_context
def staff_summary(ctx, month: str | None, role: str | None) -> None:
    """Show totals paid and due across all staff.

    Examples:
        leaguebook staff summary --month 2025-03 --role Arbitro
    """
    summaries = SummaryService(ctx.obj["session"])
    overview = summaries.get_staff_overview(month=parse_month_or_exit(ctx, month), role=role)

    click.echo("\nStaff summary")
    click.echo("=" * 60)
    click.echo(f"{'Paid':<30} {format_currency(overview.paid):>20}")
    click.echo(f"{'Still due':<30} {format_currency(overview.due):>20}")
    click.echo(f"{'Transactions':<30} {overview.count:>20}")


def register_commands(cli: click.Group) -> None:
    """Register staff commands with main CLI."""
    cli.add_command(staff_group, name="staff")
