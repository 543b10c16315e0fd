"""CLI helpers for parsing option values."""

from datetime import date
from decimal import Decimal, InvalidOperation

import click

from leaguebook.utils.amount_parser import parse_amount
from leaguebook.utils.date_parser import parse_date, parse_month


def parse_date_or_exit(ctx: click.Context, value: str | None) -> date | None:
    if value is None:
        return None
    try:
        return parse_date(value)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)


def parse_amount_or_exit(ctx: click.Context, value: str | None, label: str = "amount") -> Decimal | None:
    if value is None:
        return None
    try:
        return parse_amount(value)
    except ValueError as e:
        click.echo(f"Error: Invalid {label}: {e}", err=True)
        ctx.exit(1)


def parse_hours_or_exit(ctx: click.Context, value: str | None) -> Decimal | None:
    """Parse rented hours, accepting "1.5", "1,5" and "1h30"."""
    if value is None:
        return None
    text = value.strip().lower()
    try:
        if "h" in text:
            hours, _, minutes = text.partition("h")
            minutes = Decimal(minutes or "0")
            if not 0 <= minutes < 60:
                click.echo(f"Error: Invalid hours: '{value}' (minutes must be below 60)", err=True)
                ctx.exit(1)
            result = Decimal(hours or "0") + minutes / 60
        else:
            result = Decimal(text.replace(",", "."))
    except InvalidOperation:
        click.echo(f"Error: Invalid hours: '{value}'", err=True)
        ctx.exit(1)
    if not result.is_finite():
        click.echo(f"Error: Invalid hours: '{value}'", err=True)
        ctx.exit(1)
    if result < 0:
        click.echo(f"Error: Hours cannot be negative: '{value}'", err=True)
        ctx.exit(1)
    return result


def parse_month_or_exit(ctx: click.Context, value: str | None) -> str | None:
    if value is None:
        return None
    try:
        return parse_month(value)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)
