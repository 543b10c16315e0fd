"""CLI helpers for entity resolution and error handling."""

from __future__ import annotations

from typing import Iterable, Optional

import click

from leaguebook.cli.error_handling import handle_domain_error
from leaguebook.domain.entities import Transaction
from leaguebook.domain.errors import NotFoundError
from leaguebook.utils.entity_resolver import resolve_entity


def resolve_entity_or_exit(ctx: click.Context, entities: Iterable, reference: str, kind: str) -> str:
    """Resolve an entity name or ID, or exit with a CLI error.

    This keeps error messaging and exit behavior consistent across commands.
    """
    try:
        return resolve_entity(entities, reference, kind)
    except NotFoundError as exc:
        handle_domain_error(ctx, exc)


def resolve_optional_or_exit(
    ctx: click.Context, entities: Iterable, reference: Optional[str], kind: str
) -> Optional[str]:
    """Like resolve_entity_or_exit, passing None and "" (clear) through."""
    if not reference:
        return reference
    return resolve_entity_or_exit(ctx, entities, reference, kind)


def resolve_transaction_id(ctx: click.Context, transactions: Iterable[Transaction], reference: str) -> str:
    """Expand a transaction id prefix (as shown in listings) to the full id.

    Unknown references are returned unchanged so that the domain decides what
    a missing id means.
    """
    reference = reference.strip()
    if not reference:
        return reference
    matches = [txn.id for txn in transactions if txn.id.startswith(reference)]
    if reference in matches:
        return reference
    if len(matches) > 1:
        click.echo(f"Error: Transaction id '{reference}' is ambiguous ({len(matches)} matches)", err=True)
        ctx.exit(1)
    return matches[0] if matches else reference
