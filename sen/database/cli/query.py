"""
Query & Browse Commands
------------------------

Typeahead-style searches over the imported records.

Commands:
    - people: People whose first or last name starts with a prefix
    - ledgers: Ledgers whose notary name starts with a prefix
    - lookups: Lookup rows of one kind whose name or label starts with a prefix
"""
import click

from sen.core.logging_manager import handle_cli_error
from sen.core.exceptions import DatabaseError
from sen.database.managers import LOOKUP_CONFIGS
from . import get_db


@click.group()
@click.pass_context
def query(ctx: click.Context) -> None:
    """Search database content by prefix."""
    pass


@query.command("people")
@click.argument("prefix")
@click.option("--limit", type=int, default=20, show_default=True)
@click.pass_context
def people(ctx, prefix, limit):
    """List people whose first or last name starts with PREFIX."""
    try:
        db = get_db(ctx)
        with db.session_scope():
            matches = db.people.typeahead(prefix, limit=limit)
            if not matches:
                click.echo(f"No people matching '{prefix}'")
                return
            for person in matches:
                extra = ", ".join(
                    part
                    for part in (person.race_id, person.sex.value if person.sex else None)
                    if part
                )
                suffix = f" ({extra})" if extra else ""
                click.echo(f"  {person.id:5d}  {person.full_name}{suffix}")

    except DatabaseError as e:
        handle_cli_error(ctx, e, "query_people", {"prefix": prefix})


@query.command("ledgers")
@click.argument("prefix")
@click.option("--limit", type=int, default=20, show_default=True)
@click.pass_context
def ledgers(ctx, prefix, limit):
    """List ledgers whose notary name starts with PREFIX."""
    try:
        db = get_db(ctx)
        with db.session_scope():
            matches = db.ledgers.typeahead(prefix, limit=limit)
            if not matches:
                click.echo(f"No ledgers matching '{prefix}'")
                return
            for ledger in matches:
                click.echo(f"  {ledger.id:5d}  {ledger}")

    except DatabaseError as e:
        handle_cli_error(ctx, e, "query_ledgers", {"prefix": prefix})


@query.command("lookups")
@click.argument("kind", type=click.Choice(sorted(LOOKUP_CONFIGS)))
@click.argument("prefix", default="")
@click.option("--limit", type=int, default=20, show_default=True)
@click.pass_context
def lookups(ctx, kind, prefix, limit):
    """List KIND rows whose name or label starts with PREFIX."""
    try:
        db = get_db(ctx)
        with db.session_scope():
            matches = db.lookups(kind).typeahead(prefix, limit=limit)
            if not matches:
                click.echo(f"No {kind} matching '{prefix}'")
                return
            for row in matches:
                label = getattr(row, "label", None)
                if label and label != row.name:
                    click.echo(f"  {row.name} ({label})")
                else:
                    click.echo(f"  {row.name}")

    except DatabaseError as e:
        handle_cli_error(ctx, e, "query_lookups", {"kind": kind, "prefix": prefix})
