"""
Statistics Commands
--------------------

Commands:
    - stats: Row counts per table and migration status
"""
import click

from sen.core.logging_manager import handle_cli_error
from sen.core.exceptions import DatabaseError
from . import get_db


@click.command()
@click.pass_context
def stats(ctx):
    """Display database statistics."""
    try:
        db = get_db(ctx)
        counts = db.count_rows()
        history = db.get_migration_history()

        click.echo("\n📊 Database Statistics")
        click.echo("=" * 50)
        for table, count in counts.items():
            click.echo(f"  {table}: {count}")

        click.echo(f"\nTotal rows: {sum(counts.values())}")
        if history.get("current_revision"):
            click.echo(f"Schema revision: {history['current_revision']}")

    except DatabaseError as e:
        handle_cli_error(ctx, e, "stats")
