"""
Setup & Initialization Commands
--------------------------------

Database initialization commands.

Commands:
    - init: Create the schema (or migrate an existing database)
    - reset: Delete and recreate the database (dangerous!)
"""
import click

from sen.core.logging_manager import handle_cli_error
from sen.core.exceptions import DatabaseError
from . import get_db


@click.command()
@click.pass_context
def init(ctx):
    """Initialize the database schema."""
    try:
        click.echo("🚀 Initializing SEN database...")
        db = get_db(ctx)
        click.echo("🗄️  Initializing database schema...")
        db.initialize_schema()

        history = db.get_migration_history()
        if history.get("current_revision"):
            click.echo(f"  Revision: {history['current_revision']}")
        click.echo("✅ Database initialized!")

    except DatabaseError as e:
        handle_cli_error(ctx, e, "init")


@click.command()
@click.confirmation_option(prompt="⚠️  This will DELETE the database! Are you sure?")
@click.pass_context
def reset(ctx):
    """Reset database (DANGEROUS - deletes all data!)."""
    try:
        db_path = ctx.obj["db_path"]

        click.echo("🗑️  Resetting database...")

        if "db" in ctx.obj:
            ctx.obj.pop("db").close()

        if db_path.exists():
            db_path.unlink()
            click.echo(f"  Deleted: {db_path}")

        click.echo("🔄 Reinitializing...")
        db = get_db(ctx)
        db.initialize_schema()

        click.echo("✅ Database reset complete!")

    except DatabaseError as e:
        handle_cli_error(ctx, e, "reset")
