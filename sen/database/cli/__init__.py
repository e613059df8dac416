#!/usr/bin/env python3
"""
SEN Database Management CLI
----------------------------

Command-line interface for database management.

This module provides the main CLI group and shared context setup
for all database commands.

Command Structure:
    - Setup & Initialization (init, reset)
    - Reference data (seed)
    - Query & Browse (query people, query ledgers, query lookups)
    - Statistics (stats)

Usage:
    # Get general help
    sendb --help

    # Create the database and load the default lookups
    sendb init && sendb seed

    # Search ledgers by notary
    sendb query ledgers "Name"
"""
import click
import logging
from pathlib import Path

from sen.core.paths import DB_PATH, ALEMBIC_DIR, LOG_DIR
from sen.database import SenDB


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    default=str(DB_PATH),
    help="Path to database file",
)
@click.option(
    "--alembic-dir",
    type=click.Path(),
    default=str(ALEMBIC_DIR),
    help="Path to Alembic directory",
)
@click.option(
    "--log-dir",
    type=click.Path(),
    default=str(LOG_DIR),
    help="Path to log directory",
)
@click.option(
    "--verbose",
    is_flag=True,
    help="Show detailed errors and tracebacks",
)
@click.pass_context
def cli(ctx, db_path, alembic_dir, log_dir, verbose):
    """SEN Database Management CLI"""

    # Suppress Alembic INFO logging by default
    logging.getLogger("alembic").setLevel(logging.WARNING)

    ctx.ensure_object(dict)
    ctx.obj["db_path"] = Path(db_path)
    ctx.obj["alembic_dir"] = Path(alembic_dir)
    ctx.obj["log_dir"] = Path(log_dir)
    ctx.obj["verbose"] = verbose


def get_db(ctx) -> SenDB:
    """Get or create database instance from context."""
    if "db" not in ctx.obj:
        ctx.obj["db"] = SenDB(
            db_path=ctx.obj["db_path"],
            alembic_dir=ctx.obj["alembic_dir"],
            log_dir=ctx.obj["log_dir"],
        )
        ctx.call_on_close(ctx.obj["db"].close)
    return ctx.obj["db"]


# Import and register command modules
# These imports must come after CLI group definition
from .setup import init, reset  # noqa: E402
from .seed import seed  # noqa: E402
from .query import query  # noqa: E402
from .maintenance import stats  # noqa: E402

# Register top-level commands
cli.add_command(init)
cli.add_command(reset)
cli.add_command(seed)
cli.add_command(stats)

# Register command groups
cli.add_command(query)


if __name__ == "__main__":
    cli(obj={})
