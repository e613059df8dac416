#!/usr/bin/env python3
"""
SEN Import CLI
---------------

Command-line interface for loading transcribed spreadsheets into the
database.

Commands:
    - import:sacrament: Import people and their sacramental records
    - import:event-categories: Import standard event category names

Usage:
    # Import two files, skipping one header row each
    sen import:sacrament baptisms.csv marriages.csv

    # Files with two header rows
    sen import:sacrament --skip 2 burials.csv

    # Load event categories first
    sen import:event-categories categories.csv
"""
from __future__ import annotations

import click
import logging
from pathlib import Path

from sen.core.paths import ALEMBIC_DIR, DB_PATH, LOG_DIR
from sen.core.cli import setup_logger


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
    help="Directory for log files",
)
@click.option("-v", "--verbose", is_flag=True, help="Show detailed errors and tracebacks")
@click.pass_context
def cli(
    ctx: click.Context, db_path: str, alembic_dir: str, log_dir: str, verbose: bool
) -> None:
    """SEN sacramental records import"""
    logging.getLogger("alembic").setLevel(logging.WARNING)

    ctx.ensure_object(dict)
    ctx.obj["db_path"] = Path(db_path)
    ctx.obj["alembic_dir"] = Path(alembic_dir)
    ctx.obj["log_dir"] = Path(log_dir)
    ctx.obj["verbose"] = verbose
    ctx.obj["logger"] = setup_logger(Path(log_dir), "import")
    ctx.call_on_close(ctx.obj["logger"].close)


# Import and register commands from submodules
from .imports import import_sacrament, import_event_categories  # noqa: E402

cli.add_command(import_sacrament)
cli.add_command(import_event_categories)


if __name__ == "__main__":
    cli(obj={})
