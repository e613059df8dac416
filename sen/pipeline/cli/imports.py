#!/usr/bin/env python3
"""
imports.py
----------
CSV import commands.

Both commands print one ``{file}:{row} - {message}`` line per problem on
stdout, followed by a summary, and exit with status 0 however many rows
failed. Only a database that cannot be opened ends the command early.
"""
from __future__ import annotations

from typing import Tuple

import click

from sen.core.exceptions import DatabaseError, RowImportError
from sen.core.logging_manager import handle_cli_error
from sen.database import SenDB
from sen.pipeline.category_importer import EventCategoryImporter
from sen.pipeline.sacrament_importer import SacramentImporter


def _open_db(ctx: click.Context) -> SenDB:
    if "db" not in ctx.obj:
        ctx.obj["db"] = SenDB(
            db_path=ctx.obj["db_path"],
            alembic_dir=ctx.obj["alembic_dir"],
            log_dir=ctx.obj["log_dir"],
        )
        ctx.call_on_close(ctx.obj["db"].close)
    return ctx.obj["db"]


def _echo_error(error: RowImportError) -> None:
    click.echo(str(error))


@click.command("import:sacrament")
@click.argument("files", nargs=-1, type=click.Path(dir_okay=False))
@click.option(
    "--skip",
    type=click.IntRange(min=0),
    default=1,
    show_default=True,
    help="Number of header rows to skip",
)
@click.pass_context
def import_sacrament(ctx: click.Context, files: Tuple[str, ...], skip: int) -> None:
    """Import sacramental records from CSV FILES."""
    logger = ctx.obj.get("logger")

    try:
        db = _open_db(ctx)
        with db.session_scope() as session:
            importer = SacramentImporter(session, logger, on_error=_echo_error)
            stats = importer.import_files(files, skip=skip)
    except DatabaseError as e:
        handle_cli_error(ctx, e, "import_sacrament", {"files": list(files)})
        return

    click.echo(stats.summary())


@click.command("import:event-categories")
@click.argument("files", nargs=-1, type=click.Path(dir_okay=False))
@click.option(
    "--skip",
    type=click.IntRange(min=0),
    default=1,
    show_default=True,
    help="Number of header rows to skip",
)
@click.pass_context
def import_event_categories(
    ctx: click.Context, files: Tuple[str, ...], skip: int
) -> None:
    """Import event category names from column 0 of CSV FILES."""
    logger = ctx.obj.get("logger")

    try:
        db = _open_db(ctx)
        with db.session_scope() as session:
            importer = EventCategoryImporter(session, logger, on_error=_echo_error)
            stats = importer.import_files(files, skip=skip)
    except DatabaseError as e:
        handle_cli_error(ctx, e, "import_event_categories", {"files": list(files)})
        return

    click.echo(f"{stats.summary()}, {stats.created} categories created")
