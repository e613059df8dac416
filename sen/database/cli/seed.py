"""
Reference Data Commands
------------------------

Commands:
    - seed: Load the default lookup rows (event, witness, location and
      relationship categories); a custom file may also list notaries
"""
from collections import Counter

import click

from sen.core.exceptions import DatabaseError, ValidationError
from sen.core.logging_manager import handle_cli_error
from sen.core.paths import LOOKUPS_FILE
from sen.database.configs import load_lookup_seeds
from . import get_db


@click.command()
@click.option(
    "--file",
    "seed_file",
    type=click.Path(exists=True, dir_okay=False),
    default=str(LOOKUPS_FILE),
    help="YAML file with the lookup rows to load",
)
@click.pass_context
def seed(ctx, seed_file):
    """Load default lookup rows. Existing rows are left untouched."""
    try:
        seeds = load_lookup_seeds(seed_file)
        db = get_db(ctx)

        created: Counter = Counter()
        with db.session_scope():
            for item in seeds:
                manager = db.lookups(item.kind)
                if manager.get(item.name) is not None:
                    continue
                row = manager.get_or_create(item.name, label=item.label)
                if item.description and hasattr(row, "description"):
                    row.description = item.description
                created[item.kind] += 1

        click.echo(f"🌱 Seeded lookups from {seed_file}")
        for kind in sorted({s.kind for s in seeds}):
            click.echo(f"  • {kind}: {created[kind]} created")

    except (DatabaseError, ValidationError) as e:
        handle_cli_error(ctx, e, "seed", {"file": seed_file})
