"""CLI commands for database setup."""

from __future__ import annotations

import click

from storefront.infrastructure.bootstrap import init_database, unit_of_work
from storefront.infrastructure.persistence.seed import seed


@click.command("init")
@click.option("--seed", "with_seed", is_flag=True, default=False, help="Load the demo catalog.")
def db_init(with_seed: bool) -> None:
    """Create the database tables."""
    init_database()
    click.echo("Database ready.")

    if with_seed:
        added = seed(unit_of_work())
        click.echo(f"Seeded {added} products.")
