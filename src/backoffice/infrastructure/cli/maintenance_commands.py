"""CLI commands for schema setup and demo data."""

from __future__ import annotations

import click

from backoffice.application.seed_catalog import SeedCatalogHandler
from backoffice.domain.exceptions import DomainException
from backoffice.infrastructure.bootstrap import Container


@click.command("init-db")
@click.pass_obj
def init_db(container: Container) -> None:
    """Create any missing tables."""
    try:
        container.database.create_schema()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Database schema ready.")


@click.command("seed")
@click.pass_obj
def seed(container: Container) -> None:
    """Load demo categories, customers and products into an empty store."""
    handler = SeedCatalogHandler(container.categories, container.customers, container.products)

    try:
        result = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if result.skipped:
        click.echo("Catalog already populated; nothing seeded.")
        return
    click.echo(
        f"Seeded {result.categories} categories, {result.customers} customers "
        f"and {result.products} products."
    )
