"""CLI commands for the Category aggregate."""

from __future__ import annotations

import click

from backoffice.application.manage_categories import (
    AddCategoryHandler,
    DeleteCategoryHandler,
    ListCategoriesHandler,
    ShowCategoryHandler,
    UpdateCategoryHandler,
)
from backoffice.domain.exceptions import DomainException
from backoffice.infrastructure.bootstrap import Container


@click.command("list")
@click.pass_obj
def category_list(container: Container) -> None:
    """List categories alphabetically."""
    categories = ListCategoriesHandler(container.categories).handle()

    if not categories:
        click.echo("No categories found.")
        return

    click.echo(f"{'ID':<6} {'Name':<30} Description")
    click.echo("-" * 60)
    for c in categories:
        click.echo(f"{c.id:<6} {c.name:<30} {c.description or ''}")


@click.command("show")
@click.option("--id", "category_id", required=True, type=int, help="Category ID.")
@click.pass_obj
def category_show(container: Container, category_id: int) -> None:
    """Show one category."""
    try:
        c = ShowCategoryHandler(container.categories).handle(category_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Category #{c.id}: {c.name}")
    if c.description:
        click.echo(c.description)


@click.command("add")
@click.option("--name", required=True, help="Category name.")
@click.option("--description", default=None, help="Free-text description.")
@click.pass_obj
def category_add(container: Container, name: str, description: str | None) -> None:
    """Add a new category."""
    try:
        c = AddCategoryHandler(container.categories).handle(name=name, description=description)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Category #{c.id} '{c.name}' added")


@click.command("update")
@click.option("--id", "category_id", required=True, type=int, help="Category ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--description", default=None, help="New description.")
@click.pass_obj
def category_update(
    container: Container,
    category_id: int,
    name: str | None,
    description: str | None,
) -> None:
    """Update the given fields of a category."""
    changes = {k: v for k, v in {"name": name, "description": description}.items() if v is not None}
    try:
        UpdateCategoryHandler(container.categories).handle(category_id, changes)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Category #{category_id} updated")


@click.command("delete")
@click.option("--id", "category_id", required=True, type=int, help="Category ID.")
@click.pass_obj
def category_delete(container: Container, category_id: int) -> None:
    """Delete a category."""
    try:
        DeleteCategoryHandler(container.categories).handle(category_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Category #{category_id} deleted")
