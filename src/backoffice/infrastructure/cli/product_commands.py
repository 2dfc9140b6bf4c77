"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from backoffice.application.manage_products import (
    AddProductHandler,
    DeleteProductHandler,
    ListProductsHandler,
    ShowProductHandler,
    UpdateProductHandler,
)
from backoffice.domain.exceptions import DomainException
from backoffice.domain.model.product import ProductKind
from backoffice.infrastructure.bootstrap import Container

_KINDS = click.Choice([k.value for k in ProductKind])


def _supplied(**fields: object) -> dict[str, object]:
    return {k: v for k, v in fields.items() if v is not None}


@click.command("list")
@click.option("--search", "search_term", default=None,
              help="Match name, description or SKU.")
@click.option("--category", "category_id", default=None, type=int, help="Category ID.")
@click.pass_obj
def product_list(container: Container, search_term: str | None, category_id: int | None) -> None:
    """List products and services, newest first."""
    products = ListProductsHandler(container.products).handle(search_term, category_id)

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<28} {'SKU':<14} {'Kind':<8} {'Price':>14} Unit")
    click.echo("-" * 80)
    for p in products:
        click.echo(
            f"{p.id:<6} {p.name:<28} {p.sku or '':<14} {p.kind.value:<8} "
            f"{str(p.price):>14} {p.unit}"
        )


@click.command("show")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.pass_obj
def product_show(container: Container, product_id: int) -> None:
    """Show one product or service."""
    try:
        p = ShowProductHandler(container.products).handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{p.id}: {p.name} ({p.kind.value}){'' if p.active else '  (inactive)'}")
    click.echo(f"  Price:    {p.price} / {p.unit}")
    if p.sku:
        click.echo(f"  SKU:      {p.sku}")
    if p.category_id is not None:
        click.echo(f"  Category: #{p.category_id}")
    if p.description:
        click.echo(f"  {p.description}")


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", "price_cents", required=True, type=int, help="Unit price in cents.")
@click.option("--kind", type=_KINDS, default=ProductKind.PRODUCT.value, show_default=True)
@click.option("--unit", default="un", show_default=True, help="Unit of measure.")
@click.option("--description", default=None)
@click.option("--sku", default=None)
@click.option("--category", "category_id", default=None, type=int, help="Category ID.")
@click.option("--active/--inactive", default=None)
@click.pass_obj
def product_add(
    container: Container,
    name: str,
    price_cents: int,
    kind: str,
    unit: str,
    **details: object,
) -> None:
    """Add a new product or service to the catalog."""
    try:
        p = AddProductHandler(container.products).handle(
            name, price_cents, kind=kind, unit=unit, **_supplied(**details)
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{p.id} '{p.name}' added at {p.price}")


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--name", default=None)
@click.option("--price", default=None, type=int, help="New unit price in cents.")
@click.option("--kind", type=_KINDS, default=None)
@click.option("--unit", default=None)
@click.option("--description", default=None)
@click.option("--sku", default=None)
@click.option("--category", "category_id", default=None, type=int, help="Category ID.")
@click.option("--active/--inactive", default=None)
@click.pass_obj
def product_update(container: Container, product_id: int, **fields: object) -> None:
    """Update the given fields of a product."""
    try:
        UpdateProductHandler(container.products).handle(product_id, _supplied(**fields))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} updated")


@click.command("delete")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.pass_obj
def product_delete(container: Container, product_id: int) -> None:
    """Delete a product."""
    try:
        DeleteProductHandler(container.products).handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} deleted")
