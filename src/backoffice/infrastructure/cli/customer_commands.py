"""CLI commands for the Customer aggregate."""

from __future__ import annotations

import click

from backoffice.application.manage_customers import (
    AddCustomerHandler,
    DeleteCustomerHandler,
    ListCustomersHandler,
    ShowCustomerHandler,
    UpdateCustomerHandler,
)
from backoffice.domain.exceptions import DomainException
from backoffice.infrastructure.bootstrap import Container


def _contact_options(func):
    """Optional contact fields shared by ``add`` and ``update``."""
    options = [
        click.option("--email", default=None, help="E-mail address."),
        click.option("--phone", default=None, help="Phone number."),
        click.option("--document", default=None, help="CPF/CNPJ."),
        click.option("--address", default=None, help="Street address."),
        click.option("--city", default=None, help="City."),
        click.option("--state", default=None, help="State (UF)."),
        click.option("--zip-code", "zip_code", default=None, help="Postal code."),
        click.option("--notes", default=None, help="Free-text notes."),
        click.option("--active/--inactive", default=None, help="Active flag."),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _supplied(**fields: object) -> dict[str, object]:
    return {k: v for k, v in fields.items() if v is not None}


@click.command("list")
@click.option("--search", "search_term", default=None,
              help="Match name, e-mail, phone or document.")
@click.pass_obj
def customer_list(container: Container, search_term: str | None) -> None:
    """List customers, newest first."""
    customers = ListCustomersHandler(container.customers).handle(search_term)

    if not customers:
        click.echo("No customers found.")
        return

    click.echo(f"{'ID':<6} {'Name':<25} {'E-mail':<28} {'Phone':<16} Active")
    click.echo("-" * 84)
    for c in customers:
        click.echo(
            f"{c.id:<6} {c.name:<25} {c.email or '':<28} {c.phone or '':<16} "
            f"{'yes' if c.active else 'no'}"
        )


@click.command("show")
@click.option("--id", "customer_id", required=True, type=int, help="Customer ID.")
@click.pass_obj
def customer_show(container: Container, customer_id: int) -> None:
    """Show one customer."""
    try:
        c = ShowCustomerHandler(container.customers).handle(customer_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Customer #{c.id}: {c.name}{'' if c.active else '  (inactive)'}")
    for label, value in (
        ("E-mail", c.email),
        ("Phone", c.phone),
        ("Document", c.document),
        ("Address", c.address),
        ("City", f"{c.city or ''} {c.state or ''}".strip()),
        ("ZIP", c.zip_code),
        ("Notes", c.notes),
    ):
        if value:
            click.echo(f"  {label + ':':<10} {value}")


@click.command("add")
@click.option("--name", required=True, help="Customer name.")
@_contact_options
@click.pass_obj
def customer_add(container: Container, name: str, **contact: object) -> None:
    """Register a new customer."""
    try:
        c = AddCustomerHandler(container.customers).handle(name, **_supplied(**contact))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Customer #{c.id} '{c.name}' added")


@click.command("update")
@click.option("--id", "customer_id", required=True, type=int, help="Customer ID.")
@click.option("--name", default=None, help="New name.")
@_contact_options
@click.pass_obj
def customer_update(container: Container, customer_id: int, **fields: object) -> None:
    """Update the given fields of a customer."""
    try:
        UpdateCustomerHandler(container.customers).handle(customer_id, _supplied(**fields))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Customer #{customer_id} updated")


@click.command("delete")
@click.option("--id", "customer_id", required=True, type=int, help="Customer ID.")
@click.pass_obj
def customer_delete(container: Container, customer_id: int) -> None:
    """Delete a customer (refused while orders reference it)."""
    try:
        DeleteCustomerHandler(container.customers).handle(customer_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Customer #{customer_id} deleted")
