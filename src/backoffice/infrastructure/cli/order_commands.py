"""CLI commands for the Order aggregate."""

from __future__ import annotations

from datetime import datetime

import click

from backoffice.application.create_order import CreateOrderHandler
from backoffice.application.delete_order import DeleteOrderHandler
from backoffice.application.dto import OrderDTO, OrderItemSpec
from backoffice.application.list_orders import ListOrdersHandler
from backoffice.application.manage_products import ShowProductHandler
from backoffice.application.show_order import ShowOrderHandler
from backoffice.application.update_order_status import UpdateOrderStatusHandler
from backoffice.domain.exceptions import DomainException
from backoffice.domain.model.order import OrderStatus, PaymentMethod
from backoffice.domain.model.value_objects import Money
from backoffice.infrastructure.bootstrap import Container

_STATUSES = click.Choice([s.value for s in OrderStatus])
_PAYMENT_METHODS = click.Choice([m.value for m in PaymentMethod])


def _parse_item(raw: str) -> tuple[int, int, int | None]:
    """Parse 'ProductId:Qty' or 'ProductId:Qty:UnitPriceCents'."""
    parts = [p.strip() for p in raw.split(":")]
    if len(parts) not in (2, 3):
        raise click.BadParameter(
            f"Invalid item format '{raw}'. Expected 'ProductId:Qty[:UnitPrice]'."
        )
    try:
        numbers = [int(p) for p in parts]
    except ValueError:
        raise click.BadParameter(f"Item '{raw}' must contain integers only.")
    product_id, quantity = numbers[0], numbers[1]
    unit_price = numbers[2] if len(numbers) == 3 else None
    return product_id, quantity, unit_price


def _snapshot_items(container: Container, raw_items: tuple[str, ...]) -> list[OrderItemSpec]:
    """Resolve each requested product once and copy its name (and price, unless given)."""
    lookup = ShowProductHandler(container.products)
    specs: list[OrderItemSpec] = []
    for raw in raw_items:
        product_id, quantity, unit_price = _parse_item(raw)
        product = lookup.handle(product_id)
        specs.append(
            OrderItemSpec(
                product_id=product_id,
                product_name=product.name,
                quantity=quantity,
                unit_price=unit_price if unit_price is not None else product.price.cents,
            )
        )
    return specs


def _fmt_date(value: datetime | None) -> str:
    return value.strftime("%Y-%m-%d %H:%M") if value else "-"


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order {dto.order_number} (#{dto.id})  status={dto.status}")
    if dto.customer is not None:
        click.echo(f"Customer: {dto.customer.name} (#{dto.customer.id})")
    else:
        click.echo(f"Customer: #{dto.customer_id}")
    click.echo(f"Payment:  {dto.payment_method}")
    click.echo(f"Created:  {_fmt_date(dto.created_at)}")
    if dto.delivery_date:
        click.echo(f"Delivery: {_fmt_date(dto.delivery_date)}")
    if dto.notes:
        click.echo(f"Notes:    {dto.notes}")
    click.echo()

    click.echo(f"  {'Product':<28} {'Qty':>5} {'Price':>14} {'Total':>14}")
    click.echo(f"  {'-'*64}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<28} {item.quantity:>5} "
            f"{str(Money(item.unit_price)):>14} {str(Money(item.total_price)):>14}"
        )
    click.echo(f"  {'-'*64}")
    click.echo(f"  {'Subtotal':<34} {str(Money(dto.total_amount)):>30}")
    click.echo(f"  {'Discount':<34} {str(Money(dto.discount)):>30}")
    click.echo(f"  {'Order Total':<34} {str(Money(dto.final_amount)):>30}")


@click.command("list")
@click.option("--status", type=_STATUSES, default=None, help="Only orders in this status.")
@click.option("--customer", "customer_id", type=int, default=None, help="Customer ID.")
@click.pass_obj
def order_list(container: Container, status: str | None, customer_id: int | None) -> None:
    """List orders, newest first."""
    orders = ListOrdersHandler(container.orders).handle(status=status, customer_id=customer_id)

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<6} {'Number':<20} {'Customer':>9} {'Status':<11} {'Total':>14} Created")
    click.echo("-" * 80)
    for o in orders:
        click.echo(
            f"{o.id:<6} {o.order_number:<20} {o.customer_id:>9} {o.status:<11} "
            f"{str(Money(o.final_amount)):>14} {_fmt_date(o.created_at)}"
        )


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
@click.pass_obj
def order_show(container: Container, order_id: int) -> None:
    """Show an order with its items and customer."""
    handler = ShowOrderHandler(container.orders, container.customers)

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("create")
@click.option("--customer", "customer_id", required=True, type=int, help="Customer ID.")
@click.option("--payment", "payment_method", required=True, type=_PAYMENT_METHODS,
              help="Payment method.")
@click.option("--item", "items", required=True, multiple=True,
              help="Line as 'ProductId:Qty[:UnitPriceCents]'; repeat for more lines.")
@click.option("--discount", default=0, type=click.IntRange(min=0), show_default=True,
              help="Discount in cents.")
@click.option("--notes", default=None)
@click.option("--delivery-date", default=None, type=click.DateTime(),
              help="Expected delivery (ISO date/time).")
@click.option("--user-id", default=None, type=int, help="Acting user (defaults to settings).")
@click.pass_obj
def order_create(
    container: Container,
    customer_id: int,
    payment_method: str,
    items: tuple[str, ...],
    discount: int,
    notes: str | None,
    delivery_date: datetime | None,
    user_id: int | None,
) -> None:
    """Create a new order (status=pending)."""
    handler = CreateOrderHandler(container.orders, container.order_numbers)

    try:
        specs = _snapshot_items(container, items)
        created = handler.handle(
            customer_id=customer_id,
            payment_method=payment_method,
            item_specs=specs,
            created_by=user_id if user_id is not None else container.settings.default_user_id,
            discount=discount,
            notes=notes,
            delivery_date=delivery_date,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {created.order_number} created (id={created.id}, status=pending)")


@click.command("update-status")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.option("--status", required=True, type=_STATUSES, help="New status.")
@click.pass_obj
def order_update_status(container: Container, order_id: int, status: str) -> None:
    """Move an order to another status."""
    handler = UpdateOrderStatusHandler(container.orders, container.status_policy)

    try:
        handler.handle(order_id, status)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} is now {status}.")


@click.command("delete")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.pass_obj
def order_delete(container: Container, order_id: int) -> None:
    """Delete an order and its items."""
    try:
        DeleteOrderHandler(container.orders).handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} deleted.")
