import click

from backoffice.infrastructure.bootstrap import build_container
from backoffice.infrastructure.cli.category_commands import (
    category_add,
    category_delete,
    category_list,
    category_show,
    category_update,
)
from backoffice.infrastructure.cli.customer_commands import (
    customer_add,
    customer_delete,
    customer_list,
    customer_show,
    customer_update,
)
from backoffice.infrastructure.cli.dashboard_commands import dashboard_stats
from backoffice.infrastructure.cli.maintenance_commands import init_db, seed
from backoffice.infrastructure.cli.order_commands import (
    order_create,
    order_delete,
    order_list,
    order_show,
    order_update_status,
)
from backoffice.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_show,
    product_update,
)
from backoffice.infrastructure.config import Settings
from backoffice.infrastructure.logging_config import configure_logging


@click.group()
@click.option("--database-url", envvar="BACKOFFICE_DATABASE_URL", default=None,
              help="SQLAlchemy database URL (overrides settings).")
@click.pass_context
def cli(ctx: click.Context, database_url: str | None) -> None:
    """Back office for customers, catalog and orders."""
    if ctx.obj is not None:
        # Already wired (embedding or tests).
        return

    settings = Settings()
    if database_url:
        settings = settings.model_copy(update={"database_url": database_url})
    configure_logging(settings.log_level)

    container = build_container(settings)
    ctx.obj = container
    ctx.call_on_close(container.close)


@cli.group()
def category() -> None:
    """Manage categories."""


@cli.group()
def customer() -> None:
    """Manage customers."""


@cli.group()
def product() -> None:
    """Manage products and services."""


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def dashboard() -> None:
    """Dashboard figures."""


# Register subcommands
category.add_command(category_list)
category.add_command(category_show)
category.add_command(category_add)
category.add_command(category_update)
category.add_command(category_delete)
customer.add_command(customer_list)
customer.add_command(customer_show)
customer.add_command(customer_add)
customer.add_command(customer_update)
customer.add_command(customer_delete)
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_add)
product.add_command(product_update)
product.add_command(product_delete)
order.add_command(order_list)
order.add_command(order_show)
order.add_command(order_create)
order.add_command(order_update_status)
order.add_command(order_delete)
dashboard.add_command(dashboard_stats)
cli.add_command(init_db)
cli.add_command(seed)
