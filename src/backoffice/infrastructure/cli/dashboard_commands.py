"""CLI commands for the dashboard figures."""

from __future__ import annotations

import click

from backoffice.application.dashboard_stats import DashboardStatsHandler
from backoffice.domain.model.value_objects import Money
from backoffice.infrastructure.bootstrap import Container


@click.command("stats")
@click.pass_obj
def dashboard_stats(container: Container) -> None:
    """Show customer, product and order counts plus completed revenue."""
    stats = DashboardStatsHandler(container.stats).handle()

    click.echo(f"{'Customers':<16} {stats.total_customers:>14}")
    click.echo(f"{'Products':<16} {stats.total_products:>14}")
    click.echo(f"{'Orders':<16} {stats.total_orders:>14}")
    click.echo(f"{'Pending orders':<16} {stats.pending_orders:>14}")
    click.echo(f"{'Revenue':<16} {str(Money(stats.total_revenue)):>14}")
