"""SQLAlchemy-backed implementation of StatsRepository."""

from __future__ import annotations

from sqlalchemy import func, select

from backoffice.domain.model.dashboard import DashboardStats
from backoffice.domain.model.order import OrderStatus
from backoffice.domain.model.value_objects import Money
from backoffice.domain.repository.stats_repository import StatsRepository
from backoffice.infrastructure.persistence.database import Database
from backoffice.infrastructure.persistence.tables import CustomerRow, OrderRow, ProductRow


class SqlStatsRepository(StatsRepository):

    def __init__(self, db: Database) -> None:
        self._db = db

    def dashboard_stats(self) -> DashboardStats:
        # All five figures come from one statement, so they describe the same instant.
        stmt = select(
            select(func.count()).select_from(CustomerRow).correlate(None).scalar_subquery(),
            select(func.count()).select_from(ProductRow).correlate(None).scalar_subquery(),
            select(func.count()).select_from(OrderRow).correlate(None).scalar_subquery(),
            select(func.count())
            .select_from(OrderRow)
            .where(OrderRow.status == OrderStatus.PENDING.value)
            .correlate(None).scalar_subquery(),
            select(func.coalesce(func.sum(OrderRow.final_amount), 0))
            .where(OrderRow.status == OrderStatus.COMPLETED.value)
            .correlate(None).scalar_subquery(),
        )
        with self._db.transaction() as session:
            customers, products, orders, pending, revenue = session.execute(stmt).one()

        return DashboardStats(
            total_customers=int(customers or 0),
            total_products=int(products or 0),
            total_orders=int(orders or 0),
            pending_orders=int(pending or 0),
            total_revenue=Money(int(revenue or 0)),
        )
