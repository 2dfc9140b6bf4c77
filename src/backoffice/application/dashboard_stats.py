"""Application service: Dashboard Stats use case (query)."""

from __future__ import annotations

from backoffice.application._degrade import degrade_on_unavailable
from backoffice.application.dto import DashboardStatsDTO
from backoffice.domain.repository.stats_repository import StatsRepository


def _empty_stats() -> DashboardStatsDTO:
    return DashboardStatsDTO(
        total_customers=0,
        total_products=0,
        total_orders=0,
        pending_orders=0,
        total_revenue=0,
    )


class DashboardStatsHandler:

    def __init__(self, stats_repo: StatsRepository) -> None:
        self._stats_repo = stats_repo

    @degrade_on_unavailable(_empty_stats)
    def handle(self) -> DashboardStatsDTO:
        stats = self._stats_repo.dashboard_stats()
        return DashboardStatsDTO(
            total_customers=stats.total_customers,
            total_products=stats.total_products,
            total_orders=stats.total_orders,
            pending_orders=stats.pending_orders,
            total_revenue=stats.total_revenue.cents,
        )
