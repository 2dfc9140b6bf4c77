"""Point-in-time aggregate figures shown on the dashboard."""

from __future__ import annotations

from dataclasses import dataclass

from backoffice.domain.model.value_objects import Money


@dataclass(frozen=True)
class DashboardStats:

    total_customers: int = 0
    total_products: int = 0
    total_orders: int = 0
    pending_orders: int = 0
    total_revenue: Money = Money(0)  # sum of final_amount over completed orders
