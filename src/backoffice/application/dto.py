"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.  Money always crosses
as integer cents.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: one requested line, with the product name and price snapshot."""

    product_id: int
    product_name: str
    quantity: int
    unit_price: int  # cents
    notes: str | None = None


@dataclass(frozen=True)
class OrderCreatedDTO:

    id: int
    order_number: str


@dataclass(frozen=True)
class OrderLineItemDTO:
    """Output: a single line item as recorded on the order."""

    id: int | None
    product_id: int
    product_name: str
    quantity: int
    unit_price: int
    total_price: int
    notes: str | None


@dataclass(frozen=True)
class CustomerSummaryDTO:

    id: int
    name: str
    email: str | None
    phone: str | None


@dataclass(frozen=True)
class OrderDTO:
    """Output: an order header, plus items and customer when joined."""

    id: int
    order_number: str
    customer_id: int
    created_by: int
    payment_method: str
    status: str
    total_amount: int
    discount: int
    final_amount: int
    notes: str | None
    delivery_date: datetime | None
    created_at: datetime
    updated_at: datetime
    items: list[OrderLineItemDTO]
    customer: CustomerSummaryDTO | None = None


@dataclass(frozen=True)
class DashboardStatsDTO:

    total_customers: int
    total_products: int
    total_orders: int
    pending_orders: int
    total_revenue: int
