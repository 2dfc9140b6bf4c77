"""Application service: List Orders use case (query)."""

from __future__ import annotations

from backoffice.application._degrade import degrade_on_unavailable
from backoffice.application._mapping import order_to_dto
from backoffice.application.dto import OrderDTO
from backoffice.domain.model.order import OrderStatus
from backoffice.domain.repository.order_repository import OrderRepository


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    @degrade_on_unavailable(list)
    def handle(
        self,
        status: str | None = None,
        customer_id: int | None = None,
    ) -> list[OrderDTO]:
        """List order headers newest-first, optionally filtered."""
        wanted = OrderStatus.parse(status) if status else None
        orders = self._order_repo.list_all(status=wanted, customer_id=customer_id)
        return [order_to_dto(order) for order in orders]
