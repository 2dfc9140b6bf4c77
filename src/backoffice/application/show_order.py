"""Application service: Show Order use case (query).

Returns the order joined with its items and its customer.
"""

from __future__ import annotations

from backoffice.application._mapping import order_to_dto
from backoffice.application.dto import OrderDTO
from backoffice.domain.exceptions import NotFoundError
from backoffice.domain.repository.customer_repository import CustomerRepository
from backoffice.domain.repository.order_repository import OrderRepository


class ShowOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        customer_repo: CustomerRepository,
    ) -> None:
        self._order_repo = order_repo
        self._customer_repo = customer_repo

    def handle(self, order_id: int) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise NotFoundError(f"Order #{order_id} not found")
        customer = self._customer_repo.get_by_id(order.customer_id)
        return order_to_dto(order, customer)
