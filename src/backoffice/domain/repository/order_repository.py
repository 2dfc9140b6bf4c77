"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from backoffice.domain.model.order import Order, OrderStatus


class OrderRepository(ABC):

    @abstractmethod
    def add(self, order: Order) -> None:
        """Persist a new order and all of its items as one atomic unit.

        Assigns ``order.id``.  If any write fails nothing is kept.
        """

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order with its items, or None if not found."""

    @abstractmethod
    def list_all(
        self,
        status: OrderStatus | None = None,
        customer_id: int | None = None,
    ) -> list[Order]:
        """Return order headers newest-first, without items."""

    @abstractmethod
    def order_number_exists(self, order_number: str) -> bool:
        """True if some order already carries ``order_number``."""

    @abstractmethod
    def update_status(self, order: Order) -> None:
        """Persist the order's status and ``updated_at``; nothing else."""

    @abstractmethod
    def delete(self, order_id: int) -> bool:
        """Delete an order and, by cascade, its items. False if absent."""

    @abstractmethod
    def delete_item(self, item_id: int) -> bool:
        """Low-level removal of a single line item. False if absent."""
