"""Application service: Update Order Status use case.

Whether a given edge is allowed is decided by the injected
TransitionPolicy; the default accepts every enumerated status.
"""

from __future__ import annotations

import logging

from backoffice.domain.exceptions import NotFoundError
from backoffice.domain.model.order import OrderStatus
from backoffice.domain.repository.order_repository import OrderRepository
from backoffice.domain.service.status_policy import (
    PermissiveTransitionPolicy,
    TransitionPolicy,
)

logger = logging.getLogger(__name__)


class UpdateOrderStatusHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        policy: TransitionPolicy | None = None,
    ) -> None:
        self._order_repo = order_repo
        self._policy = policy or PermissiveTransitionPolicy()

    def handle(self, order_id: int, status: str | OrderStatus) -> None:
        target = OrderStatus.parse(status)

        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise NotFoundError(f"Order #{order_id} not found")

        previous = order.status
        order.change_status(target, self._policy)
        self._order_repo.update_status(order)

        logger.info(
            "Order %s status %s -> %s", order.order_number, previous.value, target.value
        )
