"""Application service: Create Order use case.

Builds the line items from the requested snapshots, lets the Order
aggregate derive the amounts, allocates a fresh order number and hands
the whole order to the repository, which writes header and items in a
single transaction.

The customer reference is not pre-checked: an unknown customer surfaces
as a ReferentialIntegrityError from the storage layer.
"""

from __future__ import annotations

import logging
from datetime import datetime

from backoffice.application.dto import OrderCreatedDTO, OrderItemSpec
from backoffice.domain.exceptions import ReferentialIntegrityError, ValidationError
from backoffice.domain.model.order import Order, OrderItem, PaymentMethod
from backoffice.domain.model.value_objects import Money, Quantity
from backoffice.domain.repository.order_repository import OrderRepository
from backoffice.domain.service.order_number_generator import OrderNumberGenerator

logger = logging.getLogger(__name__)

MAX_NUMBER_ATTEMPTS = 5


class CreateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        number_generator: OrderNumberGenerator,
    ) -> None:
        self._order_repo = order_repo
        self._number_generator = number_generator

    def handle(
        self,
        customer_id: int,
        payment_method: str | PaymentMethod,
        item_specs: list[OrderItemSpec],
        created_by: int,
        discount: int = 0,
        notes: str | None = None,
        delivery_date: datetime | None = None,
    ) -> OrderCreatedDTO:
        """Create a new pending order.

        Steps:
        1. Build immutable OrderItems from the request (name/price snapshot).
        2. Let the Order aggregate validate and derive total/final amounts.
        3. Allocate an order number not already in use.
        4. Persist header + items atomically and return id and number.
        """
        if not item_specs:
            raise ValidationError("Order must contain at least one item")
        method = PaymentMethod.parse(payment_method)
        items = [
            OrderItem(
                product_id=spec.product_id,
                product_name=spec.product_name,
                quantity=Quantity(spec.quantity),
                unit_price=Money.of(spec.unit_price, "Unit price"),  # <-- price snapshot
                notes=spec.notes,
            )
            for spec in item_specs
        ]
        discount_amount = Money.of(discount, "Discount")

        order = Order.create(
            order_number=self._allocate_number(),
            customer_id=customer_id,
            created_by=created_by,
            payment_method=method,
            items=items,
            discount=discount_amount,
            notes=notes,
            delivery_date=delivery_date,
        )
        self._order_repo.add(order)

        logger.info(
            "Created order %s (id=%s, customer=%s, items=%d, final=%d)",
            order.order_number, order.id, customer_id, len(items), order.final_amount.cents,
        )
        return OrderCreatedDTO(id=order.id, order_number=order.order_number)  # type: ignore[arg-type]

    def _allocate_number(self) -> str:
        for _ in range(MAX_NUMBER_ATTEMPTS):
            number = self._number_generator.next_number()
            if not self._order_repo.order_number_exists(number):
                return number
            logger.warning("Order number %s already taken, drawing another", number)
        raise ReferentialIntegrityError("Could not allocate a unique order number")
