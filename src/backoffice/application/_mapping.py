"""Domain -> DTO mapping shared by the order query handlers."""

from __future__ import annotations

from backoffice.application.dto import CustomerSummaryDTO, OrderDTO, OrderLineItemDTO
from backoffice.domain.model.customer import Customer
from backoffice.domain.model.order import Order


def order_to_dto(order: Order, customer: Customer | None = None) -> OrderDTO:
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        order_number=order.order_number,
        customer_id=order.customer_id,
        created_by=order.created_by,
        payment_method=order.payment_method.value,
        status=order.status.value,
        total_amount=order.total_amount.cents,
        discount=order.discount.cents,
        final_amount=order.final_amount.cents,
        notes=order.notes,
        delivery_date=order.delivery_date,
        created_at=order.created_at,
        updated_at=order.updated_at,
        items=[
            OrderLineItemDTO(
                id=item.id,
                product_id=item.product_id,
                product_name=item.product_name,
                quantity=item.quantity.value,
                unit_price=item.unit_price.cents,
                total_price=item.total_price.cents,
                notes=item.notes,
            )
            for item in order.items
        ],
        customer=(
            CustomerSummaryDTO(
                id=customer.id,  # type: ignore[arg-type]
                name=customer.name,
                email=customer.email,
                phone=customer.phone,
            )
            if customer is not None
            else None
        ),
    )
