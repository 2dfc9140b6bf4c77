"""Order aggregate — the core of the domain.

The Order is an aggregate root that owns its line items.  Items are fixed
at creation time; afterwards only the status changes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING

from backoffice.domain.exceptions import ValidationError
from backoffice.domain.model._fields import utcnow
from backoffice.domain.model.value_objects import Money, Quantity
from backoffice.domain.service.discount_policy import apply_discount

if TYPE_CHECKING:
    from backoffice.domain.service.status_policy import TransitionPolicy


class OrderStatus(Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    PROCESSING = "processing"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        return self in (OrderStatus.COMPLETED, OrderStatus.CANCELLED)

    @staticmethod
    def parse(value: str | OrderStatus) -> OrderStatus:
        if isinstance(value, OrderStatus):
            return value
        try:
            return OrderStatus(value)
        except ValueError as exc:
            allowed = ", ".join(s.value for s in OrderStatus)
            raise ValidationError(
                f"Invalid order status {value!r}, expected one of: {allowed}"
            ) from exc


class PaymentMethod(Enum):
    CASH = "cash"
    CREDIT_CARD = "credit_card"
    DEBIT_CARD = "debit_card"
    PIX = "pix"
    BANK_TRANSFER = "bank_transfer"
    CHECK = "check"
    OTHER = "other"

    @staticmethod
    def parse(value: str | PaymentMethod) -> PaymentMethod:
        if isinstance(value, PaymentMethod):
            return value
        try:
            return PaymentMethod(value)
        except ValueError as exc:
            allowed = ", ".join(m.value for m in PaymentMethod)
            raise ValidationError(
                f"Invalid payment method {value!r}, expected one of: {allowed}"
            ) from exc


@dataclass(frozen=True)
class OrderItem:
    """Snapshot of a product's name and price at order-creation time.

    Immutable: later edits to (or deletion of) the product never change
    what the order recorded.
    """

    product_id: int
    product_name: str
    quantity: Quantity
    unit_price: Money  # locked at order-creation time
    notes: str | None = None
    id: int | None = None
    order_id: int | None = None
    created_at: datetime = field(default_factory=utcnow)

    def __post_init__(self) -> None:
        if self.unit_price.is_negative:
            raise ValidationError(
                f"Unit price for {self.product_name} cannot be negative"
            )

    @property
    def total_price(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass
class Order:
    """Aggregate root for customer orders.

    Use the ``Order.create()`` factory for new orders — it enforces all
    business rules and derives the amounts.  The ``__init__`` is
    intentionally simple so the repository can reconstitute persisted
    orders (with or without their items) without re-validating.
    """

    id: int | None
    order_number: str
    customer_id: int
    created_by: int
    payment_method: PaymentMethod
    total_amount: Money
    discount: Money
    final_amount: Money
    items: list[OrderItem] = field(default_factory=list)
    status: OrderStatus = OrderStatus.PENDING
    notes: str | None = None
    delivery_date: datetime | None = None
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        order_number: str,
        customer_id: int,
        created_by: int,
        payment_method: PaymentMethod,
        items: list[OrderItem],
        discount: Money | None = None,
        notes: str | None = None,
        delivery_date: datetime | None = None,
    ) -> Order:
        """Create a new pending order, enforcing all invariants."""
        if not items:
            raise ValidationError("Order must contain at least one item")

        discount = discount if discount is not None else Money.zero()
        if discount.is_negative:
            raise ValidationError(f"Discount cannot be negative, got {discount.cents}")

        total_amount = Money.zero()
        for item in items:
            total_amount = total_amount + item.total_price

        return Order(
            id=None,
            order_number=order_number,
            customer_id=customer_id,
            created_by=created_by,
            payment_method=payment_method,
            total_amount=total_amount,
            discount=discount,
            final_amount=apply_discount(total_amount, discount),
            items=list(items),
            notes=notes,
            delivery_date=delivery_date,
        )

    # --- State transitions ----------------------------------------------------

    def change_status(self, target: OrderStatus, policy: TransitionPolicy) -> None:
        """Move the order to ``target`` if ``policy`` allows the edge.

        Amounts and items are never touched.
        """
        policy.check(self.status, target)
        self.status = target
        self.updated_at = utcnow()
