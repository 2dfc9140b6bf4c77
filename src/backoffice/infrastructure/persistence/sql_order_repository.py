"""SQLAlchemy-backed implementation of OrderRepository.

``add`` writes the order header and every line item inside one
transaction: if any insert fails, the whole order is rolled back and no
partial order is ever visible.
"""

from __future__ import annotations

from dataclasses import replace

from sqlalchemy import delete, exists, select
from sqlalchemy.orm import selectinload

from backoffice.domain.exceptions import NotFoundError
from backoffice.domain.model.order import (
    Order,
    OrderItem,
    OrderStatus,
    PaymentMethod,
)
from backoffice.domain.model.value_objects import Money, Quantity
from backoffice.domain.repository.order_repository import OrderRepository
from backoffice.infrastructure.persistence._timestamps import as_utc
from backoffice.infrastructure.persistence.database import Database
from backoffice.infrastructure.persistence.tables import OrderItemRow, OrderRow


class SqlOrderRepository(OrderRepository):

    def __init__(self, db: Database) -> None:
        self._db = db

    # --- OrderRepository interface --------------------------------------------

    def add(self, order: Order) -> None:
        with self._db.transaction() as session:
            header = OrderRow(
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
            )
            session.add(header)
            session.flush()

            # Insert in request order so item ids follow the line order.
            item_rows: list[OrderItemRow] = []
            for item in order.items:
                row = OrderItemRow(
                    order_id=header.id,
                    product_id=item.product_id,
                    product_name=item.product_name,
                    quantity=item.quantity.value,
                    unit_price=item.unit_price.cents,
                    total_price=item.total_price.cents,
                    notes=item.notes,
                    created_at=item.created_at,
                )
                session.add(row)
                session.flush()
                item_rows.append(row)

        order.id = header.id
        order.items = [
            replace(item, id=row.id, order_id=header.id)
            for item, row in zip(order.items, item_rows)
        ]

    def get_by_id(self, order_id: int) -> Order | None:
        stmt = (
            select(OrderRow)
            .where(OrderRow.id == order_id)
            .options(selectinload(OrderRow.items))
        )
        with self._db.transaction() as session:
            row = session.scalars(stmt).first()
            return self._to_domain(row, with_items=True) if row is not None else None

    def list_all(
        self,
        status: OrderStatus | None = None,
        customer_id: int | None = None,
    ) -> list[Order]:
        stmt = select(OrderRow)
        if status is not None:
            stmt = stmt.where(OrderRow.status == status.value)
        if customer_id is not None:
            stmt = stmt.where(OrderRow.customer_id == customer_id)
        stmt = stmt.order_by(OrderRow.created_at.desc(), OrderRow.id.desc())

        with self._db.transaction() as session:
            return [self._to_domain(row, with_items=False) for row in session.scalars(stmt)]

    def order_number_exists(self, order_number: str) -> bool:
        with self._db.transaction() as session:
            return bool(
                session.scalar(select(exists().where(OrderRow.order_number == order_number)))
            )

    def update_status(self, order: Order) -> None:
        with self._db.transaction() as session:
            row = session.get(OrderRow, order.id)
            if row is None:
                raise NotFoundError(f"Order #{order.id} not found")
            row.status = order.status.value
            row.updated_at = order.updated_at

    def delete(self, order_id: int) -> bool:
        with self._db.transaction() as session:
            result = session.execute(delete(OrderRow).where(OrderRow.id == order_id))
            return result.rowcount > 0

    def delete_item(self, item_id: int) -> bool:
        with self._db.transaction() as session:
            result = session.execute(delete(OrderItemRow).where(OrderItemRow.id == item_id))
            return result.rowcount > 0

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_domain(row: OrderRow, with_items: bool) -> Order:
        items = [
            OrderItem(
                id=i.id,
                order_id=i.order_id,
                product_id=i.product_id,
                product_name=i.product_name,
                quantity=Quantity(i.quantity),
                unit_price=Money(i.unit_price),
                notes=i.notes,
                created_at=as_utc(i.created_at),
            )
            for i in row.items
        ] if with_items else []

        return Order(
            id=row.id,
            order_number=row.order_number,
            customer_id=row.customer_id,
            created_by=row.created_by,
            payment_method=PaymentMethod(row.payment_method),
            total_amount=Money(row.total_amount),
            discount=Money(row.discount),
            final_amount=Money(row.final_amount),
            items=items,
            status=OrderStatus(row.status),
            notes=row.notes,
            delivery_date=as_utc(row.delivery_date),
            created_at=as_utc(row.created_at),
            updated_at=as_utc(row.updated_at),
        )
