"""Integration tests for the CreateOrder use case.

Uses in-memory fake repositories, no database.
"""

import pytest

from backoffice.application.create_order import CreateOrderHandler
from backoffice.application.dto import OrderItemSpec
from backoffice.domain.exceptions import (
    ReferentialIntegrityError,
    StorageUnavailableError,
    ValidationError,
)
from backoffice.domain.model.order import OrderStatus
from backoffice.domain.model.value_objects import Money
from backoffice.domain.service.order_number_generator import OrderNumberGenerator
from tests.fakes import FakeOrderRepository


def _setup(
    known_customers: set[int] | None = None,
    clock=None,
) -> tuple[CreateOrderHandler, FakeOrderRepository]:
    order_repo = FakeOrderRepository(known_customers=known_customers or {1})
    generator = OrderNumberGenerator(clock=clock) if clock else OrderNumberGenerator()
    return CreateOrderHandler(order_repo, generator), order_repo


def _widget(qty: int = 3, price: int = 1000) -> OrderItemSpec:
    return OrderItemSpec(product_id=1, product_name="Widget", quantity=qty, unit_price=price)


class TestCreateOrderHappyPath:

    def test_widget_scenario(self):
        handler, order_repo = _setup()
        created = handler.handle(
            customer_id=1,
            payment_method="pix",
            item_specs=[_widget(qty=3, price=1000)],
            created_by=7,
            discount=500,
        )

        order = order_repo.get_by_id(created.id)
        assert order.total_amount == Money(3000)
        assert order.final_amount == Money(2500)
        assert order.status == OrderStatus.PENDING
        assert order.created_by == 7
        assert len(order.items) == 1
        assert order.items[0].total_price == Money(3000)

    def test_returns_id_and_number(self):
        handler, _ = _setup(clock=lambda: 1700000000000)
        created = handler.handle(1, "cash", [_widget()], created_by=1)
        assert created.id == 1
        assert created.order_number == "PED-1700000000000"

    def test_totals_match_persisted_items(self):
        handler, order_repo = _setup()
        specs = [
            OrderItemSpec(1, "Widget", 3, 1000),
            OrderItemSpec(2, "Gadget", 7, 1299),
            OrderItemSpec(3, "Manutenção", 2, 15000, notes="2h"),
        ]
        created = handler.handle(1, "credit_card", specs, created_by=1, discount=1234)

        order = order_repo.get_by_id(created.id)
        recomputed = sum(i.quantity.value * i.unit_price.cents for i in order.items)
        assert order.total_amount.cents == recomputed == 3000 + 9093 + 30000
        assert order.final_amount.cents == recomputed - 1234

    def test_line_order_preserved(self):
        handler, order_repo = _setup()
        specs = [OrderItemSpec(i, f"P{i}", 1, 100) for i in (3, 1, 2)]
        created = handler.handle(1, "cash", specs, created_by=1)
        assert [i.product_id for i in order_repo.get_by_id(created.id).items] == [3, 1, 2]

    def test_negative_final_amount_allowed(self):
        handler, order_repo = _setup()
        created = handler.handle(1, "cash", [_widget(qty=1, price=1000)], created_by=1, discount=1500)
        assert order_repo.get_by_id(created.id).final_amount == Money(-500)

    def test_order_numbers_are_distinct(self):
        handler, _ = _setup()
        numbers = {
            handler.handle(1, "cash", [_widget()], created_by=1).order_number
            for _ in range(200)
        }
        assert len(numbers) == 200


class TestCreateOrderSnapshot:

    def test_name_and_price_come_from_request(self):
        handler, order_repo = _setup()
        spec = OrderItemSpec(product_id=1, product_name="Widget (old name)", quantity=2, unit_price=450)
        created = handler.handle(1, "cash", [spec], created_by=1)

        item = order_repo.get_by_id(created.id).items[0]
        assert item.product_name == "Widget (old name)"
        assert item.unit_price == Money(450)


class TestCreateOrderValidation:

    def test_empty_items_rejected_and_nothing_persisted(self):
        handler, order_repo = _setup()
        with pytest.raises(ValidationError, match="at least one item"):
            handler.handle(1, "cash", [], created_by=1)
        assert order_repo.count() == 0

    def test_zero_quantity_rejected(self):
        handler, order_repo = _setup()
        with pytest.raises(ValidationError, match="must be positive"):
            handler.handle(1, "cash", [_widget(qty=0)], created_by=1)
        assert order_repo.count() == 0

    def test_negative_unit_price_rejected(self):
        handler, _ = _setup()
        with pytest.raises(ValidationError, match="Unit price cannot be negative"):
            handler.handle(1, "cash", [_widget(price=-1)], created_by=1)

    def test_negative_discount_rejected(self):
        handler, _ = _setup()
        with pytest.raises(ValidationError, match="Discount cannot be negative"):
            handler.handle(1, "cash", [_widget()], created_by=1, discount=-10)

    def test_unknown_payment_method_rejected(self):
        handler, _ = _setup()
        with pytest.raises(ValidationError, match="Invalid payment method"):
            handler.handle(1, "barter", [_widget()], created_by=1)

    def test_unknown_customer_surfaces_from_storage(self):
        handler, order_repo = _setup(known_customers={1})
        with pytest.raises(ReferentialIntegrityError, match="does not exist"):
            handler.handle(99, "cash", [_widget()], created_by=1)
        assert order_repo.count() == 0


class TestOrderNumberCollision:

    def test_taken_number_is_skipped(self):
        handler, order_repo = _setup(clock=lambda: 1000)
        first = handler.handle(1, "cash", [_widget()], created_by=1)

        # A fresh generator on the same clock starts over at PED-1000.
        other = CreateOrderHandler(order_repo, OrderNumberGenerator(clock=lambda: 1000))
        second = other.handle(1, "cash", [_widget()], created_by=1)

        assert first.order_number == "PED-1000"
        assert second.order_number == "PED-1001"


class _UnreachableOrderRepository(FakeOrderRepository):

    def order_number_exists(self, order_number: str) -> bool:
        raise StorageUnavailableError("database is unreachable")


class TestValidationPrecedesStorage:

    def test_empty_items_reported_during_outage(self):
        handler = CreateOrderHandler(_UnreachableOrderRepository(), OrderNumberGenerator())
        with pytest.raises(ValidationError, match="at least one item"):
            handler.handle(1, "cash", [], created_by=1)

    def test_negative_discount_reported_during_outage(self):
        handler = CreateOrderHandler(_UnreachableOrderRepository(), OrderNumberGenerator())
        with pytest.raises(ValidationError, match="Discount cannot be negative"):
            handler.handle(1, "cash", [_widget()], created_by=1, discount=-1)

    def test_valid_order_still_needs_storage(self):
        handler = CreateOrderHandler(_UnreachableOrderRepository(), OrderNumberGenerator())
        with pytest.raises(StorageUnavailableError):
            handler.handle(1, "cash", [_widget()], created_by=1)
