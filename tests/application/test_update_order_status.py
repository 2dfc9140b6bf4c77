"""Integration tests for the order lifecycle use cases."""

import pytest

from backoffice.application.create_order import CreateOrderHandler
from backoffice.application.dashboard_stats import DashboardStatsHandler
from backoffice.application.delete_order import DeleteOrderHandler
from backoffice.application.dto import OrderItemSpec
from backoffice.application.list_orders import ListOrdersHandler
from backoffice.application.show_order import ShowOrderHandler
from backoffice.application.update_order_status import UpdateOrderStatusHandler
from backoffice.domain.exceptions import NotFoundError, ValidationError
from backoffice.domain.model.customer import Customer
from backoffice.domain.model.order import OrderStatus
from backoffice.domain.model.value_objects import Money
from backoffice.domain.service.order_number_generator import OrderNumberGenerator
from backoffice.domain.service.status_policy import StrictTransitionPolicy
from tests.fakes import (
    FakeCustomerRepository,
    FakeOrderRepository,
    FakeProductRepository,
    FakeStatsRepository,
)


def _setup():
    order_repo = FakeOrderRepository()
    customer_repo = FakeCustomerRepository(orders=order_repo)
    customer_repo.save(Customer.create("Ana"))
    create = CreateOrderHandler(order_repo, OrderNumberGenerator())
    return order_repo, customer_repo, create


def _place(create: CreateOrderHandler, qty: int = 3, discount: int = 0) -> int:
    spec = OrderItemSpec(product_id=1, product_name="Widget", quantity=qty, unit_price=1000)
    return create.handle(1, "pix", [spec], created_by=1, discount=discount).id


class TestUpdateOrderStatus:

    def test_happy_path_walk(self):
        order_repo, _, create = _setup()
        order_id = _place(create)
        handler = UpdateOrderStatusHandler(order_repo)

        for status in ("confirmed", "processing", "completed"):
            handler.handle(order_id, status)
            assert order_repo.get_by_id(order_id).status == OrderStatus(status)

    def test_amounts_untouched(self):
        order_repo, _, create = _setup()
        order_id = _place(create, qty=3, discount=500)
        UpdateOrderStatusHandler(order_repo).handle(order_id, "cancelled")

        order = order_repo.get_by_id(order_id)
        assert order.total_amount == Money(3000)
        assert order.final_amount == Money(2500)

    def test_permissive_by_default(self):
        order_repo, _, create = _setup()
        order_id = _place(create)
        handler = UpdateOrderStatusHandler(order_repo)

        handler.handle(order_id, "completed")
        handler.handle(order_id, "pending")

        assert order_repo.get_by_id(order_id).status == OrderStatus.PENDING

    def test_strict_policy_rejects_regression(self):
        order_repo, _, create = _setup()
        order_id = _place(create)
        handler = UpdateOrderStatusHandler(order_repo, StrictTransitionPolicy())

        with pytest.raises(ValidationError, match="from pending to completed"):
            handler.handle(order_id, "completed")
        assert order_repo.get_by_id(order_id).status == OrderStatus.PENDING

    def test_unknown_status_rejected(self):
        order_repo, _, create = _setup()
        order_id = _place(create)
        with pytest.raises(ValidationError, match="Invalid order status"):
            UpdateOrderStatusHandler(order_repo).handle(order_id, "shipped")

    def test_missing_order_leaves_dashboard_unchanged(self):
        order_repo, customer_repo, create = _setup()
        _place(create)
        stats = DashboardStatsHandler(
            FakeStatsRepository(customer_repo, FakeProductRepository(), order_repo)
        )
        before = stats.handle()

        with pytest.raises(NotFoundError, match="Order #999 not found"):
            UpdateOrderStatusHandler(order_repo).handle(999, "completed")

        after = stats.handle()
        assert after == before
        assert after.pending_orders == 1
        assert after.total_revenue == 0


class TestOrderQueries:

    def test_show_joins_customer_and_items(self):
        order_repo, customer_repo, create = _setup()
        order_id = _place(create)

        dto = ShowOrderHandler(order_repo, customer_repo).handle(order_id)

        assert dto.customer.name == "Ana"
        assert dto.items[0].product_name == "Widget"
        assert dto.items[0].total_price == 3000
        assert dto.final_amount == 3000

    def test_show_missing_order(self):
        order_repo, customer_repo, _ = _setup()
        with pytest.raises(NotFoundError):
            ShowOrderHandler(order_repo, customer_repo).handle(1)

    def test_list_filters_by_status(self):
        order_repo, _, create = _setup()
        first = _place(create)
        second = _place(create)
        UpdateOrderStatusHandler(order_repo).handle(first, "confirmed")

        listed = ListOrdersHandler(order_repo).handle(status="pending")
        assert [o.id for o in listed] == [second]

    def test_list_filters_by_customer(self):
        order_repo, _, create = _setup()
        _place(create)
        assert ListOrdersHandler(order_repo).handle(customer_id=2) == []
        assert len(ListOrdersHandler(order_repo).handle(customer_id=1)) == 1


class TestDeleteOrder:

    def test_delete(self):
        order_repo, _, create = _setup()
        order_id = _place(create)
        DeleteOrderHandler(order_repo).handle(order_id)
        assert order_repo.get_by_id(order_id) is None

    def test_delete_missing(self):
        order_repo, _, _ = _setup()
        with pytest.raises(NotFoundError):
            DeleteOrderHandler(order_repo).handle(42)
