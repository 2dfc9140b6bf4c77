"""In-memory fake repositories for testing.

These implement the same abstract interfaces as the SQL repositories
but keep everything in a dict. No database, no side effects.
"""

from __future__ import annotations

from dataclasses import replace

from backoffice.domain.exceptions import ReferentialIntegrityError
from backoffice.domain.model.category import Category
from backoffice.domain.model.customer import Customer
from backoffice.domain.model.dashboard import DashboardStats
from backoffice.domain.model.order import Order, OrderStatus
from backoffice.domain.model.product import Product
from backoffice.domain.model.value_objects import Money
from backoffice.domain.repository.category_repository import CategoryRepository
from backoffice.domain.repository.customer_repository import (
    SEARCH_FIELDS as CUSTOMER_SEARCH_FIELDS,
)
from backoffice.domain.repository.customer_repository import CustomerRepository
from backoffice.domain.repository.order_repository import OrderRepository
from backoffice.domain.repository.product_repository import (
    SEARCH_FIELDS as PRODUCT_SEARCH_FIELDS,
)
from backoffice.domain.repository.product_repository import ProductRepository
from backoffice.domain.repository.stats_repository import StatsRepository


def _matches(entity: object, fields: tuple[str, ...], term: str) -> bool:
    needle = term.lower()
    return any(needle in (getattr(entity, f) or "").lower() for f in fields)


class FakeCategoryRepository(CategoryRepository):

    def __init__(self) -> None:
        self._store: dict[int, Category] = {}
        self._next_id = 1

    def list_all(self) -> list[Category]:
        return sorted(self._store.values(), key=lambda c: (c.name, c.id))

    def get_by_id(self, category_id: int) -> Category | None:
        return self._store.get(category_id)

    def save(self, category: Category) -> None:
        if category.id is None:
            category.id = self._next_id
            self._next_id += 1
        self._store[category.id] = category

    def delete(self, category_id: int) -> bool:
        return self._store.pop(category_id, None) is not None


class FakeCustomerRepository(CustomerRepository):

    def __init__(self, orders: FakeOrderRepository | None = None) -> None:
        self._store: dict[int, Customer] = {}
        self._next_id = 1
        self._orders = orders

    def list_all(self, search_term: str | None = None) -> list[Customer]:
        rows = [
            c for c in self._store.values()
            if not search_term or _matches(c, CUSTOMER_SEARCH_FIELDS, search_term)
        ]
        return sorted(rows, key=lambda c: (c.created_at, c.id), reverse=True)

    def get_by_id(self, customer_id: int) -> Customer | None:
        return self._store.get(customer_id)

    def save(self, customer: Customer) -> None:
        if customer.id is None:
            customer.id = self._next_id
            self._next_id += 1
        self._store[customer.id] = customer

    def delete(self, customer_id: int) -> bool:
        if self._orders is not None and self._orders.references_customer(customer_id):
            raise ReferentialIntegrityError(f"Customer #{customer_id} is referenced by orders")
        return self._store.pop(customer_id, None) is not None


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[int, Product] = {}
        self._next_id = 1
        for p in products or []:
            self.save(p)

    def list_all(
        self,
        search_term: str | None = None,
        category_id: int | None = None,
    ) -> list[Product]:
        rows = [
            p for p in self._store.values()
            if (not search_term or _matches(p, PRODUCT_SEARCH_FIELDS, search_term))
            and (category_id is None or p.category_id == category_id)
        ]
        return sorted(rows, key=lambda p: (p.created_at, p.id), reverse=True)

    def get_by_id(self, product_id: int) -> Product | None:
        return self._store.get(product_id)

    def save(self, product: Product) -> None:
        if product.id is None:
            product.id = self._next_id
            self._next_id += 1
        self._store[product.id] = product

    def delete(self, product_id: int) -> bool:
        return self._store.pop(product_id, None) is not None


class FakeOrderRepository(OrderRepository):

    def __init__(self, known_customers: set[int] | None = None) -> None:
        self._store: dict[int, Order] = {}
        self._next_id = 1
        self._next_item_id = 1
        self._known_customers = known_customers

    def add(self, order: Order) -> None:
        if self._known_customers is not None and order.customer_id not in self._known_customers:
            raise ReferentialIntegrityError(f"Customer #{order.customer_id} does not exist")
        if self.order_number_exists(order.order_number):
            raise ReferentialIntegrityError(f"Duplicate order number {order.order_number}")
        order.id = self._next_id
        self._next_id += 1
        items = []
        for item in order.items:
            items.append(replace(item, id=self._next_item_id, order_id=order.id))
            self._next_item_id += 1
        order.items = items
        self._store[order.id] = order

    def get_by_id(self, order_id: int) -> Order | None:
        return self._store.get(order_id)

    def list_all(
        self,
        status: OrderStatus | None = None,
        customer_id: int | None = None,
    ) -> list[Order]:
        rows = [
            o for o in self._store.values()
            if (status is None or o.status == status)
            and (customer_id is None or o.customer_id == customer_id)
        ]
        return sorted(rows, key=lambda o: (o.created_at, o.id), reverse=True)

    def order_number_exists(self, order_number: str) -> bool:
        return any(o.order_number == order_number for o in self._store.values())

    def update_status(self, order: Order) -> None:
        self._store[order.id] = order  # type: ignore[index]

    def delete(self, order_id: int) -> bool:
        return self._store.pop(order_id, None) is not None

    def delete_item(self, item_id: int) -> bool:
        for order in self._store.values():
            kept = [i for i in order.items if i.id != item_id]
            if len(kept) != len(order.items):
                order.items = kept
                return True
        return False

    # --- Test helpers ---------------------------------------------------------

    def references_customer(self, customer_id: int) -> bool:
        return any(o.customer_id == customer_id for o in self._store.values())

    def count(self) -> int:
        return len(self._store)


class FakeStatsRepository(StatsRepository):

    def __init__(
        self,
        customers: FakeCustomerRepository,
        products: FakeProductRepository,
        orders: FakeOrderRepository,
    ) -> None:
        self._customers = customers
        self._products = products
        self._orders = orders

    def dashboard_stats(self) -> DashboardStats:
        orders = self._orders.list_all()
        revenue = Money.zero()
        for o in orders:
            if o.status == OrderStatus.COMPLETED:
                revenue = revenue + o.final_amount
        return DashboardStats(
            total_customers=len(self._customers.list_all()),
            total_products=len(self._products.list_all()),
            total_orders=len(orders),
            pending_orders=sum(1 for o in orders if o.status == OrderStatus.PENDING),
            total_revenue=revenue,
        )
