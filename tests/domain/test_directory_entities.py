"""Unit tests for Category, Customer and Product aggregates."""

import pytest

from backoffice.domain.exceptions import ValidationError
from backoffice.domain.model.category import Category
from backoffice.domain.model.customer import Customer
from backoffice.domain.model.product import Product, ProductKind
from backoffice.domain.model.value_objects import Money


class TestCategory:

    def test_name_is_stripped(self):
        assert Category.create("  Consultoria ").name == "Consultoria"

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="Category name is required"):
            Category.create("   ")

    def test_update_only_supplied_fields(self):
        category = Category.create("Eletrônicos", "Gadgets")
        category.update({"description": "Tecnologia"})
        assert category.name == "Eletrônicos"
        assert category.description == "Tecnologia"


class TestCustomer:

    def test_defaults(self):
        customer = Customer.create("Ana")
        assert customer.active is True
        assert customer.email is None

    def test_create_with_details(self):
        customer = Customer.create("Ana", email="ana@example.com", city="Recife")
        assert customer.email == "ana@example.com"
        assert customer.city == "Recife"

    def test_missing_name_rejected(self):
        with pytest.raises(ValidationError, match="Customer name is required"):
            Customer.create("")

    def test_unknown_field_rejected(self):
        customer = Customer.create("Ana")
        with pytest.raises(ValidationError, match="Unknown customer field"):
            customer.update({"credit_limit": 10})
        assert customer.name == "Ana"

    def test_update_cannot_blank_the_name(self):
        customer = Customer.create("Ana")
        with pytest.raises(ValidationError, match="name is required"):
            customer.update({"name": " "})


class TestProduct:

    def test_create(self):
        product = Product.create("Widget", 1000, kind="product", unit="un")
        assert product.price == Money(1000)
        assert product.kind == ProductKind.PRODUCT

    def test_service_kind(self):
        product = Product.create("Manutenção", 15000, kind="service", unit="hora")
        assert product.kind == ProductKind.SERVICE
        assert product.unit == "hora"

    def test_invalid_kind_rejected(self):
        with pytest.raises(ValidationError, match="Invalid product kind"):
            Product.create("Widget", 1000, kind="bundle")

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError, match="Product price cannot be negative"):
            Product.create("Widget", -5)

    def test_float_price_rejected(self):
        with pytest.raises(ValidationError, match="integer cents"):
            Product.create("Widget", 10.5)

    def test_update_price_and_kind(self):
        product = Product.create("Widget", 1000)
        product.update({"price": 2500, "kind": "service"})
        assert product.price == Money(2500)
        assert product.kind == ProductKind.SERVICE

    def test_price_detail_rejected_on_create(self):
        with pytest.raises(ValidationError, match="Unknown product field.*price"):
            Product.create("Widget", 1000, price=2500)

    def test_create_details(self):
        product = Product.create("Widget", 1000, sku="W-1", active=False)
        assert product.sku == "W-1"
        assert product.active is False
