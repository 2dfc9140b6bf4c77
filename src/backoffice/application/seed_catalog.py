"""Application service: Seed Catalog use case.

Loads a small demo dataset (categories, customers, products and
services).  Each demo record is inserted only when it is missing:
categories match by name, customers by e-mail and products by SKU.  A
rerun after a failed seed therefore completes it, and a rerun over a
complete seed inserts nothing.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from backoffice.domain.model.category import Category
from backoffice.domain.model.customer import Customer
from backoffice.domain.model.product import Product, ProductKind
from backoffice.domain.repository.category_repository import CategoryRepository
from backoffice.domain.repository.customer_repository import CustomerRepository
from backoffice.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)

DEMO_CATEGORIES = [
    ("Eletrônicos", "Produtos eletrônicos e tecnologia"),
    ("Serviços de Manutenção", "Serviços de manutenção e reparo"),
    ("Consultoria", "Serviços de consultoria"),
]

DEMO_CUSTOMERS = [
    {
        "name": "João Silva", "email": "joao.silva@email.com", "phone": "(11) 98765-4321",
        "document": "123.456.789-00", "address": "Rua das Flores, 123",
        "city": "São Paulo", "state": "SP", "zip_code": "01234-567",
    },
    {
        "name": "Maria Santos", "email": "maria.santos@email.com", "phone": "(21) 97654-3210",
        "document": "987.654.321-00", "address": "Av. Principal, 456",
        "city": "Rio de Janeiro", "state": "RJ", "zip_code": "20000-000",
    },
    {
        "name": "Empresa ABC Ltda", "email": "contato@empresaabc.com.br", "phone": "(11) 3456-7890",
        "document": "12.345.678/0001-90", "address": "Rua Comercial, 789",
        "city": "São Paulo", "state": "SP", "zip_code": "04567-890",
    },
]

# (name, description, sku, category index, kind, price in cents, unit)
DEMO_PRODUCTS = [
    ("Notebook Dell", "Notebook Dell Inspiron 15, Intel Core i5, 8GB RAM, 256GB SSD",
     "NB-DELL-001", 0, ProductKind.PRODUCT, 350000, "un"),
    ("Mouse Logitech", "Mouse sem fio Logitech MX Master 3",
     "MS-LOG-001", 0, ProductKind.PRODUCT, 45000, "un"),
    ("Teclado Mecânico", "Teclado mecânico RGB com switches blue",
     "KB-MEC-001", 0, ProductKind.PRODUCT, 35000, "un"),
    ("Manutenção de Computador", "Serviço de manutenção preventiva e corretiva",
     "SRV-MAN-001", 1, ProductKind.SERVICE, 15000, "hora"),
    ("Instalação de Software", "Instalação e configuração de software",
     "SRV-INS-001", 1, ProductKind.SERVICE, 10000, "hora"),
    ("Consultoria em TI", "Consultoria em infraestrutura e sistemas",
     "SRV-CON-001", 2, ProductKind.SERVICE, 25000, "hora"),
]


@dataclass(frozen=True)
class SeedResult:

    categories: int
    customers: int
    products: int

    @property
    def skipped(self) -> bool:
        return not (self.categories or self.customers or self.products)


class SeedCatalogHandler:

    def __init__(
        self,
        category_repo: CategoryRepository,
        customer_repo: CustomerRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._category_repo = category_repo
        self._customer_repo = customer_repo
        self._product_repo = product_repo

    def handle(self) -> SeedResult:
        category_ids = {c.name: c.id for c in self._category_repo.list_all()}
        known_emails = {c.email for c in self._customer_repo.list_all()}
        known_skus = {p.sku for p in self._product_repo.list_all()}

        added_categories = 0
        for name, description in DEMO_CATEGORIES:
            if name in category_ids:
                continue
            category = Category.create(name, description)
            self._category_repo.save(category)
            category_ids[name] = category.id
            added_categories += 1

        added_customers = 0
        for fields in DEMO_CUSTOMERS:
            if fields["email"] in known_emails:
                continue
            details = dict(fields)
            self._customer_repo.save(Customer.create(str(details.pop("name")), **details))
            added_customers += 1

        added_products = 0
        for name, description, sku, cat_index, kind, price, unit in DEMO_PRODUCTS:
            if sku in known_skus:
                continue
            product = Product.create(
                name, price, kind=kind, unit=unit, description=description, sku=sku,
                category_id=category_ids[DEMO_CATEGORIES[cat_index][0]],
            )
            self._product_repo.save(product)
            added_products += 1

        result = SeedResult(
            categories=added_categories,
            customers=added_customers,
            products=added_products,
        )
        if result.skipped:
            logger.info("Demo data already present, nothing seeded")
        else:
            logger.info("Seeded demo data: %s", result)
        return result
