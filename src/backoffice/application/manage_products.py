"""Application services: Product use cases.

Price edits never reach existing orders: their line items captured a
snapshot at creation time.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from backoffice.application._degrade import degrade_on_unavailable
from backoffice.domain.exceptions import NotFoundError
from backoffice.domain.model.product import Product, ProductKind
from backoffice.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    @degrade_on_unavailable(list)
    def handle(
        self,
        search_term: str | None = None,
        category_id: int | None = None,
    ) -> list[Product]:
        return self._product_repo.list_all(
            search_term=search_term or None, category_id=category_id
        )


class ShowProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int) -> Product:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise NotFoundError(f"Product #{product_id} not found")
        return product


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        name: str,
        price_cents: int,
        kind: str | ProductKind = ProductKind.PRODUCT,
        unit: str = "un",
        **details: object,
    ) -> Product:
        """Add a new product or service to the catalog."""
        product = Product.create(name, price_cents, kind=kind, unit=unit, **details)
        self._product_repo.save(product)
        logger.info("Added product #%s '%s' at %s", product.id, product.name, product.price)
        return product


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int, changes: Mapping[str, object]) -> Product:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise NotFoundError(f"Product #{product_id} not found")
        product.update(changes)
        self._product_repo.save(product)
        return product


class DeleteProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int) -> None:
        if not self._product_repo.delete(product_id):
            raise NotFoundError(f"Product #{product_id} not found")
        logger.info("Deleted product #%s", product_id)
