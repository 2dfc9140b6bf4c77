"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations live in the infrastructure
layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from backoffice.domain.model.product import Product

# Text fields matched by the product search term.
SEARCH_FIELDS = ("name", "description", "sku")


class ProductRepository(ABC):

    @abstractmethod
    def list_all(
        self,
        search_term: str | None = None,
        category_id: int | None = None,
    ) -> list[Product]:
        """Return products newest-first.

        ``search_term`` matches any of ``SEARCH_FIELDS`` (case-insensitive
        substring); ``category_id`` narrows further.
        """

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product; assigns ``id`` on insert."""

    @abstractmethod
    def delete(self, product_id: int) -> bool:
        """Hard-delete a product. Returns False if no row matched."""
