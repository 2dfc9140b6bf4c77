"""Abstract repository for Category aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from backoffice.domain.model.category import Category


class CategoryRepository(ABC):

    @abstractmethod
    def list_all(self) -> list[Category]:
        """Return every category, alphabetically by name."""

    @abstractmethod
    def get_by_id(self, category_id: int) -> Category | None:
        """Return a category by its ID, or None if not found."""

    @abstractmethod
    def save(self, category: Category) -> None:
        """Persist a new or updated category; assigns ``id`` on insert."""

    @abstractmethod
    def delete(self, category_id: int) -> bool:
        """Hard-delete a category. Returns False if no row matched."""
