"""Application services: Category use cases."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from backoffice.application._degrade import degrade_on_unavailable
from backoffice.domain.exceptions import NotFoundError
from backoffice.domain.model.category import Category
from backoffice.domain.repository.category_repository import CategoryRepository

logger = logging.getLogger(__name__)


class ListCategoriesHandler:

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    @degrade_on_unavailable(list)
    def handle(self) -> list[Category]:
        return self._category_repo.list_all()


class ShowCategoryHandler:

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    def handle(self, category_id: int) -> Category:
        category = self._category_repo.get_by_id(category_id)
        if category is None:
            raise NotFoundError(f"Category #{category_id} not found")
        return category


class AddCategoryHandler:

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    def handle(self, name: str, description: str | None = None) -> Category:
        category = Category.create(name=name, description=description)
        self._category_repo.save(category)
        logger.info("Added category #%s '%s'", category.id, category.name)
        return category


class UpdateCategoryHandler:

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    def handle(self, category_id: int, changes: Mapping[str, object]) -> Category:
        category = self._category_repo.get_by_id(category_id)
        if category is None:
            raise NotFoundError(f"Category #{category_id} not found")
        category.update(changes)
        self._category_repo.save(category)
        return category


class DeleteCategoryHandler:

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    def handle(self, category_id: int) -> None:
        if not self._category_repo.delete(category_id):
            raise NotFoundError(f"Category #{category_id} not found")
        logger.info("Deleted category #%s", category_id)
