"""SQLAlchemy-backed implementation of CategoryRepository."""

from __future__ import annotations

from sqlalchemy import delete, select

from backoffice.domain.exceptions import NotFoundError
from backoffice.domain.model.category import Category
from backoffice.domain.repository.category_repository import CategoryRepository
from backoffice.infrastructure.persistence._timestamps import as_utc
from backoffice.infrastructure.persistence.database import Database
from backoffice.infrastructure.persistence.tables import CategoryRow


class SqlCategoryRepository(CategoryRepository):

    def __init__(self, db: Database) -> None:
        self._db = db

    # --- CategoryRepository interface -----------------------------------------

    def list_all(self) -> list[Category]:
        with self._db.transaction() as session:
            rows = session.scalars(select(CategoryRow).order_by(CategoryRow.name, CategoryRow.id))
            return [self._to_domain(row) for row in rows]

    def get_by_id(self, category_id: int) -> Category | None:
        with self._db.transaction() as session:
            row = session.get(CategoryRow, category_id)
            return self._to_domain(row) if row is not None else None

    def save(self, category: Category) -> None:
        with self._db.transaction() as session:
            if category.id is None:
                row = CategoryRow(created_at=category.created_at)
                session.add(row)
            else:
                row = session.get(CategoryRow, category.id)
                if row is None:
                    raise NotFoundError(f"Category #{category.id} not found")
            row.name = category.name
            row.description = category.description
            row.updated_at = category.updated_at
            session.flush()
            category.id = row.id

    def delete(self, category_id: int) -> bool:
        with self._db.transaction() as session:
            result = session.execute(delete(CategoryRow).where(CategoryRow.id == category_id))
            return result.rowcount > 0

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_domain(row: CategoryRow) -> Category:
        return Category(
            id=row.id,
            name=row.name,
            description=row.description,
            created_at=as_utc(row.created_at),
            updated_at=as_utc(row.updated_at),
        )
