"""SQLAlchemy-backed implementation of ProductRepository."""

from __future__ import annotations

from sqlalchemy import delete, or_, select

from backoffice.domain.exceptions import NotFoundError
from backoffice.domain.model.product import Product, ProductKind
from backoffice.domain.model.value_objects import Money
from backoffice.domain.repository.product_repository import (
    SEARCH_FIELDS,
    ProductRepository,
)
from backoffice.infrastructure.persistence._timestamps import as_utc
from backoffice.infrastructure.persistence.database import Database
from backoffice.infrastructure.persistence.tables import ProductRow


class SqlProductRepository(ProductRepository):

    def __init__(self, db: Database) -> None:
        self._db = db

    # --- ProductRepository interface ------------------------------------------

    def list_all(
        self,
        search_term: str | None = None,
        category_id: int | None = None,
    ) -> list[Product]:
        stmt = select(ProductRow)
        if search_term:
            pattern = f"%{search_term}%"
            stmt = stmt.where(
                or_(*(getattr(ProductRow, name).ilike(pattern) for name in SEARCH_FIELDS))
            )
        if category_id is not None:
            stmt = stmt.where(ProductRow.category_id == category_id)
        stmt = stmt.order_by(ProductRow.created_at.desc(), ProductRow.id.desc())

        with self._db.transaction() as session:
            return [self._to_domain(row) for row in session.scalars(stmt)]

    def get_by_id(self, product_id: int) -> Product | None:
        with self._db.transaction() as session:
            row = session.get(ProductRow, product_id)
            return self._to_domain(row) if row is not None else None

    def save(self, product: Product) -> None:
        with self._db.transaction() as session:
            if product.id is None:
                row = ProductRow(created_at=product.created_at)
                session.add(row)
            else:
                row = session.get(ProductRow, product.id)
                if row is None:
                    raise NotFoundError(f"Product #{product.id} not found")
            row.name = product.name
            row.description = product.description
            row.sku = product.sku
            row.category_id = product.category_id
            row.kind = product.kind.value
            row.price = product.price.cents
            row.unit = product.unit
            row.active = product.active
            row.updated_at = product.updated_at
            session.flush()
            product.id = row.id

    def delete(self, product_id: int) -> bool:
        with self._db.transaction() as session:
            result = session.execute(delete(ProductRow).where(ProductRow.id == product_id))
            return result.rowcount > 0

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_domain(row: ProductRow) -> Product:
        return Product(
            id=row.id,
            name=row.name,
            price=Money(row.price),
            kind=ProductKind(row.kind),
            unit=row.unit,
            description=row.description,
            sku=row.sku,
            category_id=row.category_id,
            active=row.active,
            created_at=as_utc(row.created_at),
            updated_at=as_utc(row.updated_at),
        )
