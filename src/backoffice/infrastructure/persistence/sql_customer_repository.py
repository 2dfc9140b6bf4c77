"""SQLAlchemy-backed implementation of CustomerRepository."""

from __future__ import annotations

from sqlalchemy import delete, or_, select

from backoffice.domain.exceptions import NotFoundError
from backoffice.domain.model.customer import Customer
from backoffice.domain.repository.customer_repository import (
    SEARCH_FIELDS,
    CustomerRepository,
)
from backoffice.infrastructure.persistence._timestamps import as_utc
from backoffice.infrastructure.persistence.database import Database
from backoffice.infrastructure.persistence.tables import CustomerRow

_COPIED_FIELDS = (
    "name", "email", "phone", "document", "address",
    "city", "state", "zip_code", "notes", "active",
)


class SqlCustomerRepository(CustomerRepository):

    def __init__(self, db: Database) -> None:
        self._db = db

    # --- CustomerRepository interface -----------------------------------------

    def list_all(self, search_term: str | None = None) -> list[Customer]:
        stmt = select(CustomerRow)
        if search_term:
            pattern = f"%{search_term}%"
            stmt = stmt.where(
                or_(*(getattr(CustomerRow, name).ilike(pattern) for name in SEARCH_FIELDS))
            )
        stmt = stmt.order_by(CustomerRow.created_at.desc(), CustomerRow.id.desc())

        with self._db.transaction() as session:
            return [self._to_domain(row) for row in session.scalars(stmt)]

    def get_by_id(self, customer_id: int) -> Customer | None:
        with self._db.transaction() as session:
            row = session.get(CustomerRow, customer_id)
            return self._to_domain(row) if row is not None else None

    def save(self, customer: Customer) -> None:
        with self._db.transaction() as session:
            if customer.id is None:
                row = CustomerRow(created_at=customer.created_at)
                session.add(row)
            else:
                row = session.get(CustomerRow, customer.id)
                if row is None:
                    raise NotFoundError(f"Customer #{customer.id} not found")
            for name in _COPIED_FIELDS:
                setattr(row, name, getattr(customer, name))
            row.updated_at = customer.updated_at
            session.flush()
            customer.id = row.id

    def delete(self, customer_id: int) -> bool:
        with self._db.transaction() as session:
            result = session.execute(delete(CustomerRow).where(CustomerRow.id == customer_id))
            return result.rowcount > 0

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_domain(row: CustomerRow) -> Customer:
        return Customer(
            id=row.id,
            **{name: getattr(row, name) for name in _COPIED_FIELDS},
            created_at=as_utc(row.created_at),
            updated_at=as_utc(row.updated_at),
        )
