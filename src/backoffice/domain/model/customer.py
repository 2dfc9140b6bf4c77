"""Customer aggregate.

Customers are referenced by orders.  Deleting one that still has orders
is rejected by the storage layer's foreign key, never cascaded.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import ClassVar

from backoffice.domain.model._fields import apply_changes, require_name, utcnow


@dataclass
class Customer:

    EDITABLE_FIELDS: ClassVar[frozenset[str]] = frozenset({
        "name", "email", "phone", "document", "address",
        "city", "state", "zip_code", "notes", "active",
    })

    id: int | None
    name: str
    email: str | None = None
    phone: str | None = None
    document: str | None = None  # CPF/CNPJ
    address: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    notes: str | None = None
    active: bool = True
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

    @staticmethod
    def create(name: str, **details: object) -> Customer:
        """Create a new customer; ``details`` holds the optional contact fields."""
        customer = Customer(id=None, name=require_name(name, "Customer"))
        if details:
            apply_changes(customer, details, Customer.EDITABLE_FIELDS, "Customer")
        return customer

    def update(self, changes: Mapping[str, object]) -> None:
        apply_changes(self, changes, self.EDITABLE_FIELDS, "Customer")
        self.updated_at = utcnow()
