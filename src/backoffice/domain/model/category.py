"""Category aggregate: groups products and services in the catalog."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import ClassVar

from backoffice.domain.model._fields import apply_changes, require_name, utcnow


@dataclass
class Category:

    EDITABLE_FIELDS: ClassVar[frozenset[str]] = frozenset({"name", "description"})

    id: int | None
    name: str
    description: str | None = None
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

    @staticmethod
    def create(name: str, description: str | None = None) -> Category:
        return Category(id=None, name=require_name(name, "Category"), description=description)

    def update(self, changes: Mapping[str, object]) -> None:
        apply_changes(self, changes, self.EDITABLE_FIELDS, "Category")
        self.updated_at = utcnow()
