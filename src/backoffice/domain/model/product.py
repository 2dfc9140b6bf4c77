"""Product aggregate.

Products live independently of orders. They have their own lifecycle:
prices change, products are added and removed from the catalog.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import ClassVar

from backoffice.domain.exceptions import ValidationError
from backoffice.domain.model._fields import apply_changes, require_name, utcnow
from backoffice.domain.model.value_objects import Money


class ProductKind(Enum):
    PRODUCT = "product"
    SERVICE = "service"

    @staticmethod
    def parse(value: str | ProductKind) -> ProductKind:
        if isinstance(value, ProductKind):
            return value
        try:
            return ProductKind(value)
        except ValueError as exc:
            raise ValidationError(
                f"Invalid product kind {value!r}, expected 'product' or 'service'"
            ) from exc


@dataclass
class Product:
    """A product or service in the catalog.

    Kept as a mutable dataclass because field edits (price included) are a
    legitimate mutation on the aggregate.  Existing orders are unaffected:
    their line items hold a snapshot of name and price.
    """

    EDITABLE_FIELDS: ClassVar[frozenset[str]] = frozenset({
        "name", "description", "sku", "category_id", "kind", "price", "unit", "active",
    })
    # Extra keyword fields accepted by create(); price and kind have their own arguments.
    DETAIL_FIELDS: ClassVar[frozenset[str]] = EDITABLE_FIELDS - {"price", "kind"}

    id: int | None
    name: str
    price: Money
    kind: ProductKind = ProductKind.PRODUCT
    unit: str = "un"
    description: str | None = None
    sku: str | None = None
    category_id: int | None = None
    active: bool = True
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

    @staticmethod
    def create(
        name: str,
        price_cents: int,
        kind: str | ProductKind = ProductKind.PRODUCT,
        unit: str = "un",
        **details: object,
    ) -> Product:
        product = Product(
            id=None,
            name=require_name(name, "Product"),
            price=Money.of(price_cents, "Product price"),
            kind=ProductKind.parse(kind),
            unit=unit or "un",
        )
        if details:
            apply_changes(product, details, Product.DETAIL_FIELDS, "Product")
        return product

    def update(self, changes: Mapping[str, object]) -> None:
        """Merge the supplied fields.

        ``price`` arrives as integer cents and ``kind`` as its string tag;
        both are converted to their value types before merging.
        """
        values = dict(changes)
        if "price" in values:
            values["price"] = Money.of(values["price"], "Product price")  # type: ignore[arg-type]
        if "kind" in values:
            values["kind"] = ProductKind.parse(values["kind"])  # type: ignore[arg-type]
        apply_changes(self, values, self.EDITABLE_FIELDS, "Product")
        self.updated_at = utcnow()
