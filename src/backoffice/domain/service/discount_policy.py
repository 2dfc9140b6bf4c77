"""Domain service: discount application.

The discount is subtracted from the order subtotal as-is.  It is not
capped, so a discount larger than the subtotal produces a negative final
amount.
"""

from __future__ import annotations

from backoffice.domain.model.value_objects import Money


def apply_discount(total_amount: Money, discount: Money) -> Money:
    """Return the final amount owed for ``total_amount`` after ``discount``."""
    return total_amount - discount
