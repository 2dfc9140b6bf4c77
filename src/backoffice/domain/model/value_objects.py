"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass

from backoffice.domain.exceptions import ValidationError


@dataclass(frozen=True, order=True)
class Money:
    """Monetary amount in integer minor units (cents).

    Floats are rejected outright; every calculation stays in exact
    integer arithmetic.  The amount is signed because a discount larger
    than the subtotal yields a negative final amount.
    """

    cents: int

    def __post_init__(self) -> None:
        if isinstance(self.cents, bool) or not isinstance(self.cents, int):
            raise ValidationError(
                f"Money amount must be integer cents, got {type(self.cents).__name__}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        return Money(self.cents + other.cents)

    def __sub__(self, other: Money) -> Money:
        return Money(self.cents - other.cents)

    def __mul__(self, factor: int) -> Money:
        if isinstance(factor, bool) or not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.cents * factor)

    @property
    def is_negative(self) -> bool:
        return self.cents < 0

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        sign = "-" if self.cents < 0 else ""
        whole, frac = divmod(abs(self.cents), 100)
        grouped = f"{whole:,}".replace(",", ".")
        return f"{sign}R$ {grouped},{frac:02d}"

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def zero() -> Money:
        return Money(0)

    @staticmethod
    def of(cents: int, label: str = "Amount") -> Money:
        """Build a non-negative amount, as accepted on every input field."""
        money = Money(cents)
        if money.is_negative:
            raise ValidationError(f"{label} cannot be negative, got {cents}")
        return money


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Enforces the invariant that you cannot order zero or negative items.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")

    def __str__(self) -> str:
        return str(self.value)
