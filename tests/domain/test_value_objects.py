"""Unit tests for domain value objects."""

import pytest

from backoffice.domain.exceptions import ValidationError
from backoffice.domain.model.value_objects import Money, Quantity


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(1050)
        assert m.cents == 1050

    def test_float_rejected(self):
        with pytest.raises(ValidationError, match="integer cents"):
            Money(10.5)

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="integer cents"):
            Money(True)

    def test_of_rejects_negative(self):
        with pytest.raises(ValidationError, match="Discount cannot be negative"):
            Money.of(-1, "Discount")

    def test_addition(self):
        assert Money(1000) + Money(550) == Money(1550)

    def test_subtraction_may_go_negative(self):
        result = Money(300) - Money(500)
        assert result == Money(-200)
        assert result.is_negative

    def test_multiplication_by_int(self):
        assert Money(750) * 3 == Money(2250)

    def test_multiplication_by_float_rejected(self):
        with pytest.raises(TypeError, match="multiply Money by int"):
            Money(750) * 1.5

    def test_str_formatting(self):
        assert str(Money(1500)) == "R$ 15,00"
        assert str(Money(350000)) == "R$ 3.500,00"
        assert str(Money(5)) == "R$ 0,05"
        assert str(Money(-250)) == "-R$ 2,50"

    def test_comparison_operators(self):
        assert Money(500) < Money(1000)
        assert Money(1000) > Money(500)
        assert Money(1000) >= Money(1000)
        assert Money(1000) <= Money(1000)


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_valid_quantity(self):
        q = Quantity(5)
        assert q.value == 5

    def test_zero_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(0)

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(-3)

    def test_non_integer_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity(2.0)

    def test_str(self):
        assert str(Quantity(7)) == "7"
