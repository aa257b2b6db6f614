"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from retail.domain.exceptions import ValidationError
from retail.domain.model.value_objects import Money, Quantity


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")
        assert m.currency == "PHP"

    def test_of_factory_from_string(self):
        m = Money.of("25.99")
        assert m.amount == Decimal("25.99")

    def test_of_factory_from_int(self):
        m = Money.of(600)
        assert m.amount == Decimal("600")

    def test_of_factory_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("six hundred")

    def test_float_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be a Decimal"):
            Money(10.5)

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_zero(self):
        assert Money.zero().amount == Decimal("0")

    def test_addition(self):
        result = Money.of("600") + Money.of("1200")
        assert result == Money.of("1800")

    def test_multiplication_by_int(self):
        result = Money.of("600") * 2
        assert result == Money.of("1200")

    def test_multiplication_by_float_rejected(self):
        with pytest.raises(TypeError):
            Money.of("600") * 1.5

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money(Decimal("10"), "PHP") + Money(Decimal("5"), "USD")

    def test_str_formatting(self):
        assert str(Money.of("600")) == "600.00"
        assert str(Money.of("9.5")) == "9.50"


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_valid_quantity(self):
        assert Quantity(5).value == 5

    def test_zero_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(0)

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(-3)

    def test_incremented_returns_new_value(self):
        q = Quantity(1)
        assert q.incremented() == Quantity(2)
        assert q == Quantity(1)

    def test_str(self):
        assert str(Quantity(7)) == "7"
