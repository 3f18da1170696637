"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from shop.domain.exceptions import InvalidPriceError, InvalidQuantityError, ValidationError
from shop.domain.model.value_objects import Money, Quantity


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")
        assert m.currency == "USD"

    def test_zero_is_allowed(self):
        assert Money.of("0") == Money.zero()

    def test_of_factory_from_string(self):
        assert Money.of("25.99").amount == Decimal("25.99")

    def test_of_factory_from_float_keeps_decimal_digits(self):
        assert Money.of(19.99).amount == Decimal("19.99")

    def test_negative_amount_rejected(self):
        with pytest.raises(InvalidPriceError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_of_negative_rejected(self):
        with pytest.raises(InvalidPriceError, match="cannot be negative"):
            Money.of(-1)

    def test_of_garbage_rejected(self):
        with pytest.raises(InvalidPriceError, match="Invalid price"):
            Money.of("ten dollars")

    def test_of_nan_rejected(self):
        with pytest.raises(InvalidPriceError):
            Money.of("NaN")

    def test_addition(self):
        assert Money.of("10") + Money.of("5.50") == Money.of("15.50")

    def test_multiplication_by_int(self):
        assert Money.of("7.50") * 3 == Money.of("22.50")

    def test_multiplication_by_float_rejected(self):
        with pytest.raises(TypeError):
            Money.of("7.50") * 1.5

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money(Decimal("10"), "USD") + Money(Decimal("5"), "EUR")

    def test_str_formatting(self):
        assert str(Money.of("15")) == "$15.00"
        assert str(Money.of("9.5")) == "$9.50"

    def test_to_text_is_plain_decimal(self):
        assert Money.of("12.50").to_text() == "12.50"


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_valid_quantity(self):
        assert Quantity(5).value == 5

    def test_zero_rejected(self):
        with pytest.raises(InvalidQuantityError, match="must be positive"):
            Quantity(0)

    def test_negative_rejected(self):
        with pytest.raises(InvalidQuantityError, match="must be positive"):
            Quantity(-3)

    def test_non_integer_rejected(self):
        with pytest.raises(InvalidQuantityError, match="must be an integer"):
            Quantity(1.5)

    def test_str(self):
        assert str(Quantity(7)) == "7"
