"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Address, Money, Quantity


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")
        assert m.currency == "USD"

    def test_of_factory_from_string(self):
        assert Money.of("25.99").amount == Decimal("25.99")

    def test_of_factory_from_int(self):
        assert Money.of(999).amount == Decimal("999")

    def test_of_factory_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("ten")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_float_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be a Decimal"):
            Money(10.5)

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

    def test_zero_is_not_positive(self):
        assert not Money.zero().is_positive
        assert Money.of("0.01").is_positive

    def test_str_formatting(self):
        assert str(Money.of("15")) == "$15.00"
        assert str(Money.of("1099")) == "$1,099.00"


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

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity(True)


# ── Address ──────────────────────────────────────────────────────────────────


class TestAddress:

    def test_snapshot_format(self):
        address = Address("Nguyen Van A", "0901234567", "123 Le Loi", "Ho Chi Minh")
        assert address.snapshot() == "123 Le Loi, Ho Chi Minh - 0901234567"

    def test_snapshot_strips_whitespace(self):
        address = Address("A", " 0901 ", " 1 Main St ", " Hanoi ")
        assert address.snapshot() == "1 Main St, Hanoi - 0901"

    @pytest.mark.parametrize("field", ["recipient_name", "phone", "address_line", "city"])
    def test_blank_field_rejected(self, field):
        values = {
            "recipient_name": "A",
            "phone": "0901",
            "address_line": "1 Main St",
            "city": "Hanoi",
        }
        values[field] = "  "
        with pytest.raises(ValidationError, match="is required"):
            Address(**values)
