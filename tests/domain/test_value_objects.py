"""Tests for domain value objects."""

from decimal import Decimal

import pytest

from product_catalog.domain import (
    Money,
    NegativeMoneyError,
    format_amount,
    to_decimal,
    to_minor_units,
)


class TestMoney:
    """Tests for Money value object."""

    def test_create_from_cents(self) -> None:
        """Money can be created from cents."""
        money = Money(amount_cents=1999)
        assert money.amount_cents == 1999

    def test_create_from_decimal(self) -> None:
        """Money can be created from Decimal."""
        money = Money.from_decimal(Decimal("19.99"))
        assert money.amount_cents == 1999

    def test_create_from_float(self) -> None:
        """Floats go through their string form and convert exactly."""
        assert Money.from_float(19.99).amount_cents == 1999
        assert Money.from_float(0.29).amount_cents == 29
        assert Money.from_float(1899.99).amount_cents == 189999

    def test_extra_digits_are_truncated(self) -> None:
        """Digits past the cents are dropped, not rounded half-up."""
        assert Money.from_decimal(Decimal("10.999")).amount_cents == 1099
        assert Money.from_decimal(Decimal("0.015")).amount_cents == 1

    def test_long_inputs_are_truncated_not_rounded(self) -> None:
        """Inputs wider than the default decimal precision still truncate."""
        long_amount = Decimal("0.0199999999999999999999999999999")
        assert Money.from_decimal(long_amount).amount_cents == 1
        assert Money.from_decimal(Decimal("12345678901234567.899999999999999")).amount_cents == (
            1234567890123456789
        )

    def test_to_decimal(self) -> None:
        """Money can be converted to Decimal."""
        money = Money(amount_cents=1999)
        assert money.to_decimal() == Decimal("19.99")

    def test_to_decimal_keeps_two_places(self) -> None:
        """Whole amounts still carry two fractional digits."""
        assert str(Money(amount_cents=129900).to_decimal()) == "1299.00"

    def test_format(self) -> None:
        """Formatted amounts always show two fractional digits."""
        assert Money(amount_cents=129900).format() == "1299.00"
        assert Money(amount_cents=5).format() == "0.05"
        assert Money(amount_cents=189999).format() == "1899.99"

    def test_format_has_no_grouping_or_symbol(self) -> None:
        """Large amounts render as plain digits."""
        assert str(Money(amount_cents=123456789)) == "1234567.89"

    def test_negative_amount_raises_error(self) -> None:
        """Negative amounts raise NegativeMoneyError."""
        with pytest.raises(NegativeMoneyError):
            Money(amount_cents=-100)

    def test_equality_by_value(self) -> None:
        """Money objects with the same amount are equal."""
        assert Money(amount_cents=100) == Money.from_decimal(Decimal("1.00"))

    def test_immutable(self) -> None:
        """Money cannot be mutated."""
        money = Money(amount_cents=100)
        with pytest.raises(AttributeError):
            money.amount_cents = 200  # type: ignore[misc]


class TestConversionHelpers:
    """Tests for the module-level conversion functions."""

    @pytest.mark.parametrize(
        "amount",
        ["0.01", "0.10", "1.00", "19.99", "1299.00", "649.99", "1899.99", "0.29"],
    )
    def test_round_trip(self, amount: str) -> None:
        """Two-digit decimals survive a trip through cents."""
        value = Decimal(amount)
        assert to_decimal(to_minor_units(value)) == value

    def test_to_minor_units(self) -> None:
        assert to_minor_units(Decimal("19.99")) == 1999

    def test_to_decimal(self) -> None:
        assert to_decimal(1999) == Decimal("19.99")

    def test_format_amount_pads_trailing_zeros(self) -> None:
        assert format_amount(Decimal("1299")) == "1299.00"
        assert format_amount(Decimal("1.5")) == "1.50"
