"""Value Objects for the domain layer.

Value objects are immutable objects that are defined by their attributes
rather than identity. They are interchangeable when their values are equal.
"""

from dataclasses import dataclass
from decimal import ROUND_DOWN, Decimal, localcontext
from typing import Self

from product_catalog.domain.base import ValueObject
from product_catalog.domain.exceptions import NegativeMoneyError

CENTS_PER_UNIT = 100
TWO_PLACES = Decimal("0.01")


# ============================================================================
# Money Value Object
# ============================================================================


@dataclass(frozen=True)
class Money(ValueObject):
    """Represents a monetary value with two fractional digits.

    Money is stored in the smallest currency unit (cents) to avoid
    floating-point precision issues. The decimal form is only produced
    when the value is surfaced to callers.

    Attributes:
        amount_cents: Amount in smallest currency unit (cents).
    """

    amount_cents: int

    def __post_init__(self) -> None:
        """Validate money constraints."""
        if self.amount_cents < 0:
            raise NegativeMoneyError(self.amount_cents)

    @classmethod
    def from_decimal(cls, amount: Decimal) -> Self:
        """Create money from decimal amount.

        Digits beyond the second fractional place are truncated, not
        rounded: ``Decimal("10.999")`` becomes 1099 cents.

        Args:
            amount: Decimal amount in major units.

        Returns:
            Money instance.
        """
        with localcontext() as ctx:
            # Wide enough that scaling to cents is exact at any input length.
            ctx.prec = max(ctx.prec, len(amount.as_tuple().digits) + 3)
            scaled = amount * CENTS_PER_UNIT
        cents = int(scaled.to_integral_value(rounding=ROUND_DOWN))
        return cls(amount_cents=cents)

    @classmethod
    def from_float(cls, amount: float) -> Self:
        """Create money from float amount.

        The float goes through its shortest ``str`` form, so ``19.99``
        converts to exactly 1999 cents.

        Args:
            amount: Float amount in major units.

        Returns:
            Money instance.
        """
        return cls.from_decimal(Decimal(str(amount)))

    def to_decimal(self) -> Decimal:
        """Convert to decimal amount in major units.

        Returns:
            Decimal amount with exactly two fractional digits.
        """
        return (Decimal(self.amount_cents) / CENTS_PER_UNIT).quantize(TWO_PLACES)

    def format(self) -> str:
        """Render the amount with exactly two fractional digits.

        Returns:
            Plain amount string without grouping or symbol (e.g. '1299.00').
        """
        return format_amount(self.to_decimal())

    def __str__(self) -> str:
        return self.format()


# ============================================================================
# Conversion helpers
# ============================================================================


def to_minor_units(amount: Decimal) -> int:
    """Convert a decimal amount to integer cents, truncating extra digits."""
    return Money.from_decimal(amount).amount_cents


def to_decimal(amount_cents: int) -> Decimal:
    """Convert integer cents to a two-place decimal amount."""
    return Money(amount_cents=amount_cents).to_decimal()


def format_amount(amount: Decimal) -> str:
    """Render a decimal amount with exactly two fractional digits."""
    return f"{amount.quantize(TWO_PLACES, rounding=ROUND_DOWN):f}"
