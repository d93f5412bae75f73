#!/usr/bin/env python3
"""
Money Primitive Type

Immutable currency value wrapper that uses Decimal internally.
Keeps the exact amount read from a report; rounding only happens for display.
"""

from dataclasses import dataclass
from decimal import Decimal

from .currency import format_amount_german, parse_decimal_or_zero, quantize_cents

DEFAULT_CURRENCY = "EUR"


@dataclass(frozen=True)
class Money:
    """
    Immutable money value with an ISO currency code (EUR by default).

    Supports both positive (proceeds) and negative (refunds) amounts.
    Arithmetic is exact; mixing currencies is an error.

    Examples:
        >>> share = Money.from_str("4.50")
        >>> share.to_display()
        '4,50'

        >>> refund = Money.from_str("-0.70")
        >>> str(share + refund)
        '3,80 EUR'

        >>> Money.from_str("9.99", currency="USD").currency
        'USD'
    """

    amount: Decimal
    currency: str = DEFAULT_CURRENCY

    @classmethod
    def zero(cls, currency: str = DEFAULT_CURRENCY) -> "Money":
        """Create a zero amount."""
        return cls(amount=Decimal("0"), currency=currency)

    @classmethod
    def from_str(cls, value: str | None, currency: str = DEFAULT_CURRENCY) -> "Money":
        """
        Parse a report field leniently.

        Args:
            value: Raw field like "4.50" or "-0.99"; unparsable input becomes zero
            currency: ISO currency code

        Returns:
            Money object
        """
        return cls(amount=parse_decimal_or_zero(value), currency=currency)

    @classmethod
    def sum(cls, values: "list[Money]", currency: str = DEFAULT_CURRENCY) -> "Money":
        """Sum a list of Money values, zero for an empty list."""
        total = cls.zero(currency)
        for value in values:
            total = total + value
        return total

    def is_negative(self) -> bool:
        """Check whether this is a refund/outflow amount."""
        return self.amount < 0

    def quantized(self) -> "Money":
        """Return the amount rounded to cents (half-up)."""
        return Money(amount=quantize_cents(self.amount), currency=self.currency)

    def to_display(self) -> str:
        """Format amount as '1234,50' without currency code."""
        return format_amount_german(self.amount)

    def abs(self) -> "Money":
        """Return absolute value of Money."""
        return Money(amount=abs(self.amount), currency=self.currency)

    def _check_currency(self, other: "Money") -> None:
        if self.currency != other.currency:
            raise ValueError(f"Cannot combine {self.currency} with {other.currency}")

    def __add__(self, other: "Money") -> "Money":
        """Add two Money objects of the same currency."""
        self._check_currency(other)
        return Money(amount=self.amount + other.amount, currency=self.currency)

    def __sub__(self, other: "Money") -> "Money":
        """Subtract two Money objects of the same currency."""
        self._check_currency(other)
        return Money(amount=self.amount - other.amount, currency=self.currency)

    def __neg__(self) -> "Money":
        return Money(amount=-self.amount, currency=self.currency)

    def __lt__(self, other: "Money") -> bool:
        self._check_currency(other)
        return self.amount < other.amount

    def __le__(self, other: "Money") -> bool:
        self._check_currency(other)
        return self.amount <= other.amount

    def __gt__(self, other: "Money") -> bool:
        self._check_currency(other)
        return self.amount > other.amount

    def __ge__(self, other: "Money") -> bool:
        self._check_currency(other)
        return self.amount >= other.amount

    def __str__(self) -> str:
        """Format as '4,50 EUR'."""
        return f"{self.to_display()} {self.currency}"

    def __repr__(self) -> str:
        return f"Money(amount={self.amount!r}, currency={self.currency!r})"
