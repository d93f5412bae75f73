#!/usr/bin/env python3
"""
Amount Parsing and Formatting Utilities

Lenient numeric parsing for uncontrolled vendor exports, plus display formatting.
All amounts are handled as Decimal; floats never enter the calculation path.

Parsing Policy:
- Leading-number semantics: "4.50abc" -> 4.50, "10.7" -> 10 for integers
- Anything unparsable becomes zero, never an exception
- Results are always finite (no NaN or Infinity) and below 10**16 in magnitude,
  so sums and cent rounding stay within the default Decimal precision

Display:
- Two decimal places, half-up rounding, comma as decimal separator ("4,50")
"""

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

CENT = Decimal("0.01")
MAX_AMOUNT_EXPONENT = 15

_LEADING_DECIMAL = re.compile(r"^\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)")
_LEADING_INT = re.compile(r"^\s*([-+]?\d+)")


def parse_decimal_or_zero(value: str | None) -> Decimal:
    """
    Parse the leading decimal number of a string, defaulting to zero.

    This is the single lenient helper used for every amount field read from a
    report, so the leniency policy stays uniform.

    Args:
        value: Raw field text (quotes already stripped), or None

    Returns:
        Decimal value, Decimal("0") for empty or unparsable input

    Examples:
        parse_decimal_or_zero("4.50") -> Decimal("4.50")
        parse_decimal_or_zero("-0.99") -> Decimal("-0.99")
        parse_decimal_or_zero("12.5 EUR") -> Decimal("12.5")
        parse_decimal_or_zero("n/a") -> Decimal("0")
        parse_decimal_or_zero("1e30") -> Decimal("0")
    """
    if not value:
        return Decimal("0")

    match = _LEADING_DECIMAL.match(value)
    if not match:
        return Decimal("0")

    try:
        result = Decimal(match.group(1))
    except InvalidOperation:
        return Decimal("0")

    if not result.is_finite() or (result and result.adjusted() > MAX_AMOUNT_EXPONENT):
        return Decimal("0")
    return result


def parse_int_or_zero(value: str | None) -> int:
    """
    Parse the leading integer of a string, defaulting to zero.

    Examples:
        parse_int_or_zero("10") -> 10
        parse_int_or_zero("-1") -> -1
        parse_int_or_zero("10.7") -> 10
        parse_int_or_zero("") -> 0
    """
    if not value:
        return 0

    match = _LEADING_INT.match(value)
    if not match:
        return 0
    return int(match.group(1))


def quantize_cents(amount: Decimal) -> Decimal:
    """Round to two decimal places using half-up rounding."""
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def format_amount_german(amount: Decimal | int) -> str:
    """
    Format an amount with two decimals and a comma decimal separator.

    Args:
        amount: Decimal or integer amount

    Returns:
        Formatted string without thousands grouping

    Examples:
        format_amount_german(Decimal("4.5")) -> "4,50"
        format_amount_german(Decimal("-12.345")) -> "-12,35"
        format_amount_german(0) -> "0,00"
    """
    return f"{quantize_cents(Decimal(amount)):.2f}".replace(".", ",")
