#!/usr/bin/env python3
"""
FinancialDate Primitive Type

Immutable date wrapper with consistent formatting for statement documents.
Reports are displayed with the DD.MM.YYYY convention; Apple's ledger exports use
US-style MM/DD/YYYY.
"""

import calendar
from dataclasses import dataclass
from datetime import date, datetime

DISPLAY_FORMAT = "%d.%m.%Y"
US_FORMAT = "%m/%d/%Y"


def format_apple_date(date_str: str) -> str:
    """
    Convert a US-style date to the display convention.

    Only the three-part slash shape is rewritten; anything else is returned
    unchanged, so applying this to an already normalized date is a no-op.

    Args:
        date_str: Date like "6/5/2025" or "06/05/2025"

    Returns:
        Date like "05.06.2025", or the input when it is not MM/DD/YYYY shaped

    Examples:
        format_apple_date("6/5/2025") -> "05.06.2025"
        format_apple_date("05.06.2025") -> "05.06.2025"
        format_apple_date("") -> ""
    """
    if not date_str:
        return ""

    parts = date_str.split("/")
    if len(parts) == 3:
        month, day, year = parts
        return f"{day.zfill(2)}.{month.zfill(2)}.{year}"
    return date_str


@dataclass(frozen=True)
class FinancialDate:
    """Immutable financial date wrapper with consistent formatting."""

    date: date

    @classmethod
    def from_string(cls, date_str: str, date_format: str = "%Y-%m-%d") -> "FinancialDate":
        """
        Parse from string in specified format.

        Args:
            date_str: Date string to parse
            date_format: Date format (default: ISO format "%Y-%m-%d")

        Returns:
            FinancialDate object
        """
        return cls(date=datetime.strptime(date_str, date_format).date())

    @classmethod
    def from_display_string(cls, date_str: str) -> "FinancialDate | None":
        """Parse a DD.MM.YYYY string, returning None for any other shape."""
        try:
            return cls.from_string(date_str, DISPLAY_FORMAT)
        except ValueError:
            return None

    @classmethod
    def first_of_month(cls, year: int, month: int) -> "FinancialDate":
        """First calendar day of a month."""
        return cls(date=date(year, month, 1))

    @classmethod
    def last_of_month(cls, year: int, month: int) -> "FinancialDate":
        """Last calendar day of a month, leap years included."""
        _, last_day = calendar.monthrange(year, month)
        return cls(date=date(year, month, last_day))

    def to_iso_string(self) -> str:
        """Format as YYYY-MM-DD."""
        return self.date.isoformat()

    def to_display_string(self) -> str:
        """Format as DD.MM.YYYY."""
        return self.date.strftime(DISPLAY_FORMAT)

    def __str__(self) -> str:
        return self.to_display_string()

    def __repr__(self) -> str:
        return f"FinancialDate(date={self.date!r})"
