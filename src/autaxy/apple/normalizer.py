#!/usr/bin/env python3
"""
Apple Report Field Normalization

Converts vendor-local field shapes into canonical ones: month names, the
"Country (XXX)" composite, and the "(Month, Year)" reporting period header.
"""

import logging
import re
from dataclasses import dataclass

from ..core.dates import FinancialDate

logger = logging.getLogger(__name__)

DEFAULT_CURRENCY = "EUR"
UNKNOWN_MONTH = "01"

MONTH_NUMBERS = {
    "January": "01",
    "February": "02",
    "March": "03",
    "April": "04",
    "May": "05",
    "June": "06",
    "July": "07",
    "August": "08",
    "September": "09",
    "October": "10",
    "November": "11",
    "December": "12",
}

_PERIOD_PATTERN = re.compile(r"\((\w+),\s*(\d{4})\)")
_COUNTRY_CURRENCY_PATTERN = re.compile(r"^(.*?)\s*\(([A-Z]{3})\)$")


@dataclass(frozen=True)
class ReportPeriod:
    """Calendar month a monthly payments report covers."""

    year: int
    month: str  # two digits

    @property
    def report_id(self) -> str:
        return f"APPLE-{self.year}-{self.month}"

    @property
    def start(self) -> FinancialDate:
        return FinancialDate.first_of_month(self.year, int(self.month))

    @property
    def end(self) -> FinancialDate:
        return FinancialDate.last_of_month(self.year, int(self.month))


def month_number(month_name: str) -> str:
    """
    Map an English month name to its two-digit number.

    Unknown names fall back to "01" instead of failing.
    """
    number = MONTH_NUMBERS.get(month_name)
    if number is None:
        logger.warning(f"Unrecognized month name {month_name!r}, defaulting to {UNKNOWN_MONTH}")
        return UNKNOWN_MONTH
    return number


def parse_report_period(header_line: str) -> ReportPeriod | None:
    """
    Extract the reporting month from a header like "... Reports (June, 2025)".

    Returns:
        ReportPeriod, or None when the header carries no "(Month, Year)" token
    """
    match = _PERIOD_PATTERN.search(header_line)
    if not match:
        return None

    month_name, year = match.groups()
    if int(year) < 1:
        # year 0000 has no calendar
        return None
    return ReportPeriod(year=int(year), month=month_number(month_name))


def split_country_currency(country_region: str) -> tuple[str, str]:
    """
    Split a "Country (XXX)" composite into country and currency code.

    Args:
        country_region: Field like "Germany (USD)" or "Germany"

    Returns:
        (country, currency) with currency defaulting to EUR

    Examples:
        split_country_currency("Germany (USD)") -> ("Germany", "USD")
        split_country_currency("Euro-Zone") -> ("Euro-Zone", "EUR")
        split_country_currency("Japan (yen)") -> ("Japan (yen)", "EUR")
    """
    match = _COUNTRY_CURRENCY_PATTERN.match(country_region)
    if match:
        return match.group(1), match.group(2)
    return country_region, DEFAULT_CURRENCY

