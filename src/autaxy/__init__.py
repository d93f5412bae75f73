"""
autaxy - Apple Financial Report Normalization

Converts Apple App Store payment and settlement report exports into a normalized
EUR transaction ledger for self-billing statements and tax documents.

Key Features:
- Detection of the monthly CSV summary and the tab-delimited detail report
- Exact Decimal amounts from source to total
- Per-country breakdowns and statement line items
- Command-line parsing, summaries and ledger export

Domain Packages:
- core: Money, dates, lenient amount parsing, configuration
- apple: Apple report parsing and normalization
- cli: Command-line interface

Example Usage:
    from autaxy.apple import parse_apple_report
    from autaxy.core import format_amount_german

    report = parse_apple_report(text)
    print(format_amount_german(report.summary.total_partner_share.amount))
"""

__version__ = "0.1.0"
__author__ = "autaxy contributors"

from .apple import (
    InvalidFormatError,
    NoTransactionDataError,
    ReportData,
    Transaction,
    parse_apple_report,
)
from .core.config import Environment, get_config
from .core.money import Money

__all__ = [
    # Configuration
    "Environment",
    "InvalidFormatError",
    "Money",
    "NoTransactionDataError",
    # Report parsing
    "ReportData",
    "Transaction",
    "get_config",
    "parse_apple_report",
]
