"""
Apple Report Processing Package

Turns Apple App Store payment and settlement report exports into a normalized,
immutable transaction ledger for tax documents.

Key Components:
- tokenizer: line and field splitting for comma- and tab-delimited layouts
- detector: chooses between the two report dialects
- parser: per-dialect field mapping into ReportData
- normalizer: month names, "Country (XXX)" composites, reporting periods
- aggregator: EUR totals, per-country totals, printed total override
- statement: line items for self-billing statements
- loader: report files on disk and DataFrame views

Supported Dialects:
- CSV: "iTunes Connect - Payments and Financial Reports (Month, Year)" monthly
  summary with one row per country and an optional printed EUR total
- FD: tab-delimited financial detail report with vendor/period header lines,
  one row per transaction and a trailing "Country Of Sale" summary section

Only two conditions fail hard: InvalidFormatError for input under four lines,
NoTransactionDataError for a tab-delimited report without a transaction header.
"""

from .aggregator import ReportAggregator
from .detector import ReportDialect, detect_dialect
from .errors import InvalidFormatError, NoTransactionDataError, ReportParseError
from .loader import (
    country_breakdown,
    find_latest_report,
    load_apple_report,
    read_report_text,
    transactions_to_dataframe,
)
from .models import ReportData, ReportSummary, Transaction
from .parser import parse_apple_report, parse_csv_report, parse_fd_report
from .statement import BookingKind, LineItem, UnitKind, booking_kind, build_line_items

__all__ = [
    "BookingKind",
    # Errors
    "InvalidFormatError",
    "LineItem",
    "NoTransactionDataError",
    "ReportAggregator",
    # Models
    "ReportData",
    "ReportDialect",
    "ReportParseError",
    "ReportSummary",
    "Transaction",
    "UnitKind",
    "booking_kind",
    "build_line_items",
    "country_breakdown",
    "detect_dialect",
    # Loading
    "find_latest_report",
    "load_apple_report",
    # Parsing
    "parse_apple_report",
    "parse_csv_report",
    "parse_fd_report",
    "read_report_text",
    "transactions_to_dataframe",
]
