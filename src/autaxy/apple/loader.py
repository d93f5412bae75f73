#!/usr/bin/env python3
"""
Apple Report Loader Module

Reads Apple report exports from disk and converts parsed reports to DataFrames
for display and export.
"""

import logging
from pathlib import Path

import pandas as pd

from ..core.config import get_config
from .models import ReportData
from .parser import parse_apple_report

logger = logging.getLogger(__name__)

REPORT_SUFFIXES = (".csv", ".txt", ".tsv")

LEDGER_COLUMNS = [
    "transaction_date",
    "settlement_date",
    "sku",
    "title",
    "country",
    "quantity",
    "partner_share",
    "customer_price",
    "currency",
    "original_currency",
]


def find_latest_report(base_path: str | Path | None = None) -> Path | None:
    """
    Find the most recently modified report file.

    Args:
        base_path: Directory holding report exports (uses config if None)

    Returns:
        Path to the newest *.csv, *.txt or *.tsv file, or None if none found
    """
    if base_path is None:
        base_path = get_config().apple.reports_dir

    report_dir = Path(base_path)
    if not report_dir.is_dir():
        return None

    reports = [item for item in report_dir.iterdir() if item.is_file() and item.suffix.lower() in REPORT_SUFFIXES]
    if not reports:
        return None

    return max(reports, key=lambda item: item.stat().st_mtime)


def read_report_text(path: str | Path, encoding: str | None = None) -> str:
    """
    Read report text, tolerating a UTF-8 byte order mark.

    Args:
        path: Report file
        encoding: Text encoding (uses config if None)

    Returns:
        File content as text
    """
    if encoding is None:
        encoding = get_config().apple.encoding

    with open(path, encoding=encoding) as f:
        return f.read()


def load_apple_report(path: str | Path | None = None) -> ReportData:
    """
    Load and parse an Apple report file.

    Args:
        path: Report file, otherwise the latest report in the configured directory

    Returns:
        Parsed ReportData
    """
    if path is None:
        latest = find_latest_report()
        if latest is None:
            raise FileNotFoundError(f"No Apple reports found in {get_config().apple.reports_dir}")
        path = latest

    report = parse_apple_report(read_report_text(path))
    logger.info(f"Loaded {report.transaction_count} transactions from {Path(path).name}")
    return report


def transactions_to_dataframe(report: ReportData) -> pd.DataFrame:
    """
    Convert report transactions to a DataFrame, one row per transaction.

    Amount columns hold Decimal objects so no precision is lost.
    """
    records = [
        {
            "transaction_date": transaction.transaction_date,
            "settlement_date": transaction.settlement_date,
            "sku": transaction.sku,
            "title": transaction.title,
            "country": transaction.country,
            "quantity": transaction.quantity,
            "partner_share": transaction.partner_share.amount,
            "customer_price": transaction.customer_price.amount,
            "currency": transaction.currency,
            "original_currency": transaction.original_currency,
        }
        for transaction in report.transactions
    ]
    return pd.DataFrame(records, columns=LEDGER_COLUMNS)


def country_breakdown(report: ReportData) -> pd.DataFrame:
    """
    Per-country partner share and unit totals, largest share first.

    Returns:
        DataFrame with columns country, transactions, units, partner_share
    """
    frame = transactions_to_dataframe(report)
    if frame.empty:
        return pd.DataFrame(columns=["country", "transactions", "units", "partner_share"])

    breakdown = frame.groupby("country", sort=False).agg(
        transactions=("quantity", "size"),
        units=("quantity", "sum"),
    )
    breakdown["partner_share"] = [report.summary.by_country[country].amount for country in breakdown.index]
    breakdown = breakdown.reset_index().sort_values("partner_share", ascending=False, kind="stable")
    return breakdown.reset_index(drop=True)
