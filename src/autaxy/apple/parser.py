#!/usr/bin/env python3
"""
Apple Financial Report Parser Module

Maps the two Apple report dialects onto one canonical ReportData value:

- CSV: monthly "iTunes Connect - Payments and Financial Reports" summary,
  comma-delimited, one row per country/currency
- FD: detailed financial ledger, tab-delimited, one row per sale or refund

Both mappers read data rows by fixed column position. Row-level noise is
absorbed (short rows skipped, bad numbers read as zero); only input that is not
a report at all raises.
"""

import logging
import re
from collections.abc import Callable

from ..core.currency import parse_decimal_or_zero, parse_int_or_zero
from ..core.dates import format_apple_date
from ..core.money import Money
from .aggregator import ReportAggregator
from .detector import ReportDialect, detect_dialect
from .errors import NoTransactionDataError
from .models import ReportData, Transaction
from .normalizer import DEFAULT_CURRENCY, parse_report_period, split_country_currency
from .tokenizer import split_csv_line, split_report_lines, split_tab_line

logger = logging.getLogger(__name__)

# CSV dialect layout
#
# Line 0 is the title with the "(Month, Year)" period, data rows start at line 3
# and run until a blank row or a row starting with ",,,". Line 7 may carry the
# printed grand total as a quoted "<amount> EUR" cell.
CSV_DATA_START_LINE = 3
CSV_END_SENTINEL = ",,,"
CSV_TOTAL_LINE = 7
CSV_MIN_COLUMNS = 8
CSV_COL_COUNTRY = 0  # "Germany" or "Germany (USD)"
CSV_COL_UNITS = 1
CSV_COL_EARNED = 2  # gross amount in the original currency
CSV_COL_PROCEEDS = 9  # net EUR proceeds
CSV_COL_CURRENCY = 10  # bank account currency
CSV_SKU = "App Store"
CSV_TITLE = "App Store Sales"

_CSV_TOTAL_PATTERN = re.compile(r'"(-?[\d.]+)\s*EUR"')

# FD dialect layout
FD_VENDOR_LABEL = "Vendor Name"
FD_START_DATE_LABEL = "Start Date"
FD_END_DATE_LABEL = "End Date"
FD_HEADER_MARKERS = ("Transaction Date", "Partner Share")
FD_SUMMARY_MARKER = "Country Of Sale"
FD_MIN_COLUMNS = 11
FD_COL_TRANSACTION_DATE = 0
FD_COL_SETTLEMENT_DATE = 1
FD_COL_SKU = 3
FD_COL_TITLE = 4
FD_COL_COUNTRY = 8
FD_COL_QUANTITY = 9
FD_COL_PARTNER_SHARE = 10
FD_COL_CURRENCY_FALLBACK = 11  # partner share currency
FD_COL_CURRENCY = 12  # extended partner share currency
FD_COL_CUSTOMER_PRICE = 13


def _field(values: list[str], index: int) -> str:
    """Column value by position, empty when the row is too short."""
    if index < len(values):
        return values[index].strip()
    return ""


def parse_csv_report(text: str) -> ReportData:
    """
    Parse the comma-delimited monthly payments report.

    Args:
        text: Full report text

    Returns:
        ReportData with one transaction per country row
    """
    lines = split_report_lines(text)

    report_id = start_date = end_date = ""
    period = parse_report_period(lines[0])
    if period is not None:
        report_id = period.report_id
        start_date = period.start.to_display_string()
        end_date = period.end.to_display_string()

    aggregator = ReportAggregator()
    transactions: list[Transaction] = []
    skipped = 0
    seen_row = False

    for line_number in range(CSV_DATA_START_LINE, len(lines)):
        line = lines[line_number].strip()

        if not line and not seen_row:
            # padding between the column header and the first data row
            continue
        if not line or line.startswith(CSV_END_SENTINEL):
            break
        seen_row = True

        values = split_csv_line(line)
        if len(values) < CSV_MIN_COLUMNS:
            logger.debug(f"Skipping CSV line {line_number}: {len(values)} columns")
            skipped += 1
            continue

        country, original_currency = split_country_currency(_field(values, CSV_COL_COUNTRY))
        transaction = Transaction(
            transaction_date=end_date,
            settlement_date=end_date,
            sku=CSV_SKU,
            title=CSV_TITLE,
            country=country,
            quantity=parse_int_or_zero(_field(values, CSV_COL_UNITS)),
            partner_share=Money.from_str(_field(values, CSV_COL_PROCEEDS)),
            customer_price=Money.from_str(_field(values, CSV_COL_EARNED), currency=original_currency),
            currency=_field(values, CSV_COL_CURRENCY) or DEFAULT_CURRENCY,
            original_currency=original_currency,
        )
        transactions.append(transaction)
        aggregator.add(transaction)

    if len(lines) > CSV_TOTAL_LINE and "EUR" in lines[CSV_TOTAL_LINE]:
        match = _CSV_TOTAL_PATTERN.search(lines[CSV_TOTAL_LINE])
        if match:
            aggregator.override_total(Money(amount=parse_decimal_or_zero(match.group(1))))

    return ReportData(
        dialect=ReportDialect.CSV,
        vendor_name="",
        start_date=start_date,
        end_date=end_date,
        report_id=report_id,
        transactions=tuple(transactions),
        summary=aggregator.summary(),
        skipped_rows=skipped,
    )


def _header_value(line: str) -> str:
    values = split_tab_line(line)
    return values[1].strip() if len(values) > 1 else ""


def parse_fd_report(text: str) -> ReportData:
    """
    Parse the tab-delimited detailed financial report.

    Args:
        text: Full report text

    Returns:
        ReportData with one transaction per ledger row

    Raises:
        NoTransactionDataError: No "Transaction Date" / "Partner Share" header row
    """
    lines = split_report_lines(text)

    vendor_name = start_date = end_date = ""
    for line in lines:
        if line.startswith(FD_VENDOR_LABEL):
            vendor_name = _header_value(line)
        elif line.startswith(FD_START_DATE_LABEL):
            start_date = format_apple_date(_header_value(line))
        elif line.startswith(FD_END_DATE_LABEL):
            end_date = format_apple_date(_header_value(line))

    header_index = next(
        (index for index, line in enumerate(lines) if all(marker in line for marker in FD_HEADER_MARKERS)),
        None,
    )
    if header_index is None:
        raise NoTransactionDataError()

    aggregator = ReportAggregator()
    transactions: list[Transaction] = []
    skipped = 0

    for line_number in range(header_index + 1, len(lines)):
        line = lines[line_number]
        if not line.strip():
            continue
        if line.strip().startswith(FD_SUMMARY_MARKER):
            break

        values = split_tab_line(line.strip(" \r\n"))
        if len(values) < FD_MIN_COLUMNS:
            logger.debug(f"Skipping FD line {line_number}: {len(values)} columns")
            skipped += 1
            continue

        transaction = Transaction(
            transaction_date=format_apple_date(_field(values, FD_COL_TRANSACTION_DATE)),
            settlement_date=format_apple_date(_field(values, FD_COL_SETTLEMENT_DATE)),
            sku=_field(values, FD_COL_SKU),
            title=_field(values, FD_COL_TITLE),
            country=_field(values, FD_COL_COUNTRY),
            quantity=parse_int_or_zero(_field(values, FD_COL_QUANTITY)),
            partner_share=Money.from_str(_field(values, FD_COL_PARTNER_SHARE)),
            customer_price=Money.from_str(_field(values, FD_COL_CUSTOMER_PRICE)),
            currency=(
                _field(values, FD_COL_CURRENCY)
                or _field(values, FD_COL_CURRENCY_FALLBACK)
                or DEFAULT_CURRENCY
            ),
        )
        transactions.append(transaction)
        aggregator.add(transaction)

    return ReportData(
        dialect=ReportDialect.FD,
        vendor_name=vendor_name,
        start_date=start_date,
        end_date=end_date,
        report_id="APPLE" + re.sub(r"\D", "", end_date),
        transactions=tuple(transactions),
        summary=aggregator.summary(),
        skipped_rows=skipped,
    )


DIALECT_PARSERS: dict[ReportDialect, Callable[[str], ReportData]] = {
    ReportDialect.CSV: parse_csv_report,
    ReportDialect.FD: parse_fd_report,
}


def parse_apple_report(text: str) -> ReportData:
    """
    Parse an Apple payments report of either dialect.

    Args:
        text: Raw report text from an upload, file or paste

    Returns:
        Immutable ReportData

    Raises:
        InvalidFormatError: Fewer than 4 lines
        NoTransactionDataError: Tab-delimited report without a transaction header
    """
    dialect = detect_dialect(split_report_lines(text))
    report = DIALECT_PARSERS[dialect](text)

    logger.info(
        f"Parsed {report.dialect.value} report {report.report_id or '(no id)'}: "
        f"{report.transaction_count} transactions, {report.skipped_rows} skipped, "
        f"total {report.summary.total_partner_share}"
    )
    return report
