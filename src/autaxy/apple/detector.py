#!/usr/bin/env python3
"""
Apple Report Format Detection

Decides which of the two Apple report dialects a text blob contains.
"""

import logging
from enum import Enum

from .errors import InvalidFormatError

logger = logging.getLogger(__name__)

CSV_REPORT_MARKER = "iTunes Connect - Payments and Financial Reports"
MIN_REPORT_LINES = 4


class ReportDialect(Enum):
    """Supported Apple report layouts."""

    CSV = "csv"  # Monthly "Payments and Financial Reports" summary, comma-delimited
    FD = "fd"  # Detailed financial ledger, tab-delimited


def detect_dialect(lines: list[str]) -> ReportDialect:
    """
    Detect the report dialect from its leading line.

    Args:
        lines: Report lines as produced by split_report_lines

    Returns:
        ReportDialect.CSV when the first line carries the payments report marker,
        ReportDialect.FD otherwise

    Raises:
        InvalidFormatError: Fewer than 4 lines
    """
    if len(lines) < MIN_REPORT_LINES:
        raise InvalidFormatError(len(lines))

    if CSV_REPORT_MARKER in lines[0]:
        dialect = ReportDialect.CSV
    else:
        dialect = ReportDialect.FD

    logger.info(f"Detected report dialect: {dialect.value}")
    return dialect
