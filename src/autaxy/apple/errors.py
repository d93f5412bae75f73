"""Errors raised when report text cannot be treated as an Apple report at all."""


class ReportParseError(ValueError):
    """Base class for hard report parsing failures."""


class InvalidFormatError(ReportParseError):
    """Input has too few lines to be a report."""

    def __init__(self, line_count: int) -> None:
        super().__init__(f"Invalid report format: expected at least 4 lines, got {line_count}")
        self.line_count = line_count


class NoTransactionDataError(ReportParseError):
    """Tab-delimited report without a transaction header row."""

    def __init__(self) -> None:
        super().__init__("No transaction data found: missing 'Transaction Date' / 'Partner Share' header")
