#!/usr/bin/env python3
"""
Apple Report Domain Models

Canonical, immutable representation of a parsed Apple payments report.
Both report dialects produce the same ReportData shape.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from ..core.dates import FinancialDate
from ..core.money import Money
from .detector import ReportDialect


@dataclass(frozen=True)
class Transaction:
    """One sold or refunded unit line from an Apple report."""

    transaction_date: str  # DD.MM.YYYY, or the source text when not MM/DD/YYYY shaped
    settlement_date: str
    sku: str
    title: str
    country: str
    quantity: int  # zero or negative for refunds/adjustments
    partner_share: Money  # EUR proceeds, signed
    customer_price: Money  # in original_currency when known, else EUR
    currency: str = "EUR"
    original_currency: str | None = None

    @property
    def transaction_day(self) -> FinancialDate | None:
        """Transaction date as a FinancialDate, None when not parseable."""
        return FinancialDate.from_display_string(self.transaction_date)

    @property
    def is_refund(self) -> bool:
        return self.quantity <= 0 or self.partner_share.is_negative()

    def to_dict(self) -> dict[str, Any]:
        """
        Convert to dictionary for JSON serialization.

        Note: Amounts are exact decimal strings so no precision is lost.
        """
        return {
            "transaction_date": self.transaction_date,
            "settlement_date": self.settlement_date,
            "sku": self.sku,
            "title": self.title,
            "country": self.country,
            "quantity": self.quantity,
            "partner_share": str(self.partner_share.amount),
            "customer_price": str(self.customer_price.amount),
            "currency": self.currency,
            "original_currency": self.original_currency,
        }


@dataclass(frozen=True)
class ReportSummary:
    """Report-level totals."""

    total_partner_share: Money
    subtotal: Money  # computed per-row sum, kept even when a printed total wins
    by_country: Mapping[str, Money] = field(default_factory=lambda: MappingProxyType({}), hash=False)
    authoritative_total: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "total_partner_share": str(self.total_partner_share.amount),
            "subtotal": str(self.subtotal.amount),
            "by_country": {country: str(money.amount) for country, money in self.by_country.items()},
            "authoritative_total": self.authoritative_total,
        }


@dataclass(frozen=True)
class ReportData:
    """Canonical parsed report, constructed once per parse call."""

    dialect: ReportDialect
    vendor_name: str
    start_date: str
    end_date: str
    report_id: str
    transactions: tuple[Transaction, ...]
    summary: ReportSummary
    skipped_rows: int = 0

    @property
    def transaction_count(self) -> int:
        return len(self.transactions)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "dialect": self.dialect.value,
            "vendor_name": self.vendor_name,
            "start_date": self.start_date,
            "end_date": self.end_date,
            "report_id": self.report_id,
            "transactions": [transaction.to_dict() for transaction in self.transactions],
            "summary": self.summary.to_dict(),
            "skipped_rows": self.skipped_rows,
        }
