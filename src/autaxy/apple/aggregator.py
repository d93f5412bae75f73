#!/usr/bin/env python3
"""
Report Total Aggregation

Folds transaction proceeds into report-level totals in source order. Sums are
exact Decimal additions; rounding is left to display time.
"""

from types import MappingProxyType

from ..core.money import Money
from .models import ReportSummary, Transaction


class ReportAggregator:
    """
    Running totals for one parse call.

    The computed sum is always kept as the subtotal. A total printed in the
    report itself, when supplied through override_total, becomes the grand total.
    """

    def __init__(self) -> None:
        self._subtotal = Money.zero()
        self._by_country: dict[str, Money] = {}
        self._override: Money | None = None

    def add(self, transaction: Transaction) -> None:
        """Accumulate one transaction's partner share."""
        share = transaction.partner_share
        self._subtotal = self._subtotal + share
        self._by_country[transaction.country] = self._by_country.get(transaction.country, Money.zero()) + share

    def override_total(self, total: Money) -> None:
        """Record an authoritative total taken from the report text."""
        self._override = total

    @property
    def subtotal(self) -> Money:
        return self._subtotal

    def summary(self) -> ReportSummary:
        """Build the immutable summary from the current state."""
        return ReportSummary(
            total_partner_share=self._override if self._override is not None else self._subtotal,
            subtotal=self._subtotal,
            by_country=MappingProxyType(dict(self._by_country)),
            authoritative_total=self._override is not None,
        )
