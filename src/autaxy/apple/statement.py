#!/usr/bin/env python3
"""
Statement Line Items

Prepares the per-transaction rows a self-billing statement shows: position,
description, quantity, unit, unit price and line total. Layout and translation
of labels belong to the renderer.
"""

from dataclasses import dataclass
from enum import Enum

from ..core.currency import quantize_cents
from ..core.money import Money
from .models import ReportData, Transaction

REFUND_QUANTITY_DISPLAY = "-"


class UnitKind(Enum):
    """Unit column value."""

    PIECE = "piece"
    CORRECTION = "correction"  # refund or adjustment without a positive quantity


class BookingKind(Enum):
    """How the statement total is booked."""

    REVENUE = "revenue"
    REFUND = "refund"


@dataclass(frozen=True)
class LineItem:
    """One statement row."""

    position: int
    description: str
    quantity: str  # "-" for corrections
    unit: UnitKind
    unit_price: Money
    total: Money

    @property
    def is_refund(self) -> bool:
        return self.unit == UnitKind.CORRECTION


def describe_transaction(transaction: Transaction) -> str:
    """
    Build the description column.

    Examples:
        "App Store Sales - Germany"
        "Pro Upgrade - United States (com.example.pro) [9,99 USD]"
    """
    description = f"{transaction.title} - {transaction.country}"
    if transaction.sku:
        description += f" ({transaction.sku})"
    if transaction.original_currency and transaction.original_currency != "EUR":
        description += f" [{transaction.customer_price.to_display()} {transaction.original_currency}]"
    return description


def build_line_item(position: int, transaction: Transaction) -> LineItem:
    """Build the statement row for one transaction."""
    share = transaction.partner_share

    if transaction.quantity > 0:
        unit_price = Money(amount=quantize_cents(share.amount / transaction.quantity), currency=share.currency)
        return LineItem(
            position=position,
            description=describe_transaction(transaction),
            quantity=str(transaction.quantity),
            unit=UnitKind.PIECE,
            unit_price=unit_price,
            total=share,
        )

    return LineItem(
        position=position,
        description=describe_transaction(transaction),
        quantity=REFUND_QUANTITY_DISPLAY,
        unit=UnitKind.CORRECTION,
        unit_price=share,
        total=share,
    )


def build_line_items(report: ReportData) -> list[LineItem]:
    """Build statement rows in report order, positions starting at 1."""
    return [build_line_item(position, transaction) for position, transaction in enumerate(report.transactions, 1)]


def booking_kind(report: ReportData) -> BookingKind:
    """Revenue when the grand total is zero or positive, refund otherwise."""
    if report.summary.total_partner_share.is_negative():
        return BookingKind.REFUND
    return BookingKind.REVENUE
