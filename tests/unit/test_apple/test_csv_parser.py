#!/usr/bin/env python3
"""Unit tests for the comma-delimited payments report mapper."""

from decimal import Decimal

import pytest

from autaxy.apple.detector import ReportDialect
from autaxy.apple.parser import parse_apple_report, parse_csv_report
from autaxy.core.money import Money
from tests.fixtures.apple.report_samples import (
    CSV_REPORT,
    CSV_REPORT_EXPECTED,
    CSV_SINGLE_ROW_REPORT,
)

TITLE = "iTunes Connect - Payments and Financial Reports (June, 2025)"


def csv_report(*rows: str, header: str = TITLE) -> str:
    """Build a payments report with data rows starting at line 3."""
    return "\n".join([header, "", '"Country or Region (Currency)","Units"', *rows])


@pytest.mark.apple
class TestCsvHeader:
    """Test period metadata derived from the title line."""

    def test_period_metadata(self):
        """Test report id and period from "(June, 2025)"."""
        report = parse_csv_report(CSV_REPORT)
        assert report.dialect == ReportDialect.CSV
        assert report.report_id == CSV_REPORT_EXPECTED["report_id"]
        assert report.start_date == CSV_REPORT_EXPECTED["start_date"]
        assert report.end_date == CSV_REPORT_EXPECTED["end_date"]
        assert report.vendor_name == ""

    @pytest.mark.parametrize(
        "period,expected_end",
        [("(February, 2024)", "29.02.2024"), ("(February, 2023)", "28.02.2023")],
    )
    def test_leap_year_end_date(self, period, expected_end):
        """Test February length follows the year."""
        header = f"iTunes Connect - Payments and Financial Reports {period}"
        report = parse_csv_report(csv_report("Germany,1,1.00,,,,,,,0.70,EUR", header=header))
        assert report.end_date == expected_end
        assert report.transactions[0].transaction_date == expected_end

    def test_missing_period_leaves_metadata_empty(self):
        """Test a title without "(Month, Year)" still parses rows."""
        report = parse_csv_report(
            csv_report("Germany,1,1.00,,,,,,,0.70,EUR", header="iTunes Connect - Payments and Financial Reports")
        )
        assert report.report_id == ""
        assert report.end_date == ""
        assert report.transaction_count == 1


@pytest.mark.apple
class TestCsvRows:
    """Test data row mapping."""

    def test_sample_rows(self):
        """Test every field of the sample report."""
        report = parse_csv_report(CSV_REPORT)

        assert [t.country for t in report.transactions] == CSV_REPORT_EXPECTED["countries"]
        assert [t.original_currency for t in report.transactions] == CSV_REPORT_EXPECTED["original_currencies"]
        assert [t.quantity for t in report.transactions] == CSV_REPORT_EXPECTED["quantities"]
        assert [t.partner_share.amount for t in report.transactions] == CSV_REPORT_EXPECTED["partner_shares"]

        first = report.transactions[0]
        assert first.sku == "App Store"
        assert first.title == "App Store Sales"
        assert first.currency == "EUR"
        assert first.settlement_date == "30.06.2025"
        assert first.customer_price == Money(amount=Decimal("83.88"), currency="USD")

    def test_single_row_scenario(self):
        """Test one unquoted row after padding lines."""
        report = parse_csv_report(CSV_SINGLE_ROW_REPORT)

        assert report.transaction_count == 1
        transaction = report.transactions[0]
        assert transaction.country == "Germany"
        assert transaction.original_currency == "USD"
        assert transaction.quantity == 10
        assert transaction.partner_share.amount == Decimal("4.50")
        assert transaction.customer_price.amount == Decimal("5.00")

    def test_country_without_currency_defaults_to_eur(self):
        """Test plain country names imply EUR."""
        report = parse_csv_report(csv_report("Germany,2,3.00,,,,,,,2.10,EUR"))
        assert report.transactions[0].country == "Germany"
        assert report.transactions[0].original_currency == "EUR"

    def test_short_rows_skipped(self):
        """Test rows under 8 columns are skipped, not fatal."""
        report = parse_csv_report(
            csv_report(
                "Germany,2,3.00,,,,,,,2.10,EUR",
                "garbage,1,2",
                "France,1,1.00,,,,,",
            )
        )
        assert [t.country for t in report.transactions] == ["Germany", "France"]
        assert report.skipped_rows == 1

    def test_missing_proceeds_and_currency_columns(self):
        """Test 8-column rows read proceeds as zero and currency as EUR."""
        report = parse_csv_report(csv_report("France,1,1.00,,,,,"))
        transaction = report.transactions[0]
        assert transaction.partner_share == Money.zero()
        assert transaction.currency == "EUR"

    def test_unparsable_numbers_are_zero(self):
        """Test bad numeric cells become zero."""
        report = parse_csv_report(csv_report("Germany,many,lots,,,,,,,n/a,EUR"))
        transaction = report.transactions[0]
        assert transaction.quantity == 0
        assert transaction.customer_price.amount == Decimal("0")
        assert transaction.partner_share.amount == Decimal("0")
        assert transaction.customer_price.currency == "EUR"
        assert report.summary.total_partner_share.amount.is_finite()

    @pytest.mark.parametrize("proceeds", ["1e30", "1e1000000", "12345678901234567890123456789.5"])
    def test_oversized_proceeds_do_not_abort_parse(self, proceeds):
        """Test an absurd proceeds cell reads as zero and the other rows still count."""
        report = parse_apple_report(
            csv_report(f"Germany,1,1.00,,,,,,,{proceeds},EUR", "France,2,2.00,,,,,,,1.40,EUR")
        )
        assert report.transaction_count == 2
        assert report.transactions[0].partner_share == Money.zero()
        assert report.summary.total_partner_share.amount == Decimal("1.40")
        assert str(report.summary.total_partner_share) == "1,40 EUR"

    def test_currency_column_used(self):
        """Test the bank account currency column is carried through."""
        report = parse_csv_report(csv_report("Germany,1,1.00,,,,,,,0.70,CHF"))
        assert report.transactions[0].currency == "CHF"

    def test_negative_units_are_valid(self):
        """Test refund rows keep their negative values."""
        report = parse_csv_report(csv_report("Germany,-1,-1.00,,,,,,,-0.70,EUR"))
        assert report.transactions[0].quantity == -1
        assert report.transactions[0].is_refund
        assert report.summary.total_partner_share.amount == Decimal("-0.70")


@pytest.mark.apple
class TestCsvTermination:
    """Test where the data section ends."""

    def test_sentinel_row_ends_data(self):
        """Test a row starting with ",,," stops row mapping."""
        report = parse_csv_report(
            csv_report("Germany,1,1.00,,,,,,,0.70,EUR", ",,,,,,,,,,", "France,1,1.00,,,,,,,0.70,EUR")
        )
        assert [t.country for t in report.transactions] == ["Germany"]

    def test_blank_row_after_data_ends_data(self):
        """Test a blank row after data stops row mapping."""
        report = parse_csv_report(
            csv_report("Germany,1,1.00,,,,,,,0.70,EUR", "", "France,1,1.00,,,,,,,0.70,EUR")
        )
        assert report.transaction_count == 1

    def test_sentinel_first_means_no_data(self):
        """Test a report whose data section is empty."""
        report = parse_csv_report(csv_report(",,,,,,,,,,", "France,1,1.00,,,,,,,0.70,EUR"))
        assert report.transaction_count == 0
        assert report.summary.total_partner_share == Money.zero()


@pytest.mark.apple
class TestCsvTotals:
    """Test subtotal and printed total handling."""

    def test_printed_total_overrides_sum(self):
        """Test line 7 "<amount> EUR" becomes the grand total."""
        report = parse_csv_report(CSV_REPORT)
        assert report.summary.total_partner_share.amount == CSV_REPORT_EXPECTED["total"]
        assert report.summary.subtotal.amount == CSV_REPORT_EXPECTED["subtotal"]
        assert report.summary.authoritative_total

    def test_sum_without_printed_total(self):
        """Test the grand total is the row sum when nothing is printed."""
        report = parse_csv_report(
            csv_report("Germany,1,1.00,,,,,,,0.70,EUR", "France,1,1.00,,,,,,,0.75,EUR")
        )
        assert report.summary.total_partner_share.amount == Decimal("1.45")
        assert not report.summary.authoritative_total

    def test_total_pattern_requires_quotes(self):
        """Test an unquoted "<amount> EUR" on line 7 is ignored."""
        lines = CSV_REPORT.split("\n")
        lines[7] = ",,,,,,,,Total Proceeds,100.20 EUR,"
        report = parse_csv_report("\n".join(lines))
        assert report.summary.total_partner_share.amount == CSV_REPORT_EXPECTED["subtotal"]

    def test_by_country(self):
        """Test per-country totals are populated."""
        report = parse_csv_report(CSV_REPORT)
        assert report.summary.by_country["Americas"].amount == Decimal("73.89")
        assert len(report.summary.by_country) == 3
