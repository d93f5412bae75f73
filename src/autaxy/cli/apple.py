#!/usr/bin/env python3
"""
Apple CLI - Report Parsing Commands

Command-line interface for parsing Apple payment reports, showing per-country
totals and statement lines, and exporting the normalized ledger.
"""

import sys
from pathlib import Path

import click

from ..apple import (
    ReportData,
    ReportParseError,
    booking_kind,
    build_line_items,
    country_breakdown,
    load_apple_report,
    parse_apple_report,
    transactions_to_dataframe,
)
from ..core.currency import format_amount_german
from ..core.json_utils import format_json, write_json

STDIN_MARKER = "-"


def _load_report(report: str | None) -> ReportData:
    """Parse a report file, stdin ("-"), or the latest configured report."""
    try:
        if report == STDIN_MARKER:
            return parse_apple_report(sys.stdin.read())
        return load_apple_report(Path(report) if report else None)
    except (ReportParseError, FileNotFoundError) as e:
        raise click.ClickException(str(e)) from e


def _echo_header(report_data: ReportData) -> None:
    click.echo(f"Report: {report_data.report_id or '(unknown)'} ({report_data.dialect.value})")
    if report_data.vendor_name:
        click.echo(f"Vendor: {report_data.vendor_name}")
    click.echo(f"Period: {report_data.start_date} - {report_data.end_date}")


@click.group()
def apple() -> None:
    """Apple payment report commands."""
    pass


@apple.command()
@click.argument("report", required=False)
@click.option("--json", "as_json", is_flag=True, help="Print the full normalized report as JSON")
@click.option("--output", "-o", type=click.Path(dir_okay=False, path_type=Path), help="Write JSON to a file")
@click.pass_context
def parse(ctx: click.Context, report: str | None, as_json: bool, output: Path | None) -> None:
    """
    Parse an Apple report and show its totals.

    REPORT is a report file, "-" for stdin, or omitted for the newest report
    in the configured reports directory.

    Examples:
      autaxy apple parse financial_report.csv
      autaxy apple parse 85123456_0625_ZZ.txt --json
      pbpaste | autaxy apple parse - --output june.json
    """
    report_data = _load_report(report)

    if output:
        write_json(output, report_data.to_dict())
        click.echo(f"✅ Wrote {report_data.transaction_count} transactions to {output}")
        return

    if as_json:
        click.echo(format_json(report_data.to_dict()))
        return

    _echo_header(report_data)
    click.echo(f"Transactions: {report_data.transaction_count}")
    if report_data.skipped_rows or ctx.obj.get("verbose", False):
        click.echo(f"Skipped rows: {report_data.skipped_rows}")
    summary = report_data.summary
    if summary.authoritative_total:
        click.echo(f"Subtotal: {summary.subtotal}")
    click.echo(f"Total partner share: {summary.total_partner_share}")


@apple.command()
@click.argument("report", required=False)
def summary(report: str | None) -> None:
    """
    Show partner share per country.

    Example:
      autaxy apple summary financial_report.csv
    """
    report_data = _load_report(report)
    breakdown = country_breakdown(report_data)

    _echo_header(report_data)
    click.echo()
    if breakdown.empty:
        click.echo("No transactions")
        return

    for row in breakdown.itertuples(index=False):
        click.echo(f"  {row.country:<30} {row.units:>8} {format_amount_german(row.partner_share):>12} EUR")
    click.echo(f"  {'Total':<30} {'':>8} {report_data.summary.total_partner_share.to_display():>12} EUR")


@apple.command()
@click.argument("report", required=False)
def statement(report: str | None) -> None:
    """
    Show the self-billing statement lines for a report.

    Example:
      autaxy apple statement financial_report.csv
    """
    report_data = _load_report(report)

    _echo_header(report_data)
    click.echo(f"Booking: {booking_kind(report_data).value}")
    click.echo()
    for item in build_line_items(report_data):
        click.echo(
            f"{item.position:>4}  {item.description:<60} {item.quantity:>6} {item.unit.value:<10} "
            f"{item.unit_price.to_display():>10} {item.total.to_display():>10}"
        )
    click.echo()
    click.echo(f"Subtotal: {report_data.summary.subtotal}")
    click.echo(f"Grand total: {report_data.summary.total_partner_share}")


@apple.command()
@click.argument("report", required=False)
@click.option(
    "--output",
    "-o",
    required=True,
    type=click.Path(dir_okay=False, path_type=Path),
    help="CSV file for the normalized ledger",
)
def export(report: str | None, output: Path) -> None:
    """
    Export the normalized transaction ledger as CSV.

    Example:
      autaxy apple export financial_report.csv --output ledger.csv
    """
    report_data = _load_report(report)
    frame = transactions_to_dataframe(report_data)

    output.parent.mkdir(parents=True, exist_ok=True)
    frame.to_csv(output, index=False)
    click.echo(f"✅ Exported {len(frame)} transactions to {output}")
