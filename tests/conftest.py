"""
Pytest Configuration and Shared Fixtures

Provides common test fixtures and configuration for the entire test suite.
"""

import tempfile
from pathlib import Path

import pytest

from tests.fixtures.apple.report_samples import CSV_REPORT, FD_REPORT


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as temp_path:
        yield Path(temp_path)


@pytest.fixture
def csv_report_text() -> str:
    """Monthly payments summary report (comma-delimited)."""
    return CSV_REPORT


@pytest.fixture
def fd_report_text() -> str:
    """Financial detail report (tab-delimited)."""
    return FD_REPORT


@pytest.fixture
def csv_report_file(temp_dir) -> Path:
    """Monthly payments summary written to disk."""
    path = temp_dir / "financial_report.csv"
    path.write_text(CSV_REPORT, encoding="utf-8")
    return path


@pytest.fixture
def fd_report_file(temp_dir) -> Path:
    """Financial detail report written to disk."""
    path = temp_dir / "85123456_0625_ZZ.txt"
    path.write_text(FD_REPORT, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch, tmp_path):
    """Set up test environment variables."""
    # Ensure tests don't use real data or business settings
    monkeypatch.setenv("AUTAXY_ENV", "test")
    monkeypatch.setenv("AUTAXY_DATA_DIR", str(tmp_path / "autaxy_data"))
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    for name in [
        "BUSINESS_COMPANY_NAME",
        "BUSINESS_STREET",
        "BUSINESS_ZIP_CITY",
        "BUSINESS_VAT_ID",
        "BUSINESS_CONTACT_EMAIL",
        "APPLE_VENDOR_ID",
    ]:
        monkeypatch.delenv(name, raising=False)

    # Drop the cached configuration so each test sees its own environment
    from autaxy.core import config

    monkeypatch.setattr(config, "_config", None)


# Test markers for categorizing tests
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests for complete workflows")
    config.addinivalue_line("markers", "currency: Tests for amount handling and precision")
    config.addinivalue_line("markers", "apple: Tests for Apple report processing")
    config.addinivalue_line("markers", "e2e: End-to-end tests running the CLI in a subprocess")
