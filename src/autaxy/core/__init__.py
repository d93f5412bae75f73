"""
Core Utilities Package

Shared primitives used by the report parsers and the CLI.

This package provides:
- Decimal-based money type with exact arithmetic
- Lenient numeric parsing for vendor exports
- Date helpers for the DD.MM.YYYY display convention
- Configuration management for environment-specific settings
"""

from .config import (
    AppleConfig,
    BusinessSettings,
    Config,
    Environment,
    get_config,
    reload_config,
)
from .currency import (
    format_amount_german,
    parse_decimal_or_zero,
    parse_int_or_zero,
    quantize_cents,
)
from .dates import FinancialDate, format_apple_date
from .money import Money

__all__ = [
    "AppleConfig",
    "BusinessSettings",
    # Configuration
    "Config",
    "Environment",
    "FinancialDate",
    "Money",
    # Amount utilities
    "format_amount_german",
    "format_apple_date",
    "get_config",
    "parse_decimal_or_zero",
    "parse_int_or_zero",
    "quantize_cents",
    "reload_config",
]
