#!/usr/bin/env python3
"""
JSON Utilities Module

Provides centralized JSON writing with consistent formatting.
Report exports go through these helpers so Decimal amounts and dates are
serialized the same way everywhere.
"""

import json
from datetime import date
from decimal import Decimal
from pathlib import Path
from typing import Any


def json_default(value: Any) -> Any:
    """
    Serialize non-JSON types found in report data.

    Decimals are written as strings to keep their exact digits.
    """
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, date):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def format_json(data: Any, ensure_ascii: bool = False, sort_keys: bool = False) -> str:
    """
    Format data as a pretty-printed JSON string.

    Args:
        data: Data to format
        ensure_ascii: If True, escape non-ASCII characters (default: False)
        sort_keys: If True, sort dictionary keys (default: False)

    Returns:
        Pretty-printed JSON string
    """
    return json.dumps(data, indent=2, ensure_ascii=ensure_ascii, sort_keys=sort_keys, default=json_default)


def write_json(filepath: str | Path, data: Any, ensure_ascii: bool = False, sort_keys: bool = False) -> None:
    """
    Write data to a JSON file with standard pretty-printing.

    Args:
        filepath: Path to the JSON file
        data: Data to write to the file
        ensure_ascii: If True, escape non-ASCII characters (default: False)
        sort_keys: If True, sort dictionary keys (default: False)
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=ensure_ascii, sort_keys=sort_keys, default=json_default)


def read_json(filepath: str | Path) -> Any:
    """Read data from a JSON file."""
    with open(filepath, encoding="utf-8") as f:
        return json.load(f)
