#!/usr/bin/env python3
"""
Report Line Tokenizer

Splits raw report text into lines and lines into fields for the two Apple
report layouts: comma-delimited (quote-aware) and tab-delimited.
"""

QUOTE = '"'
COMMA = ","
TAB = "\t"


def split_report_lines(text: str) -> list[str]:
    """
    Split report text into lines after trimming surrounding whitespace.

    Windows line endings leave a trailing carriage return on each line; callers
    strip lines before inspecting them.
    """
    return text.strip().split("\n")


def split_csv_line(line: str) -> list[str]:
    """
    Split a comma-delimited line, honoring double-quoted fields.

    A quote toggles quoted mode and is itself dropped from the value; commas
    inside quotes are literal. Doubled quotes ("") are not treated as an escaped
    quote, they simply toggle twice.

    Examples:
        split_csv_line('a,"1,234.00",b') -> ["a", "1,234.00", "b"]
        split_csv_line("a,,b") -> ["a", "", "b"]
    """
    values: list[str] = []
    current: list[str] = []
    in_quotes = False

    for char in line:
        if char == QUOTE:
            in_quotes = not in_quotes
        elif char == COMMA and not in_quotes:
            values.append("".join(current))
            current = []
        else:
            current.append(char)

    values.append("".join(current))
    return values


def split_tab_line(line: str) -> list[str]:
    """Split a tab-delimited line, keeping empty fields."""
    return line.rstrip("\r\n").split(TAB)
