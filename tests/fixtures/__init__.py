"""
Test Fixtures and Utilities

Shared report samples and helpers for the test suite.

This module provides:
- Synthetic Apple report texts with expected extraction values
- Environment helpers for subprocess CLI tests
"""
