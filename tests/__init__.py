"""
Test Suite for autaxy

Test Structure:
- fixtures/: Shared report samples and helpers
- unit/: Unit tests mirroring src/ package structure
- integration/: CLI command tests via click's CliRunner
- e2e/: CLI runs in a subprocess

Test Categories:
- Core utilities (amount parsing, money, dates, config)
- Apple report detection, parsing and normalization
- Statement lines and ledger export

Test Data:
All report samples are synthetic. Real payment reports are never included in tests.
"""
