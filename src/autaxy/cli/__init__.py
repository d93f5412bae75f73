"""
Command Line Interface Package

Command Structure:
- autaxy: Main entry point with utility commands (version, config)
- autaxy apple: Report parsing, per-country summary, statement lines, ledger export
"""
