#!/usr/bin/env python3
"""
End-to-end tests for the autaxy package.

These tests execute actual CLI commands via subprocess to validate complete
workflows from the user's perspective, using synthetic report files.
"""
