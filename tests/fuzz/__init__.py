"""Fuzz tests for desktopfile.

This package contains:
- test_parser_property: arbitrary input never escapes the error hierarchy,
  and whatever parses serializes to a fixed point

Python 3.13+.
"""
