"""Fuzz testing for jsonwalk.

This package contains:
- test_scanner_fuzz: Totality on arbitrary bytes and differential checks
  against the standard library json module

Python 3.13+.
"""
