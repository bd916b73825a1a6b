"""Shared constants for jsonwalk.

This module provides centralized configuration constants used across the
scanner, the traversal helpers and the command-line checker. Placing them
here avoids circular imports and provides a single source of truth.

Constants are grouped by domain:
- Depth limits: Recursion protection for nested arrays and objects
- Input limits: DoS prevention via size constraints
- Lexical sets: Bytes the scanner treats specially

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_DEPTH",
    "FRAMES_PER_LEVEL",
    # Input limits
    "MAX_SOURCE_SIZE",
    # Lexical sets
    "WHITESPACE",
    "ASCII_DIGITS",
    "HEX_DIGITS",
    "SHORT_ESCAPES",
    "UNICODE_ESCAPE_LEN",
    "MAX_ASCII",
    "NON_ASCII_ESCAPE",
    "DEFAULT_REPLACEMENT",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Maximum nesting depth of arrays and objects accepted by the value parser.
# Each level of nesting costs several Python frames (value -> structured ->
# array/object -> value), so the limit is clamped against the interpreter
# recursion limit at ParseContext construction.
MAX_DEPTH: int = 100

# Python frames consumed by one level of array/object nesting.
FRAMES_PER_LEVEL: int = 4

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum document size in bytes (10 MB) accepted by JsonScanner.
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024

# ============================================================================
# LEXICAL SETS
# ============================================================================

# RFC 8259 insignificant whitespace: space, horizontal tab, LF, CR.
WHITESPACE: bytes = b" \t\n\r"

# ASCII digits only; bytes.isdigit() agrees but is spelled out for clarity.
ASCII_DIGITS: bytes = b"0123456789"

HEX_DIGITS: bytes = b"0123456789abcdefABCDEF"

# Escape letter after a backslash -> decoded byte.
SHORT_ESCAPES: dict[int, int] = {
    ord('"'): ord('"'),
    ord("\\"): ord("\\"),
    ord("/"): ord("/"),
    ord("b"): 0x08,
    ord("f"): 0x0C,
    ord("n"): 0x0A,
    ord("r"): 0x0D,
    ord("t"): 0x09,
}

# \uXXXX = 4 hex digits
UNICODE_ESCAPE_LEN: int = 4

MAX_ASCII: int = 0x7F

# Decoded-character marker for a \uXXXX escape above U+007F. Lies outside the
# byte range so it never compares equal to a real byte.
NON_ASCII_ESCAPE: int = 0x100

# Byte written into caller buffers in place of NON_ASCII_ESCAPE.
DEFAULT_REPLACEMENT: int = ord("?")
