"""Whitespace handling utilities for the JSON scanner.

This module provides whitespace skipping per RFC 8259.
"""

from jsonwalk.constants import WHITESPACE
from jsonwalk.syntax.cursor import Cursor

__all__ = ["skip_whitespace"]


def skip_whitespace(cursor: Cursor | None) -> Cursor | None:
    """Skip insignificant whitespace (space, tab, LF, CR, per RFC 8259).

    Per RFC 8259:
        ws = *( %x20 / %x09 / %x0A / %x0D )

    The run may be empty, so this never fails on a live cursor. A None
    cursor passes straight through.

    Args:
        cursor: Current position in source, or None

    Returns:
        New cursor at first non-whitespace byte (or EOF), or None

    Design:
        Idempotent: skip_whitespace(skip_whitespace(c)) == skip_whitespace(c)
    """
    if cursor is None:
        return None
    source = cursor.source
    pos = cursor.pos
    end = len(source)
    while pos < end and source[pos] in WHITESPACE:
        pos += 1
    if pos == cursor.pos:
        return cursor
    return Cursor(source, pos)
