"""Primitive matchers and structural navigators for the JSON scanner.

Every function here takes a cursor (or None) and returns the cursor past
what it recognized, or None. A None input short-circuits to a None output
without touching the buffer, so chains such as
``end_array(value_separator(cursor))`` need no explicit error checks.
"""

from jsonwalk.syntax.cursor import Cursor
from jsonwalk.syntax.parser.whitespace import skip_whitespace

__all__ = [
    "begin_array",
    "begin_object",
    "begin_string",
    "end_array",
    "end_object",
    "end_string",
    "match_char",
    "match_literal",
    "name_separator",
    "value_separator",
]


def match_char(cursor: Cursor | None, char: bytes) -> Cursor | None:
    """Consume one byte if it equals char.

    Args:
        cursor: Current position in source, or None
        char: Expected byte (single-byte bytes object)

    Returns:
        Cursor advanced by 1 on match, None on mismatch, EOF or None input

    Example:
        >>> match_char(Cursor(b"[]", 0), b"[").pos
        1
        >>> match_char(Cursor(b"[]", 0), b"{") is None
        True
    """
    if cursor is None or cursor.is_eof:
        return None
    if cursor.source[cursor.pos] != char[0]:
        return None
    return cursor.advance()


def match_literal(cursor: Cursor | None, literal: bytes) -> Cursor | None:
    """Consume literal if the following bytes equal it exactly.

    Byte comparison, no case folding.

    Args:
        cursor: Current position in source, or None
        literal: Expected bytes

    Returns:
        Cursor advanced by len(literal) on match, None otherwise
    """
    if cursor is None or not cursor.startswith(literal):
        return None
    return cursor.advance(len(literal))


def _punctuation(cursor: Cursor | None, char: bytes) -> Cursor | None:
    """Skip whitespace, match one punctuation byte, skip whitespace."""
    return skip_whitespace(match_char(skip_whitespace(cursor), char))


def begin_array(cursor: Cursor | None) -> Cursor | None:
    """Match ``[`` with surrounding whitespace."""
    return _punctuation(cursor, b"[")


def end_array(cursor: Cursor | None) -> Cursor | None:
    """Match ``]`` with surrounding whitespace."""
    return _punctuation(cursor, b"]")


def begin_object(cursor: Cursor | None) -> Cursor | None:
    """Match ``{`` with surrounding whitespace."""
    return _punctuation(cursor, b"{")


def end_object(cursor: Cursor | None) -> Cursor | None:
    """Match ``}`` with surrounding whitespace."""
    return _punctuation(cursor, b"}")


def name_separator(cursor: Cursor | None) -> Cursor | None:
    """Match ``:`` with surrounding whitespace."""
    return _punctuation(cursor, b":")


def value_separator(cursor: Cursor | None) -> Cursor | None:
    """Match ``,`` with surrounding whitespace."""
    return _punctuation(cursor, b",")


# Whitespace inside a string is data, so the quotes are matched bare.


def begin_string(cursor: Cursor | None) -> Cursor | None:
    """Match an opening ``"`` (no whitespace skipping)."""
    return match_char(cursor, b'"')


def end_string(cursor: Cursor | None) -> Cursor | None:
    """Match a closing ``"`` (no whitespace skipping)."""
    return match_char(cursor, b'"')
