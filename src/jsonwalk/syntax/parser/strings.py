"""String literal scanning for the JSON scanner.

decode_char() interprets exactly one logical character of string content;
parse_string() walks a whole literal counting characters without keeping
them. Content extraction is a separate pass (see jsonwalk.syntax.escaping),
so the counting scan and the copying scan never share state.

Non-ASCII Escapes:
    A \\uXXXX escape above U+007F decodes to NON_ASCII_ESCAPE rather than to
    UTF-8 bytes. Surrogates are accepted as four hex digits; pairs are not
    recombined. Raw bytes >= 0x80 are passed through uninterpreted.
"""

from jsonwalk.constants import (
    HEX_DIGITS,
    MAX_ASCII,
    NON_ASCII_ESCAPE,
    SHORT_ESCAPES,
    UNICODE_ESCAPE_LEN,
)
from jsonwalk.syntax.cursor import Cursor, Slot
from jsonwalk.syntax.parser.primitives import begin_string, end_string, name_separator

__all__ = ["decode_char", "parse_name", "parse_string"]

_BACKSLASH = ord("\\")
_QUOTE = ord('"')
_UNICODE_ESCAPE = ord("u")
_FIRST_PRINTABLE = 0x20


def _decode_escape(cursor: Cursor) -> tuple[int, Cursor] | None:
    """Decode the escape whose letter is at cursor (just after the backslash)."""
    if cursor.is_eof:
        return None

    letter = cursor.current
    if letter in SHORT_ESCAPES:
        return (SHORT_ESCAPES[letter], cursor.advance())

    if letter == _UNICODE_ESCAPE:
        cursor = cursor.advance()
        hex_digits = cursor.slice_ahead(UNICODE_ESCAPE_LEN)
        if len(hex_digits) < UNICODE_ESCAPE_LEN or not all(
            c in HEX_DIGITS for c in hex_digits
        ):
            return None
        code_point = int(hex_digits, 16)
        char = code_point if code_point <= MAX_ASCII else NON_ASCII_ESCAPE
        return (char, cursor.advance(UNICODE_ESCAPE_LEN))

    return None


def decode_char(cursor: Cursor | None, out: Slot[int] | None = None) -> Cursor | None:
    """Decode one character of string content.

    The cursor must point at string content, not at the opening quote.

    Escapes:
        \\" \\\\ \\/ -> themselves
        \\b \\f \\n \\r \\t -> BS, FF, LF, CR, TAB
        \\uXXXX -> the byte for code points <= 0x7F, else NON_ASCII_ESCAPE

    Any other byte >= 0x20 except ``"`` decodes to itself. A control byte,
    a bare quote (the end of the string), EOF or a malformed escape fail.

    Args:
        cursor: Position of the character, or None
        out: Receives the decoded character on success

    Returns:
        Cursor past the character, or None
    """
    if cursor is None or cursor.is_eof:
        return None

    byte = cursor.current
    if byte == _BACKSLASH:
        escape = _decode_escape(cursor.advance())
        if escape is None:
            return None
        char, cursor = escape
        if out is not None:
            out.value = char
        return cursor

    if byte < _FIRST_PRINTABLE or byte == _QUOTE:
        return None

    if out is not None:
        out.value = byte
    return cursor.advance()


def parse_string(cursor: Cursor | None, out: Slot[int] | None = None) -> Cursor | None:
    """Parse a string literal: "..." and count its characters.

    Args:
        cursor: Position of the opening quote, or None
        out: Receives the number of decoded characters on success

    Returns:
        Cursor past the closing quote, or None

    Example:
        >>> length = Slot(0)
        >>> parse_string(Cursor(b'"a\\\\nb" tail', 0), length).pos
        6
        >>> length.value
        3
    """
    cursor = begin_string(cursor)
    if cursor is None:
        return None

    length = 0
    while (next_cursor := decode_char(cursor)) is not None:
        cursor = next_cursor
        length += 1

    cursor = end_string(cursor)
    if cursor is None:
        return None
    if out is not None:
        out.value = length
    return cursor


def parse_name(cursor: Cursor | None) -> Cursor | None:
    """Parse an object member name: string followed by ``:``.

    Returns:
        Cursor at the member's value, or None
    """
    return name_separator(parse_string(cursor))
