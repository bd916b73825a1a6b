"""Cursor-walking helpers for navigating JSON text in place.

Open cursors:
    open_array() and open_object() return a cursor positioned at the first
    element or member, or None for an empty or absent container. Together
    with next_element()/next_member() this gives the loop idiom:

        cursor = open_array(root)
        while cursor is not None:
            ...  # cursor is at an element
            cursor = next_element(cursor)

Duplicate names:
    lookup() lands on the value of the first matching member. Calling
    next_element() on that value steps onto the following member, where
    lookup() can resume, so every duplicate name is reachable in order.

Everything here composes the parsers of jsonwalk.syntax.parser; no new
scanning primitives are introduced.
"""

from jsonwalk.syntax.cursor import Cursor, Slot
from jsonwalk.syntax.parser.primitives import (
    begin_array,
    begin_object,
    begin_string,
    end_array,
    end_object,
    value_separator,
)
from jsonwalk.syntax.parser.rules import ParseContext, parse_value
from jsonwalk.syntax.parser.strings import decode_char, parse_name

__all__ = [
    "compare_key",
    "find",
    "index_into",
    "lookup",
    "next_element",
    "next_member",
    "open_array",
    "open_object",
]


def open_array(cursor: Cursor | None) -> Cursor | None:
    """Enter an array, landing on its first element.

    Returns:
        Cursor at the first element, or None if the array is empty or the
        cursor is not at an array
    """
    cursor = begin_array(cursor)
    if cursor is None or end_array(cursor) is not None:
        return None
    return cursor


def open_object(cursor: Cursor | None) -> Cursor | None:
    """Enter an object, landing on its first member's name.

    Returns:
        Cursor at the opening quote of the first name, or None if the
        object is empty or the cursor is not at an object
    """
    cursor = begin_object(cursor)
    if cursor is None or end_object(cursor) is not None:
        return None
    return cursor


def next_element(cursor: Cursor | None, context: ParseContext | None = None) -> Cursor | None:
    """Skip the element at cursor and its trailing ``,``.

    Returns:
        Cursor at the next element, or None at the closing bracket
    """
    return value_separator(parse_value(cursor, context=context))


def next_member(cursor: Cursor | None, context: ParseContext | None = None) -> Cursor | None:
    """Skip the member (name, ``:``, value) at cursor and its trailing ``,``.

    Returns:
        Cursor at the next member's name, or None at the closing brace
    """
    return next_element(parse_name(cursor), context)


def index_into(
    cursor: Cursor | None, index: int, context: ParseContext | None = None
) -> Cursor | None:
    """Advance index elements from an open array cursor.

    Example:
        >>> root = Cursor(b"[10, 20, 30]", 0)
        >>> index_into(open_array(root), 2).pos
        9
    """
    for _ in range(index):
        if cursor is None:
            return None
        cursor = next_element(cursor, context)
    return cursor


def compare_key(cursor: Cursor | None, name: str | bytes) -> int:
    """Compare the string at cursor with name, decoding on the fly.

    No buffer is materialized. Comparison is byte-exact: str names are
    encoded as UTF-8 and compared with the raw bytes of the string, so a
    raw UTF-8 key matches while its \\uXXXX-escaped spelling does not
    (the escape decodes to NON_ASCII_ESCAPE, which orders after every byte).

    Decoding stops at the closing quote or at the first malformed
    character; what was decoded up to there is the key.

    Args:
        cursor: Position of the string's opening quote
        name: Reference name

    Returns:
        0 if equal; otherwise negative or positive following the ordering
        of ``name`` relative to the key (as strcmp(name, key) would)
    """
    if isinstance(name, str):
        name = name.encode("utf-8")

    char = Slot(0)
    cursor = begin_string(cursor)
    for expected in name:
        cursor = decode_char(cursor, char)
        if cursor is None:
            # Key ended first: name is longer
            return 1
        if char.value != expected:
            return expected - char.value
    if decode_char(cursor, char) is not None:
        # Name ended first: key is longer
        return -1
    return 0


def find(
    cursor: Cursor | None, name: str | bytes, context: ParseContext | None = None
) -> Cursor | None:
    """Scan members from an open object cursor for the first name match.

    Returns:
        Cursor at the matching member's name, or None if no member matches
        or the scan hits malformed input
    """
    while cursor is not None:
        if compare_key(cursor, name) == 0:
            return cursor
        cursor = next_member(cursor, context)
    return None


def lookup(
    cursor: Cursor | None, name: str | bytes, context: ParseContext | None = None
) -> Cursor | None:
    """Find a member by name and return its value cursor.

    Example:
        >>> root = Cursor(b'{"a": 1, "b": [true]}', 0)
        >>> lookup(open_object(root), "b").pos
        14
    """
    return parse_name(find(cursor, name, context))
