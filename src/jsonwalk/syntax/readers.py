"""Value extraction on top of the scanning parsers.

Each read_* helper runs the corresponding parser and packages the value
with the cursor past it, for callers who would rather handle one
ParseResult than a cursor plus an out-parameter slot.
"""

from jsonwalk.constants import DEFAULT_REPLACEMENT
from jsonwalk.syntax.cursor import Cursor, ParseResult, Slot
from jsonwalk.syntax.escaping import copy_decoded
from jsonwalk.syntax.parser.numbers import parse_number
from jsonwalk.syntax.parser.primitives import begin_string
from jsonwalk.syntax.parser.rules import parse_boolean
from jsonwalk.syntax.parser.strings import parse_string

__all__ = ["read_boolean", "read_number", "read_string"]


def read_string(
    cursor: Cursor | None, *, replacement: int = DEFAULT_REPLACEMENT
) -> ParseResult[bytes] | None:
    """Decode the string literal at cursor.

    Two independent passes: parse_string() validates the literal and counts
    its characters, then copy_decoded() fills a buffer sized from that count.

    Args:
        cursor: Position of the opening quote, or None
        replacement: Byte substituted for \\uXXXX escapes above U+007F

    Returns:
        ParseResult with the decoded bytes and the cursor past the closing
        quote, or None
    """
    length = Slot(0)
    end = parse_string(cursor, length)
    if end is None:
        return None

    buffer = bytearray(length.value + 1)
    copy_decoded(buffer, begin_string(cursor), replacement=replacement)
    return ParseResult(bytes(buffer[: length.value]), end)


def read_number(cursor: Cursor | None) -> ParseResult[float] | None:
    """Parse the number at cursor into a float."""
    value = Slot(0.0)
    end = parse_number(cursor, value)
    if end is None:
        return None
    return ParseResult(value.value, end)


def read_boolean(cursor: Cursor | None) -> ParseResult[bool] | None:
    value = Slot(False)
    end = parse_boolean(cursor, value)
    if end is None:
        return None
    return ParseResult(value.value, end)
