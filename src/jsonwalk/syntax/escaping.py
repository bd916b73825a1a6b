"""Bounded decode/encode helpers over caller-owned buffers.

copy_decoded() writes the decoded content of a JSON string into a fixed
size bytearray; escape_for_embedding() does the inverse, rendering raw bytes
so they can be placed between the quotes of a JSON string. Both respect the
capacity they are given and always leave a NUL terminator inside it.
"""

from jsonwalk.constants import DEFAULT_REPLACEMENT, NON_ASCII_ESCAPE
from jsonwalk.diagnostics import BufferCapacityError, ErrorTemplate
from jsonwalk.syntax.cursor import Cursor, Slot
from jsonwalk.syntax.parser.strings import decode_char

__all__ = ["copy_decoded", "escape_for_embedding"]

_SHORT_FORMS: dict[int, bytes] = {
    ord('"'): b'\\"',
    ord("\\"): b"\\\\",
    0x08: b"\\b",
    0x0C: b"\\f",
    0x0A: b"\\n",
    0x0D: b"\\r",
    0x09: b"\\t",
}


def _escape_form(byte: int) -> bytes:
    if byte in _SHORT_FORMS:
        return _SHORT_FORMS[byte]
    if byte < 0x20:
        return b"\\u%04x" % byte
    return bytes((byte,))


# Rendering of every byte value, built once.
_ESCAPE_TABLE: tuple[bytes, ...] = tuple(_escape_form(byte) for byte in range(256))


def _checked_capacity(buffer: bytearray, capacity: int | None) -> int:
    if capacity is None:
        capacity = len(buffer)
    if capacity < 1 or capacity > len(buffer):
        raise BufferCapacityError(ErrorTemplate.buffer_capacity_invalid(capacity, len(buffer)))
    return capacity


def copy_decoded(
    buffer: bytearray,
    cursor: Cursor | None,
    capacity: int | None = None,
    *,
    replacement: int = DEFAULT_REPLACEMENT,
) -> Cursor | None:
    """Decode string content into buffer, truncating silently.

    Characters are decoded from cursor (string content, just past the
    opening quote) until decoding fails (closing quote, malformed escape)
    or ``capacity - 1`` bytes have been written; a NUL byte follows the
    last one. A \\uXXXX escape above U+007F is written as ``replacement``.

    The returned cursor sits just past the last copied character. To
    confirm the whole string fit, check ``end_string(result)`` is not None.

    Args:
        buffer: Caller-owned destination
        cursor: Start of string content, or None
        capacity: Bytes of buffer to use, NUL included (default: len(buffer))
        replacement: Byte written for escaped non-ASCII characters

    Returns:
        Cursor past the last copied character, or None for a None cursor
        (buffer untouched)

    Raises:
        BufferCapacityError: If capacity is below 1 or exceeds len(buffer)

    Example:
        >>> buffer = bytearray(4)
        >>> end = copy_decoded(buffer, Cursor(b'"hello"', 1))
        >>> bytes(buffer), end.pos
        (b'hel\\x00', 4)
    """
    capacity = _checked_capacity(buffer, capacity)
    if cursor is None:
        return None

    char = Slot(0)
    limit = capacity - 1
    written = 0
    while written < limit and (next_cursor := decode_char(cursor, char)) is not None:
        buffer[written] = replacement if char.value == NON_ASCII_ESCAPE else char.value
        written += 1
        cursor = next_cursor
    buffer[written] = 0
    return cursor


def escape_for_embedding(
    buffer: bytearray, raw: bytes | str, capacity: int | None = None
) -> int | None:
    """Render raw bytes as JSON string content into buffer.

    ``"`` and ``\\`` are backslash-escaped; control bytes below 0x20 use
    the short forms \\b \\f \\n \\r \\t where JSON has one and \\u00XX
    otherwise (NUL included). Every other byte is copied verbatim. No
    surrounding quotes are written. The output is NUL-terminated.

    Args:
        buffer: Caller-owned destination
        raw: Bytes to render (str is encoded as UTF-8)
        capacity: Bytes of buffer to use, NUL included (default: len(buffer))

    Returns:
        Number of bytes written before the NUL, or None if the rendering
        plus its NUL does not fit (buffer untouched)

    Raises:
        BufferCapacityError: If capacity is below 1 or exceeds len(buffer)

    Example:
        >>> buffer = bytearray(16)
        >>> escape_for_embedding(buffer, b'say "hi"\\n')
        12
        >>> bytes(buffer[:12])
        b'say \\\\"hi\\\\"\\\\n'
    """
    capacity = _checked_capacity(buffer, capacity)
    if isinstance(raw, str):
        raw = raw.encode("utf-8")

    rendered = b"".join(_ESCAPE_TABLE[byte] for byte in raw)
    if len(rendered) + 1 > capacity:
        return None
    buffer[: len(rendered)] = rendered
    buffer[len(rendered)] = 0
    return len(rendered)
