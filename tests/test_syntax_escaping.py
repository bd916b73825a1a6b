"""Tests for syntax.escaping: copy_decoded and escape_for_embedding.

Validates capacity handling, NUL termination, silent truncation, the
non-ASCII replacement byte, and that escaped output scans back as a string.
"""

from __future__ import annotations

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from jsonwalk.diagnostics import BufferCapacityError, DiagnosticCode
from jsonwalk.syntax.cursor import Cursor
from jsonwalk.syntax.escaping import copy_decoded, escape_for_embedding
from jsonwalk.syntax.parser.primitives import end_string
from jsonwalk.syntax.parser.strings import parse_string
from jsonwalk.syntax.readers import read_string

# ============================================================================
# COPY_DECODED
# ============================================================================


class TestCopyDecoded:
    """Test bounded string decoding."""

    def test_whole_string_fits(self) -> None:
        """Content up to the closing quote is copied and NUL-terminated."""
        buffer = bytearray(b"\xff" * 8)
        end = copy_decoded(buffer, Cursor(b'"hello"', 1))

        assert end is not None
        assert end.pos == 6
        assert bytes(buffer[:6]) == b"hello\x00"
        assert end_string(end) is not None

    def test_truncates_silently(self) -> None:
        """At most capacity - 1 bytes are written before the NUL."""
        buffer = bytearray(4)
        end = copy_decoded(buffer, Cursor(b'"hello"', 1))

        assert end is not None
        assert bytes(buffer) == b"hel\x00"
        assert end.pos == 4
        assert end_string(end) is None

    def test_capacity_smaller_than_buffer(self) -> None:
        """Bytes past capacity are never touched."""
        buffer = bytearray(b"\xff" * 8)
        copy_decoded(buffer, Cursor(b'"hello"', 1), 3)

        assert bytes(buffer) == b"he\x00" + b"\xff" * 5

    def test_capacity_one_writes_only_nul(self) -> None:
        """Capacity 1 leaves room for the terminator alone."""
        buffer = bytearray(b"\xff")
        cursor = Cursor(b'"hello"', 1)
        end = copy_decoded(buffer, cursor)

        assert buffer == bytearray(b"\x00")
        assert end == cursor

    def test_escapes_decoded(self) -> None:
        """Short and ASCII unicode escapes are decoded."""
        buffer = bytearray(8)
        copy_decoded(buffer, Cursor(b'"a\\tb\\u0041"', 1))

        assert bytes(buffer[:5]) == b"a\tbA\x00"

    def test_non_ascii_escape_replaced(self) -> None:
        """Escapes above U+007F become the replacement byte."""
        buffer = bytearray(8)
        copy_decoded(buffer, Cursor(b'"\\u00e9x"', 1))

        assert bytes(buffer[:3]) == b"?x\x00"

    def test_custom_replacement(self) -> None:
        """The replacement byte is configurable."""
        buffer = bytearray(8)
        copy_decoded(buffer, Cursor(b'"\\u20ac"', 1), replacement=ord("*"))

        assert bytes(buffer[:2]) == b"*\x00"

    def test_raw_utf8_copied_verbatim(self) -> None:
        """Raw UTF-8 bytes are copied unchanged."""
        buffer = bytearray(8)
        copy_decoded(buffer, Cursor('"é"'.encode(), 1))

        assert bytes(buffer[:3]) == "é".encode() + b"\x00"

    def test_stops_at_malformed_escape(self) -> None:
        """Copying stops before a malformed escape."""
        buffer = bytearray(8)
        end = copy_decoded(buffer, Cursor(b'"ab\\qc"', 1))

        assert end is not None
        assert end.pos == 3
        assert bytes(buffer[:3]) == b"ab\x00"

    def test_none_cursor_leaves_buffer_untouched(self) -> None:
        """A None cursor writes nothing, not even the NUL."""
        buffer = bytearray(b"keep")

        assert copy_decoded(buffer, None) is None
        assert buffer == bytearray(b"keep")

    @pytest.mark.parametrize(("size", "capacity"), [(4, 0), (4, -1), (4, 5), (0, None)])
    def test_invalid_capacity_raises(self, size: int, capacity: int | None) -> None:
        """Capacity below 1 or beyond the buffer is a caller error."""
        with pytest.raises(BufferCapacityError) as exc_info:
            copy_decoded(bytearray(size), Cursor(b'"a"', 1), capacity)

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.BUFFER_CAPACITY_INVALID

    def test_invalid_capacity_is_value_error(self) -> None:
        """BufferCapacityError is also a ValueError."""
        with pytest.raises(ValueError, match="Capacity 0"):
            copy_decoded(bytearray(4), None, 0)

    @given(st.binary(max_size=40), st.integers(min_value=1, max_value=50))
    def test_never_writes_past_capacity(self, content: bytes, capacity: int) -> None:
        """Property: bytes at and beyond capacity stay untouched."""
        buffer = bytearray(b"\xaa" * 60)
        copy_decoded(buffer, Cursor(b'"' + content, 1), capacity)

        assert buffer[capacity:] == bytearray(b"\xaa" * (60 - capacity))
        assert 0 in buffer[:capacity]


# ============================================================================
# ESCAPE_FOR_EMBEDDING
# ============================================================================


class TestEscapeForEmbedding:
    """Test bounded escaping of raw bytes."""

    def test_quotes_backslash_and_newline(self) -> None:
        """Quote, backslash and LF are backslash-escaped."""
        buffer = bytearray(16)

        assert escape_for_embedding(buffer, b'say "hi"\n') == 12
        assert bytes(buffer[:13]) == b'say \\"hi\\"\\n\x00'

    @pytest.mark.parametrize(
        ("raw", "rendered"),
        [
            (b"\\", b"\\\\"),
            (b"\x08", b"\\b"),
            (b"\x0c", b"\\f"),
            (b"\r", b"\\r"),
            (b"\t", b"\\t"),
            (b"\x00", b"\\u0000"),
            (b"\x1f", b"\\u001f"),
            (b"/", b"/"),
            (b"\x7f", b"\x7f"),
            (b"\xc3\xa9", b"\xc3\xa9"),
        ],
    )
    def test_renderings(self, raw: bytes, rendered: bytes) -> None:
        """Each byte uses its short form, \\u00XX, or itself."""
        buffer = bytearray(16)

        assert escape_for_embedding(buffer, raw) == len(rendered)
        assert bytes(buffer[: len(rendered) + 1]) == rendered + b"\x00"

    def test_str_input_encoded(self) -> None:
        """str input is encoded as UTF-8 first."""
        buffer = bytearray(8)

        assert escape_for_embedding(buffer, "é") == 2

    def test_exact_fit(self) -> None:
        """Output plus NUL may fill the capacity exactly."""
        buffer = bytearray(5)

        assert escape_for_embedding(buffer, b"abcd") == 4
        assert buffer == bytearray(b"abcd\x00")

    def test_overflow_leaves_buffer_untouched(self) -> None:
        """Output that would not fit writes nothing."""
        buffer = bytearray(b"xxxx")

        assert escape_for_embedding(buffer, b"abcd") is None
        assert buffer == bytearray(b"xxxx")

    def test_expansion_counts_toward_capacity(self) -> None:
        """Escapes are measured after expansion."""
        buffer = bytearray(6)

        assert escape_for_embedding(buffer, b"\x01") is None
        assert escape_for_embedding(bytearray(7), b"\x01") == 6

    def test_empty_input(self) -> None:
        """Empty input writes only the NUL."""
        buffer = bytearray(b"z")

        assert escape_for_embedding(buffer, b"") == 0
        assert buffer == bytearray(b"\x00")

    def test_invalid_capacity_raises(self) -> None:
        """Capacity beyond the buffer is rejected."""
        with pytest.raises(BufferCapacityError):
            escape_for_embedding(bytearray(2), b"a", 3)

    @given(st.binary(max_size=60))
    def test_output_scans_back_as_string(self, raw: bytes) -> None:
        """Property: quoted output is one string literal decoding to raw."""
        buffer = bytearray(6 * len(raw) + 1)
        written = escape_for_embedding(buffer, raw)
        assert written is not None
        event(f"expanded={written > len(raw)}")

        literal = b'"' + bytes(buffer[:written]) + b'"'
        end = parse_string(Cursor(literal, 0))
        assert end is not None
        assert end.is_eof

        result = read_string(Cursor(literal, 0))
        assert result is not None
        assert result.value == raw
