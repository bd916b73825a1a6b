"""Immutable cursor infrastructure for zero-tree JSON scanning.

Implements the immutable cursor pattern over a byte buffer.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - Failure is the absent cursor (None), never an exception
    - Every advance() returns NEW cursor (prevents infinite loops)
    - Metadata travels through an optional out-parameter Slot
    - Line:column computed on-demand (O(n) only for reporting)

Buffer Ownership:
    Cursors reference the caller's bytes object; nothing is copied. Since
    bytes is immutable, every cursor over the same buffer stays valid for
    as long as the caller keeps a reference to it.

Pattern Reference:
    - Rust nom parser combinator library
    - Haskell Parsec
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

__all__ = ["Cursor", "ParseResult", "Slot"]

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable byte position in a JSON document.

    Example:
        >>> cursor = Cursor(b"[1]", 0)
        >>> cursor.current
        91
        >>> cursor.advance().pos
        1
        >>> cursor.pos  # Original unchanged (immutability)
        0
    """

    source: bytes
    pos: int

    @classmethod
    def at_start(cls, source: str | bytes) -> "Cursor":
        """Create a cursor at offset 0; str input is encoded as UTF-8."""
        if isinstance(source, str):
            source = source.encode("utf-8")
        return cls(source, 0)

    @property
    def is_eof(self) -> bool:
        """Check if at end of input.

        Returns:
            True if position >= source length
        """
        return self.pos >= len(self.source)

    @property
    def current(self) -> int:
        """Get current byte.

        Returns:
            Byte value (0-255) at position

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            msg = f"Unexpected EOF at position {self.pos}"
            raise EOFError(msg)
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> int | None:
        """Peek at byte with offset without advancing.

        Args:
            offset: Offset from current position (0 = current, 1 = next)

        Returns:
            Byte at position + offset, or None if beyond EOF
        """
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions.

        Args:
            count: Number of positions to advance (default: 1)

        Returns:
            New Cursor instance at new position (original unchanged)
        """
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def startswith(self, literal: bytes) -> bool:
        """Check whether the bytes at the cursor begin with literal."""
        return self.source.startswith(literal, self.pos)

    def slice_to(self, end_pos: int) -> bytes:
        """Extract source bytes from current position to end_pos.

        Args:
            end_pos: End position (exclusive)

        Returns:
            Source slice from current position to end_pos

        Example:
            >>> start = Cursor(b'{"a": 1}', 0)
            >>> start.slice_to(4)
            b'{"a"'
        """
        return self.source[self.pos : end_pos]

    def slice_ahead(self, n: int) -> bytes:
        """Get next n bytes without advancing cursor.

        May return fewer bytes if near EOF.
        """
        return self.source[self.pos : self.pos + n]

    def compute_line_col(self) -> tuple[int, int]:
        """Compute line and column for current position.

        Returns:
            (line, column) tuple (1-indexed, columns count bytes)

        Performance:
            O(n) where n = current position. Only call for reporting.

        Example:
            >>> Cursor(b"[\\n  1]", 4).compute_line_col()
            (2, 3)
        """
        lines_before = self.source.count(b"\n", 0, self.pos)
        last_newline = self.source.rfind(b"\n", 0, self.pos)
        col = self.pos - last_newline if last_newline >= 0 else self.pos + 1
        return (lines_before + 1, col)


@dataclass(slots=True)
class Slot(Generic[T]):
    """Optional out-parameter for parser metadata.

    A parser writes ``value`` only when it succeeds. On failure the slot is
    left exactly as the caller prepared it, which makes fallback defaults a
    one-liner:

        >>> count = Slot(-1)
        >>> parse_array(Cursor(b"[1, 2", 0), count) is None
        True
        >>> count.value
        -1

    Mutability Note:
        Intentionally mutable (not frozen=True): the slot is the one place a
        parser reports metadata. Slots belong to the caller; the scanner
        never retains them.
    """

    value: T


@dataclass(frozen=True, slots=True)
class ParseResult(Generic[T]):
    """Extracted value together with the cursor past it.

    Returned by the read_* helpers for callers who prefer a single result
    object over a cursor plus slot.

    Example:
        >>> result = ParseResult(42.0, Cursor(b"42", 2))
        >>> result.value
        42.0
        >>> result.cursor.is_eof
        True
    """

    value: T
    cursor: Cursor
