"""Document-level JSON scanner.

This module provides the JsonScanner class that applies the cursor
parsers of :mod:`jsonwalk.syntax.parser` to a whole document.

Architecture:
    The scanner uses the immutable cursor pattern
    (:class:`~jsonwalk.syntax.cursor.Cursor`) to traverse the document.
    Each sub-parser (in :mod:`~jsonwalk.syntax.parser.rules`,
    :mod:`~jsonwalk.syntax.parser.primitives`, etc.) returns either the
    cursor past the construct it recognized or None on failure. No tree is
    built; a scan only learns where the top-level value ends and what kind
    it is.

Security:
    Includes configurable input size limit to prevent DoS attacks via
    unbounded input, and a nesting depth limit passed down through
    :class:`~jsonwalk.syntax.parser.rules.ParseContext`.

See Also:
    - :mod:`jsonwalk.syntax.traversal` - Navigating into the scanned value
    - :mod:`jsonwalk.syntax.readers` - Extracting scalar values
"""

import logging

from jsonwalk.constants import MAX_DEPTH, MAX_SOURCE_SIZE
from jsonwalk.diagnostics import ErrorTemplate, JsonScanError, SourceTooLargeError
from jsonwalk.enums import ValueKind
from jsonwalk.syntax.cursor import Cursor, ParseResult, Slot
from jsonwalk.syntax.parser.rules import ParseContext, parse_text

__all__ = ["JsonScanner"]

logger = logging.getLogger(__name__)


class JsonScanner:
    """JSON document scanner using the immutable cursor pattern.

    Design:
    - Immutable cursor prevents infinite loops (no manual guards needed)
    - A failed scan is a plain None, never an exception
    - check() turns the two document-level outcomes into JsonScanError

    Security:
    - Configurable max_source_size prevents DoS via large inputs
    - Default limit: 10 MB
    - Configurable max_nesting_depth bounds recursion on [[[[...]]]] input

    Attributes:
        max_source_size: Maximum allowed source size in bytes (default: 10 MB)
        max_nesting_depth: Maximum allowed array/object nesting (default: 100)
    """

    __slots__ = ("_max_nesting_depth", "_max_source_size")

    def __init__(
        self,
        *,
        max_source_size: int | None = None,
        max_nesting_depth: int | None = None,
    ) -> None:
        """Initialize scanner with optional size and nesting depth limits.

        Args:
            max_source_size: Maximum source size in bytes (default: 10 MB).
                            Set to 0 to disable size limit (not recommended).
            max_nesting_depth: Maximum array/object nesting depth (default: 100).
        """
        self._max_source_size = (
            max_source_size if max_source_size is not None else MAX_SOURCE_SIZE
        )
        self._max_nesting_depth = (
            max_nesting_depth if max_nesting_depth is not None else MAX_DEPTH
        )

    @property
    def max_source_size(self) -> int:
        """Maximum allowed source size in bytes."""
        return self._max_source_size

    @property
    def max_nesting_depth(self) -> int:
        """Maximum allowed array/object nesting depth."""
        return self._max_nesting_depth

    def scan(self, source: str | bytes) -> ParseResult[ValueKind] | None:
        """Scan one JSON text from the start of source.

        Trailing bytes after the value and its whitespace are permitted
        here; use is_complete() or check() to reject them.

        Args:
            source: JSON document (str is encoded as UTF-8)

        Returns:
            ParseResult with the kind of the top-level value and the cursor
            past it, or None if source does not start with a JSON value

        Raises:
            SourceTooLargeError: If source exceeds max_source_size

        Example:
            >>> result = JsonScanner().scan(b'{"a": [1, 2]} ')
            >>> result.value, result.cursor.is_eof
            (<ValueKind.OBJECT: 'object'>, True)
        """
        cursor = Cursor.at_start(source)
        size = len(cursor.source)
        if self._max_source_size > 0 and size > self._max_source_size:
            raise SourceTooLargeError(ErrorTemplate.source_too_large(size, self._max_source_size))

        context = ParseContext(max_nesting_depth=self._max_nesting_depth)
        kind = Slot(ValueKind.NULL)
        end = parse_text(cursor, kind, context)
        if end is None:
            logger.debug("Scan failed: no JSON value in %d byte(s)", size)
            return None

        logger.debug("Scanned %s value ending at byte %d of %d", kind.value, end.pos, size)
        return ParseResult(kind.value, end)

    def is_complete(self, source: str | bytes) -> bool:
        """Check that source is exactly one JSON text.

        Returns:
            True if a value scans and only whitespace follows it
        """
        result = self.scan(source)
        return result is not None and result.cursor.is_eof

    def check(self, source: str | bytes) -> ValueKind:
        """Require source to be exactly one JSON text.

        Returns:
            Kind of the top-level value

        Raises:
            JsonScanError: SCAN_NO_MATCH if no value scans, TRAILING_DATA
                (with the position of the first extra byte) if bytes remain
            SourceTooLargeError: If source exceeds max_source_size
        """
        result = self.scan(source)
        if result is None:
            raise JsonScanError(ErrorTemplate.scan_no_match())

        end = result.cursor
        if not end.is_eof:
            line, column = end.compute_line_col()
            raise JsonScanError(
                ErrorTemplate.trailing_data(end.pos, len(end.source), line, column)
            )
        return result.value
