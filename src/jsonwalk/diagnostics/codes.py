"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Document errors (whole-text scanning outcomes)
        2000-2999: Limit errors (size and depth configuration)
        3000-3999: Buffer errors (bounded decode/encode helpers)
    """

    # Document errors (1000-1999)
    SCAN_NO_MATCH = 1001
    TRAILING_DATA = 1002

    # Limit errors (2000-2999)
    SOURCE_TOO_LARGE = 2001
    DEPTH_CLAMPED = 2002

    # Buffer errors (3000-3999)
    BUFFER_CAPACITY_INVALID = 3001


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Source location for error reporting.

    Note:
        Positions are byte offsets into the scanned document, not
        character offsets. Columns count bytes as well.

    Attributes:
        start: Starting byte offset (0-indexed)
        end: Ending byte offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, or line or
                column is less than 1.
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Source location (None when no position applies)
        hint: Suggestion for fixing the error
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like a compiler message.

        Example output:
            error[TRAILING_DATA]: Unexpected data after JSON value
              --> line 1, column 6
              = help: Remove everything after the first complete value

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
