"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    """

    @staticmethod
    def scan_no_match() -> Diagnostic:
        """Document does not start with a JSON value.

        The scanner reports failure as a single signal, so no position is
        attached.

        Returns:
            Diagnostic for SCAN_NO_MATCH
        """
        return Diagnostic(
            code=DiagnosticCode.SCAN_NO_MATCH,
            message="Input is not a JSON value",
            span=None,
            hint="Check brackets, quoting, separators and literal spelling",
        )

    @staticmethod
    def trailing_data(position: int, end: int, line: int, column: int) -> Diagnostic:
        """Bytes remain after a complete top-level value.

        Args:
            position: Byte offset of the first unconsumed byte
            end: Length of the document
            line: Line of the first unconsumed byte (1-indexed)
            column: Column of the first unconsumed byte (1-indexed)

        Returns:
            Diagnostic for TRAILING_DATA
        """
        remaining = end - position
        msg = f"Unexpected data after JSON value ({remaining} byte(s) remaining)"
        return Diagnostic(
            code=DiagnosticCode.TRAILING_DATA,
            message=msg,
            span=SourceSpan(start=position, end=end, line=line, column=column),
            hint="A JSON text holds exactly one value",
        )

    @staticmethod
    def source_too_large(size: int, limit: int) -> Diagnostic:
        """Document exceeds the configured size limit.

        Args:
            size: Document size in bytes
            limit: Configured maximum in bytes

        Returns:
            Diagnostic for SOURCE_TOO_LARGE
        """
        msg = f"Source size ({size:,} bytes) exceeds maximum ({limit:,} bytes)"
        return Diagnostic(
            code=DiagnosticCode.SOURCE_TOO_LARGE,
            message=msg,
            span=None,
            hint="Configure max_source_size in the JsonScanner constructor to increase limit",
        )

    @staticmethod
    def depth_clamped(requested: int, clamped: int, recursion_limit: int) -> Diagnostic:
        """Requested nesting depth cannot be honored by the interpreter.

        Args:
            requested: Depth the caller asked for
            clamped: Depth actually used
            recursion_limit: Current sys.getrecursionlimit()

        Returns:
            Diagnostic for DEPTH_CLAMPED (warning severity)
        """
        msg = (
            f"Requested depth {requested} exceeds Python recursion limit "
            f"({recursion_limit}); clamping to {clamped}"
        )
        return Diagnostic(
            code=DiagnosticCode.DEPTH_CLAMPED,
            message=msg,
            span=None,
            hint="Consider increasing sys.setrecursionlimit() if needed",
            severity="warning",
        )

    @staticmethod
    def buffer_capacity_invalid(capacity: int, buffer_size: int) -> Diagnostic:
        """Capacity passed to a bounded helper is unusable.

        Args:
            capacity: Requested capacity
            buffer_size: Actual length of the caller's buffer

        Returns:
            Diagnostic for BUFFER_CAPACITY_INVALID
        """
        msg = f"Capacity {capacity} is invalid for a buffer of {buffer_size} byte(s)"
        return Diagnostic(
            code=DiagnosticCode.BUFFER_CAPACITY_INVALID,
            message=msg,
            span=None,
            hint="Capacity must be at least 1 (room for the NUL) and at most len(buffer)",
        )
