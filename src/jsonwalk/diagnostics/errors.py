"""jsonwalk exception hierarchy with structured diagnostics.

The scanning core never raises: a failed match is the None cursor. These
exceptions belong to the outer surfaces (document facade, bounded helpers,
command line) where a caller mistake or a rejected document must be reported.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class JsonwalkError(Exception):
    """Base exception for all jsonwalk errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize JsonwalkError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class JsonScanError(JsonwalkError):
    """Document is not exactly one JSON text.

    Raised by JsonScanner.check() when the value does not scan or when
    bytes remain after it.
    """


class SourceTooLargeError(JsonwalkError, ValueError):
    """Document exceeds the scanner's max_source_size."""


class BufferCapacityError(JsonwalkError, ValueError):
    """Capacity given to a bounded decode/encode helper is unusable."""
