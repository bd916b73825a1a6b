"""Diagnostic system for jsonwalk errors.

Provides structured error diagnostics with codes, spans and hints for the
surfaces that raise: the document facade, the bounded helpers and the CLI.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import (
    BufferCapacityError,
    JsonScanError,
    JsonwalkError,
    SourceTooLargeError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "BufferCapacityError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "JsonScanError",
    "JsonwalkError",
    "OutputFormat",
    "SourceSpan",
    "SourceTooLargeError",
]
