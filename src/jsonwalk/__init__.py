"""jsonwalk - zero-tree, streaming JSON scanner.

A family of composable parsers, each consuming an immutable cursor into a
byte buffer and returning the cursor past what it recognized, or None.
No object model is built: callers navigate the JSON text directly and
extract only the values they need, on demand.

Public API:
    Cursor - Immutable position in a JSON document
    Slot - Optional out-parameter for parser metadata
    ValueKind - Kind of a scanned value
    JsonScanner - Whole-document scanning with size and depth limits
    is_json - Check that a document is exactly one JSON text
    open_array, open_object, next_element, next_member, index_into,
    compare_key, find, lookup - In-place traversal
    read_string, read_number, read_boolean - Scalar extraction
    copy_decoded, escape_for_embedding - Bounded buffer helpers

Exceptions:
    JsonwalkError - Base exception class
    JsonScanError - Document is not exactly one JSON text
    SourceTooLargeError - Document exceeds the size limit
    BufferCapacityError - Unusable capacity for a bounded helper

Submodules:
    jsonwalk.syntax.parser - The scanning parsers themselves
    jsonwalk.diagnostics - Error types and diagnostic formatting
    jsonwalk.cli - Fixture checker command
"""

# Essential Public API - Minimal exports for clean namespace
from .diagnostics import (
    BufferCapacityError,
    JsonScanError,
    JsonwalkError,
    SourceTooLargeError,
)
from .enums import ValueKind
from .syntax import (
    Cursor,
    JsonScanner,
    ParseResult,
    Slot,
    compare_key,
    copy_decoded,
    escape_for_embedding,
    find,
    index_into,
    is_json,
    lookup,
    next_element,
    next_member,
    open_array,
    open_object,
    read_boolean,
    read_number,
    read_string,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("jsonwalk")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

# JSON grammar conformance
__json_spec__ = "RFC 8259"

__all__ = [
    "BufferCapacityError",
    "Cursor",
    "JsonScanError",
    "JsonScanner",
    "JsonwalkError",
    "ParseResult",
    "Slot",
    "SourceTooLargeError",
    "ValueKind",
    "__json_spec__",
    "__version__",
    "compare_key",
    "copy_decoded",
    "escape_for_embedding",
    "find",
    "index_into",
    "is_json",
    "lookup",
    "next_element",
    "next_member",
    "open_array",
    "open_object",
    "read_boolean",
    "read_number",
    "read_string",
]
