"""JSON scanning package.

Provides the cursor type, the scanning parsers, in-place traversal and the
bounded decode/encode helpers. Nothing here builds a tree: callers walk
the document with cursors and pull out only what they need.

Python 3.13+.
"""

from .cursor import Cursor, ParseResult, Slot
from .escaping import copy_decoded, escape_for_embedding
from .parser import JsonScanner, ParseContext
from .readers import read_boolean, read_number, read_string
from .traversal import (
    compare_key,
    find,
    index_into,
    lookup,
    next_element,
    next_member,
    open_array,
    open_object,
)

__all__ = [
    "Cursor",
    "JsonScanner",
    "ParseContext",
    "ParseResult",
    "Slot",
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


def is_json(source: str | bytes) -> bool:
    """Check that source is exactly one JSON text.

    Convenience function for JsonScanner.is_complete().

    Example:
        >>> from jsonwalk.syntax import is_json
        >>> is_json("true false")
        False
    """
    scanner = JsonScanner()
    return scanner.is_complete(source)
