"""JSON scanning parsers.

This module provides the JsonScanner document facade and the cursor
parsers it is built from, organized into focused submodules.

Module Organization:
- core.py: JsonScanner class (size/depth limits, whole-document checks)
- primitives.py: Byte and literal matchers, punctuation navigators
- whitespace.py: RFC 8259 whitespace skipping
- strings.py: Character decoding and string literals
- numbers.py: Number literals
- rules.py: Value dispatcher, arrays, objects, texts

Public API:
    JsonScanner: Document-level scanner
    ParseContext: Parse context for depth tracking (advanced usage)
"""

from jsonwalk.syntax.parser.core import JsonScanner
from jsonwalk.syntax.parser.numbers import parse_number
from jsonwalk.syntax.parser.primitives import (
    begin_array,
    begin_object,
    begin_string,
    end_array,
    end_object,
    end_string,
    match_char,
    match_literal,
    name_separator,
    value_separator,
)
from jsonwalk.syntax.parser.rules import (
    ParseContext,
    parse_array,
    parse_boolean,
    parse_null,
    parse_object,
    parse_primitive,
    parse_structured,
    parse_text,
    parse_value,
)
from jsonwalk.syntax.parser.strings import decode_char, parse_name, parse_string
from jsonwalk.syntax.parser.whitespace import skip_whitespace

__all__ = [
    "JsonScanner",
    "ParseContext",
    "begin_array",
    "begin_object",
    "begin_string",
    "decode_char",
    "end_array",
    "end_object",
    "end_string",
    "match_char",
    "match_literal",
    "name_separator",
    "parse_array",
    "parse_boolean",
    "parse_name",
    "parse_null",
    "parse_number",
    "parse_object",
    "parse_primitive",
    "parse_string",
    "parse_structured",
    "parse_text",
    "parse_value",
    "skip_whitespace",
    "value_separator",
]
