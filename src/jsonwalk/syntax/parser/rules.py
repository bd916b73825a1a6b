"""Value grammar rules for the JSON scanner.

This module provides the value dispatcher and the structured-value rules:
- Literal values (null, true, false)
- Primitive dispatch (null, boolean, number, string)
- Structured values (arrays, objects), recursing into parse_value
- Whole texts (value surrounded by whitespace)

All rules are co-located in a single module because arrays and objects
recurse into parse_value and parse_value dispatches back into them.

Alternatives:
    parse_value tries null, boolean, number, string, array, object in that
    order. Every rule leaves its out-parameter untouched on failure, so
    trying the next alternative after a miss is always safe.

Security:
    Includes configurable nesting depth limit to prevent stack exhaustion
    from deeply nested input (e.g., [[[[ ... ]]]]). Exceeding the limit is
    an ordinary match failure.
"""

from dataclasses import dataclass, replace

from jsonwalk.constants import MAX_DEPTH
from jsonwalk.core.depth_guard import depth_clamp
from jsonwalk.enums import ValueKind
from jsonwalk.syntax.cursor import Cursor, Slot
from jsonwalk.syntax.parser.numbers import parse_number
from jsonwalk.syntax.parser.primitives import (
    begin_array,
    begin_object,
    end_array,
    end_object,
    match_literal,
    value_separator,
)
from jsonwalk.syntax.parser.strings import parse_name, parse_string
from jsonwalk.syntax.parser.whitespace import skip_whitespace

__all__ = [
    "ParseContext",
    "parse_array",
    "parse_boolean",
    "parse_null",
    "parse_object",
    "parse_primitive",
    "parse_structured",
    "parse_text",
    "parse_value",
]


@dataclass(frozen=True, slots=True)
class ParseContext:
    """Explicit context for nested parsing.

    Replaces global state with explicit parameter passing for:
    - Thread safety without global state
    - Easier testing (no state reset needed)
    - Clear dependency flow

    Attributes:
        max_nesting_depth: Maximum number of enclosing arrays/objects
        current_depth: Current nesting depth (0 = top level)
    """

    max_nesting_depth: int = MAX_DEPTH
    current_depth: int = 0

    def __post_init__(self) -> None:
        """Clamp max_nesting_depth against Python recursion limit."""
        object.__setattr__(self, "max_nesting_depth", depth_clamp(self.max_nesting_depth))

    def is_depth_exceeded(self) -> bool:
        """Check if maximum nesting depth has been reached."""
        return self.current_depth >= self.max_nesting_depth

    def enter_nested(self) -> "ParseContext":
        """Create new context with incremented depth for a nested container."""
        return replace(self, current_depth=self.current_depth + 1)


# =============================================================================
# Literals and primitives
# =============================================================================


def parse_null(cursor: Cursor | None) -> Cursor | None:
    """Parse the literal ``null``."""
    return match_literal(cursor, b"null")


def parse_boolean(cursor: Cursor | None, out: Slot[bool] | None = None) -> Cursor | None:
    """Parse ``true`` or ``false``.

    Args:
        cursor: Current position in source, or None
        out: Receives the boolean on success

    Returns:
        Cursor past the literal, or None
    """
    if (matched := match_literal(cursor, b"true")) is not None:
        value = True
    elif (matched := match_literal(cursor, b"false")) is not None:
        value = False
    else:
        return None
    if out is not None:
        out.value = value
    return matched


def parse_primitive(
    cursor: Cursor | None, out: Slot[ValueKind] | None = None
) -> Cursor | None:
    """Parse a non-recursive value: null, boolean, number or string.

    Args:
        cursor: Current position in source, or None
        out: Receives the kind of the recognized value on success

    Returns:
        Cursor past the value, or None
    """
    if cursor is None:
        return None

    if (matched := parse_null(cursor)) is not None:
        kind = ValueKind.NULL
    elif (matched := parse_boolean(cursor)) is not None:
        kind = ValueKind.BOOLEAN
    elif (matched := parse_number(cursor)) is not None:
        kind = ValueKind.NUMBER
    elif (matched := parse_string(cursor)) is not None:
        kind = ValueKind.STRING
    else:
        return None

    if out is not None:
        out.value = kind
    return matched


# =============================================================================
# Structured values
# =============================================================================


def parse_array(
    cursor: Cursor | None,
    out: Slot[int] | None = None,
    context: ParseContext | None = None,
) -> Cursor | None:
    """Parse array: ``[`` (value (``,`` value)*)? ``]``

    Args:
        cursor: Current position in source, or None
        out: Receives the element count on success
        context: Parse context for depth tracking

    Returns:
        Cursor past the closing bracket (and trailing whitespace), or None.
        A trailing comma or any failing element fails the array.
    """
    if cursor is None:
        return None
    if context is None:
        context = ParseContext()

    # Check nesting depth limit (DoS prevention)
    if context.is_depth_exceeded():
        return None
    nested_context = context.enter_nested()

    cursor = begin_array(cursor)
    if cursor is None:
        return None

    if (closed := end_array(cursor)) is not None:
        if out is not None:
            out.value = 0
        return closed

    length = 0
    while (cursor := parse_value(cursor, context=nested_context)) is not None:
        length += 1
        if (closed := end_array(cursor)) is not None:
            if out is not None:
                out.value = length
            return closed
        cursor = value_separator(cursor)
    return None


def parse_object(
    cursor: Cursor | None,
    out: Slot[int] | None = None,
    context: ParseContext | None = None,
) -> Cursor | None:
    """Parse object: ``{`` (member (``,`` member)*)? ``}``

    member ::= string ``:`` value. Duplicate names are legal and kept in
    scan order; nothing is deduplicated.

    Args:
        cursor: Current position in source, or None
        out: Receives the member count on success
        context: Parse context for depth tracking

    Returns:
        Cursor past the closing brace (and trailing whitespace), or None
    """
    if cursor is None:
        return None
    if context is None:
        context = ParseContext()

    # Check nesting depth limit (DoS prevention)
    if context.is_depth_exceeded():
        return None
    nested_context = context.enter_nested()

    cursor = begin_object(cursor)
    if cursor is None:
        return None

    if (closed := end_object(cursor)) is not None:
        if out is not None:
            out.value = 0
        return closed

    length = 0
    while (cursor := parse_value(parse_name(cursor), context=nested_context)) is not None:
        length += 1
        if (closed := end_object(cursor)) is not None:
            if out is not None:
                out.value = length
            return closed
        cursor = value_separator(cursor)
    return None


def parse_structured(
    cursor: Cursor | None,
    out: Slot[ValueKind] | None = None,
    context: ParseContext | None = None,
) -> Cursor | None:
    """Parse a recursive value: array or object.

    Args:
        cursor: Current position in source, or None
        out: Receives ValueKind.ARRAY or ValueKind.OBJECT on success
        context: Parse context for depth tracking

    Returns:
        Cursor past the value, or None
    """
    if cursor is None:
        return None

    if (matched := parse_array(cursor, context=context)) is not None:
        kind = ValueKind.ARRAY
    elif (matched := parse_object(cursor, context=context)) is not None:
        kind = ValueKind.OBJECT
    else:
        return None

    if out is not None:
        out.value = kind
    return matched


def parse_value(
    cursor: Cursor | None,
    out: Slot[ValueKind] | None = None,
    context: ParseContext | None = None,
) -> Cursor | None:
    """Parse any JSON value.

    Tries primitive values first, then structured ones.

    Args:
        cursor: Current position in source, or None
        out: Receives the kind of the value on success
        context: Parse context for depth tracking

    Returns:
        Cursor past the value, or None
    """
    if cursor is None:
        return None

    if (matched := parse_primitive(cursor, out)) is not None:
        return matched
    return parse_structured(cursor, out, context)


def parse_text(
    cursor: Cursor | None,
    out: Slot[ValueKind] | None = None,
    context: ParseContext | None = None,
) -> Cursor | None:
    """Parse a JSON text: whitespace, one value, whitespace.

    Bytes after the trailing whitespace are not examined. Callers that
    require the value to span the whole input must check
    ``result.is_eof`` themselves (JsonScanner.is_complete does).

    Example:
        >>> kind = Slot(ValueKind.NULL)
        >>> end = parse_text(Cursor(b" 123\\t", 0), kind)
        >>> end.is_eof, kind.value
        (True, <ValueKind.NUMBER: 'number'>)
    """
    return skip_whitespace(parse_value(skip_whitespace(cursor), out, context))
