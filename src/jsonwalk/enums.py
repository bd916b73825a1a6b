"""Enumerations for jsonwalk type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum

__all__ = ["ValueKind"]


class ValueKind(StrEnum):
    """Kind of a JSON value recognized by the value parser.

    StrEnum provides automatic string conversion: str(ValueKind.NULL) == "null"
    """

    NULL = "null"
    """Literal null"""

    BOOLEAN = "boolean"
    """Literal true or false"""

    NUMBER = "number"
    """Numeric literal: -12.5e3"""

    STRING = "string"
    """Quoted string literal"""

    ARRAY = "array"
    """Bracketed element list: [1, 2]"""

    OBJECT = "object"
    """Braced member list: {"a": 1}"""

    @property
    def is_primitive(self) -> bool:
        """True for the non-recursive kinds."""
        return self not in (ValueKind.ARRAY, ValueKind.OBJECT)
