"""Hypothesis strategies for jsonwalk property-based testing.

Usage:
    from tests.strategies import json_documents, nested_containers
"""

from .documents import (
    JSON_WHITESPACE,
    NON_VALUE_STARTERS,
    json_arrays,
    json_documents,
    json_objects,
    json_scalars,
    json_texts,
    json_values,
    json_whitespace,
    kind_of,
    nested_containers,
)

__all__ = [
    "JSON_WHITESPACE",
    "NON_VALUE_STARTERS",
    "json_arrays",
    "json_documents",
    "json_objects",
    "json_scalars",
    "json_texts",
    "json_values",
    "json_whitespace",
    "kind_of",
    "nested_containers",
]
