"""Core utilities shared across the scanner and its outer surfaces.

Exports:
    depth_clamp: Clamp a nesting depth against the interpreter recursion limit

Python 3.13+.
"""

from .depth_guard import depth_clamp

__all__ = ["depth_clamp"]
