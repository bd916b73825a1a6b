"""Depth limiting for recursion protection.

Nested arrays and objects are scanned by genuine recursion, so the nesting
limit of a ParseContext must stay below what the interpreter stack can take.
depth_clamp() converts a requested nesting depth into a safe one.

Thread-safe: pure function, no shared state.
Python 3.13+.
"""

from __future__ import annotations

import logging
import sys

from jsonwalk.constants import FRAMES_PER_LEVEL
from jsonwalk.diagnostics.templates import ErrorTemplate

__all__ = ["depth_clamp"]

logger = logging.getLogger(__name__)


def depth_clamp(
    requested_depth: int,
    reserve_frames: int = 50,
    frames_per_level: int = FRAMES_PER_LEVEL,
) -> int:
    """Clamp requested nesting depth against Python recursion limit.

    Validates requested depth against sys.getrecursionlimit() to prevent
    RecursionError on systems with constrained stack limits. Logs warning
    if clamping occurs.

    Args:
        requested_depth: Desired maximum nesting depth
        reserve_frames: Stack frames to reserve for call overhead (default: 50)
        frames_per_level: Stack frames consumed per nesting level

    Returns:
        Safe depth value, clamped if necessary

    Example:
        >>> import sys
        >>> sys.setrecursionlimit(1000)
        >>> depth_clamp(100)  # OK, 400 frames fit
        100
        >>> depth_clamp(500)  # 2000 frames do not, clamped to (1000 - 50) // 4
        237
    """
    recursion_limit = sys.getrecursionlimit()
    max_safe_depth = max((recursion_limit - reserve_frames) // frames_per_level, 1)
    if requested_depth > max_safe_depth:
        diagnostic = ErrorTemplate.depth_clamped(
            requested_depth, max_safe_depth, recursion_limit
        )
        logger.warning("%s", diagnostic.message)
        return max_safe_depth
    return requested_depth
