"""Number literal scanning for the JSON scanner.

Grammar (RFC 8259):
    number = [ "-" ] int [ frac ] [ exp ]
    int    = "0" / ( digit1-9 *DIGIT )
    frac   = "." 1*DIGIT
    exp    = ( "e" / "E" ) [ "-" / "+" ] 1*DIGIT

Conversion:
    Digits accumulate into a float significand, ignoring the decimal point;
    the number of fractional digits becomes a negative shift of the exponent.
    The value is the significand scaled by repeated multiplication or
    division by ten. The exponent is a signed int, not a wrapping 16-bit
    counter, so huge exponents saturate to inf or 0.0 instead of aliasing.
"""

import math

from jsonwalk.constants import ASCII_DIGITS
from jsonwalk.syntax.cursor import Cursor, Slot

__all__ = ["parse_number"]

_MINUS = ord("-")
_PLUS = ord("+")
_ZERO = ord("0")
_POINT = ord(".")
_EXPONENT_MARKERS = b"eE"

# Decades beyond the fractional shift after which any finite significand has
# reached inf or 0.0 (doubles span roughly 1e-324 to 1e308).
_EXPONENT_SATURATION = 1000


def _digit_run(cursor: Cursor) -> tuple[str, Cursor] | None:
    """Consume a non-empty run of ASCII digits."""
    source = cursor.source
    pos = cursor.pos
    end = len(source)
    while pos < end and source[pos] in ASCII_DIGITS:
        pos += 1
    if pos == cursor.pos:
        return None
    return (cursor.slice_to(pos).decode("ascii"), Cursor(source, pos))


def _accumulate(significand: float, digits: str) -> float:
    for digit in digits:
        significand = significand * 10 + (ord(digit) - _ZERO)
    return significand


def _exponent_magnitude(digits: str, cap: int) -> int:
    """Read exponent digits, saturating at cap.

    Past the cap the scaled value is already inf or 0.0, so further digits
    cannot change it. Avoids int(str) and its digit-count limit.
    """
    magnitude = 0
    for digit in digits:
        magnitude = magnitude * 10 + (ord(digit) - _ZERO)
        if magnitude > cap:
            return cap
    return magnitude


def _scale(significand: float, exponent: int) -> float:
    """Multiply significand by 10**exponent one decade at a time.

    Loops stop once the value can no longer change (inf, 0.0 or NaN), which
    keeps huge exponent literals cheap without changing the result.
    """
    while exponent > 0 and math.isfinite(significand) and significand != 0:
        significand *= 10
        exponent -= 1
    while exponent < 0 and significand != 0 and math.isfinite(significand):
        significand /= 10
        exponent += 1
    return significand


def parse_number(cursor: Cursor | None, out: Slot[float] | None = None) -> Cursor | None:
    """Parse number literal: -?(0|[1-9][0-9]*)(.[0-9]+)?([eE][+-]?[0-9]+)?

    A missing mandatory digit run (integer part, fraction after ``.``,
    exponent after ``e``) fails the whole number. A leading ``0`` ends the
    integer part, so ``012`` scans as ``0`` followed by unconsumed ``12``.

    Args:
        cursor: Current position in source, or None
        out: Receives the value as a float on success

    Returns:
        Cursor past the literal, or None

    Example:
        >>> value = Slot(0.0)
        >>> parse_number(Cursor(b"-1.5e2,", 0), value).pos
        6
        >>> value.value
        -150.0
    """
    if cursor is None:
        return None

    sign = 1
    if cursor.peek() == _MINUS:
        sign = -1
        cursor = cursor.advance()

    significand = 0.0
    if cursor.peek() == _ZERO:
        cursor = cursor.advance()
    else:
        run = _digit_run(cursor)
        if run is None:
            return None
        digits, cursor = run
        significand = _accumulate(significand, digits)

    shift = 0
    if cursor.peek() == _POINT:
        run = _digit_run(cursor.advance())
        if run is None:
            return None
        digits, cursor = run
        significand = _accumulate(significand, digits)
        shift = len(digits)

    exponent = 0
    marker = cursor.peek()
    if marker is not None and marker in _EXPONENT_MARKERS:
        cursor = cursor.advance()
        exponent_sign = 1
        if cursor.peek() == _MINUS:
            exponent_sign = -1
            cursor = cursor.advance()
        elif cursor.peek() == _PLUS:
            cursor = cursor.advance()
        run = _digit_run(cursor)
        if run is None:
            return None
        digits, cursor = run
        exponent = exponent_sign * _exponent_magnitude(digits, shift + _EXPONENT_SATURATION)

    if out is not None:
        out.value = _scale(sign * significand, exponent - shift)
    return cursor
