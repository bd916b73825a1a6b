"""Tests for syntax.parser.numbers: parse_number.

Covers the RFC 8259 number grammar, float conversion by decimal scaling,
and saturation of extreme exponents.
"""

from __future__ import annotations

import math

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from jsonwalk.syntax.cursor import Cursor, Slot
from jsonwalk.syntax.parser.numbers import parse_number


def _parse(source: bytes) -> tuple[int, float] | None:
    value = Slot(math.nan)
    result = parse_number(Cursor(source, 0), value)
    if result is None:
        return None
    return (result.pos, value.value)


# ============================================================================
# GRAMMAR
# ============================================================================


class TestNumberGrammar:
    """Test which byte sequences scan as numbers, and how far."""

    @pytest.mark.parametrize(
        ("source", "end"),
        [
            (b"0", 1),
            (b"-0", 2),
            (b"123", 3),
            (b"-1.5e2,", 6),
            (b"1E+2]", 4),
            (b"1e-2 ", 4),
            (b"0.25}", 4),
            (b"10.0e0", 6),
        ],
    )
    def test_valid_numbers(self, source: bytes, end: int) -> None:
        """Valid literals end exactly at the first byte outside the grammar."""
        parsed = _parse(source)

        assert parsed is not None
        assert parsed[0] == end

    @pytest.mark.parametrize(
        "source",
        [b"", b"-", b"+1", b".5", b"1.", b"1.e3", b"1e", b"1e+", b"-x", b"Infinity", b"NaN"],
    )
    def test_invalid_numbers_leave_slot_untouched(self, source: bytes) -> None:
        """A missing mandatory digit run fails the whole number."""
        value = Slot(-7.0)

        assert parse_number(Cursor(source, 0), value) is None
        assert value.value == -7.0

    def test_leading_zero_ends_integer_part(self) -> None:
        """012 scans as 0 with 12 left over."""
        assert _parse(b"012") == (1, 0.0)

    def test_none_passes_through(self) -> None:
        """A None cursor short-circuits to None."""
        assert parse_number(None) is None

    def test_starts_mid_buffer(self) -> None:
        """Parsing starts at the cursor, not at offset 0."""
        value = Slot(0.0)
        result = parse_number(Cursor(b"[42]", 1), value)

        assert result is not None
        assert result.pos == 3
        assert value.value == 42.0


# ============================================================================
# CONVERSION
# ============================================================================


class TestNumberConversion:
    """Test float values produced by the scaling conversion."""

    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            (b"0", 0.0),
            (b"7", 7.0),
            (b"-12", -12.0),
            (b"1e3", 1000.0),
            (b"-1.5e2", -150.0),
            (b"0.5", 0.5),
            (b"0.1", 0.1),
            (b"25e-1", 2.5),
            (b"1E+2", 100.0),
        ],
    )
    def test_exact_values(self, source: bytes, expected: float) -> None:
        """Short literals convert to the nearest double."""
        parsed = _parse(source)

        assert parsed is not None
        assert parsed[1] == expected

    def test_negative_zero_keeps_sign(self) -> None:
        """-0 is negative zero."""
        parsed = _parse(b"-0")

        assert parsed is not None
        assert parsed[1] == 0.0
        assert math.copysign(1.0, parsed[1]) == -1.0

    def test_fraction_close_to_decimal(self) -> None:
        """Longer fractions are close to the decimal they spell."""
        parsed = _parse(b"3.14159")

        assert parsed is not None
        assert parsed[1] == pytest.approx(3.14159)

    def test_overflow_to_infinity(self) -> None:
        """An exponent beyond the double range yields inf."""
        assert _parse(b"1e400") == (5, math.inf)
        assert _parse(b"-1e400") == (6, -math.inf)

    def test_underflow_to_zero(self) -> None:
        """A tiny exponent yields 0.0."""
        assert _parse(b"1e-400") == (6, 0.0)

    def test_huge_exponent_saturates(self) -> None:
        """Exponents far beyond 16 bits do not wrap around."""
        source = b"1e" + b"9" * 50
        assert _parse(source) == (len(source), math.inf)

        source = b"1e-" + b"9" * 50
        assert _parse(source) == (len(source), 0.0)

    def test_exponent_of_65536_does_not_alias_zero(self) -> None:
        """1e65536 is inf, not 1e0."""
        parsed = _parse(b"1e65536")

        assert parsed is not None
        assert parsed[1] == math.inf

    def test_zero_with_huge_exponent(self) -> None:
        """Zero stays zero whatever the exponent."""
        assert _parse(b"0e99999") == (7, 0.0)

    def test_long_fraction_offsets_exponent(self) -> None:
        """Fraction digits and exponent cancel before saturation."""
        source = b"0." + b"0" * 2000 + b"1e2000"
        parsed = _parse(source)

        assert parsed is not None
        assert parsed[0] == len(source)
        assert parsed[1] == 0.1

    def test_many_integer_digits_overflow(self) -> None:
        """Hundreds of integer digits overflow the significand to inf."""
        source = b"1" + b"0" * 400
        assert _parse(source) == (len(source), math.inf)

    @given(st.integers(min_value=-(10**15), max_value=10**15))
    def test_integers_exact(self, number: int) -> None:
        """Property: integers below 2**53 convert exactly."""
        event(f"sign={'neg' if number < 0 else 'nonneg'}")
        parsed = _parse(str(number).encode("ascii"))

        assert parsed is not None
        assert parsed[1] == float(number)

    @given(st.floats(allow_nan=False, allow_infinity=False, min_value=-1e200, max_value=1e200))
    def test_repr_roundtrip_is_close(self, number: float) -> None:
        """Property: repr() of a float scans back to a nearby value."""
        source = repr(number).encode("ascii")
        parsed = _parse(source)

        assert parsed is not None
        assert parsed[0] == len(source)
        assert parsed[1] == pytest.approx(number, rel=1e-9, abs=1e-300)
