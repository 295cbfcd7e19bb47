# =============================================================================
# tests/test_utils.py - Token Utility Tests
# =============================================================================
# Tests for lib/utils.py:
#   - stringify_token: JSON values -> string form
#   - parse_number: what counts as numeric
#   - format_number: rendering the sum
#   - dedupe: order-preserving uniqueness
#
# Run with: pytest tests/test_utils.py -v
# =============================================================================

import math

import pytest

from lib.utils import (
    dedupe,
    format_number,
    integer_part,
    parse_number,
    stringify_token,
)


# =============================================================================
# stringify_token
# =============================================================================

class TestStringifyToken:
    """Tests for stringify_token()."""

    def test_strings_unchanged(self):
        """Strings are returned as-is, whitespace included."""
        assert stringify_token("abc") == "abc"
        assert stringify_token(" 42 ") == " 42 "
        assert stringify_token("") == ""

    def test_integers(self):
        """JSON integers use their decimal form."""
        assert stringify_token(42) == "42"
        assert stringify_token(-7) == "-7"
        assert stringify_token(0) == "0"

    def test_floats(self):
        """Integral floats drop the trailing .0; others keep their fraction."""
        assert stringify_token(2.0) == "2"
        assert stringify_token(2.5) == "2.5"
        assert stringify_token(-0.0) == "0"
        assert stringify_token(0.00001) == "0.00001"

    def test_booleans_and_null(self):
        """Booleans and null use their JSON spelling, not Python's."""
        assert stringify_token(True) == "true"
        assert stringify_token(False) == "false"
        assert stringify_token(None) == "null"

    def test_containers(self):
        """Arrays are comma-joined; objects collapse to a fixed marker."""
        assert stringify_token([1, "b", None]) == "1,b,"
        assert stringify_token([]) == ""
        assert stringify_token({"k": "v"}) == "[object Object]"


# =============================================================================
# parse_number
# =============================================================================

class TestParseNumber:
    """Tests for parse_number()."""

    @pytest.mark.parametrize("text,expected", [
        ("0", 0),
        ("42", 42),
        ("-3", -3),
        ("+5", 5),
        ("007", 7),
        (" 12 ", 12),
        ("\t8\n", 8),
    ])
    def test_integers(self, text, expected):
        """Integer text parses to an exact int."""
        value = parse_number(text)
        assert value == expected
        assert isinstance(value, int)

    @pytest.mark.parametrize("text,expected", [
        ("2.5", 2.5),
        ("-0.5", -0.5),
        (".5", 0.5),
        ("5.", 5.0),
        ("1e3", 1000.0),
        ("1.5E-2", 0.015),
    ])
    def test_decimals(self, text, expected):
        """Fractions and exponents parse to float."""
        value = parse_number(text)
        assert value == pytest.approx(expected)
        assert isinstance(value, float)

    @pytest.mark.parametrize("text", [
        "",
        "   ",
        "abc",
        "12a",
        "a12",
        "1 2",
        "1_000",
        "0x1F",
        "Infinity",
        "-inf",
        "nan",
        "1e999",
        ".",
        "-",
        "٣",  # Arabic-Indic digit three
    ])
    def test_non_numeric(self, text):
        """Anything that is not entirely a finite decimal number is rejected."""
        assert parse_number(text) is None

    def test_large_integer_stays_exact(self):
        """Integers beyond float precision are not rounded."""
        assert parse_number("12345678901234567890123") == 12345678901234567890123

    def test_integer_beyond_float_range(self):
        """Integers too large for a float are not finite numbers."""
        assert parse_number("1" * 400) is None
        assert parse_number("-" + "9" * 309) is None

    def test_integer_at_float_range_accepted(self):
        """The largest integers a float can hold still parse exactly."""
        assert parse_number("9" * 308) == int("9" * 308)


class TestIntegerPart:
    """Tests for integer_part()."""

    def test_truncates_toward_zero(self):
        """Parity is decided on the truncated value."""
        assert integer_part(2.9) == 2
        assert integer_part(-2.9) == -2
        assert integer_part(7) == 7


# =============================================================================
# format_number
# =============================================================================

class TestFormatNumber:
    """Tests for format_number()."""

    def test_int(self):
        """Integers render exactly."""
        assert format_number(0) == "0"
        assert format_number(-15) == "-15"

    def test_integral_float(self):
        """Whole floats render without a decimal point."""
        assert format_number(6.0) == "6"
        assert format_number(-0.0) == "0"

    def test_fractional_float(self):
        """Fractions keep the shortest round-trip form."""
        assert format_number(6.5) == "6.5"
        assert format_number(0.1 + 0.2) == "0.30000000000000004"

    def test_non_finite(self):
        """Non-finite totals use their JSON-style names."""
        assert format_number(math.inf) == "Infinity"
        assert format_number(-math.inf) == "-Infinity"
        assert format_number(math.nan) == "NaN"

    @pytest.mark.parametrize("value,expected", [
        (0.00001, "0.00001"),
        (1.5e-5, "0.000015"),
        (-0.00001, "-0.00001"),
        (0.000001, "0.000001"),
    ])
    def test_small_decimals_written_out(self, value, expected):
        """Magnitudes down to 1e-6 never use exponent form."""
        assert format_number(value) == expected

    @pytest.mark.parametrize("value,expected", [
        (1e-7, "1e-7"),
        (1.5e-7, "1.5e-7"),
        (-2e-10, "-2e-10"),
        (1e21, "1e+21"),
        (1.5e300, "1.5e+300"),
    ])
    def test_exponent_form_outside_range(self, value, expected):
        """Below 1e-6 or from 1e21 up, digits are kept with a signed exponent."""
        assert format_number(value) == expected


# =============================================================================
# dedupe
# =============================================================================

class TestDedupe:
    """Tests for dedupe()."""

    def test_keeps_first_occurrence_order(self):
        """Later repeats are dropped; order is preserved."""
        assert dedupe(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]

    def test_empty(self):
        """Nothing in, nothing out."""
        assert dedupe([]) == []
