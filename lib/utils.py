# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Token helpers used by the classifier:
# - stringify_token: JSON value -> its string form
# - parse_number: string form -> finite int/float, or None
# - format_number: numeric total -> decimal string
# - dedupe: order-preserving de-duplication
# =============================================================================

import math
import re
import sys
from decimal import Decimal
from typing import Any, Iterable

Number = int | float


# =============================================================================
# Token Coercion
# =============================================================================

def stringify_token(value: Any) -> str:
    """
    Convert a JSON-decoded value to its string form.

    Numbers, booleans and null use the spelling a JSON client sends for
    them, so 42 and "42" end up with the same string form.

    Example:
        stringify_token("a")      # "a"
        stringify_token(42)       # "42"
        stringify_token(2.0)      # "2"
        stringify_token(True)     # "true"
        stringify_token(None)     # "null"
        stringify_token([1, "b"]) # "1,b"
        stringify_token({})       # "[object Object]"
    """
    if isinstance(value, str):
        return value
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, (int, float)):
        return format_number(value)
    if isinstance(value, (list, tuple)):
        return ",".join("" if item is None else stringify_token(item) for item in value)
    if isinstance(value, dict):
        return "[object Object]"
    return str(value)


# =============================================================================
# Numeric Parsing
# =============================================================================

# Optional sign, digits with optional fraction (or a leading-dot fraction),
# optional exponent. Hex/octal/binary literals and Infinity are not numbers here.
_NUMBER_PATTERN = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_number(text: str) -> Number | None:
    """
    Parse a token's string form as a finite number.

    Leading/trailing whitespace is ignored. Returns None when the trimmed
    text is empty or is not entirely a decimal number.

    Integers come back as int (exact); anything with a fraction or exponent
    comes back as float. Either way the magnitude must fit in a float.

    Args:
        text: The token's string form

    Returns:
        The parsed value, or None if the text is not numeric
    """
    stripped = text.strip()
    if not stripped:
        return None

    if _INTEGER_PATTERN.fullmatch(stripped):
        try:
            value = int(stripped)
        except ValueError:
            # exceeds the interpreter's int string-conversion limit
            return None
        return value if abs(value) <= sys.float_info.max else None

    if _NUMBER_PATTERN.fullmatch(stripped):
        value = float(stripped)
        # "1e999" overflows to inf
        return value if math.isfinite(value) else None

    return None


def integer_part(value: Number) -> int:
    """Truncate toward zero; parity is decided on this value."""
    return value if isinstance(value, int) else math.trunc(value)


def format_number(value: Number) -> str:
    """
    Render a number as a decimal string.

    Whole values have no trailing ".0". Magnitudes from 1e-6 up to 1e21 are
    written out in full; outside that range the shortest digits are kept in
    exponent form. Non-finite values use their JSON-style names.

    Example:
        format_number(6)        # "6"
        format_number(6.0)      # "6"
        format_number(6.5)      # "6.5"
        format_number(-0.0)     # "0"
        format_number(0.00001)  # "0.00001"
        format_number(1e-7)     # "1e-7"
        format_number(1e21)     # "1e+21"
    """
    if isinstance(value, int):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))

    text = repr(value)
    if "e" not in text:
        return text
    if 1e-6 <= abs(value) < 1e21:
        return format(Decimal(text), "f")
    mantissa, exponent = text.split("e")
    return f"{mantissa}e{int(exponent):+d}"


# =============================================================================
# Collections
# =============================================================================

def dedupe(items: Iterable[str]) -> list[str]:
    """Drop repeated values, keeping the first occurrence of each."""
    return list(dict.fromkeys(items))
