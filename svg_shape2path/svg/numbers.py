"""Numeric coercion and formatting for SVG attribute values.

Attribute text is coerced with markup number rules: whitespace is ignored,
empty text is zero, and anything carrying units or words is NaN. Numbers are
written back into path data in their shortest round-trip form.
"""

from __future__ import annotations

import math
import re

# Number grammar used inside list attributes such as polygon ``points``
NUMBER_RE = re.compile(r"[-+]?(?:\d*\.\d+|\d+\.?)(?:[eE][-+]?\d+)?")

_DECIMAL_RE = re.compile(r"^[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?$")
_HEX_RE = re.compile(r"^0[xX][0-9a-fA-F]+$")
_INFINITY_RE = re.compile(r"^[-+]?Infinity$")

# Whitespace and line terminators trimmed from markup numbers, including
# every Unicode space separator
_WHITESPACE = (
    " \t\n\r\f\v\u00a0\ufeff\u1680\u2000\u2001\u2002\u2003\u2004\u2005"
    "\u2006\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000"
)


def to_number(text: str | None) -> float:
    """Coerce attribute text to a float.

    Args:
        text: Raw attribute value. None is treated as empty.

    Returns:
        The numeric value, 0.0 for empty text, or NaN when the text is not a
        plain number (e.g. ``"100%"`` or ``"10px"``).
    """
    if text is None:
        return 0.0
    value = text.strip(_WHITESPACE)
    if not value:
        return 0.0
    if _DECIMAL_RE.match(value):
        return float(value)
    if _HEX_RE.match(value):
        try:
            return float(int(value, 16))
        except OverflowError:
            return math.inf
    if _INFINITY_RE.match(value):
        return -math.inf if value.startswith("-") else math.inf
    return math.nan


def parse_number_list(text: str) -> list[float]:
    """Extract every number from a list attribute, ignoring separators."""
    return [float(match) for match in NUMBER_RE.findall(text)]


def format_number(value: float) -> str:
    """Format a number the way path data expects it.

    Integral values drop the fraction, ``-0`` becomes ``0``, and exponent
    notation is used only below 1e-6 or from 1e21 upwards.

    Examples:
        >>> format_number(10.0)
        '10'
        >>> format_number(0.1 + 0.2)
        '0.30000000000000004'
        >>> format_number(1e21)
        '1e+21'
        >>> format_number(1e-7)
        '1e-7'
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "-Infinity" if value < 0 else "Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    # repr() yields the shortest round-trip digits; normalize them to
    # a digit string plus a decimal point position
    mantissa, _, exp_text = repr(abs(value)).partition("e")
    int_part, _, frac_part = mantissa.partition(".")
    if frac_part == "0":
        frac_part = ""
    digits = (int_part + frac_part).lstrip("0")
    point = len(int_part) + (int(exp_text) if exp_text else 0)
    if int_part == "0":
        # 0.000123 -> digits "123", point shifted past the leading zeros
        stripped = frac_part.lstrip("0")
        point -= len(frac_part) - len(stripped) + 1
        digits = stripped
    digits = digits.rstrip("0") or "0"
    k = len(digits)

    if k <= point <= 21:
        return sign + digits + "0" * (point - k)
    if 0 < point <= 21:
        return sign + digits[:point] + "." + digits[point:]
    if -6 < point <= 0:
        return sign + "0." + "0" * (-point) + digits

    exponent = point - 1
    exp_sign = "+" if exponent >= 0 else "-"
    head = digits[0] if k == 1 else digits[0] + "." + digits[1:]
    return f"{sign}{head}e{exp_sign}{abs(exponent)}"
