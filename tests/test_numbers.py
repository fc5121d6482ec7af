"""Unit tests for svg_shape2path.svg.numbers: coercion and path-data formatting."""

from __future__ import annotations

import math

import pytest

from svg_shape2path.svg.numbers import format_number, parse_number_list, to_number


class TestToNumber:
    """Tests for attribute text coercion."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("10", 10.0),
            ("-3.5", -3.5),
            ("+.5", 0.5),
            ("5.", 5.0),
            ("1e3", 1000.0),
            ("2.5E-1", 0.25),
            ("  7\n", 7.0),
            ("0x1A", 26.0),
        ],
    )
    def test_plain_numbers(self, text: str, expected: float) -> None:
        assert to_number(text) == expected

    @pytest.mark.parametrize("text", ["", "   ", None])
    def test_empty_is_zero(self, text: str | None) -> None:
        """Empty or missing text coerces to 0, as in markup hosts."""
        assert to_number(text) == 0.0

    @pytest.mark.parametrize("text", ["100%", "10px", "1em", "abc", "1,5", "nan", "inf", "1_000", "-0x10"])
    def test_non_numbers_are_nan(self, text: str) -> None:
        """Units, words, and Python-only spellings do not parse."""
        assert math.isnan(to_number(text))

    def test_infinity_spelling(self) -> None:
        assert to_number("Infinity") == math.inf
        assert to_number("-Infinity") == -math.inf

    def test_huge_hex_is_infinite(self) -> None:
        """Hex literals beyond the float range coerce to infinity."""
        assert to_number("0x" + "f" * 300) == math.inf

    def test_huge_decimal_is_infinite(self) -> None:
        assert to_number("1e400") == math.inf
        assert to_number("-1e400") == -math.inf

    @pytest.mark.parametrize(
        "space", ["\u2028", "\u2029", "\u3000", "\u1680", "\u2003", "\u202f", "\u205f"]
    )
    def test_unicode_spaces_are_trimmed(self, space: str) -> None:
        assert to_number(f"{space}12{space}") == 12.0


class TestParseNumberList:
    """Tests for list attribute parsing."""

    def test_mixed_separators(self) -> None:
        assert parse_number_list("0,0 10 , 0\t10,10") == [0, 0, 10, 0, 10, 10]

    def test_numbers_without_separators(self) -> None:
        """Signs and decimal points start new numbers."""
        assert parse_number_list("1-2.5.5") == [1.0, -2.5, 0.5]

    def test_no_numbers(self) -> None:
        assert parse_number_list("none") == []


class TestFormatNumber:
    """Tests for shortest round-trip formatting."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (0.0, "0"),
            (-0.0, "0"),
            (10.0, "10"),
            (-1.5, "-1.5"),
            (123.456, "123.456"),
            (0.1 + 0.2, "0.30000000000000004"),
            (0.000123, "0.000123"),
            (1e-6, "0.000001"),
            (1e-7, "1e-7"),
            (1.5e-7, "1.5e-7"),
            (1e16, "10000000000000000"),
            (1e20, "100000000000000000000"),
            (1e21, "1e+21"),
            (1.5e300, "1.5e+300"),
        ],
    )
    def test_format(self, value: float, expected: str) -> None:
        assert format_number(value) == expected

    def test_non_finite(self) -> None:
        assert format_number(math.nan) == "NaN"
        assert format_number(math.inf) == "Infinity"
        assert format_number(-math.inf) == "-Infinity"
