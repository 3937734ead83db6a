"""Tests for formatting/numbers.py: coercion and number rendering."""

from __future__ import annotations

import math

import pytest

from mutkit.formatting import numbers


class TestCoercion:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [(None, 0.0), (True, 1.0), (False, 0.0), (3, 3.0), ("  2.5 ", 2.5), ("", 0.0),
         ("0x1A", 26.0), ("0b101", 5.0), ("-Infinity", -math.inf), (".5", 0.5)],
    )
    def test_to_number(self, value: object, expected: float) -> None:
        assert numbers.to_number(value) == expected

    @pytest.mark.parametrize("value", ["abc", "1_000", "inf", object(), [1]])
    def test_to_number_nan(self, value: object) -> None:
        assert math.isnan(numbers.to_number(value))

    def test_to_uint32(self) -> None:
        assert numbers.to_uint32(-1) == 2**32 - 1
        assert numbers.to_uint32(2**32 + 5) == 5
        assert numbers.to_uint32(7.9) == 7
        assert numbers.to_uint32("nope") == 0
        assert numbers.to_uint32(math.inf) == 0

    def test_huge_integers(self) -> None:
        assert numbers.to_number(10**400) == math.inf
        assert numbers.to_number(-(10**400)) == -math.inf
        assert numbers.to_uint32(10**400) == 0
        assert numbers.to_uint32(2**40 + 255) == 255

    def test_parse_int(self) -> None:
        assert numbers.parse_int("  -12px") == -12
        assert numbers.parse_int(12) == 12
        assert numbers.parse_int(-2.7) == -2
        assert numbers.parse_int(True) is None
        assert numbers.parse_int("px12") is None
        assert numbers.parse_int(math.nan) is None


class TestRendering:
    def test_to_fixed_rounds_half_up(self) -> None:
        assert numbers.to_fixed(2.5, 0) == "3"
        assert numbers.to_fixed(0.5, 0) == "1"
        assert numbers.to_fixed(1.25, 1) == "1.3"

    def test_to_fixed_large_values_use_number_string(self) -> None:
        assert numbers.to_fixed(1e21, 2) == "1e+21"

    def test_to_fixed_negative(self) -> None:
        assert numbers.to_fixed(-1.5, 2) == "-1.50"

    def test_to_exponential(self) -> None:
        assert numbers.to_exponential(123456, 2) == "1.23e+5"
        assert numbers.to_exponential(0.00015, 1) == "1.5e-4"
        assert numbers.to_exponential(9.99, 1) == "1.0e+1"
        assert numbers.to_exponential(5, 0) == "5e+0"

    def test_to_precision(self) -> None:
        assert numbers.to_precision(0.000123, 2) == "0.00012"
        assert numbers.to_precision(1e-7, 2) == "1.0e-7"
        assert numbers.to_precision(123.456, 4) == "123.5"
        assert numbers.to_precision(123.456, 2) == "1.2e+2"
        assert numbers.to_precision(0, 3) == "0.00"

    def test_to_precision_zero_is_one_digit(self) -> None:
        assert numbers.to_precision(2.7, 0) == "3"

    def test_to_precision_without_precision(self) -> None:
        assert numbers.to_precision(2.1) == "2.1"

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(123.456, "123.456"), (1e21, "1e+21"), (1e20, "100000000000000000000"),
         (0.000001, "0.000001"), (1.5e-7, "1.5e-7"), (-2.0, "-2"), (0.0, "0"),
         (math.nan, "NaN"), (-math.inf, "-Infinity")],
    )
    def test_number_to_string(self, value: float, expected: str) -> None:
        assert numbers.number_to_string(value) == expected

    def test_literal_keeps_strings(self) -> None:
        assert numbers.literal("2.100") == "2.100"
        assert numbers.literal(100.0) == "100"
        assert numbers.literal(7) == "7"
