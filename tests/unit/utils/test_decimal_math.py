# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for decimal arithmetic helpers."""

from decimal import Decimal

from campusplan.utils.decimal import (
    compound,
    equals,
    product,
    round_currency,
    round_percentage,
    round_ratio,
    safe_divide,
    sum,
    to_decimal,
)


class TestRounding:
    """Rounding is half-up at every precision."""

    def test_round_currency_half_up(self):
        assert round_currency(123.455) == 123.46
        assert round_currency(123.454) == 123.45

    def test_round_currency_negative_rounds_away_from_zero(self):
        assert round_currency(-123.455) == -123.46

    def test_round_currency_returns_float(self):
        assert isinstance(round_currency(Decimal("1.005")), float)
        assert round_currency(Decimal("1.005")) == 1.01

    def test_round_percentage(self):
        assert round_percentage(0.123456) == 0.1235
        assert round_percentage(0.12345) == 0.1235

    def test_round_ratio(self):
        assert round_ratio(12.345) == 12.35


class TestConversion:
    def test_float_uses_shortest_repr(self):
        assert to_decimal(123.455) == Decimal("123.455")
        assert to_decimal(0.1) + to_decimal(0.2) == Decimal("0.3")

    def test_decimal_passes_through(self):
        value = Decimal("1.5")
        assert to_decimal(value) is value

    def test_int_and_str(self):
        assert to_decimal(5) == Decimal(5)
        assert to_decimal("2.25") == Decimal("2.25")


class TestAggregation:
    def test_sum_is_exact(self):
        assert sum([0.1, 0.2]) == Decimal("0.3")

    def test_sum_empty_is_zero(self):
        assert sum([]) == 0

    def test_product(self):
        assert product([2, 0.5, 3]) == 3
        assert product([]) == 1

    def test_compound(self):
        assert compound(100, 0.1, 2) == Decimal("121")
        assert compound(100, 0.1, 0) == Decimal("100")


class TestSafeDivide:
    def test_divide_by_zero_returns_zero(self):
        for dividend in (0, 1, -5, 1_000_000.5):
            assert safe_divide(dividend, 0) == 0
            assert safe_divide(dividend, 0.0) == 0

    def test_regular_division(self):
        assert safe_divide(10, 4) == Decimal("2.5")


class TestEquals:
    def test_within_tolerance_is_inclusive(self):
        assert equals(1.0, 1.01)
        assert equals(1.0, 1.009)

    def test_outside_tolerance(self):
        assert not equals(1.0, 1.02)

    def test_custom_tolerance(self):
        assert equals(100, 101, tolerance=1)
        assert not equals(100, 101, tolerance=0.5)
