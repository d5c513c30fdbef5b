# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
This module provides the decimal arithmetic used by every calculator.

Binary floats accumulate error over thirty years of compounding, so all
intermediate arithmetic runs on decimal.Decimal under a dedicated context
(28 significant digits, half-up rounding). Values are rounded to their
reporting precision only at computation boundaries.
"""

import decimal
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Union

DecimalValue = Union[Decimal, int, float, str]

FINANCIAL_PRECISION = 28

FINANCIAL_CONTEXT = decimal.Context(prec=FINANCIAL_PRECISION, rounding=ROUND_HALF_UP)

CURRENCY_DECIMALS = 2
PERCENTAGE_DECIMALS = 4
RATIO_DECIMALS = 2

_ZERO = Decimal(0)
_ONE = Decimal(1)


def to_decimal(value: DecimalValue) -> Decimal:
    """Convert a value to Decimal.

    Floats go through their shortest repr so that 123.455 becomes
    Decimal("123.455") rather than its binary expansion.

    Args:
        value (DecimalValue): The number to convert.

    Returns:
        Decimal: The converted value.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(repr(value))
    return Decimal(value)


def financial_context():
    """Context manager applying FINANCIAL_CONTEXT to the enclosed arithmetic."""
    return decimal.localcontext(FINANCIAL_CONTEXT)


def _quantize(value: DecimalValue, places: int) -> float:
    exponent = Decimal(1).scaleb(-places)
    return float(to_decimal(value).quantize(exponent, rounding=ROUND_HALF_UP))


def round_currency(value: DecimalValue) -> float:
    """Round a monetary value to 2 decimal places, half-up.

    Examples:
        >>> round_currency(123.455)
        123.46
    """
    return _quantize(value, CURRENCY_DECIMALS)


def round_percentage(value: DecimalValue) -> float:
    """Round a rate or percentage to 4 decimal places, half-up."""
    return _quantize(value, PERCENTAGE_DECIMALS)


def round_ratio(value: DecimalValue) -> float:
    """Round a ratio (e.g. students per teacher) to 2 decimal places, half-up."""
    return _quantize(value, RATIO_DECIMALS)


def equals(a: DecimalValue, b: DecimalValue, tolerance: DecimalValue = 0.01) -> bool:
    """Check whether two values are equal within `tolerance` (inclusive)."""
    with financial_context():
        return abs(to_decimal(a) - to_decimal(b)) <= to_decimal(tolerance)


def sum(values: Iterable[DecimalValue]) -> Decimal:  # noqa: A001
    """Sum values exactly. An empty iterable sums to 0."""
    total = _ZERO
    with financial_context():
        for value in values:
            total += to_decimal(value)
    return total


def product(values: Iterable[DecimalValue]) -> Decimal:
    """Multiply values together. An empty iterable gives 1."""
    result = _ONE
    with financial_context():
        for value in values:
            result *= to_decimal(value)
    return result


def safe_divide(dividend: DecimalValue, divisor: DecimalValue) -> Decimal:
    """Divide, returning 0 instead of raising when the divisor is 0."""
    divisor_decimal = to_decimal(divisor)
    if divisor_decimal.is_zero():
        return _ZERO
    with financial_context():
        return to_decimal(dividend) / divisor_decimal


def compound(base: DecimalValue, rate: DecimalValue, periods: int) -> Decimal:
    """base x (1 + rate) ** periods, unrounded."""
    with financial_context():
        return to_decimal(base) * (_ONE + to_decimal(rate)) ** periods
