# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Financial calculation functions.

Contains static methods for discounting. These functions are pure
(math-only) and independent of any schedule; other modules should delegate
to these to ensure a single source of truth for financial calculations.
"""

from __future__ import annotations

from typing import Sequence

from ..utils.decimal import financial_context, round_currency, to_decimal
from .primitives import require_non_negative


class FinancialCalculations:
    """
    Pure mathematical functions for financial calculations.

    Annual discounting on decimal arithmetic: the first cash flow is
    undiscounted and each later one is discounted by one more year.
    """

    @staticmethod
    def calculate_npv(
        cash_flows: Sequence[float], discount_rate: float, start_year: int
    ) -> float:
        """
        Calculate Net Present Value of an annual cash flow series.

        Args:
            cash_flows: One cash flow per year, first entry in `start_year`
            discount_rate: Annual discount rate as decimal (e.g., 0.08 for 8%)
            start_year: Year of the first cash flow, which is the valuation year

        Returns:
            NPV rounded to 2 decimal places; 0 for an empty series

        Raises:
            ValueError: If the discount rate is negative

        Example:
            ```python
            npv = FinancialCalculations.calculate_npv(
                [5_000_000, 5_150_000, 5_304_500], 0.08, 2028
            )
            print(f"NPV: {npv:,.2f}")  # NPV: 14,316,272.29
            ```
        """
        if len(cash_flows) == 0:
            return 0.0

        require_non_negative(discount_rate, "Discount rate")

        with financial_context():
            factor = 1 + to_decimal(discount_rate)
            npv = to_decimal(0)
            for year_offset, cash_flow in enumerate(cash_flows):
                npv += to_decimal(cash_flow) / factor**year_offset

        return round_currency(npv)

    @staticmethod
    def calculate_pv(
        future_value: float, discount_rate: float, years_from_now: int
    ) -> float:
        """Present value of a single future cash flow, rounded to 2 decimal places."""
        require_non_negative(discount_rate, "Discount rate")
        require_non_negative(years_from_now, "Years from now")
        with financial_context():
            pv = to_decimal(future_value) / (1 + to_decimal(discount_rate)) ** years_from_now
        return round_currency(pv)

    @staticmethod
    def calculate_fv(
        present_value: float, discount_rate: float, years_from_now: int
    ) -> float:
        """Future value of a present cash flow, rounded to 2 decimal places."""
        require_non_negative(discount_rate, "Discount rate")
        require_non_negative(years_from_now, "Years from now")
        with financial_context():
            fv = to_decimal(present_value) * (1 + to_decimal(discount_rate)) ** years_from_now
        return round_currency(fv)
