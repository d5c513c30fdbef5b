# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for FinancialCalculations."""

import pytest

from campusplan.core import FinancialCalculations


class TestNpv:
    def test_reference_npv(self):
        npv = FinancialCalculations.calculate_npv([5_000_000, 5_150_000, 5_304_500], 0.08, 2028)
        assert npv == pytest.approx(14_316_272.29, abs=0.01)

    def test_empty_series_is_zero(self):
        assert FinancialCalculations.calculate_npv([], 0.08, 2028) == 0.0

    def test_first_flow_undiscounted(self):
        assert FinancialCalculations.calculate_npv([1_000], 0.5, 2030) == 1_000.0

    def test_zero_rate_is_sum(self):
        assert FinancialCalculations.calculate_npv([100, 200, 300], 0.0, 2028) == 600.0

    def test_negative_rate_raises(self):
        with pytest.raises(ValueError, match="Discount rate"):
            FinancialCalculations.calculate_npv([100], -0.01, 2028)


class TestPresentAndFutureValue:
    def test_pv(self):
        assert FinancialCalculations.calculate_pv(110, 0.1, 1) == 100.0

    def test_fv(self):
        assert FinancialCalculations.calculate_fv(100, 0.1, 2) == 121.0

    def test_pv_fv_zero_years(self):
        assert FinancialCalculations.calculate_pv(123.45, 0.1, 0) == 123.45
        assert FinancialCalculations.calculate_fv(123.45, 0.1, 0) == 123.45

    def test_negative_inputs_raise(self):
        with pytest.raises(ValueError):
            FinancialCalculations.calculate_pv(100, -0.1, 1)
        with pytest.raises(ValueError):
            FinancialCalculations.calculate_fv(100, 0.1, -1)
