# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for revenue-driven operating expenses."""

import pytest
from pydantic import ValidationError

from campusplan.opex import (
    OpExCategory,
    calculate_category_opex,
    calculate_opex,
    generate_opex_schedule,
)


class TestCategoryOpex:
    def test_share_of_revenue(self, opex_categories):
        assert calculate_category_opex(opex_categories[0], 1_000_000) == 50_000.0

    def test_override(self, opex_categories):
        assert calculate_category_opex(opex_categories[0], 1_000_000, 12_345.678) == 12_345.68

    def test_percentage_bounds(self):
        with pytest.raises(ValidationError):
            OpExCategory(id="x", name="X", revenue_percentage=1.2)


class TestOpex:
    def test_total_and_breakdown(self, opex_categories):
        result = calculate_opex(opex_categories, 1_000_000, 2030)
        assert result.total_opex == 70_000.0
        assert [c.amount for c in result.categories] == [50_000.0, 20_000.0]
        assert not any(c.is_override for c in result.categories)

    def test_override_tagged(self, opex_categories):
        result = calculate_opex(opex_categories, 1_000_000, 2030, {"marketing": {2030: 5_000}})
        assert result.total_opex == 55_000.0
        marketing = result.categories[1]
        assert marketing.is_override
        assert marketing.amount == 5_000.0
        assert not result.categories[0].is_override

    def test_override_only_in_its_year(self, opex_categories):
        result = calculate_opex(opex_categories, 1_000_000, 2031, {"marketing": {2030: 5_000}})
        assert result.total_opex == 70_000.0

    def test_no_categories(self):
        assert calculate_opex([], 1_000_000, 2030).total_opex == 0.0


class TestOpexSchedule:
    def test_schedule(self, opex_categories, settings):
        revenue = [1_000_000.0] * 30
        schedule = generate_opex_schedule(
            opex_categories, revenue, {"utilities": {2023: 0}}, settings
        )
        assert len(schedule) == 30
        assert schedule[0].total_opex == 20_000.0
        assert schedule[1].total_opex == 70_000.0

    def test_misaligned_revenue_raises(self, opex_categories, settings):
        with pytest.raises(ValueError, match="revenue"):
            generate_opex_schedule(opex_categories, [1.0], settings=settings)
