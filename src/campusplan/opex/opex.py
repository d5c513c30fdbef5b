# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Operating expenses as a percentage of revenue, per category.
"""

from __future__ import annotations

from typing import List, Mapping, Optional, Sequence

from ..core.primitives import (
    FloatBetween0And1,
    GlobalSettings,
    Model,
    resolve_settings,
    validate_aligned_series,
)
from ..utils.decimal import financial_context, round_currency, to_decimal

# category id -> absolute year -> amount
OpExOverrides = Mapping[str, Mapping[int, float]]


class OpExCategory(Model):
    """An operating expense category charged as a share of revenue."""

    id: str
    name: str
    revenue_percentage: FloatBetween0And1


class OpExCategoryAmount(Model):
    category_id: str
    category_name: str
    amount: float
    is_override: bool = False


class OpExResult(Model):
    """Operating expenses of one year, with the per-category breakdown."""

    year: int
    revenue: float
    categories: List[OpExCategoryAmount]
    total_opex: float


def calculate_category_opex(
    category: OpExCategory, revenue: float, override: Optional[float] = None
) -> float:
    """Revenue x category percentage, or the override when one is given."""
    if override is not None:
        return round_currency(override)
    with financial_context():
        return round_currency(to_decimal(revenue) * to_decimal(category.revenue_percentage))


def calculate_opex(
    categories: Sequence[OpExCategory],
    revenue: float,
    year: int,
    overrides: Optional[OpExOverrides] = None,
) -> OpExResult:
    """Operating expenses of all categories in a given year."""
    amounts: List[OpExCategoryAmount] = []
    total = to_decimal(0)
    for category in categories:
        override = None
        if overrides is not None:
            override = overrides.get(category.id, {}).get(year)
        amount = calculate_category_opex(category, revenue, override)
        amounts.append(
            OpExCategoryAmount(
                category_id=category.id,
                category_name=category.name,
                amount=amount,
                is_override=override is not None,
            )
        )
        with financial_context():
            total += to_decimal(amount)

    return OpExResult(
        year=year, revenue=revenue, categories=amounts, total_opex=round_currency(total)
    )


def generate_opex_schedule(
    categories: Sequence[OpExCategory],
    revenue_schedule: Sequence[float],
    overrides: Optional[OpExOverrides] = None,
    settings: Optional[GlobalSettings] = None,
) -> List[OpExResult]:
    """Operating expenses for every model year from a year-aligned revenue series."""
    timeline = resolve_settings(settings).timeline
    validate_aligned_series(
        {"revenue": revenue_schedule}, expected_length=timeline.duration_years
    )
    return [
        calculate_opex(categories, revenue_schedule[position], year, overrides)
        for position, year in enumerate(timeline.years)
    ]
