# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
CPI adjustment of tuition.

Structurally the same compounding as rent escalation, but each curriculum
runs its own clock from its CPI base year, independent of the rent
escalation start year.
"""

from __future__ import annotations

from typing import List

from ..utils.decimal import round_currency
from .escalation import FrequencyLike, escalate, should_apply_escalation
from .primitives import (
    EscalationFrequencyEnum,
    require_non_negative,
    require_year_not_before,
)


def calculate_cpi_adjusted_amount(
    base_amount: float,
    cpi_rate: float,
    base_year: int,
    target_year: int,
    frequency: FrequencyLike = EscalationFrequencyEnum.ANNUAL,
) -> float:
    """
    Calculate a CPI-adjusted amount.

    Args:
        base_amount: Amount in the CPI base year
        cpi_rate: Annual CPI rate (e.g. 0.025 for 2.5%)
        base_year: Year in which `base_amount` applies
        target_year: Year to adjust to
        frequency: How often CPI is applied

    Returns:
        CPI-adjusted amount rounded to 2 decimal places

    Raises:
        ValueError: If the CPI rate is negative or target_year < base_year

    Example:
        ```python
        calculate_cpi_adjusted_amount(1000, 0.025, 2023, 2028)  # 1,131.41
        calculate_cpi_adjusted_amount(1000, 0.025, 2023, 2025, "EVERY_2_YEARS")  # 1,025.00
        ```
    """
    require_non_negative(cpi_rate, "CPI rate")
    require_year_not_before(target_year, base_year, "Target year")
    return round_currency(
        escalate(base_amount, cpi_rate, target_year - base_year, frequency)
    )


def should_apply_cpi(year: int, base_year: int, frequency: FrequencyLike) -> bool:
    """Whether CPI steps up in `year`; never in the base year itself."""
    return should_apply_escalation(year, base_year, frequency)


def generate_cpi_schedule(
    base_amount: float,
    cpi_rate: float,
    base_year: int,
    start_year: int,
    end_year: int,
    frequency: FrequencyLike = EscalationFrequencyEnum.ANNUAL,
) -> List[float]:
    """CPI-adjusted amounts for every year from `start_year` to `end_year` inclusive."""
    return [
        calculate_cpi_adjusted_amount(base_amount, cpi_rate, base_year, year, frequency)
        for year in range(start_year, end_year + 1)
    ]
