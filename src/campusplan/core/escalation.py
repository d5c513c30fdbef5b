# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Escalation schedule math.

A base amount compounds at `rate` once per completed escalation step.
With ANNUAL frequency every year is a step; with EVERY_2_YEARS or
EVERY_3_YEARS the amount stays flat between steps. Year 0 is never
escalated.

Example:
    ```python
    calculate_escalated_amount(5_000_000, 0.03, 5)  # 5,796,370.37
    calculate_escalated_amount(5_000_000, 0.03, 4, "EVERY_2_YEARS")  # 5,304,500.00
    ```
"""

from __future__ import annotations

from decimal import Decimal
from typing import List, Union

from ..utils.decimal import compound, round_currency
from .primitives import EscalationFrequencyEnum, require_non_negative

FrequencyLike = Union[EscalationFrequencyEnum, str]


def periods_elapsed(years_from_start: int, frequency: FrequencyLike) -> int:
    """Number of completed escalation steps after `years_from_start` years."""
    return years_from_start // EscalationFrequencyEnum(frequency).step_years


def escalate(
    base_amount: float,
    escalation_rate: float,
    years_from_start: int,
    frequency: FrequencyLike = EscalationFrequencyEnum.ANNUAL,
) -> Decimal:
    """
    Unrounded escalated amount, for callers that keep compounding.

    Raises:
        ValueError: If the rate or the elapsed years are negative.
    """
    require_non_negative(escalation_rate, "Escalation rate")
    require_non_negative(years_from_start, "Years from start")
    return compound(
        base_amount, escalation_rate, periods_elapsed(years_from_start, frequency)
    )


def calculate_escalated_amount(
    base_amount: float,
    escalation_rate: float,
    years_from_start: int,
    frequency: FrequencyLike = EscalationFrequencyEnum.ANNUAL,
) -> float:
    """
    Calculate an escalated amount.

    Args:
        base_amount: Amount at year 0
        escalation_rate: Rate per escalation step (e.g. 0.03 for 3%)
        years_from_start: Whole years elapsed since the base amount applied
        frequency: How often the rate compounds

    Returns:
        base_amount x (1 + rate) ^ steps, rounded to 2 decimal places

    Raises:
        ValueError: If the rate or the elapsed years are negative
    """
    return round_currency(
        escalate(base_amount, escalation_rate, years_from_start, frequency)
    )


def should_apply_escalation(
    year: int, start_year: int, frequency: FrequencyLike
) -> bool:
    """
    Whether `year` is an escalation step boundary.

    True exactly in the years where `generate_escalation_schedule` steps up
    (for a positive rate); never in the start year itself or before it.
    """
    years_from_start = year - start_year
    if years_from_start <= 0:
        return False
    return years_from_start % EscalationFrequencyEnum(frequency).step_years == 0


def generate_escalation_schedule(
    base_amount: float,
    escalation_rate: float,
    start_year: int,
    end_year: int,
    frequency: FrequencyLike = EscalationFrequencyEnum.ANNUAL,
) -> List[float]:
    """Escalated amounts for every year from `start_year` to `end_year` inclusive."""
    return [
        calculate_escalated_amount(
            base_amount, escalation_rate, year - start_year, frequency
        )
        for year in range(start_year, end_year + 1)
    ]
