# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Ratio-driven staffing costs.

Headcount follows students-per-staff ratios and is always rounded up;
teacher and non-teacher average costs escalate independently from a
common base year.
"""

from __future__ import annotations

import math
from typing import List, Optional, Sequence

from pydantic import Field

from ..core.escalation import escalate
from ..core.primitives import (
    GlobalSettings,
    Model,
    PositiveFloat,
    PositiveInt,
    require_year_not_before,
    resolve_settings,
    validate_aligned_series,
)
from ..utils.decimal import financial_context, round_currency, safe_divide, to_decimal


class StaffingConfig(Model):
    """
    Staffing assumptions.

    Attributes:
        teacher_ratio: Students per teacher (e.g. 20)
        non_teacher_ratio: Students per non-teaching staff member (e.g. 50)
        teacher_avg_cost: Average teacher cost in `base_year`
        non_teacher_avg_cost: Average non-teacher cost in `base_year`
        teacher_escalation_rate: Annual escalation of teacher cost
        non_teacher_escalation_rate: Annual escalation of non-teacher cost
        base_year: Year the average costs apply to
    """

    teacher_ratio: float = Field(..., gt=0)
    non_teacher_ratio: float = Field(..., gt=0)
    teacher_avg_cost: PositiveFloat
    non_teacher_avg_cost: PositiveFloat
    teacher_escalation_rate: PositiveFloat
    non_teacher_escalation_rate: PositiveFloat
    base_year: int


class StaffingResult(Model):
    """Headcount and payroll cost for one year."""

    year: int
    total_students: PositiveInt
    teacher_headcount: PositiveInt
    non_teacher_headcount: PositiveInt
    teacher_cost: float
    non_teacher_cost: float
    total_cost: float


def calculate_headcount(students: int, ratio: float) -> int:
    """Staff needed for `students` at `ratio` students each, rounded up."""
    return math.ceil(safe_divide(students, ratio))


def calculate_staffing_cost(
    config: StaffingConfig, year: int, total_students: int
) -> StaffingResult:
    """
    Calculate staffing costs for a given year.

    Args:
        config: Staffing configuration
        year: Target year
        total_students: Total students across all curricula

    Returns:
        Staffing result for the year

    Raises:
        ValueError: If `year` precedes the staffing base year
    """
    require_year_not_before(year, config.base_year, "Staffing year")
    years_from_base = year - config.base_year

    teacher_headcount = calculate_headcount(total_students, config.teacher_ratio)
    non_teacher_headcount = calculate_headcount(total_students, config.non_teacher_ratio)

    teacher_unit_cost = round_currency(
        escalate(config.teacher_avg_cost, config.teacher_escalation_rate, years_from_base)
    )
    non_teacher_unit_cost = round_currency(
        escalate(
            config.non_teacher_avg_cost,
            config.non_teacher_escalation_rate,
            years_from_base,
        )
    )

    with financial_context():
        teacher_cost = round_currency(teacher_headcount * to_decimal(teacher_unit_cost))
        non_teacher_cost = round_currency(
            non_teacher_headcount * to_decimal(non_teacher_unit_cost)
        )
        total_cost = round_currency(to_decimal(teacher_cost) + to_decimal(non_teacher_cost))

    return StaffingResult(
        year=year,
        total_students=total_students,
        teacher_headcount=teacher_headcount,
        non_teacher_headcount=non_teacher_headcount,
        teacher_cost=teacher_cost,
        non_teacher_cost=non_teacher_cost,
        total_cost=total_cost,
    )


def generate_staffing_schedule(
    config: StaffingConfig,
    student_schedule: Sequence[int],
    settings: Optional[GlobalSettings] = None,
) -> List[StaffingResult]:
    """Staffing results for every model year from a year-aligned student series."""
    timeline = resolve_settings(settings).timeline
    validate_aligned_series(
        {"students": student_schedule}, expected_length=timeline.duration_years
    )
    return [
        calculate_staffing_cost(config, year, student_schedule[position])
        for position, year in enumerate(timeline.years)
    ]
