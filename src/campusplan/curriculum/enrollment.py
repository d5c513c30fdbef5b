# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Curriculum enrollment projection.

Enrollment follows each curriculum's ramp profile from its launch year and
is always truncated to whole students.
"""

from __future__ import annotations

import math
from typing import Dict, List, Mapping, Optional, Sequence

from ..core.primitives import GlobalSettings, Model, resolve_settings
from ..utils.decimal import safe_divide, to_decimal
from .config import CurriculumConfig, CurriculumEnrollmentResult, EnrollmentProjection

RampOverrides = Mapping[int, float]


def _whole_students(capacity: int, utilisation: float) -> int:
    return math.floor(to_decimal(capacity) * to_decimal(utilisation))


def calculate_curriculum_enrollment(
    config: CurriculumConfig,
    year: int,
    ramp_overrides: Optional[RampOverrides] = None,
) -> EnrollmentProjection:
    """
    Calculate enrollment for a curriculum in a given year.

    Args:
        config: Curriculum configuration
        year: Target year
        ramp_overrides: Optional utilisation overrides keyed by absolute year;
            an override replaces the ramp-derived utilisation for that year

    Returns:
        Enrollment projection for the year. Zero before the launch year.
    """
    if year < config.launch_year:
        return EnrollmentProjection(
            year=year,
            enrollment=0,
            capacity=config.capacity,
            utilisation=0.0,
            launched=False,
        )

    if ramp_overrides is not None and year in ramp_overrides:
        utilisation = ramp_overrides[year]
    else:
        utilisation = config.ramp_utilisation(year - config.launch_year)

    return EnrollmentProjection(
        year=year,
        enrollment=_whole_students(config.capacity, utilisation),
        capacity=config.capacity,
        utilisation=utilisation,
    )


def generate_curriculum_enrollment_projections(
    config: CurriculumConfig,
    ramp_overrides: Optional[RampOverrides] = None,
    settings: Optional[GlobalSettings] = None,
) -> CurriculumEnrollmentResult:
    """Enrollment projections for every model year."""
    timeline = resolve_settings(settings).timeline
    return CurriculumEnrollmentResult(
        curriculum_id=config.id,
        curriculum_name=config.name,
        projections=[
            calculate_curriculum_enrollment(config, year, ramp_overrides)
            for year in timeline.years
        ],
    )


def calculate_overall_utilization(
    curriculum_enrollments: Sequence[CurriculumEnrollmentResult], year: int
) -> float:
    """
    Overall capacity utilisation in a year.

    Returns:
        Total enrollment / total launched capacity across curricula
        projected for `year`; 0 when there is no launched capacity.
    """
    total_enrollment = 0
    total_capacity = 0
    for curriculum in curriculum_enrollments:
        projection = curriculum.projection_for(year)
        if projection is not None:
            total_enrollment += projection.enrollment
            if projection.launched:
                total_capacity += projection.capacity
    return float(safe_divide(total_enrollment, total_capacity))


class EnrollmentSummary(Model):
    """
    Year-aligned totals across all curricula.

    These are the student, capacity and utilisation series consumed by the
    staffing and capex calculators. Capacity only counts curricula that
    have launched in that year.
    """

    students: List[int]
    capacity: List[int]
    utilisation: List[float]


def aggregate_enrollment(
    curriculum_enrollments: Sequence[CurriculumEnrollmentResult],
    settings: Optional[GlobalSettings] = None,
) -> EnrollmentSummary:
    """
    Sum enrollments into year-aligned student/capacity/utilisation series.

    Utilisation per year is `calculate_overall_utilization`.

    Args:
        curriculum_enrollments: Projections per curriculum
        settings: Model settings providing the timeline
    """
    timeline = resolve_settings(settings).timeline
    students: Dict[int, int] = {year: 0 for year in timeline.years}
    capacity: Dict[int, int] = {year: 0 for year in timeline.years}

    for curriculum in curriculum_enrollments:
        for projection in curriculum.projections:
            if projection.year not in students:
                continue
            students[projection.year] += projection.enrollment
            if projection.launched:
                capacity[projection.year] += projection.capacity

    years = timeline.years
    return EnrollmentSummary(
        students=[students[year] for year in years],
        capacity=[capacity[year] for year in years],
        utilisation=[
            calculate_overall_utilization(curriculum_enrollments, year) for year in years
        ],
    )
