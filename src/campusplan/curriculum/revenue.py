# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Tuition and revenue projection.

Tuition compounds with CPI from each curriculum's own base year unless an
absolute-year override supplies the figure directly. Revenue is tuition
times enrollment, aggregated across curricula per model year.
"""

from __future__ import annotations

import logging
from typing import List, Mapping, Optional, Sequence

from ..core.cpi import calculate_cpi_adjusted_amount
from ..core.primitives import GlobalSettings, resolve_settings
from ..utils.decimal import financial_context, round_currency, to_decimal
from .config import CurriculumConfig, CurriculumEnrollmentResult

logger = logging.getLogger(__name__)

TuitionOverrides = Mapping[int, float]


def calculate_curriculum_tuition(
    config: CurriculumConfig,
    year: int,
    tuition_overrides: Optional[TuitionOverrides] = None,
) -> float:
    """
    Calculate tuition per student for a curriculum in a given year.

    Args:
        config: Curriculum configuration
        year: Target year
        tuition_overrides: Optional tuition keyed by absolute year; an
            override takes precedence and bypasses CPI math

    Returns:
        Tuition per student rounded to 2 decimal places

    Raises:
        ValueError: If no override applies and `year` precedes the CPI base year
    """
    if tuition_overrides is not None and year in tuition_overrides:
        return round_currency(tuition_overrides[year])

    return calculate_cpi_adjusted_amount(
        config.tuition_base,
        config.cpi_rate,
        config.cpi_base_year,
        year,
        config.cpi_frequency,
    )


def generate_tuition_ladder(
    config: CurriculumConfig,
    start_year: Optional[int] = None,
    end_year: Optional[int] = None,
    tuition_overrides: Optional[TuitionOverrides] = None,
    settings: Optional[GlobalSettings] = None,
) -> List[float]:
    """
    Tuition per student for every year from `start_year` to `end_year`.

    The ladder starts at the curriculum's CPI base year by default, since
    CPI cannot be applied backwards, and ends at the last model year.
    """
    timeline = resolve_settings(settings).timeline
    first = config.cpi_base_year if start_year is None else start_year
    last = timeline.end_year if end_year is None else end_year
    return [
        calculate_curriculum_tuition(config, year, tuition_overrides)
        for year in range(first, last + 1)
    ]


def calculate_curriculum_revenue(
    config: CurriculumConfig,
    year: int,
    enrollment: int,
    tuition_overrides: Optional[TuitionOverrides] = None,
) -> float:
    """Tuition x enrollment, rounded to 2 decimal places; 0 without students."""
    if enrollment <= 0:
        return 0.0

    tuition = calculate_curriculum_tuition(config, year, tuition_overrides)
    with financial_context():
        revenue = to_decimal(tuition) * enrollment
    return round_currency(revenue)


def calculate_total_revenue(
    curriculum_enrollments: Sequence[CurriculumEnrollmentResult],
    curriculum_configs: Mapping[str, CurriculumConfig],
    year: int,
    tuition_overrides_map: Optional[Mapping[str, TuitionOverrides]] = None,
) -> float:
    """
    Total revenue across all curricula for a given year.

    Curricula without a matching configuration or without a projection for
    `year` are skipped (logged at warning level) rather than failing the run.

    Args:
        curriculum_enrollments: Enrollment projections per curriculum
        curriculum_configs: Curriculum configurations keyed by curriculum id
        year: Target year
        tuition_overrides_map: Optional tuition overrides, curriculum id -> year -> tuition

    Returns:
        Total revenue rounded to 2 decimal places
    """
    total = to_decimal(0)

    for curriculum in curriculum_enrollments:
        config = curriculum_configs.get(curriculum.curriculum_id)
        if config is None:
            logger.warning(
                f"Skipping curriculum '{curriculum.curriculum_id}' in {year}: no configuration"
            )
            continue

        projection = curriculum.projection_for(year)
        if projection is None:
            logger.warning(
                f"Skipping curriculum '{curriculum.curriculum_id}' in {year}: no projection"
            )
            continue

        overrides = (
            tuition_overrides_map.get(curriculum.curriculum_id)
            if tuition_overrides_map is not None
            else None
        )
        revenue = calculate_curriculum_revenue(
            config, year, projection.enrollment, overrides
        )
        with financial_context():
            total += to_decimal(revenue)

    return round_currency(total)


def generate_revenue_schedule(
    curriculum_enrollments: Sequence[CurriculumEnrollmentResult],
    curriculum_configs: Mapping[str, CurriculumConfig],
    tuition_overrides_map: Optional[Mapping[str, TuitionOverrides]] = None,
    settings: Optional[GlobalSettings] = None,
) -> List[float]:
    """Year-aligned total revenue across all curricula."""
    timeline = resolve_settings(settings).timeline
    schedule = [
        calculate_total_revenue(
            curriculum_enrollments, curriculum_configs, year, tuition_overrides_map
        )
        for year in timeline.years
    ]
    logger.debug(
        f"Revenue schedule generated for {len(curriculum_enrollments)} curricula "
        f"({timeline.start_year}-{timeline.end_year})"
    )
    return schedule
