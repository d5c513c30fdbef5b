# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Model run orchestration.

A run evaluates one version end to end:

1. Enrollment per curriculum, aggregated into students/capacity/utilisation
2. Tuition revenue
3. Operating expenses (share of revenue)
4. Rent (revenue-share models consume the revenue schedule)
5. Staffing costs
6. Capex from category rules and overrides
7. P&L, cash flow and balance sheet with convergence
8. Validation

Each run works on its own inputs only, so versions can be evaluated
independently and in any order.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..capex import capex_totals_by_year, generate_capex_schedule
from ..core.primitives import GlobalSettings, resolve_settings, validate_aligned_series
from ..curriculum import (
    aggregate_enrollment,
    generate_curriculum_enrollment_projections,
    generate_revenue_schedule,
)
from ..opex import generate_opex_schedule
from ..rent import calculate_rent_load, calculate_rent_npv, generate_rent_schedule
from ..staffing import generate_staffing_schedule
from ..statements import StatementInputs, generate_financial_statements
from ..validation import ValidationInputs, validate_financial_statements
from .models import ModelAssumptions, ModelRunResult, VersionContext

logger = logging.getLogger(__name__)


def run_model(
    assumptions: ModelAssumptions,
    settings: Optional[GlobalSettings] = None,
    context: Optional[VersionContext] = None,
) -> ModelRunResult:
    """
    Run the full model for one version.

    Args:
        assumptions: Version assumptions
        settings: Global settings (timeline, convergence, thresholds)
        context: Version metadata for the frozen-year and informational checks

    Returns:
        ModelRunResult with every schedule, the statements and validation

    Raises:
        ValueError: If a year-aligned assumption series does not match the timeline
    """
    settings = resolve_settings(settings)
    context = context or VersionContext()
    timeline = settings.timeline

    validate_aligned_series(
        {
            "depreciation": assumptions.depreciation,
            "interest": assumptions.interest,
            "working_capital_change": assumptions.working_capital_change,
        },
        expected_length=timeline.duration_years,
    )
    logger.debug(
        f"Running model for version {context.id or '<unsaved>'} "
        f"({timeline.start_year}-{timeline.end_year})"
    )

    configs = assumptions.curriculum_map
    enrollments = [
        generate_curriculum_enrollment_projections(
            config, assumptions.ramp_overrides.get(config.id), settings
        )
        for config in assumptions.curricula
    ]
    summary = aggregate_enrollment(enrollments, settings)

    revenue = generate_revenue_schedule(
        enrollments, configs, assumptions.tuition_overrides, settings
    )
    opex = generate_opex_schedule(
        assumptions.opex_categories, revenue, assumptions.opex_overrides, settings
    )
    rent = generate_rent_schedule(assumptions.rent_model, revenue, settings)
    staffing = generate_staffing_schedule(assumptions.staffing, summary.students, settings)
    capex = generate_capex_schedule(
        assumptions.capex_rules,
        student_schedule=summary.students,
        capacity_schedule=summary.capacity,
        utilization_schedule=summary.utilisation,
        overrides=assumptions.capex_overrides,
        settings=settings,
    )
    capex_totals = capex_totals_by_year(capex, settings)

    statements = generate_financial_statements(
        StatementInputs(
            revenue=revenue,
            staff_costs=[result.total_cost for result in staffing],
            rent=rent,
            opex=[result.total_opex for result in opex],
            capex=capex_totals,
            depreciation=assumptions.depreciation or timeline.zeros(),
            interest=assumptions.interest,
            tax_rate=assumptions.tax_rate,
            working_capital_change=assumptions.working_capital_change,
            beginning_cash=assumptions.beginning_cash,
        ),
        settings=settings,
    )

    discount_rate = (
        assumptions.discount_rate
        if assumptions.discount_rate is not None
        else settings.defaults.discount_rate
    )
    rent_npv = calculate_rent_npv(rent, discount_rate, timeline.start_year)

    validation = validate_financial_statements(
        ValidationInputs(
            pl=statements.pl,
            bs=statements.bs,
            cf=statements.cf,
            revenue=revenue,
            rent=rent,
            utilization=[
                utilisation if capacity > 0 else None
                for utilisation, capacity in zip(summary.utilisation, summary.capacity)
            ],
            frozen_year_overrides=context.frozen_year_overrides,
            capex_overrides=assumptions.capex_overrides,
            cpi_rates=assumptions.cpi_rates,
            version_id=context.id,
            version_updated_at=context.updated_at,
            version_description=context.description,
            base_version_locked=context.base_version_locked,
            as_of=context.as_of,
        ),
        settings,
    )

    logger.info(
        f"Model run complete: converged={statements.convergence.balanced} "
        f"in {statements.convergence.passes} pass(es), "
        f"can_approve={validation.can_approve}"
    )
    return ModelRunResult(
        enrollments=enrollments,
        enrollment_summary=summary,
        revenue=revenue,
        opex=opex,
        rent=rent,
        rent_load=calculate_rent_load(rent, revenue),
        rent_npv=rent_npv,
        staffing=staffing,
        capex=capex,
        capex_totals=capex_totals,
        statements=statements,
        validation=validation,
    )
