# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Test utilities and fixtures for Campusplan testing.

Factories build valid configuration objects with sensible defaults so
tests only spell out the fields they care about.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

import pytest

from campusplan.capex import CycleCapexRule
from campusplan.core.primitives import GlobalSettings, ModelTimeline
from campusplan.curriculum import CurriculumConfig, RampStep
from campusplan.opex import OpExCategory
from campusplan.rent import FixedEscalationRent
from campusplan.staffing import StaffingConfig
from campusplan.statements import StatementInputs


def make_curriculum(
    id: str = "ib",
    name: str = "IB Diploma",
    capacity: int = 200,
    launch_year: int = 2028,
    ramp: Sequence[Tuple[int, float]] = ((0, 0.2), (1, 0.4), (2, 0.6), (3, 0.8)),
    tuition_base: float = 50_000.0,
    cpi_rate: float = 0.025,
    cpi_base_year: Optional[int] = None,
    **kwargs,
) -> CurriculumConfig:
    """
    Create a curriculum for testing.

    The CPI base year defaults to the launch year.

    Example:
        >>> config = make_curriculum(capacity=100)
        >>> config.ramp_utilisation(5)
        0.8
    """
    return CurriculumConfig(
        id=id,
        name=name,
        capacity=capacity,
        launch_year=launch_year,
        ramp_steps=[RampStep(year_offset=offset, utilisation=u) for offset, u in ramp],
        tuition_base=tuition_base,
        cpi_rate=cpi_rate,
        cpi_base_year=launch_year if cpi_base_year is None else cpi_base_year,
        **kwargs,
    )


def make_staffing(**overrides) -> StaffingConfig:
    """Create a staffing configuration for testing."""
    values = dict(
        teacher_ratio=20,
        non_teacher_ratio=50,
        teacher_avg_cost=100_000,
        non_teacher_avg_cost=50_000,
        teacher_escalation_rate=0.03,
        non_teacher_escalation_rate=0.02,
        base_year=2023,
    )
    values.update(overrides)
    return StaffingConfig(**values)


def make_statement_inputs(years: int = 3, **overrides) -> StatementInputs:
    """Create flat statement inputs of `years` years for testing."""
    values = dict(
        revenue=[1_000_000.0] * years,
        staff_costs=[400_000.0] * years,
        rent=[200_000.0] * years,
        opex=[100_000.0] * years,
        capex=[0.0] * years,
        depreciation=[0.0] * years,
    )
    values.update(overrides)
    return StatementInputs(**values)


def short_settings(start_year: int = 2023, end_year: int = 2032) -> GlobalSettings:
    """Settings with a short timeline; phase boundaries kept inside it."""
    return GlobalSettings(
        timeline=ModelTimeline(
            start_year=start_year,
            end_year=end_year,
            near_term_start_year=start_year,
            relocation_year=start_year,
            ramp_end_year=start_year,
            frozen_start_year=start_year + 1,
        )
    )


@pytest.fixture
def settings() -> GlobalSettings:
    """Default global settings (2023-2052)."""
    return GlobalSettings()


@pytest.fixture
def timeline(settings: GlobalSettings) -> ModelTimeline:
    return settings.timeline


@pytest.fixture
def curriculum() -> CurriculumConfig:
    return make_curriculum()


@pytest.fixture
def curricula() -> List[CurriculumConfig]:
    """Two curricula launching in different years."""
    return [
        make_curriculum(),
        make_curriculum(
            id="national",
            name="National",
            capacity=300,
            launch_year=2023,
            ramp=((0, 0.5), (5, 0.9)),
            tuition_base=30_000,
            cpi_rate=0.02,
        ),
    ]


@pytest.fixture
def staffing_config() -> StaffingConfig:
    return make_staffing()


@pytest.fixture
def fixed_rent() -> FixedEscalationRent:
    return FixedEscalationRent(base_amount=5_000_000, escalation_rate=0.03, start_year=2028)


@pytest.fixture
def opex_categories() -> List[OpExCategory]:
    return [
        OpExCategory(id="utilities", name="Utilities", revenue_percentage=0.05),
        OpExCategory(id="marketing", name="Marketing", revenue_percentage=0.02),
    ]


@pytest.fixture
def cycle_rule() -> CycleCapexRule:
    return CycleCapexRule(
        category_id="it",
        category_name="IT Equipment",
        base_cost=100_000,
        escalation_rate=0.0,
        base_year=2023,
        start_year=2028,
        cycle_years=3,
    )
