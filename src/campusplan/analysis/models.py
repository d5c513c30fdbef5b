# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Inputs and outputs of a full model run.
"""

from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import Field, field_validator

from ..capex import AnyCapexRule, CapexOverride, CapexResult
from ..core.primitives import Model, PositiveFloat
from ..curriculum import CurriculumConfig, CurriculumEnrollmentResult, EnrollmentSummary
from ..opex import OpExCategory, OpExResult
from ..rent import AnyRentModel
from ..staffing import StaffingConfig, StaffingResult
from ..statements import FinancialStatements
from ..validation import ValidationResult


class ModelAssumptions(Model):
    """
    Every assumption of one model version.

    Override maps are keyed by curriculum or category id, then by absolute
    year. Optional statement series (`depreciation`, `interest`,
    `working_capital_change`) are year-aligned with the model timeline and
    count as zero when omitted.
    """

    curricula: List[CurriculumConfig]
    ramp_overrides: Dict[str, Dict[int, float]] = Field(default_factory=dict)
    tuition_overrides: Dict[str, Dict[int, float]] = Field(default_factory=dict)
    rent_model: AnyRentModel
    staffing: StaffingConfig
    opex_categories: List[OpExCategory] = Field(default_factory=list)
    opex_overrides: Dict[str, Dict[int, float]] = Field(default_factory=dict)
    capex_rules: List[AnyCapexRule] = Field(default_factory=list)
    capex_overrides: List[CapexOverride] = Field(default_factory=list)
    depreciation: Optional[List[float]] = None
    interest: Optional[List[float]] = None
    working_capital_change: Optional[List[float]] = None
    tax_rate: PositiveFloat = 0.0
    beginning_cash: float = 0.0
    discount_rate: Optional[PositiveFloat] = Field(
        default=None, description="Rent NPV discount rate; settings default when omitted."
    )

    @field_validator("curricula")
    @classmethod
    def validate_unique_curricula(cls, v: List[CurriculumConfig]) -> List[CurriculumConfig]:
        ids = [config.id for config in v]
        duplicates = sorted({curriculum_id for curriculum_id in ids if ids.count(curriculum_id) > 1})
        if duplicates:
            raise ValueError(f"Duplicate curriculum ids: {', '.join(duplicates)}")
        return v

    @property
    def curriculum_map(self) -> Dict[str, CurriculumConfig]:
        return {config.id: config for config in self.curricula}

    @property
    def cpi_rates(self) -> Dict[str, float]:
        return {config.id: config.cpi_rate for config in self.curricula}


class VersionContext(Model):
    """Version metadata consumed by the frozen-year and informational checks."""

    id: Optional[str] = None
    updated_at: Optional[datetime] = None
    description: Optional[str] = None
    base_version_locked: bool = False
    frozen_year_overrides: Dict[int, str] = Field(
        default_factory=dict, description="Absolute year -> override reason."
    )
    as_of: Optional[datetime] = None


class ModelRunResult(Model):
    """Every intermediate schedule of a run, the statements and their validation."""

    enrollments: List[CurriculumEnrollmentResult]
    enrollment_summary: EnrollmentSummary
    revenue: List[float]
    opex: List[OpExResult]
    rent: List[float]
    rent_load: List[float]
    rent_npv: float
    staffing: List[StaffingResult]
    capex: List[CapexResult]
    capex_totals: List[float]
    statements: FinancialStatements
    validation: ValidationResult

    @property
    def opex_totals(self) -> List[float]:
        return [result.total_opex for result in self.opex]

    @property
    def staff_costs(self) -> List[float]:
        return [result.total_cost for result in self.staffing]

    @property
    def can_approve(self) -> bool:
        return self.validation.can_approve
