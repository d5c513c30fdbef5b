# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Issue, result and input models of the validation engine.
"""

from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import Field, computed_field

from ..capex import CapexOverride
from ..core.primitives import Model, ValidationSeverityEnum
from ..statements import BalanceSheet, CashFlowStatement, ProfitLossStatement


class ValidationIssue(Model):
    """
    One finding of a validation rule.

    Attributes:
        severity: CRITICAL issues block approval; WARNING and INFO do not
        code: Stable machine-readable rule code (e.g. "RENT_LOAD_EXCEEDED")
        message: Human-readable description
        year: Model year the issue applies to, if any
        field: Input or statement field the issue concerns
        value: Observed value
        expected: Threshold the value was compared against
        deep_link: Link to the field the user should edit
    """

    severity: ValidationSeverityEnum
    code: str
    message: str
    year: Optional[int] = None
    field: Optional[str] = None
    value: Optional[float] = None
    expected: Optional[float] = None
    deep_link: Optional[str] = None


class ValidationSummary(Model):
    total: int
    critical: int
    warnings: int
    info: int


class ValidationResult(Model):
    """Issues grouped by severity."""

    critical: List[ValidationIssue] = Field(default_factory=list)
    warnings: List[ValidationIssue] = Field(default_factory=list)
    info: List[ValidationIssue] = Field(default_factory=list)

    @computed_field
    @property
    def can_approve(self) -> bool:
        """A version can be approved only without critical issues."""
        return len(self.critical) == 0

    @computed_field
    @property
    def summary(self) -> ValidationSummary:
        return ValidationSummary(
            total=len(self.critical) + len(self.warnings) + len(self.info),
            critical=len(self.critical),
            warnings=len(self.warnings),
            info=len(self.info),
        )

    def all_issues(self) -> List[ValidationIssue]:
        """Every issue, critical first, then warnings, then info."""
        return [*self.critical, *self.warnings, *self.info]

    def codes(self) -> List[str]:
        return [issue.code for issue in self.all_issues()]


class ValidationInputs(Model):
    """
    Generated statements plus the assumption and version context they came from.

    Year-indexed series (`revenue`, `rent`, `utilization`) start at the
    first model year. Utilisation entries may be None for years without
    any launched capacity; those years are not checked.
    """

    pl: List[ProfitLossStatement]
    bs: List[BalanceSheet]
    cf: List[CashFlowStatement]
    revenue: List[float]
    rent: List[float]
    utilization: Optional[List[Optional[float]]] = None
    frozen_year_overrides: Optional[Dict[int, str]] = Field(
        default=None, description="Absolute year -> override reason."
    )
    capex_overrides: Optional[List[CapexOverride]] = None
    cpi_rates: Optional[Dict[str, float]] = Field(
        default=None, description="Curriculum id -> CPI rate used for its tuition."
    )
    version_id: Optional[str] = None
    version_updated_at: Optional[datetime] = None
    version_description: Optional[str] = None
    base_version_locked: bool = False
    as_of: Optional[datetime] = Field(
        default=None, description="Reference time for staleness; defaults to now."
    )
