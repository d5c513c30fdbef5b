# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Optional

from pydantic import Field, model_validator

from .model import Model
from .timeline import ModelTimeline
from .types import FloatBetween0And1, PositiveFloat, PositiveInt, PositiveIntGt0


class CalculationSettings(Model):
    """Settings controlling the three-statement generator."""

    max_convergence_passes: PositiveIntGt0 = Field(
        default=3,
        description="Maximum number of full P&L -> Cash Flow -> Balance Sheet regenerations.",
    )
    balance_tolerance: PositiveFloat = Field(
        default=0.01,
        description="Largest |assets - (liabilities + equity)| still treated as balanced.",
    )


class ValidationThresholds(Model):
    """
    Covenant thresholds used by the validation engine.

    Workspace-level values (such as the allowed CPI range) are injected
    here so the same rules behave differently per workspace without any
    code change.

    Usage Examples:
        # Default covenants
        thresholds = ValidationThresholds()

        # Workspace that only accepts CPI between 2% and 4%
        thresholds = ValidationThresholds(cpi_min=0.02, cpi_max=0.04)
    """

    max_rent_load: FloatBetween0And1 = Field(
        default=0.30, description="Maximum rent / revenue in any year with revenue."
    )
    min_ebitda_margin: float = Field(
        default=0.12, description="Minimum EBITDA / revenue after margin_check_after_year."
    )
    min_cfo_margin: float = Field(
        default=0.03,
        description="Minimum operating cash flow / revenue after margin_check_after_year.",
    )
    margin_check_after_year: int = Field(
        default=2027, description="Margin covenants only apply to years strictly after this one."
    )
    low_utilization: PositiveFloat = Field(
        default=0.50, description="Utilisation below this raises a warning."
    )
    max_utilization: PositiveFloat = Field(
        default=1.00, description="Utilisation above this raises an over-capacity warning."
    )
    stale_after_days: PositiveInt = Field(
        default=30, description="Days without an update before a version is reported stale."
    )
    cpi_min: Optional[PositiveFloat] = Field(
        default=None, description="Lowest CPI rate accepted by the workspace."
    )
    cpi_max: Optional[PositiveFloat] = Field(
        default=None, description="Highest CPI rate accepted by the workspace."
    )

    @model_validator(mode="after")
    def check_cpi_bounds(self) -> "ValidationThresholds":
        """CPI bounds are configured together and must form a range."""
        if (self.cpi_min is None) != (self.cpi_max is None):
            raise ValueError("cpi_min and cpi_max must be provided together")
        if self.cpi_min is not None and self.cpi_min > self.cpi_max:
            raise ValueError(
                f"cpi_min ({self.cpi_min}) must be <= cpi_max ({self.cpi_max})"
            )
        if self.low_utilization > self.max_utilization:
            raise ValueError("low_utilization must be <= max_utilization")
        return self

    @property
    def has_cpi_bounds(self) -> bool:
        return self.cpi_min is not None and self.cpi_max is not None


class AssumptionDefaults(Model):
    """Default rates offered when a version does not specify its own."""

    discount_rate: PositiveFloat = 0.08
    cpi_rate: PositiveFloat = 0.025
    escalation_rate: PositiveFloat = 0.03


# --- Main Global Settings Class ---


class GlobalSettings(Model):
    """Global model settings

    Single source of truth for the model year bounds, calculation behaviour
    and covenant thresholds. Passed explicitly into every entry point; a
    missing value means the defaults below.
    """

    timeline: ModelTimeline = Field(default_factory=ModelTimeline)
    calculation: CalculationSettings = Field(default_factory=CalculationSettings)
    validation: ValidationThresholds = Field(default_factory=ValidationThresholds)
    defaults: AssumptionDefaults = Field(default_factory=AssumptionDefaults)


def resolve_settings(settings: Optional[GlobalSettings]) -> GlobalSettings:
    """Return `settings`, or the default settings when none were given."""
    return settings if settings is not None else GlobalSettings()
