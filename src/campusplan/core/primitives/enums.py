# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from enum import Enum


class EscalationFrequencyEnum(str, Enum):
    """
    How often a compounding rate is applied.

    Used for rent escalation, rent/yield indexation and tuition CPI. A rate
    applied every N years compounds once per completed N-year step; the
    amount is flat between steps.
    """

    ANNUAL = "ANNUAL"
    EVERY_2_YEARS = "EVERY_2_YEARS"
    EVERY_3_YEARS = "EVERY_3_YEARS"

    @property
    def step_years(self) -> int:
        """Number of years between two compounding steps."""
        if self is EscalationFrequencyEnum.ANNUAL:
            return 1
        if self is EscalationFrequencyEnum.EVERY_2_YEARS:
            return 2
        if self is EscalationFrequencyEnum.EVERY_3_YEARS:
            return 3
        raise ValueError(f"Unsupported escalation frequency: {self!r}")


class RentModelKindEnum(str, Enum):
    """The three mutually-exclusive occupancy cost models."""

    FIXED_ESC = "FIXED_ESC"  # Fixed base amount with annual escalation
    REV_SHARE = "REV_SHARE"  # Percentage of revenue with floor/cap
    PARTNER = "PARTNER"  # Yield on partner's land + built-up area investment


class CapexRuleKindEnum(str, Enum):
    """Trigger types for category-based capital expenditure rules."""

    CYCLE = "CYCLE"  # Reinvest every N years from a start year
    UTILIZATION = "UTILIZATION"  # Reinvest when utilisation reaches a threshold
    CUSTOM_DATE = "CUSTOM_DATE"  # Reinvest in an explicit list of years


class ValidationSeverityEnum(str, Enum):
    """
    Severity tiers of validation issues.

    Only CRITICAL issues block approval of a model version.
    """

    CRITICAL = "CRITICAL"
    WARNING = "WARNING"
    INFO = "INFO"


class YearPhaseEnum(str, Enum):
    """Planning phase a model year belongs to."""

    HISTORY = "History"
    NEAR_TERM = "Near Term"
    RAMP = "Ramp"
    FROZEN = "Frozen"
