# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Campusplan Core Primitives

Essential building blocks shared by every calculator: the immutable model
base, enums, the model timeline, settings and validation helpers.
"""

from .enums import (
    CapexRuleKindEnum,
    EscalationFrequencyEnum,
    RentModelKindEnum,
    ValidationSeverityEnum,
    YearPhaseEnum,
)
from .model import Model
from .settings import (
    AssumptionDefaults,
    CalculationSettings,
    GlobalSettings,
    ValidationThresholds,
    resolve_settings,
)
from .timeline import ModelTimeline
from .types import (
    FloatBetween0And1,
    PositiveFloat,
    PositiveFloatGt0,
    PositiveInt,
    PositiveIntGt0,
)
from .validation import (
    ValidationMixin,
    require_non_negative,
    require_year_not_before,
    validate_aligned_series,
)

__all__ = [
    "AssumptionDefaults",
    "CalculationSettings",
    "CapexRuleKindEnum",
    "EscalationFrequencyEnum",
    "FloatBetween0And1",
    "GlobalSettings",
    "Model",
    "ModelTimeline",
    "PositiveFloat",
    "PositiveFloatGt0",
    "PositiveInt",
    "PositiveIntGt0",
    "RentModelKindEnum",
    "ValidationMixin",
    "ValidationSeverityEnum",
    "ValidationThresholds",
    "YearPhaseEnum",
    "require_non_negative",
    "require_year_not_before",
    "resolve_settings",
    "validate_aligned_series",
]
