# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Validation engine: CRITICAL issues block approval, WARNING and INFO inform.
"""

from .engine import (
    CRITICAL_RULES,
    INFO_RULES,
    WARNING_RULES,
    check_balance_sheet,
    check_base_version_locked,
    check_capex_overrides,
    check_cfo_margin,
    check_cpi_bounds,
    check_ebitda_margin,
    check_frozen_years,
    check_rent_load,
    check_utilization,
    check_version_description,
    check_version_staleness,
    validate_financial_statements,
)
from .models import ValidationInputs, ValidationIssue, ValidationResult, ValidationSummary

__all__ = [
    "CRITICAL_RULES",
    "INFO_RULES",
    "WARNING_RULES",
    "ValidationInputs",
    "ValidationIssue",
    "ValidationResult",
    "ValidationSummary",
    "check_balance_sheet",
    "check_base_version_locked",
    "check_capex_overrides",
    "check_cfo_margin",
    "check_cpi_bounds",
    "check_ebitda_margin",
    "check_frozen_years",
    "check_rent_load",
    "check_utilization",
    "check_version_description",
    "check_version_staleness",
    "validate_financial_statements",
]
