# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Capex rule engine: cycle, utilisation and custom-date triggers per category.
"""

from .rules import (
    AnyCapexRule,
    CapexResult,
    CapexRule,
    CustomDateCapexRule,
    CycleCapexRule,
    UtilizationCapexRule,
)
from .schedule import (
    CapexOverride,
    capex_totals_by_year,
    generate_capex_schedule,
    index_overrides,
)

__all__ = [
    "AnyCapexRule",
    "CapexOverride",
    "CapexResult",
    "CapexRule",
    "CustomDateCapexRule",
    "CycleCapexRule",
    "UtilizationCapexRule",
    "capex_totals_by_year",
    "generate_capex_schedule",
    "index_overrides",
]
