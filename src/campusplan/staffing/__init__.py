# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from .staffing import (
    StaffingConfig,
    StaffingResult,
    calculate_headcount,
    calculate_staffing_cost,
    generate_staffing_schedule,
)

__all__ = [
    "StaffingConfig",
    "StaffingResult",
    "calculate_headcount",
    "calculate_staffing_cost",
    "generate_staffing_schedule",
]
