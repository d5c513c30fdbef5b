# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Campusplan Core

Primitives plus the compounding and discounting math every schedule
generator builds on.
"""

from .calculations import FinancialCalculations
from .cpi import calculate_cpi_adjusted_amount, generate_cpi_schedule, should_apply_cpi
from .escalation import (
    calculate_escalated_amount,
    escalate,
    generate_escalation_schedule,
    periods_elapsed,
    should_apply_escalation,
)

__all__ = [
    "FinancialCalculations",
    "calculate_cpi_adjusted_amount",
    "calculate_escalated_amount",
    "escalate",
    "generate_cpi_schedule",
    "generate_escalation_schedule",
    "periods_elapsed",
    "should_apply_cpi",
    "should_apply_escalation",
]
