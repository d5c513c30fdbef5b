# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Rent schedule generation for the three rent models.
"""

from .models import (
    AnyRentModel,
    FixedEscalationRent,
    PartnerRent,
    RentModel,
    RevenueShareRent,
    calculate_revenue_share_rent,
)
from .schedule import calculate_rent_load, calculate_rent_npv, generate_rent_schedule

__all__ = [
    "AnyRentModel",
    "FixedEscalationRent",
    "PartnerRent",
    "RentModel",
    "RevenueShareRent",
    "calculate_rent_load",
    "calculate_rent_npv",
    "calculate_revenue_share_rent",
    "generate_rent_schedule",
]
