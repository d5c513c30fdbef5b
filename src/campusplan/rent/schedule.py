# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from ..core.calculations import FinancialCalculations
from ..core.primitives import GlobalSettings
from ..utils.decimal import round_percentage, safe_divide
from .models import RentModel

logger = logging.getLogger(__name__)


def generate_rent_schedule(
    rent_model: RentModel,
    revenue_schedule: Optional[Sequence[float]] = None,
    settings: Optional[GlobalSettings] = None,
) -> List[float]:
    """Year-aligned rent schedule for any rent model variant."""
    schedule = rent_model.generate_schedule(revenue_schedule, settings)
    logger.debug(
        f"{rent_model.kind.value} rent schedule: first year {schedule[0]:,.2f}, "
        f"last year {schedule[-1]:,.2f}"
    )
    return schedule


def calculate_rent_npv(
    rent_schedule: Sequence[float], discount_rate: float, start_year: int
) -> float:
    """
    NPV of the occupancy period of a rent schedule.

    Only the first contiguous run of non-zero years is discounted, and its
    first year is year 0 of the discount clock, so pre-occupancy zero years
    do not push the valuation date back.

    Args:
        rent_schedule: Year-aligned rent amounts
        discount_rate: Annual discount rate
        start_year: Year of the first schedule entry

    Returns:
        NPV rounded to 2 decimal places; 0 when no rent is ever charged
    """
    first = next(
        (position for position, amount in enumerate(rent_schedule) if amount != 0),
        None,
    )
    if first is None:
        return 0.0

    last = first
    while last + 1 < len(rent_schedule) and rent_schedule[last + 1] != 0:
        last += 1

    return FinancialCalculations.calculate_npv(
        list(rent_schedule[first : last + 1]), discount_rate, start_year + first
    )


def calculate_rent_load(
    rent_schedule: Sequence[float], revenue_schedule: Sequence[float]
) -> List[float]:
    """Rent / revenue per year, rounded to 4 decimal places; 0 without revenue."""
    return [
        round_percentage(safe_divide(rent, revenue))
        for rent, revenue in zip(rent_schedule, revenue_schedule)
    ]
