# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Rent models for the school facility.

Three mutually exclusive ways to derive the annual occupancy cost, each a
variant of one discriminated union keyed on `kind`:

- FixedEscalationRent: a base amount escalating annually, optionally indexed
- RevenueShareRent: a percentage of revenue with an optional floor and cap
- PartnerRent: a yield on the partner's land and built-up area investment

Every variant implements `calculate()`; the shared `generate_schedule()`
template zero-fills the years before a variant's effective start year.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import ClassVar, List, Literal, Optional, Sequence, Union

from pydantic import Field, model_validator
from typing_extensions import Annotated

from ..core.escalation import calculate_escalated_amount, escalate
from ..core.primitives import (
    EscalationFrequencyEnum,
    FloatBetween0And1,
    GlobalSettings,
    Model,
    PositiveFloat,
    RentModelKindEnum,
    ValidationMixin,
    require_year_not_before,
    resolve_settings,
    validate_aligned_series,
)
from ..utils.decimal import financial_context, round_currency, safe_divide, to_decimal


class RentModel(Model, ValidationMixin, ABC):
    """
    Base class for all rent models.

    Uses template method pattern - each subclass implements its own
    per-year amount via calculate(), while the base class builds the
    year-aligned schedule.
    """

    kind: RentModelKindEnum

    requires_revenue: ClassVar[bool] = False

    @property
    def effective_start_year(self) -> Optional[int]:
        """First year rent is charged; None when rent applies in every year."""
        return None

    @abstractmethod
    def calculate(self, year: int, revenue: float = 0.0) -> float:
        """
        Rent for one year, rounded to 2 decimal places.

        Args:
            year: Target year
            revenue: Revenue of that year (only used by revenue-based models)
        """

    def generate_schedule(
        self,
        revenue_schedule: Optional[Sequence[float]] = None,
        settings: Optional[GlobalSettings] = None,
    ) -> List[float]:
        """
        Year-aligned rent schedule.

        Args:
            revenue_schedule: Year-aligned revenue; required by revenue-based models
            settings: Model settings providing the timeline

        Returns:
            One amount per model year, 0 before the effective start year

        Raises:
            ValueError: If a revenue-based model gets no revenue schedule or
                the schedule does not match the timeline
        """
        timeline = resolve_settings(settings).timeline
        if self.requires_revenue and revenue_schedule is None:
            raise ValueError(f"{self.kind.value} rent requires a revenue schedule")
        validate_aligned_series(
            {"revenue": revenue_schedule}, expected_length=timeline.duration_years
        )

        start = self.effective_start_year
        schedule: List[float] = []
        for position, year in enumerate(timeline.years):
            if start is not None and year < start:
                schedule.append(0.0)
                continue
            revenue = revenue_schedule[position] if revenue_schedule is not None else 0.0
            schedule.append(self.calculate(year, revenue))
        return schedule


class FixedEscalationRent(RentModel):
    """
    Fixed base rent escalating annually from the start year.

    When an indexation rate and frequency are set, the base is also indexed
    at that (coarser) frequency and the annually escalated amount is scaled
    by indexed_base / base_amount. Indexation modifies the escalated figure;
    it does not compound on its own.

    Example:
        >>> rent = FixedEscalationRent(base_amount=5_000_000, escalation_rate=0.03, start_year=2028)
        >>> rent.calculate(2033)
        5796370.37
    """

    kind: Literal[RentModelKindEnum.FIXED_ESC] = RentModelKindEnum.FIXED_ESC
    base_amount: PositiveFloat
    escalation_rate: PositiveFloat
    indexation_rate: Optional[PositiveFloat] = None
    indexation_frequency: Optional[EscalationFrequencyEnum] = None
    start_year: int

    @model_validator(mode="before")
    @classmethod
    def check_indexation(cls, data):
        if isinstance(data, dict):
            cls.validate_provided_together(data, "indexation_rate", "indexation_frequency")
        return data

    @property
    def effective_start_year(self) -> Optional[int]:
        return self.start_year

    def calculate(self, year: int, revenue: float = 0.0) -> float:
        require_year_not_before(year, self.start_year)
        years_from_start = year - self.start_year

        amount = calculate_escalated_amount(
            self.base_amount, self.escalation_rate, years_from_start
        )

        if self.indexation_rate and self.indexation_frequency is not None:
            indexed_base = calculate_escalated_amount(
                self.base_amount,
                self.indexation_rate,
                years_from_start,
                self.indexation_frequency,
            )
            factor = safe_divide(indexed_base, self.base_amount)
            with financial_context():
                amount = round_currency(to_decimal(amount) * factor)

        return amount


def calculate_revenue_share_rent(
    revenue: float,
    revenue_percentage: float,
    floor: Optional[float] = None,
    cap: Optional[float] = None,
) -> float:
    """
    Revenue-share rent: min(cap, max(floor, revenue x percentage)).

    The floor is applied before the cap, so a cap below the floor wins.

    Raises:
        ValueError: If revenue_percentage is outside [0, 1]
    """
    if not 0 <= revenue_percentage <= 1:
        raise ValueError(
            f"Revenue percentage must be between 0 and 1, got {revenue_percentage}"
        )

    with financial_context():
        amount = to_decimal(revenue) * to_decimal(revenue_percentage)
        if floor is not None:
            amount = max(amount, to_decimal(floor))
        if cap is not None:
            amount = min(amount, to_decimal(cap))
    return round_currency(amount)


class RevenueShareRent(RentModel):
    """
    Rent as a share of the year's revenue, bounded by an optional floor and cap.

    Applies in every model year; a floor is therefore charged even in years
    without revenue.

    Example:
        >>> RevenueShareRent(revenue_percentage=0.15, floor=1_200_000).calculate(2030, 1_000_000)
        1200000.0
    """

    kind: Literal[RentModelKindEnum.REV_SHARE] = RentModelKindEnum.REV_SHARE
    revenue_percentage: FloatBetween0And1
    floor: Optional[PositiveFloat] = None
    cap: Optional[PositiveFloat] = None

    requires_revenue: ClassVar[bool] = True

    def calculate(self, year: int, revenue: float = 0.0) -> float:
        return calculate_revenue_share_rent(
            revenue, self.revenue_percentage, self.floor, self.cap
        )


class PartnerRent(RentModel):
    """
    Rent as a yield on the partner's investment in land and built-up area (BUA).

    investment = land_sqm x land_cost_per_sqm + bua_sqm x bua_cost_per_sqm
    rent = investment x yield_rate, optionally indexed at the yield
    indexation frequency from the start year.
    """

    kind: Literal[RentModelKindEnum.PARTNER] = RentModelKindEnum.PARTNER
    land_sqm: PositiveFloat
    land_cost_per_sqm: PositiveFloat
    bua_sqm: PositiveFloat
    bua_cost_per_sqm: PositiveFloat
    yield_rate: PositiveFloat = Field(..., description="Annual yield on the total investment")
    yield_indexation_rate: Optional[PositiveFloat] = None
    yield_indexation_frequency: Optional[EscalationFrequencyEnum] = None
    start_year: int

    @model_validator(mode="before")
    @classmethod
    def check_indexation(cls, data):
        if isinstance(data, dict):
            cls.validate_provided_together(
                data, "yield_indexation_rate", "yield_indexation_frequency"
            )
        return data

    @property
    def effective_start_year(self) -> Optional[int]:
        return self.start_year

    def _investment(self) -> Decimal:
        with financial_context():
            land = to_decimal(self.land_sqm) * to_decimal(self.land_cost_per_sqm)
            bua = to_decimal(self.bua_sqm) * to_decimal(self.bua_cost_per_sqm)
            return land + bua

    @property
    def total_investment(self) -> float:
        return round_currency(self._investment())

    def calculate(self, year: int, revenue: float = 0.0) -> float:
        require_year_not_before(year, self.start_year)
        with financial_context():
            yield_amount = self._investment() * to_decimal(self.yield_rate)

        if self.yield_indexation_rate and self.yield_indexation_frequency is not None:
            yield_amount = escalate(
                yield_amount,
                self.yield_indexation_rate,
                year - self.start_year,
                self.yield_indexation_frequency,
            )

        return round_currency(yield_amount)


# Union type for all rent models, using discriminator for type differentiation
AnyRentModel = Annotated[
    Union[FixedEscalationRent, RevenueShareRent, PartnerRent],
    Field(discriminator="kind"),
]
