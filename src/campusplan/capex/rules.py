# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Category-based capital expenditure rules.

Each capex category is driven by exactly one rule variant:

- CycleCapexRule: reinvest every `cycle_years` from `start_year`
- UtilizationCapexRule: reinvest when utilisation reaches a threshold
- CustomDateCapexRule: reinvest in an explicit list of years

All variants escalate their base amount annually from `base_year`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import List, Literal, Optional, Union

from pydantic import Field
from typing_extensions import Annotated

from ..core.escalation import calculate_escalated_amount
from ..core.primitives import (
    CapexRuleKindEnum,
    Model,
    PositiveFloat,
    PositiveIntGt0,
    require_year_not_before,
)
from ..utils.decimal import financial_context, safe_divide, to_decimal


class CapexResult(Model):
    """
    Capital spend of one category in one year.

    Attributes:
        year: Model year of the spend
        category_id: Capex category identifier
        category_name: Capex category display name
        amount: Spend rounded to 2 decimal places
        trigger_detail: Why the spend happened
        is_override: True when a manual override replaced the rule result
        override_reason: Reason supplied with the override
    """

    year: int
    category_id: str
    category_name: str
    amount: float
    trigger_detail: str
    is_override: bool = False
    override_reason: Optional[str] = None


class CapexRule(Model, ABC):
    """
    Base class for all capex rules.

    Subclasses decide when the rule triggers and what the unescalated
    amount is; the base class escalates it and builds the result.
    """

    kind: CapexRuleKindEnum
    category_id: str
    category_name: str
    base_cost: PositiveFloat
    escalation_rate: PositiveFloat
    base_year: int

    @property
    @abstractmethod
    def trigger_detail(self) -> str:
        """Human readable trigger description."""

    @abstractmethod
    def is_triggered(self, year: int, utilisation: Optional[float]) -> bool:
        """Whether the rule spends in `year`."""

    @abstractmethod
    def base_amount(self, students: int, capacity: int) -> Decimal:
        """Unescalated spend at base-year prices."""

    def calculate(
        self,
        year: int,
        students: int = 0,
        capacity: int = 0,
        utilisation: Optional[float] = None,
    ) -> Optional[CapexResult]:
        """
        Capex of this rule in a given year.

        Args:
            year: Target year
            students: Total students in that year
            capacity: Total capacity in that year
            utilisation: Overall utilisation in that year

        Returns:
            The spend, or None when the rule does not trigger

        Raises:
            ValueError: If the rule triggers in a year before its base year
        """
        if not self.is_triggered(year, utilisation):
            return None

        require_year_not_before(year, self.base_year, "Capex year")
        amount = calculate_escalated_amount(
            self.base_amount(students, capacity),
            self.escalation_rate,
            year - self.base_year,
        )
        return CapexResult(
            year=year,
            category_id=self.category_id,
            category_name=self.category_name,
            amount=amount,
            trigger_detail=self.trigger_detail,
        )


class CycleCapexRule(CapexRule):
    """
    Reinvestment on a fixed cycle.

    Triggers in start_year and every `cycle_years` after it. The amount is
    base_cost plus cost_per_student for every enrolled student.
    """

    kind: Literal[CapexRuleKindEnum.CYCLE] = CapexRuleKindEnum.CYCLE
    start_year: int
    cycle_years: PositiveIntGt0
    cost_per_student: Optional[PositiveFloat] = None

    @property
    def trigger_detail(self) -> str:
        return f"Cycle-based reinvestment (every {self.cycle_years} years)"

    def is_triggered(self, year: int, utilisation: Optional[float]) -> bool:
        if year < self.start_year:
            return False
        return (year - self.start_year) % self.cycle_years == 0

    def base_amount(self, students: int, capacity: int) -> Decimal:
        with financial_context():
            amount = to_decimal(self.base_cost)
            if self.cost_per_student:
                amount += to_decimal(self.cost_per_student) * students
        return amount


class UtilizationCapexRule(CapexRule):
    """
    Reinvestment once utilisation reaches a threshold.

    The amount is base_cost plus cost_per_student for each seat of extra
    capacity needed to bring utilisation back down to the threshold:
    students / threshold - capacity.
    """

    kind: Literal[CapexRuleKindEnum.UTILIZATION] = CapexRuleKindEnum.UTILIZATION
    threshold: float = Field(..., gt=0, le=1)
    cost_per_student: Optional[PositiveFloat] = None

    @property
    def trigger_detail(self) -> str:
        return f"Utilization-based reinvestment (threshold: {self.threshold * 100:g}%)"

    def is_triggered(self, year: int, utilisation: Optional[float]) -> bool:
        if utilisation is None:
            return False
        return utilisation >= self.threshold

    def base_amount(self, students: int, capacity: int) -> Decimal:
        with financial_context():
            amount = to_decimal(self.base_cost)
            if self.cost_per_student:
                additional_capacity = safe_divide(students, self.threshold) - capacity
                if additional_capacity > 0:
                    amount += to_decimal(self.cost_per_student) * additional_capacity
        return amount


class CustomDateCapexRule(CapexRule):
    """Reinvestment in an explicit list of years."""

    kind: Literal[CapexRuleKindEnum.CUSTOM_DATE] = CapexRuleKindEnum.CUSTOM_DATE
    trigger_years: List[int] = Field(..., min_length=1)

    @property
    def trigger_detail(self) -> str:
        return "Custom date reinvestment"

    def is_triggered(self, year: int, utilisation: Optional[float]) -> bool:
        return year in self.trigger_years

    def base_amount(self, students: int, capacity: int) -> Decimal:
        return to_decimal(self.base_cost)


# Union type for all capex rules, using discriminator for type differentiation
AnyCapexRule = Annotated[
    Union[CycleCapexRule, UtilizationCapexRule, CustomDateCapexRule],
    Field(discriminator="kind"),
]
