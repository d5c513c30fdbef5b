# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Capex schedule generation.

Every model year is evaluated against every rule. A manual override keyed
by (year, category_id) replaces whatever the rules of that category would
have produced in that year, and is reported with its reason.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence, Tuple

from pydantic import Field

from ..core.primitives import (
    GlobalSettings,
    Model,
    PositiveFloat,
    resolve_settings,
    validate_aligned_series,
)
from ..utils.decimal import financial_context, round_currency, to_decimal
from .rules import CapexResult, CapexRule

logger = logging.getLogger(__name__)


class CapexOverride(Model):
    """
    Manual capex amount for one category in one year.

    Attributes:
        year: Absolute model year
        category_id: Capex category the override replaces
        amount: Spend to use instead of the rule result
        reason: Why the rule result was replaced
        detailed: Whether the reason is backed by a detailed breakdown
        category_name: Display name, for categories without a rule
    """

    year: int
    category_id: str
    amount: PositiveFloat
    reason: str = ""
    detailed: bool = False
    category_name: Optional[str] = Field(default=None)

    @property
    def key(self) -> Tuple[int, str]:
        return (self.year, self.category_id)


def index_overrides(
    overrides: Optional[Sequence[CapexOverride]],
) -> Dict[Tuple[int, str], CapexOverride]:
    """
    Key overrides by (year, category_id).

    Raises:
        ValueError: If two overrides target the same year and category
    """
    indexed: Dict[Tuple[int, str], CapexOverride] = {}
    for override in overrides or ():
        if override.key in indexed:
            raise ValueError(
                f"Duplicate capex override for category '{override.category_id}' in {override.year}"
            )
        indexed[override.key] = override
    return indexed


def _override_result(override: CapexOverride, category_name: str) -> CapexResult:
    return CapexResult(
        year=override.year,
        category_id=override.category_id,
        category_name=category_name,
        amount=round_currency(override.amount),
        trigger_detail="Manual override",
        is_override=True,
        override_reason=override.reason,
    )


def generate_capex_schedule(
    rules: Sequence[CapexRule],
    student_schedule: Optional[Sequence[int]] = None,
    capacity_schedule: Optional[Sequence[int]] = None,
    utilization_schedule: Optional[Sequence[float]] = None,
    overrides: Optional[Sequence[CapexOverride]] = None,
    settings: Optional[GlobalSettings] = None,
) -> List[CapexResult]:
    """
    Generate the capex schedule from category rules.

    Args:
        rules: Capex rules, one or more per category
        student_schedule: Year-aligned total students (0 when omitted)
        capacity_schedule: Year-aligned total capacity (0 when omitted)
        utilization_schedule: Year-aligned utilisation; utilisation rules
            never trigger when omitted
        overrides: Manual (year, category) overrides
        settings: Model settings providing the timeline

    Returns:
        Capex results ordered by year, then by rule order

    Raises:
        ValueError: If the schedules do not match the timeline or overrides collide
    """
    timeline = resolve_settings(settings).timeline
    validate_aligned_series(
        {
            "students": student_schedule,
            "capacity": capacity_schedule,
            "utilization": utilization_schedule,
        },
        expected_length=timeline.duration_years,
    )
    indexed_overrides = index_overrides(overrides)
    category_names = {rule.category_id: rule.category_name for rule in rules}

    schedule: List[CapexResult] = []
    for position, year in enumerate(timeline.years):
        students = student_schedule[position] if student_schedule is not None else 0
        capacity = capacity_schedule[position] if capacity_schedule is not None else 0
        utilisation = (
            utilization_schedule[position] if utilization_schedule is not None else None
        )

        overridden = set()
        for rule in rules:
            key = (year, rule.category_id)
            override = indexed_overrides.get(key)
            if override is not None:
                if key not in overridden:
                    schedule.append(_override_result(override, rule.category_name))
                    overridden.add(key)
                continue

            result = rule.calculate(year, students, capacity, utilisation)
            if result is not None:
                schedule.append(result)

        # Overrides for categories that have no rule at all
        for key, override in indexed_overrides.items():
            if key[0] == year and key not in overridden and key[1] not in category_names:
                name = override.category_name or "Unknown"
                schedule.append(_override_result(override, name))

    logger.debug(
        f"Capex schedule: {len(schedule)} entries from {len(rules)} rules "
        f"and {len(indexed_overrides)} overrides"
    )
    return schedule


def capex_totals_by_year(
    results: Sequence[CapexResult], settings: Optional[GlobalSettings] = None
) -> List[float]:
    """Year-aligned total capex across categories."""
    timeline = resolve_settings(settings).timeline
    totals = {year: to_decimal(0) for year in timeline.years}
    with financial_context():
        for result in results:
            if result.year in totals:
                totals[result.year] += to_decimal(result.amount)
    return [round_currency(totals[year]) for year in timeline.years]
