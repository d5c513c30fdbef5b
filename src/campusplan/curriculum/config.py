# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import List, Optional

from pydantic import Field, field_validator

from ..core.primitives import (
    EscalationFrequencyEnum,
    FloatBetween0And1,
    Model,
    PositiveFloat,
    PositiveInt,
)


class RampStep(Model):
    """
    Share of capacity filled a number of years after launch.

    Attributes:
        year_offset: Years after the launch year (0 = launch year)
        utilisation: Fraction of capacity enrolled, between 0 and 1
    """

    year_offset: PositiveInt
    utilisation: FloatBetween0And1


class CurriculumConfig(Model):
    """
    One curriculum offered by the school.

    Supplied per model run and never modified during a calculation.

    Attributes:
        id: Curriculum identifier
        name: Display name (e.g. "IB Diploma")
        capacity: Maximum number of students
        launch_year: First year with enrollment
        ramp_steps: Utilisation profile after launch, ordered by year_offset
        tuition_base: Tuition per student in `cpi_base_year`
        cpi_rate: Annual CPI rate applied to tuition
        cpi_frequency: How often CPI is applied
        cpi_base_year: Year in which `tuition_base` applies
    """

    id: str
    name: str
    capacity: PositiveInt
    launch_year: int
    ramp_steps: List[RampStep] = Field(..., min_length=1)
    tuition_base: PositiveFloat
    cpi_rate: PositiveFloat
    cpi_frequency: EscalationFrequencyEnum = EscalationFrequencyEnum.ANNUAL
    cpi_base_year: int

    @field_validator("ramp_steps")
    @classmethod
    def validate_ramp_steps(cls, v: List[RampStep]) -> List[RampStep]:
        """Ramp steps must be strictly increasing in year_offset."""
        offsets = [step.year_offset for step in v]
        if any(later <= earlier for earlier, later in zip(offsets, offsets[1:])):
            raise ValueError(
                f"Ramp steps must be ordered by strictly increasing year_offset, got {offsets}"
            )
        return v

    def ramp_utilisation(self, years_from_launch: int) -> float:
        """
        Utilisation from the ramp profile, as a step function.

        Uses the last step whose offset is at or before `years_from_launch`,
        so the final step holds for every year after the ramp ends. No
        interpolation between steps.
        """
        utilisation = 0.0
        for step in self.ramp_steps:
            if step.year_offset > years_from_launch:
                break
            utilisation = step.utilisation
        return utilisation


class EnrollmentProjection(Model):
    """
    Enrollment of one curriculum in one year.

    Pre-launch projections keep the configured capacity but set `launched`
    to False; that capacity is excluded from utilisation totals.
    """

    year: int
    enrollment: PositiveInt
    capacity: PositiveInt
    utilisation: float
    launched: bool = True


class CurriculumEnrollmentResult(Model):
    """Enrollment projections of one curriculum across the model years."""

    curriculum_id: str
    curriculum_name: str
    projections: List[EnrollmentProjection]

    def projection_for(self, year: int) -> Optional[EnrollmentProjection]:
        """The projection for `year`, or None if the year was not projected."""
        for projection in self.projections:
            if projection.year == year:
                return projection
        return None
