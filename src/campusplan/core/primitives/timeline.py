# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import List

import pandas as pd
from pydantic import Field, model_validator

from .enums import YearPhaseEnum
from .model import Model


class ModelTimeline(Model):
    """
    The year axis shared by every schedule and statement of a model run.

    A year-aligned series is a list with one entry per model year, where
    index 0 is `start_year`. All series consumed together by a single
    calculation must share this indexing.

    Attributes:
        start_year: First model year (index 0 of every series).
        end_year: Last model year, inclusive.
        near_term_start_year: First year after the historical actuals.
        relocation_year: Year the school moves into the new facility;
            long-term planning starts here.
        ramp_end_year: Last year of the enrollment ramp.
        frozen_start_year: First frozen year. Assumptions for frozen years
            may only change through an override that states a reason.

    Examples:
        >>> timeline = ModelTimeline()
        >>> timeline.duration_years
        30
        >>> timeline.phase(2030)
        <YearPhaseEnum.RAMP: 'Ramp'>
    """

    start_year: int = 2023
    end_year: int = 2052
    near_term_start_year: int = 2025
    relocation_year: int = 2028
    ramp_end_year: int = 2032
    frozen_start_year: int = Field(default=2033)

    @model_validator(mode="after")
    def validate_year_ordering(self) -> "ModelTimeline":
        """Ensure the phase boundaries are ordered and inside the timeline."""
        if self.end_year < self.start_year:
            raise ValueError(
                f"end_year ({self.end_year}) must be >= start_year ({self.start_year})"
            )
        boundaries = [
            ("start_year", self.start_year),
            ("near_term_start_year", self.near_term_start_year),
            ("relocation_year", self.relocation_year),
            ("ramp_end_year", self.ramp_end_year),
        ]
        for (prev_name, prev), (name, value) in zip(boundaries, boundaries[1:]):
            if value < prev:
                raise ValueError(f"{name} ({value}) must be >= {prev_name} ({prev})")
        if self.frozen_start_year <= self.ramp_end_year:
            raise ValueError(
                f"frozen_start_year ({self.frozen_start_year}) must be after "
                f"ramp_end_year ({self.ramp_end_year})"
            )
        return self

    @property
    def duration_years(self) -> int:
        return self.end_year - self.start_year + 1

    @property
    def years(self) -> List[int]:
        """All model years, ascending."""
        return list(range(self.start_year, self.end_year + 1))

    @property
    def index(self) -> pd.Index:
        """Year index used for DataFrame views of year-aligned series."""
        return pd.Index(self.years, name="year")

    @property
    def frozen_years(self) -> List[int]:
        return list(range(self.frozen_start_year, self.end_year + 1))

    def contains(self, year: int) -> bool:
        return self.start_year <= year <= self.end_year

    def year_at(self, position: int) -> int:
        """Model year stored at `position` of a year-aligned series."""
        if not 0 <= position < self.duration_years:
            raise ValueError(
                f"Position {position} outside timeline of {self.duration_years} years"
            )
        return self.start_year + position

    def offset_of(self, year: int) -> int:
        """Position of `year` inside a year-aligned series."""
        if not self.contains(year):
            raise ValueError(
                f"Year {year} outside model timeline {self.start_year}-{self.end_year}"
            )
        return year - self.start_year

    def phase(self, year: int) -> YearPhaseEnum:
        """Planning phase of a model year."""
        self.offset_of(year)
        if year >= self.frozen_start_year:
            return YearPhaseEnum.FROZEN
        if year >= self.relocation_year:
            return YearPhaseEnum.RAMP
        if year >= self.near_term_start_year:
            return YearPhaseEnum.NEAR_TERM
        return YearPhaseEnum.HISTORY

    def is_history_year(self, year: int) -> bool:
        return self.contains(year) and self.phase(year) is YearPhaseEnum.HISTORY

    def is_near_term_year(self, year: int) -> bool:
        return self.contains(year) and self.phase(year) is YearPhaseEnum.NEAR_TERM

    def is_long_term_year(self, year: int) -> bool:
        return self.contains(year) and year >= self.relocation_year

    def is_ramp_year(self, year: int) -> bool:
        return self.contains(year) and self.relocation_year <= year <= self.ramp_end_year

    def is_frozen_year(self, year: int) -> bool:
        return self.contains(year) and year >= self.frozen_start_year

    def zeros(self) -> List[float]:
        """An all-zero year-aligned series."""
        return [0.0] * self.duration_years
