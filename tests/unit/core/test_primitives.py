# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import pandas as pd
import pytest
from pydantic import ValidationError

from campusplan.core.primitives import (
    CalculationSettings,
    GlobalSettings,
    ModelTimeline,
    ValidationThresholds,
    YearPhaseEnum,
    require_non_negative,
    require_year_not_before,
    resolve_settings,
    validate_aligned_series,
)


class TestModelTimeline:
    """Tests for the model year axis."""

    def test_defaults(self, timeline: ModelTimeline):
        assert timeline.start_year == 2023
        assert timeline.end_year == 2052
        assert timeline.duration_years == 30
        assert timeline.years[0] == 2023
        assert timeline.years[-1] == 2052

    def test_index(self, timeline: ModelTimeline):
        index = timeline.index
        assert isinstance(index, pd.Index)
        assert index.name == "year"
        assert len(index) == 30

    def test_phases(self, timeline: ModelTimeline):
        assert timeline.phase(2023) == YearPhaseEnum.HISTORY
        assert timeline.phase(2024) == YearPhaseEnum.HISTORY
        assert timeline.phase(2025) == YearPhaseEnum.NEAR_TERM
        assert timeline.phase(2027) == YearPhaseEnum.NEAR_TERM
        assert timeline.phase(2028) == YearPhaseEnum.RAMP
        assert timeline.phase(2032) == YearPhaseEnum.RAMP
        assert timeline.phase(2033) == YearPhaseEnum.FROZEN
        assert timeline.phase(2052) == YearPhaseEnum.FROZEN

    def test_phase_predicates(self, timeline: ModelTimeline):
        assert timeline.is_history_year(2024)
        assert timeline.is_near_term_year(2026)
        assert timeline.is_long_term_year(2028)
        assert not timeline.is_long_term_year(2027)
        assert timeline.is_ramp_year(2030)
        assert not timeline.is_ramp_year(2033)
        assert timeline.is_frozen_year(2033)
        assert not timeline.is_frozen_year(2060)

    def test_frozen_years(self, timeline: ModelTimeline):
        assert timeline.frozen_years[0] == 2033
        assert len(timeline.frozen_years) == 20

    def test_offsets(self, timeline: ModelTimeline):
        assert timeline.offset_of(2023) == 0
        assert timeline.offset_of(2052) == 29
        assert timeline.year_at(5) == 2028
        with pytest.raises(ValueError, match="outside model timeline"):
            timeline.offset_of(2053)
        with pytest.raises(ValueError):
            timeline.year_at(30)

    def test_zeros(self, timeline: ModelTimeline):
        assert timeline.zeros() == [0.0] * 30

    def test_invalid_ordering(self):
        with pytest.raises(ValidationError):
            ModelTimeline(start_year=2030, end_year=2020)
        with pytest.raises(ValidationError):
            ModelTimeline(ramp_end_year=2035, frozen_start_year=2033)

    def test_frozen(self, timeline: ModelTimeline):
        with pytest.raises(ValidationError):
            timeline.start_year = 2020


def test_global_settings_default_instantiation():
    """Test that GlobalSettings composes default sub-settings."""
    settings = GlobalSettings()
    assert settings.calculation.max_convergence_passes == 3
    assert settings.calculation.balance_tolerance == 0.01
    assert settings.validation.max_rent_load == 0.30
    assert settings.validation.min_ebitda_margin == 0.12
    assert settings.validation.min_cfo_margin == 0.03
    assert settings.validation.margin_check_after_year == 2027
    assert settings.defaults.discount_rate == 0.08
    assert not settings.validation.has_cpi_bounds


def test_global_settings_custom_instantiation():
    settings = GlobalSettings(
        calculation=CalculationSettings(max_convergence_passes=5),
        validation={"cpi_min": 0.01, "cpi_max": 0.04},
    )
    assert settings.calculation.max_convergence_passes == 5
    assert settings.validation.has_cpi_bounds


def test_extra_fields_forbidden():
    with pytest.raises(ValidationError):
        CalculationSettings(max_passes=3)


def test_resolve_settings():
    assert resolve_settings(None) == GlobalSettings()
    custom = GlobalSettings(calculation=CalculationSettings(max_convergence_passes=1))
    assert resolve_settings(custom) is custom


class TestValidationThresholds:
    def test_cpi_bounds_together(self):
        with pytest.raises(ValidationError, match="provided together"):
            ValidationThresholds(cpi_min=0.01)

    def test_cpi_bounds_ordered(self):
        with pytest.raises(ValidationError, match="cpi_min"):
            ValidationThresholds(cpi_min=0.05, cpi_max=0.01)

    def test_utilization_bounds_ordered(self):
        with pytest.raises(ValidationError):
            ValidationThresholds(low_utilization=0.9, max_utilization=0.8)


class TestValidationHelpers:
    def test_aligned_series(self):
        assert validate_aligned_series({"a": [1, 2], "b": [3, 4], "c": None}) == 2

    def test_misaligned_series_names_offender(self):
        with pytest.raises(ValueError, match="'b'"):
            validate_aligned_series({"a": [1, 2], "b": [3]})

    def test_expected_length(self):
        with pytest.raises(ValueError, match="timeline"):
            validate_aligned_series({"a": [1, 2]}, expected_length=3)

    def test_require_non_negative(self):
        require_non_negative(0, "Rate")
        with pytest.raises(ValueError, match="Rate"):
            require_non_negative(-1, "Rate")

    def test_require_year_not_before(self):
        require_year_not_before(2028, 2028)
        with pytest.raises(ValueError):
            require_year_not_before(2027, 2028)
