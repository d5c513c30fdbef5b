# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for ratio-driven staffing costs."""

import pytest
from pydantic import ValidationError

from campusplan.staffing import (
    calculate_headcount,
    calculate_staffing_cost,
    generate_staffing_schedule,
)
from tests.conftest import make_staffing


def test_headcount_rounds_up():
    assert calculate_headcount(41, 20) == 3
    assert calculate_headcount(40, 20) == 2
    assert calculate_headcount(0, 20) == 0


class TestStaffingCost:
    def test_base_year(self, staffing_config):
        result = calculate_staffing_cost(staffing_config, 2023, 410)
        assert result.teacher_headcount == 21
        assert result.non_teacher_headcount == 9
        assert result.teacher_cost == 2_100_000.0
        assert result.non_teacher_cost == 450_000.0
        assert result.total_cost == 2_550_000.0

    def test_pools_escalate_independently(self, staffing_config):
        result = calculate_staffing_cost(staffing_config, 2024, 400)
        assert result.teacher_cost == 20 * 103_000.0
        assert result.non_teacher_cost == 8 * 51_000.0
        assert result.total_cost == 2_468_000.0

    def test_no_students(self, staffing_config):
        result = calculate_staffing_cost(staffing_config, 2030, 0)
        assert result.teacher_headcount == 0
        assert result.total_cost == 0.0

    def test_year_before_base_raises(self):
        config = make_staffing(base_year=2025)
        with pytest.raises(ValueError, match="Staffing year"):
            calculate_staffing_cost(config, 2024, 100)

    def test_ratios_must_be_positive(self):
        with pytest.raises(ValidationError):
            make_staffing(teacher_ratio=0)


class TestStaffingSchedule:
    def test_schedule_follows_timeline(self, staffing_config, settings):
        students = [400] * 30
        schedule = generate_staffing_schedule(staffing_config, students, settings)
        assert [result.year for result in schedule] == settings.timeline.years
        assert schedule[0].total_students == 400
        assert schedule[1].total_cost == 2_468_000.0

    def test_misaligned_students_raise(self, staffing_config, settings):
        with pytest.raises(ValueError, match="students"):
            generate_staffing_schedule(staffing_config, [400] * 3, settings)
