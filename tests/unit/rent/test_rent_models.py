# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for rent model variants."""

import pytest
from pydantic import TypeAdapter, ValidationError

from campusplan.core.primitives import EscalationFrequencyEnum, RentModelKindEnum
from campusplan.rent import (
    AnyRentModel,
    FixedEscalationRent,
    PartnerRent,
    RevenueShareRent,
    calculate_revenue_share_rent,
)


class TestFixedEscalationRent:
    """Tests for FixedEscalationRent."""

    def test_kind(self, fixed_rent):
        assert fixed_rent.kind == RentModelKindEnum.FIXED_ESC

    def test_start_year_is_base(self, fixed_rent):
        assert fixed_rent.calculate(2028) == 5_000_000.0

    def test_escalates_annually(self, fixed_rent):
        assert fixed_rent.calculate(2033) == pytest.approx(5_796_370.37, abs=0.01)

    def test_before_start_raises(self, fixed_rent):
        with pytest.raises(ValueError):
            fixed_rent.calculate(2027)

    def test_schedule_zero_before_start(self, fixed_rent, settings):
        schedule = fixed_rent.generate_schedule(settings=settings)
        assert len(schedule) == 30
        assert schedule[:5] == [0.0] * 5
        assert schedule[5] == 5_000_000.0
        assert schedule[6] == 5_150_000.0

    def test_indexation_scales_escalated_amount(self):
        rent = FixedEscalationRent(
            base_amount=1_000,
            escalation_rate=0.0,
            indexation_rate=0.1,
            indexation_frequency=EscalationFrequencyEnum.EVERY_2_YEARS,
            start_year=2020,
        )
        assert rent.calculate(2021) == 1_000.0
        assert rent.calculate(2022) == 1_100.0

    def test_indexation_fields_together(self):
        with pytest.raises(ValidationError, match="provided together"):
            FixedEscalationRent(
                base_amount=1_000, escalation_rate=0.03, indexation_rate=0.02, start_year=2028
            )

    def test_negative_base_rejected(self):
        with pytest.raises(ValidationError):
            FixedEscalationRent(base_amount=-1, escalation_rate=0.03, start_year=2028)


class TestRevenueShareRent:
    """Tests for revenue-share rent with floor and cap."""

    def test_floor_overrides_raw_share(self):
        assert calculate_revenue_share_rent(1_000_000, 0.15, floor=1_200_000) == 1_200_000.0

    def test_raw_share(self):
        assert calculate_revenue_share_rent(10_000_000, 0.15) == 1_500_000.0

    def test_cap(self):
        assert calculate_revenue_share_rent(10_000_000, 0.15, cap=1_000_000) == 1_000_000.0

    def test_cap_applied_after_floor(self):
        assert calculate_revenue_share_rent(0, 0.15, floor=2_000_000, cap=1_000_000) == 1_000_000.0

    def test_percentage_bounds(self):
        with pytest.raises(ValueError, match="between 0 and 1"):
            calculate_revenue_share_rent(1_000_000, 1.5)
        with pytest.raises(ValidationError):
            RevenueShareRent(revenue_percentage=1.5)

    def test_model_calculate(self):
        rent = RevenueShareRent(revenue_percentage=0.15, floor=1_200_000)
        assert rent.calculate(2030, 1_000_000) == 1_200_000.0

    def test_schedule_requires_revenue(self, settings):
        rent = RevenueShareRent(revenue_percentage=0.15)
        with pytest.raises(ValueError, match="requires a revenue schedule"):
            rent.generate_schedule(settings=settings)

    def test_schedule_length_must_match(self, settings):
        rent = RevenueShareRent(revenue_percentage=0.15)
        with pytest.raises(ValueError, match="revenue"):
            rent.generate_schedule([1_000_000.0] * 3, settings)

    def test_floor_charged_every_year(self, settings):
        rent = RevenueShareRent(revenue_percentage=0.1, floor=500_000)
        schedule = rent.generate_schedule(settings.timeline.zeros(), settings)
        assert schedule == [500_000.0] * 30


class TestPartnerRent:
    def _partner(self, **kwargs) -> PartnerRent:
        values = dict(
            land_sqm=10_000,
            land_cost_per_sqm=1_000,
            bua_sqm=5_000,
            bua_cost_per_sqm=2_000,
            yield_rate=0.08,
            start_year=2028,
        )
        values.update(kwargs)
        return PartnerRent(**values)

    def test_investment(self):
        assert self._partner().total_investment == 20_000_000.0

    def test_yield(self):
        rent = self._partner()
        assert rent.calculate(2028) == 1_600_000.0
        assert rent.calculate(2040) == 1_600_000.0

    def test_yield_indexation(self):
        rent = self._partner(
            yield_indexation_rate=0.02,
            yield_indexation_frequency=EscalationFrequencyEnum.ANNUAL,
        )
        # 1.6M x 1.02^2, factor not rounded
        assert rent.calculate(2030) == 1_664_640.0

    def test_indexation_fields_together(self):
        with pytest.raises(ValidationError):
            self._partner(yield_indexation_frequency=EscalationFrequencyEnum.ANNUAL)

    def test_schedule(self, settings):
        schedule = self._partner().generate_schedule(settings=settings)
        assert schedule[4] == 0.0
        assert schedule[5] == 1_600_000.0


class TestDiscriminatedUnion:
    def test_dispatch_on_kind(self):
        adapter = TypeAdapter(AnyRentModel)
        rent = adapter.validate_python({"kind": "REV_SHARE", "revenue_percentage": 0.1})
        assert isinstance(rent, RevenueShareRent)

        rent = adapter.validate_python(
            {"kind": "FIXED_ESC", "base_amount": 1, "escalation_rate": 0, "start_year": 2028}
        )
        assert isinstance(rent, FixedEscalationRent)

    def test_unknown_kind(self):
        with pytest.raises(ValidationError):
            TypeAdapter(AnyRentModel).validate_python({"kind": "LEASEHOLD"})
