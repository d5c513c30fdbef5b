# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Curriculum enrollment and revenue projection.
"""

from .config import (
    CurriculumConfig,
    CurriculumEnrollmentResult,
    EnrollmentProjection,
    RampStep,
)
from .enrollment import (
    EnrollmentSummary,
    aggregate_enrollment,
    calculate_curriculum_enrollment,
    calculate_overall_utilization,
    generate_curriculum_enrollment_projections,
)
from .revenue import (
    calculate_curriculum_revenue,
    calculate_curriculum_tuition,
    calculate_total_revenue,
    generate_revenue_schedule,
    generate_tuition_ladder,
)

__all__ = [
    "CurriculumConfig",
    "CurriculumEnrollmentResult",
    "EnrollmentProjection",
    "EnrollmentSummary",
    "RampStep",
    "aggregate_enrollment",
    "calculate_curriculum_enrollment",
    "calculate_curriculum_revenue",
    "calculate_curriculum_tuition",
    "calculate_overall_utilization",
    "calculate_total_revenue",
    "generate_curriculum_enrollment_projections",
    "generate_revenue_schedule",
    "generate_tuition_ladder",
]
