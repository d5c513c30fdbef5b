# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Campusplan Reporting Module

pandas views of statements, schedules and validation issues:

    pl = statements_to_frame(result.statements, "pl")
    schedules = schedules_to_frame(result)
    issues = issues_to_frame(result.validation)
"""

from .frames import (
    BS_LINE_ITEMS,
    CF_LINE_ITEMS,
    ISSUE_COLUMNS,
    PL_LINE_ITEMS,
    issues_to_frame,
    schedules_to_frame,
    statements_to_frame,
)

__all__ = [
    "BS_LINE_ITEMS",
    "CF_LINE_ITEMS",
    "ISSUE_COLUMNS",
    "PL_LINE_ITEMS",
    "issues_to_frame",
    "schedules_to_frame",
    "statements_to_frame",
]
