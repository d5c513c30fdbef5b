# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Reusable validation utilities for common patterns across the codebase.

This module provides standardized validators for:
- Paired optional fields (both or neither)
- Year-aligned series sharing one indexing
- Non-negative rates and year ordering for fail-fast calculators
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence


class ValidationMixin:
    """
    Mixin class providing reusable validation methods for Pydantic models.

    This class can be inherited alongside Pydantic Model to add common
    validation patterns without code duplication.
    """

    @classmethod
    def validate_provided_together(
        cls,
        data: Mapping[str, Any],
        field_a: str,
        field_b: str,
        error_message: Optional[str] = None,
    ) -> Mapping[str, Any]:
        """
        Validate that two optional fields are either both set or both unset.

        Args:
            data: Model data dictionary
            field_a: First field name
            field_b: Second field name
            error_message: Custom error message

        Returns:
            Validated data dictionary

        Raises:
            ValueError: If exactly one of the fields is provided
        """
        if (data.get(field_a) is None) != (data.get(field_b) is None):
            msg = error_message or f"{field_a} and {field_b} must be provided together"
            raise ValueError(msg)
        return data


def validate_aligned_series(
    series: Mapping[str, Optional[Sequence[float]]],
    expected_length: Optional[int] = None,
) -> int:
    """
    Check that year-aligned series share one indexing.

    Series given as None are optional inputs that were not supplied and are
    ignored. When `expected_length` is None the first supplied series sets
    the length.

    Returns:
        The common length.

    Raises:
        ValueError: If any supplied series has a different length.
    """
    length = expected_length
    reference = "timeline"
    for name, values in series.items():
        if values is None:
            continue
        if length is None:
            length, reference = len(values), name
            continue
        if len(values) != length:
            raise ValueError(
                f"Series '{name}' has {len(values)} entries but '{reference}' has {length}; "
                "year-aligned series must share one indexing"
            )
    return length or 0


def require_non_negative(value: float, name: str) -> None:
    """Fail fast on a negative rate or count."""
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def require_year_not_before(year: int, base_year: int, name: str = "Year") -> None:
    """Fail fast when a target year precedes the year it is measured from."""
    if year < base_year:
        raise ValueError(f"{name} ({year}) must be >= base year ({base_year})")
