# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Validation engine.

Rules are plain functions over `ValidationInputs` grouped by severity.
Each rule independently returns zero or more issues; thresholds come from
`GlobalSettings.validation`, so workspace-level bounds change behaviour
without touching the rules. The engine never raises on model content: an
empty or populated `ValidationResult` is always produced.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable, List, Optional, Sequence

from ..core.primitives import GlobalSettings, ValidationSeverityEnum, resolve_settings
from ..utils.decimal import safe_divide
from .models import ValidationInputs, ValidationIssue, ValidationResult

logger = logging.getLogger(__name__)

ValidationRule = Callable[[ValidationInputs, GlobalSettings], List[ValidationIssue]]

CRITICAL = ValidationSeverityEnum.CRITICAL
WARNING = ValidationSeverityEnum.WARNING
INFO = ValidationSeverityEnum.INFO


def _as_utc(value: datetime) -> datetime:
    """Naive datetimes are taken to be UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _deep_link(inputs: ValidationInputs, path: str = "") -> str:
    version = inputs.version_id or ":id"
    return f"/versions/{version}{path}"


def _ratio(numerator: float, denominator: float) -> float:
    return float(safe_divide(numerator, denominator))


# --- Critical ---


def check_rent_load(inputs: ValidationInputs, settings: GlobalSettings) -> List[ValidationIssue]:
    """Rent / revenue above the maximum in any year with revenue."""
    threshold = settings.validation.max_rent_load
    issues = []
    for i, revenue in enumerate(inputs.revenue):
        if revenue == 0:
            continue
        year = settings.timeline.start_year + i
        rent = inputs.rent[i] if i < len(inputs.rent) else 0.0
        rent_load = _ratio(rent, revenue)
        if rent_load > threshold:
            issues.append(
                ValidationIssue(
                    severity=CRITICAL,
                    code="RENT_LOAD_EXCEEDED",
                    message=f"Rent load exceeds {threshold:.0%} in {year}",
                    year=year,
                    field="rent",
                    value=rent_load,
                    expected=threshold,
                    deep_link=_deep_link(inputs, f"/assumptions?section=lease&year={year}"),
                )
            )
    return issues


def check_ebitda_margin(
    inputs: ValidationInputs, settings: GlobalSettings
) -> List[ValidationIssue]:
    """EBITDA margin below the minimum after the margin check year."""
    thresholds = settings.validation
    issues = []
    for statement in inputs.pl:
        if statement.year <= thresholds.margin_check_after_year or statement.revenue == 0:
            continue
        margin = _ratio(statement.ebitda, statement.revenue)
        if margin < thresholds.min_ebitda_margin:
            issues.append(
                ValidationIssue(
                    severity=CRITICAL,
                    code="EBITDA_MARGIN_BELOW_THRESHOLD",
                    message=(
                        f"EBITDA margin below {thresholds.min_ebitda_margin:.0%} "
                        f"in {statement.year}"
                    ),
                    year=statement.year,
                    field="ebitda",
                    value=margin,
                    expected=thresholds.min_ebitda_margin,
                    deep_link=_deep_link(
                        inputs, f"/statements?type=PL&year={statement.year}"
                    ),
                )
            )
    return issues


def check_cfo_margin(inputs: ValidationInputs, settings: GlobalSettings) -> List[ValidationIssue]:
    """Operating cash flow margin below the minimum after the margin check year."""
    thresholds = settings.validation
    issues = []
    for i, statement in enumerate(inputs.cf):
        if statement.year <= thresholds.margin_check_after_year:
            continue
        revenue = inputs.revenue[i] if i < len(inputs.revenue) else 0.0
        if revenue == 0:
            continue
        margin = _ratio(statement.operating_cash_flow, revenue)
        if margin < thresholds.min_cfo_margin:
            issues.append(
                ValidationIssue(
                    severity=CRITICAL,
                    code="CFO_MARGIN_BELOW_THRESHOLD",
                    message=(
                        f"CFO margin below {thresholds.min_cfo_margin:.0%} in {statement.year}"
                    ),
                    year=statement.year,
                    field="operating_cash_flow",
                    value=margin,
                    expected=thresholds.min_cfo_margin,
                    deep_link=_deep_link(
                        inputs, f"/statements?type=CF&year={statement.year}"
                    ),
                )
            )
    return issues


def check_frozen_years(
    inputs: ValidationInputs, settings: GlobalSettings
) -> List[ValidationIssue]:
    """Frozen-year overrides must carry a reason."""
    if not inputs.frozen_year_overrides:
        return []
    issues = []
    for year in settings.timeline.frozen_years:
        if year not in inputs.frozen_year_overrides:
            continue
        reason = inputs.frozen_year_overrides[year]
        if not reason or not reason.strip():
            issues.append(
                ValidationIssue(
                    severity=CRITICAL,
                    code="FROZEN_YEAR_MODIFIED_WITHOUT_REASON",
                    message=f"Frozen year {year} modified without override reason",
                    year=year,
                    field="assumptions",
                    deep_link=_deep_link(inputs, f"/assumptions?year={year}"),
                )
            )
    return issues


def check_balance_sheet(
    inputs: ValidationInputs, settings: GlobalSettings
) -> List[ValidationIssue]:
    return [
        ValidationIssue(
            severity=CRITICAL,
            code="BALANCE_SHEET_UNBALANCED",
            message=(
                f"Balance Sheet does not balance in {statement.year} "
                f"(difference: {statement.balance_difference:,.2f})"
            ),
            year=statement.year,
            field="balance_sheet",
            value=statement.balance_difference,
            expected=0.0,
            deep_link=_deep_link(inputs, f"/statements?type=BS&year={statement.year}"),
        )
        for statement in inputs.bs
        if not statement.is_balanced
    ]


# --- Warning ---


def check_utilization(inputs: ValidationInputs, settings: GlobalSettings) -> List[ValidationIssue]:
    """Utilisation below the low bound or above capacity."""
    if not inputs.utilization:
        return []
    thresholds = settings.validation
    issues = []
    for i, utilization in enumerate(inputs.utilization):
        if utilization is None:
            continue
        year = settings.timeline.start_year + i
        deep_link = _deep_link(inputs, f"/assumptions?section=curriculum&year={year}")
        if utilization < thresholds.low_utilization:
            issues.append(
                ValidationIssue(
                    severity=WARNING,
                    code="LOW_UTILIZATION",
                    message=f"Utilization below {thresholds.low_utilization:.0%} in {year}",
                    year=year,
                    field="utilization",
                    value=utilization,
                    expected=thresholds.low_utilization,
                    deep_link=deep_link,
                )
            )
        if utilization > thresholds.max_utilization:
            issues.append(
                ValidationIssue(
                    severity=WARNING,
                    code="OVER_CAPACITY",
                    message=f"Utilization exceeds {thresholds.max_utilization:.0%} in {year}",
                    year=year,
                    field="utilization",
                    value=utilization,
                    expected=thresholds.max_utilization,
                    deep_link=deep_link,
                )
            )
    return issues


def check_capex_overrides(
    inputs: ValidationInputs, settings: GlobalSettings
) -> List[ValidationIssue]:
    """Capex overrides are expected to carry a detailed justification."""
    if not inputs.capex_overrides:
        return []
    return [
        ValidationIssue(
            severity=WARNING,
            code="CAPEX_OVERRIDE_WITHOUT_DETAILED_REASON",
            message=(
                f"Capex override for '{override.category_id}' in {override.year} "
                "lacks detailed reason"
            ),
            year=override.year,
            field="capex",
            value=override.amount,
            deep_link=_deep_link(
                inputs, f"/assumptions?section=capex&year={override.year}"
            ),
        )
        for override in inputs.capex_overrides
        if not override.detailed
    ]


def check_cpi_bounds(inputs: ValidationInputs, settings: GlobalSettings) -> List[ValidationIssue]:
    """Curriculum CPI rates outside the workspace's configured range."""
    thresholds = settings.validation
    if not inputs.cpi_rates or not thresholds.has_cpi_bounds:
        return []
    issues = []
    for curriculum_id, cpi_rate in inputs.cpi_rates.items():
        if thresholds.cpi_min <= cpi_rate <= thresholds.cpi_max:
            continue
        issues.append(
            ValidationIssue(
                severity=WARNING,
                code="CPI_RATE_OUT_OF_BOUNDS",
                message=(
                    f"CPI rate {cpi_rate:.2%} for '{curriculum_id}' outside workspace "
                    f"bounds ({thresholds.cpi_min:.2%} - {thresholds.cpi_max:.2%})"
                ),
                field="cpi_rate",
                value=cpi_rate,
                expected=thresholds.cpi_min if cpi_rate < thresholds.cpi_min else thresholds.cpi_max,
                deep_link=_deep_link(inputs, "/assumptions?section=tuition"),
            )
        )
    return issues


# --- Info ---


def check_version_staleness(
    inputs: ValidationInputs, settings: GlobalSettings
) -> List[ValidationIssue]:
    if inputs.version_updated_at is None:
        return []
    updated_at = _as_utc(inputs.version_updated_at)
    as_of = _as_utc(inputs.as_of) if inputs.as_of is not None else datetime.now(timezone.utc)
    days_since_update = (as_of - updated_at).total_seconds() / 86400
    if days_since_update <= settings.validation.stale_after_days:
        return []
    return [
        ValidationIssue(
            severity=INFO,
            code="VERSION_STALE",
            message=f"Version not updated in {int(days_since_update)} days",
            value=float(int(days_since_update)),
            expected=float(settings.validation.stale_after_days),
            deep_link=_deep_link(inputs),
        )
    ]


def check_version_description(
    inputs: ValidationInputs, settings: GlobalSettings
) -> List[ValidationIssue]:
    if inputs.version_description and inputs.version_description.strip():
        return []
    return [
        ValidationIssue(
            severity=INFO,
            code="NO_DESCRIPTION",
            message="No description provided for this version",
            deep_link=_deep_link(inputs, "/edit"),
        )
    ]


def check_base_version_locked(
    inputs: ValidationInputs, settings: GlobalSettings
) -> List[ValidationIssue]:
    if not inputs.base_version_locked:
        return []
    return [
        ValidationIssue(
            severity=INFO,
            code="BASE_VERSION_LOCKED",
            message="Base version is locked and cannot inherit changes",
            deep_link=_deep_link(inputs),
        )
    ]


CRITICAL_RULES: Sequence[ValidationRule] = (
    check_rent_load,
    check_ebitda_margin,
    check_cfo_margin,
    check_frozen_years,
    check_balance_sheet,
)

WARNING_RULES: Sequence[ValidationRule] = (
    check_utilization,
    check_capex_overrides,
    check_cpi_bounds,
)

INFO_RULES: Sequence[ValidationRule] = (
    check_version_staleness,
    check_version_description,
    check_base_version_locked,
)


def _run_rules(
    rules: Sequence[ValidationRule], inputs: ValidationInputs, settings: GlobalSettings
) -> List[ValidationIssue]:
    issues: List[ValidationIssue] = []
    for rule in rules:
        issues.extend(rule(inputs, settings))
    return issues


def validate_financial_statements(
    inputs: ValidationInputs, settings: Optional[GlobalSettings] = None
) -> ValidationResult:
    """
    Run every validation rule over generated statements.

    Args:
        inputs: Statements plus assumption and version context
        settings: Global settings supplying timeline and thresholds

    Returns:
        ValidationResult with critical, warning and info issues.
        `can_approve` is True when there are no critical issues.

    Example:
        ```python
        result = validate_financial_statements(inputs)
        if not result.can_approve:
            for issue in result.critical:
                print(issue.code, issue.year)
        ```
    """
    settings = resolve_settings(settings)
    result = ValidationResult(
        critical=_run_rules(CRITICAL_RULES, inputs, settings),
        warnings=_run_rules(WARNING_RULES, inputs, settings),
        info=_run_rules(INFO_RULES, inputs, settings),
    )
    logger.debug(
        f"Validation: {result.summary.critical} critical, "
        f"{result.summary.warnings} warning(s), {result.summary.info} info"
    )
    return result
