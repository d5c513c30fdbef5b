# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
DataFrame views of model output.

Statements are shown the way they are usually read: line items as rows
and model years as columns. Schedules are year-indexed with one column
per series, and validation issues are one row per issue.
"""

from __future__ import annotations

from typing import Dict, List, Sequence

import pandas as pd

from ..analysis import ModelRunResult
from ..statements import FinancialStatements
from ..validation import ValidationResult

PL_LINE_ITEMS: Dict[str, str] = {
    "revenue": "Revenue",
    "cogs": "COGS",
    "gross_profit": "Gross Profit",
    "operating_expenses": "Operating Expenses",
    "ebitda": "EBITDA",
    "depreciation": "Depreciation",
    "ebit": "EBIT",
    "interest": "Interest",
    "taxes": "Taxes",
    "net_income": "Net Income",
}

CF_LINE_ITEMS: Dict[str, str] = {
    "net_income": "Net Income",
    "depreciation": "Depreciation",
    "working_capital_change": "Working Capital Change",
    "operating_cash_flow": "Operating Cash Flow",
    "capex": "Capex",
    "investing_cash_flow": "Investing Cash Flow",
    "financing_cash_flow": "Financing Cash Flow",
    "net_cash_change": "Net Cash Change",
    "beginning_cash": "Beginning Cash",
    "ending_cash": "Ending Cash",
}

BS_LINE_ITEMS: Dict[str, str] = {
    "cash": "Cash",
    "fixed_assets": "Fixed Assets",
    "total_assets": "Total Assets",
    "deferred_revenue": "Deferred Revenue",
    "total_liabilities": "Total Liabilities",
    "retained_earnings": "Retained Earnings",
    "total_equity": "Total Equity",
    "total_liabilities_and_equity": "Total Liabilities & Equity",
    "balance_difference": "Balance Difference",
}

_STATEMENTS = {
    "pl": ("pl", PL_LINE_ITEMS),
    "cf": ("cf", CF_LINE_ITEMS),
    "bs": ("bs", BS_LINE_ITEMS),
}

ISSUE_COLUMNS: List[str] = [
    "severity",
    "code",
    "message",
    "year",
    "field",
    "value",
    "expected",
    "deep_link",
]


def _line_items_frame(rows: Sequence, line_items: Dict[str, str]) -> pd.DataFrame:
    years = [row.year for row in rows]
    data = {
        label: [getattr(row, attribute) for row in rows]
        for attribute, label in line_items.items()
    }
    frame = pd.DataFrame(data, index=pd.Index(years, name="year")).T
    frame.index.name = "line_item"
    return frame


def statements_to_frame(statements: FinancialStatements, statement: str = "pl") -> pd.DataFrame:
    """
    One statement as a line item x year table.

    Args:
        statements: Generated statements
        statement: "pl", "cf" or "bs"

    Returns:
        DataFrame indexed by line item label with one column per year

    Raises:
        ValueError: If `statement` is not a known statement type

    Example:
        ```python
        pl = statements_to_frame(result.statements, "pl")
        pl.loc["EBITDA", 2030]
        ```
    """
    try:
        attribute, line_items = _STATEMENTS[statement.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown statement '{statement}'; expected one of {sorted(_STATEMENTS)}"
        ) from None
    return _line_items_frame(getattr(statements, attribute), line_items)


def schedules_to_frame(result: ModelRunResult) -> pd.DataFrame:
    """Year-indexed table of every intermediate schedule of a model run."""
    summary = result.enrollment_summary
    frame = pd.DataFrame(
        {
            "students": summary.students,
            "capacity": summary.capacity,
            "utilisation": summary.utilisation,
            "revenue": result.revenue,
            "staff_costs": result.staff_costs,
            "rent": result.rent,
            "rent_load": result.rent_load,
            "opex": result.opex_totals,
            "capex": result.capex_totals,
        },
        index=pd.Index(result.statements.years, name="year"),
    )
    return frame


def issues_to_frame(result: ValidationResult) -> pd.DataFrame:
    """One row per validation issue, critical first."""
    records = [
        {**issue.model_dump(), "severity": issue.severity.value}
        for issue in result.all_issues()
    ]
    return pd.DataFrame.from_records(records, columns=ISSUE_COLUMNS)
