# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Statement line items and the inputs they are generated from.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field, model_validator

from ..core.primitives import Model, PositiveFloat, validate_aligned_series


class StatementInputs(Model):
    """
    Year-aligned inputs of the three-statement generator.

    Every series is indexed from the first model year. Optional series
    (`interest`, `working_capital_change`) count as zero when omitted.
    """

    revenue: List[float]
    staff_costs: List[float]
    rent: List[float]
    opex: List[float]
    capex: List[float]
    depreciation: List[float]
    interest: Optional[List[float]] = None
    tax_rate: PositiveFloat = 0.0
    working_capital_change: Optional[List[float]] = None
    beginning_cash: float = 0.0

    @model_validator(mode="after")
    def check_alignment(self) -> "StatementInputs":
        validate_aligned_series(
            {
                "revenue": self.revenue,
                "staff_costs": self.staff_costs,
                "rent": self.rent,
                "opex": self.opex,
                "capex": self.capex,
                "depreciation": self.depreciation,
                "interest": self.interest,
                "working_capital_change": self.working_capital_change,
            }
        )
        return self

    @property
    def num_years(self) -> int:
        return len(self.revenue)

    def interest_at(self, position: int) -> float:
        return self.interest[position] if self.interest is not None else 0.0

    def working_capital_change_at(self, position: int) -> float:
        if self.working_capital_change is None:
            return 0.0
        return self.working_capital_change[position]


class ProfitLossStatement(Model):
    year: int
    revenue: float
    cogs: float
    gross_profit: float
    operating_expenses: float = 0.0
    ebitda: float
    depreciation: float
    ebit: float
    interest: float
    taxes: float
    net_income: float


class CashFlowStatement(Model):
    year: int
    # Operating activities
    net_income: float
    depreciation: float
    working_capital_change: float
    operating_cash_flow: float
    # Investing activities
    capex: float
    investing_cash_flow: float
    # Financing activities
    financing_cash_flow: float = 0.0
    net_cash_change: float
    beginning_cash: float
    ending_cash: float


class BalanceSheet(Model):
    year: int
    # Assets
    cash: float
    fixed_assets: float
    total_assets: float
    # Liabilities
    deferred_revenue: float = 0.0
    total_liabilities: float
    # Equity
    retained_earnings: float
    total_equity: float
    total_liabilities_and_equity: float
    is_balanced: bool
    balance_difference: float


class ConvergenceInfo(Model):
    """How many regenerations ran and whether every year ended balanced."""

    passes: int = Field(..., ge=1)
    balanced: bool


class FinancialStatements(Model):
    """The three statements, one entry per model year, plus convergence metadata."""

    pl: List[ProfitLossStatement]
    bs: List[BalanceSheet]
    cf: List[CashFlowStatement]
    convergence: ConvergenceInfo

    @property
    def years(self) -> List[int]:
        return [statement.year for statement in self.pl]
