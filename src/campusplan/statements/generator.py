# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Three-statement generation with iterative convergence.

The statements depend on each other: the cash flow statement starts from
net income and the balance sheet takes its cash from the cash flow
statement. Rather than solving the circularity, the statements are
regenerated a bounded number of times, each pass reseeding the opening
cash from the previous pass's first balance sheet, until every year
balances.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from ..core.primitives import GlobalSettings, resolve_settings
from ..utils.decimal import financial_context, round_currency, sum, to_decimal
from .models import (
    BalanceSheet,
    CashFlowStatement,
    ConvergenceInfo,
    FinancialStatements,
    ProfitLossStatement,
    StatementInputs,
)

logger = logging.getLogger(__name__)


def generate_profit_loss_statement(
    inputs: StatementInputs, settings: Optional[GlobalSettings] = None
) -> List[ProfitLossStatement]:
    """
    Generate the P&L for every year of `inputs`.

    COGS is staff costs + rent + opex; EBITDA equals gross profit since
    there is no separate non-COGS expense layer.
    """
    start_year = resolve_settings(settings).timeline.start_year
    statements: List[ProfitLossStatement] = []

    for i in range(inputs.num_years):
        revenue = inputs.revenue[i]
        cogs = round_currency(sum([inputs.staff_costs[i], inputs.rent[i], inputs.opex[i]]))
        operating_expenses = 0.0
        depreciation = inputs.depreciation[i]
        interest = inputs.interest_at(i)

        with financial_context():
            gross_profit = round_currency(to_decimal(revenue) - to_decimal(cogs))
            ebitda = round_currency(to_decimal(gross_profit) - to_decimal(operating_expenses))
            ebit = round_currency(to_decimal(ebitda) - to_decimal(depreciation))
            ebt = round_currency(to_decimal(ebit) - to_decimal(interest))
            taxes = round_currency(to_decimal(ebt) * to_decimal(inputs.tax_rate))
            net_income = round_currency(to_decimal(ebt) - to_decimal(taxes))

        statements.append(
            ProfitLossStatement(
                year=start_year + i,
                revenue=revenue,
                cogs=cogs,
                gross_profit=gross_profit,
                operating_expenses=operating_expenses,
                ebitda=ebitda,
                depreciation=depreciation,
                ebit=ebit,
                interest=interest,
                taxes=taxes,
                net_income=net_income,
            )
        )

    return statements


def generate_cash_flow_statement(
    inputs: StatementInputs, pl: List[ProfitLossStatement]
) -> List[CashFlowStatement]:
    """Generate the cash flow statement, rolling ending cash into the next year."""
    statements: List[CashFlowStatement] = []
    beginning_cash = inputs.beginning_cash

    for i, pl_statement in enumerate(pl):
        working_capital_change = inputs.working_capital_change_at(i)
        capex = inputs.capex[i]

        with financial_context():
            operating_cash_flow = round_currency(
                sum([pl_statement.net_income, pl_statement.depreciation])
                - to_decimal(working_capital_change)
            )
            investing_cash_flow = round_currency(-to_decimal(capex))
            financing_cash_flow = 0.0
            net_cash_change = round_currency(
                sum([operating_cash_flow, investing_cash_flow, financing_cash_flow])
            )
            ending_cash = round_currency(to_decimal(beginning_cash) + to_decimal(net_cash_change))

        statements.append(
            CashFlowStatement(
                year=pl_statement.year,
                net_income=pl_statement.net_income,
                depreciation=pl_statement.depreciation,
                working_capital_change=working_capital_change,
                operating_cash_flow=operating_cash_flow,
                capex=capex,
                investing_cash_flow=investing_cash_flow,
                financing_cash_flow=financing_cash_flow,
                net_cash_change=net_cash_change,
                beginning_cash=beginning_cash,
                ending_cash=ending_cash,
            )
        )
        beginning_cash = ending_cash

    return statements


def generate_balance_sheet(
    inputs: StatementInputs,
    cf: List[CashFlowStatement],
    settings: Optional[GlobalSettings] = None,
) -> List[BalanceSheet]:
    """
    Generate the balance sheet from the cash flow statement.

    Fixed assets accumulate capex net of depreciation and are reported
    with a floor of zero. Equity is retained earnings only; liabilities
    are zero.
    """
    tolerance = to_decimal(resolve_settings(settings).calculation.balance_tolerance)
    statements: List[BalanceSheet] = []
    retained_earnings = 0.0
    cumulative_fixed_assets = 0.0

    for i, cf_statement in enumerate(cf):
        with financial_context():
            retained_earnings = round_currency(
                to_decimal(retained_earnings) + to_decimal(cf_statement.net_income)
            )
            cumulative_fixed_assets = round_currency(
                to_decimal(cumulative_fixed_assets)
                + to_decimal(inputs.capex[i])
                - to_decimal(inputs.depreciation[i])
            )

            cash = cf_statement.ending_cash
            fixed_assets = max(0.0, cumulative_fixed_assets)
            total_assets = round_currency(sum([cash, fixed_assets]))

            deferred_revenue = 0.0
            total_liabilities = deferred_revenue
            total_equity = retained_earnings
            total_liabilities_and_equity = round_currency(
                sum([total_liabilities, total_equity])
            )

            difference = abs(to_decimal(total_assets) - to_decimal(total_liabilities_and_equity))

        statements.append(
            BalanceSheet(
                year=cf_statement.year,
                cash=cash,
                fixed_assets=fixed_assets,
                total_assets=total_assets,
                deferred_revenue=deferred_revenue,
                total_liabilities=total_liabilities,
                retained_earnings=retained_earnings,
                total_equity=total_equity,
                total_liabilities_and_equity=total_liabilities_and_equity,
                is_balanced=difference <= tolerance,
                balance_difference=round_currency(difference),
            )
        )

    return statements


def _generate_pass(inputs: StatementInputs, settings: GlobalSettings):
    pl = generate_profit_loss_statement(inputs, settings)
    cf = generate_cash_flow_statement(inputs, pl)
    bs = generate_balance_sheet(inputs, cf, settings)
    return pl, cf, bs


def generate_financial_statements(
    inputs: StatementInputs,
    max_passes: Optional[int] = None,
    settings: Optional[GlobalSettings] = None,
) -> FinancialStatements:
    """
    Generate all three statements with iterative convergence.

    Args:
        inputs: Year-aligned statement inputs
        max_passes: Maximum number of full regenerations. Defaults to
            `settings.calculation.max_convergence_passes`.
        settings: Global settings

    Returns:
        FinancialStatements whose `convergence` reports the passes run and
        whether every year balanced. Exhausting `max_passes` is not an
        error; the last pass is returned with `balanced=False`.

    Raises:
        ValueError: If `max_passes` is less than 1
    """
    settings = resolve_settings(settings)
    if max_passes is None:
        max_passes = settings.calculation.max_convergence_passes
    if max_passes < 1:
        raise ValueError(f"max_passes must be at least 1, got {max_passes}")

    pl, cf, bs = _generate_pass(inputs, settings)
    passes = 1
    balanced = all(statement.is_balanced for statement in bs)
    logger.debug(f"Statement pass {passes}: balanced={balanced}")

    while not balanced and passes < max_passes:
        opening_cash = bs[0].cash if bs and bs[0].cash else inputs.beginning_cash
        inputs = inputs.model_copy(update={"beginning_cash": opening_cash})

        pl, cf, bs = _generate_pass(inputs, settings)
        passes += 1
        balanced = all(statement.is_balanced for statement in bs)
        logger.debug(
            f"Statement pass {passes}: opening cash {opening_cash:,.2f}, balanced={balanced}"
        )

    if not balanced:
        unbalanced_years = [statement.year for statement in bs if not statement.is_balanced]
        logger.warning(
            f"Statements did not balance after {passes} pass(es); "
            f"{len(unbalanced_years)} unbalanced year(s) starting {unbalanced_years[0]}"
        )

    return FinancialStatements(
        pl=pl, bs=bs, cf=cf, convergence=ConvergenceInfo(passes=passes, balanced=balanced)
    )
