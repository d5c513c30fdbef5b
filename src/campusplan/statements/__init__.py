# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Three-statement generation: P&L, cash flow and balance sheet.
"""

from .generator import (
    generate_balance_sheet,
    generate_cash_flow_statement,
    generate_financial_statements,
    generate_profit_loss_statement,
)
from .models import (
    BalanceSheet,
    CashFlowStatement,
    ConvergenceInfo,
    FinancialStatements,
    ProfitLossStatement,
    StatementInputs,
)

__all__ = [
    "BalanceSheet",
    "CashFlowStatement",
    "ConvergenceInfo",
    "FinancialStatements",
    "ProfitLossStatement",
    "StatementInputs",
    "generate_balance_sheet",
    "generate_cash_flow_statement",
    "generate_financial_statements",
    "generate_profit_loss_statement",
]
