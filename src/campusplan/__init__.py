# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

import importlib
import logging

"""
Campusplan - Deterministic Financial Projection Engine for School Facilities

Thirty-year Profit & Loss, Balance Sheet and Cash Flow projections for an
education facility, plus the covenant validation engine that gates
approval of a model version.

Key Entry Points:
- campusplan.analysis.run_model() - Full model run from assumptions to validation
- campusplan.statements.generate_financial_statements() - Three statements with convergence
- campusplan.validation.validate_financial_statements() - Tiered covenant checks
- campusplan.curriculum / rent / capex / staffing / opex - Schedule generators

Example Usage:
    ```python
    from campusplan.analysis import ModelAssumptions, run_model

    result = run_model(assumptions)
    print(result.statements.convergence)
    print(result.validation.can_approve)
    ```
"""

# Libraries must not configure logging; applications attach their own handlers.
logging.getLogger(__name__).addHandler(logging.NullHandler())


# Public API surface (lazy-loaded on first attribute access)
__all__ = [  # noqa: F822 - lazy loading
    "analysis",
    "capex",
    "core",
    "curriculum",
    "opex",
    "rent",
    "reporting",
    "staffing",
    "statements",
    "validation",
]


_LAZY_MODULES = {name: f"campusplan.{name}" for name in __all__}


def __getattr__(name: str):
    module_path = _LAZY_MODULES.get(name)
    if module_path is None:
        raise AttributeError(f"module 'campusplan' has no attribute '{name}'")
    module = importlib.import_module(module_path)
    globals()[name] = module
    return module
