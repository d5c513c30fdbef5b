# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from .opex import (
    OpExCategory,
    OpExCategoryAmount,
    OpExResult,
    calculate_category_opex,
    calculate_opex,
    generate_opex_schedule,
)

__all__ = [
    "OpExCategory",
    "OpExCategoryAmount",
    "OpExResult",
    "calculate_category_opex",
    "calculate_opex",
    "generate_opex_schedule",
]
