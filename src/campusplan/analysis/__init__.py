# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
End-to-end model runs for a single version.
"""

from .models import ModelAssumptions, ModelRunResult, VersionContext
from .run import run_model

__all__ = ["ModelAssumptions", "ModelRunResult", "VersionContext", "run_model"]
