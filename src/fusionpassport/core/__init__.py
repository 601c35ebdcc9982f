# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Fusion Passport Core Framework

Foundational building blocks shared across the library.
"""

from . import primitives
from .primitives import EconomicParameters, GlobalSettings, Model

__all__ = [
    "primitives",
    "EconomicParameters",
    "GlobalSettings",
    "Model",
]
