# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Fusion Passport Core Primitives

Essential building blocks shared by the asset, scenario and analysis
packages: the base model, enums, constrained types, clamping helpers and
settings.
"""

from .enums import (
    AdjustmentParameterEnum,
    AssetCategoryEnum,
    ChangeDirectionEnum,
    ChangeImpactEnum,
    ConfidenceLevelEnum,
    DecisionZoneEnum,
    DisposalComplexityEnum,
    ImpactLevelEnum,
    LearningPriorityEnum,
    MatrixDimensionEnum,
    MaturityLevelEnum,
    OrderedStrEnum,
    RiskLevelEnum,
    SensitivityParameterEnum,
    SparePartsAvailabilityEnum,
    StrategyKindEnum,
    SupplyChainRealismEnum,
    UncertaintyLevelEnum,
    WhatIfPresetEnum,
)
from .model import Model
from .settings import (
    EconomicDefaults,
    EconomicParameters,
    GlobalSettings,
    ReportingSettings,
    SensitivitySettings,
)
from .types import FloatBetween0And1, PositiveFloat, PositiveInt
from .validation import clamp_int, clamp_percent, clamp_score

__all__ = [
    # Core models
    "Model",
    # Settings
    "EconomicDefaults",
    "EconomicParameters",
    "GlobalSettings",
    "ReportingSettings",
    "SensitivitySettings",
    # Enums
    "AdjustmentParameterEnum",
    "AssetCategoryEnum",
    "ChangeDirectionEnum",
    "ChangeImpactEnum",
    "ConfidenceLevelEnum",
    "DecisionZoneEnum",
    "DisposalComplexityEnum",
    "ImpactLevelEnum",
    "LearningPriorityEnum",
    "MatrixDimensionEnum",
    "MaturityLevelEnum",
    "OrderedStrEnum",
    "RiskLevelEnum",
    "SensitivityParameterEnum",
    "SparePartsAvailabilityEnum",
    "StrategyKindEnum",
    "SupplyChainRealismEnum",
    "UncertaintyLevelEnum",
    "WhatIfPresetEnum",
    # Types
    "FloatBetween0And1",
    "PositiveFloat",
    "PositiveInt",
    # Validation
    "clamp_int",
    "clamp_percent",
    "clamp_score",
]
