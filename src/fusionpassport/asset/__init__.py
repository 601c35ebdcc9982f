# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Fusion Asset Passports

Asset record models, the baseline seed dataset and the criticality matrix.
"""

from ._asset import (
    Asset,
    CostSchedule,
    DegradationHypothesis,
    EndOfLifeAssumptions,
    MaintainabilityInfo,
    MonitoringStrategy,
    SystemValueImpact,
)
from .criticality import (
    MAX_CRITICALITY_SCORE,
    DecisionRule,
    MatrixPosition,
    asset_decision_rule,
    criticality_percentage,
    criticality_score,
    decision_rule,
    matrix_position,
    prioritize_assets,
    third_dimension_value,
)
from .data import (
    fusion_assets,
    get_asset_by_id,
    get_assets_by_category,
    get_critical_assets,
)

__all__ = [
    # Records
    "Asset",
    "CostSchedule",
    "DegradationHypothesis",
    "EndOfLifeAssumptions",
    "MaintainabilityInfo",
    "MonitoringStrategy",
    "SystemValueImpact",
    # Seed data
    "fusion_assets",
    "get_asset_by_id",
    "get_assets_by_category",
    "get_critical_assets",
    # Criticality matrix
    "MAX_CRITICALITY_SCORE",
    "DecisionRule",
    "MatrixPosition",
    "asset_decision_rule",
    "criticality_percentage",
    "criticality_score",
    "decision_rule",
    "matrix_position",
    "prioritize_assets",
    "third_dimension_value",
]
