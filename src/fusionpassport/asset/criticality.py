# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Criticality matrix and investment prioritisation.

Assets are placed on a 5x5 grid of neutron-damage uncertainty (x) against
replaceability difficulty (y). Grid zones map to decision rules, and a
composite criticality score ranks assets for R&D and instrumentation
investment. Display-only: none of this feeds the financial engines.
"""

from __future__ import annotations

from typing import Iterable, Tuple

from ..core.primitives import (
    DecisionZoneEnum,
    MatrixDimensionEnum,
    Model,
    UncertaintyLevelEnum,
)
from ._asset import Asset

MAX_CRITICALITY_SCORE = 15


class DecisionRule(Model):
    zone: DecisionZoneEnum
    label: str


class MatrixPosition(Model):
    """Grid cell of an asset: x = neutron uncertainty, y = replaceability."""

    x: int
    y: int


def criticality_score(asset: Asset) -> int:
    """Composite 3-15 score: uncertainty + replaceability + system value."""
    return (
        asset.neutron_damage_uncertainty
        + asset.replaceability_difficulty
        + asset.system_value_impact
    )


def criticality_percentage(asset: Asset) -> float:
    return criticality_score(asset) / MAX_CRITICALITY_SCORE * 100


def matrix_position(asset: Asset) -> MatrixPosition:
    return MatrixPosition(
        x=asset.neutron_damage_uncertainty, y=asset.replaceability_difficulty
    )


def decision_rule(neutron_uncertainty: int, replaceability: int) -> DecisionRule:
    """
    Map a matrix cell to its decision rule.

    Args:
        neutron_uncertainty: Neutron-damage uncertainty (1-5)
        replaceability: Replaceability difficulty (1-5)

    Returns:
        DecisionRule for the cell; zones are tested from most to least severe
    """
    if neutron_uncertainty >= 4 and replaceability >= 4:
        return DecisionRule(zone=DecisionZoneEnum.CRITICAL, label="Immediate R&D Priority")
    if neutron_uncertainty >= 3 and replaceability >= 3:
        return DecisionRule(zone=DecisionZoneEnum.HIGH, label="Enhanced Monitoring")
    if neutron_uncertainty >= 4 or replaceability >= 4:
        return DecisionRule(zone=DecisionZoneEnum.MEDIUM, label="Targeted Investment")
    return DecisionRule(zone=DecisionZoneEnum.LOW, label="Standard Management")


def asset_decision_rule(asset: Asset) -> DecisionRule:
    return decision_rule(asset.neutron_damage_uncertainty, asset.replaceability_difficulty)


def third_dimension_value(asset: Asset, dimension: MatrixDimensionEnum) -> int:
    """
    Value of the selectable third matrix dimension (1-5).

    The regulatory dimension is derived from waste classification
    uncertainty: High -> 5, Medium -> 3, anything else -> 1.
    """
    if dimension == MatrixDimensionEnum.SYSTEM_VALUE:
        return asset.system_value_impact
    if dimension == MatrixDimensionEnum.LEARNING:
        return asset.instrumentation_priority

    uncertainty = (
        asset.end_of_life.classification_uncertainty
        if asset.end_of_life is not None
        else asset.cost_schedule.classification_uncertainty
    )
    if uncertainty == UncertaintyLevelEnum.HIGH:
        return 5
    if uncertainty == UncertaintyLevelEnum.MEDIUM:
        return 3
    return 1


def prioritize_assets(assets: Iterable[Asset]) -> Tuple[Asset, ...]:
    """Assets ordered by criticality score, highest first (stable for ties)."""
    return tuple(sorted(assets, key=criticality_score, reverse=True))
