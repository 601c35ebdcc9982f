# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Field-level differences between two versions of the same asset.
"""

from __future__ import annotations

from typing import Any, List, Optional, Tuple

from ..asset import Asset
from ..core.primitives import Model

DIFF_FIELDS: Tuple[str, ...] = (
    "neutron_damage_uncertainty",
    "replaceability_difficulty",
    "system_value_impact",
    "maturity_level",
    "confidence_score",
    "risk_level",
    "learning_priority",
    "instrumentation_priority",
)


class AssetFieldDiff(Model):
    field: str
    baseline_value: Any
    current_value: Any


def diff_assets(
    baseline: Optional[Asset], current: Optional[Asset]
) -> List[AssetFieldDiff]:
    """
    Compare the tracked fields of two asset versions.

    Args:
        baseline: Reference version of the asset
        current: Version to compare against the reference

    Returns:
        One entry per tracked field whose value differs, in `DIFF_FIELDS`
        order. Empty when either side is missing.
    """
    if baseline is None or current is None:
        return []

    diffs = []
    for name in DIFF_FIELDS:
        before = getattr(baseline, name)
        after = getattr(current, name)
        if before != after:
            diffs.append(
                AssetFieldDiff(field=name, baseline_value=before, current_value=after)
            )
    return diffs
