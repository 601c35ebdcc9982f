# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Executive dashboard metrics over an asset collection.
"""

from __future__ import annotations

import math
from typing import Dict, Sequence

import pandas as pd

from ..asset import Asset
from ..core.primitives import LearningPriorityEnum, MaturityLevelEnum, RiskLevelEnum


class DashboardMetrics:
    """
    Headline counts and distributions for the executive view.

    Example:
        ```python
        metrics = DashboardMetrics(store.get_active_assets())
        print(metrics.critical_count, metrics.avg_confidence)
        ```
    """

    def __init__(self, assets: Sequence[Asset]):
        self._assets = tuple(assets)

    @property
    def total_assets(self) -> int:
        return len(self._assets)

    @property
    def critical_count(self) -> int:
        return sum(1 for a in self._assets if a.risk_level == RiskLevelEnum.CRITICAL)

    @property
    def avg_confidence(self) -> int:
        """Mean confidence score, rounded half up; 0 for no assets."""
        if not self._assets:
            return 0
        mean = sum(a.confidence_score for a in self._assets) / len(self._assets)
        return int(math.floor(mean + 0.5))

    @property
    def immediate_actions(self) -> int:
        """Assets whose learning priority is Immediate."""
        return sum(
            1
            for a in self._assets
            if a.learning_priority == LearningPriorityEnum.IMMEDIATE
        )

    @property
    def risk_distribution(self) -> Dict[RiskLevelEnum, int]:
        """Asset count per risk level, most severe first."""
        return {
            level: sum(1 for a in self._assets if a.risk_level == level)
            for level in reversed(list(RiskLevelEnum))
        }

    @property
    def maturity_distribution(self) -> Dict[MaturityLevelEnum, int]:
        return {
            level: sum(1 for a in self._assets if a.maturity_level == level)
            for level in MaturityLevelEnum
        }

    def risk_frame(self) -> pd.DataFrame:
        """Risk distribution with counts and percentage of the collection."""
        counts = {level.value: n for level, n in self.risk_distribution.items()}
        df = pd.DataFrame(
            {"Count": list(counts.values())},
            index=pd.Index(list(counts.keys()), name="Risk Level"),
        )
        total = self.total_assets
        df["Share (%)"] = df["Count"] / total * 100 if total else 0.0
        return df

    def to_dict(self) -> Dict[str, object]:
        return {
            "total_assets": self.total_assets,
            "critical_count": self.critical_count,
            "avg_confidence": self.avg_confidence,
            "immediate_actions": self.immediate_actions,
            "risk_distribution": {k.value: v for k, v in self.risk_distribution.items()},
        }
