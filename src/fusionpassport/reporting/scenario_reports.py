# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Scenario Comparison Reports
"""

from __future__ import annotations

import pandas as pd

from ..scenario import ScenarioComparison
from .base import BaseReport


class ScenarioComparisonReport(BaseReport):
    """
    Long-format table of every field change between two scenarios.

    One row per (asset, field) change with the active and comparison
    values, direction and impact. `summary()` gives the aggregate scores
    side by side.
    """

    result_type = (ScenarioComparison,)

    def generate(self) -> pd.DataFrame:
        rows = [
            {
                "Asset": comparison.asset.name,
                "Field": change.field,
                "Active": change.active_value,
                "Comparison": change.comparison_value,
                "Direction": change.direction.value,
                "Impact": change.impact.value,
            }
            for comparison in self._results.asset_comparisons
            for change in comparison.changes
        ]
        return pd.DataFrame(
            rows,
            columns=["Asset", "Field", "Active", "Comparison", "Direction", "Impact"],
        )

    def summary(self) -> pd.DataFrame:
        """Aggregate scores with one column per scenario."""
        summary = self._results.summary
        labels = {
            "avg_confidence": "Avg Confidence (%)",
            "critical_count": "Critical Assets",
            "avg_criticality": "Avg Criticality",
            "total_replacement_cost": f"Total Replacement Cost ({self.currency_label})",
            "total_annual_maintenance": f"Total Annual Maintenance ({self.currency_label})",
            "avg_lead_time": "Avg Lead Time (mo)",
        }
        return pd.DataFrame(
            {
                "Active": [getattr(summary.active_score, k) for k in labels],
                "Comparison": [getattr(summary.comparison_score, k) for k in labels],
            },
            index=pd.Index(list(labels.values()), name="Metric"),
        )
