# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Strategy Reports

Tabular views of a `StrategyAnalysisResult`: per-asset strategy
comparison, portfolio totals, and the cost split of one strategy.
"""

from __future__ import annotations

from typing import Union

import pandas as pd

from ..analysis import StrategyAnalysisResult
from ..core.primitives import StrategyKindEnum
from .base import BaseReport


class StrategyComparisonReport(BaseReport):
    """
    One row per strategy for the selected asset.

    Columns carry display labels; currency columns are in currency-millions
    and rounded to the configured precision.
    """

    result_type = (StrategyAnalysisResult,)

    def generate(self) -> pd.DataFrame:
        """
        Generate the per-strategy comparison table.

        Returns:
            DataFrame indexed by strategy name; empty when the result has
            no selected asset

        Example:
            ```python
            result = analyze(assets, params, selected_asset=assets[0])
            table = StrategyComparisonReport(result).generate()
            ```
        """
        rows = [
            {
                "Strategy": r.strategy.name,
                "NPV": self._round(r.npv),
                "Annual Maintenance": self._round(r.annual_maintenance_cost),
                "Downtime per Event (wks)": self._round(r.expected_downtime),
                "Expected Failures": r.expected_failures,
                "Total Cost": self._round(r.total_cost),
                "Availability Gain (%)": r.availability_gain,
                "Risk Reduction (%)": r.risk_reduction,
                "ROI (%)": self._round(r.roi),
                "Savings": self._round(r.savings),
            }
            for r in self._results.strategy_results
        ]
        if not rows:
            return pd.DataFrame()
        return pd.DataFrame(rows).set_index("Strategy")


class PortfolioReport(BaseReport):
    """Portfolio totals per strategy, short strategy names as the index."""

    result_type = (StrategyAnalysisResult,)

    def generate(self) -> pd.DataFrame:
        rows = [
            {
                "Strategy": p.name,
                "Full Name": p.full_name,
                "NPV": self._round(p.npv),
                "Maintenance Cost": self._round(p.maintenance_cost),
                "Downtime Cost": self._round(p.downtime_cost),
                "Replacement Cost": self._round(p.replacement_cost),
                "Availability (%)": p.availability,
            }
            for p in self._results.portfolio_results
        ]
        if not rows:
            return pd.DataFrame()
        return pd.DataFrame(rows).set_index("Strategy")


class CostBreakdownReport(BaseReport):
    """Maintenance / downtime / replacement split of one strategy."""

    result_type = (StrategyAnalysisResult,)

    def generate(
        self, strategy_id: Union[str, StrategyKindEnum] = StrategyKindEnum.PROACTIVE
    ) -> pd.DataFrame:
        """
        Args:
            strategy_id: Strategy to break down (defaults to proactive)

        Returns:
            DataFrame with an amount and a share-of-total column per cost
            component; empty if the strategy has no result
        """
        components = self._results.cost_breakdown(strategy_id)
        if not components:
            return pd.DataFrame()

        df = pd.DataFrame(components, columns=["Component", "Amount"]).set_index(
            "Component"
        )
        total = df["Amount"].sum()
        df["Share (%)"] = df["Amount"] / total * 100 if total else 0.0
        df["Amount"] = df["Amount"].round(self._settings.decimal_precision)
        return df
