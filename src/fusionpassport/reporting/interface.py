# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Reporting Interface

Fluent access to the strategy reports of a `StrategyAnalysisResult`,
exposed as its `reporting` property.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

import pandas as pd

from ..core.primitives import StrategyKindEnum
from .strategy_reports import CostBreakdownReport, PortfolioReport, StrategyComparisonReport

if TYPE_CHECKING:
    from ..analysis import StrategyAnalysisResult


class ReportingInterface:
    """
    Example:
        result = analyze(assets, params, selected_asset=assets[0])
        table = result.reporting.strategy_comparison()
        portfolio = result.reporting.portfolio()
    """

    def __init__(self, results: "StrategyAnalysisResult"):
        self._results = results

    def strategy_comparison(self) -> pd.DataFrame:
        return StrategyComparisonReport(self._results).generate()

    def portfolio(self) -> pd.DataFrame:
        return PortfolioReport(self._results).generate()

    def cost_breakdown(
        self, strategy_id: Union[str, StrategyKindEnum] = StrategyKindEnum.PROACTIVE
    ) -> pd.DataFrame:
        return CostBreakdownReport(self._results).generate(strategy_id=strategy_id)
