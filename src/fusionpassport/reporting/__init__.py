# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Fusion Passport Reporting Module

pandas report frames built from engine outputs, plus executive dashboard
metrics. The fluent entry point for strategy reports is
`StrategyAnalysisResult.reporting`:

    result = analyze(assets, params, selected_asset=assets[0])
    table = result.reporting.strategy_comparison()
"""

from .base import BaseReport
from .dashboard import DashboardMetrics
from .interface import ReportingInterface
from .scenario_reports import ScenarioComparisonReport
from .sensitivity_reports import (
    SensitivityCurveReport,
    StrategySensitivityReport,
    TornadoReport,
)
from .strategy_reports import (
    CostBreakdownReport,
    PortfolioReport,
    StrategyComparisonReport,
)

__all__ = [
    # Base classes for custom reports
    "BaseReport",
    # Fluent interface
    "ReportingInterface",
    # Strategy reports
    "CostBreakdownReport",
    "PortfolioReport",
    "StrategyComparisonReport",
    # Sensitivity reports
    "SensitivityCurveReport",
    "StrategySensitivityReport",
    "TornadoReport",
    # Scenario reports
    "ScenarioComparisonReport",
    # Dashboard
    "DashboardMetrics",
]
