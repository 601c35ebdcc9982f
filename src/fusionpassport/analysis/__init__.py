# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Maintenance Strategy Analysis

Strategy catalog, the lifecycle NPV calculator, the strategy analysis
engine, sensitivity/tornado analysis and the what-if builder.

Example:
    ```python
    from fusionpassport.analysis import SensitivityAnalysis, analyze

    result = analyze(assets, params, selected_asset=assets[0])
    tornado = SensitivityAnalysis(assets[0], params).tornado("proactive", "reactive")
    ```
"""

from .calculations import (
    NPVBreakdown,
    base_failure_rate,
    calculate_npv,
    calculate_npv_breakdown,
    calculate_roi_percent,
    clear_calculation_cache,
)
from .engine import analyze, analyze_asset, analyze_portfolio
from .results import PortfolioResult, StrategyAnalysisResult, StrategyResult
from .sensitivity import (
    SensitivityAnalysis,
    SensitivityPoint,
    StrategyNPVPoint,
    TornadoEntry,
    calculate_roi,
    format_percent_change,
)
from .strategies import (
    MAINTENANCE_STRATEGIES,
    MaintenanceStrategy,
    get_strategy,
    resolve_strategy,
)
from .whatif import (
    ParameterAdjustment,
    WhatIfAnalysis,
    WhatIfComparison,
    apply_adjustments,
    preset_adjustments,
)

__all__ = [
    # Strategies
    "MAINTENANCE_STRATEGIES",
    "MaintenanceStrategy",
    "get_strategy",
    "resolve_strategy",
    # NPV core
    "NPVBreakdown",
    "base_failure_rate",
    "calculate_npv",
    "calculate_npv_breakdown",
    "calculate_roi_percent",
    "clear_calculation_cache",
    # Engine
    "PortfolioResult",
    "StrategyAnalysisResult",
    "StrategyResult",
    "analyze",
    "analyze_asset",
    "analyze_portfolio",
    # Sensitivity
    "SensitivityAnalysis",
    "SensitivityPoint",
    "StrategyNPVPoint",
    "TornadoEntry",
    "calculate_roi",
    "format_percent_change",
    # What-if
    "ParameterAdjustment",
    "WhatIfAnalysis",
    "WhatIfComparison",
    "apply_adjustments",
    "preset_adjustments",
]
