# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Strategy Analysis API

Public entry points for comparing maintenance strategies, for one asset
and across a whole asset collection. Results are pure functions of the
assets and economic parameters; nothing is stored between calls beyond
the NPV memo in `calculations`.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence, Tuple

from ..asset import Asset
from ..core.primitives import EconomicParameters, StrategyKindEnum
from .calculations import NPVBreakdown, calculate_npv_breakdown, calculate_roi_percent
from .results import PortfolioResult, StrategyAnalysisResult, StrategyResult
from .strategies import MAINTENANCE_STRATEGIES

logger = logging.getLogger(__name__)


def analyze_asset(
    asset: Asset, params: EconomicParameters
) -> Tuple[StrategyResult, ...]:
    """
    Run every catalog strategy against one asset.

    Workflow:
      1) Compute the NPV breakdown of each strategy, in catalog order
      2) Take the reactive NPV as the reference
      3) Add ROI and savings relative to that reference

    Args:
        asset: Asset to analyse
        params: Economic parameters

    Returns:
        One StrategyResult per catalog strategy. ROI is 0 unless both the
        reactive NPV and the strategy's own NPV are positive.
    """
    raw = [
        StrategyResult.from_breakdown(
            strategy, calculate_npv_breakdown(asset, strategy, params)
        )
        for strategy in MAINTENANCE_STRATEGIES
    ]

    reactive_npv = _reactive_npv(raw)
    results = tuple(
        result.model_copy(
            update={
                "roi": calculate_roi_percent(reactive_npv, result.npv),
                "savings": reactive_npv - result.npv,
            }
        )
        for result in raw
    )
    logger.debug(f"Analysed {len(results)} strategies for asset '{asset.id}'")
    return results


def analyze_portfolio(
    assets: Sequence[Asset], params: EconomicParameters
) -> Tuple[PortfolioResult, ...]:
    """
    Sum each strategy's costs over an asset collection.

    Args:
        assets: Asset collection (may be empty)
        params: Economic parameters

    Returns:
        One PortfolioResult per catalog strategy. Availability is the
        indicative `(1 - downtime_reduction * 0.1) * 100`.
    """
    results = []
    for strategy in MAINTENANCE_STRATEGIES:
        total = sum(
            (calculate_npv_breakdown(asset, strategy, params) for asset in assets),
            NPVBreakdown(),
        )
        results.append(
            PortfolioResult(
                strategy_id=strategy.id,
                name=strategy.short_name,
                full_name=strategy.name,
                npv=total.npv,
                maintenance_cost=total.total_maintenance_cost,
                downtime_cost=total.total_downtime_cost,
                replacement_cost=total.total_replacement_cost,
                availability=(1 - strategy.downtime_reduction * 0.1) * 100,
            )
        )
    logger.debug(f"Analysed portfolio of {len(assets)} assets")
    return tuple(results)


def analyze(
    assets: Sequence[Asset],
    params: EconomicParameters,
    selected_asset: Optional[Asset] = None,
) -> StrategyAnalysisResult:
    """
    Strategy analysis for a selected asset plus the whole portfolio.

    Args:
        assets: Asset collection for the portfolio view
        params: Economic parameters
        selected_asset: Asset for the per-strategy view; when omitted the
            per-strategy results are empty and `reactive_npv` is 0

    Returns:
        StrategyAnalysisResult

    Example:
        ```python
        store = ScenarioStore()
        assets = store.get_active_assets()
        params = GlobalSettings().economics.to_parameters()

        result = analyze(assets, params, selected_asset=assets[0])
        best = result.lowest_npv_strategy
        print(f"{best.strategy.short_name}: ROI {best.roi:.1f}%")
        ```
    """
    strategy_results: Tuple[StrategyResult, ...] = ()
    if selected_asset is not None:
        strategy_results = analyze_asset(selected_asset, params)

    return StrategyAnalysisResult(
        strategy_results=strategy_results,
        portfolio_results=analyze_portfolio(assets, params),
        reactive_npv=_reactive_npv(strategy_results),
    )


def _reactive_npv(results: Sequence[StrategyResult]) -> float:
    reactive = next(
        (r for r in results if r.strategy.id == StrategyKindEnum.REACTIVE), None
    )
    return reactive.npv if reactive is not None else 0.0
