# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Strategy analysis results.

Immutable containers for the output of the strategy analysis engine. They
carry no calculation logic; every number is produced by
`calculate_npv_breakdown` and the engine's ROI pass.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Tuple, Union

from ..core.primitives import Model, StrategyKindEnum
from .calculations import NPVBreakdown
from .strategies import MaintenanceStrategy

if TYPE_CHECKING:
    from ..reporting.interface import ReportingInterface


class StrategyResult(Model):
    """
    Economics of one asset under one strategy, with ROI against reactive.

    Attributes:
        strategy: The strategy analysed
        npv: Discounted lifecycle cost (M$)
        annual_maintenance_cost: Strategy-adjusted annual maintenance (M$)
        expected_downtime: Downtime per failure event (weeks)
        expected_failures: Expected failures over the horizon
        total_maintenance_cost: Undiscounted maintenance total (M$)
        total_downtime_cost: Undiscounted expected downtime cost (M$)
        total_replacement_cost: Undiscounted expected replacement cost (M$)
        total_cost: Sum of the three totals (M$)
        availability_gain: Downtime reduction in percent
        risk_reduction: Failure-risk reduction in percent
        roi: Percent return relative to the reactive strategy
        savings: Reactive NPV minus this NPV (M$)
    """

    strategy: MaintenanceStrategy
    npv: float
    annual_maintenance_cost: float
    expected_downtime: float
    expected_failures: float
    total_maintenance_cost: float
    total_downtime_cost: float
    total_replacement_cost: float
    total_cost: float
    availability_gain: float
    risk_reduction: float
    roi: float = 0.0
    savings: float = 0.0

    @classmethod
    def from_breakdown(
        cls, strategy: MaintenanceStrategy, breakdown: NPVBreakdown
    ) -> "StrategyResult":
        return cls(
            strategy=strategy,
            npv=breakdown.npv,
            annual_maintenance_cost=breakdown.annual_maintenance_cost,
            expected_downtime=breakdown.expected_downtime,
            expected_failures=breakdown.expected_failures,
            total_maintenance_cost=breakdown.total_maintenance_cost,
            total_downtime_cost=breakdown.total_downtime_cost,
            total_replacement_cost=breakdown.total_replacement_cost,
            total_cost=breakdown.total_cost,
            availability_gain=strategy.downtime_reduction * 100,
            risk_reduction=strategy.failure_risk_reduction * 100,
        )


class PortfolioResult(Model):
    """Strategy totals summed over every asset of a collection."""

    strategy_id: StrategyKindEnum
    name: str
    full_name: str
    npv: float
    maintenance_cost: float
    downtime_cost: float
    replacement_cost: float
    availability: float


class StrategyAnalysisResult(Model):
    """
    Combined output of `analyze`.

    `strategy_results` is empty (and `reactive_npv` 0) when no asset was
    selected; `portfolio_results` always covers the whole collection.
    """

    strategy_results: Tuple[StrategyResult, ...] = ()
    portfolio_results: Tuple[PortfolioResult, ...] = ()
    reactive_npv: float = 0.0

    def get_strategy_result(
        self, strategy_id: Union[str, StrategyKindEnum]
    ) -> Optional[StrategyResult]:
        return next(
            (r for r in self.strategy_results if r.strategy.id == strategy_id), None
        )

    def get_portfolio_result(
        self, strategy_id: Union[str, StrategyKindEnum]
    ) -> Optional[PortfolioResult]:
        return next(
            (r for r in self.portfolio_results if r.strategy_id == strategy_id), None
        )

    @property
    def lowest_npv_strategy(self) -> Optional[StrategyResult]:
        """Cheapest strategy for the selected asset (first wins on ties)."""
        if not self.strategy_results:
            return None
        return min(self.strategy_results, key=lambda r: r.npv)

    def cost_breakdown(
        self, strategy_id: Union[str, StrategyKindEnum] = StrategyKindEnum.PROACTIVE
    ) -> Tuple[Tuple[str, float], ...]:
        """
        Undiscounted cost components of one strategy for the selected asset.

        Returns:
            (label, amount) pairs for maintenance, downtime and replacement;
            empty when the strategy has no result
        """
        result = self.get_strategy_result(strategy_id)
        if result is None:
            return ()
        return (
            ("Maintenance", result.total_maintenance_cost),
            ("Downtime", result.total_downtime_cost),
            ("Replacement", result.total_replacement_cost),
        )

    @property
    def reporting(self) -> "ReportingInterface":
        """Report frames built from this result."""
        from ..reporting.interface import ReportingInterface  # noqa: PLC0415

        return ReportingInterface(self)
