# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Sensitivity and tornado analysis.

Measures how the ROI of one strategy against another responds when a
single cost dimension of an asset (replacement cost, maintenance cost or
downtime) is scaled while the others stay at base. Every NPV goes through
`calculate_npv_breakdown`, so the figures reconcile with the strategy
engine.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional, Tuple, Union

from ..asset import Asset
from ..core.primitives import (
    EconomicParameters,
    Model,
    SensitivityParameterEnum,
    SensitivitySettings,
    StrategyKindEnum,
)
from .calculations import calculate_npv_breakdown
from .strategies import MAINTENANCE_STRATEGIES, MaintenanceStrategy, resolve_strategy

logger = logging.getLogger(__name__)

StrategyRef = Union[MaintenanceStrategy, StrategyKindEnum, str]

_MULTIPLIER_ARGUMENTS = {
    SensitivityParameterEnum.REPLACEMENT_COST: "replacement_multiplier",
    SensitivityParameterEnum.MAINTENANCE_COST: "maintenance_multiplier",
    SensitivityParameterEnum.DOWNTIME: "downtime_multiplier",
}


def format_percent_change(percent_change: float) -> str:
    """Signed label for a percent change, e.g. "+10%", "-40%", "+0%"."""
    sign = "+" if percent_change >= 0 else ""
    return f"{sign}{percent_change:g}%"


class SensitivityPoint(Model):
    """ROI at one grid point, with each dimension perturbed on its own."""

    percent_change: float
    label: str
    replacement_cost: float
    maintenance_cost: float
    downtime: float


class TornadoEntry(Model):
    """
    ROI swing of one cost dimension between its low and high perturbation.

    `low_delta` and `high_delta` are relative to `base_roi`.
    """

    parameter: str
    parameter_id: SensitivityParameterEnum
    base_roi: float
    low_roi: float
    high_roi: float
    swing: float
    low_delta: float
    high_delta: float


class StrategyNPVPoint(Model):
    """NPV of every strategy at one replacement-cost grid point."""

    percent_change: float
    label: str
    npvs: Tuple[Tuple[StrategyKindEnum, float], ...]

    def npv(self, strategy_id: Union[str, StrategyKindEnum]) -> Optional[float]:
        return next((value for sid, value in self.npvs if sid == strategy_id), None)


class SensitivityAnalysis:
    """
    Sensitivity engine bound to one asset and one set of economic inputs.

    Strategies may be given as `MaintenanceStrategy` objects or ids. An id
    that is not in the catalog makes the dependent result empty (or None)
    rather than raising.

    Example:
        ```python
        analysis = SensitivityAnalysis(asset, params)
        tornado = analysis.tornado("proactive", "reactive")
        print(analysis.recommendation("proactive", "reactive"))
        ```
    """

    def __init__(
        self,
        asset: Asset,
        params: EconomicParameters,
        settings: Optional[SensitivitySettings] = None,
    ):
        self.asset = asset
        self.params = params
        self.settings = settings if settings is not None else SensitivitySettings()

    # === NPV / ROI PRIMITIVES ===

    def calculate_npv(
        self,
        strategy: MaintenanceStrategy,
        replacement_multiplier: float = 1.0,
        maintenance_multiplier: float = 1.0,
        downtime_multiplier: float = 1.0,
    ) -> float:
        return calculate_npv_breakdown(
            self.asset,
            strategy,
            self.params,
            replacement_multiplier=replacement_multiplier,
            maintenance_multiplier=maintenance_multiplier,
            downtime_multiplier=downtime_multiplier,
        ).npv

    def calculate_roi(
        self,
        primary: MaintenanceStrategy,
        baseline: MaintenanceStrategy,
        replacement_multiplier: float = 1.0,
        maintenance_multiplier: float = 1.0,
        downtime_multiplier: float = 1.0,
    ) -> float:
        """
        ROI of `primary` against `baseline` with both under the same multipliers.

        Returns 0 when the primary NPV is zero or negative.
        """
        multipliers = dict(
            replacement_multiplier=replacement_multiplier,
            maintenance_multiplier=maintenance_multiplier,
            downtime_multiplier=downtime_multiplier,
        )
        primary_npv = self.calculate_npv(primary, **multipliers)
        baseline_npv = self.calculate_npv(baseline, **multipliers)
        if primary_npv <= 0:
            return 0.0
        return (baseline_npv - primary_npv) / primary_npv * 100

    def _roi_for(
        self,
        primary: MaintenanceStrategy,
        baseline: MaintenanceStrategy,
        parameter: SensitivityParameterEnum,
        multiplier: float,
    ) -> float:
        return self.calculate_roi(
            primary, baseline, **{_MULTIPLIER_ARGUMENTS[parameter]: multiplier}
        )

    # === CURVES ===

    def sensitivity_curve(
        self, primary: StrategyRef, baseline: StrategyRef
    ) -> Tuple[SensitivityPoint, ...]:
        """
        ROI across the percent-change grid, one curve per cost dimension.

        Returns:
            One SensitivityPoint per grid value; empty if either strategy
            is unknown
        """
        primary_strategy = resolve_strategy(primary)
        baseline_strategy = resolve_strategy(baseline)
        if primary_strategy is None or baseline_strategy is None:
            logger.warning(f"Unknown strategy in sensitivity curve: {primary!r}, {baseline!r}")
            return ()

        points = []
        for percent_change in self.settings.percent_changes:
            multiplier = 1 + percent_change / 100
            rois: Dict[str, float] = {
                parameter.value: self._roi_for(
                    primary_strategy, baseline_strategy, parameter, multiplier
                )
                for parameter in SensitivityParameterEnum
            }
            points.append(
                SensitivityPoint(
                    percent_change=percent_change,
                    label=format_percent_change(percent_change),
                    **rois,
                )
            )
        return tuple(points)

    def tornado(
        self, primary: StrategyRef, baseline: StrategyRef
    ) -> Tuple[TornadoEntry, ...]:
        """
        ROI swing per cost dimension at -/+ the tornado perturbation.

        Args:
            primary: Strategy whose ROI is measured
            baseline: Strategy the ROI is measured against

        Returns:
            One TornadoEntry per cost dimension, largest swing first. Ties
            keep the order replacement cost, maintenance cost, downtime.
            Empty if either strategy is unknown.
        """
        primary_strategy = resolve_strategy(primary)
        baseline_strategy = resolve_strategy(baseline)
        if primary_strategy is None or baseline_strategy is None:
            logger.warning(f"Unknown strategy in tornado: {primary!r}, {baseline!r}")
            return ()

        perturbation = self.settings.tornado_perturbation / 100
        base_roi = self.calculate_roi(primary_strategy, baseline_strategy)

        entries = []
        for parameter in SensitivityParameterEnum:
            low_roi = self._roi_for(
                primary_strategy, baseline_strategy, parameter, 1 - perturbation
            )
            high_roi = self._roi_for(
                primary_strategy, baseline_strategy, parameter, 1 + perturbation
            )
            entries.append(
                TornadoEntry(
                    parameter=parameter.label,
                    parameter_id=parameter,
                    base_roi=base_roi,
                    low_roi=low_roi,
                    high_roi=high_roi,
                    swing=abs(high_roi - low_roi),
                    low_delta=low_roi - base_roi,
                    high_delta=high_roi - base_roi,
                )
            )
        # sorted() is stable, so equal swings keep declaration order
        return tuple(sorted(entries, key=lambda e: e.swing, reverse=True))

    def strategy_sensitivity(self) -> Tuple[StrategyNPVPoint, ...]:
        """NPV of every catalog strategy across the grid, replacement cost only."""
        points = []
        for percent_change in self.settings.percent_changes:
            multiplier = 1 + percent_change / 100
            points.append(
                StrategyNPVPoint(
                    percent_change=percent_change,
                    label=format_percent_change(percent_change),
                    npvs=tuple(
                        (
                            strategy.id,
                            self.calculate_npv(strategy, replacement_multiplier=multiplier),
                        )
                        for strategy in MAINTENANCE_STRATEGIES
                    ),
                )
            )
        return tuple(points)

    # === SUMMARY ===

    def most_sensitive_parameter(
        self, primary: StrategyRef, baseline: StrategyRef
    ) -> Optional[TornadoEntry]:
        entries = self.tornado(primary, baseline)
        return entries[0] if entries else None

    def recommendation(self, primary: StrategyRef, baseline: StrategyRef) -> str:
        """Plain-language note on the dimension that moves ROI the most."""
        top = self.most_sensitive_parameter(primary, baseline)
        if top is None:
            return ""
        return (
            f"{top.parameter} has the highest impact on ROI. "
            f"A {self.settings.tornado_perturbation:g}% change in this parameter "
            f"swings ROI by ±{top.swing / 2:.1f}%."
        )


def calculate_roi(
    asset: Asset,
    primary: StrategyRef,
    baseline: StrategyRef,
    params: EconomicParameters,
    replacement_multiplier: float = 1.0,
    maintenance_multiplier: float = 1.0,
    downtime_multiplier: float = 1.0,
) -> float:
    """
    ROI of one strategy against another for a single asset.

    Args:
        asset: Asset to evaluate
        primary: Strategy whose ROI is measured
        baseline: Strategy the ROI is measured against
        params: Economic parameters
        replacement_multiplier: Scales the replacement cost for both strategies
        maintenance_multiplier: Scales the base maintenance for both strategies
        downtime_multiplier: Scales the downtime for both strategies

    Returns:
        `(npv(baseline) - npv(primary)) / npv(primary) * 100`, or 0 when the
        primary NPV is not positive or either strategy is unknown
    """
    primary_strategy = resolve_strategy(primary)
    baseline_strategy = resolve_strategy(baseline)
    if primary_strategy is None or baseline_strategy is None:
        return 0.0
    return SensitivityAnalysis(asset, params).calculate_roi(
        primary_strategy,
        baseline_strategy,
        replacement_multiplier=replacement_multiplier,
        maintenance_multiplier=maintenance_multiplier,
        downtime_multiplier=downtime_multiplier,
    )
