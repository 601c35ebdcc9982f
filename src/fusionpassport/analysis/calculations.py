# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Lifecycle NPV calculation.

`calculate_npv_breakdown` is the single source of truth for the cost of
running one asset under one maintenance strategy. The strategy engine, the
sensitivity engine and the what-if builder all delegate to it, so the
numbers agree across every view.

The core is a pure function of plain numbers and is memoised on them;
results for identical inputs are identical. `clear_calculation_cache()`
drops the memo.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Tuple

from ..asset import Asset
from ..core.primitives import EconomicParameters, Model, RiskLevelEnum
from .strategies import MaintenanceStrategy

logger = logging.getLogger(__name__)

BASE_FAILURE_RATES = (
    (RiskLevelEnum.CRITICAL, 0.15),
    (RiskLevelEnum.HIGH, 0.10),
    (RiskLevelEnum.MEDIUM, 0.05),
)
DEFAULT_FAILURE_RATE = 0.02


class NPVBreakdown(Model):
    """
    Cost of one asset under one strategy over the planning horizon.

    All amounts are in currency-millions. Breakdowns add field-wise, which
    is how portfolio totals are formed; adding per-event quantities
    (`expected_downtime`, rates) gives a sum, not an average.
    """

    npv: float = 0.0
    annual_maintenance_cost: float = 0.0
    expected_downtime: float = 0.0
    downtime_cost_per_event: float = 0.0
    adjusted_failure_rate: float = 0.0
    expected_failures: float = 0.0
    total_maintenance_cost: float = 0.0
    total_downtime_cost: float = 0.0
    total_replacement_cost: float = 0.0
    total_cost: float = 0.0

    def __add__(self, other: "NPVBreakdown") -> "NPVBreakdown":
        if not isinstance(other, NPVBreakdown):
            return NotImplemented
        return NPVBreakdown(
            **{
                name: getattr(self, name) + getattr(other, name)
                for name in type(self).model_fields
            }
        )


def base_failure_rate(risk_level: RiskLevelEnum) -> float:
    """Annual failure probability implied by a risk level."""
    for level, rate in BASE_FAILURE_RATES:
        if risk_level == level:
            return rate
    return DEFAULT_FAILURE_RATE


@lru_cache(maxsize=4096)
def _npv_components(
    replacement_cost: float,
    annual_maintenance: float,
    downtime_weeks: float,
    failure_rate: float,
    cost_multiplier: float,
    downtime_reduction: float,
    failure_risk_reduction: float,
    planning_horizon: int,
    discount_rate: float,
    weekly_revenue: float,
) -> Tuple[float, ...]:
    annual_maintenance_cost = annual_maintenance * (1 + cost_multiplier)
    expected_downtime = downtime_weeks * (1 - downtime_reduction)
    downtime_cost_per_event = expected_downtime * weekly_revenue
    adjusted_failure_rate = failure_rate * (1 - failure_risk_reduction)

    npv = 0.0
    total_maintenance = 0.0
    total_replacement = 0.0
    total_downtime = 0.0
    for year in range(1, planning_horizon + 1):
        discount_factor = (1 + discount_rate / 100) ** -year

        total_maintenance += annual_maintenance_cost
        npv += annual_maintenance_cost * discount_factor

        total_replacement += adjusted_failure_rate * replacement_cost
        total_downtime += adjusted_failure_rate * downtime_cost_per_event
        npv += (
            adjusted_failure_rate
            * (replacement_cost + downtime_cost_per_event)
            * discount_factor
        )

    return (
        npv,
        annual_maintenance_cost,
        expected_downtime,
        downtime_cost_per_event,
        adjusted_failure_rate,
        adjusted_failure_rate * planning_horizon,
        total_maintenance,
        total_downtime,
        total_replacement,
        total_maintenance + total_downtime + total_replacement,
    )


def calculate_npv_breakdown(
    asset: Asset,
    strategy: MaintenanceStrategy,
    params: EconomicParameters,
    replacement_multiplier: float = 1.0,
    maintenance_multiplier: float = 1.0,
    downtime_multiplier: float = 1.0,
) -> NPVBreakdown:
    """
    Discounted lifecycle cost of an asset under a maintenance strategy.

    Each year t = 1..planning_horizon carries the strategy-adjusted annual
    maintenance plus the expected failure cost (failure rate times
    replacement and downtime cost), discounted by (1 + rate/100) ** -t.
    A zero horizon yields zero costs and NPV. Inputs are not range-checked;
    negative prices or multipliers propagate.

    Args:
        asset: Asset whose cost schedule and risk level are used
        strategy: Maintenance strategy to apply
        params: Economic parameters
        replacement_multiplier: Scales the replacement cost
        maintenance_multiplier: Scales the base annual maintenance
        downtime_multiplier: Scales the downtime per event

    Returns:
        NPVBreakdown with the NPV and its undiscounted components

    Example:
        ```python
        params = EconomicParameters(
            planning_horizon=20, discount_rate=5,
            electricity_price=80, plant_capacity=500,
        )
        breakdown = calculate_npv_breakdown(asset, get_strategy("proactive"), params)
        print(f"NPV: {breakdown.npv:.1f} M$")
        ```
    """
    schedule = asset.cost_schedule
    values = _npv_components(
        float(schedule.replacement_cost_millions * replacement_multiplier),
        float(schedule.annual_maintenance_cost_millions * maintenance_multiplier),
        float(schedule.downtime_weeks * downtime_multiplier),
        base_failure_rate(asset.risk_level),
        float(strategy.cost_multiplier),
        float(strategy.downtime_reduction),
        float(strategy.failure_risk_reduction),
        int(params.planning_horizon),
        float(params.discount_rate),
        float(params.weekly_revenue),
    )
    return NPVBreakdown(**dict(zip(NPVBreakdown.model_fields, values)))


def calculate_npv(
    asset: Asset,
    strategy: MaintenanceStrategy,
    params: EconomicParameters,
    replacement_multiplier: float = 1.0,
    maintenance_multiplier: float = 1.0,
    downtime_multiplier: float = 1.0,
) -> float:
    """NPV only; see `calculate_npv_breakdown`."""
    return calculate_npv_breakdown(
        asset,
        strategy,
        params,
        replacement_multiplier=replacement_multiplier,
        maintenance_multiplier=maintenance_multiplier,
        downtime_multiplier=downtime_multiplier,
    ).npv


def calculate_roi_percent(baseline_npv: float, npv: float) -> float:
    """
    ROI of a strategy relative to a baseline NPV, in percent.

    Returns 0 unless both NPVs are positive.
    """
    if baseline_npv > 0 and npv > 0:
        return (baseline_npv - npv) / npv * 100
    return 0.0


def clear_calculation_cache() -> None:
    info = _npv_components.cache_info()
    _npv_components.cache_clear()
    logger.debug(f"Cleared NPV cache ({info.currsize} entries)")
