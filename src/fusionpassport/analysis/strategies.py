# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Maintenance strategy catalog.

Four fixed strategies, from run-to-failure to full reliability-centred
maintenance. Each is a set of multipliers applied to an asset's cost
schedule by the NPV calculator.
"""

from __future__ import annotations

from typing import Optional, Tuple, Union

from ..core.primitives import FloatBetween0And1, Model, PositiveFloat, StrategyKindEnum


class MaintenanceStrategy(Model):
    """
    A maintenance strategy and its effect on lifecycle costs.

    Attributes:
        id: Strategy identifier
        name: Full display name, e.g. "Proactive (RCM)"
        description: One-line description
        cost_multiplier: Maintenance uplift; annual spend is base * (1 + multiplier)
        downtime_reduction: Fraction of per-event downtime avoided
        failure_risk_reduction: Fraction of the base failure rate avoided
        lead_time_impact: Relative procurement lead time (informational)
    """

    id: StrategyKindEnum
    name: str
    description: str
    cost_multiplier: PositiveFloat
    downtime_reduction: FloatBetween0And1
    failure_risk_reduction: FloatBetween0And1
    lead_time_impact: PositiveFloat

    @property
    def short_name(self) -> str:
        """First word of the name, e.g. "Proactive"."""
        return self.name.split(" ")[0]


MAINTENANCE_STRATEGIES: Tuple[MaintenanceStrategy, ...] = (
    MaintenanceStrategy(
        id=StrategyKindEnum.REACTIVE,
        name="Reactive (Run-to-Failure)",
        description="Replace only when failure occurs. Lowest upfront cost, highest risk.",
        cost_multiplier=0.3,
        downtime_reduction=0.0,
        failure_risk_reduction=0.0,
        lead_time_impact=1.5,
    ),
    MaintenanceStrategy(
        id=StrategyKindEnum.PREVENTIVE,
        name="Preventive (Time-Based)",
        description="Scheduled replacement at fixed intervals regardless of condition.",
        cost_multiplier=0.6,
        downtime_reduction=0.4,
        failure_risk_reduction=0.5,
        lead_time_impact=1.0,
    ),
    MaintenanceStrategy(
        id=StrategyKindEnum.PREDICTIVE,
        name="Predictive (Condition-Based)",
        description="Replace based on monitored condition indicators and degradation trends.",
        cost_multiplier=0.8,
        downtime_reduction=0.7,
        failure_risk_reduction=0.75,
        lead_time_impact=0.8,
    ),
    MaintenanceStrategy(
        id=StrategyKindEnum.PROACTIVE,
        name="Proactive (RCM)",
        description="Full reliability-centered maintenance with root cause elimination.",
        cost_multiplier=1.0,
        downtime_reduction=0.85,
        failure_risk_reduction=0.9,
        lead_time_impact=0.6,
    ),
)


def get_strategy(
    strategy_id: Union[str, StrategyKindEnum],
) -> Optional[MaintenanceStrategy]:
    """Look up a catalog strategy by id; None if the id is unknown."""
    return next((s for s in MAINTENANCE_STRATEGIES if s.id == strategy_id), None)


def resolve_strategy(
    strategy: Union[MaintenanceStrategy, str, StrategyKindEnum],
) -> Optional[MaintenanceStrategy]:
    if isinstance(strategy, MaintenanceStrategy):
        return strategy
    return get_strategy(strategy)
