# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
What-if scenario builder.

Applies percentage adjustments to the cost schedules of an asset
collection, compares the portfolio NPV of every strategy before and after,
and can persist the adjusted collection as a new scenario.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, Sequence, Tuple

from pydantic import Field

from ..asset import Asset
from ..core.primitives import (
    AdjustmentParameterEnum,
    EconomicParameters,
    Model,
    StrategyKindEnum,
    WhatIfPresetEnum,
)
from .engine import analyze_portfolio

if TYPE_CHECKING:
    from ..scenario import ScenarioStore

logger = logging.getLogger(__name__)

_ADJUSTED_FIELDS = {
    AdjustmentParameterEnum.REPLACEMENT_COST: ("replacement_cost_millions",),
    AdjustmentParameterEnum.MAINTENANCE_COST: ("annual_maintenance_cost_millions",),
    AdjustmentParameterEnum.DOWNTIME: ("downtime_weeks",),
    AdjustmentParameterEnum.ALL: (
        "replacement_cost_millions",
        "annual_maintenance_cost_millions",
        "downtime_weeks",
    ),
}


class ParameterAdjustment(Model):
    """
    A percentage change to one cost parameter.

    Attributes:
        id: Identifier of the adjustment
        asset_ids: Assets the adjustment targets; empty means every asset
        parameter: Cost parameter to scale
        change_percent: Change in percent (-20 scales by 0.8)
        enabled: Disabled adjustments are ignored
    """

    id: str
    asset_ids: Tuple[str, ...] = ()
    parameter: AdjustmentParameterEnum = AdjustmentParameterEnum.REPLACEMENT_COST
    change_percent: float = 0.0
    enabled: bool = True

    @property
    def multiplier(self) -> float:
        return 1 + self.change_percent / 100

    def applies_to(self, asset: Asset) -> bool:
        return self.enabled and (not self.asset_ids or asset.id in self.asset_ids)


def apply_adjustments(
    assets: Sequence[Asset], adjustments: Sequence[ParameterAdjustment]
) -> Tuple[Asset, ...]:
    """
    Apply adjustments to the cost schedules of an asset collection.

    Adjustments compound in the order given. Assets with no applicable
    adjustment are returned as the same objects.
    """
    adjusted = []
    for asset in assets:
        applicable = [adj for adj in adjustments if adj.applies_to(asset)]
        if not applicable:
            adjusted.append(asset)
            continue

        values = {
            "replacement_cost_millions": asset.cost_schedule.replacement_cost_millions,
            "annual_maintenance_cost_millions": asset.cost_schedule.annual_maintenance_cost_millions,
            "downtime_weeks": asset.cost_schedule.downtime_weeks,
        }
        for adj in applicable:
            for name in _ADJUSTED_FIELDS[adj.parameter]:
                values[name] *= adj.multiplier

        schedule = asset.cost_schedule.model_copy(update=values)
        adjusted.append(asset.model_copy(update={"cost_schedule": schedule}))
    return tuple(adjusted)


def preset_adjustments(preset: WhatIfPresetEnum) -> Tuple[ParameterAdjustment, ...]:
    """Canned adjustment sets applying to every asset."""
    if preset == WhatIfPresetEnum.OPTIMISTIC:
        changes = (
            (AdjustmentParameterEnum.REPLACEMENT_COST, -15.0),
            (AdjustmentParameterEnum.MAINTENANCE_COST, -10.0),
            (AdjustmentParameterEnum.DOWNTIME, -20.0),
        )
    elif preset == WhatIfPresetEnum.PESSIMISTIC:
        changes = (
            (AdjustmentParameterEnum.REPLACEMENT_COST, 25.0),
            (AdjustmentParameterEnum.MAINTENANCE_COST, 15.0),
            (AdjustmentParameterEnum.DOWNTIME, 30.0),
        )
    else:
        changes = ((AdjustmentParameterEnum.ALL, -20.0),)

    return tuple(
        ParameterAdjustment(id=f"adj-{i}", parameter=parameter, change_percent=change)
        for i, (parameter, change) in enumerate(changes, start=1)
    )


class WhatIfComparison(Model):
    """Portfolio NPV of one strategy before and after the adjustments."""

    strategy_id: StrategyKindEnum
    name: str
    baseline: float
    what_if: float
    delta: float
    delta_percent: float


class WhatIfAnalysis(Model):
    """
    Before/after portfolio comparison for a set of adjustments.

    Example:
        ```python
        analysis = WhatIfAnalysis(
            assets=store.get_active_assets(),
            adjustments=preset_adjustments(WhatIfPresetEnum.PESSIMISTIC),
            params=params,
        )
        print(f"Proactive NPV change: {analysis.total_delta_percent:+.1f}%")
        ```
    """

    assets: Tuple[Asset, ...]
    adjustments: Tuple[ParameterAdjustment, ...] = Field(default_factory=tuple)
    params: EconomicParameters

    @property
    def adjusted_assets(self) -> Tuple[Asset, ...]:
        return apply_adjustments(self.assets, self.adjustments)

    @property
    def has_changes(self) -> bool:
        return any(adj.enabled and adj.change_percent != 0 for adj in self.adjustments)

    def comparison(self) -> Tuple[WhatIfComparison, ...]:
        baseline = analyze_portfolio(self.assets, self.params)
        what_if = analyze_portfolio(self.adjusted_assets, self.params)

        rows = []
        for before, after in zip(baseline, what_if):
            delta = after.npv - before.npv
            rows.append(
                WhatIfComparison(
                    strategy_id=before.strategy_id,
                    name=before.name,
                    baseline=before.npv,
                    what_if=after.npv,
                    delta=delta,
                    delta_percent=delta / before.npv * 100 if before.npv else 0.0,
                )
            )
        return tuple(rows)

    def _proactive(self) -> Optional[WhatIfComparison]:
        return next(
            (r for r in self.comparison() if r.strategy_id == StrategyKindEnum.PROACTIVE),
            None,
        )

    @property
    def total_delta(self) -> float:
        """Change in portfolio NPV under the proactive strategy."""
        row = self._proactive()
        return row.delta if row is not None else 0.0

    @property
    def total_delta_percent(self) -> float:
        row = self._proactive()
        return row.delta_percent if row is not None else 0.0

    def save_as_scenario(self, store: "ScenarioStore", name: str) -> str:
        """
        Persist the adjusted cost schedules as a new, active scenario.

        The new scenario starts from the store's baseline; every asset whose
        cost schedule was changed by the adjustments receives the adjusted
        schedule.

        Args:
            store: Scenario store to write to
            name: Name of the new scenario

        Returns:
            The new scenario id

        Raises:
            ValueError: If the name is blank
        """
        if not name or not name.strip():
            raise ValueError("Scenario name must not be blank")

        enabled = sum(1 for adj in self.adjustments if adj.enabled)
        scenario_id = store.create_scenario(
            name, f"What-if scenario with {enabled} adjustments"
        )
        for original, adjusted in zip(self.assets, self.adjusted_assets):
            if original.cost_schedule != adjusted.cost_schedule:
                store.modify_asset(
                    scenario_id, adjusted.id, cost_schedule=adjusted.cost_schedule
                )
        store.set_active_scenario(scenario_id)
        logger.debug(f"Saved what-if scenario '{name}' ({scenario_id})")
        return scenario_id

