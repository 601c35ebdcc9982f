# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Side-by-side comparison of two scenarios.

Assets are matched by id. For each matched pair the numeric metrics and
the ordinal statuses are compared, and every change is tagged with a
direction (active value relative to the comparison value) and whether
that direction is good or bad news.
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Sequence, Tuple

from ..asset import Asset, criticality_score
from ..core.primitives import (
    ChangeDirectionEnum,
    ChangeImpactEnum,
    Model,
    OrderedStrEnum,
    RiskLevelEnum,
)


class MetricDefinition(Model):
    """A numeric asset metric tracked by the comparison."""

    label: str
    getter: Callable[[Asset], float]
    higher_is_better: bool = False


NUMERIC_METRICS: Tuple[MetricDefinition, ...] = (
    MetricDefinition(label="Neutron Uncertainty", getter=lambda a: a.neutron_damage_uncertainty),
    MetricDefinition(label="Replaceability", getter=lambda a: a.replaceability_difficulty),
    MetricDefinition(label="System Value Impact", getter=lambda a: a.system_value_impact),
    MetricDefinition(
        label="Confidence", getter=lambda a: a.confidence_score, higher_is_better=True
    ),
    MetricDefinition(
        label="Instrumentation Priority", getter=lambda a: a.instrumentation_priority
    ),
    MetricDefinition(
        label="Replacement Cost (M$)",
        getter=lambda a: a.cost_schedule.replacement_cost_millions,
    ),
    MetricDefinition(label="Lead Time (mo)", getter=lambda a: a.cost_schedule.lead_time_months),
    MetricDefinition(label="Downtime (wks)", getter=lambda a: a.cost_schedule.downtime_weeks),
    MetricDefinition(
        label="Annual Maint. (M$)",
        getter=lambda a: a.cost_schedule.annual_maintenance_cost_millions,
    ),
)


class FieldChange(Model):
    field: str
    active_value: Any
    comparison_value: Any
    direction: ChangeDirectionEnum
    impact: ChangeImpactEnum


class AssetComparison(Model):
    asset: Asset
    changes: Tuple[FieldChange, ...] = ()


class ScenarioScore(Model):
    """Aggregate indicators of one asset collection."""

    avg_confidence: float
    critical_count: int
    avg_criticality: float
    total_replacement_cost: float
    total_annual_maintenance: float
    avg_lead_time: float


class ComparisonSummary(Model):
    total_changes: int
    positive_changes: int
    negative_changes: int
    active_score: ScenarioScore
    comparison_score: ScenarioScore


class ScenarioComparison(Model):
    asset_comparisons: Tuple[AssetComparison, ...]
    summary: ComparisonSummary


def _numeric_change(metric: MetricDefinition, active: Asset, other: Asset) -> Optional[FieldChange]:
    active_value = metric.getter(active)
    comparison_value = metric.getter(other)
    if active_value == comparison_value:
        return None

    direction = (
        ChangeDirectionEnum.UP if active_value > comparison_value else ChangeDirectionEnum.DOWN
    )
    good_direction = ChangeDirectionEnum.UP if metric.higher_is_better else ChangeDirectionEnum.DOWN
    impact = ChangeImpactEnum.POSITIVE if direction == good_direction else ChangeImpactEnum.NEGATIVE
    return FieldChange(
        field=metric.label,
        active_value=active_value,
        comparison_value=comparison_value,
        direction=direction,
        impact=impact,
    )


def _ordinal_change(
    label: str,
    active_value: OrderedStrEnum,
    comparison_value: OrderedStrEnum,
    up_is_good: bool,
) -> Optional[FieldChange]:
    if active_value == comparison_value:
        return None

    went_up = active_value.rank > comparison_value.rank
    if went_up == up_is_good:
        impact = ChangeImpactEnum.POSITIVE
    else:
        impact = ChangeImpactEnum.NEGATIVE
    return FieldChange(
        field=label,
        active_value=active_value,
        comparison_value=comparison_value,
        direction=ChangeDirectionEnum.UP if went_up else ChangeDirectionEnum.DOWN,
        impact=impact,
    )


def compare_assets(active: Asset, other: Asset) -> AssetComparison:
    """Compare one asset of the active scenario with its counterpart."""
    changes = [_numeric_change(metric, active, other) for metric in NUMERIC_METRICS]
    changes.append(
        _ordinal_change(
            "Spare Parts Availability",
            active.cost_schedule.spare_parts_availability,
            other.cost_schedule.spare_parts_availability,
            up_is_good=False,
        )
    )
    changes.append(
        _ordinal_change("Risk Level", active.risk_level, other.risk_level, up_is_good=False)
    )
    changes.append(
        _ordinal_change("Maturity", active.maturity_level, other.maturity_level, up_is_good=True)
    )
    return AssetComparison(
        asset=active, changes=tuple(c for c in changes if c is not None)
    )


def scenario_score(assets: Sequence[Asset]) -> ScenarioScore:
    """Averages are 0 for an empty collection."""
    count = len(assets)

    def average(total: float) -> float:
        return total / count if count else 0.0

    return ScenarioScore(
        avg_confidence=average(sum(a.confidence_score for a in assets)),
        critical_count=sum(1 for a in assets if a.risk_level == RiskLevelEnum.CRITICAL),
        avg_criticality=average(sum(criticality_score(a) for a in assets)),
        total_replacement_cost=sum(a.cost_schedule.replacement_cost_millions for a in assets),
        total_annual_maintenance=sum(
            a.cost_schedule.annual_maintenance_cost_millions for a in assets
        ),
        avg_lead_time=average(sum(a.cost_schedule.lead_time_months for a in assets)),
    )


def compare_scenarios(
    active_assets: Sequence[Asset], comparison_assets: Sequence[Asset]
) -> ScenarioComparison:
    """
    Compare an active asset collection against a comparison collection.

    Args:
        active_assets: Assets of the active scenario
        comparison_assets: Assets of the scenario being compared against

    Returns:
        ScenarioComparison with one entry per active asset that has a
        counterpart (by id), plus change counts and aggregate scores

    Example:
        ```python
        result = compare_scenarios(
            store.get_active_assets(), store.get_comparison_assets()
        )
        print(result.summary.negative_changes)
        ```
    """
    by_id = {asset.id: asset for asset in comparison_assets}
    asset_comparisons = tuple(
        compare_assets(asset, by_id[asset.id])
        for asset in active_assets
        if asset.id in by_id
    )

    all_changes = [c for comparison in asset_comparisons for c in comparison.changes]
    summary = ComparisonSummary(
        total_changes=len(all_changes),
        positive_changes=sum(1 for c in all_changes if c.impact == ChangeImpactEnum.POSITIVE),
        negative_changes=sum(1 for c in all_changes if c.impact == ChangeImpactEnum.NEGATIVE),
        active_score=scenario_score(active_assets),
        comparison_score=scenario_score(comparison_assets),
    )
    return ScenarioComparison(asset_comparisons=asset_comparisons, summary=summary)
