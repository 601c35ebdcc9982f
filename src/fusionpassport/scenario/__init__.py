# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Fusion Passport Scenarios

Isolated what-if copies of the asset collection, field-level diffs against
the baseline, and scenario-to-scenario comparison.
"""

from ._scenario import BASELINE_SCENARIO_ID, SCENARIO_COLORS, Scenario
from .comparison import (
    NUMERIC_METRICS,
    AssetComparison,
    ComparisonSummary,
    FieldChange,
    MetricDefinition,
    ScenarioComparison,
    ScenarioScore,
    compare_assets,
    compare_scenarios,
    scenario_score,
)
from .diff import DIFF_FIELDS, AssetFieldDiff, diff_assets
from .store import BASELINE_DESCRIPTION, ScenarioStore

__all__ = [
    "BASELINE_DESCRIPTION",
    "BASELINE_SCENARIO_ID",
    "SCENARIO_COLORS",
    "Scenario",
    "ScenarioStore",
    # Diff
    "DIFF_FIELDS",
    "AssetFieldDiff",
    "diff_assets",
    # Comparison
    "NUMERIC_METRICS",
    "AssetComparison",
    "ComparisonSummary",
    "FieldChange",
    "MetricDefinition",
    "ScenarioComparison",
    "ScenarioScore",
    "compare_assets",
    "compare_scenarios",
    "scenario_score",
]
