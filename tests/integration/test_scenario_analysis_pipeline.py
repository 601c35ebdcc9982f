# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
End-to-end flow: edit a scenario, analyse it, and compare it with the
baseline the way the dashboard does.
"""

from __future__ import annotations

import pytest

from fusionpassport.analysis import (
    SensitivityAnalysis,
    WhatIfAnalysis,
    analyze,
    preset_adjustments,
)
from fusionpassport.core.primitives import GlobalSettings, WhatIfPresetEnum
from fusionpassport.reporting import DashboardMetrics, ScenarioComparisonReport
from fusionpassport.scenario import ScenarioStore, compare_scenarios


@pytest.fixture
def settings() -> GlobalSettings:
    return GlobalSettings()


def test_edited_scenario_changes_portfolio_npv(settings):
    store = ScenarioStore()
    params = settings.economics.to_parameters()
    baseline = analyze(store.get_active_assets(), params)

    scenario_id = store.create_scenario("Cheaper blanket", "Blanket supplier quote")
    store.modify_asset(
        scenario_id,
        "blanket-breeding",
        confidence_score=50,
        cost_schedule={"replacement_cost_millions": 60.0},
    )
    store.set_active_scenario(scenario_id)
    edited = analyze(store.get_active_assets(), params)

    for before, after in zip(baseline.portfolio_results, edited.portfolio_results):
        assert after.npv < before.npv
        assert after.maintenance_cost == pytest.approx(before.maintenance_cost)

    diff = store.get_asset_diff("blanket-breeding")
    assert [d.field for d in diff] == ["confidence_score"]
    assert (diff[0].baseline_value, diff[0].current_value) == (35, 50)


def test_compare_active_scenario_against_baseline(settings):
    store = ScenarioStore()
    scenario_id = store.create_scenario("Mature divertor")
    store.modify_asset(scenario_id, "divertor", maturity_level="Qualified")
    store.set_active_scenario(scenario_id)
    store.set_comparison_scenario("baseline")
    assert store.is_comparing

    comparison = compare_scenarios(store.get_active_assets(), store.get_comparison_assets())
    df = ScenarioComparisonReport(comparison).generate()

    assert df["Field"].tolist() == ["Maturity"]
    assert df["Impact"].tolist() == ["positive"]
    assert comparison.summary.positive_changes == 1


def test_what_if_saved_and_reanalysed(settings):
    store = ScenarioStore()
    params = settings.economics.to_parameters()
    what_if = WhatIfAnalysis(
        assets=store.get_active_assets(),
        adjustments=preset_adjustments(WhatIfPresetEnum.COST_REDUCTION),
        params=params,
    )

    scenario_id = what_if.save_as_scenario(store, "Cost reduction")
    saved = analyze(store.get_active_assets(), params)

    assert store.active_scenario_id == scenario_id
    assert saved.get_portfolio_result("proactive").npv == pytest.approx(
        what_if.comparison()[-1].what_if
    )
    assert DashboardMetrics(store.get_active_assets()).total_assets == 6


def test_sensitivity_on_selected_asset(settings):
    store = ScenarioStore()
    params = settings.economics.to_parameters()
    asset = store.get_active_assets()[0]

    result = analyze(store.get_active_assets(), params, selected_asset=asset)
    sensitivity = SensitivityAnalysis(asset, params, settings.sensitivity)

    zero_point = next(p for p in sensitivity.sensitivity_curve("proactive", "reactive") if p.percent_change == 0)
    assert zero_point.replacement_cost == pytest.approx(
        result.get_strategy_result("proactive").roi
    )
