# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging

import pytest

from fusionpassport.analysis import (
    MAINTENANCE_STRATEGIES,
    SensitivityAnalysis,
    calculate_npv,
    calculate_roi,
    format_percent_change,
    get_strategy,
)
from fusionpassport.core.primitives import (
    SensitivityParameterEnum,
    SensitivitySettings,
    StrategyKindEnum,
)

from conftest import create_test_asset, create_test_parameters


@pytest.fixture
def analysis(sample_asset, params) -> SensitivityAnalysis:
    return SensitivityAnalysis(sample_asset, params)


class TestFormatPercentChange:
    @pytest.mark.parametrize(
        "change, label", [(10, "+10%"), (0, "+0%"), (-40, "-40%"), (12.5, "+12.5%")]
    )
    def test_labels(self, change, label):
        assert format_percent_change(change) == label


class TestCalculateRoi:
    def test_matches_npv_formula(self, sample_asset, params):
        proactive = calculate_npv(sample_asset, get_strategy("proactive"), params)
        reactive = calculate_npv(sample_asset, get_strategy("reactive"), params)

        roi = calculate_roi(sample_asset, "proactive", "reactive", params)

        assert roi == pytest.approx((reactive - proactive) / proactive * 100)

    def test_same_strategy_is_zero(self, sample_asset, params):
        assert calculate_roi(sample_asset, "predictive", "predictive", params) == 0

    def test_unknown_strategy(self, sample_asset, params):
        assert calculate_roi(sample_asset, "unknown", "reactive", params) == 0

    def test_zero_primary_npv(self, params):
        asset = create_test_asset(replacement_cost=0, annual_maintenance=0, downtime_weeks=0)
        assert calculate_roi(asset, "proactive", "reactive", params) == 0

    def test_negative_baseline_is_not_guarded(self):
        # Negative maintenance drives the proactive NPV below zero while the
        # reactive NPV stays positive; only the primary NPV is guarded.
        asset = create_test_asset(replacement_cost=100.0, annual_maintenance=-1.0, downtime_weeks=0.0)
        params = create_test_parameters(planning_horizon=1)
        reactive = calculate_npv(asset, get_strategy("reactive"), params)
        proactive = calculate_npv(asset, get_strategy("proactive"), params)

        roi = calculate_roi(asset, "reactive", "proactive", params)

        assert proactive < 0 < reactive
        assert roi < 0
        assert roi == pytest.approx((proactive - reactive) / reactive * 100)

    def test_multipliers_apply_to_both_strategies(self, sample_asset, params):
        analysis = SensitivityAnalysis(sample_asset, params)
        proactive = get_strategy("proactive")
        reactive = get_strategy("reactive")

        primary_npv = analysis.calculate_npv(proactive, replacement_multiplier=1.2)
        baseline_npv = analysis.calculate_npv(reactive, replacement_multiplier=1.2)

        assert analysis.calculate_roi(
            proactive, reactive, replacement_multiplier=1.2
        ) == pytest.approx((baseline_npv - primary_npv) / primary_npv * 100)


class TestTornado:
    def test_one_entry_per_parameter_sorted_by_swing(self, analysis):
        entries = analysis.tornado("proactive", "reactive")

        assert {e.parameter_id for e in entries} == set(SensitivityParameterEnum)
        swings = [e.swing for e in entries]
        assert swings == sorted(swings, reverse=True)

    def test_swing_and_deltas(self, analysis, sample_asset, params):
        entries = {e.parameter_id: e for e in analysis.tornado("proactive", "reactive")}
        base = calculate_roi(sample_asset, "proactive", "reactive", params)

        entry = entries[SensitivityParameterEnum.MAINTENANCE_COST]
        low = calculate_roi(sample_asset, "proactive", "reactive", params, maintenance_multiplier=0.8)
        high = calculate_roi(sample_asset, "proactive", "reactive", params, maintenance_multiplier=1.2)

        assert entry.parameter == "Maintenance Cost"
        assert entry.base_roi == pytest.approx(base)
        assert entry.low_roi == pytest.approx(low)
        assert entry.high_roi == pytest.approx(high)
        assert entry.swing == pytest.approx(abs(high - low))
        assert entry.low_delta == pytest.approx(low - base)
        assert entry.high_delta == pytest.approx(high - base)

    def test_accepts_strategy_objects(self, analysis):
        by_id = analysis.tornado("proactive", "reactive")
        by_object = analysis.tornado(get_strategy("proactive"), get_strategy("reactive"))
        assert by_id == by_object

    def test_ties_keep_declaration_order(self, params):
        # Zero costs make every ROI zero, so every swing ties.
        asset = create_test_asset(replacement_cost=0, annual_maintenance=0, downtime_weeks=0)
        entries = SensitivityAnalysis(asset, params).tornado("proactive", "reactive")
        assert [e.parameter_id for e in entries] == list(SensitivityParameterEnum)

    def test_custom_perturbation(self, sample_asset, params):
        settings = SensitivitySettings(tornado_perturbation=10.0)
        entries = SensitivityAnalysis(sample_asset, params, settings).tornado(
            "proactive", "reactive"
        )
        downtime = next(e for e in entries if e.parameter_id == SensitivityParameterEnum.DOWNTIME)

        assert downtime.low_roi == pytest.approx(
            calculate_roi(sample_asset, "proactive", "reactive", params, downtime_multiplier=0.9)
        )
        assert downtime.high_roi == pytest.approx(
            calculate_roi(sample_asset, "proactive", "reactive", params, downtime_multiplier=1.1)
        )

    def test_unknown_strategy_is_empty(self, analysis, caplog):
        with caplog.at_level(logging.WARNING):
            assert analysis.tornado("unknown", "reactive") == ()
        assert "Unknown strategy" in caplog.text


class TestSensitivityCurve:
    def test_default_grid(self, analysis):
        points = analysis.sensitivity_curve("proactive", "reactive")

        assert [p.label for p in points] == [
            "-40%", "-30%", "-20%", "-10%", "+0%", "+10%", "+20%", "+30%", "+40%",
        ]

    def test_zero_change_is_base_roi(self, analysis, sample_asset, params):
        zero = analysis.sensitivity_curve("proactive", "reactive")[4]
        base = calculate_roi(sample_asset, "proactive", "reactive", params)

        assert zero.percent_change == 0
        assert zero.replacement_cost == pytest.approx(base)
        assert zero.maintenance_cost == pytest.approx(base)
        assert zero.downtime == pytest.approx(base)

    def test_each_dimension_perturbed_alone(self, analysis, sample_asset, params):
        point = analysis.sensitivity_curve("proactive", "reactive")[0]
        assert point.downtime == pytest.approx(
            calculate_roi(sample_asset, "proactive", "reactive", params, downtime_multiplier=0.6)
        )
        assert point.replacement_cost == pytest.approx(
            calculate_roi(sample_asset, "proactive", "reactive", params, replacement_multiplier=0.6)
        )

    def test_custom_grid(self, sample_asset, params):
        settings = SensitivitySettings(percent_changes=(-50, 0, 50))
        points = SensitivityAnalysis(sample_asset, params, settings).sensitivity_curve(
            "predictive", "reactive"
        )
        assert [p.label for p in points] == ["-50%", "+0%", "+50%"]

    def test_unknown_strategy_is_empty(self, analysis):
        assert analysis.sensitivity_curve("proactive", "nope") == ()


class TestStrategySensitivity:
    def test_every_strategy_at_every_point(self, analysis):
        points = analysis.strategy_sensitivity()

        assert len(points) == 9
        for point in points:
            assert [sid for sid, _ in point.npvs] == [s.id for s in MAINTENANCE_STRATEGIES]

    def test_replacement_cost_only(self, analysis, sample_asset, params):
        point = analysis.strategy_sensitivity()[-1]
        expected = calculate_npv(
            sample_asset, get_strategy("preventive"), params, replacement_multiplier=1.4
        )
        assert point.npv("preventive") == pytest.approx(expected)
        assert point.npv(StrategyKindEnum.PREVENTIVE) == pytest.approx(expected)
        assert point.npv("unknown") is None


class TestRecommendation:
    def test_names_top_parameter(self, analysis):
        top = analysis.most_sensitive_parameter("proactive", "reactive")
        text = analysis.recommendation("proactive", "reactive")

        assert text == (
            f"{top.parameter} has the highest impact on ROI. "
            f"A 20% change in this parameter swings ROI by ±{top.swing / 2:.1f}%."
        )

    def test_unknown_strategy(self, analysis):
        assert analysis.most_sensitive_parameter("x", "reactive") is None
        assert analysis.recommendation("x", "reactive") == ""
