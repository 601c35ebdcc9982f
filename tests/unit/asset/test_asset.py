# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import pytest
from pydantic import ValidationError

from fusionpassport.asset import Asset, CostSchedule
from fusionpassport.core.primitives import (
    MaturityLevelEnum,
    RiskLevelEnum,
    SparePartsAvailabilityEnum,
)

from conftest import create_test_asset


class TestAssetValidation:
    """Clamping and coercion applied when an asset record is validated."""

    def test_scores_are_clamped_to_one_to_five(self):
        asset = create_test_asset(
            neutron_damage_uncertainty=9,
            replaceability_difficulty=0,
            system_value_impact=-3,
            instrumentation_priority=6,
        )
        assert asset.neutron_damage_uncertainty == 5
        assert asset.replaceability_difficulty == 1
        assert asset.system_value_impact == 1
        assert asset.instrumentation_priority == 5

    def test_fractional_scores_are_rounded_then_clamped(self):
        asset = create_test_asset(neutron_damage_uncertainty=2.7, system_value_impact=5.4)
        assert asset.neutron_damage_uncertainty == 3
        assert asset.system_value_impact == 5

    def test_confidence_is_clamped_to_percent(self):
        assert create_test_asset(confidence_score=140).confidence_score == 100
        assert create_test_asset(confidence_score=-5).confidence_score == 0

    def test_status_strings_become_enums(self):
        asset = create_test_asset(maturity_level="Prototype", risk_level="High")
        assert asset.maturity_level is MaturityLevelEnum.PROTOTYPE
        assert asset.risk_level is RiskLevelEnum.HIGH

    def test_unknown_enum_value_is_rejected(self):
        with pytest.raises(ValidationError):
            create_test_asset(risk_level="Catastrophic")

    def test_non_numeric_score_is_rejected(self):
        with pytest.raises(ValidationError):
            create_test_asset(neutron_damage_uncertainty="very")

    def test_unknown_field_is_rejected(self):
        with pytest.raises(ValidationError):
            create_test_asset(colour="red")


def test_cost_schedule_defaults():
    schedule = CostSchedule(
        replacement_cost_millions=10.0,
        annual_maintenance_cost_millions=1.0,
        downtime_weeks=2.0,
    )
    assert schedule.lead_time_months == 0.0
    assert schedule.spare_parts_availability is SparePartsAvailabilityEnum.MEDIUM


def test_asset_is_immutable(sample_asset: Asset):
    with pytest.raises(ValidationError):
        sample_asset.confidence_score = 10


def test_payload_lists_become_tuples():
    asset = create_test_asset(constraints=["a", "b"])
    assert asset.constraints == ("a", "b")
