# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from fusionpassport.asset import (
    Asset,
    fusion_assets,
    get_asset_by_id,
    get_assets_by_category,
    get_critical_assets,
)
from fusionpassport.core.primitives import AssetCategoryEnum, RiskLevelEnum

SEED_IDS = [
    "blanket-breeding",
    "divertor",
    "first-wall",
    "tf-coils",
    "vacuum-vessel",
    "tritium-plant",
]


class TestSeedDataset:
    """The built-in fusion plant dataset."""

    def test_seed_order_is_fixed(self):
        assert [a.id for a in fusion_assets()] == SEED_IDS

    def test_every_asset_has_a_cost_schedule(self):
        for asset in fusion_assets():
            assert isinstance(asset, Asset)
            assert asset.cost_schedule.replacement_cost_millions > 0
            assert asset.cost_schedule.downtime_weeks > 0

    def test_same_tuple_is_returned(self):
        assert fusion_assets() is fusion_assets()

    def test_seed_scores_within_scale(self):
        for asset in fusion_assets():
            for score in (
                asset.neutron_damage_uncertainty,
                asset.replaceability_difficulty,
                asset.system_value_impact,
                asset.instrumentation_priority,
            ):
                assert 1 <= score <= 5
            assert 0 <= asset.confidence_score <= 100

    def test_presentation_payloads_are_loaded(self):
        blanket = get_asset_by_id("blanket-breeding")
        assert blanket.degradation_hypotheses
        assert blanket.monitoring_strategies
        assert blanket.end_of_life is not None
        assert blanket.system_value is not None


class TestLookups:
    def test_get_asset_by_id(self):
        divertor = get_asset_by_id("divertor")
        assert divertor is not None
        assert divertor.name == "Divertor Assembly"

    def test_get_asset_by_unknown_id_is_none(self):
        assert get_asset_by_id("no-such-asset") is None

    def test_get_asset_by_id_in_custom_collection(self, sample_asset):
        assert get_asset_by_id("test-asset", [sample_asset]) is sample_asset
        assert get_asset_by_id("divertor", [sample_asset]) is None

    def test_get_assets_by_category(self):
        plasma_facing = get_assets_by_category(AssetCategoryEnum.PLASMA_FACING)
        assert [a.id for a in plasma_facing] == ["divertor", "first-wall"]

    def test_get_critical_assets(self):
        critical = get_critical_assets()
        assert [a.id for a in critical] == ["blanket-breeding", "divertor"]
        assert all(a.risk_level == RiskLevelEnum.CRITICAL for a in critical)
