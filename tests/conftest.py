# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Test utilities and fixtures for Fusion Passport testing.

This module provides convenient utilities for creating test objects
without spelling out every field of an asset record.
"""

from __future__ import annotations

from typing import Any

import pytest

from fusionpassport.analysis import clear_calculation_cache
from fusionpassport.asset import Asset, CostSchedule
from fusionpassport.core.primitives import EconomicParameters
from fusionpassport.scenario import ScenarioStore


# Asset Utilities
def create_test_asset(
    asset_id: str = "test-asset",
    replacement_cost: float = 100.0,
    annual_maintenance: float = 5.0,
    downtime_weeks: float = 4.0,
    risk_level: str = "Critical",
    **overrides: Any,
) -> Asset:
    """
    Create a minimal asset for testing.

    Args:
        asset_id: Asset identifier
        replacement_cost: Replacement cost in currency-millions
        annual_maintenance: Annual maintenance in currency-millions
        downtime_weeks: Downtime per replacement event
        risk_level: Risk level name
        **overrides: Any other Asset field

    Returns:
        Asset ready for testing

    Example:
        >>> asset = create_test_asset(risk_level="Low", confidence_score=90)
        >>> asset.cost_schedule.replacement_cost_millions
        100.0
    """
    fields = dict(
        id=asset_id,
        name=f"Test Asset {asset_id}",
        category="Plasma-Facing",
        neutron_damage_uncertainty=3,
        replaceability_difficulty=3,
        system_value_impact=3,
        instrumentation_priority=3,
        maturity_level="Design",
        confidence_score=50,
        risk_level=risk_level,
        learning_priority="Medium",
        cost_schedule=CostSchedule(
            replacement_cost_millions=replacement_cost,
            annual_maintenance_cost_millions=annual_maintenance,
            downtime_weeks=downtime_weeks,
            lead_time_months=12,
        ),
    )
    fields.update(overrides)
    return Asset(**fields)


def create_test_parameters(
    planning_horizon: int = 20,
    discount_rate: float = 5.0,
    electricity_price: float = 80.0,
    plant_capacity: float = 500.0,
) -> EconomicParameters:
    """Create economic parameters (defaults match the dashboard defaults)."""
    return EconomicParameters(
        planning_horizon=planning_horizon,
        discount_rate=discount_rate,
        electricity_price=electricity_price,
        plant_capacity=plant_capacity,
    )


@pytest.fixture(autouse=True)
def _fresh_npv_cache():
    """Every test starts with an empty NPV memo."""
    clear_calculation_cache()
    yield
    clear_calculation_cache()


@pytest.fixture
def params() -> EconomicParameters:
    return create_test_parameters()


@pytest.fixture
def sample_asset() -> Asset:
    return create_test_asset()


@pytest.fixture
def store() -> ScenarioStore:
    """Scenario store seeded with the built-in fusion asset dataset."""
    return ScenarioStore()
