# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Fusion Passport - Lifecycle Decision Support for Fusion Plant Assets

Asset passports for the critical components of a fusion power plant,
isolated what-if scenarios over them, and maintenance-strategy economics
(NPV, ROI, sensitivity and tornado analysis).

Key Entry Points:
- fusionpassport.scenario.ScenarioStore - Baseline data and what-if scenarios
- fusionpassport.analysis.analyze() - Strategy and portfolio economics
- fusionpassport.analysis.SensitivityAnalysis - Sensitivity and tornado data
- fusionpassport.reporting.* - pandas report frames

Example Usage:
    ```python
    from fusionpassport.analysis import SensitivityAnalysis, analyze
    from fusionpassport.core import GlobalSettings
    from fusionpassport.scenario import ScenarioStore

    store = ScenarioStore()
    scenario_id = store.create_scenario("Faster divertor swaps")
    store.modify_asset(scenario_id, "divertor", cost_schedule={"downtime_weeks": 4.0})
    store.set_active_scenario(scenario_id)

    assets = store.get_active_assets()
    params = GlobalSettings().economics.to_parameters()
    result = analyze(assets, params, selected_asset=assets[1])
    print(result.reporting.strategy_comparison())
    ```
"""

import importlib
import logging

# Library default: no output unless the application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())


# Public API surface (lazy-loaded on first attribute access)
__all__ = [  # noqa: F822 - lazy loading
    "analysis",
    "asset",
    "core",
    "reporting",
    "scenario",
]


_LAZY_MODULES = {
    "analysis": "fusionpassport.analysis",
    "asset": "fusionpassport.asset",
    "core": "fusionpassport.core",
    "reporting": "fusionpassport.reporting",
    "scenario": "fusionpassport.scenario",
}


def __getattr__(name: str):
    module_path = _LAZY_MODULES.get(name)
    if module_path is None:
        raise AttributeError(f"module 'fusionpassport' has no attribute '{name}'")
    module = importlib.import_module(module_path)
    globals()[name] = module
    return module
