# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Scenario Store

Holds the baseline asset collection and any number of derived scenarios,
each with its own isolated copy of the assets. The store is an explicit
context object: callers create one and pass it to whatever needs it.

Every lookup fails softly. Unknown scenario or asset ids make an operation
a no-op (or return an empty/None result) rather than raise.
"""

from __future__ import annotations

import logging
import uuid
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Tuple, Type, get_args

from ..asset import Asset, fusion_assets
from ..core.primitives import Model
from ._scenario import BASELINE_SCENARIO_ID, SCENARIO_COLORS, Scenario
from .diff import AssetFieldDiff, diff_assets

logger = logging.getLogger(__name__)

BASELINE_DESCRIPTION = "Original asset data from FLP model"


def _deep_copy_assets(assets: Iterable[Asset]) -> Tuple[Asset, ...]:
    return tuple(asset.copy() for asset in assets)


def _new_scenario_id() -> str:
    return f"scenario-{uuid.uuid4().hex}"


def _sub_record_type(annotation: Any) -> Optional[Type[Model]]:
    """The Model class behind a field annotation such as `Optional[CostSchedule]`."""
    candidates = get_args(annotation) or (annotation,)
    return next(
        (c for c in candidates if isinstance(c, type) and issubclass(c, Model)), None
    )


def _merge_fields(model: Model, fields: Dict[str, Any]) -> Model:
    """
    Shallow-merge `fields` onto `model`.

    A mapping supplied for a field that currently holds a sub-record is
    merged into that sub-record; a mapping for an empty sub-record field is
    validated into a new sub-record. Strings given for enum fields are
    coerced to the enum (an unknown member raises ValueError). Unknown field
    names are dropped with a warning. Values are otherwise not validated, so
    scores outside their usual range are stored as given.
    """
    known = type(model).model_fields
    update: Dict[str, Any] = {}
    for name, value in fields.items():
        if name not in known:
            logger.warning(
                f"Ignoring unknown field '{name}' for {type(model).__name__}"
            )
            continue
        current = getattr(model, name)
        if isinstance(current, Model) and isinstance(value, dict):
            value = _merge_fields(current, value)
        elif isinstance(value, dict):
            record_type = _sub_record_type(known[name].annotation)
            if record_type is not None:
                value = record_type.model_validate(value)
        elif isinstance(current, Enum) and not isinstance(value, Enum):
            value = type(current)(value)
        update[name] = value
    return model.model_copy(update=update)


class ScenarioStore:
    """
    Registry of what-if scenarios over a baseline asset collection.

    The baseline collection is deep-copied on entry and never mutated.
    Scenarios are immutable snapshots; modifying an asset replaces the
    owning scenario with a new one.

    Example:
        ```python
        store = ScenarioStore()
        scenario_id = store.create_scenario("Cheaper divertor")
        store.modify_asset(scenario_id, "divertor", risk_level="Low")
        store.set_active_scenario(scenario_id)
        diffs = store.get_asset_diff("divertor")
        ```
    """

    def __init__(self, baseline_assets: Optional[Iterable[Asset]] = None):
        source = fusion_assets() if baseline_assets is None else baseline_assets
        self._baseline: Tuple[Asset, ...] = _deep_copy_assets(source)
        self._scenarios: List[Scenario] = [
            Scenario(
                id=BASELINE_SCENARIO_ID,
                name="Baseline",
                description=BASELINE_DESCRIPTION,
                assets=_deep_copy_assets(self._baseline),
                color=SCENARIO_COLORS[0],
            )
        ]
        self.active_scenario_id: str = BASELINE_SCENARIO_ID
        self.comparison_scenario_id: Optional[str] = None
        self.is_comparing: bool = False

    # === READ ACCESS ===

    @property
    def baseline_assets(self) -> Tuple[Asset, ...]:
        return self._baseline

    @property
    def scenarios(self) -> Tuple[Scenario, ...]:
        return tuple(self._scenarios)

    @property
    def active_scenario(self) -> Optional[Scenario]:
        return self.get_scenario(self.active_scenario_id)

    @property
    def comparison_scenario(self) -> Optional[Scenario]:
        if self.comparison_scenario_id is None:
            return None
        return self.get_scenario(self.comparison_scenario_id)

    def get_scenario(self, scenario_id: str) -> Optional[Scenario]:
        return next((s for s in self._scenarios if s.id == scenario_id), None)

    def get_active_assets(self) -> Tuple[Asset, ...]:
        """Assets of the active scenario, or the baseline if it does not resolve."""
        scenario = self.active_scenario
        if scenario is None:
            return self._baseline
        return scenario.assets

    def get_comparison_assets(self) -> Optional[Tuple[Asset, ...]]:
        scenario = self.comparison_scenario
        return scenario.assets if scenario is not None else None

    def get_asset_diff(self, asset_id: str) -> List[AssetFieldDiff]:
        """
        Tracked-field differences between the baseline and the active scenario.

        Args:
            asset_id: Asset to compare

        Returns:
            Differing fields only; empty if either version is missing
        """
        baseline = next((a for a in self._baseline if a.id == asset_id), None)
        current = next(
            (a for a in self.get_active_assets() if a.id == asset_id), None
        )
        return diff_assets(baseline, current)

    # === SCENARIO LIFECYCLE ===

    def create_scenario(self, name: str, description: str = "") -> str:
        """
        Create a scenario from a fresh copy of the baseline collection.

        The new scenario always starts from the baseline, never from the
        active scenario. Names need not be unique.

        Returns:
            The new scenario id
        """
        scenario = Scenario(
            id=_new_scenario_id(),
            name=name,
            description=description,
            assets=_deep_copy_assets(self._baseline),
            color=SCENARIO_COLORS[len(self._scenarios) % len(SCENARIO_COLORS)],
        )
        self._scenarios.append(scenario)
        logger.debug(f"Created scenario '{name}' ({scenario.id})")
        return scenario.id

    def duplicate_scenario(self, source_id: str, name: str) -> str:
        """
        Create a scenario from a copy of another scenario's assets.

        Returns:
            The new scenario id, or "" when the source does not exist
        """
        source = self.get_scenario(source_id)
        if source is None:
            logger.warning(f"Cannot duplicate unknown scenario '{source_id}'")
            return ""

        scenario = Scenario(
            id=_new_scenario_id(),
            name=name,
            description=f"Duplicated from {source.name}",
            assets=_deep_copy_assets(source.assets),
            color=SCENARIO_COLORS[len(self._scenarios) % len(SCENARIO_COLORS)],
        )
        self._scenarios.append(scenario)
        logger.debug(f"Duplicated scenario '{source.name}' as '{name}' ({scenario.id})")
        return scenario.id

    def delete_scenario(self, scenario_id: str) -> None:
        """Remove a scenario. The baseline cannot be deleted."""
        if scenario_id == BASELINE_SCENARIO_ID:
            logger.debug("Ignoring request to delete the baseline scenario")
            return

        self._scenarios = [s for s in self._scenarios if s.id != scenario_id]
        if self.active_scenario_id == scenario_id:
            self.active_scenario_id = BASELINE_SCENARIO_ID
        if self.comparison_scenario_id in (scenario_id, self.active_scenario_id):
            self.comparison_scenario_id = None
        logger.debug(f"Deleted scenario {scenario_id}")

    # === SELECTION ===

    def set_active_scenario(self, scenario_id: str) -> None:
        """
        Make a scenario active.

        The id is not checked against existing scenarios; get_active_assets
        falls back to the baseline. A comparison pointing at the newly
        active scenario is cleared.
        """
        self.active_scenario_id = scenario_id
        if self.comparison_scenario_id == scenario_id:
            self.comparison_scenario_id = None
            logger.debug(f"Cleared comparison: {scenario_id} is now active")

    def set_comparison_scenario(self, scenario_id: Optional[str]) -> None:
        """Compare against a scenario; the active scenario itself is refused."""
        if scenario_id is not None and scenario_id == self.active_scenario_id:
            logger.warning(
                f"Cannot compare scenario '{scenario_id}' against itself"
            )
            return
        self.comparison_scenario_id = scenario_id
        if scenario_id is not None:
            self.is_comparing = True

    def toggle_compare_mode(self) -> None:
        self.is_comparing = not self.is_comparing
        if not self.is_comparing:
            self.comparison_scenario_id = None

    # === ASSET EDITS ===

    def modify_asset(self, scenario_id: str, asset_id: str, **fields: Any) -> None:
        """
        Merge field values onto one asset of one scenario.

        Args:
            scenario_id: Scenario holding the asset
            asset_id: Asset to modify
            **fields: Asset field values. A dict given for a sub-record field
                (e.g. `cost_schedule`) is merged into the existing sub-record.

        Example:
            ```python
            store.modify_asset(
                scenario_id,
                "divertor",
                confidence_score=70,
                cost_schedule={"replacement_cost_millions": 40.0},
            )
            ```
        """

        def update(asset: Asset) -> Asset:
            return _merge_fields(asset, fields)

        self._replace_assets(scenario_id, asset_id, update)

    def reset_asset(self, scenario_id: str, asset_id: str) -> None:
        """Restore one asset of a scenario to a copy of its baseline version."""
        baseline = next((a for a in self._baseline if a.id == asset_id), None)
        if baseline is None:
            logger.warning(f"No baseline asset '{asset_id}' to reset to")
            return
        self._replace_assets(scenario_id, asset_id, lambda _: baseline.copy())

    def reset_scenario(self, scenario_id: str) -> None:
        """Replace a scenario's whole asset collection with a copy of the baseline."""
        for index, scenario in enumerate(self._scenarios):
            if scenario.id == scenario_id:
                self._scenarios[index] = scenario.model_copy(
                    update={"assets": _deep_copy_assets(self._baseline)}
                )
                logger.debug(f"Reset scenario {scenario_id} to baseline")
                return
        logger.warning(f"Cannot reset unknown scenario '{scenario_id}'")

    def _replace_assets(self, scenario_id: str, asset_id: str, update) -> None:
        for index, scenario in enumerate(self._scenarios):
            if scenario.id != scenario_id:
                continue
            assets = tuple(
                update(asset) if asset.id == asset_id else asset
                for asset in scenario.assets
            )
            self._scenarios[index] = scenario.model_copy(update={"assets": assets})
            logger.debug(f"Updated asset '{asset_id}' in scenario {scenario_id}")
            return
        logger.warning(f"Unknown scenario '{scenario_id}'")
