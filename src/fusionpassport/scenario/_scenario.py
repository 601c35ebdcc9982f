# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from datetime import datetime
from typing import Optional, Tuple

from pydantic import Field

from ..asset import Asset
from ..core.primitives import Model

BASELINE_SCENARIO_ID = "baseline"

SCENARIO_COLORS: Tuple[str, ...] = (
    "hsl(221, 83%, 53%)",
    "hsl(142, 71%, 45%)",
    "hsl(262, 83%, 58%)",
    "hsl(25, 95%, 53%)",
    "hsl(349, 89%, 60%)",
)


class Scenario(Model):
    """
    A named, isolated copy of the asset collection.

    Scenarios are immutable snapshots; the store replaces a scenario
    wholesale whenever one of its assets changes.

    Attributes:
        id: Unique identifier ("baseline" for the seed scenario)
        name: Display name, not required to be unique
        description: Free-text description
        created_at: Creation timestamp
        assets: The scenario's own asset collection
        color: Display colour taken from the scenario palette
    """

    id: str
    name: str
    description: str = ""
    created_at: datetime = Field(default_factory=datetime.now)
    assets: Tuple[Asset, ...] = ()
    color: str = SCENARIO_COLORS[0]

    @property
    def is_baseline(self) -> bool:
        return self.id == BASELINE_SCENARIO_ID

    def get_asset(self, asset_id: str) -> Optional[Asset]:
        return next((asset for asset in self.assets if asset.id == asset_id), None)
