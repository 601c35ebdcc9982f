# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Tuple

from pydantic import Field, field_validator

from .enums import StrategyKindEnum
from .model import Model
from .types import PositiveInt


class EconomicParameters(Model):
    """
    Global economic inputs to the strategy analysis engine.

    All fields are required and deliberately unconstrained: a zero horizon,
    negative prices or zero capacity are accepted and propagate through the
    arithmetic. Range checks, if wanted, belong to whoever collects the
    inputs.

    Attributes:
        planning_horizon: Number of whole years projected (loop runs 1..N)
        discount_rate: Annual discount rate in percent (5 means 5%)
        electricity_price: Electricity price in currency per MWh
        plant_capacity: Net plant capacity in MW
    """

    planning_horizon: int
    discount_rate: float
    electricity_price: float
    plant_capacity: float

    @property
    def weekly_revenue(self) -> float:
        """Revenue lost per week of plant downtime, in currency-millions."""
        # 168 hours per week at an assumed 0.8 capacity factor
        return (self.plant_capacity * 168 * self.electricity_price * 0.8) / 1_000_000


class EconomicDefaults(Model):
    """Presentation-layer defaults for the economic inputs."""

    planning_horizon: PositiveInt = Field(
        default=20, description="Planning horizon in years."
    )
    discount_rate: float = Field(
        default=5.0, description="Annual discount rate in percent."
    )
    electricity_price: float = Field(
        default=80.0, description="Electricity price in currency per MWh."
    )
    plant_capacity: float = Field(
        default=500.0, description="Plant capacity in MW."
    )

    def to_parameters(self) -> EconomicParameters:
        return EconomicParameters(
            planning_horizon=self.planning_horizon,
            discount_rate=self.discount_rate,
            electricity_price=self.electricity_price,
            plant_capacity=self.plant_capacity,
        )


class SensitivitySettings(Model):
    """
    Settings for the sensitivity and tornado analysis.

    Usage Examples:
        # Default grid (-40% .. +40% in 10% steps, tornado at +/-20%)
        settings = SensitivitySettings()

        # Finer grid for a detailed curve
        settings = SensitivitySettings(
            percent_changes=tuple(range(-50, 55, 5)),
            tornado_perturbation=10.0,
        )
    """

    percent_changes: Tuple[float, ...] = Field(
        default=(-40, -30, -20, -10, 0, 10, 20, 30, 40),
        description="Symmetric grid of percent changes for sensitivity curves.",
    )
    tornado_perturbation: float = Field(
        default=20.0,
        description="Percent change applied low/high for tornado swings.",
    )
    primary_strategy: StrategyKindEnum = Field(
        default=StrategyKindEnum.PROACTIVE,
        description="Default strategy whose ROI is analysed.",
    )
    baseline_strategy: StrategyKindEnum = Field(
        default=StrategyKindEnum.REACTIVE,
        description="Default strategy the ROI is measured against.",
    )

    @field_validator("percent_changes")
    @classmethod
    def validate_percent_changes(cls, v: Tuple[float, ...]) -> Tuple[float, ...]:
        """Grid must be non-empty and sorted ascending."""
        if not v:
            raise ValueError("percent_changes must contain at least one value")
        if list(v) != sorted(v):
            raise ValueError("percent_changes must be sorted ascending")
        return v


class ReportingSettings(Model):
    """Settings related to report generation and display."""

    decimal_precision: PositiveInt = Field(
        default=1, description="Number of decimal places for currency values."
    )
    currency_label: str = Field(
        default="M$", description="Unit label for currency-million amounts."
    )


# --- Main Global Settings Class ---


class GlobalSettings(Model):
    """Global settings

    Groups the configurable defaults of the library by functional area.
    The calculation engine itself never reads these; callers turn them into
    explicit inputs (e.g. `settings.economics.to_parameters()`).
    """

    economics: EconomicDefaults = Field(default_factory=EconomicDefaults)
    sensitivity: SensitivitySettings = Field(default_factory=SensitivitySettings)
    reporting: ReportingSettings = Field(default_factory=ReportingSettings)
