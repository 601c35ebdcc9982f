# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Asset passport records.

An `Asset` describes one critical component category of the plant: its
criticality factors, maturity and risk status, a cost schedule used by the
financial engines, and descriptive payloads (degradation hypotheses,
monitoring, maintainability, system value, end of life) that are carried
for presentation only.
"""

from __future__ import annotations

from typing import Any, Optional, Tuple

from pydantic import Field, field_validator

from ..core.primitives import (
    AssetCategoryEnum,
    ConfidenceLevelEnum,
    DisposalComplexityEnum,
    ImpactLevelEnum,
    LearningPriorityEnum,
    MaturityLevelEnum,
    Model,
    RiskLevelEnum,
    SparePartsAvailabilityEnum,
    SupplyChainRealismEnum,
    UncertaintyLevelEnum,
    clamp_percent,
    clamp_score,
)


class DegradationHypothesis(Model):
    mechanism: str
    confidence: ConfidenceLevelEnum
    description: str = ""
    known_unknown: bool = False


class MonitoringStrategy(Model):
    parameter: str
    method: str
    purpose: str = ""
    uncertainty_reduction: str = ""
    fallback: str = ""


class MaintainabilityInfo(Model):
    access_constraints: str = ""
    replacement_strategy: str = ""
    estimated_duration: str = ""
    remote_handling: bool = False
    supply_chain_realism: SupplyChainRealismEnum = SupplyChainRealismEnum.DEVELOPING


class SystemValueImpact(Model):
    availability_impact: ImpactLevelEnum
    flexibility_impact: ImpactLevelEnum
    output_impact: str = ""
    energy_system_links: Tuple[str, ...] = ()


class EndOfLifeAssumptions(Model):
    waste_classification: str = ""
    classification_uncertainty: UncertaintyLevelEnum = UncertaintyLevelEnum.MEDIUM
    cooling_period: str = ""
    handling_requirements: str = ""
    disposal_complexity: DisposalComplexityEnum = DisposalComplexityEnum.MEDIUM


class CostSchedule(Model):
    """
    Lifecycle cost inputs for an asset.

    Attributes:
        replacement_cost_millions: Cost of one replacement, in currency-millions
        annual_maintenance_cost_millions: Baseline annual maintenance spend
        downtime_weeks: Plant downtime per replacement event
        lead_time_months: Procurement lead time for a replacement
        spare_parts_availability: How readily spares can be obtained
        classification_uncertainty: Waste classification uncertainty
        disposal_complexity: End-of-life disposal complexity
    """

    replacement_cost_millions: float
    annual_maintenance_cost_millions: float
    downtime_weeks: float
    lead_time_months: float = 0.0
    spare_parts_availability: SparePartsAvailabilityEnum = SparePartsAvailabilityEnum.MEDIUM
    classification_uncertainty: UncertaintyLevelEnum = UncertaintyLevelEnum.MEDIUM
    disposal_complexity: DisposalComplexityEnum = DisposalComplexityEnum.MEDIUM


class Asset(Model):
    """
    Passport record for one physical component category.

    Criticality factors are held on a 1-5 scale and the confidence score on
    0-100; values outside those ranges are clamped on validation rather than
    rejected.

    Example:
        ```python
        asset = Asset(
            id="divertor",
            name="Divertor Assembly",
            category="Plasma-Facing",
            neutron_damage_uncertainty=4,
            replaceability_difficulty=3,
            system_value_impact=5,
            instrumentation_priority=5,
            maturity_level="Prototype",
            confidence_score=55,
            risk_level="Critical",
            learning_priority="Immediate",
            cost_schedule=CostSchedule(
                replacement_cost_millions=45.0,
                annual_maintenance_cost_millions=5.0,
                downtime_weeks=6.0,
            ),
        )
        ```
    """

    # === IDENTITY ===
    id: str
    name: str
    category: AssetCategoryEnum

    # === DESIGN INTENT ===
    functional_role: str = ""
    operating_envelope: str = ""
    duty_cycle: str = ""
    design_margins: str = ""
    constraints: Tuple[str, ...] = ()

    # === CRITICALITY MATRIX POSITION ===
    neutron_damage_uncertainty: int = Field(..., description="1-5 scale")
    replaceability_difficulty: int = Field(..., description="1-5 scale")
    system_value_impact: int = Field(..., description="1-5 scale")
    instrumentation_priority: int = Field(default=3, description="1-5 scale")

    # === STATUS ===
    maturity_level: MaturityLevelEnum
    confidence_score: int = Field(..., description="0-100 percent")
    risk_level: RiskLevelEnum
    learning_priority: LearningPriorityEnum = LearningPriorityEnum.MEDIUM

    # === ECONOMICS ===
    cost_schedule: CostSchedule

    # === PRESENTATION PAYLOADS ===
    degradation_hypotheses: Tuple[DegradationHypothesis, ...] = ()
    monitoring_strategies: Tuple[MonitoringStrategy, ...] = ()
    maintainability: Optional[MaintainabilityInfo] = None
    system_value: Optional[SystemValueImpact] = None
    end_of_life: Optional[EndOfLifeAssumptions] = None
    rd_investment_justification: str = ""

    @field_validator(
        "neutron_damage_uncertainty",
        "replaceability_difficulty",
        "system_value_impact",
        "instrumentation_priority",
        mode="before",
    )
    @classmethod
    def clamp_criticality_factors(cls, v: Any) -> int:
        return clamp_score(v)

    @field_validator("confidence_score", mode="before")
    @classmethod
    def clamp_confidence(cls, v: Any) -> int:
        return clamp_percent(v)
