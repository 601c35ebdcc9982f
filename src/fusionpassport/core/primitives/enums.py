# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from enum import Enum


class OrderedStrEnum(str, Enum):
    """
    String enum whose members are declared in ascending order.

    `rank` gives the zero-based ordinal position of a member, which is what
    ordinal comparisons (e.g. "risk went up") are based on.
    """

    @property
    def rank(self) -> int:
        return list(type(self)).index(self)


class AssetCategoryEnum(str, Enum):
    """Physical component category of a plant asset."""

    PLASMA_FACING = "Plasma-Facing"
    MAGNETS = "Magnets"
    BLANKET = "Blanket"
    STRUCTURAL = "Structural"
    AUXILIARY = "Auxiliary"


class MaturityLevelEnum(OrderedStrEnum):
    """
    Technology maturity of a component, ordered from least to most mature.

    Attributes:
        CONCEPT: Early concept, no detailed design
        DESIGN: Detailed design under way
        PROTOTYPE: Prototype built and tested
        QUALIFIED: Qualified for service
        OPERATIONAL: Operating in a plant
    """

    CONCEPT = "Concept"
    DESIGN = "Design"
    PROTOTYPE = "Prototype"
    QUALIFIED = "Qualified"
    OPERATIONAL = "Operational"


class RiskLevelEnum(OrderedStrEnum):
    """Lifecycle risk level, ordered from lowest to highest."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"


class LearningPriorityEnum(OrderedStrEnum):
    """Priority of operational learning / R&D, ordered from lowest to highest."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    IMMEDIATE = "Immediate"


class SparePartsAvailabilityEnum(OrderedStrEnum):
    """
    Spare-parts availability, ordered from best to worst.

    A higher rank means spares are harder to obtain.
    """

    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"
    CRITICAL = "Critical"


class UncertaintyLevelEnum(OrderedStrEnum):
    """Three-level uncertainty scale (e.g. waste classification uncertainty)."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class DisposalComplexityEnum(OrderedStrEnum):
    """End-of-life disposal complexity."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    VERY_HIGH = "Very High"


class ConfidenceLevelEnum(str, Enum):
    """Confidence attached to a degradation hypothesis."""

    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"
    UNKNOWN = "Unknown"


class ImpactLevelEnum(str, Enum):
    """Qualitative impact on plant availability or flexibility."""

    CRITICAL = "Critical"
    MAJOR = "Major"
    MODERATE = "Moderate"
    MINOR = "Minor"


class SupplyChainRealismEnum(str, Enum):
    """Realism of the supply chain for replacement parts."""

    PROVEN = "Proven"
    DEVELOPING = "Developing"
    UNCERTAIN = "Uncertain"


class StrategyKindEnum(str, Enum):
    """Identifiers of the fixed maintenance strategy catalog."""

    REACTIVE = "reactive"
    PREVENTIVE = "preventive"
    PREDICTIVE = "predictive"
    PROACTIVE = "proactive"


class SensitivityParameterEnum(str, Enum):
    """
    Cost dimensions perturbed by the sensitivity engine.

    Attributes:
        REPLACEMENT_COST: Replacement cost per failure event
        MAINTENANCE_COST: Annual maintenance spend
        DOWNTIME: Downtime duration per failure event
    """

    REPLACEMENT_COST = "replacement_cost"
    MAINTENANCE_COST = "maintenance_cost"
    DOWNTIME = "downtime"

    @property
    def label(self) -> str:
        return {
            SensitivityParameterEnum.REPLACEMENT_COST: "Replacement Cost",
            SensitivityParameterEnum.MAINTENANCE_COST: "Maintenance Cost",
            SensitivityParameterEnum.DOWNTIME: "Downtime Duration",
        }[self]


class AdjustmentParameterEnum(str, Enum):
    """Cost parameters a what-if adjustment can target."""

    REPLACEMENT_COST = "replacement_cost"
    MAINTENANCE_COST = "maintenance_cost"
    DOWNTIME = "downtime"
    ALL = "all"

    @property
    def label(self) -> str:
        return {
            AdjustmentParameterEnum.REPLACEMENT_COST: "Replacement Cost",
            AdjustmentParameterEnum.MAINTENANCE_COST: "Maintenance Cost",
            AdjustmentParameterEnum.DOWNTIME: "Downtime Duration",
            AdjustmentParameterEnum.ALL: "All Cost Parameters",
        }[self]


class WhatIfPresetEnum(str, Enum):
    """Canned what-if adjustment sets."""

    OPTIMISTIC = "optimistic"
    PESSIMISTIC = "pessimistic"
    COST_REDUCTION = "cost_reduction"


class MatrixDimensionEnum(str, Enum):
    """Third dimension shown on the criticality matrix (colour/size)."""

    SYSTEM_VALUE = "system_value"
    REGULATORY = "regulatory"
    LEARNING = "learning"


class DecisionZoneEnum(str, Enum):
    """Criticality matrix decision zones."""

    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class ChangeDirectionEnum(str, Enum):
    UP = "up"
    DOWN = "down"
    SAME = "same"


class ChangeImpactEnum(str, Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"
