# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Seed dataset of fusion plant asset passports.

The records below are the baseline ground truth for every scenario. They
are validated into frozen `Asset` models once, on first access, and the
same tuple is handed out afterwards.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Dict, Optional, Sequence, Tuple

from ..core.primitives import AssetCategoryEnum, RiskLevelEnum
from ._asset import Asset


def _cost_schedule(
    replacement: float,
    annual_maintenance: float,
    downtime_weeks: float,
    lead_time_months: float,
    spare_parts: str,
    classification_uncertainty: str,
    disposal_complexity: str,
) -> Dict[str, object]:
    return {
        "replacement_cost_millions": replacement,
        "annual_maintenance_cost_millions": annual_maintenance,
        "downtime_weeks": downtime_weeks,
        "lead_time_months": lead_time_months,
        "spare_parts_availability": spare_parts,
        "classification_uncertainty": classification_uncertainty,
        "disposal_complexity": disposal_complexity,
    }


_FUSION_ASSET_RECORDS = [
    {
        "id": "blanket-breeding",
        "name": "Breeding Blanket Module",
        "category": "Blanket",
        "functional_role": "Tritium breeding, neutron multiplication, heat extraction to primary coolant loop",
        "operating_envelope": "14.1 MeV neutron flux, 300-500°C operating temperature, 2-5 MW/m² heat flux",
        "duty_cycle": "Continuous operation during plasma burn, 70-80% availability target",
        "design_margins": "20% thermal margin, 50% structural safety factor on first-of-kind",
        "constraints": [
            "Must achieve tritium breeding ratio >1.1",
            "Coolant compatibility with structural materials",
            "Limited in-service inspection access"
        ],
        "neutron_damage_uncertainty": 5,
        "replaceability_difficulty": 4,
        "system_value_impact": 5,
        "maturity_level": "Concept",
        "confidence_score": 35,
        "risk_level": "Critical",
        "degradation_hypotheses": [
            {
                "mechanism": "Neutron-induced swelling",
                "confidence": "Medium",
                "description": "Volumetric changes from helium and hydrogen transmutation products",
                "known_unknown": False
            },
            {
                "mechanism": "Thermal fatigue at interfaces",
                "confidence": "High",
                "description": "Cyclic thermal stresses at material boundaries during plasma pulsing",
                "known_unknown": False
            },
            {
                "mechanism": "Lithium burnup and redistribution",
                "confidence": "Low",
                "description": "Changes in breeding performance over operational lifetime",
                "known_unknown": True
            },
            {
                "mechanism": "Coolant-structure interaction",
                "confidence": "Medium",
                "description": "Corrosion and material transport in liquid metal systems",
                "known_unknown": True
            }
        ],
        "monitoring_strategies": [
            {
                "parameter": "Tritium production rate",
                "method": "Online tritium accounting system",
                "purpose": "Verify breeding performance and detect degradation",
                "uncertainty_reduction": "Reduces TBR uncertainty from ±30% to ±10%",
                "fallback": "Periodic destructive sampling during maintenance"
            },
            {
                "parameter": "Coolant outlet temperature profile",
                "method": "Distributed fiber optic sensors",
                "purpose": "Detect local hotspots indicating degradation",
                "uncertainty_reduction": "Early warning of thermal degradation",
                "fallback": "Reduced spatial resolution with discrete sensors"
            },
            {
                "parameter": "Structural strain",
                "method": "Embedded strain gauges where accessible",
                "purpose": "Monitor cumulative deformation",
                "uncertainty_reduction": "Validates structural models",
                "fallback": "Post-operation dimensional inspection"
            }
        ],
        "maintainability": {
            "access_constraints": "Requires removal through dedicated maintenance port, high radiation environment",
            "replacement_strategy": "Segment replacement using remote handling, full module exchange",
            "estimated_duration": "4-8 weeks per module including cooling and decontamination",
            "remote_handling": True,
            "supply_chain_realism": "Developing"
        },
        "system_value": {
            "availability_impact": "Critical",
            "flexibility_impact": "Major",
            "output_impact": "Direct 1:1 relationship with thermal power output",
            "energy_system_links": [
                "Primary heat source for power conversion",
                "Tritium self-sufficiency for fuel cycle",
                "Determines plant capacity factor ceiling"
            ]
        },
        "end_of_life": {
            "waste_classification": "Intermediate Level Waste (ILW) to High Level Waste (HLW)",
            "classification_uncertainty": "High",
            "cooling_period": "50-100 years estimated",
            "handling_requirements": "Remote handling, shielded transport, specialized disposal route",
            "disposal_complexity": "Very High"
        },
        "learning_priority": "Immediate",
        "rd_investment_justification": "Critical path for fusion economics and fuel self-sufficiency",
        "instrumentation_priority": 5,
        "cost_schedule": _cost_schedule(120.0, 8.0, 12.0, 36, "Low", "High", "Very High"),
    },
    {
        "id": "divertor",
        "name": "Divertor Assembly",
        "category": "Plasma-Facing",
        "functional_role": "Exhaust heat and helium ash removal, plasma purity control",
        "operating_envelope": "10-20 MW/m² peak heat flux, particle flux 10²³-10²⁴ m⁻²s⁻¹",
        "duty_cycle": "Continuous during plasma operation, expected replacement every 1-2 years",
        "design_margins": "Operating at or near material limits, minimal margin",
        "constraints": [
            "Most extreme thermal environment in fusion device",
            "Must handle transient events (ELMs, disruptions)",
            "Tungsten surface integrity critical for plasma purity"
        ],
        "neutron_damage_uncertainty": 4,
        "replaceability_difficulty": 3,
        "system_value_impact": 5,
        "maturity_level": "Prototype",
        "confidence_score": 55,
        "risk_level": "Critical",
        "degradation_hypotheses": [
            {
                "mechanism": "Surface erosion and redeposition",
                "confidence": "High",
                "description": "Tungsten sputtering and co-deposition with fuel species",
                "known_unknown": False
            },
            {
                "mechanism": "Tungsten recrystallization",
                "confidence": "High",
                "description": "Grain growth reducing mechanical properties above 1300°C",
                "known_unknown": False
            },
            {
                "mechanism": "Helium bubble formation",
                "confidence": "Medium",
                "description": "Sub-surface helium accumulation causing blistering",
                "known_unknown": False
            },
            {
                "mechanism": "Thermal fatigue cracking",
                "confidence": "High",
                "description": "Crack initiation from cyclic thermal loading",
                "known_unknown": False
            }
        ],
        "monitoring_strategies": [
            {
                "parameter": "Surface temperature profile",
                "method": "IR thermography, embedded thermocouples",
                "purpose": "Detect hotspots and coolant channel degradation",
                "uncertainty_reduction": "Real-time thermal limit protection",
                "fallback": "Conservative power limits without monitoring"
            },
            {
                "parameter": "Surface morphology",
                "method": "Laser profilometry during maintenance",
                "purpose": "Track erosion rates and surface condition",
                "uncertainty_reduction": "Validates lifetime models",
                "fallback": "End-of-campaign inspection only"
            },
            {
                "parameter": "Coolant flow and pressure",
                "method": "Flow sensors, pressure transducers",
                "purpose": "Detect cooling degradation or leaks",
                "uncertainty_reduction": "Critical safety function",
                "fallback": "None acceptable - safety critical"
            }
        ],
        "maintainability": {
            "access_constraints": "Lower vessel access, activation levels permit limited hands-on during shutdown",
            "replacement_strategy": "Cassette-based replacement design for rapid exchange",
            "estimated_duration": "2-4 weeks for full divertor replacement",
            "remote_handling": True,
            "supply_chain_realism": "Developing"
        },
        "system_value": {
            "availability_impact": "Critical",
            "flexibility_impact": "Critical",
            "output_impact": "Divertor limits determine maximum plasma power",
            "energy_system_links": [
                "Sets upper bound on fusion power",
                "Maintenance frequency directly impacts availability",
                "Determines operational flexibility envelope"
            ]
        },
        "end_of_life": {
            "waste_classification": "Low Level Waste (LLW) to Intermediate Level Waste (ILW)",
            "classification_uncertainty": "Medium",
            "cooling_period": "10-50 years depending on activation",
            "handling_requirements": "Remote handling, activated tungsten management",
            "disposal_complexity": "High"
        },
        "learning_priority": "Immediate",
        "rd_investment_justification": "Most life-limiting component, directly sets maintenance schedule",
        "instrumentation_priority": 5,
        "cost_schedule": _cost_schedule(45.0, 5.0, 6.0, 18, "Medium", "Medium", "High"),
    },
    {
        "id": "first-wall",
        "name": "First Wall Panels",
        "category": "Plasma-Facing",
        "functional_role": "Plasma-material interface, radiation shielding, heat extraction",
        "operating_envelope": "0.5-2 MW/m² average heat flux, neutron wall loading 1-2 MW/m²",
        "duty_cycle": "Continuous during operation, 5-10 year replacement target",
        "design_margins": "30% thermal margin for transients",
        "constraints": [
            "Large surface area requiring consistent performance",
            "Must survive off-normal plasma events",
            "Integrated with blanket modules"
        ],
        "neutron_damage_uncertainty": 4,
        "replaceability_difficulty": 4,
        "system_value_impact": 4,
        "maturity_level": "Design",
        "confidence_score": 45,
        "risk_level": "High",
        "degradation_hypotheses": [
            {
                "mechanism": "Beryllium erosion",
                "confidence": "High",
                "description": "Sputtering and chemical erosion of armor material",
                "known_unknown": False
            },
            {
                "mechanism": "Thermal stress cracking",
                "confidence": "Medium",
                "description": "Fatigue from thermal cycling and transient events",
                "known_unknown": False
            },
            {
                "mechanism": "Neutron embrittlement",
                "confidence": "Low",
                "description": "Long-term mechanical property degradation",
                "known_unknown": True
            }
        ],
        "monitoring_strategies": [
            {
                "parameter": "Surface temperature",
                "method": "IR cameras and thermocouples",
                "purpose": "Thermal protection and degradation detection",
                "uncertainty_reduction": "Enables optimized power ramp-up",
                "fallback": "Conservative thermal limits"
            },
            {
                "parameter": "Erosion depth",
                "method": "Marker tiles, laser profilometry",
                "purpose": "Track material loss rate",
                "uncertainty_reduction": "Validates erosion models",
                "fallback": "Visual inspection during maintenance"
            }
        ],
        "maintainability": {
            "access_constraints": "Integrated with blanket, requires coordinated maintenance",
            "replacement_strategy": "Sector replacement with blanket modules",
            "estimated_duration": "8-12 weeks for sector replacement",
            "remote_handling": True,
            "supply_chain_realism": "Developing"
        },
        "system_value": {
            "availability_impact": "Major",
            "flexibility_impact": "Moderate",
            "output_impact": "Degradation reduces thermal efficiency marginally",
            "energy_system_links": [
                "Heat extraction to blanket cooling",
                "Plasma purity maintenance",
                "Shielding effectiveness"
            ]
        },
        "end_of_life": {
            "waste_classification": "Intermediate Level Waste (ILW)",
            "classification_uncertainty": "Medium",
            "cooling_period": "30-80 years",
            "handling_requirements": "Remote handling, beryllium waste protocols",
            "disposal_complexity": "High"
        },
        "learning_priority": "High",
        "rd_investment_justification": "Large quantity component, manufacturing scale-up required",
        "instrumentation_priority": 4,
        "cost_schedule": _cost_schedule(80.0, 6.0, 10.0, 24, "Medium", "Medium", "High"),
    },
    {
        "id": "tf-coils",
        "name": "Toroidal Field Coils",
        "category": "Magnets",
        "functional_role": "Provide toroidal magnetic field for plasma confinement",
        "operating_envelope": "11-13 Tesla peak field, 4.5K superconducting operation",
        "duty_cycle": "Continuous steady-state, 30+ year lifetime target",
        "design_margins": "20% current margin, 1.5K temperature margin",
        "constraints": [
            "Must never quench under normal operation",
            "Replacement essentially impossible post-installation",
            "Nuclear heating to superconductor must be managed"
        ],
        "neutron_damage_uncertainty": 3,
        "replaceability_difficulty": 5,
        "system_value_impact": 5,
        "maturity_level": "Qualified",
        "confidence_score": 75,
        "risk_level": "High",
        "degradation_hypotheses": [
            {
                "mechanism": "Radiation-induced resistivity increase",
                "confidence": "Medium",
                "description": "Copper stabilizer degradation affecting quench protection",
                "known_unknown": False
            },
            {
                "mechanism": "Insulation degradation",
                "confidence": "Low",
                "description": "Organic insulation damage from neutron and gamma flux",
                "known_unknown": True
            },
            {
                "mechanism": "Joint resistance increase",
                "confidence": "Medium",
                "description": "Gradual degradation of superconducting joints",
                "known_unknown": False
            }
        ],
        "monitoring_strategies": [
            {
                "parameter": "Quench detection signals",
                "method": "Voltage taps, fiber optic sensors",
                "purpose": "Safety protection system",
                "uncertainty_reduction": "Essential safety function",
                "fallback": "None acceptable - safety critical"
            },
            {
                "parameter": "Cryogenic temperature distribution",
                "method": "Distributed temperature sensors",
                "purpose": "Monitor cooling performance and nuclear heating",
                "uncertainty_reduction": "Early warning of cooling issues",
                "fallback": "Reduced resolution with point sensors"
            },
            {
                "parameter": "Joint resistance",
                "method": "Precision voltage measurements",
                "purpose": "Track joint degradation",
                "uncertainty_reduction": "Trend analysis for lifetime prediction",
                "fallback": "Periodic cold testing during long shutdowns"
            }
        ],
        "maintainability": {
            "access_constraints": "Essentially non-replaceable, embedded in machine structure",
            "replacement_strategy": "Design for full plant lifetime, no replacement planned",
            "estimated_duration": "Not applicable - replacement not feasible",
            "remote_handling": False,
            "supply_chain_realism": "Proven"
        },
        "system_value": {
            "availability_impact": "Critical",
            "flexibility_impact": "Minor",
            "output_impact": "Magnet failure terminates plant operation",
            "energy_system_links": [
                "Fundamental to plasma confinement",
                "Single point of failure for plant",
                "Cryogenic power consumption affects net output"
            ]
        },
        "end_of_life": {
            "waste_classification": "Low Level Waste (LLW) with material recovery potential",
            "classification_uncertainty": "Low",
            "cooling_period": "Minimal after neutron activation decay",
            "handling_requirements": "Large component handling, superconductor recycling",
            "disposal_complexity": "Medium"
        },
        "learning_priority": "High",
        "rd_investment_justification": "Must be right first time - no opportunity for operational learning",
        "instrumentation_priority": 5,
        "cost_schedule": _cost_schedule(250.0, 3.0, 52.0, 60, "Critical", "Low", "Medium"),
    },
    {
        "id": "vacuum-vessel",
        "name": "Vacuum Vessel",
        "category": "Structural",
        "functional_role": "Primary vacuum boundary, structural support, safety containment",
        "operating_envelope": "10⁻⁶ Pa vacuum, 100-200°C baking temperature, seismic loads",
        "duty_cycle": "Continuous, 40+ year design lifetime",
        "design_margins": "Double containment philosophy, seismic design basis",
        "constraints": [
            "Leak-tight boundary for tritium containment",
            "Structural support for in-vessel components",
            "Essentially non-replaceable"
        ],
        "neutron_damage_uncertainty": 2,
        "replaceability_difficulty": 5,
        "system_value_impact": 5,
        "maturity_level": "Qualified",
        "confidence_score": 80,
        "risk_level": "Medium",
        "degradation_hypotheses": [
            {
                "mechanism": "Fatigue crack propagation",
                "confidence": "Medium",
                "description": "Crack growth from cyclic mechanical and thermal loads",
                "known_unknown": False
            },
            {
                "mechanism": "Neutron embrittlement",
                "confidence": "Medium",
                "description": "DBTT shift in steel from neutron damage",
                "known_unknown": False
            },
            {
                "mechanism": "Stress corrosion cracking",
                "confidence": "Low",
                "description": "Environment-assisted cracking at welds",
                "known_unknown": True
            }
        ],
        "monitoring_strategies": [
            {
                "parameter": "Leak rate",
                "method": "Residual gas analyzers, pressure rise tests",
                "purpose": "Verify primary boundary integrity",
                "uncertainty_reduction": "Essential safety and operational function",
                "fallback": "Helium leak testing during shutdowns"
            },
            {
                "parameter": "Structural strain",
                "method": "Strain gauges at critical locations",
                "purpose": "Monitor fatigue accumulation",
                "uncertainty_reduction": "Validates structural models",
                "fallback": "Visual inspection of accessible areas"
            }
        ],
        "maintainability": {
            "access_constraints": "Partial access through ports, inner surface largely inaccessible",
            "replacement_strategy": "Not replaceable - repair strategies only",
            "estimated_duration": "N/A",
            "remote_handling": False,
            "supply_chain_realism": "Proven"
        },
        "system_value": {
            "availability_impact": "Critical",
            "flexibility_impact": "Minor",
            "output_impact": "Vessel failure terminates plant operation",
            "energy_system_links": [
                "Primary safety boundary",
                "Foundation for all in-vessel components",
                "Tritium confinement"
            ]
        },
        "end_of_life": {
            "waste_classification": "Low Level Waste (LLW)",
            "classification_uncertainty": "Low",
            "cooling_period": "10-30 years",
            "handling_requirements": "Large component sectioning and disposal",
            "disposal_complexity": "Medium"
        },
        "learning_priority": "Medium",
        "rd_investment_justification": "Well-understood technology but scale and integration challenges",
        "instrumentation_priority": 3,
        "cost_schedule": _cost_schedule(400.0, 2.0, 104.0, 72, "Critical", "Low", "Medium"),
    },
    {
        "id": "tritium-plant",
        "name": "Tritium Processing Plant",
        "category": "Auxiliary",
        "functional_role": "Fuel cycle: tritium extraction, purification, storage, and injection",
        "operating_envelope": "Gram-scale tritium inventory, continuous processing",
        "duty_cycle": "Continuous operation synchronized with plasma operation",
        "design_margins": "Redundant processing trains, defense-in-depth for containment",
        "constraints": [
            "Regulatory limits on tritium inventory",
            "Complex chemistry with multiple process streams",
            "Must achieve high tritium recovery efficiency"
        ],
        "neutron_damage_uncertainty": 1,
        "replaceability_difficulty": 2,
        "system_value_impact": 4,
        "maturity_level": "Prototype",
        "confidence_score": 60,
        "risk_level": "High",
        "degradation_hypotheses": [
            {
                "mechanism": "Catalyst poisoning",
                "confidence": "High",
                "description": "Performance degradation of catalytic reactors",
                "known_unknown": False
            },
            {
                "mechanism": "Tritium permeation",
                "confidence": "Medium",
                "description": "Gradual tritium migration through containment boundaries",
                "known_unknown": False
            },
            {
                "mechanism": "Radiolytic degradation",
                "confidence": "Medium",
                "description": "Decomposition of organic materials from tritium beta decay",
                "known_unknown": False
            }
        ],
        "monitoring_strategies": [
            {
                "parameter": "Tritium inventory and accountancy",
                "method": "Mass balance, calorimetry, ionization chambers",
                "purpose": "Regulatory compliance and loss detection",
                "uncertainty_reduction": "Essential for licensing",
                "fallback": "None acceptable - regulatory requirement"
            },
            {
                "parameter": "Process efficiency",
                "method": "Stream composition analysis",
                "purpose": "Detect degradation of separation performance",
                "uncertainty_reduction": "Optimize fuel cycle economics",
                "fallback": "Periodic performance testing"
            }
        ],
        "maintainability": {
            "access_constraints": "Glove box operations, controlled area restrictions",
            "replacement_strategy": "Modular component replacement, redundant trains",
            "estimated_duration": "Component-dependent, weeks to months",
            "remote_handling": False,
            "supply_chain_realism": "Uncertain"
        },
        "system_value": {
            "availability_impact": "Major",
            "flexibility_impact": "Moderate",
            "output_impact": "Tritium processing limits affect sustained burn capability",
            "energy_system_links": [
                "Fuel self-sufficiency",
                "Determines startup fuel requirements",
                "Links to breeding blanket performance"
            ]
        },
        "end_of_life": {
            "waste_classification": "Low Level Waste (LLW) after tritium removal",
            "classification_uncertainty": "Low",
            "cooling_period": "Minimal after tritium decay",
            "handling_requirements": "Tritium decontamination, conventional chemical waste",
            "disposal_complexity": "Low"
        },
        "learning_priority": "High",
        "rd_investment_justification": "Scale-up from laboratory to industrial scale required",
        "instrumentation_priority": 4,
        "cost_schedule": _cost_schedule(60.0, 7.0, 8.0, 24, "Medium", "Low", "Low"),
    },
]


@lru_cache(maxsize=1)
def fusion_assets() -> Tuple[Asset, ...]:
    """Return the baseline asset collection in its fixed seed order."""
    return tuple(Asset.model_validate(record) for record in _FUSION_ASSET_RECORDS)


def get_asset_by_id(
    asset_id: str, assets: Optional[Sequence[Asset]] = None
) -> Optional[Asset]:
    """Find an asset by id (defaults to the seed dataset); None if absent."""
    pool = fusion_assets() if assets is None else assets
    return next((asset for asset in pool if asset.id == asset_id), None)


def get_assets_by_category(
    category: AssetCategoryEnum, assets: Optional[Sequence[Asset]] = None
) -> Tuple[Asset, ...]:
    pool = fusion_assets() if assets is None else assets
    return tuple(asset for asset in pool if asset.category == category)


def get_critical_assets(assets: Optional[Sequence[Asset]] = None) -> Tuple[Asset, ...]:
    pool = fusion_assets() if assets is None else assets
    return tuple(asset for asset in pool if asset.risk_level == RiskLevelEnum.CRITICAL)
