# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Sensitivity Reports

Chart-ready frames from a `SensitivityAnalysis`: the tornado table, the
ROI sensitivity curves and the per-strategy NPV curves.
"""

from __future__ import annotations

from typing import Optional, Union

import pandas as pd

from ..analysis import MaintenanceStrategy, SensitivityAnalysis
from ..core.primitives import SensitivityParameterEnum, StrategyKindEnum
from .base import BaseReport

StrategyRef = Union[MaintenanceStrategy, StrategyKindEnum, str]


class _SensitivityReport(BaseReport):
    result_type = (SensitivityAnalysis,)

    def _strategies(self, primary: Optional[StrategyRef], baseline: Optional[StrategyRef]):
        settings = self._results.settings
        return (
            primary if primary is not None else settings.primary_strategy,
            baseline if baseline is not None else settings.baseline_strategy,
        )


class TornadoReport(_SensitivityReport):
    """Tornado table, largest ROI swing first."""

    def generate(
        self,
        primary: Optional[StrategyRef] = None,
        baseline: Optional[StrategyRef] = None,
    ) -> pd.DataFrame:
        """
        Args:
            primary: Strategy whose ROI is measured (settings default if None)
            baseline: Strategy the ROI is measured against (settings default if None)

        Returns:
            DataFrame indexed by parameter label, in tornado order
        """
        primary, baseline = self._strategies(primary, baseline)
        entries = self._results.tornado(primary, baseline)
        if not entries:
            return pd.DataFrame()
        return pd.DataFrame(
            [
                {
                    "Parameter": e.parameter,
                    "Base ROI (%)": self._round(e.base_roi),
                    "Low ROI (%)": self._round(e.low_roi),
                    "High ROI (%)": self._round(e.high_roi),
                    "Swing (%)": self._round(e.swing),
                    "Low Delta (%)": self._round(e.low_delta),
                    "High Delta (%)": self._round(e.high_delta),
                }
                for e in entries
            ]
        ).set_index("Parameter")


class SensitivityCurveReport(_SensitivityReport):
    """ROI per grid point, one column per cost dimension."""

    def generate(
        self,
        primary: Optional[StrategyRef] = None,
        baseline: Optional[StrategyRef] = None,
    ) -> pd.DataFrame:
        primary, baseline = self._strategies(primary, baseline)
        points = self._results.sensitivity_curve(primary, baseline)
        if not points:
            return pd.DataFrame()
        return pd.DataFrame(
            [
                {
                    "Change": p.label,
                    **{
                        parameter.label: getattr(p, parameter.value)
                        for parameter in SensitivityParameterEnum
                    },
                }
                for p in points
            ]
        ).set_index("Change")


class StrategySensitivityReport(_SensitivityReport):
    """NPV of each strategy as replacement cost varies over the grid."""

    def generate(self) -> pd.DataFrame:
        points = self._results.strategy_sensitivity()
        return pd.DataFrame(
            [
                {"Change": p.label, **{sid.value: npv for sid, npv in p.npvs}}
                for p in points
            ]
        ).set_index("Change")
