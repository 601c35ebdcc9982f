# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Base reporting classes.

Reports translate engine outputs into presentation-ready pandas frames
with display labels. They format and arrange results; they never compute
financial figures themselves.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Optional, Tuple, Type

from ..core.primitives import ReportingSettings


class BaseReport(ABC):
    """
    Abstract base class for all report formatters.

    Subclasses declare the result type they accept in `result_type`; any
    other input is rejected at construction.
    """

    result_type: ClassVar[Tuple[Type, ...]] = ()

    def __init__(self, results: Any, settings: Optional[ReportingSettings] = None):
        """
        Initialize report with analysis results.

        Args:
            results: Engine output the report formats
            settings: Display settings; defaults to `ReportingSettings()`

        Raises:
            TypeError: If `results` is not of the report's result type
        """
        expected = self.result_type
        if not isinstance(results, expected):
            names = " or ".join(t.__name__ for t in expected)
            raise TypeError(
                f"{type(self).__name__} requires a {names} object, "
                f"got {type(results).__name__}"
            )
        self._results = results
        self._settings = settings if settings is not None else ReportingSettings()

    @property
    def currency_label(self) -> str:
        return self._settings.currency_label

    def _round(self, value: float) -> float:
        return round(value, self._settings.decimal_precision)

    @abstractmethod
    def generate(self, **kwargs) -> Any:
        """
        Generate the formatted report output.

        This method should transform the analysis results into the
        appropriate output format (usually a DataFrame) without performing
        any financial calculations.
        """
        pass
