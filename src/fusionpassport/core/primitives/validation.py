# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Reusable clamping helpers for bounded integer scales.

Asset records carry several ordinal scores (1-5 criticality factors, 0-100
confidence). Out-of-range inputs are not rejected; they are rounded to the
nearest integer and pulled into the closed range.
"""

from __future__ import annotations

from typing import Any

SCORE_MIN = 1
SCORE_MAX = 5
PERCENT_MIN = 0
PERCENT_MAX = 100


def clamp_int(value: Any, lower: int, upper: int) -> int:
    """
    Round a numeric value and clamp it into [lower, upper].

    Args:
        value: Number (or numeric string) to clamp
        lower: Inclusive lower bound
        upper: Inclusive upper bound

    Returns:
        Integer within the closed range

    Raises:
        ValueError: If the value is not numeric
    """
    if isinstance(value, bool):
        raise ValueError(f"Expected a number, got {value!r}")
    try:
        number = float(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Expected a number, got {value!r}") from e
    if number != number:  # NaN
        raise ValueError("Expected a number, got NaN")
    return int(round(max(lower, min(upper, number))))


def clamp_score(value: Any) -> int:
    """Clamp a criticality factor to the 1-5 scale."""
    return clamp_int(value, SCORE_MIN, SCORE_MAX)


def clamp_percent(value: Any) -> int:
    """Clamp a percentage score to 0-100."""
    return clamp_int(value, PERCENT_MIN, PERCENT_MAX)
