# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import pytest

from fusionpassport.core.primitives import clamp_int, clamp_percent, clamp_score


class TestClamping:
    """Rounding and clamping of bounded integer scales."""

    def test_in_range_values_pass_through(self):
        assert clamp_score(3) == 3
        assert clamp_percent(55) == 55

    def test_out_of_range_values_are_clamped(self):
        assert clamp_score(0) == 1
        assert clamp_score(9) == 5
        assert clamp_percent(-10) == 0
        assert clamp_percent(250) == 100

    def test_fractional_values_are_rounded(self):
        assert clamp_score(3.6) == 4
        assert clamp_percent(44.2) == 44

    def test_infinite_values_are_clamped(self):
        assert clamp_score(float("inf")) == 5
        assert clamp_percent(float("-inf")) == 0

    def test_numeric_strings_are_accepted(self):
        assert clamp_int("7", 1, 5) == 5

    @pytest.mark.parametrize("value", ["high", None, float("nan"), True])
    def test_non_numeric_values_raise(self, value):
        with pytest.raises(ValueError):
            clamp_score(value)
