# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Integration tests for Fusion Passport.

These tests drive the scenario store, the strategy engine and the
reporting layer together.
"""
