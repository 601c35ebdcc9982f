# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

# Fusion Passport Test Suite
