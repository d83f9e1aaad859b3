# Copyright 2024 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Unit tests for the mortgage module.

Covers period models, configuration validation, extra payments and the
amortization engine.
"""
