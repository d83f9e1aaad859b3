# Amortiza Test Suite
# Copyright 2024 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Amortiza test suite.

Unit tests for the mortgage engine, the Euribor path provider and the
schedule reports.
"""
