# Copyright 2024 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for simulated Euribor paths."""
