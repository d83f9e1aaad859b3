# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from .paths import (
    EuriborSeries,
    build_euribor_paths,
    convert_euribor_series_to_paths,
    generate_euribor_path,
    generate_euribor_preview_series,
    recalculate_euribor_for_period,
)

__all__ = [
    "generate_euribor_path",
    "build_euribor_paths",
    "recalculate_euribor_for_period",
    "EuriborSeries",
    "generate_euribor_preview_series",
    "convert_euribor_series_to_paths",
]
