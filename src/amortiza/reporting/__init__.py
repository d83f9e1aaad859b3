# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from .schedule import (
    SCHEDULE_COLUMNS,
    initial_rate_label,
    interest_type_label,
    schedule_to_dataframe,
    summarize_schedule,
)

__all__ = [
    "SCHEDULE_COLUMNS",
    "schedule_to_dataframe",
    "summarize_schedule",
    "interest_type_label",
    "initial_rate_label",
]
