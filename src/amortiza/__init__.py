# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Amortiza - Mortgage Amortization Engine

Month-by-month amortization schedules for mortgages with fixed and
Euribor-linked variable interest periods, recurring extra principal
payments, insurance premiums and recurring charges.

Example Usage:
    ```python
    from amortiza import (
        FixedInterestPeriod,
        MortgageConfig,
        VariableInterestPeriod,
        build_euribor_paths,
        calculate_amortization,
        summarize_schedule,
    )

    config = MortgageConfig(
        principal=208_000,
        months=360,
        periods=[
            FixedInterestPeriod(start_month=1, end_month=12, annual_interest_rate=2.2),
            VariableInterestPeriod(start_month=13, end_month=360, euribor_differential=0.99),
        ],
    )
    paths = build_euribor_paths(config, seed=42)
    schedule = calculate_amortization(config, paths)
    print(summarize_schedule(schedule, config))
    ```
"""

import logging

from .core.primitives import (
    ConfigurationError,
    EngineSettings,
    EuriborPathError,
    EuriborSettings,
    InterestTypeEnum,
    NoInterestPeriodsError,
    PartialAmortizationTypeEnum,
    PaymentFrequencyEnum,
    PeriodCoverageError,
)
from .euribor import (
    EuriborSeries,
    build_euribor_paths,
    convert_euribor_series_to_paths,
    generate_euribor_path,
    generate_euribor_preview_series,
    recalculate_euribor_for_period,
)
from .mortgage import (
    AmortizationRow,
    AnyInterestPeriod,
    EuriborPaths,
    ExtraItem,
    FixedInterestPeriod,
    MortgageConfig,
    PartialAmortization,
    VariableInterestPeriod,
    calculate_amortization,
    validate_period_coverage,
)
from .reporting import schedule_to_dataframe, summarize_schedule

__version__ = "0.1.0"

# Libraries leave handler configuration to the application
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Settings
    "EngineSettings",
    "EuriborSettings",
    # Enums
    "InterestTypeEnum",
    "PaymentFrequencyEnum",
    "PartialAmortizationTypeEnum",
    # Errors
    "ConfigurationError",
    "NoInterestPeriodsError",
    "EuriborPathError",
    "PeriodCoverageError",
    # Mortgage model
    "MortgageConfig",
    "FixedInterestPeriod",
    "VariableInterestPeriod",
    "AnyInterestPeriod",
    "ExtraItem",
    "PartialAmortization",
    "validate_period_coverage",
    # Engine
    "AmortizationRow",
    "EuriborPaths",
    "calculate_amortization",
    # Euribor paths
    "generate_euribor_path",
    "build_euribor_paths",
    "recalculate_euribor_for_period",
    "EuriborSeries",
    "generate_euribor_preview_series",
    "convert_euribor_series_to_paths",
    # Reporting
    "schedule_to_dataframe",
    "summarize_schedule",
]
