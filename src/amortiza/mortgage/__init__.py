# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from .amortization import (
    AmortizationRow,
    EuriborPaths,
    annuity_payment,
    calculate_amortization,
    months_to_amortize,
)
from .config import MortgageConfig, validate_period_coverage
from .partial import PartialAmortization
from .periods import (
    AnyInterestPeriod,
    ExtraItem,
    FixedInterestPeriod,
    InterestPeriodBase,
    VariableInterestPeriod,
    to_monthly,
)

__all__ = [
    # Configuration
    "MortgageConfig",
    "validate_period_coverage",
    # Period mechanics
    "InterestPeriodBase",
    "FixedInterestPeriod",
    "VariableInterestPeriod",
    "AnyInterestPeriod",
    "ExtraItem",
    "to_monthly",
    # Extra payments
    "PartialAmortization",
    # Schedule calculation
    "AmortizationRow",
    "EuriborPaths",
    "calculate_amortization",
    "annuity_payment",
    "months_to_amortize",
]
