# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Amortiza Core Primitives

Building blocks shared by the mortgage engine and the Euribor path
provider: the immutable base model, constrained types, enums, settings
and the validation error hierarchy.
"""

from .enums import (
    InterestTypeEnum,
    PartialAmortizationTypeEnum,
    PaymentFrequencyEnum,
)
from .errors import (
    ConfigurationError,
    EuriborPathError,
    NoInterestPeriodsError,
    PeriodCoverageError,
)
from .model import Model
from .settings import DEFAULT_SETTINGS, EngineSettings, EuriborSettings
from .types import (
    MonthNumber,
    NonNegativeFloat,
    Percentage,
    PositiveFloat,
    PositiveInt,
)

__all__ = [
    # Core models
    "Model",
    # Settings
    "EngineSettings",
    "EuriborSettings",
    "DEFAULT_SETTINGS",
    # Enums
    "InterestTypeEnum",
    "PaymentFrequencyEnum",
    "PartialAmortizationTypeEnum",
    # Errors
    "ConfigurationError",
    "NoInterestPeriodsError",
    "EuriborPathError",
    "PeriodCoverageError",
    # Types
    "MonthNumber",
    "PositiveInt",
    "PositiveFloat",
    "NonNegativeFloat",
    "Percentage",
]
