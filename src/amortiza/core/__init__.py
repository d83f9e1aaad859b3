# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Amortiza Core Framework

Foundational building blocks for mortgage modeling in Amortiza.
"""

from . import primitives
from .primitives import (
    DEFAULT_SETTINGS,
    ConfigurationError,
    EngineSettings,
    EuriborPathError,
    EuriborSettings,
    InterestTypeEnum,
    Model,
    NoInterestPeriodsError,
    PartialAmortizationTypeEnum,
    PaymentFrequencyEnum,
    PeriodCoverageError,
)

__all__ = [
    "primitives",
    "Model",
    "EngineSettings",
    "EuriborSettings",
    "DEFAULT_SETTINGS",
    "InterestTypeEnum",
    "PaymentFrequencyEnum",
    "PartialAmortizationTypeEnum",
    "ConfigurationError",
    "NoInterestPeriodsError",
    "EuriborPathError",
    "PeriodCoverageError",
]
