# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from enum import Enum


class InterestTypeEnum(str, Enum):
    """
    Interest regime of a mortgage period.

    Options:
        FIXED: Constant annual rate for the whole period
        VARIABLE: Euribor reference rate plus a fixed differential
    """

    FIXED = "fixed"
    VARIABLE = "variable"


class PaymentFrequencyEnum(str, Enum):
    """
    Billing frequency of a premium or recurring charge.

    Options:
        MONTHLY: Amount is charged every month
        ANNUAL: Amount is charged once a year (spread as amount / 12)
    """

    MONTHLY = "monthly"
    ANNUAL = "annual"


class PartialAmortizationTypeEnum(str, Enum):
    """
    What an extra principal payment reduces.

    Options:
        TIME: Keep the installment, shorten the remaining term
        CAPITAL: Keep the remaining term, lower the installment
    """

    TIME = "time"
    CAPITAL = "capital"
