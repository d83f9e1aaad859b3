# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Test utilities and fixtures for Amortiza testing.

This module provides small factories for mortgage configurations so that
tests only spell out the fields they actually exercise.
"""

from __future__ import annotations

from typing import List, Optional

import pytest

from amortiza.mortgage import (
    FixedInterestPeriod,
    MortgageConfig,
    PartialAmortization,
    VariableInterestPeriod,
)


def manual_monthly_payment(principal: float, annual_rate_pct: float, months: int) -> float:
    """
    Standard mortgage installment, independent of the library.

    Formula: M = P * [r(1+r)^n] / [(1+r)^n - 1] with r = annual% / 100 / 12
    """
    if annual_rate_pct == 0:
        return principal / months
    r = annual_rate_pct / 100 / 12
    factor = (1 + r) ** months
    return principal * r * factor / (factor - 1)


def fixed_config(
    principal: float = 100_000,
    months: int = 120,
    rate: float = 3.5,
    partial_amortizations: Optional[List[PartialAmortization]] = None,
) -> MortgageConfig:
    """Single fixed-rate period covering the whole term."""
    return MortgageConfig(
        principal=principal,
        months=months,
        periods=[
            FixedInterestPeriod(start_month=1, end_month=months, annual_interest_rate=rate)
        ],
        partial_amortizations=partial_amortizations or [],
    )


def mixed_config(
    principal: float = 208_000,
    months: int = 360,
    fixed_months: int = 12,
    fixed_rate: float = 2.2,
    differential: float = 0.99,
) -> MortgageConfig:
    """Fixed introductory period followed by a Euribor-linked period."""
    return MortgageConfig(
        name="Mixed",
        principal=principal,
        months=months,
        periods=[
            FixedInterestPeriod(
                start_month=1, end_month=fixed_months, annual_interest_rate=fixed_rate
            ),
            VariableInterestPeriod(
                start_month=fixed_months + 1,
                end_month=months,
                euribor_differential=differential,
            ),
        ],
    )


@pytest.fixture
def simple_fixed_config() -> MortgageConfig:
    """100k over 10 years at 3.5 % fixed."""
    return fixed_config()


@pytest.fixture
def simple_mixed_config() -> MortgageConfig:
    """208k over 30 years: 1 year at 2.2 % then Euribor + 0.99 %."""
    return mixed_config()
