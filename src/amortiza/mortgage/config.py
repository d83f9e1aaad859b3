# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Mortgage configuration and caller-side period validation"""

from __future__ import annotations

from typing import List

from pydantic import Field

from ..core.primitives import (
    InterestTypeEnum,
    Model,
    PeriodCoverageError,
    PositiveFloat,
    PositiveInt,
)
from .partial import PartialAmortization
from .periods import AnyInterestPeriod


class MortgageConfig(Model):
    """
    Complete input for one amortization run.

    ``periods`` may be given in any order; the engine works on them sorted by
    start month. An empty list is accepted here so that the engine can reject
    it with ``NoInterestPeriodsError``.

    Example:
        >>> config = MortgageConfig(
        ...     name="Main home",
        ...     principal=208_000,
        ...     months=360,
        ...     periods=[
        ...         FixedInterestPeriod(start_month=1, end_month=12, annual_interest_rate=2.2),
        ...         VariableInterestPeriod(start_month=13, end_month=360, euribor_differential=0.99),
        ...     ],
        ...     partial_amortizations=[
        ...         PartialAmortization(period_months=12, amount=3000, type="time"),
        ...     ],
        ... )
    """

    name: str = ""
    principal: PositiveFloat
    months: PositiveInt = Field(..., description="Nominal term in months")
    periods: List[AnyInterestPeriod] = Field(default_factory=list)
    partial_amortizations: List[PartialAmortization] = Field(default_factory=list)

    def sorted_periods(self) -> List[AnyInterestPeriod]:
        return sorted(self.periods, key=lambda p: p.start_month)

    @property
    def has_variable_periods(self) -> bool:
        return any(p.interest_type == InterestTypeEnum.VARIABLE for p in self.periods)


def validate_period_coverage(config: MortgageConfig) -> None:
    """
    Check that the periods partition the whole term.

    The engine treats contiguity as a precondition and does not call this;
    callers run it before computing a schedule so that gaps and overlaps are
    reported instead of silently truncating the schedule.

    Raises:
        PeriodCoverageError: If there are no periods, the first one does not
            start at month 1, two consecutive periods leave a gap or overlap,
            or the last one ends before ``config.months``.
    """
    periods = config.sorted_periods()
    if not periods:
        raise PeriodCoverageError("At least one interest period is required")

    if periods[0].start_month != 1:
        raise PeriodCoverageError(
            f"The first period must start at month 1 (starts at {periods[0].start_month})"
        )

    for current, following in zip(periods, periods[1:]):
        if current.end_month + 1 != following.start_month:
            raise PeriodCoverageError(
                "Periods must be consecutive without gaps: period ending at month "
                f"{current.end_month} is followed by one starting at month "
                f"{following.start_month}"
            )

    if periods[-1].end_month < config.months:
        raise PeriodCoverageError(
            f"The last period must reach month {config.months} "
            f"(ends at {periods[-1].end_month})"
        )
