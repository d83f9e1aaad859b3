# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Mortgage amortization engine.

Builds a month-by-month schedule for a mortgage whose term is split into
fixed and variable (Euribor-linked) interest periods, with optional
recurring extra principal payments. The engine is a pure function of its
inputs: Euribor paths are supplied by the caller (see ``amortiza.euribor``)
and no state survives between calls.
"""

from __future__ import annotations

import logging
import math
from typing import List, Mapping, Optional, Sequence, Tuple

from pydantic import Field
from pyxirr import nper, pmt

from ..core.primitives import (
    DEFAULT_SETTINGS,
    EngineSettings,
    EuriborPathError,
    InterestTypeEnum,
    Model,
    MonthNumber,
    NoInterestPeriodsError,
    NonNegativeFloat,
    PartialAmortizationTypeEnum,
    PositiveInt,
)
from .config import MortgageConfig
from .periods import AnyInterestPeriod

logger = logging.getLogger(__name__)

# Period index (0-based, start-month order) -> monthly Euribor values (%)
EuriborPaths = Mapping[int, Sequence[float]]


class AmortizationRow(Model):
    """
    One month of an amortization schedule.

    ``payment`` is the installment (principal + interest) without insurance
    or extra items. ``principal_payment`` includes any extra payment applied
    in the month, which is also reported on its own in
    ``partial_amortization``.
    """

    month: MonthNumber
    period: PositiveInt = Field(..., description="1-based index into the sorted periods")
    payment: float
    principal_payment: float
    interest_payment: float
    remaining_balance: NonNegativeFloat
    monthly_insurance: NonNegativeFloat = 0.0
    monthly_extra_items: NonNegativeFloat = 0.0
    partial_amortization: Optional[NonNegativeFloat] = None

    @property
    def total_payment(self) -> float:
        """Installment plus insurance and extra items."""
        return self.payment + self.monthly_insurance + self.monthly_extra_items


def annuity_payment(balance: float, monthly_rate: float, months: int) -> float:
    """
    Fixed installment that repays ``balance`` over ``months`` payments.

        payment = B * r / (1 - (1 + r)^-n)

    With a zero rate the installment is simply ``balance / months``.
    """
    if months <= 0:
        return balance
    if monthly_rate == 0:
        return balance / months
    return pmt(monthly_rate, months, balance) * -1


def months_to_amortize(balance: float, monthly_rate: float, payment: float) -> int:
    """
    Whole number of payments of ``payment`` needed to repay ``balance``.

    The caller guarantees that ``payment`` exceeds the interest-only amount.
    """
    if monthly_rate == 0:
        exact = balance / payment
    else:
        exact = nper(monthly_rate, -payment, balance)
    # Absorb float noise so that an exact count is not rounded up
    return max(1, math.ceil(exact - 1e-6))


def _validate_inputs(
    periods: List[AnyInterestPeriod],
    total_months: int,
    euribor_paths: EuriborPaths,
) -> None:
    if not periods:
        raise NoInterestPeriodsError()

    for index, period in enumerate(periods):
        if period.interest_type != InterestTypeEnum.VARIABLE:
            continue
        expected = period.span_months(total_months)
        if expected == 0:
            # Starts after the term; never visited
            continue
        path = euribor_paths.get(index)
        if path is None:
            raise EuriborPathError(index, expected)
        if len(path) != expected:
            raise EuriborPathError(index, expected, len(path))


def _resolve_period(
    periods: List[AnyInterestPeriod], month: int
) -> Tuple[int, Optional[AnyInterestPeriod]]:
    for index, period in enumerate(periods):
        if period.covers(month):
            return index, period
    return -1, None


def calculate_amortization(
    config: MortgageConfig,
    euribor_paths: Optional[EuriborPaths] = None,
    settings: Optional[EngineSettings] = None,
) -> List[AmortizationRow]:
    """
    Compute the month-by-month amortization schedule of a mortgage.

    The installment is only recomputed when it stops being valid: on the
    first month, when a new period starts, every ``revision_months`` inside
    a variable period (annual revision by default), and the month after a
    capital-type extra payment. A time-type extra payment keeps the
    installment and instead pulls the effective end of the term forward.

    Args:
        config: The mortgage configuration
        euribor_paths: Monthly Euribor values (%) per variable period,
            keyed by the period's 0-based index in start-month order. Each
            path must cover exactly the months of its period that fall
            inside the term.
        settings: Engine settings; defaults to ``EngineSettings()``

    Returns:
        One ``AmortizationRow`` per scheduled month. The last row always
        ends with a zero balance; the schedule is shorter than
        ``config.months`` when time-type extra payments shortened the term.

    Raises:
        NoInterestPeriodsError: If ``config.periods`` is empty
        EuriborPathError: If a variable period lacks a path of the right length
    """
    settings = settings or DEFAULT_SETTINGS
    euribor_paths = euribor_paths or {}
    total_months = config.months
    periods = config.sorted_periods()

    _validate_inputs(periods, total_months, euribor_paths)

    tolerance = settings.balance_tolerance
    remaining_balance = float(config.principal)
    effective_end_month = total_months
    current_payment = 0.0
    payment_valid_until = 0
    recompute_payment = True

    schedule: List[AmortizationRow] = []
    month = 1
    while month <= effective_end_month and remaining_balance > tolerance:
        period_index, period = _resolve_period(periods, month)
        if period is None:
            logger.warning(
                f"{config.name or 'Mortgage'}: no interest period covers month {month}; "
                "stopping the schedule early"
            )
            break

        offset = month - period.start_month
        annual_rate = period.annual_rate_for(offset, euribor_paths.get(period_index))
        monthly_rate = annual_rate / 100 / 12

        if recompute_payment or month > payment_valid_until:
            remaining_months = effective_end_month - month + 1
            current_payment = annuity_payment(
                remaining_balance, monthly_rate, remaining_months
            )
            if period.interest_type == InterestTypeEnum.VARIABLE:
                payment_valid_until = min(
                    month + settings.revision_months - 1, period.end_month
                )
            else:
                payment_valid_until = min(period.end_month, effective_end_month)
            recompute_payment = False
            logger.debug(
                f"Month {month}: installment {current_payment:,.2f} at {annual_rate:.3f}% "
                f"over {remaining_months} months, valid through month {payment_valid_until}"
            )

        interest_payment = remaining_balance * monthly_rate
        principal_payment = current_payment - interest_payment
        payment = current_payment
        if principal_payment > remaining_balance:
            # Terminal month: do not repay more than is owed
            principal_payment = remaining_balance
            payment = interest_payment + principal_payment
        remaining_balance -= principal_payment

        extra_payment = 0.0
        capital_applied = False
        time_applied = False
        for rule in config.partial_amortizations:
            if not rule.applies_to(month) or remaining_balance <= tolerance:
                continue
            amount = min(rule.amount, remaining_balance)
            if amount <= 0:
                continue
            remaining_balance -= amount
            extra_payment += amount
            if rule.type == PartialAmortizationTypeEnum.CAPITAL:
                capital_applied = True
            else:
                time_applied = True

        if capital_applied and remaining_balance > tolerance:
            # Same remaining term, smaller installment from next month
            recompute_payment = True

        if (
            time_applied
            and remaining_balance > tolerance
            and current_payment > remaining_balance * monthly_rate
        ):
            needed = months_to_amortize(remaining_balance, monthly_rate, current_payment)
            if month + needed < effective_end_month:
                logger.debug(
                    f"Month {month}: term shortened from month {effective_end_month} "
                    f"to month {month + needed}"
                )
                effective_end_month = month + needed

        schedule.append(
            AmortizationRow(
                month=month,
                period=period_index + 1,
                payment=payment,
                principal_payment=principal_payment + extra_payment,
                interest_payment=interest_payment,
                remaining_balance=max(0.0, remaining_balance),
                monthly_insurance=period.monthly_insurance,
                monthly_extra_items=period.monthly_extra_items,
                partial_amortization=extra_payment if extra_payment > 0 else None,
            )
        )
        month += 1

    if schedule and schedule[-1].remaining_balance > 0:
        last = schedule[-1]
        residual = last.remaining_balance
        logger.debug(f"Folding residual balance {residual:,.4f} into month {last.month}")
        schedule[-1] = last.model_copy(
            update={
                "payment": last.payment + residual,
                "principal_payment": last.principal_payment + residual,
                "remaining_balance": 0.0,
            }
        )

    return schedule
