# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Recurring extra principal payments"""

from __future__ import annotations

from ..core.primitives import (
    Model,
    NonNegativeFloat,
    PartialAmortizationTypeEnum,
    PositiveInt,
)


class PartialAmortization(Model):
    """
    A recurring extra principal payment (partial amortization).

    Applies on every month that is an exact multiple of ``period_months``.
    The amount actually applied is capped to the outstanding balance.

    Attributes:
        period_months: Payment interval in months (12 = once a year)
        amount: Extra principal paid on each application
        type: ``time`` keeps the installment and shortens the term;
            ``capital`` keeps the term and lowers the installment

    Example:
        >>> yearly = PartialAmortization(period_months=12, amount=1000, type="capital")
        >>> yearly.applies_to(24), yearly.applies_to(30)
        (True, False)
    """

    period_months: PositiveInt
    amount: NonNegativeFloat
    type: PartialAmortizationTypeEnum

    def applies_to(self, month: int) -> bool:
        return month % self.period_months == 0
