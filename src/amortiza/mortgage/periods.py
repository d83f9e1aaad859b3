# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Interest period models for mortgages"""

from __future__ import annotations

from abc import abstractmethod
from typing import Any, List, Literal, Optional, Sequence, Union

from pydantic import Discriminator, Field, Tag, field_validator, model_validator
from typing_extensions import Annotated

from ..core.primitives import (
    ConfigurationError,
    InterestTypeEnum,
    Model,
    MonthNumber,
    NonNegativeFloat,
    PaymentFrequencyEnum,
    Percentage,
)


def to_monthly(amount: float, frequency: PaymentFrequencyEnum) -> float:
    """Convert a premium or charge to its monthly-equivalent amount."""
    if frequency == PaymentFrequencyEnum.ANNUAL:
        return amount / 12
    return amount


class ExtraItem(Model):
    """
    A named recurring charge attached to an interest period.

    Example:
        >>> item = ExtraItem(name="Account fee", amount=60, period="annual")
        >>> item.monthly_amount
        5.0
    """

    name: str = ""
    amount: NonNegativeFloat = 0.0
    period: PaymentFrequencyEnum = PaymentFrequencyEnum.ANNUAL

    @property
    def monthly_amount(self) -> float:
        return to_monthly(self.amount, self.period)


class InterestPeriodBase(Model):
    """
    One contiguous span of the mortgage life with a single rate regime.

    Months are 1-based and inclusive. Insurance premiums and extra items
    attach to the period and are reported as monthly-equivalent values on
    every schedule row the period covers.

    Attributes:
        start_month: First month of the period (1-based)
        end_month: Last month of the period (inclusive)
        life_insurance_amount: Life insurance premium for this period
        life_insurance_period: Whether the premium is annual or monthly
        home_insurance_amount: Home insurance premium for this period
        home_insurance_period: Whether the premium is annual or monthly
        extra_items: Other recurring charges (account fees, etc.)
    """

    start_month: MonthNumber
    end_month: MonthNumber
    life_insurance_amount: NonNegativeFloat = 0.0
    life_insurance_period: PaymentFrequencyEnum = PaymentFrequencyEnum.ANNUAL
    home_insurance_amount: NonNegativeFloat = 0.0
    home_insurance_period: PaymentFrequencyEnum = PaymentFrequencyEnum.ANNUAL
    extra_items: List[ExtraItem] = Field(default_factory=list)

    @field_validator("life_insurance_amount", "home_insurance_amount", mode="before")
    @classmethod
    def _missing_amount_is_zero(cls, value: Any) -> Any:
        return 0.0 if value is None else value

    @field_validator(
        "life_insurance_period", "home_insurance_period", "extra_items", mode="before"
    )
    @classmethod
    def _missing_flag_is_default(cls, value: Any, info) -> Any:
        if value is not None:
            return value
        if info.field_name == "extra_items":
            return []
        return PaymentFrequencyEnum.ANNUAL

    @model_validator(mode="after")
    def check_month_order(self) -> "InterestPeriodBase":
        if self.start_month > self.end_month:
            raise ValueError(
                f"start_month ({self.start_month}) must not be after "
                f"end_month ({self.end_month})"
            )
        return self

    def covers(self, month: int) -> bool:
        return self.start_month <= month <= self.end_month

    def span_months(self, total_months: int) -> int:
        """Months of the period that fall inside a term of ``total_months``."""
        return max(0, min(self.end_month, total_months) - self.start_month + 1)

    @property
    def monthly_insurance(self) -> float:
        return to_monthly(
            self.life_insurance_amount, self.life_insurance_period
        ) + to_monthly(self.home_insurance_amount, self.home_insurance_period)

    @property
    def monthly_extra_items(self) -> float:
        return sum(item.monthly_amount for item in self.extra_items)

    @abstractmethod
    def annual_rate_for(
        self, offset: int, euribor_path: Optional[Sequence[float]] = None
    ) -> float:
        """Annual rate (%) for the month ``offset`` months into the period."""


class FixedInterestPeriod(InterestPeriodBase):
    """
    A period with a fixed annual interest rate.

    Example:
        >>> period = FixedInterestPeriod(start_month=1, end_month=120, annual_interest_rate=3.5)
        >>> period.annual_rate_for(0)
        3.5
    """

    interest_type: Literal["fixed"] = "fixed"
    annual_interest_rate: Percentage = Field(
        default=0.0, description="Fixed annual interest rate in percent (e.g., 3.5)"
    )

    @field_validator("annual_interest_rate", mode="before")
    @classmethod
    def _missing_rate_is_zero(cls, value: Any) -> Any:
        return 0.0 if value is None else value

    def annual_rate_for(
        self, offset: int, euribor_path: Optional[Sequence[float]] = None
    ) -> float:
        return self.annual_interest_rate


class VariableInterestPeriod(InterestPeriodBase):
    """
    A period whose rate tracks Euribor plus a fixed differential.

    The envelope fields (``euribor_min``, ``euribor_max``,
    ``euribor_volatility``) only drive simulated Euribor paths; left unset,
    the path provider applies the defaults from ``EuriborSettings``.

    Example:
        >>> period = VariableInterestPeriod(
        ...     start_month=13, end_month=360, euribor_differential=1.0
        ... )
        >>> period.annual_rate_for(0, [2.5] * 348)
        3.5
    """

    interest_type: Literal["variable"] = "variable"
    euribor_differential: Percentage = Field(
        default=0.0, description="Spread added to the Euribor value each month (%)"
    )
    euribor_min: Optional[Percentage] = Field(
        default=None, description="Lower bound of simulated Euribor paths (%)"
    )
    euribor_max: Optional[Percentage] = Field(
        default=None, description="Upper bound of simulated Euribor paths (%)"
    )
    euribor_volatility: Optional[NonNegativeFloat] = Field(
        default=None, description="0 = stable path, 5 = very dynamic path"
    )

    @field_validator("euribor_differential", mode="before")
    @classmethod
    def _missing_differential_is_zero(cls, value: Any) -> Any:
        return 0.0 if value is None else value

    def annual_rate_for(
        self, offset: int, euribor_path: Optional[Sequence[float]] = None
    ) -> float:
        if euribor_path is None:
            raise ConfigurationError(
                "A Euribor path must be provided for variable rate calculations "
                f"(months {self.start_month}-{self.end_month})"
            )
        return float(euribor_path[offset]) + self.euribor_differential


def _interest_type_of(value: Any) -> str:
    """Discriminator value, defaulting to fixed when the type is absent."""
    if isinstance(value, dict):
        interest_type = value.get("interest_type", value.get("interestType"))
    else:
        interest_type = getattr(value, "interest_type", None)
    if interest_type is None:
        return InterestTypeEnum.FIXED.value
    return getattr(interest_type, "value", interest_type)


# The discriminated union for any period type
AnyInterestPeriod = Annotated[
    Union[
        Annotated[FixedInterestPeriod, Tag(InterestTypeEnum.FIXED.value)],
        Annotated[VariableInterestPeriod, Tag(InterestTypeEnum.VARIABLE.value)],
    ],
    Discriminator(_interest_type_of),
]
