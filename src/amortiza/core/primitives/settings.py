# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import Field, model_validator

from .model import Model
from .types import NonNegativeFloat, PositiveFloat, PositiveInt


class EuriborSettings(Model):
    """
    Defaults for simulated Euribor paths.

    Variable periods may leave their envelope (minimum, maximum, volatility)
    unset; these values are applied at the point of use by the path provider.
    """

    default_min: float = Field(
        default=2.0, description="Lower bound of the walk (%) when a period leaves it unset."
    )
    default_max: float = Field(
        default=5.0, description="Upper bound of the walk (%) when a period leaves it unset."
    )
    default_volatility: NonNegativeFloat = Field(
        default=2.0,
        description="Volatility when a period leaves it unset (0 = stable, 5 = very dynamic).",
    )
    max_volatility: PositiveFloat = Field(
        default=5.0,
        description="Top of the volatility scale. Larger values are clamped to it.",
    )
    step_factor: NonNegativeFloat = Field(
        default=0.15,
        description="Fraction of the min/max range a single step may move at maximum volatility.",
    )

    @model_validator(mode="after")
    def check_default_volatility(self) -> "EuriborSettings":
        """Ensure the default volatility lies on the volatility scale."""
        if self.default_volatility > self.max_volatility:
            raise ValueError(
                "default_volatility cannot exceed max_volatility "
                f"({self.default_volatility} > {self.max_volatility})"
            )
        return self


class EngineSettings(Model):
    """
    Configuration settings for the amortization engine.

    Usage Examples:
        # Standard behaviour (annual revision of variable installments)
        settings = EngineSettings()

        # Semi-annual revision of variable installments
        settings = EngineSettings(revision_months=6)
    """

    balance_tolerance: PositiveFloat = Field(
        default=0.01,
        description="Balances at or below this amount are treated as fully repaid.",
    )
    revision_months: PositiveInt = Field(
        default=12,
        description="Months between installment revisions inside a variable period.",
    )
    euribor: EuriborSettings = Field(default_factory=EuriborSettings)


DEFAULT_SETTINGS = EngineSettings()
