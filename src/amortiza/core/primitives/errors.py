# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Validation errors raised before a schedule is produced.

Every error derives from ``ConfigurationError`` (itself a ``ValueError``) so
callers can surface any of them as a single user-facing message.
"""

from __future__ import annotations

from typing import Optional


class ConfigurationError(ValueError):
    """A mortgage configuration that cannot be amortized as given."""


class NoInterestPeriodsError(ConfigurationError):
    """The configuration contains no interest period."""

    def __init__(self, message: str = "At least one interest period is required"):
        super().__init__(message)


class EuriborPathError(ConfigurationError):
    """
    A variable period has no Euribor path, or one of the wrong length.

    Attributes:
        period_index: 0-based index of the period in start-month order
        expected_length: Number of monthly values the period needs
        actual_length: Number of values supplied, or None when missing
    """

    def __init__(
        self,
        period_index: int,
        expected_length: int,
        actual_length: Optional[int] = None,
    ):
        self.period_index = period_index
        self.expected_length = expected_length
        self.actual_length = actual_length
        if actual_length is None:
            message = (
                f"Missing Euribor path for variable period at index {period_index} "
                f"(expected {expected_length} monthly values)"
            )
        else:
            message = (
                f"Euribor path for variable period at index {period_index} has "
                f"{actual_length} values, expected {expected_length}"
            )
        super().__init__(message)


class PeriodCoverageError(ConfigurationError):
    """Interest periods do not partition the mortgage term."""
