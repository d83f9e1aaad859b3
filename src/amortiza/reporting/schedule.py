# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Tabular views of an amortization schedule.

These functions only reshape and total the rows produced by
``calculate_amortization``; they never recompute the schedule.
"""

from __future__ import annotations

from typing import Optional, Sequence

import numpy as np
import pandas as pd

from ..core.primitives import InterestTypeEnum
from ..mortgage import AmortizationRow, MortgageConfig

SCHEDULE_COLUMNS = [
    "Period",
    "Payment",
    "Principal",
    "Interest",
    "Partial Amortization",
    "End Balance",
    "Insurance",
    "Extra Items",
    "Total Payment",
]


def schedule_to_dataframe(schedule: Sequence[AmortizationRow]) -> pd.DataFrame:
    """
    Convert schedule rows into a DataFrame indexed by month.

    Returns:
        DataFrame with columns:
            - Period: 1-based interest period index
            - Payment: Installment (principal + interest)
            - Principal: Principal repaid, including extra payments
            - Interest: Interest portion
            - Partial Amortization: Extra payment applied (0 when none)
            - End Balance: Balance after the month
            - Insurance: Monthly-equivalent insurance premiums
            - Extra Items: Monthly-equivalent recurring charges
            - Total Payment: Payment + Insurance + Extra Items
    """
    df = pd.DataFrame(
        {
            "Month": [row.month for row in schedule],
            "Period": [row.period for row in schedule],
            "Payment": [row.payment for row in schedule],
            "Principal": [row.principal_payment for row in schedule],
            "Interest": [row.interest_payment for row in schedule],
            "Partial Amortization": [row.partial_amortization or 0.0 for row in schedule],
            "End Balance": [row.remaining_balance for row in schedule],
            "Insurance": [row.monthly_insurance for row in schedule],
            "Extra Items": [row.monthly_extra_items for row in schedule],
        }
    )
    df["Total Payment"] = df["Payment"] + df["Insurance"] + df["Extra Items"]
    df.set_index("Month", inplace=True)
    return df[SCHEDULE_COLUMNS]


def interest_type_label(config: MortgageConfig) -> str:
    """``Fixed``, ``Variable`` or ``Mixed`` depending on the period types."""
    has_fixed = any(p.interest_type == InterestTypeEnum.FIXED for p in config.periods)
    has_variable = config.has_variable_periods
    if has_fixed and has_variable:
        return "Mixed"
    if has_variable:
        return "Variable"
    return "Fixed"


def initial_rate_label(config: MortgageConfig) -> str:
    """Rate of the first period, e.g. ``3.50%`` or ``Euribor + 0.99%``."""
    periods = config.sorted_periods()
    if not periods:
        return ""
    first = periods[0]
    if first.interest_type == InterestTypeEnum.VARIABLE:
        return f"Euribor + {first.euribor_differential:.2f}%"
    return f"{first.annual_interest_rate:.2f}%"


def summarize_schedule(
    schedule: Sequence[AmortizationRow],
    config: Optional[MortgageConfig] = None,
) -> pd.Series:
    """
    Summary statistics of a schedule.

    Returns:
        Series with:
            - Payoff Month: Last scheduled month
            - Number of Payments: Rows in the schedule
            - First Installment: Installment of the first month
            - First Total Payment: First installment plus insurance and extras
            - Total Interest: Sum of interest
            - Total Principal: Sum of principal (extra payments included)
            - Total Partial Amortization: Sum of extra payments
            - Total Insurance: Sum of insurance premiums
            - Total Extra Items: Sum of recurring charges
            - Total Paid: Installments + insurance + extra items
            - Average Monthly Insurance: Mean insurance per scheduled month
        and, when ``config`` is given, Name, Principal, Term Months,
        Interest Type and Initial Rate.
    """
    df = schedule_to_dataframe(schedule)
    empty = df.empty

    summary = {}
    if config is not None:
        summary.update(
            {
                "Name": config.name,
                "Principal": config.principal,
                "Term Months": config.months,
                "Interest Type": interest_type_label(config),
                "Initial Rate": initial_rate_label(config),
            }
        )
    summary.update(
        {
            "Payoff Month": int(df.index[-1]) if not empty else 0,
            "Number of Payments": len(df),
            "First Installment": float(df["Payment"].iloc[0]) if not empty else 0.0,
            "First Total Payment": float(df["Total Payment"].iloc[0]) if not empty else 0.0,
            "Total Interest": float(df["Interest"].sum()),
            "Total Principal": float(df["Principal"].sum()),
            "Total Partial Amortization": float(df["Partial Amortization"].sum()),
            "Total Insurance": float(df["Insurance"].sum()),
            "Total Extra Items": float(df["Extra Items"].sum()),
            # Extra payments are part of Principal but not of the installment
            "Total Paid": float(df["Total Payment"].sum()),
            "Average Monthly Insurance": (
                float(np.mean(df["Insurance"])) if not empty else 0.0
            ),
        }
    )
    return pd.Series(summary)
