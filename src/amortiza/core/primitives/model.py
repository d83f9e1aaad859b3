# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Model(BaseModel):
    """Base Pydantic model with common configuration.

    Immutable models; mutable runtime state (running balances, current
    installment) lives in local variables of the calculation functions.
    Fields are declared in snake_case and also accept the camelCase names
    used by saved mortgage form states (``startMonth``, ``annualInterestRate``).
    """

    model_config = ConfigDict(
        frozen=True,  # Immutable models; runtime mutable state lives outside
        extra="forbid",  # Catches typos and missing field definitions immediately
        alias_generator=to_camel,
        populate_by_name=True,
    )
