# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Simulated Euribor paths for variable interest periods.

The amortization engine never generates rates itself: callers build paths
here (or load real ones) and pass them to ``calculate_amortization`` as plain
data, so the engine stays deterministic.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Mapping, Optional, Sequence, Tuple

import numpy as np

from ..core.primitives import (
    DEFAULT_SETTINGS,
    ConfigurationError,
    EngineSettings,
    EuriborSettings,
    InterestTypeEnum,
    Model,
    MonthNumber,
)
from ..mortgage import AnyInterestPeriod, MortgageConfig, VariableInterestPeriod

logger = logging.getLogger(__name__)

_LCG_MULTIPLIER = 1103515245
_LCG_INCREMENT = 12345
_LCG_MODULUS_MASK = 0x7FFFFFFF


def _seeded_uniform(seed: int) -> Callable[[], float]:
    """Uniform draws in [0, 1] from a 31-bit linear congruential generator."""
    state = int(seed)

    def draw() -> float:
        nonlocal state
        state = (state * _LCG_MULTIPLIER + _LCG_INCREMENT) & _LCG_MODULUS_MASK
        return state / _LCG_MODULUS_MASK

    return draw


def _uniform(seed: Optional[int]) -> Callable[[], float]:
    if seed is not None:
        return _seeded_uniform(seed)
    rng = np.random.default_rng()
    return lambda: float(rng.random())


def generate_euribor_path(
    period_months: int,
    euribor_min: float,
    euribor_max: float,
    volatility: float,
    seed: Optional[int] = None,
    settings: Optional[EngineSettings] = None,
) -> List[float]:
    """
    Bounded random walk of monthly Euribor values (%).

    The walk starts at a random point of ``[min, max]``. With zero
    volatility it stays there; otherwise each month moves by a random step
    of at most ``(volatility / max_volatility)^2 * range * step_factor`` and
    is clamped back into the range. The quadratic scale keeps low
    volatilities smooth.

    Args:
        period_months: Number of monthly values to produce
        euribor_min: One bound of the walk (%); bounds may be given in any order
        euribor_max: The other bound (%)
        volatility: 0 (stable) to ``max_volatility`` (very dynamic)
        seed: Makes the path reproducible; ``None`` draws from numpy's default RNG
        settings: Engine settings providing the volatility scale and step factor

    Returns:
        ``period_months`` values, or an empty list when ``period_months <= 0``
    """
    euribor = (settings or DEFAULT_SETTINGS).euribor
    low = min(euribor_min, euribor_max)
    high = max(euribor_min, euribor_max)
    span = high - low
    normalized_volatility = volatility / euribor.max_volatility
    step_scale = normalized_volatility * normalized_volatility * span * euribor.step_factor

    uniform = _uniform(seed)
    path: List[float] = []
    current = low + span * uniform()
    for _ in range(period_months):
        if volatility == 0:
            path.append(current)
            continue
        step = (2 * uniform() - 1) * step_scale
        current = max(low, min(high, current + step))
        path.append(current)
    return path


def _envelope(
    period: VariableInterestPeriod, euribor: EuriborSettings
) -> Tuple[float, float, float]:
    """Resolve unset envelope fields to their defaults and clamp volatility."""
    low = euribor.default_min if period.euribor_min is None else period.euribor_min
    high = euribor.default_max if period.euribor_max is None else period.euribor_max
    volatility = (
        euribor.default_volatility
        if period.euribor_volatility is None
        else period.euribor_volatility
    )
    return low, high, max(0.0, min(euribor.max_volatility, volatility))


def build_euribor_paths(
    config: MortgageConfig,
    seed: Optional[int] = None,
    settings: Optional[EngineSettings] = None,
) -> Dict[int, List[float]]:
    """
    Generate a path for every variable period of ``config``.

    Paths are keyed by the period's index in start-month order and clamped to
    the mortgage term, which is exactly what ``calculate_amortization``
    expects. Periods starting after the term get no path.

    With a ``seed``, each period uses ``seed + start_month * 1000 + end_month``
    so the whole set is reproducible without periods sharing a walk.
    """
    settings = settings or DEFAULT_SETTINGS
    paths: Dict[int, List[float]] = {}
    for index, period in enumerate(config.sorted_periods()):
        if period.interest_type != InterestTypeEnum.VARIABLE:
            continue
        months = period.span_months(config.months)
        if months == 0:
            continue
        low, high, volatility = _envelope(period, settings.euribor)
        period_seed = (
            None if seed is None else seed + period.start_month * 1000 + period.end_month
        )
        paths[index] = generate_euribor_path(
            months, low, high, volatility, seed=period_seed, settings=settings
        )
        logger.debug(
            f"Generated {months}-month Euribor path for period {index + 1} "
            f"(range {low}-{high}%, volatility {volatility})"
        )
    return paths


def recalculate_euribor_for_period(
    period: AnyInterestPeriod,
    total_months: Optional[int] = None,
    settings: Optional[EngineSettings] = None,
) -> List[float]:
    """
    Draw a fresh, unseeded path for a single variable period.

    Args:
        period: The variable period to simulate
        total_months: Mortgage term; when given the path is clamped to it
        settings: Engine settings providing the envelope defaults

    Raises:
        ConfigurationError: If ``period`` is not a variable period
    """
    if period.interest_type != InterestTypeEnum.VARIABLE:
        raise ConfigurationError("Euribor can only be recalculated for variable periods")

    settings = settings or DEFAULT_SETTINGS
    if total_months is None:
        months = period.end_month - period.start_month + 1
    else:
        months = period.span_months(total_months)
    low, high, volatility = _envelope(period, settings.euribor)
    return generate_euribor_path(months, low, high, volatility, settings=settings)


class EuriborSeries(Model):
    """Euribor values of one variable period, positioned on the global timeline."""

    start_month: MonthNumber
    values: List[float]


def generate_euribor_preview_series(
    sorted_periods: Sequence[AnyInterestPeriod],
    saved_paths: Optional[Mapping[int, Sequence[float]]] = None,
    settings: Optional[EngineSettings] = None,
) -> List[EuriborSeries]:
    """
    Euribor series for charting the variable periods of a mortgage.

    A saved path is reused when it matches the period length; otherwise a
    path seeded with ``start_month * 1000 + end_month`` is generated, so the
    preview stays stable while the period is unchanged.
    """
    settings = settings or DEFAULT_SETTINGS
    saved_paths = saved_paths or {}
    series: List[EuriborSeries] = []
    for index, period in enumerate(sorted_periods):
        if period.interest_type != InterestTypeEnum.VARIABLE:
            continue
        months = period.end_month - period.start_month + 1
        saved = saved_paths.get(index)
        if saved is not None and len(saved) == months:
            values = [float(v) for v in saved]
        else:
            low, high, volatility = _envelope(period, settings.euribor)
            values = generate_euribor_path(
                months,
                low,
                high,
                volatility,
                seed=period.start_month * 1000 + period.end_month,
                settings=settings,
            )
        series.append(EuriborSeries(start_month=period.start_month, values=values))
    return series


def convert_euribor_series_to_paths(
    series: Sequence[EuriborSeries],
    sorted_periods: Sequence[AnyInterestPeriod],
) -> Dict[int, List[float]]:
    """Key preview series by period index, matching them on start month."""
    by_start: Dict[int, EuriborSeries] = {}
    for item in series:
        by_start.setdefault(item.start_month, item)
    paths: Dict[int, List[float]] = {}
    for index, period in enumerate(sorted_periods):
        if period.interest_type != InterestTypeEnum.VARIABLE:
            continue
        item = by_start.get(period.start_month)
        if item is not None:
            paths[index] = list(item.values)
    return paths
