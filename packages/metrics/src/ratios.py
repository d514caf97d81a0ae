"""Risk-adjusted ratios and annualization.

Sharpe = (mean(r) - rf) / std(r) * sqrt(periods_per_year)
Sortino = (mean(r) - rf) / downside_dev(r) * sqrt(periods_per_year)

Both ratios are 0.0 when the dispersion is at or below EPSILON.
"""
from __future__ import annotations

import math

import numpy as np

from .errors import NumericDomainError

EPSILON = 1e-8


def annualization_factor(periods_per_year: float) -> float:
    """sqrt(periods_per_year)."""
    return float(np.sqrt(periods_per_year))


def excess_return(mean_return: float, periodic_risk_free: float) -> float:
    """Per-period mean return above the periodic risk-free rate."""
    return float(mean_return - periodic_risk_free)


def guarded_ratio(
    excess: float,
    dispersion: float,
    periods_per_year: float,
    epsilon: float = EPSILON,
) -> float:
    """
    Annualized excess return per unit of dispersion.

    Parameters
    ----------
    excess : float
        Per-period excess return.
    dispersion : float
        Per-period risk measure (std or downside deviation).
    periods_per_year : float
        Sampling frequency for annualization.
    epsilon : float, default 1e-8
        Dispersion at or below this yields 0.0.

    Returns
    -------
    float
        excess / dispersion * sqrt(periods_per_year), or 0.0.
    """
    if not dispersion > epsilon:
        return 0.0
    return float(excess / dispersion * annualization_factor(periods_per_year))


def sharpe_ratio(excess: float, std: float, periods_per_year: float) -> float:
    """Annualized Sharpe ratio from precomputed moments."""
    return guarded_ratio(excess, std, periods_per_year)


def sortino_ratio(excess: float, downside_dev: float, periods_per_year: float) -> float:
    """Annualized Sortino ratio from precomputed moments."""
    return guarded_ratio(excess, downside_dev, periods_per_year)


def compound_annualized_return(geometric_mean: float, periods_per_year: float) -> float:
    """
    Annualize a per-period geometric mean by compounding.

    Returns
    -------
    float
        (1 + geometric_mean) ** periods_per_year - 1.

    Raises
    ------
    NumericDomainError
        If geometric_mean <= -1 or the result overflows.
    """
    if geometric_mean <= -1.0:
        raise NumericDomainError(
            f"Cannot compound a geometric mean of {geometric_mean:.6g}"
        )
    try:
        return math.expm1(periods_per_year * math.log1p(geometric_mean))
    except OverflowError as exc:
        raise NumericDomainError(
            f"Annualized return overflows: (1 + {geometric_mean:.6g}) ** {periods_per_year}"
        ) from exc


def simple_annualized_return(mean_value: float, periods_per_year: float) -> float:
    """Per-period mean scaled linearly to a year (used for currency PnL)."""
    return float(mean_value * periods_per_year)


def sharpe_standard_error(sharpe: float, n_observations: int) -> float:
    """
    Standard error of a Sharpe estimate under i.i.d. normal returns.

    SE = sqrt((1 + 0.5 * sharpe^2) / (n - 1)); 0.0 for n <= 1.

    The engine passes the annualized Sharpe ratio, so the value is on
    neither the per-period nor the annualized SE scale. For the
    per-period SE pass sharpe / sqrt(periods_per_year).
    """
    if n_observations <= 1:
        return 0.0
    return float(np.sqrt((1.0 + 0.5 * sharpe**2) / (n_observations - 1)))
