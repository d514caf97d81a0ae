"""Descriptive statistics over a return series.

Central moments are computed on the fractional series; order statistics
(counts, extremes, display mean) on the original-unit series.
"""
from __future__ import annotations

import logging
from typing import NamedTuple

import numpy as np
import pandas as pd
from scipy import stats as scipy_stats

from .errors import NumericDomainError

logger = logging.getLogger(__name__)


class OrderStatistics(NamedTuple):
    """Counts and extremes in original units."""

    total: int
    positive: int
    negative: int
    minimum: float
    maximum: float
    mean: float


class DescriptiveStats(NamedTuple):
    """Summary statistics of one series.

    Parameters
    ----------
    mean : float
        Arithmetic mean of the fractional series.
    geometric_mean : float
        Per-period geometric mean of the fractional series.
    std : float
        Sample standard deviation (ddof=1), 0.0 for a single observation.
    skewness : float
        Sample skewness, 0.0 when undefined.
    excess_kurtosis : float
        Fisher (excess) kurtosis, 0.0 when undefined.
    order : OrderStatistics
        Counts and extremes of the original-unit series.
    """

    mean: float
    geometric_mean: float
    std: float
    skewness: float
    excess_kurtosis: float
    order: OrderStatistics


def arithmetic_mean(returns: pd.Series) -> float:
    """Arithmetic mean. NaN for an empty series."""
    if len(returns) == 0:
        return np.nan
    return float(returns.mean())


def geometric_mean(returns: pd.Series) -> float:
    """
    Per-period geometric mean return.

    Parameters
    ----------
    returns : pd.Series
        Fractional returns.

    Returns
    -------
    float
        exp(mean(ln(1 + r))) - 1. NaN for an empty series.

    Raises
    ------
    NumericDomainError
        If any return is -100% or worse (1 + r <= 0).
    """
    if len(returns) == 0:
        return np.nan

    growth = 1.0 + returns
    if (growth <= 0).any():
        worst = float(returns.min())
        raise NumericDomainError(
            f"Geometric mean undefined: {int((growth <= 0).sum())} return(s) "
            f"at or below -100% (worst {worst:.6g})"
        )
    return float(np.expm1(np.log(growth).mean()))


def sample_std(returns: pd.Series) -> float:
    """
    Sample standard deviation with n - 1 denominator.

    Returns 0.0 when fewer than two observations exist; downstream
    ratios treat that as no dispersion.
    """
    if len(returns) < 2:
        return 0.0
    return float(returns.std(ddof=1))


def skewness(returns: pd.Series) -> float:
    """Sample skewness. 0.0 if n < 3 or the series is flat."""
    if len(returns) < 3 or _is_flat(returns):
        return 0.0
    value = float(scipy_stats.skew(returns.to_numpy(), bias=False))
    return value if np.isfinite(value) else 0.0


def excess_kurtosis(returns: pd.Series) -> float:
    """Excess kurtosis (normal = 0). 0.0 if n < 4 or the series is flat."""
    if len(returns) < 4 or _is_flat(returns):
        return 0.0
    value = float(scipy_stats.kurtosis(returns.to_numpy(), fisher=True, bias=False))
    return value if np.isfinite(value) else 0.0


def order_statistics(values: pd.Series) -> OrderStatistics:
    """
    Counts and extremes of a series.

    Zero counts as positive (non-negative); negative is strictly < 0.
    """
    if len(values) == 0:
        return OrderStatistics(0, 0, 0, np.nan, np.nan, np.nan)
    return OrderStatistics(
        total=int(len(values)),
        positive=int((values >= 0).sum()),
        negative=int((values < 0).sum()),
        minimum=float(values.min()),
        maximum=float(values.max()),
        mean=float(values.mean()),
    )


def describe(
    fractional: pd.Series,
    original: pd.Series,
    *,
    geometric: bool = True,
) -> DescriptiveStats:
    """
    Compute all descriptive statistics for the pipeline.

    Parameters
    ----------
    fractional : pd.Series
        Fractional returns used for moments.
    original : pd.Series
        Same observations in input units, used for order statistics.
    geometric : bool, default True
        Compute the geometric mean. False leaves it NaN, for series
        that are not returns (unconverted currency PnL).

    Returns
    -------
    DescriptiveStats

    Raises
    ------
    NumericDomainError
        Propagated from geometric_mean.
    """
    result = DescriptiveStats(
        mean=arithmetic_mean(fractional),
        geometric_mean=geometric_mean(fractional) if geometric else np.nan,
        std=sample_std(fractional),
        skewness=skewness(fractional),
        excess_kurtosis=excess_kurtosis(fractional),
        order=order_statistics(original),
    )
    logger.debug(
        "describe: n=%d mean=%.6g gm=%.6g std=%.6g",
        result.order.total,
        result.mean,
        result.geometric_mean,
        result.std,
    )
    return result


def _is_flat(returns: pd.Series) -> bool:
    return bool(returns.max() == returns.min())
