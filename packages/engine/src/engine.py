"""Ratio engine.

This module runs the full pipeline for one observation series:

1. Normalize raw observations into fractional returns
2. Descriptive statistics (fractional moments, original-unit counts)
3. Annual risk-free/target rates -> periodic rates
4. Downside deviation below the periodic target
5. Sharpe/Sortino ratios and annualized return

The computation is pure: no state survives between calls and the
caller's inputs are never modified.
"""
from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

import numpy as np
import pandas as pd

from ratio_metrics import (
    DataFormat,
    RatioConfig,
    compound_annualized_return,
    describe,
    downside_risk,
    excess_return,
    normalize,
    periodic_rate,
    sharpe_ratio,
    sharpe_standard_error,
    simple_annualized_return,
    sortino_ratio,
)

from .results import RatioResult

logger = logging.getLogger(__name__)


def resolve_config(
    config: RatioConfig | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> RatioConfig:
    """
    Build the effective configuration for a run.

    Parameters
    ----------
    config : RatioConfig | Mapping | None
        Base configuration. Mappings go through RatioConfig.from_dict;
        None means defaults.
    **overrides
        Field values applied on top of ``config``.

    Returns
    -------
    RatioConfig

    Raises
    ------
    ConfigurationError
        If the resulting configuration is invalid.
    """
    if config is None:
        return RatioConfig.from_dict(overrides)
    if isinstance(config, RatioConfig):
        return config.with_overrides(**overrides) if overrides else config
    return RatioConfig.from_dict({**config, **overrides})


def compute_ratios(
    observations: Sequence[float] | np.ndarray | pd.Series,
    config: RatioConfig | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> RatioResult:
    """
    Compute Sharpe, Sortino and supporting statistics.

    Parameters
    ----------
    observations : sequence of float
        One return or PnL value per period, at least one value.
    config : RatioConfig | Mapping | None
        Engine configuration (see RatioConfig).
    **overrides
        Configuration fields overriding ``config``, e.g.
        ``data_format="percentage"``.

    Returns
    -------
    RatioResult
        Fresh, immutable result.

    Raises
    ------
    ConfigurationError
        If the configuration is invalid or the series is empty.
    NumericDomainError
        If an observation is non-finite or a return is -100% or worse.

    Examples
    --------
    >>> result = compute_ratios([100, -50, 200], data_format="absolute", base_capital=10_000)
    >>> round(result.mean_return, 6)
    0.008333

    Notes
    -----
    Sharpe = (mean(r) - rf_p) / std(r) * sqrt(N)
    Sortino = (mean(r) - rf_p) / downside_dev(r, t_p) * sqrt(N)
    with rf_p, t_p the periodic rates and N = periods_per_year.
    """
    cfg = resolve_config(config, **overrides)
    periods = cfg.periods_per_year

    normalized = normalize(observations, cfg)
    # unconverted currency PnL has no growth factor to compound
    currency_pnl = (
        normalized.effective_format is DataFormat.ABSOLUTE
        and not normalized.fractional_converted
    )
    stats = describe(normalized.fractional, normalized.original, geometric=not currency_pnl)

    rf_periodic = periodic_rate(cfg.annual_risk_free_rate, periods)
    if cfg.target_rate is None:
        target_periodic = rf_periodic
    else:
        target_periodic = periodic_rate(cfg.target_rate, periods)

    downside = downside_risk(normalized.fractional, target_periodic)

    excess = excess_return(stats.mean, rf_periodic)
    sharpe = sharpe_ratio(excess, stats.std, periods)
    sortino = sortino_ratio(excess, downside.deviation, periods)

    if currency_pnl:
        annualized = simple_annualized_return(stats.order.mean, periods)
    else:
        annualized = compound_annualized_return(stats.geometric_mean, periods)

    logger.debug(
        "compute_ratios: format=%s rf_p=%.6g target_p=%.6g excess=%.6g "
        "sharpe=%.4f sortino=%.4f",
        normalized.effective_format.value,
        rf_periodic,
        target_periodic,
        excess,
        sharpe,
        sortino,
    )

    return RatioResult(
        sharpe_ratio=sharpe,
        sortino_ratio=sortino,
        mean_return=stats.mean,
        geometric_mean_return=stats.geometric_mean,
        std_deviation=stats.std,
        downside_deviation=downside.deviation,
        annualized_return=annualized,
        total_returns=stats.order.total,
        positive_returns=stats.order.positive,
        negative_returns=stats.order.negative,
        min_return=stats.order.minimum,
        max_return=stats.order.maximum,
        excess_return=excess,
        sharpe_standard_error=sharpe_standard_error(sharpe, stats.order.total),
        original_mean_return=stats.order.mean,
        periodic_risk_free_rate=rf_periodic,
        periodic_target_rate=target_periodic,
        effective_format=normalized.effective_format,
        fractional_converted=normalized.fractional_converted,
        downside_count=downside.count,
        downside_ddof=downside.ddof,
        skewness=stats.skewness,
        excess_kurtosis=stats.excess_kurtosis,
        detection=normalized.detection,
    )
