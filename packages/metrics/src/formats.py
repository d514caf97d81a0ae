"""Format normalization.

Maps raw observations (percentages, decimal fractions or absolute PnL)
onto per-period fractional returns, keeping the untransformed series
for reporting.
"""
from __future__ import annotations

import logging
from typing import NamedTuple, Sequence

import numpy as np
import pandas as pd

from .errors import ConfigurationError, NumericDomainError
from .types import DataFormat, DetectionRules, FormatDetection, RatioConfig

logger = logging.getLogger(__name__)


class NormalizedSeries(NamedTuple):
    """Normalizer output.

    Parameters
    ----------
    fractional : pd.Series
        Per-period fractional returns (0.05 = 5%).
    original : pd.Series
        Observations in the units they were supplied in.
    effective_format : DataFormat
        Format actually applied (never AUTO).
    fractional_converted : bool
        True if absolute PnL was divided by the base capital.
    detection : FormatDetection | None
        Auto-detection record, None for a declared format.
    """

    fractional: pd.Series
    original: pd.Series
    effective_format: DataFormat
    fractional_converted: bool
    detection: FormatDetection | None = None


def to_series(observations: Sequence[float] | np.ndarray | pd.Series) -> pd.Series:
    """Copy observations into a float Series with a fresh RangeIndex.

    Raises
    ------
    ConfigurationError
        If the input is empty, not one-dimensional or not numeric.
    NumericDomainError
        If any observation is NaN or infinite.
    """
    try:
        # np.array copies; the caller's sequence is never touched
        values = np.array(observations, dtype=float)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"Observations must be numeric: {exc}") from exc

    if values.ndim != 1:
        raise ConfigurationError(
            f"Observations must be one-dimensional, got shape {values.shape}"
        )
    if values.size == 0:
        raise ConfigurationError("Observation series is empty")

    bad = ~np.isfinite(values)
    if bad.any():
        raise NumericDomainError(
            f"{int(bad.sum())} non-finite observation(s), first at position "
            f"{int(np.argmax(bad))}"
        )
    return pd.Series(values, name="observation")


def detect_format(
    series: pd.Series,
    rules: DetectionRules | None = None,
) -> FormatDetection:
    """Classify a series by the magnitude distribution of its values.

    Parameters
    ----------
    series : pd.Series
        Raw observations.
    rules : DetectionRules | None
        Bucket bounds and thresholds. Defaults to DetectionRules().

    Returns
    -------
    FormatDetection
        Chosen format plus bucket shares.

    Notes
    -----
    Buckets (on |x|): (0, 1) decimal-like, (1, 100] percent-like,
    > 100 absolute-like. The first bucket holding at least 70% of the
    observations wins. Otherwise a series whose magnitudes all lie in
    [0.01, 100] is read as percentages, and anything else as decimals.
    Zeros fall in no bucket but count towards the total.
    """
    if rules is None:
        rules = DetectionRules()

    magnitude = series.abs()
    n = len(magnitude)
    if n == 0:
        raise ConfigurationError("Cannot detect the format of an empty series")

    decimal_share = float(((magnitude > 0) & (magnitude < rules.decimal_upper)).sum() / n)
    percent_share = float(
        ((magnitude > rules.decimal_upper) & (magnitude <= rules.percent_upper)).sum() / n
    )
    absolute_share = float((magnitude > rules.percent_upper).sum() / n)

    for fmt, share in (
        (DataFormat.PERCENTAGE, percent_share),
        (DataFormat.DECIMAL, decimal_share),
        (DataFormat.ABSOLUTE, absolute_share),
    ):
        if share >= rules.dominance_threshold:
            return FormatDetection(fmt, percent_share, decimal_share, absolute_share, False)

    in_range = bool(magnitude.between(rules.fallback_lower, rules.fallback_upper).all())
    detected = DataFormat.PERCENTAGE if in_range else DataFormat.DECIMAL
    logger.debug(
        "detect_format: no bucket >= %.2f (pct=%.2f dec=%.2f abs=%.2f), fallback to %s",
        rules.dominance_threshold,
        percent_share,
        decimal_share,
        absolute_share,
        detected.value,
    )
    return FormatDetection(detected, percent_share, decimal_share, absolute_share, True)


def normalize(
    observations: Sequence[float] | np.ndarray | pd.Series,
    config: RatioConfig,
) -> NormalizedSeries:
    """Convert raw observations into fractional returns.

    Parameters
    ----------
    observations : sequence of float
        Raw observations, one per period.
    config : RatioConfig
        Declares the data format (or auto) and the base capital.

    Returns
    -------
    NormalizedSeries
        Fractional series, original-unit series and format provenance.

    Raises
    ------
    ConfigurationError
        If the series is empty, or absolute data has no positive
        base capital.
    NumericDomainError
        If any observation is non-finite.
    """
    original = to_series(observations)

    fmt = config.data_format
    detection = None
    if fmt is DataFormat.AUTO:
        detection = detect_format(original, config.detection)
        fmt = detection.detected

    converted = False
    if fmt is DataFormat.PERCENTAGE:
        fractional = original / 100.0
    elif fmt is DataFormat.DECIMAL:
        fractional = original.copy()
    else:
        if config.base_capital is not None and config.base_capital > 0:
            fractional = original / config.base_capital
            converted = True
        elif detection is None:
            raise ConfigurationError(
                "base_capital is required and must be greater than zero "
                "for absolute returns"
            )
        else:
            # auto-detected currency magnitudes with no capital base
            fractional = original.copy()

    logger.debug(
        "normalize: n=%d format=%s converted=%s",
        len(original),
        fmt.value,
        converted,
    )
    return NormalizedSeries(fractional, original, fmt, converted, detection)
