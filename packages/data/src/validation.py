"""Input validation utilities.

Caller-level checks run before handing observations to the ratio
engine. They report problems instead of raising, so an application can
show every issue at once.
"""

import logging
import math
from dataclasses import dataclass
from typing import Sequence

import pandas as pd

from ratio_metrics import DataFormat, RatioConfig, detect_format

logger = logging.getLogger(__name__)

MIN_OBSERVATIONS = 10


@dataclass
class ValidationResult:
    """Result of a validation check."""

    is_valid: bool
    errors: list[str]
    warnings: list[str]
    stats: dict[str, int | float | str]


def validate_observations(
    values: Sequence[float],
    min_observations: int = MIN_OBSERVATIONS,
) -> ValidationResult:
    """
    Validate an observation series.

    Parameters
    ----------
    values : Sequence[float]
        Cleaned observations.
    min_observations : int, default 10
        Minimum sample size for meaningful ratios.

    Returns
    -------
    ValidationResult
        Errors for undersized samples and non-finite values.

    Examples
    --------
    >>> result = validate_observations([0.01] * 12)
    >>> result.is_valid
    True
    >>> result.stats["total_observations"]
    12
    """
    errors: list[str] = []
    warnings: list[str] = []
    stats: dict[str, int | float | str] = {"total_observations": len(values)}

    if len(values) < min_observations:
        errors.append(
            f"Not enough valid numeric data points "
            f"({len(values)} found, minimum {min_observations} required)"
        )

    non_finite = sum(1 for v in values if not math.isfinite(v))
    stats["non_finite"] = non_finite
    if non_finite > 0:
        errors.append(f"Found {non_finite} non-finite values")

    if len(values) > 0 and non_finite == 0:
        series = pd.Series(values, dtype=float)
        stats["zero_values"] = int((series == 0).sum())
        if series.nunique() == 1:
            warnings.append("All observations are equal; ratios will be 0")

    for warning in warnings:
        logger.warning(warning)

    return ValidationResult(
        is_valid=len(errors) == 0,
        errors=errors,
        warnings=warnings,
        stats=stats,
    )


def validate_inputs(
    values: Sequence[float],
    config: RatioConfig,
    min_observations: int = MIN_OBSERVATIONS,
) -> ValidationResult:
    """
    Validate observations together with the engine configuration.

    Adds a check on the effective data format: when auto-detection
    would classify the data as absolute currency amounts and no base
    capital is configured, ratios would be computed on raw currency
    magnitudes. That is reported as an error, matching the rule for a
    declared absolute format.

    Parameters
    ----------
    values : Sequence[float]
        Cleaned observations.
    config : RatioConfig
        Configuration the engine will run with.
    min_observations : int, default 10
        Minimum sample size.

    Returns
    -------
    ValidationResult
    """
    result = validate_observations(values, min_observations)

    if config.data_format is DataFormat.AUTO and result.stats["non_finite"] == 0 and len(values) > 0:
        detection = detect_format(pd.Series(values, dtype=float), config.detection)
        result.stats["detected_format"] = detection.detected.value
        if detection.used_fallback:
            message = f"Data format is ambiguous; treating values as {detection.detected.value}"
            result.warnings.append(message)
            logger.warning(message)
        if detection.detected is DataFormat.ABSOLUTE and config.base_capital is None:
            result.errors.append(
                "Portfolio value is required and must be greater than zero "
                "for absolute returns"
            )

    result.is_valid = len(result.errors) == 0
    return result
