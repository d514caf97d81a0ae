"""Core types for the ratio pipeline.

Immutable configuration, data-format enum and the auto-detection record.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field, fields, replace
from enum import Enum
from typing import Any, Mapping, NamedTuple

from .errors import ConfigurationError


class DataFormat(str, Enum):
    """Unit convention of raw observations."""
    PERCENTAGE = "percentage"
    DECIMAL    = "decimal"
    ABSOLUTE   = "absolute"
    AUTO       = "auto"

    @classmethod
    def coerce(cls, value: DataFormat | str) -> DataFormat:
        """Parse a format name (case-insensitive, "percent" accepted)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            if key in ("percent", "pct", "%"):
                return cls.PERCENTAGE
            for member in cls:
                if member.value == key:
                    return member
        raise ConfigurationError(
            f"Unknown data format {value!r}; expected one of "
            f"{[m.value for m in cls]}"
        )


@dataclass(frozen=True)
class DetectionRules:
    """Magnitude buckets used by ``data_format="auto"``.

    Parameters
    ----------
    decimal_upper : float, default 1.0
        Magnitudes in (0, decimal_upper) are decimal-like.
    percent_upper : float, default 100.0
        Magnitudes in (decimal_upper, percent_upper] are percent-like;
        anything larger is absolute-like.
    dominance_threshold : float, default 0.70
        Share of observations a bucket needs to decide the format.
    fallback_lower, fallback_upper : float, default 0.01, 100.0
        When no bucket dominates, a series whose magnitudes all lie in
        [fallback_lower, fallback_upper] is read as percentages.
    """

    decimal_upper: float = 1.0
    percent_upper: float = 100.0
    dominance_threshold: float = 0.70
    fallback_lower: float = 0.01
    fallback_upper: float = 100.0

    def __post_init__(self) -> None:
        if not 0.0 < self.dominance_threshold <= 1.0:
            raise ConfigurationError(
                f"dominance_threshold must be in (0, 1], got {self.dominance_threshold}"
            )
        if not 0.0 < self.decimal_upper < self.percent_upper:
            raise ConfigurationError(
                "Expected 0 < decimal_upper < percent_upper, got "
                f"{self.decimal_upper} and {self.percent_upper}"
            )
        if not 0.0 <= self.fallback_lower <= self.fallback_upper:
            raise ConfigurationError(
                "Expected 0 <= fallback_lower <= fallback_upper, got "
                f"{self.fallback_lower} and {self.fallback_upper}"
            )


@dataclass(frozen=True)
class RatioConfig:
    """Engine configuration.

    Rates are quoted in percent per year (2 means 2%).

    Parameters
    ----------
    annual_risk_free_rate : float, default 0.0
        Annual risk-free rate in percent.
    periods_per_year : float, default 252
        Sampling frequency of the observations.
    target_rate : float | None
        Annual target rate in percent for downside deviation.
        None reuses the risk-free rate.
    data_format : DataFormat | str, default "auto"
        Unit convention of the raw observations.
    base_capital : float | None
        Capital base converting absolute PnL into fractional returns.
        Required when ``data_format`` is absolute.
    detection : DetectionRules
        Thresholds for auto-detection.

    Raises
    ------
    ConfigurationError
        If any invariant is violated.
    """

    annual_risk_free_rate: float = 0.0
    periods_per_year: float = 252
    target_rate: float | None = None
    data_format: DataFormat = DataFormat.AUTO
    base_capital: float | None = None
    detection: DetectionRules = field(default_factory=DetectionRules)

    def __post_init__(self) -> None:
        # frozen: coerce through object.__setattr__
        object.__setattr__(self, "data_format", DataFormat.coerce(self.data_format))
        if isinstance(self.detection, Mapping):
            unknown = set(self.detection) - {f.name for f in fields(DetectionRules)}
            if unknown:
                raise ConfigurationError(
                    f"Unknown detection option(s): {sorted(unknown)}"
                )
            object.__setattr__(self, "detection", DetectionRules(**self.detection))

        if not _is_finite(self.periods_per_year) or self.periods_per_year <= 0:
            raise ConfigurationError(
                f"periods_per_year must be a positive number, got {self.periods_per_year!r}"
            )
        if not _is_finite(self.annual_risk_free_rate):
            raise ConfigurationError(
                f"annual_risk_free_rate must be finite, got {self.annual_risk_free_rate!r}"
            )
        if self.target_rate is not None and not _is_finite(self.target_rate):
            raise ConfigurationError(
                f"target_rate must be finite, got {self.target_rate!r}"
            )
        if self.base_capital is not None and (
            not _is_finite(self.base_capital) or self.base_capital <= 0
        ):
            raise ConfigurationError(
                f"base_capital must be greater than zero, got {self.base_capital!r}"
            )
        if self.data_format is DataFormat.ABSOLUTE and self.base_capital is None:
            raise ConfigurationError(
                "base_capital is required and must be greater than zero "
                "for absolute returns"
            )

    @property
    def effective_target_rate(self) -> float:
        """Annual target rate, falling back to the risk-free rate."""
        if self.target_rate is None:
            return self.annual_risk_free_rate
        return self.target_rate

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> RatioConfig:
        """Build a config from a plain mapping (e.g. a YAML section).

        Unknown keys raise ConfigurationError.
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ConfigurationError(f"Unknown configuration keys: {sorted(unknown)}")
        return cls(**dict(data))

    def with_overrides(self, **changes: Any) -> RatioConfig:
        """Return a copy with ``changes`` applied (validated again)."""
        return replace(self, **changes)


class FormatDetection(NamedTuple):
    """Outcome of auto-detection.

    Parameters
    ----------
    detected : DataFormat
        Format chosen for the series.
    percent_share, decimal_share, absolute_share : float
        Fraction of observations in each magnitude bucket.
    used_fallback : bool
        True if no bucket reached the dominance threshold.
    """

    detected: DataFormat
    percent_share: float
    decimal_share: float
    absolute_share: float
    used_fallback: bool


def _is_finite(value: Any) -> bool:
    try:
        return math.isfinite(value)
    except TypeError:
        return False
