"""Ratio Metrics Package - pipeline stages of the ratio engine.

This package provides pure functions for each stage of the Sharpe/Sortino
pipeline. All functions are stateless with no side effects.

Public API:
- RatioConfig / DataFormat / DetectionRules: immutable configuration
- normalize / detect_format: raw observations -> fractional returns
- describe: mean, geometric mean, sample std, order statistics
- periodic_rate: annual percent -> compounding per-period rate
- downside_risk: downside deviation below a target
- sharpe_ratio / sortino_ratio: annualized, epsilon-guarded ratios
"""

from .errors import ConfigurationError, NumericDomainError, RatioEngineError
from .types import DataFormat, DetectionRules, FormatDetection, RatioConfig
from .formats import NormalizedSeries, detect_format, normalize
from .descriptive import DescriptiveStats, OrderStatistics, describe
from .rates import periodic_rate
from .downside import DOWNSIDE_DDOF, DownsideRisk, downside_deviation, downside_risk
from .ratios import (
    EPSILON,
    compound_annualized_return,
    excess_return,
    sharpe_ratio,
    sharpe_standard_error,
    simple_annualized_return,
    sortino_ratio,
)

__all__ = [
    # Errors
    "RatioEngineError",
    "ConfigurationError",
    "NumericDomainError",
    # Types
    "DataFormat",
    "DetectionRules",
    "FormatDetection",
    "RatioConfig",
    # Stages
    "NormalizedSeries",
    "normalize",
    "detect_format",
    "DescriptiveStats",
    "OrderStatistics",
    "describe",
    "periodic_rate",
    "DOWNSIDE_DDOF",
    "DownsideRisk",
    "downside_risk",
    "downside_deviation",
    "EPSILON",
    "excess_return",
    "sharpe_ratio",
    "sortino_ratio",
    "compound_annualized_return",
    "simple_annualized_return",
    "sharpe_standard_error",
]
