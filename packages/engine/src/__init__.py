"""Ratio Engine Package - Sharpe/Sortino calculation engine.

Public API:
- compute_ratios: Run the full pipeline on one observation series
- resolve_config: Merge a config object/mapping with keyword overrides
- RatioResult: Immutable result container
"""

from ratio_metrics import ConfigurationError, NumericDomainError, RatioConfig

from .engine import compute_ratios, resolve_config
from .results import RatioResult, format_currency, format_number, format_percent

__all__ = [
    "compute_ratios",
    "resolve_config",
    "RatioResult",
    "RatioConfig",
    "ConfigurationError",
    "NumericDomainError",
    "format_number",
    "format_percent",
    "format_currency",
]
