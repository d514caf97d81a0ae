"""Ratio Data Package - Data loading layer.

This is the ONLY package that reads files. The ratio engine receives
plain observation sequences and a RatioConfig from this package.

Public API:
- load_config: Load YAML configuration files
- ratio_config_from_yaml: Build a RatioConfig from a YAML section
- load_table: Load a CSV/TSV/text/Parquet table
- load_observations: Load one column as cleaned numbers
- suggest_column: Guess the returns column from headers
- clean_numeric_value / extract_valid_numbers: Cell cleaning
- validate_observations / validate_inputs: Caller-level checks
"""

from .config import load_config, get_nested, ratio_config_from_yaml
from .cleaning import clean_numeric_value, extract_valid_numbers
from .loaders import load_table, load_observations, suggest_column
from .validation import ValidationResult, validate_observations, validate_inputs

__all__ = [
    "load_config",
    "get_nested",
    "ratio_config_from_yaml",
    "clean_numeric_value",
    "extract_valid_numbers",
    "load_table",
    "load_observations",
    "suggest_column",
    "ValidationResult",
    "validate_observations",
    "validate_inputs",
]
