"""Configuration loading utilities.

This module provides functions to load YAML configuration files and
turn their ``ratios`` section into a RatioConfig.

Example file::

    ratios:
      annual_risk_free_rate: 2.0
      periods_per_year: 252
      data_format: auto
      detection:
        dominance_threshold: 0.7
"""

from pathlib import Path
from typing import Any

import yaml

from ratio_metrics import ConfigurationError, RatioConfig


def load_config(path: str | Path) -> dict[str, Any]:
    """
    Load a YAML configuration file.

    Parameters
    ----------
    path : str | Path
        Path to the YAML configuration file.

    Returns
    -------
    dict[str, Any]
        Configuration dictionary.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist.
    yaml.YAMLError
        If the YAML is malformed.

    Examples
    --------
    >>> cfg = load_config("conf/ratios.yaml")
    >>> cfg["ratios"]["periods_per_year"]
    252
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    with open(path, "r") as f:
        config = yaml.safe_load(f)

    return config if config is not None else {}


def get_nested(config: dict[str, Any], *keys: str, default: Any = None) -> Any:
    """
    Get a nested value from a configuration dictionary.

    Parameters
    ----------
    config : dict[str, Any]
        Configuration dictionary.
    *keys : str
        Sequence of keys to traverse.
    default : Any, optional
        Default value if key path doesn't exist.

    Returns
    -------
    Any
        The value at the nested key path, or default.

    Examples
    --------
    >>> cfg = {"ratios": {"detection": {"dominance_threshold": 0.7}}}
    >>> get_nested(cfg, "ratios", "detection", "dominance_threshold")
    0.7
    >>> get_nested(cfg, "ratios", "missing", default=252)
    252
    """
    result = config
    for key in keys:
        if isinstance(result, dict) and key in result:
            result = result[key]
        else:
            return default
    return result


def ratio_config_from_yaml(path: str | Path, section: str = "ratios") -> RatioConfig:
    """
    Build a RatioConfig from one section of a YAML file.

    Parameters
    ----------
    path : str | Path
        Path to the YAML configuration file.
    section : str, default "ratios"
        Top-level key holding the engine settings. A missing section
        yields the default configuration.

    Returns
    -------
    RatioConfig

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist.
    ConfigurationError
        If the section is not a mapping or holds invalid values.
    """
    settings = get_nested(load_config(path), section, default={})
    if settings is None:
        settings = {}
    if not isinstance(settings, dict):
        raise ConfigurationError(
            f"Section '{section}' in {path} must be a mapping, got {type(settings).__name__}"
        )
    return RatioConfig.from_dict(settings)
