"""Annual-to-periodic rate conversion."""
from __future__ import annotations

import math

from .errors import ConfigurationError, NumericDomainError


def periodic_rate(annual_percent: float, periods_per_year: float) -> float:
    """
    Convert an annual percentage rate into the compounding-equivalent
    per-period rate.

    Parameters
    ----------
    annual_percent : float
        Annual rate in percent (2 means 2%).
    periods_per_year : float
        Number of periods per year (252 for daily).

    Returns
    -------
    float
        p such that (1 + p) ** periods_per_year == 1 + annual_percent / 100.

    Raises
    ------
    ConfigurationError
        If periods_per_year <= 0.
    NumericDomainError
        If the annual rate is -100% or worse.

    Examples
    --------
    >>> round(periodic_rate(12, 12), 6)
    0.009489
    """
    if periods_per_year <= 0:
        raise ConfigurationError(
            f"periods_per_year must be positive, got {periods_per_year}"
        )
    growth = 1.0 + annual_percent / 100.0
    if growth <= 0:
        raise NumericDomainError(
            f"Annual rate {annual_percent}% leaves no capital to compound"
        )
    # expm1/log1p keep precision for small daily rates
    return math.expm1(math.log(growth) / periods_per_year)
