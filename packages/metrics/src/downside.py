"""Downside risk relative to a target rate."""
from __future__ import annotations

import logging
from typing import NamedTuple

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)

# Denominator is max(1, m - DOWNSIDE_DDOF) over the m downside observations.
# Sample convention: larger deviation for small m, so a more conservative Sortino.
DOWNSIDE_DDOF = 1


class DownsideRisk(NamedTuple):
    """Downside deviation with its provenance."""

    deviation: float
    count: int
    ddof: int = DOWNSIDE_DDOF


def downside_risk(returns: pd.Series, target: float = 0.0) -> DownsideRisk:
    """
    Compute downside deviation below a per-period target.

    Parameters
    ----------
    returns : pd.Series
        Fractional returns.
    target : float, default 0.0
        Per-period target (minimum acceptable) return.

    Returns
    -------
    DownsideRisk
        deviation = sqrt(sum((t - r)^2 for r < t) / max(1, m - 1)),
        0.0 when no return falls strictly below the target.
    """
    shortfall = target - returns[returns < target]
    m = len(shortfall)
    if m == 0:
        return DownsideRisk(0.0, 0)

    variance = float((shortfall ** 2).sum()) / max(1, m - DOWNSIDE_DDOF)
    deviation = float(np.sqrt(variance))
    logger.debug("downside_risk: m=%d target=%.6g deviation=%.6g", m, target, deviation)
    return DownsideRisk(deviation, m)


def downside_deviation(returns: pd.Series, target: float = 0.0) -> float:
    """Downside deviation only; see downside_risk."""
    return downside_risk(returns, target).deviation
