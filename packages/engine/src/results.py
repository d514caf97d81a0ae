"""Ratio engine result container.

This module defines the RatioResult dataclass that holds all outputs
of one compute_ratios call, plus the number formatters used to render
it.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from ratio_metrics import DataFormat, FormatDetection


def format_number(value: float, decimals: int = 4) -> str:
    """Fixed-point rendering, e.g. 1.2346."""
    return f"{value:.{decimals}f}"


def format_percent(value: float, decimals: int = 2) -> str:
    """Render a fraction as a percentage, e.g. 0.0525 -> '5.25%'."""
    return f"{value * 100:.{decimals}f}%"


def format_currency(value: float, decimals: int = 2) -> str:
    """Render a currency amount, e.g. -1234.5 -> '-$1,234.50'."""
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.{decimals}f}"


@dataclass(frozen=True)
class RatioResult:
    """Outputs of one ratio engine run.

    Ratios and moments are computed on the fractional series; counts and
    extremes are in the units the observations were supplied in.

    Attributes
    ----------
    sharpe_ratio : float
        Annualized Sharpe ratio (0.0 under the epsilon guard).
    sortino_ratio : float
        Annualized Sortino ratio (0.0 under the epsilon guard).
    mean_return : float
        Arithmetic mean of the fractional series.
    geometric_mean_return : float
        Per-period geometric mean of the fractional series.
    std_deviation : float
        Sample standard deviation (ddof=1) of the fractional series.
    downside_deviation : float
        Downside deviation below the periodic target rate.
    annualized_return : float
        Compounded geometric mean, or mean(original) * periods for
        unconverted currency PnL.
    total_returns, positive_returns, negative_returns : int
        Observation counts; zero counts as positive.
    min_return, max_return : float
        Extremes in original units.
    excess_return : float
        mean_return minus the periodic risk-free rate.
    sharpe_standard_error : float
        sqrt((1 + 0.5 * sharpe^2) / (n - 1)), 0.0 for n = 1.
    original_mean_return : float
        Mean in original units, for display.
    periodic_risk_free_rate, periodic_target_rate : float
        Per-period rates derived from the annual inputs.
    effective_format : DataFormat
        Format applied to the observations.
    fractional_converted : bool
        True if absolute PnL was divided by the base capital.
    downside_count : int
        Number of observations strictly below the target.
    downside_ddof : int
        Downside variance denominator is max(1, downside_count - ddof).
    skewness, excess_kurtosis : float
        Higher moments of the fractional series.
    detection : FormatDetection | None
        Auto-detection record, None for a declared format.

    Examples
    --------
    >>> result = compute_ratios([5, -2, 3, 4, -1, 2, 3, 1, 4, 3], data_format="percentage")
    >>> result.positive_returns, result.negative_returns
    (8, 2)
    """

    sharpe_ratio: float
    sortino_ratio: float
    mean_return: float
    geometric_mean_return: float
    std_deviation: float
    downside_deviation: float
    annualized_return: float
    total_returns: int
    positive_returns: int
    negative_returns: int
    min_return: float
    max_return: float
    excess_return: float
    sharpe_standard_error: float
    original_mean_return: float
    periodic_risk_free_rate: float
    periodic_target_rate: float
    effective_format: DataFormat
    fractional_converted: bool
    downside_count: int
    downside_ddof: int
    skewness: float
    excess_kurtosis: float
    detection: FormatDetection | None = None

    @property
    def is_currency(self) -> bool:
        """True if the original observations are currency amounts."""
        return self.effective_format is DataFormat.ABSOLUTE

    def format_original(self, value: float) -> str:
        """Render a value given in the original observation units."""
        if self.is_currency:
            return format_currency(value)
        if self.effective_format is DataFormat.PERCENTAGE:
            return f"{value:.2f}%"
        return format_percent(value)

    def summary(self) -> str:
        """Generate summary string."""
        if self.is_currency and not self.fractional_converted:
            annualized = format_currency(self.annualized_return)
        else:
            annualized = format_percent(self.annualized_return)

        lines = [
            "Risk-Adjusted Performance",
            "=" * 40,
            f"Sharpe Ratio: {format_number(self.sharpe_ratio)}"
            f" (SE {format_number(self.sharpe_standard_error)})",
            f"Sortino Ratio: {format_number(self.sortino_ratio)}",
            f"Mean Return: {format_percent(self.mean_return, 4)}",
            f"Std Deviation: {format_percent(self.std_deviation, 4)}",
            f"Downside Deviation: {format_percent(self.downside_deviation, 4)}",
            f"Annualized Return: {annualized}",
            f"Observations: {self.total_returns}"
            f" ({self.positive_returns} positive, {self.negative_returns} negative)",
            f"Range: {self.format_original(self.min_return)}"
            f" to {self.format_original(self.max_return)}",
            f"Data Format: {self.effective_format.value}",
        ]
        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        data = asdict(self)
        data["effective_format"] = self.effective_format.value
        if self.detection is not None:
            data["detection"] = {
                **self.detection._asdict(),
                "detected": self.detection.detected.value,
            }
        return data
