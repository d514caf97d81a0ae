"""Tests for annual-to-periodic rate conversion."""

import pytest

from ratio_metrics.errors import ConfigurationError, NumericDomainError
from ratio_metrics.rates import periodic_rate


class TestPeriodicRate:
    """Tests for periodic_rate function."""

    def test_round_trip_daily(self) -> None:
        """Test compounding the daily rate recovers the annual rate."""
        p = periodic_rate(12, 252)
        assert (1 + p) ** 252 == pytest.approx(1.12, abs=1e-6)

    def test_monthly(self) -> None:
        """Test monthly conversion of 12% per year."""
        assert periodic_rate(12, 12) == pytest.approx(1.12 ** (1 / 12) - 1)

    def test_zero_rate(self) -> None:
        """Test 0% per year is 0 per period."""
        assert periodic_rate(0, 252) == 0.0

    def test_below_simple_division(self) -> None:
        """Test compounding gives a smaller rate than a / 100 / N."""
        assert periodic_rate(5, 252) < 0.05 / 252

    def test_negative_rate(self) -> None:
        """Test negative annual rates convert."""
        p = periodic_rate(-0.5, 252)
        assert p < 0
        assert (1 + p) ** 252 == pytest.approx(0.995)

    def test_fractional_periods(self) -> None:
        """Test non-integer sampling frequencies."""
        p = periodic_rate(2, 52.18)
        assert (1 + p) ** 52.18 == pytest.approx(1.02)

    def test_non_positive_periods_raise(self) -> None:
        """Test periods_per_year must be positive."""
        with pytest.raises(ConfigurationError):
            periodic_rate(2, 0)

    def test_total_loss_rate_raises(self) -> None:
        """Test -100% per year cannot be compounded."""
        with pytest.raises(NumericDomainError):
            periodic_rate(-100, 252)
