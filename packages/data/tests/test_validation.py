"""Tests for validation module."""

import logging
import math

from ratio_data.validation import MIN_OBSERVATIONS, validate_inputs, validate_observations
from ratio_metrics import RatioConfig


class TestValidateObservations:
    """Tests for validate_observations function."""

    def test_valid_series(self) -> None:
        """Test a series meeting the minimum size."""
        result = validate_observations([0.01, -0.02] * 6)

        assert result.is_valid
        assert result.errors == []
        assert result.stats["total_observations"] == 12

    def test_too_short(self) -> None:
        """Test the default minimum of 10 observations."""
        result = validate_observations([0.01] * 9)

        assert MIN_OBSERVATIONS == 10
        assert not result.is_valid
        assert "minimum 10 required" in result.errors[0]

    def test_custom_minimum(self) -> None:
        """Test a caller-chosen minimum."""
        assert validate_observations([0.01, 0.02], min_observations=2).is_valid

    def test_non_finite(self) -> None:
        """Test NaN and inf are reported."""
        result = validate_observations([0.01] * 10 + [math.nan, math.inf])

        assert not result.is_valid
        assert result.stats["non_finite"] == 2

    def test_constant_series_warns(self) -> None:
        """Test a flat series is valid but warned about."""
        result = validate_observations([0.01] * 10)

        assert result.is_valid
        assert any("equal" in w for w in result.warnings)


class TestValidateInputs:
    """Tests for validate_inputs function."""

    def test_declared_format_skips_detection(self) -> None:
        """Test declared formats are not re-detected."""
        result = validate_inputs([5.0, -2.0] * 5, RatioConfig(data_format="percentage"))

        assert result.is_valid
        assert "detected_format" not in result.stats

    def test_auto_absolute_needs_capital(self) -> None:
        """Test auto-detected currency amounts require a base capital."""
        pnl = [150.0, -250.0, 300.0, 1200.0, -400.0] * 2

        result = validate_inputs(pnl, RatioConfig())

        assert not result.is_valid
        assert result.stats["detected_format"] == "absolute"
        assert "Portfolio value is required" in result.errors[0]

    def test_auto_absolute_with_capital(self) -> None:
        """Test a base capital satisfies the currency check."""
        pnl = [150.0, -250.0, 300.0, 1200.0, -400.0] * 2

        assert validate_inputs(pnl, RatioConfig(base_capital=100_000)).is_valid

    def test_ambiguous_format_warns(self) -> None:
        """Test a fallback detection is reported as a warning."""
        mixed = [0.5, 0.2, 5.0, 10.0, 0.3, 20.0, 0.4, 6.0, 0.7, 8.0]

        result = validate_inputs(mixed, RatioConfig())

        assert result.is_valid
        assert any("ambiguous" in w for w in result.warnings)

    def test_ambiguous_format_logged(self, caplog) -> None:
        """Test the ambiguous-format warning reaches the log."""
        mixed = [0.5, 0.2, 5.0, 10.0, 0.3, 20.0, 0.4, 6.0, 0.7, 8.0]

        with caplog.at_level(logging.WARNING, logger="ratio_data.validation"):
            validate_inputs(mixed, RatioConfig())

        assert any("ambiguous" in r.getMessage() for r in caplog.records)
