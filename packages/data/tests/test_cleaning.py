"""Tests for numeric cleaning."""

import logging

import numpy as np
import pandas as pd
import pytest

from ratio_data.cleaning import clean_numeric_value, extract_valid_numbers


class TestCleanNumericValue:
    """Tests for clean_numeric_value function."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            (1.5, 1.5),
            (-3, -3.0),
            ("2.75", 2.75),
            ("$1,234.50", 1234.5),
            ("€ 99", 99.0),
            ("£-12.5", -12.5),
            ("¥1000", 1000.0),
            ("(250)", -250.0),
            ("($1,000.00)", -1000.0),
            ("3.5%", 3.5),
            ("(5)%", -5.0),
            ("  42  ", 42.0),
            ("1e-3", 0.001),
        ],
    )
    def test_parses(self, raw, expected) -> None:
        """Test accepted cell formats."""
        assert clean_numeric_value(raw) == pytest.approx(expected)

    @pytest.mark.parametrize("raw", [None, "", "   ", "n/a", "abc", True, np.nan, "inf"])
    def test_rejects(self, raw) -> None:
        """Test blank and unparsable cells give None."""
        assert clean_numeric_value(raw) is None


class TestExtractValidNumbers:
    """Tests for extract_valid_numbers function."""

    def test_by_name(self) -> None:
        """Test extracting a named column."""
        df = pd.DataFrame({"date": ["d1", "d2", "d3"], "pnl": ["$100", "(50)", "200"]})

        assert extract_valid_numbers(df, "pnl") == [100.0, -50.0, 200.0]

    def test_by_position(self) -> None:
        """Test extracting a column by position."""
        df = pd.DataFrame({"date": ["d1", "d2"], "ret": ["1.5", "-0.5"]})

        assert extract_valid_numbers(df, 1) == [1.5, -0.5]

    def test_drops_blanks_and_logs(self, caplog) -> None:
        """Test blank cells are dropped with a warning."""
        df = pd.DataFrame({"ret": ["1", "", "x", "2"]})

        with caplog.at_level(logging.WARNING):
            values = extract_valid_numbers(df, "ret")

        assert values == [1.0, 2.0]
        assert "Dropped 2" in caplog.text

    def test_numeric_column(self) -> None:
        """Test already-numeric columns with NaN."""
        df = pd.DataFrame({"ret": [0.01, np.nan, -0.02]})

        assert extract_valid_numbers(df, "ret") == [0.01, -0.02]

    def test_missing_column(self) -> None:
        """Test unknown columns raise KeyError."""
        df = pd.DataFrame({"ret": ["1"]})

        with pytest.raises(KeyError):
            extract_valid_numbers(df, "pnl")
        with pytest.raises(KeyError):
            extract_valid_numbers(df, 3)
