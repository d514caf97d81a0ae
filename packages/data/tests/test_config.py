"""Tests for config module."""

from pathlib import Path

import pytest
import yaml

from ratio_data.config import get_nested, load_config, ratio_config_from_yaml
from ratio_metrics import ConfigurationError, DataFormat, RatioConfig


class TestLoadConfig:
    """Tests for load_config function."""

    def test_load_valid_yaml(self, tmp_path: Path) -> None:
        """Test loading a valid YAML file."""
        config_data = {"ratios": {"periods_per_year": 12, "data_format": "decimal"}}
        config_file = tmp_path / "ratios.yaml"
        config_file.write_text(yaml.dump(config_data))

        result = load_config(config_file)

        assert result == config_data

    def test_load_missing_file(self) -> None:
        """Test loading a non-existent file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_config("/nonexistent/path/ratios.yaml")

    def test_load_empty_yaml(self, tmp_path: Path) -> None:
        """Test loading an empty YAML file returns empty dict."""
        config_file = tmp_path / "empty.yaml"
        config_file.write_text("")

        assert load_config(config_file) == {}


class TestGetNested:
    """Tests for get_nested function."""

    def test_get_nested_key(self) -> None:
        """Test getting a nested key."""
        config = {"ratios": {"detection": {"dominance_threshold": 0.7}}}

        result = get_nested(config, "ratios", "detection", "dominance_threshold")

        assert result == 0.7

    def test_get_missing_key_returns_default(self) -> None:
        """Test that missing key returns default value."""
        config = {"ratios": {"periods_per_year": 252}}

        result = get_nested(config, "ratios", "missing", default=12)

        assert result == 12

    def test_non_dict_intermediate(self) -> None:
        """Test traversal stops at non-mapping values."""
        config = {"ratios": 5}

        assert get_nested(config, "ratios", "periods_per_year") is None


class TestRatioConfigFromYaml:
    """Tests for ratio_config_from_yaml function."""

    def test_full_section(self, tmp_path: Path) -> None:
        """Test building a RatioConfig from a YAML section."""
        config_file = tmp_path / "ratios.yaml"
        config_file.write_text(
            "ratios:\n"
            "  annual_risk_free_rate: 2.0\n"
            "  periods_per_year: 52\n"
            "  target_rate: 5.0\n"
            "  data_format: absolute\n"
            "  base_capital: 250000\n"
            "  detection:\n"
            "    dominance_threshold: 0.8\n"
        )

        cfg = ratio_config_from_yaml(config_file)

        assert cfg.annual_risk_free_rate == 2.0
        assert cfg.periods_per_year == 52
        assert cfg.target_rate == 5.0
        assert cfg.data_format is DataFormat.ABSOLUTE
        assert cfg.base_capital == 250000
        assert cfg.detection.dominance_threshold == 0.8

    def test_missing_section_uses_defaults(self, tmp_path: Path) -> None:
        """Test a file without the section yields defaults."""
        config_file = tmp_path / "other.yaml"
        config_file.write_text(yaml.dump({"logging": {"level": "INFO"}}))

        assert ratio_config_from_yaml(config_file) == RatioConfig()

    def test_custom_section(self, tmp_path: Path) -> None:
        """Test reading a differently named section."""
        config_file = tmp_path / "multi.yaml"
        config_file.write_text(yaml.dump({"monthly": {"periods_per_year": 12}}))

        cfg = ratio_config_from_yaml(config_file, section="monthly")

        assert cfg.periods_per_year == 12

    def test_invalid_values_raise(self, tmp_path: Path) -> None:
        """Test invariant violations surface as ConfigurationError."""
        config_file = tmp_path / "bad.yaml"
        config_file.write_text(yaml.dump({"ratios": {"data_format": "absolute"}}))

        with pytest.raises(ConfigurationError):
            ratio_config_from_yaml(config_file)

    def test_unknown_detection_key_raises(self, tmp_path: Path) -> None:
        """Test a typo in the detection block is a ConfigurationError."""
        config_file = tmp_path / "typo.yaml"
        config_file.write_text(
            yaml.dump({"ratios": {"detection": {"dominance_threshhold": 0.6}}})
        )

        with pytest.raises(ConfigurationError):
            ratio_config_from_yaml(config_file)

    def test_non_mapping_section(self, tmp_path: Path) -> None:
        """Test a scalar section is rejected."""
        config_file = tmp_path / "scalar.yaml"
        config_file.write_text("ratios: 5\n")

        with pytest.raises(ConfigurationError):
            ratio_config_from_yaml(config_file)
