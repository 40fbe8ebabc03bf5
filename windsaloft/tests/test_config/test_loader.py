"""Tests for config loading."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from windsaloft.config.loader import load_config
from windsaloft.models.nws import ForecastHorizon


class TestLoadConfig:
    def test_load_from_yaml(self, config_yaml_path: Path):
        config = load_config(config_yaml_path)
        assert config.nws.max_retries == 1
        assert config.nws.retry_base_delay == 0.5
        assert config.product.horizon == ForecastHorizon.TWENTY_FOUR_HOUR

    def test_unset_values_default(self, config_yaml_path: Path):
        config = load_config(config_yaml_path)
        assert config.nws.base_url == "https://api.weather.gov"
        assert config.nws.timeout == 30.0

    def test_empty_yaml_uses_defaults(self, tmp_path: Path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        config = load_config(path)
        assert config.product.horizon == ForecastHorizon.SIX_HOUR
        assert config.nws.max_retries == 3

    def test_string_path(self, config_yaml_path: Path):
        assert load_config(str(config_yaml_path)).nws.max_retries == 1

    def test_fixtures_config(self, fixtures_dir: Path):
        config = load_config(fixtures_dir / "config_default.yaml")
        assert config.nws.timeout == 20.0
        assert config.product.horizon == ForecastHorizon.TWELVE_HOUR

    def test_unknown_section_rejected(self, tmp_path: Path):
        path = tmp_path / "bad.yaml"
        path.write_text("cache:\n  ttl: 60\n")
        with pytest.raises(ValidationError):
            load_config(path)
