"""Shared test fixtures."""

from pathlib import Path

import pytest
import yaml


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def fd1us1_text(fixtures_dir: Path) -> str:
    """Raw FD1US1 product text with five stations."""
    return (fixtures_dir / "fd1us1.txt").read_text()


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "nws": {"max_retries": 1, "retry_base_delay": 0.5},
        "product": {"horizon": 5},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
