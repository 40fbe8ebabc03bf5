"""YAML config loader."""

from pathlib import Path

import yaml

from windsaloft.config.schema import WindsAloftConfig


def load_config(path: str | Path) -> WindsAloftConfig:
    """Load and validate config from a YAML file. An empty file yields the defaults."""
    path = Path(path)
    with open(path) as f:
        raw = yaml.safe_load(f) or {}
    return WindsAloftConfig(**raw)
